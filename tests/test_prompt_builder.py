"""Unit tests for prompt assembly and disclaimer enforcement."""

from healthverse.schemas.chat import ConversationTurn
from healthverse.services.chat.prompt_builder import (
    DISCLAIMER,
    REFUSAL_MESSAGE,
    PromptBuilder,
    ensure_disclaimer,
)


class TestEnsureDisclaimer:
    def test_appends_when_missing(self):
        result = ensure_disclaimer("Drink water.")
        assert result == f"Drink water.\n\n{DISCLAIMER}"

    def test_keeps_reply_with_marker(self):
        text = "Drink water.\n\n⚠️ Talk to your doctor."
        assert ensure_disclaimer(text) == text

    def test_keeps_model_refusal(self):
        assert ensure_disclaimer(REFUSAL_MESSAGE) == REFUSAL_MESSAGE


class TestPromptBuilder:
    def test_layout_without_history(self):
        builder = PromptBuilder(system_prompt="SYSTEM")

        prompt = builder.build("Why do I feel tired?")

        assert prompt == (
            "SYSTEM\n\nConversation History:\n"
            "\nUser: Why do I feel tired?\nAssistant: "
        )

    def test_history_rendered_in_order(self):
        builder = PromptBuilder(system_prompt="SYSTEM")
        history = [
            {"message": "first", "response": "one"},
            ConversationTurn(message="second", response="two"),
        ]

        prompt = builder.build("third", history)

        assert "User: first\nAssistant: one\nUser: second\nAssistant: two\n" in prompt
        assert prompt.endswith("\nUser: third\nAssistant: ")

    def test_only_recent_history_included(self):
        builder = PromptBuilder(system_prompt="SYSTEM", history_limit=10)
        history = [{"message": f"m{i}", "response": f"r{i}"} for i in range(15)]

        prompt = builder.build("now", history)

        assert "User: m4\n" not in prompt
        assert "User: m5\nAssistant: r5\n" in prompt
        assert "User: m14\nAssistant: r14\n" in prompt

    def test_default_system_prompt_mentions_refusal_and_disclaimer(self):
        prompt = PromptBuilder().build("hello")

        assert REFUSAL_MESSAGE in prompt
        assert DISCLAIMER in prompt
