"""Unit tests for the healthcare topic gate."""

import pytest

from healthverse.services.chat.health_topic_gate import HealthTopicGate


@pytest.fixture
def gate():
    return HealthTopicGate()


class TestIsHealthcareRelated:
    @pytest.mark.parametrize("text", [
        "How can I sleep better?",
        "What causes a HEADACHE?",
        "Is my Blood Pressure too high",
        "best diet for runners",
        "How do I calculate my BMI?",
    ])
    def test_keyword_matches_case_insensitively(self, gate, text):
        assert gate.is_healthcare_related(text) is True

    @pytest.mark.parametrize("text", [
        "What is the capital of France?",
        "Write me a python script",
        "Who won the football game",
    ])
    def test_unrelated_text_rejected(self, gate, text):
        assert gate.is_healthcare_related(text) is False

    def test_substring_match_without_word_boundaries(self, gate):
        # "heartbreak" contains "heart"
        assert gate.is_healthcare_related("Recommend a heartbreak movie") is True

    def test_empty_text_is_not_related(self, gate):
        assert gate.is_healthcare_related("") is False

    def test_every_default_keyword_is_lowercase(self, gate):
        assert all(k == k.lower() for k in gate.keywords)


class TestMatchedKeywords:
    def test_returns_all_matches(self, gate):
        matches = gate.matched_keywords("stress makes my sleep worse")
        assert "stress" in matches
        assert "sleep" in matches

    def test_custom_keywords_are_lowercased(self):
        gate = HealthTopicGate(keywords=["Sauna"])
        assert gate.matched_keywords("is a SAUNA good?") == ["sauna"]
        assert gate.is_healthcare_related("sleep") is False

    def test_none_keywords_use_default_list(self):
        gate = HealthTopicGate(keywords=None)
        assert gate.keywords == [k.lower() for k in HealthTopicGate.HEALTHCARE_KEYWORDS]
