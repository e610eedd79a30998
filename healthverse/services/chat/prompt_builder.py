"""
Prompt assembly and disclaimer enforcement for the health assistant.
"""

from typing import Iterable, Mapping, Union

from pydantic import BaseModel

REFUSAL_MESSAGE = (
    "I'm designed only for medical and healthcare-related questions. "
    "Please ask me something in that domain."
)

# Substring of REFUSAL_MESSAGE that marks a model-generated refusal
REFUSAL_MARKER = "I'm designed only for medical"

DISCLAIMER_MARKER = "⚠️"

DISCLAIMER = (
    "⚠️ This information is for educational purposes only. "
    "Please consult a medical professional for personal health advice."
)

HEALTHCARE_SYSTEM_PROMPT = f"""
You are a Healthcare Q&A Assistant for HealthVerse, a mental wellness platform.
Your role is to provide reliable, evidence-based information about healthcare, wellness, nutrition, fitness, symptoms, diseases, and treatments.

Rules:
1. Answer ONLY healthcare-related questions including:
   - General health and wellness
   - Mental health and wellness
   - Nutrition and diet
   - Fitness and exercise
   - Symptoms and conditions
   - Preventive care
   - Stress management
   - Sleep health
   - Basic medical information

2. If the question is unrelated to healthcare (e.g., politics, movies, coding, entertainment, math, general conversation), politely refuse with:
   "{REFUSAL_MESSAGE}"

3. Do not provide specific medical diagnoses or prescribe treatments. Always include this disclaimer at the end of every healthcare response:
   "{DISCLAIMER}"

4. Keep responses clear, concise, and beginner-friendly.
5. If the query is vague, ask a clarifying question before answering.
6. Be empathetic and supportive, especially for mental health queries.
7. Encourage healthy habits and positive lifestyle choices.

Remember: You're part of a wellness platform, so maintain a caring and supportive tone while being informative.
"""

Exchange = Union[Mapping[str, str], BaseModel]


def ensure_disclaimer(text: str) -> str:
    """Append the disclaimer unless the reply has it or is a refusal."""
    if DISCLAIMER_MARKER in text or REFUSAL_MARKER in text:
        return text
    return f"{text}\n\n{DISCLAIMER}"


class PromptBuilder:
    """Builds the single-text prompt sent to the completion API."""

    def __init__(self, system_prompt: str = HEALTHCARE_SYSTEM_PROMPT, history_limit: int = 10):
        """
        Args:
            system_prompt: Fixed instruction block placed first
            history_limit: How many prior exchanges to include
        """
        self._system_prompt = system_prompt
        self._history_limit = history_limit

    def build(self, message: str, history: Iterable[Exchange] = ()) -> str:
        """
        Concatenate instructions, recent history and the new message.

        Args:
            message: The new user message
            history: Prior exchanges, oldest first, each with message/response

        Returns:
            Prompt text ending with "Assistant: "
        """
        history = list(history)
        recent = history[-self._history_limit:] if self._history_limit > 0 else []

        parts = [self._system_prompt, "\n\nConversation History:\n"]
        for exchange in recent:
            user_text, assistant_text = _unpack(exchange)
            parts.append(f"User: {user_text}\nAssistant: {assistant_text}\n")
        parts.append(f"\nUser: {message}\nAssistant: ")

        return "".join(parts)


def _unpack(exchange: Exchange) -> tuple:
    if isinstance(exchange, BaseModel):
        exchange = exchange.model_dump()
    return exchange.get("message", ""), exchange.get("response", "")
