"""
Healthcare topic gate.

Decides whether a chat message is in scope for the health assistant.
"""

from typing import List, Optional


class HealthTopicGate:
    """
    Keyword-substring classifier for healthcare questions.

    A message is in scope if its lowercased text contains any keyword.
    No stemming or negation handling: "heartbreak movie" matches "heart".
    """

    HEALTHCARE_KEYWORDS = [
        # General health & care
        "health", "medical", "doctor", "medicine", "treatment", "symptom",
        "disease", "wellness", "hospital", "clinic", "nurse", "medication",
        "prescription", "diagnosis", "prevention", "immune", "vaccine",
        # Conditions & symptoms
        "pain", "headache", "fever", "cold", "flu", "heart", "blood",
        "pressure", "diabetes", "cholesterol",
        # Mental health
        "mental", "stress", "anxiety", "depression", "sleep", "therapy",
        "meditation", "yoga", "breathing", "relaxation", "mindfulness",
        "mood", "emotional", "psychology", "psychiatric", "counseling",
        "recovery", "addiction", "smoking", "alcohol",
        # Nutrition
        "nutrition", "diet", "vitamin", "supplement", "calories", "protein",
        "carbs", "fat", "sugar",
        # Fitness
        "fitness", "exercise", "weight", "bmi",
    ]

    def __init__(self, keywords: Optional[List[str]] = None):
        """
        Initialize HealthTopicGate.

        Args:
            keywords: Optional replacement keyword list
        """
        source = keywords if keywords is not None else self.HEALTHCARE_KEYWORDS
        self._keywords = [k.lower() for k in source]

    @property
    def keywords(self) -> List[str]:
        return list(self._keywords)

    def is_healthcare_related(self, text: str) -> bool:
        """Return True if any keyword occurs in the text (case-insensitive)."""
        if not text:
            return False
        text_lower = text.lower()
        return any(keyword in text_lower for keyword in self._keywords)

    def matched_keywords(self, text: str) -> List[str]:
        """Return every keyword found in the text."""
        if not text:
            return []
        text_lower = text.lower()
        return [keyword for keyword in self._keywords if keyword in text_lower]
