"""
Detection Result Model

Purpose:
- Carry the outcome of one ``detect`` call
- Never contains the analysed text itself
- Constructed fresh per call, never mutated
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class DetectionMethod(str, Enum):
    """Tag naming the strategy that produced a result."""

    STOPWORD = "stopword"
    SCRIPT = "script"
    DIACRITIC = "diacritic"
    NGRAM = "ngram"
    FALLBACK = "fallback"


@dataclass(frozen=True)
class DetectionResult:
    """
    Result returned by LanguageDetector.detect.

    Attributes:
        language: ISO-639-1 code from the supported set (e.g. 'en', 'de')
        confidence: Confidence score between 0.0 and 1.0
        method: Strategy that produced the decision
    """
    language: str
    confidence: float
    method: DetectionMethod

    def is_confident(self, threshold: float = 0.5) -> bool:
        """
        Convenience helper for acceptance decisions.
        """
        return self.confidence >= threshold

    def to_dict(self) -> dict[str, object]:
        return {
            "language": self.language,
            "confidence": self.confidence,
            "method": self.method.value,
        }
