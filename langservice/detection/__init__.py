"""Heuristic language detection: a pure function over immutable tables."""

from langservice.detection.detector import LanguageDetector, detect, get_default_detector
from langservice.detection.result import DetectionMethod, DetectionResult
from langservice.detection.tables import (
    DEFAULT_TABLES,
    LanguageProfile,
    ReferenceTables,
    language_name,
    speech_locale,
)
from langservice.detection.thresholds import Thresholds

__all__ = [
    "DEFAULT_TABLES",
    "DetectionMethod",
    "DetectionResult",
    "LanguageDetector",
    "LanguageProfile",
    "ReferenceTables",
    "Thresholds",
    "detect",
    "get_default_detector",
    "language_name",
    "speech_locale",
]
