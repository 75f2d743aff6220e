"""Tiered heuristic language detector.

Cascade
-------
1. Stopword matching  – primary, word-level evidence.
2. Script detection   – non-Latin writing systems.
3. Diacritic markers  – short or stopword-poor Latin text.
4. n-gram statistics  – ``langdetect`` profiles (optional).
5. Fallback           – default language at a low fixed confidence.

The first strategy whose own threshold is cleared decides.  ``detect`` never
raises: blank input is a boundary case answered with the default language
at confidence ``0.0``.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from langservice.detection.base import DetectionStrategy
from langservice.detection.diacritics import DiacriticStrategy
from langservice.detection.normalizer import normalize
from langservice.detection.result import DetectionMethod, DetectionResult
from langservice.detection.script import ScriptStrategy
from langservice.detection.stopwords import StopwordStrategy
from langservice.detection.tables import DEFAULT_TABLES, ReferenceTables
from langservice.detection.thresholds import Thresholds

_log = logging.getLogger("langservice.detector")


def default_strategies(
    tables: ReferenceTables,
    thresholds: Thresholds,
    use_ngram: bool = True,
) -> list[DetectionStrategy]:
    """Build the standard cascade in evaluation order."""
    strategies: list[DetectionStrategy] = [
        StopwordStrategy(tables, thresholds),
        ScriptStrategy(tables, thresholds),
        DiacriticStrategy(tables, thresholds),
    ]
    if use_ngram:
        from langservice.detection.ngram import NgramStrategy

        strategies.append(NgramStrategy(tables, thresholds))
    return strategies


class LanguageDetector:
    """Stateless detector over immutable reference tables.

    Safe to share between threads: ``detect`` reads only the tables and
    thresholds handed to the constructor.
    """

    def __init__(
        self,
        tables: ReferenceTables = DEFAULT_TABLES,
        thresholds: Optional[Thresholds] = None,
        strategies: Optional[Sequence[DetectionStrategy]] = None,
        use_ngram: bool = True,
    ) -> None:
        self.tables = tables
        self.thresholds = thresholds or Thresholds()
        if strategies is None:
            strategies = default_strategies(tables, self.thresholds, use_ngram)
        self._strategies: tuple[DetectionStrategy, ...] = tuple(strategies)

    @property
    def methods(self) -> list[str]:
        return [s.method.value for s in self._strategies]

    def detect(self, text: object) -> DetectionResult:
        """Classify *text* into one of the supported languages."""
        normalized = normalize(text, self.thresholds.sample_limit)
        if normalized.is_blank:
            return self._fallback(0.0)

        for strategy in self._strategies:
            try:
                result = strategy.attempt(normalized)
            except Exception:
                _log.exception("Strategy %s failed; trying next tier", strategy.method.value)
                continue
            if result is not None and self.tables.is_supported(result.language):
                _log.debug(
                    "Detected %s (%.4f) via %s",
                    result.language, result.confidence, result.method.value,
                )
                return result

        _log.debug("No strategy was confident; falling back to %s", self.tables.default_language)
        return self._fallback(self.thresholds.fallback_confidence)

    def _fallback(self, confidence: float) -> DetectionResult:
        return DetectionResult(
            language=self.tables.default_language,
            confidence=confidence,
            method=DetectionMethod.FALLBACK,
        )


# Shared default instance – built on first use
_default_detector: Optional[LanguageDetector] = None


def get_default_detector() -> LanguageDetector:
    global _default_detector
    if _default_detector is None:
        _default_detector = LanguageDetector()
    return _default_detector


def detect(text: object) -> DetectionResult:
    """Module-level shortcut for ``get_default_detector().detect(text)``."""
    return get_default_detector().detect(text)
