"""Tier 4 – Character n-gram statistics.

Uses the ``langdetect`` library (a port of Google's language-detection
n-gram profiles).  Its candidates are restricted to the supported set, so
the cascade can never return a code outside the reference tables.

Profiles are loaded once at startup via ``load_profiles()``; the detector
factory is seeded so repeated calls on identical input agree.
"""

from __future__ import annotations

import logging
from typing import Optional

from langdetect import DetectorFactory, LangDetectException, detect_langs
from langdetect import detector_factory

from langservice.detection.normalizer import NormalizedText
from langservice.detection.result import DetectionMethod, DetectionResult
from langservice.detection.tables import ReferenceTables
from langservice.detection.thresholds import Thresholds

DetectorFactory.seed = 0

_log = logging.getLogger("langservice.ngram")

_loaded = False


# ── Startup ─────────────────────────────────────────────────────────────────

def load_profiles() -> None:
    """Load the n-gram language profiles into memory."""
    global _loaded
    detector_factory.init_factory()
    _loaded = True


def is_loaded() -> bool:
    return _loaded


# ── Helpers ─────────────────────────────────────────────────────────────────

def _base_code(raw: str) -> str:
    """``zh-cn`` → ``zh``."""
    return raw.split("-", 1)[0].lower()


class NgramStrategy:
    method = DetectionMethod.NGRAM

    def __init__(self, tables: ReferenceTables, thresholds: Thresholds) -> None:
        self._tables = tables
        self._thresholds = thresholds
        self._min_probability = thresholds.ngram_min_probability

    def attempt(self, text: NormalizedText) -> Optional[DetectionResult]:
        sample = " ".join(text.tokens)
        if not sample:
            return None

        try:
            candidates = detect_langs(sample)
        except LangDetectException as exc:
            _log.debug("n-gram detector had no opinion: %s", exc)
            return None

        for candidate in candidates:
            code = _base_code(candidate.lang)
            if not self._tables.is_supported(code):
                continue
            if candidate.prob < self._min_probability:
                return None
            confidence = float(candidate.prob) * self._thresholds.length_factor(len(text.tokens))
            return DetectionResult(code, round(confidence, 4), self.method)
        return None
