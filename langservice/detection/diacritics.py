"""Tier 3 – Diacritic / character heuristic.

Used when word evidence is weak (very short input, proper nouns, typos).
Every occurrence of a language's marker character or letter sequence adds
that marker's weight to the language's score.
"""

from __future__ import annotations

from typing import Optional

from langservice.detection.normalizer import NormalizedText
from langservice.detection.result import DetectionMethod, DetectionResult
from langservice.detection.tables import ReferenceTables
from langservice.detection.thresholds import Thresholds


def score_markers(lowered: str, tables: ReferenceTables) -> dict[str, float]:
    """Return ``{code: weighted_marker_hits}`` for languages with any hit."""
    scores: dict[str, float] = {}
    for profile in tables.profiles:
        total = 0.0
        for marker, weight in profile.markers.items():
            occurrences = lowered.count(marker)
            if occurrences:
                total += occurrences * weight
        if total:
            scores[profile.code] = total
    return scores


class DiacriticStrategy:
    method = DetectionMethod.DIACRITIC

    def __init__(self, tables: ReferenceTables, thresholds: Thresholds) -> None:
        self._tables = tables
        self._min_score = thresholds.diacritic_min_score

    def attempt(self, text: NormalizedText) -> Optional[DetectionResult]:
        scores = score_markers(text.lowered, self._tables)
        if not scores:
            return None

        best_lang, top = self._tables.ranked(scores)[0]
        if top < self._min_score:
            return None

        share = top / sum(scores.values())
        confidence = round(share * min(0.7, 0.3 + 0.1 * top), 4)
        return DetectionResult(best_lang, confidence, self.method)
