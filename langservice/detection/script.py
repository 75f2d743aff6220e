"""Tier 2 – Unicode script detection.

Languages with their own writing system are recognised by counting letters
that fall inside each script's Unicode block.  Kana anywhere in the text
turns Han ideographs into Japanese evidence.
"""

from __future__ import annotations

from typing import Optional

from langservice.detection.normalizer import NormalizedText
from langservice.detection.result import DetectionMethod, DetectionResult
from langservice.detection.tables import ReferenceTables
from langservice.detection.thresholds import Thresholds


def count_scripts(letters: str, tables: ReferenceTables) -> dict[str, int]:
    """Return ``{code: letters_in_script}`` for every script with a hit."""
    counts: dict[str, int] = {}
    for ch in letters:
        for script in tables.scripts:
            if script.contains(ch):
                counts[script.code] = counts.get(script.code, 0) + 1
                break

    if counts.get("ja") and "zh" in counts:
        counts["ja"] += counts.pop("zh")
    return counts


class ScriptStrategy:
    method = DetectionMethod.SCRIPT

    def __init__(self, tables: ReferenceTables, thresholds: Thresholds) -> None:
        self._tables = tables
        self._min_share = thresholds.script_min_share

    def attempt(self, text: NormalizedText) -> Optional[DetectionResult]:
        letters = text.letters
        if not letters:
            return None
        counts = count_scripts(letters, self._tables)
        if not counts:
            return None

        best_lang, hits = self._tables.ranked(counts)[0]
        share = hits / len(letters)
        if share < self._min_share:
            return None

        confidence = round(min(0.95, 0.6 + 0.4 * share), 4)
        return DetectionResult(best_lang, confidence, self.method)
