"""Tier 1 – Stopword / function-word matching.

Tokens are grouped by writing system and only the dominant group is scored,
so a stray English word cannot decide a Cyrillic sentence (and vice versa).
Within that group each token is looked up in the closed-class word set of
every language written in the same script; the per-language score is the
share of tokens that matched.  The strategy answers only when the winner is
both frequent enough and clearly ahead of the runner-up.
"""

from __future__ import annotations

import logging
from typing import Optional

from langservice.detection.normalizer import NormalizedText
from langservice.detection.result import DetectionMethod, DetectionResult
from langservice.detection.tables import LATIN, ReferenceTables
from langservice.detection.thresholds import Thresholds

_log = logging.getLogger("langservice.stopwords")


def dominant_tokens(
    tokens: tuple[str, ...], tables: ReferenceTables
) -> tuple[str, tuple[str, ...]]:
    """Return ``(writing_system, tokens_in_it)`` for the most frequent script.

    Ties prefer Latin, then the script whose language comes first in
    priority order.
    """
    groups: dict[str, list[str]] = {}
    for token in tokens:
        groups.setdefault(tables.writing_system(token), []).append(token)
    if not groups:
        return LATIN, ()

    system = min(
        groups,
        key=lambda s: (-len(groups[s]), -1 if s == LATIN else tables.priority(s)),
    )
    return system, tuple(groups[system])


def score_stopwords(tokens: tuple[str, ...], tables: ReferenceTables) -> dict[str, float]:
    """Return ``{code: matched / dominant_tokens}`` for languages of the dominant script."""
    system, own = dominant_tokens(tokens, tables)
    total = len(own)
    scores: dict[str, float] = {}
    for profile in tables.profiles:
        if not profile.stopwords or tables.system_of(profile.code) != system:
            continue
        hits = sum(1 for t in own if t in profile.stopwords)
        scores[profile.code] = hits / total if total else 0.0
    return scores


class StopwordStrategy:
    method = DetectionMethod.STOPWORD

    def __init__(self, tables: ReferenceTables, thresholds: Thresholds) -> None:
        self._tables = tables
        self._thresholds = thresholds
        self._min_ratio = thresholds.stopword_min_ratio
        self._min_margin = thresholds.stopword_min_margin

    def attempt(self, text: NormalizedText) -> Optional[DetectionResult]:
        _, own = dominant_tokens(text.tokens, self._tables)
        scores = score_stopwords(text.tokens, self._tables)
        ranked = self._tables.ranked(scores)
        if not ranked:
            return None

        best_lang, top = ranked[0]
        runner_up = ranked[1][1] if len(ranked) > 1 else 0.0
        margin = top - runner_up
        _log.debug(
            "Stopword scores over %d tokens: top=%s (%.3f), margin=%.3f",
            len(own), best_lang, top, margin,
        )

        if top < self._min_ratio or margin < self._min_margin:
            return None

        confidence = min(1.0, 0.5 * top + 0.5 * margin)
        confidence *= self._thresholds.length_factor(len(own))
        return DetectionResult(best_lang, round(confidence, 4), self.method)
