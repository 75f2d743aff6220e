"""Numeric policy for the detection cascade."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Thresholds:
    """Acceptance thresholds, one group per strategy.

    ``sample_limit`` caps how many characters of the input are analysed;
    anything beyond it is dropped before normalisation.  Inputs shorter than
    ``short_input_tokens`` words have their word-level confidence scaled down
    in proportion.
    """

    stopword_min_ratio: float = 0.2
    stopword_min_margin: float = 0.1
    script_min_share: float = 0.3
    diacritic_min_score: float = 1.0
    ngram_min_probability: float = 0.9
    fallback_confidence: float = 0.1
    short_input_tokens: int = 4
    sample_limit: int = 5_000

    def length_factor(self, token_count: int) -> float:
        """``min(1, token_count / short_input_tokens)``."""
        if self.short_input_tokens <= 0:
            return 1.0
        return min(1.0, token_count / self.short_input_tokens)
