"""Uniform interface shared by every detection strategy."""

from __future__ import annotations

from typing import Optional, Protocol

from langservice.detection.normalizer import NormalizedText
from langservice.detection.result import DetectionMethod, DetectionResult


class DetectionStrategy(Protocol):
    """One tier of the cascade.

    ``attempt`` returns a result when the strategy's own threshold is
    cleared, ``None`` otherwise.  Implementations hold only immutable
    reference data.
    """

    method: DetectionMethod

    def attempt(self, text: NormalizedText) -> Optional[DetectionResult]:
        ...
