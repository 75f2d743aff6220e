"""Fixture-based accuracy check for the detector.

Runs labelled samples through a detector and reports per-case outcomes plus
``accuracy = correct / total * 100``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from langservice.detection.detector import LanguageDetector
from langservice.detection.result import DetectionMethod


@dataclass(frozen=True)
class FixtureSample:
    text: str
    expected: str


@dataclass(frozen=True)
class CaseResult:
    text: str
    expected: str
    detected: str
    confidence: float
    method: DetectionMethod

    @property
    def correct(self) -> bool:
        return self.detected == self.expected


@dataclass(frozen=True)
class EvaluationReport:
    results: tuple[CaseResult, ...]

    @property
    def total(self) -> int:
        return len(self.results)

    @property
    def correct(self) -> int:
        return sum(1 for r in self.results if r.correct)

    @property
    def accuracy(self) -> float:
        if not self.results:
            return 0.0
        return self.correct / self.total * 100


FIXTURE_SAMPLES: tuple[FixtureSample, ...] = (
    FixtureSample("Hello how are you today", "en"),
    FixtureSample("Hola cómo estás hoy", "es"),
    FixtureSample("Bonjour comment allez vous", "fr"),
    FixtureSample("Ich bin müde und möchte schlafen", "de"),
    FixtureSample("Ciao come stai oggi", "it"),
)


def evaluate(
    detector: LanguageDetector,
    samples: Iterable[FixtureSample] = FIXTURE_SAMPLES,
) -> EvaluationReport:
    results = []
    for sample in samples:
        outcome = detector.detect(sample.text)
        results.append(
            CaseResult(
                text=sample.text,
                expected=sample.expected,
                detected=outcome.language,
                confidence=outcome.confidence,
                method=outcome.method,
            )
        )
    return EvaluationReport(results=tuple(results))
