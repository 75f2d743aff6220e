"""Pydantic v2 request/response models for the language service."""

from __future__ import annotations

from pydantic import BaseModel, Field


# ── Request Models ──────────────────────────────────────────────────────────

class DetectRequest(BaseModel):
    """A single text to classify.  Empty strings are allowed."""

    text: str = Field(..., description="Text whose language should be detected")


class BatchDetectRequest(BaseModel):
    """Several texts classified independently, results in input order."""

    texts: list[str] = Field(..., min_length=1)


# ── Response Models ─────────────────────────────────────────────────────────

class DetectResponse(BaseModel):
    """Detection outcome for one text.

    ``method`` and ``confidence`` are diagnostic; only ``language`` is a
    stable contract for consumers.
    """

    language: str
    language_name: str
    confidence: float = Field(..., ge=0.0, le=1.0)
    method: str
    is_confident: bool
    speech_locale: str


class BatchDetectResponse(BaseModel):
    results: list[DetectResponse]
    total: int


class FixtureCaseResult(BaseModel):
    """Outcome of one labelled fixture sample."""

    text: str
    expected: str
    detected: str
    confidence: float
    method: str
    correct: bool


class FixtureSummary(BaseModel):
    total: int
    correct: int
    accuracy: float


class FixtureReport(BaseModel):
    """Response from /test-language."""

    success: bool
    results: list[FixtureCaseResult]
    summary: FixtureSummary


class LanguageInfo(BaseModel):
    code: str
    name: str
    speech_locale: str
    priority: int


class LanguagesResponse(BaseModel):
    default_language: str
    languages: list[LanguageInfo]


# ── Health ──────────────────────────────────────────────────────────────────

class HealthResponse(BaseModel):
    """Response from /health endpoint."""

    status: str
    ngram_enabled: bool
    ngram_loaded: bool
    default_language: str
    strategies: list[str]
    uptime_seconds: float
