"""FastAPI application – language detection service.

Endpoints
---------
POST /detect          – classify one text
POST /detect/batch    – classify several texts
GET  /test-language   – run the labelled fixture and report accuracy
GET  /languages       – supported languages in tie-break order
GET  /health          – service status
"""

from __future__ import annotations

import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException

from langservice.config import settings
from langservice.detection import ngram
from langservice.detection.detector import LanguageDetector
from langservice.detection.evaluation import evaluate
from langservice.detection.tables import DEFAULT_TABLES, language_name, speech_locale
from langservice.logger import log_detection
from langservice.models import (
    BatchDetectRequest,
    BatchDetectResponse,
    DetectRequest,
    DetectResponse,
    FixtureCaseResult,
    FixtureReport,
    FixtureSummary,
    HealthResponse,
    LanguageInfo,
    LanguagesResponse,
)

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
)
_log = logging.getLogger("langservice.main")

# ── Detector (reference tables built once, shared by every request) ────────

detector = LanguageDetector(
    tables=DEFAULT_TABLES.with_default(settings.default_language),
    thresholds=settings.thresholds,
    use_ngram=settings.use_ngram_strategy,
)

_start_time: float = 0.0


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load the n-gram profiles once at startup."""
    global _start_time
    _start_time = time.time()

    if settings.use_ngram_strategy:
        ngram.load_profiles()

    _log.info("Language service started (strategies: %s)", ", ".join(detector.methods))
    yield
    _log.info("Language service stopped")


# ── Application ─────────────────────────────────────────────────────────────

app = FastAPI(
    title="Language Detection Service",
    version="1.0.0",
    lifespan=lifespan,
)


def _detect_one(text: str, source: str) -> DetectResponse:
    result = detector.detect(text)
    log_detection(result, text_length=len(text), source=source)
    return DetectResponse(
        language=result.language,
        language_name=language_name(result.language, detector.tables),
        confidence=result.confidence,
        method=result.method.value,
        is_confident=result.is_confident(settings.acceptance_threshold),
        speech_locale=speech_locale(result.language, detector.tables),
    )


@app.post("/detect", response_model=DetectResponse)
def detect(request: DetectRequest) -> DetectResponse:
    """Detect the language of a single text."""
    return _detect_one(request.text, source="detect")


@app.post("/detect/batch", response_model=BatchDetectResponse)
def detect_batch(request: BatchDetectRequest) -> BatchDetectResponse:
    """Detect the language of every text in the batch."""
    results = [_detect_one(text, source="batch") for text in request.texts]
    return BatchDetectResponse(results=results, total=len(results))


@app.get("/test-language", response_model=FixtureReport)
def run_language_fixture() -> FixtureReport:
    """Run the built-in labelled samples and report accuracy."""
    try:
        report = evaluate(detector)
    except Exception as exc:
        _log.error("Language detection test error: %s", exc)
        raise HTTPException(status_code=500, detail="Test failed") from exc

    return FixtureReport(
        success=True,
        results=[
            FixtureCaseResult(
                text=r.text,
                expected=r.expected,
                detected=r.detected,
                confidence=r.confidence,
                method=r.method.value,
                correct=r.correct,
            )
            for r in report.results
        ],
        summary=FixtureSummary(
            total=report.total,
            correct=report.correct,
            accuracy=report.accuracy,
        ),
    )


@app.get("/languages", response_model=LanguagesResponse)
def languages() -> LanguagesResponse:
    """List supported languages in tie-break priority order."""
    tables = detector.tables
    return LanguagesResponse(
        default_language=tables.default_language,
        languages=[
            LanguageInfo(
                code=p.code,
                name=p.name,
                speech_locale=p.speech_locale,
                priority=tables.priority(p.code),
            )
            for p in tables.profiles
        ],
    )


@app.get("/health", response_model=HealthResponse)
def health() -> HealthResponse:
    """Return service health and profile-load status."""
    return HealthResponse(
        status="ok",
        ngram_enabled=settings.use_ngram_strategy,
        ngram_loaded=ngram.is_loaded(),
        default_language=detector.tables.default_language,
        strategies=detector.methods,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
