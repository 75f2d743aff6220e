"""Centralised, env-driven configuration using pydantic-settings."""

from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

from langservice.detection.tables import DEFAULT_TABLES
from langservice.detection.thresholds import Thresholds


class Settings(BaseSettings):
    """All tunables are loaded from environment variables (or .env file)."""

    # ── Detection defaults ──────────────────────────────────────────────────
    default_language: str = Field(default="en", alias="DEFAULT_LANGUAGE")
    use_ngram_strategy: bool = Field(default=True, alias="USE_NGRAM_STRATEGY")

    # ── Thresholds ──────────────────────────────────────────────────────────
    stopword_min_ratio: float = Field(default=0.2, ge=0.0, le=1.0, alias="STOPWORD_MIN_RATIO")
    stopword_min_margin: float = Field(default=0.1, ge=0.0, le=1.0, alias="STOPWORD_MIN_MARGIN")
    script_min_share: float = Field(default=0.3, ge=0.0, le=1.0, alias="SCRIPT_MIN_SHARE")
    diacritic_min_score: float = Field(default=1.0, ge=0.0, alias="DIACRITIC_MIN_SCORE")
    ngram_min_probability: float = Field(
        default=0.9, ge=0.0, le=1.0, alias="NGRAM_MIN_PROBABILITY"
    )
    fallback_confidence: float = Field(default=0.1, ge=0.0, le=1.0, alias="FALLBACK_CONFIDENCE")
    short_input_tokens: int = Field(default=4, ge=1, alias="SHORT_INPUT_TOKENS")
    acceptance_threshold: float = Field(default=0.5, ge=0.0, le=1.0, alias="ACCEPTANCE_THRESHOLD")

    # ── Input bounds ────────────────────────────────────────────────────────
    sample_limit: int = Field(default=5_000, gt=0, alias="SAMPLE_LIMIT")

    # ── Logging ─────────────────────────────────────────────────────────────
    log_path: str = Field(default="/logs/detections.log", alias="LOG_PATH")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # ── Server ──────────────────────────────────────────────────────────────
    host: str = Field(default="0.0.0.0", alias="HOST")
    port: int = Field(default=8000, gt=0, le=65535, alias="PORT")

    model_config = {
        "env_file": ".env",
        "populate_by_name": True,
        "extra": "ignore",
    }

    @field_validator("default_language")
    @classmethod
    def _check_supported(cls, value: str) -> str:
        code = value.strip().lower()
        if not DEFAULT_TABLES.is_supported(code):
            raise ValueError(
                f"DEFAULT_LANGUAGE must be one of {', '.join(DEFAULT_TABLES.codes)}"
            )
        return code

    @property
    def thresholds(self) -> Thresholds:
        """Return the detector's immutable numeric policy."""
        return Thresholds(
            stopword_min_ratio=self.stopword_min_ratio,
            stopword_min_margin=self.stopword_min_margin,
            script_min_share=self.script_min_share,
            diacritic_min_score=self.diacritic_min_score,
            ngram_min_probability=self.ngram_min_probability,
            fallback_confidence=self.fallback_confidence,
            short_input_tokens=self.short_input_tokens,
            sample_limit=self.sample_limit,
        )


# Module-level singleton – import this everywhere
settings = Settings()
