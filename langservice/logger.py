"""Structured JSON logger for detection results.

Writes one JSON object per line to ``settings.log_path``.
Raw text content is *never* logged, only its length.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from langservice.config import settings
from langservice.detection.result import DetectionResult

DETECTION_LOGGER = "langservice.detections"

_logger: logging.Logger | None = None


def _get_logger() -> logging.Logger:
    """Return the detection log, attaching its file handler on first use.

    The handler level follows ``LOG_LEVEL``; a level above INFO silences the
    per-request detection entries without touching operational logs.
    """
    global _logger
    if _logger is not None:
        return _logger

    log_path = Path(settings.log_path)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger(DETECTION_LOGGER)
    logger.setLevel(settings.log_level.upper())
    # Detection entries are data, not diagnostics: keep them out of the console.
    logger.propagate = False

    target = str(log_path.resolve())
    if not any(
        isinstance(h, logging.FileHandler) and h.baseFilename == target
        for h in logger.handlers
    ):
        handler = logging.FileHandler(target, encoding="utf-8")
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)

    _logger = logger
    return _logger


def log_detection(result: DetectionResult, text_length: int, source: str) -> None:
    """Append a structured JSON entry for one classification."""
    entry: dict[str, Any] = {
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "source": source,
        "language": result.language,
        "confidence": round(result.confidence, 4),
        "method": result.method.value,
        "text_length": text_length,
    }
    _get_logger().info(json.dumps(entry, ensure_ascii=False))
