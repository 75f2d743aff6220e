"""Input sanitising and feature extraction.

Turns whatever the caller hands in into a ``NormalizedText``:

* ``lowered`` – NFC-normalised, lower-cased text with punctuation intact
  (``¿`` and ``¡`` are markers in their own right).
* ``tokens``  – whitespace tokens made only of letters and combining marks;
  digits, punctuation and symbols are stripped, diacritics are preserved.

Nothing in this module raises on bad input.
"""

from __future__ import annotations

import unicodedata
from dataclasses import dataclass


@dataclass(frozen=True)
class NormalizedText:
    lowered: str
    tokens: tuple[str, ...]

    @property
    def is_blank(self) -> bool:
        return not self.tokens

    @property
    def letters(self) -> str:
        """All letter characters of the token stream, in order."""
        return "".join(ch for token in self.tokens for ch in token if ch.isalpha())


def sanitize(value: object, sample_limit: int) -> str:
    """Coerce *value* to a bounded, NFC-normalised string.

    ``None`` becomes ``""``, ``bytes`` are decoded as UTF-8 with replacement
    characters, anything else goes through ``str()``.
    """
    if value is None:
        return ""
    if isinstance(value, (bytes, bytearray)):
        text = bytes(value[: sample_limit * 4]).decode("utf-8", errors="replace")
    elif isinstance(value, str):
        text = value
    else:
        try:
            text = str(value)
        except Exception:
            return ""

    text = text[:sample_limit]
    # Lone surrogates cannot be normalised or encoded later on
    text = text.encode("utf-8", errors="replace").decode("utf-8")
    return unicodedata.normalize("NFC", text)


def _is_feature_char(ch: str) -> bool:
    # L* = letters, M* = combining marks (Devanagari matras, Thai vowels, ...)
    return unicodedata.category(ch)[0] in ("L", "M")


def normalize(value: object, sample_limit: int = 5_000) -> NormalizedText:
    """Sanitise *value* and extract detection features."""
    lowered = sanitize(value, sample_limit).lower()
    stripped = "".join(ch if _is_feature_char(ch) else " " for ch in lowered)
    return NormalizedText(lowered=lowered, tokens=tuple(stripped.split()))
