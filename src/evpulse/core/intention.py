"""Deterministic purchase-intention scoring from document text."""

import struct
from typing import Any

from .constants import IntentionConstants
from .models import IntentionLevel, IntentionResult
from .scoring import finite_or_zero, round_half_up

_INT32_MASK = 0xFFFFFFFF
_INT32_SIGN = 0x80000000


def stable_hash(text: str) -> int:
    """
    Polynomial rolling hash ``h = h * 31 + unit`` over UTF-16 code units.

    Wrapped to a signed 32-bit integer after every step, so the value is
    identical across runs and platforms.
    """
    encoded = text.encode("utf-16-le", "surrogatepass")
    units = struct.unpack(f"<{len(encoded) // 2}H", encoded)
    h = 0
    for unit in units:
        h = (h * 31 + unit) & _INT32_MASK
    if h & _INT32_SIGN:
        h -= 1 << 32
    return h


def _count_keywords(text: str, keywords) -> int:
    return sum(1 for keyword in keywords if keyword in text)


def derive_intention_score(text: str) -> int:
    """Derive a 0-100 purchase-intention score; empty text is neutral (50)."""
    if not text or not text.strip():
        return IntentionConstants.NEUTRAL_SCORE

    normalized = text.lower().strip()
    score = abs(stable_hash(normalized)) % IntentionConstants.HASH_MODULUS

    step = IntentionConstants.KEYWORD_STEP
    positive = _count_keywords(normalized, IntentionConstants.POSITIVE_KEYWORDS)
    score = min(100, score + positive * step)

    negative = _count_keywords(normalized, IntentionConstants.NEGATIVE_KEYWORDS)
    score = max(0, score - negative * step)

    return score


def intention_level_for_score(score: int) -> IntentionLevel:
    """Thresholds: low (0-54), medium (55-74), high (75-100)."""
    clamped = max(0, min(100, score))
    if clamped >= IntentionConstants.HIGH_THRESHOLD:
        return IntentionLevel.HIGH
    if clamped >= IntentionConstants.MEDIUM_THRESHOLD:
        return IntentionLevel.MEDIUM
    return IntentionLevel.LOW


def derive_intention(text: str) -> IntentionResult:
    """Derive both score and level from text in one call."""
    if not text or not text.strip():
        # neutral text is reported as medium, not by the threshold table
        return IntentionResult(score=IntentionConstants.NEUTRAL_SCORE, level=IntentionLevel.MEDIUM)
    score = derive_intention_score(text)
    return IntentionResult(score=score, level=intention_level_for_score(score))


def validate_intention_score(value: Any) -> int:
    """Repair an uploaded intention score into an integer in [0, 100]."""
    if isinstance(value, bool):
        return IntentionConstants.NEUTRAL_SCORE
    if isinstance(value, (int, float)):
        if value != value:  # NaN
            return IntentionConstants.NEUTRAL_SCORE
        return max(0, min(100, round_half_up(finite_or_zero(value))))
    if isinstance(value, str):
        digits = _leading_integer(value)
        if digits is not None:
            return max(0, min(100, digits))
    return IntentionConstants.NEUTRAL_SCORE


def _leading_integer(value: str):
    """Parse the leading integer of a string ("72", " 80 pts", "-3"), else None."""
    text = value.strip()
    sign = 1
    if text[:1] in ("+", "-"):
        sign = -1 if text[0] == "-" else 1
        text = text[1:]
    digits = ""
    for char in text:
        if char not in "0123456789":
            break
        digits += char
    return sign * int(digits) if digits else None


def validate_intention_level(value: Any) -> IntentionLevel:
    """Accept low/medium/high or rendah/sedang/tinggi; anything else is medium."""
    if isinstance(value, IntentionLevel):
        return value
    if isinstance(value, str):
        alias = IntentionConstants.LEVEL_ALIASES.get(value.strip().lower())
        if alias:
            return IntentionLevel(alias)
    return IntentionLevel.MEDIUM
