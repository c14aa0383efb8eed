"""Lexicon-scored dimension function and numeric guards."""

import logging
import math
from typing import List, Optional

from .lexicon import DIMENSION_FAMILIES, FamilySpec, LexiconRule
from .models import DimensionFamily, DimensionScore

logger = logging.getLogger(__name__)

SCORE_MIN = 0
SCORE_MAX = 100


def finite_or_zero(value) -> float:
    """Coerce to a finite float; NaN, infinities and junk become 0."""
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return 0.0
    return number if math.isfinite(number) else 0.0


def round_half_up(value: float) -> int:
    """Round halves toward positive infinity (2.5 -> 3, -2.5 -> -2)."""
    return int(math.floor(finite_or_zero(value) + 0.5))


def clamp_score(value) -> int:
    """Clamp to [0, 100] as an integer; NaN becomes 0."""
    return max(SCORE_MIN, min(SCORE_MAX, round_half_up(value)))


def _rule_hits(rule: LexiconRule, text_lower: str) -> bool:
    return any(term in text_lower for term in rule.terms)


def find_family(dimension: str) -> DimensionFamily:
    """Return the family that declares ``dimension``."""
    for family, spec in DIMENSION_FAMILIES.items():
        if dimension in spec.rules:
            return family
    raise ValueError(f"Unknown dimension: {dimension!r}")


def _score_with_spec(text_lower: str, spec: FamilySpec, dimension: str) -> int:
    score = spec.base
    for rule in spec.rules[dimension]:
        if _rule_hits(rule, text_lower):
            score += rule.signed_weight
    return max(SCORE_MIN, min(SCORE_MAX, score))


def score_dimension(content: str, dimension: str, family: Optional[DimensionFamily] = None) -> int:
    """
    Score ``content`` on one dimension.

    Starts at the family's base score and applies every matching rule
    (additive, not first-match), then clamps to [0, 100]. Content without
    any matching keyword scores exactly the base value.
    """
    family = family or find_family(dimension)
    spec = DIMENSION_FAMILIES[family]
    if dimension not in spec.rules:
        raise ValueError(f"Dimension {dimension!r} is not part of {family.value}")
    return _score_with_spec((content or "").lower(), spec, dimension)


def score_family(content: str, family: DimensionFamily) -> List[DimensionScore]:
    """Score ``content`` on every dimension of ``family``, in declared order."""
    spec = DIMENSION_FAMILIES[family]
    text_lower = (content or "").lower()
    return [
        DimensionScore(dimension=dimension, score=_score_with_spec(text_lower, spec, dimension))
        for dimension in spec.dimensions
    ]


def family_dimensions(family: DimensionFamily) -> List[str]:
    return DIMENSION_FAMILIES[family].dimensions


def family_labels(family: DimensionFamily) -> List[str]:
    spec = DIMENSION_FAMILIES[family]
    return [spec.labels.get(dimension, dimension) for dimension in spec.dimensions]


def mean_score(scores: List[int]) -> int:
    """Rounded mean of scores; an empty list yields 0."""
    if not scores:
        return 0
    return clamp_score(sum(scores) / len(scores))
