"""Aggregation of per-document scores into chart-ready structures.

Every function here reads a sequence of documents without modifying it,
returns freshly built structures, and treats an empty input as a normal
case that yields an empty- or zero-shaped result.
"""

import logging
from collections import OrderedDict
from typing import Dict, List, Optional, Sequence

from .classifier import classify_emotion, detect_brand
from .config import settings
from .constants import AggregationConstants
from .intention import derive_intention
from .models import (
    BrandEmotion,
    BrandIntention,
    DatasetRow,
    DimensionFamily,
    DimensionScore,
    Document,
    Emotion,
    GenderEmotion,
    IntentionDistribution,
    IntentionLevel,
    IntentionTrendPoint,
    LocationEmotionMatrix,
    TemporalPeriod,
)
from .scoring import family_dimensions, mean_score, round_half_up, score_family

logger = logging.getLogger(__name__)

EMOTIONS: List[Emotion] = list(Emotion)
# majority ties resolve in this order
_LEVEL_ORDER = [IntentionLevel.HIGH, IntentionLevel.MEDIUM, IntentionLevel.LOW]


def _empty_emotion_counts() -> Dict[Emotion, int]:
    return OrderedDict((emotion, 0) for emotion in EMOTIONS)


def _empty_level_counts() -> Dict[IntentionLevel, int]:
    return OrderedDict((level, 0) for level in _LEVEL_ORDER)


def _majority_level(counts: Dict[IntentionLevel, int]) -> IntentionLevel:
    best = _LEVEL_ORDER[0]
    for level in _LEVEL_ORDER[1:]:
        if counts[level] > counts[best]:
            best = level
    return best


# --- Distributions ---

def compute_emotion_distribution(documents: Sequence[Document]) -> Dict[Emotion, int]:
    """Count documents per emotion; all five emotions are always present."""
    counts = _empty_emotion_counts()
    for doc in documents:
        counts[classify_emotion(doc.content)] += 1
    return counts


def compute_intention_distribution(documents: Sequence[Document]) -> IntentionDistribution:
    counts = _empty_level_counts()
    for doc in documents:
        counts[derive_intention(doc.content).level] += 1
    return IntentionDistribution(
        high=counts[IntentionLevel.HIGH],
        medium=counts[IntentionLevel.MEDIUM],
        low=counts[IntentionLevel.LOW],
    )


def compute_average_intention_score(documents: Sequence[Document]) -> int:
    if not documents:
        return 0
    total = sum(derive_intention(doc.content).score for doc in documents)
    return round_half_up(total / len(documents))


def compute_brand_mentions(documents: Sequence[Document]) -> Dict[str, int]:
    """Documents per detected brand, most mentioned first."""
    mentions: Dict[str, int] = {}
    for doc in documents:
        brand = detect_brand(doc.content)
        if brand:
            mentions[brand] = mentions.get(brand, 0) + 1
    return OrderedDict(sorted(mentions.items(), key=lambda item: (-item[1], item[0])))


# --- Cross-tabulations ---

def compute_intention_by_brand(documents: Sequence[Document]) -> List[BrandIntention]:
    """Intention level counts per brand, sorted by total mentions descending."""
    by_brand: Dict[str, BrandIntention] = {}
    for doc in documents:
        brand = detect_brand(doc.content)
        if not brand:
            continue
        entry = by_brand.setdefault(brand, BrandIntention(brand=brand))
        level = derive_intention(doc.content).level
        setattr(entry, level.value, getattr(entry, level.value) + 1)
    return sorted(by_brand.values(), key=lambda entry: (-entry.total, entry.brand))


def compute_emotion_by_brand(documents: Sequence[Document]) -> List[BrandEmotion]:
    """Emotion counts per brand, sorted by total mentions descending."""
    by_brand: Dict[str, BrandEmotion] = {}
    for doc in documents:
        brand = detect_brand(doc.content)
        if not brand:
            continue
        entry = by_brand.setdefault(brand, BrandEmotion(brand=brand, counts=_empty_emotion_counts()))
        entry.counts[classify_emotion(doc.content)] += 1
    return sorted(by_brand.values(), key=lambda entry: (-entry.total, entry.brand))


def compute_emotion_by_gender(documents: Sequence[Document]) -> List[GenderEmotion]:
    """
    Male/female counts per emotion.

    Placeholder demographics: documents carry no gender, so even ids count
    as male and odd ids as female. Replace once real gender metadata exists.
    """
    male = _empty_emotion_counts()
    female = _empty_emotion_counts()
    for doc in documents:
        emotion = classify_emotion(doc.content)
        if int(doc.id) % 2 == 0:
            male[emotion] += 1
        else:
            female[emotion] += 1
    return [GenderEmotion(emotion=e, male_count=male[e], female_count=female[e]) for e in EMOTIONS]


def match_region(region: Optional[str]) -> Optional[str]:
    """Map a free-text region onto the Indonesian region whitelist, or None."""
    value = (region or "").strip().lower()
    if not value:
        return None
    for valid in AggregationConstants.VALID_REGIONS:
        if value == valid.lower():
            return valid
    for valid in AggregationConstants.VALID_REGIONS:
        if valid.lower() in value:
            return valid
    return None


def compute_emotion_by_location(rows: Sequence[DatasetRow]) -> LocationEmotionMatrix:
    """Region x emotion counts from the Region field of uploaded rows."""
    counts: Dict[str, Dict[Emotion, int]] = {}
    ignored = 0
    for row in rows:
        region = match_region(row.region)
        if region is None:
            ignored += 1
            continue
        counts.setdefault(region, _empty_emotion_counts())[classify_emotion(row.text)] += 1
    if ignored:
        logger.debug(f"Location breakdown ignored {ignored} rows without a recognised region")

    locations = [region for region in AggregationConstants.VALID_REGIONS if region in counts]
    data = [[counts[region][emotion] for emotion in EMOTIONS] for region in locations]
    return LocationEmotionMatrix(locations=locations, emotions=list(EMOTIONS), data=data)


# --- Dimension scores ---

def compute_psycho_social_matrix(
    documents: Sequence[Document],
    family: DimensionFamily = DimensionFamily.UTAUT2,
) -> List[List[int]]:
    """
    Dimension x emotion matrix of mean dimension scores.

    Each cell averages the dimension score over the documents classified
    into that emotion; emotions without documents yield 0. Returns [] for
    an empty document set.
    """
    if not documents:
        return []

    dimensions = family_dimensions(family)
    buckets = {dim: {emotion: [] for emotion in EMOTIONS} for dim in dimensions}
    for doc in documents:
        emotion = classify_emotion(doc.content)
        for result in score_family(doc.content, family):
            buckets[result.dimension][emotion].append(result.score)

    return [[mean_score(buckets[dim][emotion]) for emotion in EMOTIONS] for dim in dimensions]


def compute_dimension_averages(
    documents: Sequence[Document],
    family: DimensionFamily,
) -> List[DimensionScore]:
    """Mean score per dimension over all documents; zeros for an empty set."""
    dimensions = family_dimensions(family)
    if not documents:
        return [DimensionScore(dimension=dim, score=0) for dim in dimensions]

    totals = {dim: [] for dim in dimensions}
    for doc in documents:
        for result in score_family(doc.content, family):
            totals[result.dimension].append(result.score)
    return [DimensionScore(dimension=dim, score=mean_score(totals[dim])) for dim in dimensions]


def compute_marketing_mix_scores(documents: Sequence[Document]) -> List[DimensionScore]:
    """8P factor scores in PROD, PRICE, DIST, COMM, HRD, CUSJ, BRAND, COLLAB order."""
    return compute_dimension_averages(documents, DimensionFamily.MARKETING_MIX)


def compute_marketing_metrics(documents: Sequence[Document]) -> List[DimensionScore]:
    """Funnel stage scores from Awareness to Advocacy."""
    return compute_dimension_averages(documents, DimensionFamily.MARKETING_FUNNEL)


# --- Time series ---

def compute_intention_trends(
    documents: Sequence[Document],
    buckets: Optional[int] = None,
) -> List[IntentionTrendPoint]:
    """
    Split documents into sequential buckets and summarise each one.

    Bucket size is ``max(1, n // buckets)``; the last bucket absorbs the
    remainder so every document is counted. Empty buckets are skipped.
    """
    if not documents:
        return []
    buckets = max(1, buckets or settings.trend_bucket_count)
    size = max(1, len(documents) // buckets)

    points: List[IntentionTrendPoint] = []
    for i in range(buckets):
        start = i * size
        end = len(documents) if i == buckets - 1 else min(start + size, len(documents))
        bucket = documents[start:end]
        if not bucket:
            continue

        results = [derive_intention(doc.content) for doc in bucket]
        counts = _empty_level_counts()
        for result in results:
            counts[result.level] += 1
        average = sum(result.score for result in results) / len(results)

        points.append(IntentionTrendPoint(
            id=len(points),
            intention_level=_majority_level(counts),
            trend=round_half_up(average),
        ))
    return points


def compute_temporal_emotion_evolution(
    documents: Sequence[Document],
    period_size: Optional[int] = None,
) -> List[TemporalPeriod]:
    """Emotion counts for consecutive periods of ``period_size`` documents."""
    period_size = max(1, period_size or settings.temporal_period_size)
    periods: List[TemporalPeriod] = []
    for index, doc in enumerate(documents):
        if index % period_size == 0:
            periods.append(TemporalPeriod(period=f"T{index // period_size + 1}", counts=_empty_emotion_counts()))
        periods[-1].counts[classify_emotion(doc.content)] += 1
    return periods


def validate_matrix_dimensions(matrix, expected_rows: int, expected_cols: int) -> bool:
    """True when ``matrix`` has exactly the expected rows and columns."""
    if matrix is None or len(matrix) != expected_rows:
        return False
    return all(isinstance(row, (list, tuple)) and len(row) == expected_cols for row in matrix)
