"""Data preparation for dashboard payloads and JSON export."""

import datetime
import json
from typing import Any, Dict, List, Optional, Sequence

from .. import __version__
from ..core import aggregation
from ..core.models import DatasetRow, DimensionFamily, DimensionScore, Document
from ..core.scoring import family_dimensions, family_labels


def _scores_to_dict(scores: List[DimensionScore]) -> Dict[str, int]:
    return {entry.dimension: entry.score for entry in scores}


def _emotion_counts(counts) -> Dict[str, int]:
    return {emotion.value: count for emotion, count in counts.items()}


def build_dashboard_payload(
    documents: Sequence[Document],
    rows: Optional[Sequence[DatasetRow]] = None,
) -> Dict[str, Any]:
    """Collect every dashboard aggregation into one JSON-serializable dict."""
    rows = list(rows or [])
    intention = aggregation.compute_intention_distribution(documents)
    location = aggregation.compute_emotion_by_location(rows)

    payload = {
        "summary": {
            "total_documents": len(documents),
            "total_rows": len(rows),
            "average_intention_score": aggregation.compute_average_intention_score(documents),
        },
        "emotion_distribution": _emotion_counts(aggregation.compute_emotion_distribution(documents)),
        "brand_mentions": dict(aggregation.compute_brand_mentions(documents)),
        "emotion_by_brand": [
            {"brand": entry.brand, "counts": _emotion_counts(entry.counts), "total": entry.total}
            for entry in aggregation.compute_emotion_by_brand(documents)
        ],
        "emotion_by_gender": [
            {"emotion": entry.emotion.value, "male": entry.male_count, "female": entry.female_count}
            for entry in aggregation.compute_emotion_by_gender(documents)
        ],
        "emotion_by_location": {
            "locations": location.locations,
            "emotions": [emotion.value for emotion in location.emotions],
            "data": location.data,
        },
        "intention_distribution": intention.as_dict(),
        "intention_by_brand": [
            {"brand": entry.brand, "high": entry.high, "medium": entry.medium, "low": entry.low}
            for entry in aggregation.compute_intention_by_brand(documents)
        ],
        "intention_trends": [
            {"id": point.id, "intention_level": point.intention_level.value, "trend": point.trend}
            for point in aggregation.compute_intention_trends(documents)
        ],
        "temporal_emotion_evolution": [
            {"period": period.period, **_emotion_counts(period.counts)}
            for period in aggregation.compute_temporal_emotion_evolution(documents)
        ],
        "psycho_social_matrix": {
            "dimensions": family_dimensions(DimensionFamily.UTAUT2),
            "labels": family_labels(DimensionFamily.UTAUT2),
            "emotions": [emotion.value for emotion in aggregation.EMOTIONS],
            "data": aggregation.compute_psycho_social_matrix(documents),
        },
        "marketing_mix": _scores_to_dict(aggregation.compute_marketing_mix_scores(documents)),
        "marketing_funnel": _scores_to_dict(aggregation.compute_marketing_metrics(documents)),
        "rows": [row.to_record() for row in rows],
        "metadata": {
            "export_timestamp": None,  # Will be set by export_to_json
            "version": __version__,
        },
    }

    return payload


def export_to_json(data: Dict[str, Any], filename: str) -> None:
    """Export data to a UTF-8 JSON file."""
    data.setdefault("metadata", {})["export_timestamp"] = datetime.datetime.now().isoformat()

    with open(filename, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)
