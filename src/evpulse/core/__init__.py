"""Core scoring and aggregation modules for EVPulse."""

from .models import *
from .config import settings
from .classifier import classify, classify_emotion, detect_brand
from .intention import derive_intention, intention_level_for_score
from .scoring import score_dimension, score_family

__all__ = [
    "settings",
    "Document",
    "DatasetRow",
    "DimensionScore",
    "DimensionFamily",
    "Emotion",
    "IntentionLevel",
    "IntentionResult",
    "classify",
    "classify_emotion",
    "detect_brand",
    "derive_intention",
    "intention_level_for_score",
    "score_dimension",
    "score_family",
]
