"""Keyword-rule emotion and brand classification."""

from typing import Optional

from .lexicon import (
    BRAND_CANONICAL,
    BRAND_VARIANTS,
    DEFAULT_EMOTION,
    EMOTION_LABELS_ID,
    EMOTION_RULES,
)
from .models import Emotion, EmotionClassification

_EMOTION_BY_LABEL = {emotion.value: emotion for emotion in Emotion}
_EMOTION_BY_LABEL.update({label: emotion for emotion, label in EMOTION_LABELS_ID.items()})


def detect_brand(text: str) -> Optional[str]:
    """Return the canonical brand of the first variant found in ``text``."""
    lower_text = (text or "").lower()
    for variant in BRAND_VARIANTS:
        if variant.lower() in lower_text:
            return BRAND_CANONICAL.get(variant, variant)
    return None


def classify_emotion(text: str) -> Emotion:
    """
    Classify text into one emotion by priority.

    Satisfaction keywords are checked first, then trust, fear and
    skepticism; the first group with a hit wins. Text matching none of
    them is classified as interest.
    """
    lower_text = (text or "").lower()
    for emotion, keywords in EMOTION_RULES:
        if any(keyword in lower_text for keyword in keywords):
            return emotion
    return DEFAULT_EMOTION


def classify(content: str) -> EmotionClassification:
    return EmotionClassification(emotion=classify_emotion(content), brand=detect_brand(content))


def normalize_emotion_label(label: str) -> Optional[Emotion]:
    """Map an English or Indonesian emotion label to an Emotion, or None."""
    return _EMOTION_BY_LABEL.get((label or "").strip().lower())


def to_indonesian(emotion: Emotion) -> str:
    return EMOTION_LABELS_ID[emotion]


def emotion_display_label(emotion: Emotion, locale: str = "id") -> str:
    """Capitalized display label ("Minat", "Interest")."""
    label = to_indonesian(emotion) if locale == "id" else emotion.value
    return label.capitalize()
