"""Strategic recommendation report built from the current document set."""

import logging
from datetime import datetime
from typing import Dict, List, NamedTuple, Optional, Sequence

from ..core.aggregation import (
    compute_brand_mentions,
    compute_dimension_averages,
    compute_emotion_distribution,
    compute_marketing_metrics,
)
from ..core.config import settings
from ..core.constants import ReportConstants
from ..core.lexicon import UTAUT2_LABELS, UTAUT2_LABELS_ID
from ..core.models import (
    DimensionFamily,
    DimensionScore,
    Document,
    Emotion,
    StrategicRecommendation,
    StrategicReport,
)
from ..core.scoring import round_half_up
from .locale import get_priority_label, get_report_templates, get_ui_labels, normalize_locale, translate_emotion

logger = logging.getLogger(__name__)

NEGATIVE_EMOTIONS = (Emotion.FEAR, Emotion.SKEPTICISM)
POSITIVE_EMOTIONS = (Emotion.INTEREST, Emotion.SATISFACTION)

# weakest funnel stage -> (template, priority); Preference has no dedicated action
FUNNEL_RECOMMENDATIONS = {
    "Awareness": ("increase_brand_visibility", "high"),
    "Consideration": ("strengthen_product_info", "medium"),
    "Intent": ("implement_incentives", "high"),
    "Advocacy": ("build_community", "medium"),
}

# UTAUT2 constructs that map to an improvement action when weak
CONSTRUCT_RECOMMENDATIONS = {
    "EE": "simplify_ux",
    "PV": "address_price_value",
    "FC": "improve_facilitating",
    "HM": "enhance_experience",
}


class EmotionShare(NamedTuple):
    emotion: Emotion
    count: int
    percentage: int


class FunnelSummary(NamedTuple):
    weakest: Optional[DimensionScore]
    strongest: Optional[DimensionScore]
    metrics: List[DimensionScore]


def top_emotions(counts: Dict[Emotion, int], limit: int = ReportConstants.TOP_EMOTIONS) -> List[EmotionShare]:
    """Emotions with at least one document, most frequent first."""
    total = sum(counts.values())
    if total == 0:
        return []
    shares = [
        EmotionShare(emotion, count, round_half_up(count / total * 100))
        for emotion, count in counts.items()
        if count > 0
    ]
    shares.sort(key=lambda share: -share.count)
    return shares[:limit]


def dominant_constructs(documents: Sequence[Document]) -> List[DimensionScore]:
    """UTAUT2 construct averages, strongest first."""
    if not documents:
        return []
    averages = compute_dimension_averages(documents, DimensionFamily.UTAUT2)
    return sorted(averages, key=lambda entry: -entry.score)


def summarize_funnel(documents: Sequence[Document]) -> FunnelSummary:
    metrics = compute_marketing_metrics(documents) if documents else []
    if not metrics:
        return FunnelSummary(None, None, [])
    ordered = sorted(metrics, key=lambda entry: entry.score)
    return FunnelSummary(weakest=ordered[0], strongest=ordered[-1], metrics=metrics)


def _construct_label(code: str, locale: str) -> str:
    labels = UTAUT2_LABELS_ID if locale == "id" else UTAUT2_LABELS
    return labels.get(code, code)


def _recommendation(templates: Dict, key: str, priority: str, **values) -> StrategicRecommendation:
    entry = templates[key]
    return StrategicRecommendation(
        title=entry["title"],
        rationale=entry["rationale"].format(**values),
        priority=priority,
    )


def build_recommendations(
    emotions: List[EmotionShare],
    constructs: List[DimensionScore],
    funnel: FunnelSummary,
    brand_mentions: Dict[str, int],
    locale: str,
) -> List[StrategicRecommendation]:
    templates = get_report_templates(locale)
    recommendations: List[StrategicRecommendation] = []

    if emotions:
        top = emotions[0]
        label = translate_emotion(top.emotion.value, locale)
        if top.emotion in NEGATIVE_EMOTIONS:
            recommendations.append(
                _recommendation(templates, "address_concerns", "high", percentage=top.percentage, emotion=label)
            )
        elif top.emotion in POSITIVE_EMOTIONS:
            recommendations.append(
                _recommendation(templates, "capitalize_positive", "high", percentage=top.percentage, emotion=label)
            )
        else:
            recommendations.append(
                _recommendation(templates, "leverage_trust", "high", percentage=top.percentage)
            )

    if funnel.weakest and funnel.weakest.dimension in FUNNEL_RECOMMENDATIONS:
        key, priority = FUNNEL_RECOMMENDATIONS[funnel.weakest.dimension]
        recommendations.append(_recommendation(templates, key, priority, score=funnel.weakest.score))

    if constructs:
        strongest = constructs[0]
        if strongest.dimension == "SI":
            recommendations.append(
                _recommendation(templates, "amplify_social_proof", "medium", score=strongest.score)
            )
        else:
            weak = [
                entry for entry in constructs
                if entry.dimension in CONSTRUCT_RECOMMENDATIONS
                and entry.score < ReportConstants.LOW_SCORE_THRESHOLD
            ]
            if weak:
                weakest = min(weak, key=lambda entry: entry.score)
                recommendations.append(
                    _recommendation(
                        templates, CONSTRUCT_RECOMMENDATIONS[weakest.dimension], "medium", score=weakest.score
                    )
                )

    if brand_mentions:
        brand, mentions = next(iter(brand_mentions.items()))
        recommendations.append(
            _recommendation(templates, "focus_marketing", "medium", brand=brand, mentions=mentions)
        )

    if len(recommendations) < ReportConstants.MIN_RECOMMENDATIONS:
        recommendations.append(_recommendation(templates, "expand_data_collection", "low"))

    return recommendations[:ReportConstants.MAX_RECOMMENDATIONS]


def build_key_findings(
    document_count: int,
    emotions: List[EmotionShare],
    constructs: List[DimensionScore],
    funnel: FunnelSummary,
    locale: str,
) -> List[str]:
    templates = get_report_templates(locale)
    findings = [templates["analyzed_documents"].format(count=document_count)]

    if emotions:
        listed = ", ".join(
            f"{translate_emotion(share.emotion.value, locale)} ({share.percentage}%)" for share in emotions[:3]
        )
        findings.append(templates["dominant_emotions"].format(emotions=listed))

    if constructs:
        listed = ", ".join(
            f"{_construct_label(entry.dimension, locale)} ({entry.score}/100)" for entry in constructs[:2]
        )
        findings.append(templates["key_constructs"].format(factors=listed))

    if funnel.strongest and funnel.weakest:
        findings.append(
            templates["marketing_funnel"].format(
                strongest=funnel.strongest.dimension,
                strongest_score=funnel.strongest.score,
                weakest=funnel.weakest.dimension,
                weakest_score=funnel.weakest.score,
            )
        )

    return findings


def build_risks(
    emotions: List[EmotionShare],
    constructs: List[DimensionScore],
    funnel: FunnelSummary,
    locale: str,
) -> List[str]:
    templates = get_report_templates(locale)
    risks: List[str] = []

    negative = [share for share in emotions if share.emotion in NEGATIVE_EMOTIONS]
    if negative and negative[0].percentage > ReportConstants.NEGATIVE_SHARE_RISK:
        risks.append(
            templates["high_negative_sentiment"].format(
                emotion=translate_emotion(negative[0].emotion.value, locale),
                percentage=negative[0].percentage,
            )
        )

    if constructs:
        weakest = min(constructs, key=lambda entry: entry.score)
        if weakest.score < ReportConstants.LOW_SCORE_THRESHOLD:
            risks.append(
                templates["low_utaut2_score"].format(
                    dimension=_construct_label(weakest.dimension, locale), score=weakest.score
                )
            )

    if funnel.weakest and funnel.weakest.score < ReportConstants.LOW_SCORE_THRESHOLD:
        risks.append(templates["critical_gap"].format(metric=funnel.weakest.dimension, score=funnel.weakest.score))

    if not risks:
        risks.append(templates["limited_dataset"])

    return risks


def generate_strategic_report(
    documents: Sequence[Document],
    locale: Optional[str] = None,
    has_purchase_intention_data: bool = False,
    generated_at: Optional[datetime] = None,
) -> StrategicReport:
    """
    Build the strategic recommendation report.

    An empty document set yields the no-data report: a fixed summary,
    empty sections and every availability flag False.
    """
    locale = normalize_locale(locale or settings.default_locale)
    generated_at = generated_at or datetime.now()
    templates = get_report_templates(locale)

    if not documents:
        logger.info("No documents available, returning empty strategic report")
        return StrategicReport(
            generated_at=generated_at,
            locale=locale,
            document_count=0,
            executive_summary=templates["no_data_summary"],
            key_findings=[],
            recommendations=[],
            risks=[],
            next_steps=[],
            data_availability={
                "has_emotion_data": False,
                "has_psycho_social_data": False,
                "has_marketing_data": False,
                "has_purchase_intention_data": False,
            },
        )

    emotions = top_emotions(compute_emotion_distribution(documents))
    constructs = dominant_constructs(documents)
    funnel = summarize_funnel(documents)
    brand_mentions = compute_brand_mentions(documents)

    recommendations = build_recommendations(emotions, constructs, funnel, brand_mentions, locale)
    high_priority_count = sum(1 for rec in recommendations if rec.priority == "high")
    dominant_emotion = (
        translate_emotion(emotions[0].emotion.value, locale) if emotions else templates["mixed_emotion"]
    )

    logger.info(f"Generated strategic report for {len(documents)} documents ({len(recommendations)} recommendations)")

    return StrategicReport(
        generated_at=generated_at,
        locale=locale,
        document_count=len(documents),
        executive_summary=templates["executive_summary"].format(
            doc_count=len(documents),
            dominant_emotion=dominant_emotion,
            rec_count=len(recommendations),
            high_priority_count=high_priority_count,
        ),
        key_findings=build_key_findings(len(documents), emotions, constructs, funnel, locale),
        recommendations=recommendations,
        risks=build_risks(emotions, constructs, funnel, locale),
        next_steps=list(templates["next_steps"]),
        data_availability={
            "has_emotion_data": True,
            "has_psycho_social_data": bool(constructs),
            "has_marketing_data": bool(funnel.metrics),
            "has_purchase_intention_data": has_purchase_intention_data,
        },
    )


def _numbered(items: List[str]) -> List[str]:
    return [f"{index}. {item}" for index, item in enumerate(items, 1)]


def report_to_markdown(report: StrategicReport) -> str:
    """Render the report as Markdown in its own locale."""
    labels = get_ui_labels(report.locale)
    lines = [
        f"# {labels['page_title']}",
        "",
        f"## {labels['report_metadata']}",
        "",
        f"**{labels['generated_on']}:** {report.generated_at:%Y-%m-%d %H:%M}",
        f"**{labels['documents_analyzed']}:** {report.document_count}",
        f"**{labels['language_label']}:** {report.locale.upper()}",
        "",
        f"## {labels['executive_summary']}",
        "",
        report.executive_summary,
        "",
    ]

    if report.key_findings:
        lines += [f"## {labels['key_findings']}", ""] + _numbered(report.key_findings) + [""]

    if report.recommendations:
        lines += [f"## {labels['strategic_recommendations']}", ""]
        for index, rec in enumerate(report.recommendations, 1):
            lines += [
                f"### {index}. {rec.title}",
                "",
                f"**{labels['priority']}:** {get_priority_label(rec.priority, report.locale)}",
                "",
                rec.rationale,
                "",
            ]

    if report.risks:
        lines += [f"## {labels['risks_watchouts']}", ""] + _numbered(report.risks) + [""]

    if report.next_steps:
        lines += [f"## {labels['next_steps']}", ""] + _numbered(report.next_steps) + [""]

    lines += ["---", "", f"*{labels['footer']}*"]
    return "\n".join(lines)
