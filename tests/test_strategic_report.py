"""Tests for the strategic recommendation report."""

from datetime import datetime

from evpulse.core.models import Document, Emotion
from evpulse.reporting.locale import get_priority_label, translate_emotion
from evpulse.reporting.strategic_report import generate_strategic_report, report_to_markdown, top_emotions

GENERATED_AT = datetime(2026, 1, 2, 3, 4)


def make_documents(*texts):
    return [Document(id=i, content=text, author="tester", timestamp=0) for i, text in enumerate(texts)]


# fear 2/3, satisfaction 1/3; funnel weakest Consideration (40), strongest Preference (47);
# UTAUT2 Price Value averages 42, every other construct 50
FEAR_DOCS = make_documents(
    "Saya takut baterai Gesits cepat rusak",
    "Saya takut harga Gesits mahal",
    "Viar Q1 bagus",
)


def test_top_emotions_order_and_percentages():
    counts = {
        Emotion.INTEREST: 1,
        Emotion.TRUST: 0,
        Emotion.FEAR: 1,
        Emotion.SKEPTICISM: 2,
        Emotion.SATISFACTION: 0,
    }
    shares = top_emotions(counts)
    assert [(share.emotion, share.count, share.percentage) for share in shares] == [
        (Emotion.SKEPTICISM, 2, 50),
        (Emotion.INTEREST, 1, 25),
        (Emotion.FEAR, 1, 25),
    ]
    assert top_emotions({emotion: 0 for emotion in Emotion}) == []


class TestGenerateReport:
    """Test report generation rules."""

    def setup_method(self):
        self.report = generate_strategic_report(FEAR_DOCS, locale="en", generated_at=GENERATED_AT)

    def test_recommendations(self):
        titles = [rec.title for rec in self.report.recommendations]
        assert titles == [
            "Address Consumer Concerns Through Transparency",
            "Strengthen Product Information and Comparison Tools",
            "Improve Price-Value Perception",
            "Focus Marketing Resources on High-Engagement Brands",
        ]
        assert [rec.priority for rec in self.report.recommendations] == ["high", "medium", "medium", "medium"]
        assert self.report.recommendations[0].rationale.startswith("67% of sentiment shows fear")
        assert "Consideration scores at 40/100" in self.report.recommendations[1].rationale
        assert "(42/100)" in self.report.recommendations[2].rationale
        assert self.report.recommendations[3].rationale.startswith("Gesits dominates conversation with 2 mentions.")

    def test_key_findings(self):
        assert self.report.key_findings == [
            "Analyzed 3 consumer sentiment documents across electric motorcycle brands.",
            "Dominant emotions: fear (67%), satisfaction (33%).",
            "Key UTAUT2 constructs: Performance Expectancy (50/100), Effort Expectancy (50/100).",
            "Marketing funnel: Strongest at Preference (47/100), weakest at Consideration (40/100).",
        ]

    def test_risks(self):
        assert len(self.report.risks) == 3
        assert self.report.risks[0].startswith("High negative sentiment (fear: 67%)")
        assert self.report.risks[1].startswith("Low Price Value scores (42/100)")
        assert self.report.risks[2].startswith("Critical gap in Consideration (40/100)")

    def test_summary_and_metadata(self):
        assert self.report.executive_summary.startswith(
            "Analysis of 3 consumer sentiment documents reveals fear as the dominant emotional response"
        )
        assert "4 strategic recommendations, including 1 high-priority actions" in self.report.executive_summary
        assert self.report.document_count == 3
        assert self.report.generated_at == GENERATED_AT
        assert len(self.report.next_steps) == 5
        assert self.report.data_availability == {
            "has_emotion_data": True,
            "has_psycho_social_data": True,
            "has_marketing_data": True,
            "has_purchase_intention_data": False,
        }

    def test_indonesian_locale(self):
        report = generate_strategic_report(FEAR_DOCS, locale="id", generated_at=GENERATED_AT)
        assert report.locale == "id"
        assert report.recommendations[0].title == "Atasi Kekhawatiran Konsumen Melalui Transparansi"
        assert "ketakutan" in report.executive_summary
        assert report.key_findings[2] == "Konstruk UTAUT2 utama: Harapan Kinerja (50/100), Harapan Usaha (50/100)."


class TestRecommendationRules:
    """Test individual recommendation branches."""

    def test_trust_dominant(self):
        report = generate_strategic_report(make_documents("Saya percaya Alva", "Saya yakin"), locale="en")
        assert report.recommendations[0].title == "Leverage Trust for Brand Advocacy Programs"
        assert report.recommendations[0].rationale.startswith("100% of sentiment demonstrates trust")

    def test_padding_when_few_signals(self):
        report = generate_strategic_report(make_documents("Halo semua"), locale="en")
        assert [(rec.title, rec.priority) for rec in report.recommendations] == [
            ("Capitalize on Positive Sentiment with Conversion Campaigns", "high"),
            ("Increase Brand Visibility Through Multi-Channel Campaigns", "high"),
            ("Expand Data Collection for Deeper Insights", "low"),
        ]
        assert len(report.risks) == 1
        assert report.risks[0].startswith("Critical gap in Awareness (40/100)")

    def test_social_influence_and_limited_dataset(self):
        report = generate_strategic_report(make_documents("Gesits bagus, mau beli, cari teman"), locale="en")
        titles = [rec.title for rec in report.recommendations]
        assert "Amplify Social Proof and Community Engagement" in titles
        assert report.risks == [
            "Limited dataset size may not capture full market sentiment. Expand data collection to validate findings."
        ]

    def test_at_most_five_recommendations(self):
        report = generate_strategic_report(FEAR_DOCS * 3, locale="en")
        assert 3 <= len(report.recommendations) <= 5


def test_empty_report():
    report = generate_strategic_report([], locale="en", generated_at=GENERATED_AT)
    assert report.executive_summary == (
        "No data available for analysis. Upload documents to generate strategic recommendations."
    )
    assert report.key_findings == []
    assert report.recommendations == []
    assert report.risks == []
    assert report.next_steps == []
    assert not any(report.data_availability.values())


def test_unknown_locale_falls_back_to_english():
    report = generate_strategic_report([], locale="fr")
    assert report.locale == "en"


class TestMarkdown:
    """Test Markdown rendering."""

    def test_english_markdown(self):
        report = generate_strategic_report(FEAR_DOCS, locale="en", generated_at=GENERATED_AT)
        markdown = report_to_markdown(report)
        lines = markdown.split("\n")
        assert lines[0] == "# Strategic Recommendation Report"
        assert "## Report Metadata" in lines
        assert "**Generated on:** 2026-01-02 03:04" in lines
        assert "**Documents Analyzed:** 3" in lines
        assert "**Language:** EN" in lines
        assert "## Key Findings" in lines
        assert "1. Analyzed 3 consumer sentiment documents across electric motorcycle brands." in lines
        assert "### 1. Address Consumer Concerns Through Transparency" in lines
        assert "**Priority:** HIGH" in lines
        assert "## Risks & Watchouts" in lines
        assert "## Next Steps" in lines
        assert lines[-1].startswith("*") and lines[-1].endswith("*")

    def test_indonesian_markdown(self):
        report = generate_strategic_report(FEAR_DOCS, locale="id", generated_at=GENERATED_AT)
        markdown = report_to_markdown(report)
        assert markdown.startswith("# Laporan Rekomendasi Strategis")
        assert "**Prioritas:** TINGGI" in markdown
        assert "## Metadata Laporan" in markdown
        assert "**Bahasa:** ID" in markdown

    def test_empty_report_skips_sections(self):
        markdown = report_to_markdown(generate_strategic_report([], locale="en", generated_at=GENERATED_AT))
        assert "## Executive Summary" in markdown
        assert "## Key Findings" not in markdown
        assert "## Strategic Recommendations" not in markdown


def test_locale_helpers():
    assert get_priority_label("high", "id") == "TINGGI"
    assert get_priority_label("low", "en") == "LOW"
    assert translate_emotion("fear", "id") == "ketakutan"
    assert translate_emotion("Minat", "en") == "interest"
    assert translate_emotion("unknown", "id") == "unknown"
