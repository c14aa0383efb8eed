"""Streamlit dashboard for EVPulse."""

import logging

import pandas as pd
import streamlit as st

from evpulse.core import aggregation
from evpulse.core.classifier import classify, emotion_display_label
from evpulse.core.config import settings
from evpulse.core.constants import AggregationConstants, IngestionConstants
from evpulse.core.intention import derive_intention
from evpulse.core.models import DimensionFamily
from evpulse.core.scoring import family_labels
from evpulse.reporting.locale import get_priority_label, get_ui_labels
from evpulse.reporting.strategic_report import generate_strategic_report, report_to_markdown
from evpulse.services.document_store import DocumentStore
from evpulse.utils.ingestion import parse_dataset_file

# Configure logging
logging.basicConfig(level=getattr(logging, settings.log_level.upper(), logging.INFO))
logger = logging.getLogger(__name__)


def _excerpt(s, n=120):
    s = (s or "").strip().replace("\n", " ")
    return s if len(s) <= n else s[:n-1] + "…"


def _emotion_columns(locale):
    return [emotion_display_label(emotion, locale) for emotion in aggregation.EMOTIONS]


# Page configuration
st.set_page_config(
    page_title="EVPulse: Electric Motorcycle Sentiment",
    page_icon="🛵",
    layout="wide"
)

# Session state holds the document store and the last uploaded rows
if "store" not in st.session_state:
    st.session_state["store"] = DocumentStore()
if "rows" not in st.session_state:
    st.session_state["rows"] = []

store: DocumentStore = st.session_state["store"]

# Main UI
st.title("🛵 EVPulse: Electric Motorcycle Sentiment")
st.write("Emotion, purchase intention and UTAUT2 analytics for Indonesian electric motorcycle reviews.")

with st.sidebar:
    st.header("📂 Dataset")
    locale = st.radio("Language / Bahasa", ["id", "en"], index=0 if settings.default_locale == "id" else 1)

    uploaded = st.file_uploader(
        "Upload dataset",
        type=list(IngestionConstants.SUPPORTED_EXTENSIONS),
        help=f"Expected CSV columns: {IngestionConstants.SCHEMA}",
    )
    if uploaded is not None and st.button("📥 Ingest file", width='stretch'):
        content = uploaded.getvalue().decode("utf-8", errors="replace")
        result = parse_dataset_file(content, uploaded.name)
        if not result.success:
            st.error(result.error)
            if result.diagnostics:
                with st.expander("🔎 Parse diagnostics"):
                    st.json({
                        "normalized_headers": result.diagnostics.normalized_headers,
                        "text_index": result.diagnostics.text_index,
                        "field_counts_per_row": result.diagnostics.field_counts_per_row[:20],
                        "sample_rows": [sample.fields for sample in result.diagnostics.sample_rows],
                    })
        else:
            progress = st.progress(0.0)
            store.upload_batch(
                [row.text for row in result.rows],
                author=uploaded.name,
                progress_callback=lambda done, total: progress.progress(done / total),
            )
            st.session_state["rows"] = st.session_state["rows"] + result.rows
            st.success(f"Uploaded {result.valid_count} documents ({result.skipped_count} skipped)")
            if result.diagnostics and result.diagnostics.recovery_applied_count:
                st.info(f"Recovered text for {result.diagnostics.recovery_applied_count} misaligned rows")

    st.subheader("✍️ Single document")
    single_text = st.text_area("Review text", height=100)
    if st.button("Add document", width='stretch') and single_text.strip():
        store.upload_document(single_text.strip(), author="manual")
        st.rerun()

    if st.button("🗑️ Clear all documents", width='stretch'):
        store.clear()
        st.session_state["rows"] = []
        st.rerun()

documents = store.get_all_documents()
rows = st.session_state["rows"]

# Key metrics
col1, col2, col3, col4 = st.columns(4)
intention = aggregation.compute_intention_distribution(documents)
with col1:
    st.metric("Documents", len(documents))
with col2:
    st.metric("Average Intention", f"{aggregation.compute_average_intention_score(documents)}/100")
with col3:
    st.metric("High Intention", intention.high)
with col4:
    st.metric("Brands Mentioned", len(aggregation.compute_brand_mentions(documents)))

if not documents:
    st.info("No documents yet. Upload a CSV, JSON or TXT dataset from the sidebar to begin.")

emotion_tab, intention_tab, utaut_tab, marketing_tab, documents_tab, report_tab = st.tabs([
    "😊 Emotions", "🛒 Purchase Intention", "🧠 UTAUT2", "📣 Marketing", "📄 Documents", "📑 Report",
])

with emotion_tab:
    columns = _emotion_columns(locale)
    distribution = aggregation.compute_emotion_distribution(documents)

    st.subheader("Emotion Distribution")
    st.bar_chart(pd.DataFrame(
        {"count": list(distribution.values())},
        index=columns,
    ))

    st.subheader("Emotion by Brand")
    by_brand = aggregation.compute_emotion_by_brand(documents)
    if by_brand:
        st.bar_chart(pd.DataFrame(
            [[entry.counts[emotion] for emotion in aggregation.EMOTIONS] for entry in by_brand],
            index=[entry.brand for entry in by_brand],
            columns=columns,
        ))
    else:
        st.caption("No brand mentions found.")

    st.subheader("Emotion by Gender")
    st.caption("Placeholder split: documents carry no gender metadata.")
    by_gender = aggregation.compute_emotion_by_gender(documents)
    st.bar_chart(pd.DataFrame(
        {
            AggregationConstants.MALE_LABEL: [entry.male_count for entry in by_gender],
            AggregationConstants.FEMALE_LABEL: [entry.female_count for entry in by_gender],
        },
        index=columns,
    ))

    st.subheader("Emotion by Location")
    location = aggregation.compute_emotion_by_location(rows)
    if location.locations:
        st.dataframe(pd.DataFrame(location.data, index=location.locations, columns=columns))
    else:
        st.caption("No rows with a recognised Region value.")

    st.subheader("Emotion Evolution")
    periods = aggregation.compute_temporal_emotion_evolution(documents)
    if periods:
        st.line_chart(pd.DataFrame(
            [[period.counts[emotion] for emotion in aggregation.EMOTIONS] for period in periods],
            index=[period.period for period in periods],
            columns=columns,
        ))

with intention_tab:
    st.subheader("Purchase Intention Distribution")
    st.bar_chart(pd.DataFrame({"count": list(intention.as_dict().values())}, index=["High", "Medium", "Low"]))

    st.subheader("Intention by Brand")
    intention_by_brand = aggregation.compute_intention_by_brand(documents)
    if intention_by_brand:
        st.bar_chart(pd.DataFrame(
            {
                "High": [entry.high for entry in intention_by_brand],
                "Medium": [entry.medium for entry in intention_by_brand],
                "Low": [entry.low for entry in intention_by_brand],
            },
            index=[entry.brand for entry in intention_by_brand],
        ))
    else:
        st.caption("No brand mentions found.")

    st.subheader("Intention Trend")
    trends = aggregation.compute_intention_trends(documents)
    if trends:
        st.line_chart(pd.DataFrame({"trend": [point.trend for point in trends]}, index=[point.id for point in trends]))
        st.caption(", ".join(f"#{point.id}: {point.intention_level.value}" for point in trends))

with utaut_tab:
    st.subheader("UTAUT2 × Emotion Heatmap")
    matrix = aggregation.compute_psycho_social_matrix(documents)
    if aggregation.validate_matrix_dimensions(matrix, len(family_labels(DimensionFamily.UTAUT2)), len(aggregation.EMOTIONS)):
        st.dataframe(pd.DataFrame(matrix, index=family_labels(DimensionFamily.UTAUT2), columns=_emotion_columns(locale)))
    else:
        st.caption("Upload documents to populate the heatmap.")

    st.subheader("Psycho-social Dimensions")
    psycho = aggregation.compute_dimension_averages(documents, DimensionFamily.PSYCHO_SOCIAL)
    st.bar_chart(pd.DataFrame({"score": [entry.score for entry in psycho]}, index=[entry.dimension for entry in psycho]))

with marketing_tab:
    col1, col2 = st.columns(2)
    with col1:
        st.subheader("Marketing Mix (8P)")
        mix = aggregation.compute_marketing_mix_scores(documents)
        st.bar_chart(pd.DataFrame(
            {"score": [entry.score for entry in mix]},
            index=family_labels(DimensionFamily.MARKETING_MIX),
        ))
    with col2:
        st.subheader("Marketing Funnel")
        funnel = aggregation.compute_marketing_metrics(documents)
        st.bar_chart(pd.DataFrame({"score": [entry.score for entry in funnel]}, index=[entry.dimension for entry in funnel]))

with documents_tab:
    st.subheader("Recent Analysis")
    if documents:
        records = []
        for doc in reversed(documents):
            classification = classify(doc.content)
            result = derive_intention(doc.content)
            records.append({
                "id": doc.id,
                "author": doc.author,
                "text": _excerpt(doc.content),
                "emotion": emotion_display_label(classification.emotion, locale),
                "brand": classification.brand or "-",
                "intention": f"{result.level.value} ({result.score})",
            })
        st.dataframe(pd.DataFrame(records), hide_index=True)

        delete_id = st.number_input("Document id", min_value=0, step=1)
        if st.button("Delete document"):
            if store.delete_document(int(delete_id)):
                st.rerun()
            else:
                st.warning(f"Document {int(delete_id)} not found")
    else:
        st.caption("No documents uploaded.")

with report_tab:
    labels = get_ui_labels(locale)
    st.subheader(labels["page_title"])
    st.caption(labels["page_description"])

    report = generate_strategic_report(documents, locale=locale, has_purchase_intention_data=bool(rows))
    if not documents:
        st.warning(f"**{labels['no_data_title']}**: {labels['no_data_description']}")
    else:
        with st.expander(labels["report_metadata"]):
            st.write(f"**{labels['generated_on']}:** {report.generated_at:%Y-%m-%d %H:%M}")
            st.write(f"**{labels['documents_analyzed']}:** {report.document_count}")
            st.write(f"**{labels['language_label']}:** {report.locale.upper()}")

        if not report.data_availability["has_purchase_intention_data"]:
            st.info(f"**{labels['purchase_intention_notice']}**: {labels['purchase_intention_notice_description']}")

        st.markdown(f"### {labels['executive_summary']}")
        st.write(report.executive_summary)

        st.markdown(f"### {labels['key_findings']}")
        for finding in report.key_findings:
            st.write(f"• {finding}")

        st.markdown(f"### {labels['strategic_recommendations']}")
        st.caption(labels["recommendations_description"])
        for i, rec in enumerate(report.recommendations, 1):
            with st.expander(f"{i}. {rec.title} · {get_priority_label(rec.priority, locale)}"):
                st.write(rec.rationale)

        st.markdown(f"### {labels['risks_watchouts']}")
        for risk in report.risks:
            st.write(f"⚠️ {risk}")

        st.markdown(f"### {labels['next_steps']}")
        for i, step in enumerate(report.next_steps, 1):
            st.write(f"{i}. {step}")

        st.download_button(
            labels["copy_markdown"],
            data=report_to_markdown(report),
            file_name=f"strategic_report_{locale}.md",
            mime="text/markdown",
        )
