"""Strategic reporting for EVPulse."""

from .locale import get_priority_label, get_report_templates, get_ui_labels, translate_emotion
from .strategic_report import generate_strategic_report, report_to_markdown

__all__ = [
    "generate_strategic_report",
    "report_to_markdown",
    "get_ui_labels",
    "get_priority_label",
    "get_report_templates",
    "translate_emotion",
]
