"""EVPulse - consumer sentiment analytics for Indonesian electric motorcycles."""

__version__ = "1.0.0"
__author__ = "EVPulse Team"

from .core.models import *
from .core.config import settings
from .services.document_store import DocumentStore
from .reporting.strategic_report import generate_strategic_report

__all__ = [
    "settings",
    "DocumentStore",
    "generate_strategic_report",
]
