"""Utility modules for EVPulse."""

from .data_prep import build_dashboard_payload, export_to_json
from .ingestion import parse_dataset_file

__all__ = [
    "build_dashboard_payload",
    "export_to_json",
    "parse_dataset_file",
]
