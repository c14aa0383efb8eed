"""Tests for dashboard payload preparation and JSON export."""

import json

from evpulse import __version__
from evpulse.core.models import DatasetRow, Document
from evpulse.utils.data_prep import build_dashboard_payload, export_to_json


def make_documents(*texts):
    return [Document(id=i, content=text, author="tester", timestamp=0) for i, text in enumerate(texts)]


def test_payload_is_json_serializable():
    documents = make_documents("Gesits bagus sekali", "Saya takut dengan Gesits", "Viar Q1 membuat saya ragu")
    rows = [DatasetRow(text=doc.content, region="Jakarta") for doc in documents]
    payload = build_dashboard_payload(documents, rows)

    json.dumps(payload)
    assert payload["summary"]["total_documents"] == 3
    assert payload["summary"]["total_rows"] == 3
    assert list(payload["emotion_distribution"]) == ["interest", "trust", "fear", "skepticism", "satisfaction"]
    assert payload["brand_mentions"] == {"Gesits": 2, "Viar": 1}
    assert payload["emotion_by_location"]["locations"] == ["Jakarta"]
    assert len(payload["psycho_social_matrix"]["data"]) == 7
    assert list(payload["marketing_funnel"]) == ["Awareness", "Consideration", "Preference", "Intent", "Advocacy"]
    assert payload["rows"][0]["Region"] == "Jakarta"
    assert payload["metadata"] == {"export_timestamp": None, "version": __version__}


def test_payload_for_empty_input():
    payload = build_dashboard_payload([])
    assert payload["summary"]["total_documents"] == 0
    assert payload["summary"]["average_intention_score"] == 0
    assert payload["psycho_social_matrix"]["data"] == []
    assert payload["intention_trends"] == []
    assert payload["rows"] == []


def test_export_to_json(tmp_path):
    payload = build_dashboard_payload(make_documents("Motor listrik Alva nyaman"))
    out = tmp_path / "payload.json"
    export_to_json(payload, str(out))

    data = json.loads(out.read_text(encoding="utf-8"))
    assert data["metadata"]["export_timestamp"] is not None
    assert data["summary"]["total_documents"] == 1


def test_export_keeps_non_ascii(tmp_path):
    out = tmp_path / "data.json"
    export_to_json({"text": "Motor listrik “Gesits”"}, str(out))
    content = out.read_text(encoding="utf-8")
    assert "“Gesits”" in content
    assert json.loads(content)["metadata"]["export_timestamp"]
