"""Tests for the command-line interface."""

import json

import pytest

from evpulse.cli import main

DATASET = (
    "ID,Date,Region,Source,User,text,Aspect_Category,Keywords_Extracted\n"
    '1,2024-01-01,Jakarta,Twitter,u1,"Gesits bagus, irit sekali",Product,irit\n'
    "2,2024-01-02,Bali,Twitter,u2,Saya takut baterai Viar cepat rusak,Battery,baterai\n"
    "3,2024-01-03,Papua,Twitter,u3,,Price,\n"
)


@pytest.fixture
def dataset(tmp_path):
    path = tmp_path / "reviews.csv"
    path.write_text(DATASET, encoding="utf-8")
    return path


def test_ingest(dataset, capsys):
    main(["ingest", str(dataset)])
    output = capsys.readouterr().out
    assert "Parsed 2 rows" in output
    assert "(1 skipped)" in output


def test_ingest_failure_exits_with_status_1(tmp_path, capsys):
    path = tmp_path / "bad.csv"
    path.write_text("id,comment\n1,foo\n", encoding="utf-8")
    with pytest.raises(SystemExit) as excinfo:
        main(["ingest", str(path)])
    assert excinfo.value.code == 1
    assert 'Required column "text" not found' in capsys.readouterr().out


def test_missing_file_exits_with_status_1(tmp_path):
    with pytest.raises(SystemExit) as excinfo:
        main(["ingest", str(tmp_path / "missing.csv")])
    assert excinfo.value.code == 1


def test_analyze_exports_payload(dataset, tmp_path, capsys):
    out = tmp_path / "analysis.json"
    main(["analyze", str(dataset), "--out", str(out)])

    data = json.loads(out.read_text(encoding="utf-8"))
    assert data["summary"]["total_documents"] == 2
    assert data["emotion_by_location"]["locations"] == ["Jakarta", "Bali"]
    assert data["metadata"]["export_timestamp"]
    assert "Documents: 2" in capsys.readouterr().out


def test_report_writes_markdown(dataset, tmp_path):
    out = tmp_path / "report.md"
    main(["report", str(dataset), "--locale", "id", "--out", str(out)])
    markdown = out.read_text(encoding="utf-8")
    assert markdown.startswith("# Laporan Rekomendasi Strategis")


def test_report_prints_markdown(dataset, capsys):
    main(["report", str(dataset), "--locale", "en"])
    assert "# Strategic Recommendation Report" in capsys.readouterr().out


def test_no_command_prints_help(capsys):
    main([])
    assert "usage" in capsys.readouterr().out.lower()
