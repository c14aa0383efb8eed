"""Tests for dataset ingestion."""

import pytest

from evpulse.core.intention import derive_intention
from evpulse.core.models import IntentionLevel
from evpulse.utils.ingestion import (
    find_best_text_candidate,
    is_suspicious_text,
    normalize_key,
    parse_csv,
    parse_dataset_file,
    parse_json,
    parse_text,
)

SCHEMA_CSV = (
    "ID,Date,Region,Source,User,text,Aspect_Category,Keywords_Extracted\n"
    '1,2024-01-01,Jakarta,Twitter,u1,"Gesits bagus, irit sekali",Product,irit\n'
    "2,2024-01-02,Bali,Twitter,u2,,Price,\n"
)


def test_normalize_key():
    assert normalize_key(" Aspect_Category ") == "aspectcategory"
    assert normalize_key("Keywords Extracted") == "keywordsextracted"
    assert normalize_key("TEXT") == "text"


class TestParseCsv:
    """Test CSV ingestion."""

    def test_schema_rows(self):
        result = parse_csv(SCHEMA_CSV)
        assert result.success
        assert result.valid_count == 1
        assert result.skipped_count == 1
        row = result.rows[0]
        assert row.text == "Gesits bagus, irit sekali"
        assert row.id == "1"
        assert row.region == "Jakarta"
        assert row.aspect_category == "Product"
        assert row.keywords_extracted == "irit"
        expected = derive_intention(row.text)
        assert row.intention_level == expected.level
        assert row.intention_score == expected.score

    def test_header_matching_ignores_case_and_separators(self):
        result = parse_csv("Text,Aspect Category\nhello world review,Service\n")
        assert result.success
        assert result.rows[0].text == "hello world review"
        assert result.rows[0].aspect_category == "Service"

    def test_missing_text_column(self):
        result = parse_csv("id,comment\n1,foo\n")
        assert not result.success
        assert result.error.startswith('Required column "text" not found in CSV')
        assert "ID,Date,Region,Source,User,text,Aspect_Category,Keywords_Extracted" in result.error
        assert result.diagnostics.text_index == -1
        assert result.diagnostics.normalized_headers == ["id", "comment"]

    @pytest.mark.parametrize("content", ["", "text\n"])
    def test_no_data_rows(self, content):
        result = parse_csv(content)
        assert not result.success
        assert result.error == "CSV file is empty or has no data rows"
        assert result.rows == []

    def test_all_rows_without_text(self):
        result = parse_csv("text,id\n,1\n,2\n")
        assert not result.success
        assert result.error == 'No valid rows with non-empty "text" column found'
        assert result.skipped_count == 2

    def test_blank_lines_are_skipped(self):
        result = parse_csv("text\nhello there\n\nanother review\n")
        assert result.valid_count == 2
        assert result.skipped_count == 1

    def test_crlf_and_bom(self):
        result = parse_csv("\ufefftext\r\nfirst review here\r\nsecond review here\r\n")
        assert result.success
        assert [row.text for row in result.rows] == ["first review here", "second review here"]

    def test_text_recovered_from_misaligned_column(self):
        sentence = "Motor listrik ini sangat irit dan nyaman dipakai"
        result = parse_csv(f"ID,text,Sentiment\n1,positive,{sentence}\n")
        assert result.success
        assert result.rows[0].text == sentence
        assert result.diagnostics.recovery_applied_count == 1

    def test_provided_intention_values(self):
        content = (
            "text,intention_level,intention_score\n"
            "review satu yang panjang,Tinggi,88\n"
            "review dua yang panjang,,\n"
        )
        result = parse_csv(content)
        first, second = result.rows
        assert first.intention_level == IntentionLevel.HIGH
        assert first.intention_score == 88
        derived = derive_intention("review dua yang panjang")
        assert second.intention_level == derived.level
        assert second.intention_score == derived.score

    def test_diagnostics_preview_is_limited(self):
        content = "text\n" + "".join(f"review number {i}\n" for i in range(10))
        result = parse_csv(content)
        assert result.valid_count == 10
        assert len(result.diagnostics.sample_rows) == 4
        assert result.diagnostics.field_counts_per_row == [1] * 11


class TestParseJson:
    """Test JSON ingestion."""

    def test_array_of_objects(self):
        result = parse_json('[{"Text": "Alva keren", "Region": "Bali", "ID": 7}, {"text": ""}, 5]')
        assert result.success
        assert result.valid_count == 1
        assert result.skipped_count == 2
        assert result.rows[0].region == "Bali"
        assert result.rows[0].id == "7"

    def test_intention_values_are_validated(self):
        result = parse_json('[{"text": "review", "intention_score": 72.6, "intention_level": "rendah"}]')
        row = result.rows[0]
        assert row.intention_score == 73
        assert row.intention_level == IntentionLevel.LOW

    def test_oversized_intention_score_is_repaired(self):
        content = (
            '[{"text": "Gesits irit sekali", "intention_score": 1' + "0" * 400 + '},'
            ' {"text": "Viar Q1 nyaman"}]'
        )
        result = parse_json(content)
        assert result.success
        assert result.valid_count == 2
        assert result.rows[0].intention_score == 0

    @pytest.mark.parametrize("content,error", [
        ("{}", "JSON file must contain an array of objects"),
        ("[]", "JSON file is empty"),
    ])
    def test_structural_errors(self, content, error):
        result = parse_json(content)
        assert not result.success
        assert result.error == error

    def test_invalid_json(self):
        result = parse_json("not json")
        assert not result.success
        assert result.error.startswith("Failed to parse JSON file")

    def test_missing_text_key(self):
        result = parse_json('[{"comment": "x"}]')
        assert not result.success
        assert result.error.startswith('Required field "text" not found in JSON')


class TestParseDatasetFile:
    """Test extension dispatch."""

    def test_txt_is_single_document(self):
        result = parse_dataset_file("  hello  ", "notes.txt")
        assert result.success
        assert [row.text for row in result.rows] == ["hello"]

    def test_empty_txt(self):
        result = parse_text("   ")
        assert not result.success
        assert result.error == "Text file is empty"

    def test_extension_is_case_insensitive(self):
        result = parse_dataset_file(SCHEMA_CSV, "DATA.CSV")
        assert result.success

    def test_unsupported_extension(self):
        result = parse_dataset_file("x", "data.xlsx")
        assert not result.success
        assert result.error == "Unsupported file format: .xlsx. Use .csv, .json, .txt"


class TestTextRecovery:
    """Test suspicious-text detection."""

    def test_is_suspicious_text(self):
        assert is_suspicious_text("Positive")
        assert is_suspicious_text("short")
        assert not is_suspicious_text("This is a real review")

    def test_find_best_text_candidate(self):
        fields = ["a", "short one", "this one is definitely the longest"]
        assert find_best_text_candidate(fields) == (2, "this one is definitely the longest")
        assert find_best_text_candidate(["a", "b"]) is None
