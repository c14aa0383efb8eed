"""Tests for the RFC4180 CSV tokenizer."""

from evpulse.utils.csv_rfc4180 import parse_rfc4180_csv, trim_fields


def test_quoted_commas_and_escaped_quotes():
    """Quoted fields keep commas and doubled quotes become one quote."""
    result = parse_rfc4180_csv('a,b,"c,d"\n1,2,"3""4"')
    assert result.rows == [["a", "b", "c,d"], ["1", "2", '3"4']]
    assert result.stats.total_rows == 2
    assert result.stats.field_counts_per_row == [3, 3]


def test_crlf_terminators():
    result = parse_rfc4180_csv("a,b\r\nc,d\r\n")
    assert result.rows == [["a", "b"], ["c", "d"]]


def test_bare_cr_terminator():
    result = parse_rfc4180_csv("a\rb")
    assert result.rows == [["a"], ["b"]]


def test_newline_inside_quotes_is_part_of_field():
    result = parse_rfc4180_csv('a,"line1\nline2"\n')
    assert result.rows == [["a", "line1\nline2"]]


def test_trailing_comma_yields_empty_last_field():
    result = parse_rfc4180_csv("a,\n")
    assert result.rows == [["a", ""]]
    assert result.stats.field_counts_per_row == [2]


def test_last_row_without_terminator_is_flushed():
    result = parse_rfc4180_csv("x,y\n1,2")
    assert result.rows[-1] == ["1", "2"]


def test_empty_input():
    result = parse_rfc4180_csv("")
    assert result.rows == []
    assert result.stats.total_rows == 0


def test_bom_is_stripped():
    result = parse_rfc4180_csv("\ufeffa,b\n1,2\n")
    assert result.rows[0] == ["a", "b"]


def test_fields_are_not_trimmed_by_tokenizer():
    result = parse_rfc4180_csv(" a , b \n")
    assert result.rows == [[" a ", " b "]]
    assert trim_fields(result.rows[0]) == ["a", "b"]
