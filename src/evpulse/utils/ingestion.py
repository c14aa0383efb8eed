"""Dataset ingestion for uploaded CSV, JSON and TXT files.

Rows are normalized onto the schema
``ID,Date,Region,Source,User,text,Aspect_Category,Keywords_Extracted``.
Headers and keys match case-insensitively and ignore whitespace and
underscores. Rows without text are skipped and counted, never fatal, and
malformed input is reported through ``ParseResult`` instead of raising.
"""

import json
import logging
import re
from typing import Any, Dict, List, Optional, Tuple

from ..core.config import settings
from ..core.constants import IngestionConstants
from ..core.intention import derive_intention, validate_intention_level, validate_intention_score
from ..core.models import DatasetRow, ParseDiagnostics, ParseResult, SampleRow
from .csv_rfc4180 import BOM, parse_rfc4180_csv, trim_fields

logger = logging.getLogger(__name__)

_KEY_SEPARATORS = re.compile(r"[\s_]+")


def normalize_key(key: str) -> str:
    """'Aspect_Category ' -> 'aspectcategory'."""
    return _KEY_SEPARATORS.sub("", str(key).strip().lower())


def _failure(error: str, skipped_count: int = 0, diagnostics: Optional[ParseDiagnostics] = None) -> ParseResult:
    logger.warning(f"Dataset ingestion failed: {error}")
    return ParseResult(
        success=False,
        rows=[],
        error=error,
        skipped_count=skipped_count,
        valid_count=0,
        diagnostics=diagnostics,
    )


def _success(rows: List[DatasetRow], skipped_count: int, diagnostics: Optional[ParseDiagnostics] = None) -> ParseResult:
    logger.info(f"Ingested {len(rows)} rows ({skipped_count} skipped)")
    return ParseResult(
        success=True,
        rows=rows,
        skipped_count=skipped_count,
        valid_count=len(rows),
        diagnostics=diagnostics,
    )


# --- Text recovery for misaligned CSV columns ---

def is_suspicious_text(text: str) -> bool:
    """A sentiment/category token or a very short value is not review text."""
    trimmed = text.strip()
    if trimmed.lower() in IngestionConstants.SUSPICIOUS_TOKENS:
        return True
    return len(trimmed) < IngestionConstants.MIN_TEXT_LENGTH


def find_best_text_candidate(fields: List[str]) -> Optional[Tuple[int, str]]:
    """Longest sentence-like field (long enough and containing a space)."""
    best_index, best_length = -1, 0
    for index, value in enumerate(fields):
        value = value.strip()
        if len(value) >= IngestionConstants.MIN_CANDIDATE_LENGTH and " " in value and len(value) > best_length:
            best_index, best_length = index, len(value)
    if best_index == -1:
        return None
    return best_index, fields[best_index].strip()


def recover_text_value(fields: List[str], text_index: int) -> Tuple[str, bool]:
    """
    Return the row's text and whether it was recovered from another column.

    Only a non-empty but suspicious text cell triggers recovery; an empty
    cell stays empty so the row is skipped.
    """
    original = fields[text_index].strip() if text_index < len(fields) else ""
    if not original or not is_suspicious_text(original):
        return original, False

    candidate = find_best_text_candidate(fields)
    if candidate and candidate[1] != original:
        return candidate[1], True
    return original, False


def _apply_intention(row: DatasetRow, level: Any = None, score: Any = None) -> None:
    """Validate provided intention values and derive the missing ones from text."""
    has_level = level not in (None, "")
    has_score = score not in (None, "")
    if has_level:
        row.intention_level = validate_intention_level(level)
    if has_score:
        row.intention_score = validate_intention_score(score)
    if not (has_level and has_score):
        derived = derive_intention(row.text)
        if not has_level:
            row.intention_level = derived.level
        if not has_score:
            row.intention_score = derived.score


# --- CSV ---

def _sample_rows(raw_rows: List[List[str]], limit: int, max_fields: Optional[int] = None) -> List[SampleRow]:
    return [
        SampleRow(row_index=index, field_count=len(fields), fields=trim_fields(fields)[:max_fields])
        for index, fields in enumerate(raw_rows[:limit])
    ]


def parse_csv(content: str) -> ParseResult:
    """Parse CSV content with a required ``text`` column."""
    parsed = parse_rfc4180_csv(content)
    raw_rows = parsed.rows

    if len(raw_rows) < 2:
        return _failure("CSV file is empty or has no data rows")

    header_row = trim_fields(raw_rows[0])
    normalized_headers = [normalize_key(header) for header in header_row]

    if IngestionConstants.TEXT_KEY not in normalized_headers:
        diagnostics = ParseDiagnostics(
            normalized_headers=normalized_headers,
            text_index=-1,
            field_counts_per_row=parsed.stats.field_counts_per_row,
            sample_rows=_sample_rows(raw_rows, 3),
        )
        return _failure(
            f'Required column "text" not found in CSV. Expected format: {IngestionConstants.SCHEMA}',
            diagnostics=diagnostics,
        )

    text_index = normalized_headers.index(IngestionConstants.TEXT_KEY)
    level_index = _index_or_none(normalized_headers, IngestionConstants.INTENTION_LEVEL_KEY)
    score_index = _index_or_none(normalized_headers, IngestionConstants.INTENTION_SCORE_KEY)

    rows: List[DatasetRow] = []
    skipped_count = 0
    recovered_count = 0

    for raw_fields in raw_rows[1:]:
        fields = trim_fields(raw_fields)
        if not any(fields):
            skipped_count += 1
            continue

        text, recovered = recover_text_value(fields, text_index)
        if recovered:
            recovered_count += 1
        if not text:
            skipped_count += 1
            continue

        row = DatasetRow(text=text)
        for index, header in enumerate(normalized_headers[:len(fields)]):
            attribute = IngestionConstants.FIELD_MAP.get(header)
            if attribute:
                setattr(row, attribute, fields[index])

        _apply_intention(
            row,
            level=_field_or_none(fields, level_index),
            score=_field_or_none(fields, score_index),
        )
        rows.append(row)

    if recovered_count:
        logger.info(f"Recovered text from another column in {recovered_count} rows")

    diagnostics = ParseDiagnostics(
        normalized_headers=normalized_headers,
        text_index=text_index,
        field_counts_per_row=parsed.stats.field_counts_per_row,
        sample_rows=_sample_rows(raw_rows, settings.max_preview_rows, IngestionConstants.MAX_PREVIEW_FIELDS),
        recovery_applied_count=recovered_count,
    )

    if not rows:
        return _failure('No valid rows with non-empty "text" column found', skipped_count, diagnostics)
    return _success(rows, skipped_count, diagnostics)


def _index_or_none(headers: List[str], key: str) -> Optional[int]:
    return headers.index(key) if key in headers else None


def _field_or_none(fields: List[str], index: Optional[int]) -> Optional[str]:
    if index is None or index >= len(fields):
        return None
    return fields[index] or None


# --- JSON ---

def _stringify(value: Any) -> str:
    return "" if value is None else str(value)


def parse_json(content: str) -> ParseResult:
    """Parse a JSON array of objects carrying a ``text`` key (any casing)."""
    try:
        data = json.loads(content.lstrip(BOM))
    except (json.JSONDecodeError, TypeError) as e:
        return _failure(f"Failed to parse JSON file: {e}")

    if not isinstance(data, list):
        return _failure("JSON file must contain an array of objects")
    if not data:
        return _failure("JSON file is empty")

    has_text_field = any(
        isinstance(item, dict) and any(normalize_key(key) == IngestionConstants.TEXT_KEY for key in item)
        for item in data
    )
    if not has_text_field:
        return _failure('Required field "text" not found in JSON. Expected format: array of objects with "text" key')

    rows: List[DatasetRow] = []
    skipped_count = 0

    for item in data:
        if not isinstance(item, dict):
            skipped_count += 1
            continue

        normalized: Dict[str, Any] = {}
        for key, value in item.items():
            normalized.setdefault(normalize_key(key), value)

        text = _stringify(normalized.get(IngestionConstants.TEXT_KEY)).strip()
        if not text:
            skipped_count += 1
            continue

        row = DatasetRow(text=text)
        for key, attribute in IngestionConstants.FIELD_MAP.items():
            if key in normalized:
                setattr(row, attribute, _stringify(normalized[key]))

        _apply_intention(
            row,
            level=normalized.get(IngestionConstants.INTENTION_LEVEL_KEY),
            score=normalized.get(IngestionConstants.INTENTION_SCORE_KEY),
        )
        rows.append(row)

    if not rows:
        return _failure('No valid rows with non-empty "text" field found', skipped_count)
    return _success(rows, skipped_count)


# --- TXT ---

def parse_text(content: str) -> ParseResult:
    """A plain text file is a single document."""
    text = content.lstrip(BOM).strip()
    if not text:
        return _failure("Text file is empty")
    row = DatasetRow(text=text)
    _apply_intention(row)
    return _success([row], 0)


def file_extension(filename: str) -> str:
    return filename.lower().rsplit(".", 1)[-1] if "." in filename else ""


def parse_dataset_file(content: str, filename: str) -> ParseResult:
    """Parse an uploaded dataset file, dispatching on its extension."""
    extension = file_extension(filename)
    try:
        if extension == "csv":
            return parse_csv(content)
        if extension == "json":
            return parse_json(content)
        if extension == "txt":
            return parse_text(content)
    except Exception as e:
        logger.error(f"Unexpected error while parsing {filename}: {e}", exc_info=True)
        return _failure(f"Failed to parse {extension.upper()} file: {e}")

    supported = ", ".join(f".{ext}" for ext in IngestionConstants.SUPPORTED_EXTENSIONS)
    return _failure(f"Unsupported file format: .{extension}. Use {supported}")
