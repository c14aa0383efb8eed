"""RFC4180 CSV tokenizer.

Handles quoted fields containing commas and newlines, doubled quotes as
escaped literals, and CRLF, LF or CR row terminators.
"""

from typing import List

from ..core.models import ParseStats, RFC4180ParseResult

BOM = "\ufeff"


def parse_rfc4180_csv(content: str) -> RFC4180ParseResult:
    """Tokenize CSV ``content`` into rows of raw (untrimmed) fields."""
    if content.startswith(BOM):
        content = content[1:]

    rows: List[List[str]] = []
    field_counts: List[int] = []
    current_row: List[str] = []
    current_field: List[str] = []
    inside_quotes = False

    def end_row():
        current_row.append("".join(current_field))
        rows.append(list(current_row))
        field_counts.append(len(current_row))
        current_row.clear()
        current_field.clear()

    i = 0
    length = len(content)
    while i < length:
        char = content[i]
        next_char = content[i + 1] if i + 1 < length else ""

        if char == '"':
            if not inside_quotes:
                inside_quotes = True
            elif next_char == '"':
                current_field.append('"')
                i += 1
            else:
                inside_quotes = False
            i += 1
            continue

        if not inside_quotes:
            if char == ",":
                current_row.append("".join(current_field))
                current_field.clear()
                i += 1
                continue
            if char == "\r" and next_char == "\n":
                end_row()
                i += 2
                continue
            if char in ("\n", "\r"):
                end_row()
                i += 1
                continue

        current_field.append(char)
        i += 1

    # flush the last row when the input has no trailing terminator
    if current_field or current_row:
        end_row()

    return RFC4180ParseResult(
        rows=rows,
        stats=ParseStats(total_rows=len(rows), field_counts_per_row=field_counts),
    )


def trim_fields(row: List[str]) -> List[str]:
    return [value.strip() for value in row]
