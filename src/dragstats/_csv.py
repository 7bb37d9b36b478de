"""Season CSV codec: header contract, parsing and rendering."""

from __future__ import annotations

import csv
import io
from collections.abc import Iterable
from typing import Any

from pydantic import TypeAdapter

from dragstats.exceptions import DragStatsValidationError
from dragstats.models.race import RaceRecord

CSV_COLUMNS: tuple[str, ...] = (
    "Driver",
    "CarNo",
    "Date",
    "RaceNumber",
    "Reaction",
    "60ft",
    "330ft",
    "1/8ET",
    "1/8MPH",
    "Opponent",
    "OpponentCarNo",
    "WinLoss",
)

REQUIRED_COLUMNS = frozenset({"Driver", "CarNo", "Date", "RaceNumber", "WinLoss"})

_RECORDS_ADAPTER = TypeAdapter(list[RaceRecord])


def _clean_row(row: dict[str | None, Any]) -> dict[str, Any]:
    """Strip whitespace and drop overflow cells (DictReader's ``None`` key)."""
    return {
        key.strip(): value.strip() if isinstance(value, str) else value
        for key, value in row.items()
        if key is not None
    }


def parse_season_csv(text: str) -> list[RaceRecord]:
    """Parse season CSV text into validated race records.

    A leading UTF-8 byte-order mark and blank lines are skipped. A missing
    required column or any row that fails model validation raises
    DragStatsValidationError; no partial result is returned.
    """
    reader = csv.DictReader(io.StringIO(text.removeprefix("\ufeff")))
    header = {name.strip() for name in reader.fieldnames or []}
    missing = sorted(REQUIRED_COLUMNS - header)
    if missing:
        raise DragStatsValidationError(
            f"Season CSV is missing required columns: {', '.join(missing)}"
        )

    rows = [
        _clean_row(row) for row in reader
        if any(isinstance(v, str) and v.strip() for v in row.values())
    ]
    try:
        return _RECORDS_ADAPTER.validate_python(rows)
    except Exception as exc:
        raise DragStatsValidationError(
            f"Failed to validate season CSV rows: {exc}"
        ) from exc


def _format_cell(value: Any) -> str:
    if value is None:
        return ""
    if hasattr(value, "isoformat"):
        return value.isoformat()
    if hasattr(value, "value"):
        return str(value.value)
    return str(value)


def render_season_csv(records: Iterable[RaceRecord]) -> str:
    """Render race records as season CSV text using the canonical header."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(CSV_COLUMNS)
    for record in records:
        dumped = record.model_dump(by_alias=True)
        writer.writerow([_format_cell(dumped[column]) for column in CSV_COLUMNS])
    return buffer.getvalue()
