"""Shared test fixtures and sample season files."""

from __future__ import annotations

import pytest

SEASON_URL = "https://example.com/season.csv"

HEADER = "Driver,CarNo,Date,RaceNumber,Reaction,60ft,330ft,1/8ET,1/8MPH,Opponent,OpponentCarNo,WinLoss"

SAMPLE_CSV = "\n".join([
    HEADER,
    "Jerry Williams,934,2024-03-14,1,0.1234,1.3456,4.5678,7.8912,165.43,Mike Anderson,993,Win",
    "Mike Anderson,993,2024-03-14,1,0.2345,1.4567,4.6789,8.0123,160.12,Jerry Williams,934,Loss",
    "Kavon Tibbs,316,2024-03-14,2,0.0500,,4.4000,,,Bye,N/A,Win",
    "",
    "Jerry Williams,934,2024-04-25,1,,1.3000,4.5000,7.7000,170.00,Kavon Tibbs,316,Loss",
    "Kavon Tibbs,316,2024-04-25,1,0.0900,1.2900,4.4500,7.6500,171.50,Jerry Williams,934,Win",
]) + "\n"


@pytest.fixture
def sample_csv() -> str:
    return SAMPLE_CSV


@pytest.fixture
def season_file(tmp_path):
    """A season CSV on disk with five records."""
    path = tmp_path / "season.csv"
    path.write_text(SAMPLE_CSV, encoding="utf-8")
    return path
