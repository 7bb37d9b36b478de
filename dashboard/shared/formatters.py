"""Formatting helpers for the drag-racing dashboard."""

from __future__ import annotations

MISSING = "N/A"


def format_time(seconds: float | None) -> str:
    """Format a timing value as s.fff, or 'N/A' when missing."""
    if not seconds or seconds <= 0:
        return MISSING
    return f"{seconds:.3f}"


def format_speed(mph: float | None) -> str:
    """Format a trap speed as ddd.dd, or 'N/A' when missing."""
    if not mph or mph <= 0:
        return MISSING
    return f"{mph:.2f}"


def format_percent(percent: float | None) -> str:
    """Format a percentage with one decimal; zero stays '0%'."""
    if percent is None:
        return MISSING
    if percent == 0:
        return "0%"
    return f"{percent:.1f}%"


def format_short_name(driver: str) -> str:
    """Abbreviate 'First Last' to 'First L.' for chart labels."""
    parts = driver.split()
    if len(parts) < 2:
        return driver
    return f"{parts[0]} {parts[1][0]}."


def format_delta(delta: float, unit: str = "s") -> str:
    """Format a signed change such as '-0.123s' or '+2.50mph'."""
    digits = 2 if unit == "mph" else 3
    return f"{delta:+.{digits}f}{unit}"
