"""Source-agnostic season data error."""

from __future__ import annotations


class SeasonDataError(Exception):
    """Season data could not be loaded. UI catches only this."""
