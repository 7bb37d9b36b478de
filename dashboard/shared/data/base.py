"""Abstract base repository for season data access."""

from __future__ import annotations

from abc import ABC, abstractmethod

from .types import RaceData


class SeasonDataRepository(ABC):
    """Source-agnostic interface for season data access."""

    @abstractmethod
    def get_races(self) -> list[RaceData]: ...

    @abstractmethod
    def describe_source(self) -> str: ...
