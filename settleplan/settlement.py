"""Settlements that plans are built for."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class SettlementType(Enum):
    """Kind of settlement; the value is the number used in configuration lines."""

    VILLAGE = 0
    CITY = 1
    METROPOLIS = 2

    @property
    def label(self) -> str:
        return self.name.capitalize()


@dataclass(frozen=True)
class Settlement:
    """A named settlement of a given type."""

    name: str
    type: SettlementType

    def __str__(self) -> str:
        return f"Settlement {self.name} is a {self.type.label}"