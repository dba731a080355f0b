"""Policies that choose which facility a plan builds next."""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from collections.abc import Sequence

from .facility import FacilityCategory, FacilityType


class SelectionError(RuntimeError):
    """Raised when a policy cannot choose a facility."""


class SelectionPolicy(ABC):
    """Base class for facility selection policies."""

    name = "SelectionPolicy"

    def __init__(self) -> None:
        self.selected: list[FacilityType] = []

    @abstractmethod
    def select_facility(self, options: Sequence[FacilityType]) -> FacilityType:
        """Choose the next facility type from the options."""

    def is_facility_selected(self, facility: FacilityType) -> bool:
        return facility in self.selected

    def mark_facility_as_selected(self, facility: FacilityType) -> None:
        self.selected.append(facility)

    def clone(self) -> "SelectionPolicy":
        """Return an independent copy of this policy and its state."""
        return copy.deepcopy(self)

    def __str__(self) -> str:
        return self.name


class NaiveSelection(SelectionPolicy):
    """Cycles through the options in order."""

    name = "NaiveSelection"

    def __init__(self) -> None:
        super().__init__()
        self._next_index = 0

    def select_facility(self, options: Sequence[FacilityType]) -> FacilityType:
        if not options:
            raise SelectionError("Error: No facilities available for selection")
        index = self._next_index % len(options)
        self._next_index = (index + 1) % len(options)
        return options[index]


class BalancedSelection(SelectionPolicy):
    """Chooses the facility that keeps the three scores closest together."""

    name = "BalancedSelection"

    def __init__(
        self, life_quality_score: int = 0, economy_score: int = 0, environment_score: int = 0
    ) -> None:
        super().__init__()
        self.life_quality_score = life_quality_score
        self.economy_score = economy_score
        self.environment_score = environment_score

    def _distance(self, facility: FacilityType) -> int:
        scores = (
            self.life_quality_score + facility.life_quality_score,
            self.economy_score + facility.economy_score,
            self.environment_score + facility.environment_score,
        )
        top = max(scores)
        return sum(top - score for score in scores)

    def select_facility(self, options: Sequence[FacilityType]) -> FacilityType:
        if not options:
            raise SelectionError("Error: No facilities available for selection")
        best = min(options, key=self._distance)
        self.mark_facility_as_selected(best)
        return best

    def update_score(self, facility: FacilityType) -> None:
        """Add a chosen facility's scores to the running totals."""
        self.life_quality_score += facility.life_quality_score
        self.economy_score += facility.economy_score
        self.environment_score += facility.environment_score

    def clone(self) -> "BalancedSelection":
        return BalancedSelection(
            self.life_quality_score, self.economy_score, self.environment_score
        )


class _CategorySelection(SelectionPolicy):
    """Cycles through the options, taking only those of one category."""

    category: FacilityCategory
    _missing = "Error: No facilities in the category available."

    def __init__(self) -> None:
        super().__init__()
        self._next_index = 0

    def select_facility(self, options: Sequence[FacilityType]) -> FacilityType:
        if not options:
            raise SelectionError("Error: no facilities available for selection.")
        count = len(options)
        for offset in range(count):
            index = (self._next_index + offset) % count
            facility = options[index]
            if facility.category is self.category:
                self._next_index = (index + 1) % count
                return facility
        raise SelectionError(self._missing)

    def clone(self) -> "_CategorySelection":
        return type(self)()


class EconomySelection(_CategorySelection):
    """Cycles through economy facilities."""

    name = "EconomySelection"
    category = FacilityCategory.ECONOMY
    _missing = "Error: No facilities in the Economy category available."

    def select_facility(self, options: Sequence[FacilityType]) -> FacilityType:
        return super().select_facility(options)

    def clone(self) -> "EconomySelection":
        return EconomySelection()


class SustainabilitySelection(_CategorySelection):
    """Cycles through environment facilities."""

    name = "SustainabilitySelection"
    category = FacilityCategory.ENVIRONMENT
    _missing = "Error: No facilities in the Environment category available."

    def select_facility(self, options: Sequence[FacilityType]) -> FacilityType:
        return super().select_facility(options)

    def clone(self) -> "SustainabilitySelection":
        return SustainabilitySelection()