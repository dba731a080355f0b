"""Development plans that build facilities in a settlement step by step."""

from __future__ import annotations

import copy
import sys
from enum import Enum

from .facility import Facility, FacilityStatus, FacilityType
from .selection_policy import BalancedSelection, SelectionError, SelectionPolicy
from .settlement import Settlement, SettlementType


class PlanStatus(Enum):
    AVAILABLE = "Available"
    BUSY = "Busy"


_CONSTRUCTION_LIMITS = {
    SettlementType.VILLAGE: 1,
    SettlementType.CITY: 2,
    SettlementType.METROPOLIS: 3,
}


def construction_limit(settlement: Settlement) -> int:
    """Number of facilities a settlement can have under construction at once."""
    return _CONSTRUCTION_LIMITS.get(settlement.type, 0)


class Plan:
    """A plan for one settlement, choosing facilities with a selection policy.

    The facility options list is shared with the owner, so facilities added
    to it later become available to the plan.
    """

    def __init__(
        self,
        plan_id: int,
        settlement: Settlement,
        selection_policy: SelectionPolicy,
        facility_options: list[FacilityType],
    ) -> None:
        self.plan_id = plan_id
        self.settlement = settlement
        self.selection_policy = selection_policy
        self.facility_options = facility_options
        self.status = PlanStatus.AVAILABLE
        self.facilities: list[Facility] = []
        self.under_construction: list[Facility] = []
        self.life_quality_score = 0
        self.economy_score = 0
        self.environment_score = 0

    def step(self) -> None:
        """Start new constructions up to the limit, then advance all of them."""
        limit = construction_limit(self.settlement)

        while len(self.under_construction) < limit:
            if not self.facility_options:
                print("No facilities left for selection", file=sys.stderr)
                break
            try:
                chosen = self.selection_policy.select_facility(self.facility_options)
            except SelectionError as exc:
                print(f"Error during facility selection: {exc}", file=sys.stderr)
                break
            self.under_construction.append(Facility.from_type(chosen, self.settlement.name))
            if isinstance(self.selection_policy, BalancedSelection):
                self.selection_policy.update_score(chosen)

        still_building: list[Facility] = []
        for facility in self.under_construction:
            facility.step()
            if facility.time_left == 0:
                facility.status = FacilityStatus.OPERATIONAL
                self.facilities.append(facility)
                self.life_quality_score += facility.life_quality_score
                self.economy_score += facility.economy_score
                self.environment_score += facility.environment_score
            else:
                still_building.append(facility)
        self.under_construction = still_building

        self.status = (
            PlanStatus.BUSY if len(self.under_construction) >= limit else PlanStatus.AVAILABLE
        )

    def set_selection_policy(self, selection_policy: SelectionPolicy) -> None:
        """Replace the selection policy, reporting the change."""
        print(f"Plan: {self.plan_id}")
        print(f"Current policy: {self.selection_policy}")
        self.selection_policy = selection_policy
        print(f"Updated to: {self.selection_policy}")

    def add_facility(self, facility: Facility) -> None:
        """Add an already operational facility."""
        self.facilities.append(facility)

    def is_same_policy(self, policy: SelectionPolicy | None) -> bool:
        """Whether the given policy is of the same kind as the current one."""
        if self.selection_policy is None or policy is None:
            return False
        return str(self.selection_policy) == str(policy)

    def print_status(self) -> None:
        print(f"Status: {self.status.value}")

    def result_summary(self) -> str:
        """Identity, status, policy and scores, one per line."""
        return (
            f"PlanID: {self.plan_id}\n"
            f"SettlementName: {self.settlement.name}\n"
            f"PlanStatus: {self.status.value}\n"
            f"SelectionPolicy: {self.selection_policy}\n"
            f"LifeQualityScore: {self.life_quality_score}\n"
            f"EconomyScore: {self.economy_score}\n"
            f"EnvironmentScore: {self.environment_score}\n"
        )

    def copy(self) -> "Plan":
        """Return a copy with its own policy and facilities."""
        duplicate = Plan(
            self.plan_id,
            self.settlement,
            self.selection_policy.clone(),
            self.facility_options,
        )
        duplicate.status = self.status
        duplicate.facilities = [copy.copy(facility) for facility in self.facilities]
        duplicate.under_construction = [
            copy.copy(facility) for facility in self.under_construction
        ]
        duplicate.life_quality_score = self.life_quality_score
        duplicate.economy_score = self.economy_score
        duplicate.environment_score = self.environment_score
        return duplicate

    def __str__(self) -> str:
        lines = [self.result_summary(), "Operational Facilities:\n"]
        lines.extend(f" - {facility}\n" for facility in self.facilities)
        lines.append("Under Constructions facilities:\n")
        lines.extend(f" - {facility}\n" for facility in self.under_construction)
        return "".join(lines)