"""User actions applied to a simulation."""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from enum import Enum
from typing import TYPE_CHECKING

from .facility import FacilityCategory, FacilityType
from .settlement import Settlement, SettlementType

if TYPE_CHECKING:
    from .simulation import Simulation


class ActionStatus(Enum):
    COMPLETED = "Completed"
    ERROR = "Error"


class _BackupSlot:
    """Holds the single saved simulation shared by backup and restore."""

    def __init__(self) -> None:
        self.simulation: Simulation | None = None


_backup = _BackupSlot()


def clear_backup() -> None:
    """Forget any saved simulation."""
    _backup.simulation = None


class BaseAction(ABC):
    """An action with a completion status and, on failure, an error message."""

    def __init__(self) -> None:
        self.status = ActionStatus.COMPLETED
        self.error_message = ""

    def complete(self) -> None:
        self.status = ActionStatus.COMPLETED

    def error(self, message: str) -> None:
        self.status = ActionStatus.ERROR
        self.error_message = message

    @abstractmethod
    def act(self, simulation: Simulation) -> None:
        """Apply the action to the simulation."""

    def clone(self) -> "BaseAction":
        return copy.copy(self)

    @abstractmethod
    def __str__(self) -> str:
        """Short description used in the actions log."""


class SimulateStep(BaseAction):
    def __init__(self, num_of_steps: int) -> None:
        super().__init__()
        if num_of_steps <= 0:
            raise ValueError("Error: number of steps must be positive")
        self.num_of_steps = num_of_steps

    def act(self, simulation: Simulation) -> None:
        for _ in range(self.num_of_steps):
            simulation.step()
        self.complete()
        simulation.add_action(self)

    def __str__(self) -> str:
        return f"SimulateStep: steps = {self.num_of_steps}"


class AddPlan(BaseAction):
    def __init__(self, settlement_name: str, selection_policy: str) -> None:
        super().__init__()
        self.settlement_name = settlement_name
        self.selection_policy = selection_policy

    def act(self, simulation: Simulation) -> None:
        try:
            if not simulation.has_settlement(self.settlement_name):
                self.error("Error: Settlement does not exist.")
                return
            settlement = simulation.get_settlement(self.settlement_name)
            policy = simulation.create_selection_policy(self.selection_policy)
            if policy is None:
                self.error("Error: Invalid selection policy.")
                return
            simulation.add_plan(settlement, policy)
            self.complete()
            simulation.add_action(self)
        except Exception as exc:  # any failure marks the action as failed
            self.error(str(exc))

    def __str__(self) -> str:
        return f"AddPlan: settlement = {self.settlement_name}, policy =  {self.selection_policy}"


class AddSettlement(BaseAction):
    def __init__(self, settlement_name: str, settlement_type: SettlementType) -> None:
        super().__init__()
        self.settlement_name = settlement_name
        self.settlement_type = settlement_type

    def act(self, simulation: Simulation) -> None:
        if simulation.has_settlement(self.settlement_name):
            self.error("Settlement already exists")
            return
        if simulation.add_settlement(Settlement(self.settlement_name, self.settlement_type)):
            self.complete()
            simulation.add_action(self)
        else:
            self.error("Error adding settlement.")

    def __str__(self) -> str:
        return "Add settlement"


class AddFacility(BaseAction):
    def __init__(
        self,
        facility_name: str,
        facility_category: FacilityCategory,
        price: int,
        life_quality_score: int,
        economy_score: int,
        environment_score: int,
    ) -> None:
        super().__init__()
        self.facility_name = facility_name
        self.facility_category = facility_category
        self.price = price
        self.life_quality_score = life_quality_score
        self.economy_score = economy_score
        self.environment_score = environment_score

    def act(self, simulation: Simulation) -> None:
        if any(f.name == self.facility_name for f in simulation.facilities_options):
            self.error("Error: Facility already exists. ")
            return
        if (
            self.price <= 0
            or self.life_quality_score < 0
            or self.economy_score < 0
            or self.environment_score < 0
        ):
            self.error("Error: facility attributes can't be negative")
            return
        simulation.add_facility(
            FacilityType(
                self.facility_name,
                self.facility_category,
                self.price,
                self.life_quality_score,
                self.economy_score,
                self.environment_score,
            )
        )
        self.complete()
        simulation.add_action(self)

    def __str__(self) -> str:
        return "Add Facility"


class PrintPlanStatus(BaseAction):
    def __init__(self, plan_id: int) -> None:
        super().__init__()
        self.plan_id = plan_id

    def act(self, simulation: Simulation) -> None:
        for plan in simulation.plans:
            if plan.plan_id == self.plan_id:
                print(plan)
                simulation.add_action(self)
                self.complete()

    def __str__(self) -> str:
        return f"PrintPlanStatus: {self.plan_id}"


class ChangePlanPolicy(BaseAction):
    def __init__(self, plan_id: int, new_policy: str) -> None:
        super().__init__()
        self.plan_id = plan_id
        self.new_policy = new_policy

    def act(self, simulation: Simulation) -> None:
        try:
            plan = simulation.get_plan(self.plan_id)
            policy = simulation.create_selection_policy(self.new_policy)
            if policy is None:
                self.error("Error: invalid selection policy")
                return
            if plan.is_same_policy(policy):
                self.error("Error: new policy is the same as the current")
                return
            plan.set_selection_policy(policy)
            self.complete()
            simulation.add_action(self)
        except Exception as exc:  # any failure marks the action as failed
            self.error(str(exc))

    def __str__(self) -> str:
        return "Change Plan Policy"


class PrintActionsLog(BaseAction):
    def act(self, simulation: Simulation) -> None:
        print("Actions Log:")
        for action in simulation.actions_log:
            print(f"{action} - Status: {action.status.value}")
        self.complete()

    def __str__(self) -> str:
        return "PrintActionsLog"


class Close(BaseAction):
    def act(self, simulation: Simulation) -> None:
        print("Simulation Results: ")
        for plan in simulation.plans:
            print(plan.result_summary())
        self.complete()
        simulation.add_action(self)

    def __str__(self) -> str:
        return "Close"


class BackupSimulation(BaseAction):
    def act(self, simulation: Simulation) -> None:
        _backup.simulation = simulation.copy()
        self.complete()
        simulation.add_action(self)

    def __str__(self) -> str:
        return "Backup"


class RestoreSimulation(BaseAction):
    def act(self, simulation: Simulation) -> None:
        if _backup.simulation is None:
            self.error("No backup available")
            return
        simulation.swap(_backup.simulation)
        self.complete()
        simulation.add_action(self)

    def __str__(self) -> str:
        return "Restore"