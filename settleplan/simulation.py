"""The simulation: settlements, facility options, plans and the action loop."""

from __future__ import annotations

import re
import sys
from collections.abc import Callable, Iterable

from .actions import (
    AddFacility,
    AddPlan,
    AddSettlement,
    BackupSimulation,
    BaseAction,
    ChangePlanPolicy,
    Close,
    PrintActionsLog,
    PrintPlanStatus,
    RestoreSimulation,
    SimulateStep,
)
from .auxiliary import parse_arguments
from .facility import FacilityCategory, FacilityType
from .plan import Plan
from .selection_policy import (
    BalancedSelection,
    EconomySelection,
    NaiveSelection,
    SelectionPolicy,
    SustainabilitySelection,
)
from .settlement import Settlement, SettlementType


class SimulationError(RuntimeError):
    """Raised for malformed commands and missing settlements or plans."""


_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_INT_MIN, _INT_MAX = -(2**31), 2**31 - 1

_POLICIES: dict[str, Callable[[], SelectionPolicy]] = {
    "nve": NaiveSelection,
    "bal": lambda: BalancedSelection(0, 0, 0),
    "eco": EconomySelection,
    "env": SustainabilitySelection,
}

_STATE = (
    "is_running",
    "plan_counter",
    "actions_log",
    "plans",
    "settlements",
    "facilities_options",
)


def _to_int(text: str) -> int:
    """Read the integer at the start of `text`, ignoring anything after it."""
    match = _INT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"invalid integer: {text!r}")
    value = int(match.group(1))
    if not _INT_MIN <= value <= _INT_MAX:
        raise ValueError(f"integer out of range: {text!r}")
    return value


def _require(args: list[str], count: int, message: str) -> None:
    if len(args) < count:
        raise SimulationError(message)


class Simulation:
    """Holds the world state and runs commands against it."""

    def __init__(self, config_path: str | None = None) -> None:
        self.is_running = False
        self.plan_counter = 0
        self.actions_log: list[BaseAction] = []
        self.plans: list[Plan] = []
        self.settlements: list[Settlement] = []
        self.facilities_options: list[FacilityType] = []
        if config_path is None:
            return
        try:
            with open(config_path, encoding="utf-8") as config_file:
                lines = config_file.readlines()
        except OSError:
            print(f"Error: Can't open config file: {config_path}", file=sys.stderr)
            return
        self.load_config(lines)

    def load_config(self, lines: Iterable[str]) -> None:
        """Read settlements, facilities and plans from configuration lines."""
        for raw in lines:
            line = raw.rstrip("\n")
            args = parse_arguments(line)
            if not args or args[0] == "#":
                continue
            kind = args[0]
            if kind == "settlement":
                settlement_type = SettlementType(_to_int(args[2]))
                self.add_settlement(Settlement(args[1], settlement_type))
            elif kind == "facility":
                self.add_facility(
                    FacilityType(
                        args[1],
                        FacilityCategory(_to_int(args[2])),
                        _to_int(args[3]),
                        _to_int(args[4]),
                        _to_int(args[5]),
                        _to_int(args[6]),
                    )
                )
            elif kind == "plan":
                settlement = self.get_settlement(args[1])
                policy = self.create_selection_policy(args[2])
                if policy is None:
                    print(
                        f"Error creating selection policy for line: {line}",
                        file=sys.stderr,
                    )
                    continue
                self.add_plan(settlement, policy)
            else:
                print(f"Warning: Unknown configuration line: {line}", file=sys.stderr)

    def start(self, lines: Iterable[str] | None = None) -> None:
        """Run commands from `lines` (standard input by default) until closed."""
        source = iter(sys.stdin if lines is None else lines)
        self.open()
        print("The simulation has started")
        while self.is_running:
            print("Enter an action: ", end="", flush=True)
            line = next(source, None)
            if line is None:
                break
            try:
                self.execute(line)
            except (ValueError, LookupError, RuntimeError) as exc:
                print(exc, file=sys.stderr)

    def execute(self, line: str) -> BaseAction | None:
        """Run one command line and return the action it performed."""
        args = parse_arguments(line)
        if not args:
            raise SimulationError("Error: No action provided. ")
        command = args[0]
        if command == "#":
            return None

        action: BaseAction
        if command == "step":
            _require(args, 2, "Error: Invalid step command format")
            action = SimulateStep(_to_int(args[1]))
        elif command == "plan":
            _require(args, 3, "Error: Invalid plan command format")
            action = AddPlan(args[1], args[2])
        elif command == "settlement":
            _require(args, 3, "Error: invalid settlement command format")
            action = AddSettlement(args[1], SettlementType(_to_int(args[2])))
        elif command == "facility":
            _require(args, 7, "Error: invalid facility command format")
            action = AddFacility(
                args[1],
                FacilityCategory(_to_int(args[2])),
                _to_int(args[3]),
                _to_int(args[4]),
                _to_int(args[5]),
                _to_int(args[6]),
            )
        elif command == "planStatus":
            _require(args, 2, "Error: invalid planstatus command format")
            action = PrintPlanStatus(_to_int(args[1]))
        elif command == "log":
            action = PrintActionsLog()
        elif command == "changePolicy":
            _require(args, 3, "Error: invalid changepolicy command format")
            action = ChangePlanPolicy(_to_int(args[1]), args[2])
        elif command == "close":
            action = Close()
        elif command == "backup":
            action = BackupSimulation()
        elif command == "restore":
            action = RestoreSimulation()
        else:
            raise SimulationError(f"Error: unknown action '{command}'")

        action.act(self)
        if command == "close":
            self.close()
        return action

    def add_plan(self, settlement: Settlement, selection_policy: SelectionPolicy) -> Plan:
        """Create a plan with the next free id."""
        if selection_policy is None:
            raise SimulationError("Error: selection policy is null")
        plan = Plan(self.plan_counter, settlement, selection_policy, self.facilities_options)
        self.plan_counter += 1
        self.plans.append(plan)
        print(
            f"Plan created for settlement: {settlement.name} "
            f"with policy: {selection_policy}"
        )
        return plan

    def add_action(self, action: BaseAction) -> None:
        """Record a copy of a performed action in the log."""
        if action is None:
            raise SimulationError("Error: Invalid action")
        self.actions_log.append(action.clone())

    def add_settlement(self, settlement: Settlement | None) -> bool:
        if settlement is None:
            print("Error: nullPtr")
            return False
        if self.has_settlement(settlement.name):
            print("Error: Settlement already exists")
            return False
        self.settlements.append(settlement)
        return True

    def add_facility(self, facility: FacilityType) -> bool:
        if any(existing.name == facility.name for existing in self.facilities_options):
            print("Facility already exists")
            return False
        self.facilities_options.append(facility)
        return True

    def has_settlement(self, name: str) -> bool:
        return any(settlement.name == name for settlement in self.settlements)

    def get_settlement(self, name: str) -> Settlement:
        for settlement in self.settlements:
            if settlement.name == name:
                return settlement
        raise SimulationError(f"Settlement {name} was not found")

    def get_plan(self, plan_id: int) -> Plan:
        for plan in self.plans:
            if plan.plan_id == plan_id:
                return plan
        raise SimulationError("Plan not found")

    def step(self) -> None:
        """Advance every plan by one step."""
        for plan in self.plans:
            plan.step()

    def close(self) -> None:
        self.is_running = False

    def open(self) -> None:
        self.is_running = True

    def create_selection_policy(self, policy_type: str) -> SelectionPolicy | None:
        """Build a policy from its short name, or return None if it is unknown."""
        factory = _POLICIES.get(policy_type)
        if factory is None:
            print(f"Error: Unknown selection policy type: {policy_type}", file=sys.stderr)
            return None
        return factory()

    def clear_plans(self) -> None:
        self.plans.clear()

    def clear_settlements(self) -> None:
        self.settlements.clear()

    def copy(self) -> "Simulation":
        """Return an independent copy of the whole simulation state."""
        duplicate = Simulation()
        duplicate.is_running = self.is_running
        duplicate.plan_counter = self.plan_counter
        duplicate.facilities_options = list(self.facilities_options)
        duplicate.settlements = list(self.settlements)
        duplicate.actions_log = [action.clone() for action in self.actions_log]
        for plan in self.plans:
            plan_copy = plan.copy()
            plan_copy.facility_options = duplicate.facilities_options
            duplicate.plans.append(plan_copy)
        return duplicate

    def swap(self, other: "Simulation") -> None:
        """Exchange the whole state with another simulation."""
        for name in _STATE:
            mine, theirs = getattr(self, name), getattr(other, name)
            setattr(self, name, theirs)
            setattr(other, name, mine)