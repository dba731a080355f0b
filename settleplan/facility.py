"""Facility types and facilities built from them."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class FacilityStatus(Enum):
    UNDER_CONSTRUCTIONS = 0
    OPERATIONAL = 1


class FacilityCategory(Enum):
    """Facility category; the value is the number used in configuration lines."""

    LIFE_QUALITY = 0
    ECONOMY = 1
    ENVIRONMENT = 2


@dataclass(eq=False)
class FacilityType:
    """A kind of facility that can be built; identified by its name."""

    name: str
    category: FacilityCategory
    price: int
    life_quality_score: int
    economy_score: int
    environment_score: int

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FacilityType):
            return NotImplemented
        return self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)


@dataclass(eq=False)
class Facility(FacilityType):
    """A facility in a settlement; it takes `price` steps to build."""

    settlement_name: str
    status: FacilityStatus = field(init=False, default=FacilityStatus.UNDER_CONSTRUCTIONS)
    time_left: int = field(init=False)

    def __post_init__(self) -> None:
        self.time_left = self.price

    @classmethod
    def from_type(cls, facility_type: FacilityType, settlement_name: str) -> "Facility":
        """Start building a facility of the given type in a settlement."""
        return cls(
            name=facility_type.name,
            category=facility_type.category,
            price=facility_type.price,
            life_quality_score=facility_type.life_quality_score,
            economy_score=facility_type.economy_score,
            environment_score=facility_type.environment_score,
            settlement_name=settlement_name,
        )

    def step(self) -> FacilityStatus:
        """Advance construction by one step and return the resulting status."""
        if self.time_left > 0:
            self.time_left -= 1
        if self.time_left == 0:
            self.status = FacilityStatus.OPERATIONAL
            return FacilityStatus.OPERATIONAL
        return FacilityStatus.UNDER_CONSTRUCTIONS

    def __str__(self) -> str:
        status = (
            "Under Construction"
            if self.status is FacilityStatus.UNDER_CONSTRUCTIONS
            else "Operational"
        )
        return (
            f"Facility Name: {self.name}, Settlement: {self.settlement_name}, "
            f"Status: {status}, Time Left: {self.time_left}"
        )