import dataclasses

import pytest

from settleplan.settlement import Settlement, SettlementType


def test_str_for_village_matches_documented_format():
    assert str(Settlement("KfarSPL", SettlementType.VILLAGE)) == "Settlement KfarSPL is a Village"


@pytest.mark.parametrize(
    "kind, label",
    [
        (SettlementType.VILLAGE, "Village"),
        (SettlementType.CITY, "City"),
        (SettlementType.METROPOLIS, "Metropolis"),
    ],
)
def test_str_uses_type_label(kind, label):
    assert str(Settlement("town", kind)).endswith(f"is a {label}")


@pytest.mark.parametrize("number", [0, 1, 2])
def test_type_round_trips_through_config_number(number):
    assert SettlementType(number).value == number


def test_unknown_type_number_is_rejected():
    with pytest.raises(ValueError):
        SettlementType(7)


def test_settlement_is_immutable():
    settlement = Settlement("town", SettlementType.CITY)
    with pytest.raises(dataclasses.FrozenInstanceError):
        settlement.name = "other"  # type: ignore[misc]
    assert settlement.name == "town"
    assert str(settlement) == "Settlement town is a City"


def test_equal_settlements_compare_equal():
    assert Settlement("a", SettlementType.CITY) == Settlement("a", SettlementType.CITY)
    assert Settlement("a", SettlementType.CITY) != Settlement("a", SettlementType.VILLAGE)