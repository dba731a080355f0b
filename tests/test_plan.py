import pytest

from settleplan.facility import Facility, FacilityCategory, FacilityStatus, FacilityType
from settleplan.plan import Plan, PlanStatus, construction_limit
from settleplan.selection_policy import (
    BalancedSelection,
    EconomySelection,
    NaiveSelection,
    SustainabilitySelection,
)
from settleplan.settlement import Settlement, SettlementType


def _options():
    return [
        FacilityType("school", FacilityCategory.LIFE_QUALITY, 2, 3, 1, 0),
        FacilityType("factory", FacilityCategory.ECONOMY, 3, 0, 4, 1),
        FacilityType("park", FacilityCategory.ENVIRONMENT, 4, 1, 0, 5),
    ]


def _plan(settlement_type=SettlementType.VILLAGE, policy=None, options=None):
    return Plan(
        0,
        Settlement("Town", settlement_type),
        policy if policy is not None else NaiveSelection(),
        options if options is not None else _options(),
    )


@pytest.mark.parametrize(
    "settlement_type, limit",
    [(SettlementType.VILLAGE, 1), (SettlementType.CITY, 2), (SettlementType.METROPOLIS, 3)],
)
def test_construction_limit(settlement_type, limit):
    assert construction_limit(Settlement("Town", settlement_type)) == limit


def test_new_plan_summary():
    plan = _plan()
    assert plan.result_summary() == (
        "PlanID: 0\n"
        "SettlementName: Town\n"
        "PlanStatus: Available\n"
        "SelectionPolicy: NaiveSelection\n"
        "LifeQualityScore: 0\n"
        "EconomyScore: 0\n"
        "EnvironmentScore: 0\n"
    )


def test_str_of_empty_plan_extends_summary():
    plan = _plan()
    text = str(plan)
    assert text.startswith(plan.result_summary())
    assert text.endswith("Operational Facilities:\nUnder Constructions facilities:\n")


@pytest.mark.parametrize("settlement_type", list(SettlementType))
def test_step_fills_construction_slots(settlement_type):
    plan = _plan(settlement_type)
    plan.step()
    assert len(plan.under_construction) == construction_limit(plan.settlement)
    assert plan.status is PlanStatus.BUSY
    assert all(f.settlement_name == "Town" for f in plan.under_construction)


def test_facility_completes_after_price_steps():
    school = _options()[0]
    plan = _plan(options=[school])
    plan.step()
    assert plan.under_construction[0].time_left == school.price - 1
    assert plan.status is PlanStatus.BUSY
    for _ in range(school.price - 1):
        plan.step()
    assert [f.name for f in plan.facilities] == [school.name]
    assert plan.facilities[0].status is FacilityStatus.OPERATIONAL
    assert plan.under_construction == []
    assert plan.status is PlanStatus.AVAILABLE
    assert plan.life_quality_score == school.life_quality_score
    assert plan.economy_score == school.economy_score
    assert plan.environment_score == school.environment_score


def test_step_without_options_reports(capsys):
    plan = _plan(options=[])
    plan.step()
    assert "No facilities left for selection" in capsys.readouterr().err
    assert plan.under_construction == []
    assert plan.status is PlanStatus.AVAILABLE


def test_step_with_unsatisfiable_policy_reports(capsys):
    plan = _plan(policy=EconomySelection(), options=[_options()[0]])
    plan.step()
    err = capsys.readouterr().err
    assert "Error during facility selection: " in err
    assert "Error: No facilities in the Economy category available." in err
    assert plan.under_construction == []


def test_sustainability_policy_builds_environment_facility():
    plan = _plan(policy=SustainabilitySelection())
    plan.step()
    assert [f.category for f in plan.under_construction] == [FacilityCategory.ENVIRONMENT]


def test_balanced_policy_scores_follow_selection():
    school = _options()[0]
    policy = BalancedSelection()
    plan = _plan(policy=policy, options=[school])
    plan.step()
    assert policy.life_quality_score == school.life_quality_score
    assert policy.economy_score == school.economy_score
    assert policy.environment_score == school.environment_score


def test_set_selection_policy_reports_change(capsys):
    plan = _plan()
    new_policy = EconomySelection()
    plan.set_selection_policy(new_policy)
    assert capsys.readouterr().out == (
        "Plan: 0\nCurrent policy: NaiveSelection\nUpdated to: EconomySelection\n"
    )
    assert plan.selection_policy is new_policy
    assert "SelectionPolicy: EconomySelection\n" in str(plan)


def test_is_same_policy():
    plan = _plan()
    assert plan.is_same_policy(NaiveSelection()) is True
    assert plan.is_same_policy(BalancedSelection()) is False
    assert plan.is_same_policy(None) is False


def test_print_status(capsys):
    plan = _plan()
    plan.print_status()
    plan.step()
    plan.print_status()
    assert capsys.readouterr().out == "Status: Available\nStatus: Busy\n"


def test_add_facility_lists_it_as_operational():
    plan = _plan()
    facility = Facility.from_type(_options()[1], "Town")
    plan.add_facility(facility)
    text = str(plan)
    entry = f" - {facility}\n"
    assert entry in text
    assert text.index(entry) < text.index("Under Constructions facilities:")


def test_copy_is_independent():
    plan = _plan(SettlementType.CITY)
    plan.step()
    duplicate = plan.copy()
    assert str(duplicate) == str(plan)
    assert duplicate.selection_policy is not plan.selection_policy
    assert duplicate.facility_options is plan.facility_options
    before = str(duplicate)
    plan.step()
    assert str(duplicate) == before
    assert duplicate.under_construction[0] is not plan.under_construction[0]


def test_options_added_later_are_used():
    options = []
    plan = _plan(options=options)
    park = _options()[2]
    options.append(park)
    plan.step()
    assert [f.name for f in plan.under_construction] == [park.name]