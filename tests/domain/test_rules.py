import pytest

from marriage_scores.domain import DomainValidationError, RuleSet, resolve_rule_set, validate_roster


def test_missing_fields_default_to_zero() -> None:
    rules = resolve_rule_set({"seenPoints": 3})

    assert rules == RuleSet(seen_points=3)


@pytest.mark.parametrize("raw", [None, [], "rules", 42])
def test_non_mapping_resolves_to_zero_rules(raw) -> None:
    assert resolve_rule_set(raw) == RuleSet()


def test_non_numeric_fields_become_zero() -> None:
    rules = resolve_rule_set(
        {
            "pointRate": "abc",
            "seenPoints": True,
            "unseenPoints": None,
            "dubleeWinBonusPoints": float("nan"),
            "foulPoints": {"x": 1},
        }
    )

    assert rules == RuleSet()


def test_numeric_strings_are_parsed() -> None:
    rules = resolve_rule_set({"pointRate": "0.25", "foulPoints": " 15 "})

    assert rules.point_rate == 0.25
    assert rules.foul_points == 15
    assert isinstance(rules.foul_points, int)


def test_to_dict_round_trips_through_resolver() -> None:
    rules = RuleSet(point_rate=0.5, seen_points=3, unseen_points=10, dublee_win_bonus_points=5, foul_points=15)

    assert resolve_rule_set(rules.to_dict()) == rules


def test_roster_is_normalized() -> None:
    assert validate_roster([" Ram ", "Shyam", "Hari"]) == ["Ram", "Shyam", "Hari"]


@pytest.mark.parametrize(
    "players",
    [["A", "B"], ["A", "B", "C", "D", "E", "F", "G"], ["A", "B", " A "], ["A", "B", ""]],
    ids=["too_few", "too_many", "duplicates", "blank"],
)
def test_roster_validation(players) -> None:
    with pytest.raises(DomainValidationError):
        validate_roster(players)
