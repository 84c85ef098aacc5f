import pytest

from app.schemas.admin import ScoreBatch, ScoreEntry, parse_goals, parse_score_form
from app.services.results_service import clamp_round


def test_parse_score_form_builds_typed_entries():
    form = {
        "round": "3",
        "score_12_home": "2",
        "score_12_away": "1",
        "score_13_home": "",
        "score_13_away": "",
        "csrf": "ignored",
        "score_x_home": "4",
    }
    batch = parse_score_form(form)
    assert len(batch.entries) == 4
    assert batch.by_fixture() == {12: (2, 1), 13: (None, None)}


def test_negative_scores_are_clamped_to_zero():
    batch = parse_score_form({"score_5_home": "-3", "score_5_away": " 2 "})
    assert batch.by_fixture() == {5: (0, 2)}
    assert ScoreEntry(fixture_id=1, side="away", value=-1).value == 0


def test_missing_side_defaults_to_none():
    batch = parse_score_form({"score_7_away": "3"})
    assert batch.by_fixture() == {7: (None, 3)}


def test_non_numeric_score_rejects_batch():
    with pytest.raises(ValueError):
        parse_score_form({"score_1_home": "2", "score_1_away": "two"})
    for bad in ("abc", "3a", "NaN", "Infinity", "--1"):
        with pytest.raises(ValueError):
            parse_goals(bad)


@pytest.mark.parametrize(
    "raw, expected",
    [("3", 3), ("3.0", 3), (" 4.00 ", 4), ("1.5", 1), ("0.9", 0), ("-2.0", -2), (5, 5)],
)
def test_parse_goals_keeps_integer_part(raw, expected):
    assert parse_goals(raw) == expected


def test_decimal_scores_are_accepted_in_batch():
    batch = parse_score_form({"score_3_home": "3.0", "score_3_away": "-1.0", "score_4_home": "2", "score_4_away": "0"})
    assert batch.by_fixture() == {3: (3, 0), 4: (2, 0)}


def test_empty_batch():
    assert ScoreBatch().by_fixture() == {}
    assert parse_score_form({"round": "1"}).entries == []


@pytest.mark.parametrize(
    "raw, default, expected",
    [
        (None, 18, 18),
        ("", 1, 1),
        ("7", 1, 7),
        ("0", 1, 1),
        ("-4", 18, 1),
        ("99", 1, 18),
        ("abc", 5, 5),
        (" 3 ", 1, 3),
        (12, 1, 12),
    ],
)
def test_clamp_round(raw, default, expected):
    assert clamp_round(raw, default, 18) == expected
