from app.analytics.ladder import compute_ladder, compute_position_history

from tests.conftest import make_fixture, make_team


def test_end_to_end_round_one(abcd_teams):
    fixtures = [
        make_fixture(1, 1, "A", "B", 2, 0),
        make_fixture(2, 1, "C", "D", 1, 1),
    ]
    table = compute_ladder(1, abcd_teams, fixtures)

    assert [r.code for r in table] == ["A", "C", "D", "B"]
    a = table[0]
    assert (a.points, a.goal_diff, a.wins, a.position) == (3, 2, 1, 1)
    c, d = table[1], table[2]
    assert (c.points, c.goal_diff, c.draws) == (1, 0, 1)
    assert (d.points, d.goal_diff, d.draws) == (1, 0, 1)
    # full dead heat between C and D: input order decides, positions still distinct
    assert (c.position, d.position) == (2, 3)
    b = table[3]
    assert (b.points, b.goal_diff, b.losses, b.position) == (0, -2, 1, 4)


def test_dead_heat_follows_team_list_order(abcd_teams):
    fixtures = [make_fixture(1, 1, "C", "D", 1, 1)]
    reversed_teams = list(reversed(abcd_teams))
    table = compute_ladder(1, reversed_teams, fixtures)
    assert [r.code for r in table[:2]] == ["D", "C"]


def test_goals_for_breaks_tie_regardless_of_input_order():
    teams = [make_team("B"), make_team("A"), make_team("X"), make_team("Y")]
    fixtures = [
        # A and B both win by 1, A scores more
        make_fixture(1, 1, "A", "X", 3, 2),
        make_fixture(2, 1, "B", "Y", 1, 0),
    ]
    for order in (teams, list(reversed(teams))):
        table = compute_ladder(1, order, fixtures)
        codes = [r.code for r in table]
        assert codes.index("A") < codes.index("B")


def test_full_dead_heat_keeps_input_order():
    teams = [make_team("P"), make_team("Q"), make_team("R")]
    fixtures = [
        make_fixture(1, 1, "P", "R", 2, 2),
        make_fixture(2, 2, "Q", "R", 2, 2),
    ]
    table = compute_ladder(2, teams, fixtures)
    assert [r.code for r in table] == ["R", "P", "Q"]
    p, q = table[1], table[2]
    assert (p.points, p.goal_diff, p.goals_for, p.goals_against) == (q.points, q.goal_diff, q.goals_for, q.goals_against)
    assert (p.position, q.position) == (2, 3)


def test_only_played_fixtures_up_to_round_count(abcd_teams):
    fixtures = [
        make_fixture(1, 1, "A", "B", 1, 0),
        make_fixture(2, 2, "A", "C", 0, 3),
        make_fixture(3, 1, "C", "D", None, None),
        make_fixture(4, 1, "B", "D", 2, None),
    ]
    table = {r.code: r for r in compute_ladder(1, abcd_teams, fixtures)}
    assert table["A"].played == 1
    assert table["C"].played == 0
    assert table["D"].played == 0
    assert table["B"].played == 1

    table = {r.code: r for r in compute_ladder(2, abcd_teams, fixtures)}
    assert table["A"].played == 2
    assert table["C"].points == 3


def test_empty_fixtures_yields_zeroed_ranked_rows(abcd_teams):
    table = compute_ladder(1, abcd_teams, [])
    assert [r.code for r in table] == ["A", "B", "C", "D"]
    assert [r.position for r in table] == [1, 2, 3, 4]
    assert all(r.played == r.points == r.goals_for == 0 for r in table)


def _season():
    teams = [make_team(c) for c in "ABCDEF"]
    results = [
        (1, "A", "B", 3, 1), (1, "C", "D", 0, 0), (1, "E", "F", 2, 4),
        (2, "B", "C", 1, 1), (2, "D", "E", 5, 0), (2, "F", "A", 2, 2),
        (3, "A", "C", 1, 0), (3, "B", "E", 0, 2), (3, "D", "F", None, None),
    ]
    fixtures = [make_fixture(i, r, h, a, hg, ag) for i, (r, h, a, hg, ag) in enumerate(results, start=1)]
    return teams, fixtures


def test_conservation_points_and_goal_difference():
    teams, fixtures = _season()
    for rnd in (1, 2, 3):
        table = compute_ladder(rnd, teams, fixtures)
        played = [f for f in fixtures if f.round <= rnd and f.home_goals is not None and f.away_goals is not None]
        decisive = [f for f in played if f.home_goals != f.away_goals]
        drawn = [f for f in played if f.home_goals == f.away_goals]

        assert sum(r.wins for r in table) == len(decisive)
        assert sum(r.losses for r in table) == len(decisive)
        assert sum(r.draws for r in table) == 2 * len(drawn)
        for r in table:
            assert r.points == 3 * r.wins + r.draws
            assert r.goal_diff == r.goals_for - r.goals_against
            assert r.played == r.wins + r.draws + r.losses
        assert sorted(r.position for r in table) == list(range(1, len(teams) + 1))


def test_deterministic():
    teams, fixtures = _season()
    first = [r.model_dump() for r in compute_ladder(3, teams, fixtures)]
    second = [r.model_dump() for r in compute_ladder(3, teams, fixtures)]
    assert first == second


def test_position_history_length_and_values():
    teams, fixtures = _season()
    history = compute_position_history(teams, fixtures, 18)

    assert set(history) == {t.code for t in teams}
    assert all(len(series) == 18 for series in history.values())
    for rnd in (1, 2, 3):
        for row in compute_ladder(rnd, teams, fixtures):
            assert history[row.code][rnd - 1] == row.position
    # no fixtures after round 3: positions frozen
    assert all(series[3:] == [series[2]] * 15 for series in history.values())


def test_position_history_with_no_results(abcd_teams):
    history = compute_position_history(abcd_teams, [], 3)
    assert history == {"A": [1, 1, 1], "B": [2, 2, 2], "C": [3, 3, 3], "D": [4, 4, 4]}
