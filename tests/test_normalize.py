import pytest
from pydantic import ValidationError

from rosterslots.config import UnknownProfileError, get_profile
from rosterslots.normalize import (
    RosterSizeError,
    normalize_lineup_positions,
    normalize_roster,
    order_lineup,
)
from rosterslots.models import RosterEntry

from .helpers import DK_NFL_POSITIONS, ids_of, make_lineup, positions_of


def test_dk_nfl_overflow_to_flex_and_ordered():
    lineup = make_lineup(DK_NFL_POSITIONS)
    result = normalize_roster(lineup, site="draftkings", sport="nfl")

    assert positions_of(result) == ["QB", "RB", "RB", "WR", "WR", "WR", "TE", "FLEX", "FLEX"]
    # Third RB (p4) and fourth WR (p8) become FLEX and keep their relative order.
    assert ids_of(result) == ["p1", "p2", "p3", "p5", "p6", "p7", "p9", "p4", "p8"]


def test_dk_nfl_positions_before_ordering():
    profile = get_profile("draftkings", "nfl")
    assert normalize_lineup_positions(DK_NFL_POSITIONS, profile) == [
        "QB", "RB", "RB", "FLEX", "WR", "WR", "WR", "FLEX", "TE",
    ]


def test_dk_nba_guard_and_forward_overflow():
    lineup = make_lineup(["PG", "PG", "SG", "SF", "SF", "PF", "C", "C"])
    result = normalize_roster(lineup, site="dk", sport="nba")

    assert positions_of(result) == ["PG", "SG", "SF", "PF", "C", "G", "F", "UTIL"]
    assert ids_of(result) == ["p1", "p3", "p4", "p6", "p7", "p2", "p5", "p8"]


def test_dk_nba_util_catches_second_guard_overflow():
    profile = get_profile("draftkings", "nba")
    positions = ["PG", "PG", "PG", "SG", "SF", "PF", "C", "C"]
    assert normalize_lineup_positions(positions, profile) == [
        "PG", "G", "UTIL", "SG", "SF", "PF", "C", "UTIL",
    ]


def test_dk_nhl_merges_wings_before_ranking():
    lineup = make_lineup(["C", "C", "LW", "RW", "W", "RW", "D", "D", "G"])
    result = normalize_roster(lineup, site="draftkings", sport="nhl")

    assert positions_of(result) == ["C", "C", "W", "W", "W", "D", "D", "G", "UTIL"]
    assert ids_of(result)[-1] == "p6"


def test_fd_mlb_corner_infield_overflow():
    lineup = make_lineup(["P", "C", "1B", "2B", "3B", "SS", "OF", "OF", "OF"])
    result = normalize_roster(lineup, site="fanduel", sport="mlb")

    assert positions_of(result) == ["P", "C/1B", "2B", "3B", "SS", "OF", "OF", "OF", "UTIL"]
    assert ids_of(result)[-1] == "p3"


def test_fd_nfl_uses_d_for_defense():
    lineup = make_lineup(["D", "QB", "RB", "RB", "WR", "WR", "WR", "TE", "TE"])
    result = normalize_roster(lineup, site="fanduel", sport="nfl")

    assert positions_of(result) == ["QB", "RB", "RB", "WR", "WR", "WR", "TE", "FLEX", "D"]


def test_pass_through_profile_only_orders():
    lineup = make_lineup(["OF", "P", "SS", "C", "1B", "P", "2B", "3B", "OF", "OF"])
    result = normalize_roster(lineup, site="draftkings", sport="mlb")

    assert positions_of(result) == ["P", "P", "C", "1B", "2B", "3B", "SS", "OF", "OF", "OF"]
    assert ids_of(result)[:2] == ["p2", "p6"]


def test_roster_size_is_enforced_per_lineup():
    lineup = make_lineup(DK_NFL_POSITIONS[:-1])
    with pytest.raises(RosterSizeError):
        normalize_roster(lineup, site="draftkings", sport="nfl")


def test_unknown_profile_fails_before_touching_data():
    # A wrong-sized roster would raise RosterSizeError if it were inspected.
    lineup = make_lineup(["QB"])
    with pytest.raises(UnknownProfileError):
        normalize_roster(lineup, site="draftkings", sport="nfl2")
    with pytest.raises(UnknownProfileError):
        normalize_roster([], site="draftkings", sport="nfl2")


def test_empty_roster_yields_empty_result():
    assert normalize_roster([], site="fanduel", sport="nfl") == []


def test_multiple_lineups_keep_first_appearance_order():
    first = make_lineup(DK_NFL_POSITIONS, lineup_id="B", prefix="b")
    second = make_lineup(DK_NFL_POSITIONS, lineup_id="A", prefix="a")
    interleaved = [entry for pair in zip(first, second) for entry in pair]

    result = normalize_roster(interleaved, site="draftkings", sport="nfl")

    assert [entry.lineup_id for entry in result] == ["B"] * 9 + ["A"] * 9
    assert ids_of(result[:9]) == ids_of(normalize_roster(first, site="draftkings", sport="nfl"))


@pytest.mark.parametrize(
    "site,sport,positions",
    [
        ("draftkings", "nfl", DK_NFL_POSITIONS),
        ("draftkings", "nba", ["PG", "PG", "SG", "SF", "SF", "PF", "C", "C"]),
        ("draftkings", "nhl", ["C", "C", "LW", "RW", "W", "RW", "D", "D", "G"]),
        ("fanduel", "mlb", ["P", "C", "1B", "2B", "3B", "SS", "OF", "OF", "OF"]),
        ("fanduel", "nba", ["C", "PG", "SG", "PG", "SF", "SG", "PF", "SF", "PF"]),
    ],
)
def test_normalization_is_idempotent(site, sport, positions):
    once = normalize_roster(make_lineup(positions), site=site, sport=sport)
    twice = normalize_roster(once, site=site, sport=sport)
    assert twice == once


def test_order_lineup_is_stable_and_puts_unknown_last():
    entries = make_lineup(["X", "QB", "Y", "RB", "QB"])
    ordered = order_lineup(entries, ["QB", "RB"])

    assert ids_of(ordered) == ["p2", "p5", "p4", "p1", "p3"]
    slot_order = ["QB", "RB"]
    known = [slot_order.index(e.position) for e in ordered if e.position in slot_order]
    assert known == sorted(known)


def test_normalize_does_not_mutate_input():
    lineup = make_lineup(DK_NFL_POSITIONS)
    snapshot = list(lineup)
    normalize_roster(lineup, site="draftkings", sport="nfl")
    assert lineup == snapshot
    assert positions_of(lineup) == DK_NFL_POSITIONS


def test_roster_entry_is_frozen():
    entry = RosterEntry(player_id="p1", position="QB", lineup_id=1)
    with pytest.raises((TypeError, ValidationError)):
        entry.position = "RB"  # type: ignore[misc]
