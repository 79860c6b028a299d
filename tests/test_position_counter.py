import random

from sleeper_insights.directory import PlayerDirectory
from sleeper_insights.engine import PositionCounts, count_positions
from sleeper_insights.models import Player


def _directory() -> PlayerDirectory:
    return PlayerDirectory.from_players(
        [
            Player(player_id="qb1", full_name="Quarter Back", position="QB", team="KC"),
            Player(player_id="rb1", full_name="Run One", position="RB", team="KC"),
            Player(player_id="rb2", full_name="Run Two", position="RB", team="BUF"),
            Player(player_id="wr1", full_name="Wide One", position="WR", team="BUF"),
            Player(player_id="wr2", full_name="Wide Two", position="WR", team="MIA"),
            Player(player_id="te1", full_name="Tight End", position="TE", team="MIA"),
            Player(player_id="k1", full_name="Kick Er", position="K", team="DAL"),
            Player(player_id="KC", full_name="Kansas City Chiefs", position="DEF", team="KC"),
            Player(player_id="BUF", full_name="Buffalo Bills", position="DST", team="BUF"),
            Player(player_id="lb1", full_name="Line Backer", position="LB", team="SF"),
            Player(player_id="nop", full_name="No Position"),
        ]
    )


def test_counts_each_position():
    starters = ["qb1", "rb1", "rb2", "wr1", "wr2", "te1", "wr1", "k1", "KC"]
    counts = count_positions(starters, _directory())

    assert counts == PositionCounts(QB=1, RB=2, WR=3, TE=1, FLEX=0, K=1, DEF=1)


def test_flex_is_never_incremented():
    counts = count_positions(["rb1", "rb2", "wr1", "wr2", "te1"], _directory())

    assert counts.FLEX == 0
    assert counts.flex_depth == 5


def test_dst_maps_to_def():
    counts = count_positions(["BUF", "KC"], _directory())
    assert counts.DEF == 2


def test_unknown_and_unclassified_players_are_dropped():
    starters = ["qb1", "missing", "lb1", "nop"]
    counts = count_positions(starters, _directory())

    assert counts.QB == 1
    assert counts.classified_total == 1
    assert counts.classified_total <= len(starters)


def test_empty_and_missing_starters_give_zero_counts():
    assert count_positions([], _directory()) == PositionCounts()
    assert count_positions(None, _directory()) == PositionCounts()


def test_counts_are_order_independent_and_bounded():
    directory = _directory()
    rng = random.Random(7)
    pool = list(directory) + ["ghost1", "ghost2"]
    for _ in range(25):
        starters = rng.choices(pool, k=rng.randint(0, 12))
        counts = count_positions(starters, directory)
        shuffled = list(starters)
        rng.shuffle(shuffled)

        assert count_positions(shuffled, directory) == counts
        assert count_positions(starters, directory) == counts
        assert all(value >= 0 for value in counts.as_dict().values())
        assert counts.classified_total <= len(starters)


def test_accepts_plain_mapping_directory():
    directory = {
        "rb1": Player(player_id="rb1", full_name="Run One", position="RB"),
        "rb2": Player(player_id="rb2", full_name="Run Two", position="rb"),
    }
    counts = count_positions(["rb1", "rb2"], directory)

    assert counts.RB == 1
    assert counts.classified_total == 1


def test_position_matching_is_exact():
    directory = {
        "d": Player(player_id="d", full_name="Slash Defense", position="D/ST"),
        "r": Player(player_id="r", full_name="Lower Back", position="rb"),
        "q": Player(player_id="q", full_name="Padded Passer", position=" qb "),
    }

    assert count_positions(["d", "r", "q"], directory) == PositionCounts()
