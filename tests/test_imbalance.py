from sleeper_insights.engine import PositionCounts, analyze_imbalance


def _full(**overrides) -> PositionCounts:
    values = {"QB": 1, "RB": 2, "WR": 3, "TE": 1, "K": 1, "DEF": 1}
    values.update(overrides)
    return PositionCounts(**values)


def test_balanced_full_lineups_emit_nothing():
    report = analyze_imbalance(_full(), _full(), "teamA", "teamB", starters_a=9, starters_b=9)

    assert report.imbalance_messages == ()
    assert report.risk_messages == ()


def test_team_a_has_more_running_backs():
    report = analyze_imbalance(
        _full(RB=4), _full(RB=1), "teamA", "teamB", starters_a=9, starters_b=9
    )
    assert report.imbalance_messages == ("teamA has 3 more RB(s) starting",)


def test_team_b_has_more_receivers():
    report = analyze_imbalance(
        _full(WR=1), _full(WR=4), "teamA", "teamB", starters_a=9, starters_b=9
    )
    assert report.imbalance_messages == ("teamB has 3 more WR(s) starting",)


def test_difference_of_one_is_tolerated_and_qb_te_ignored():
    report = analyze_imbalance(
        _full(RB=3, QB=3, TE=4), _full(RB=2, QB=1, TE=1), "teamA", "teamB", starters_a=9, starters_b=9
    )
    assert report.imbalance_messages == ()


def test_rb_reported_before_wr():
    report = analyze_imbalance(
        _full(RB=1, WR=5), _full(RB=4, WR=2), "teamA", "teamB", starters_a=9, starters_b=9
    )
    assert report.imbalance_messages == (
        "teamB has 3 more RB(s) starting",
        "teamA has 3 more WR(s) starting",
    )


def test_missing_qb_is_a_risk():
    report = analyze_imbalance(_full(QB=0), _full(), "teamA", "teamB", starters_a=9, starters_b=9)
    assert report.risk_messages == ("teamA has no QB starting",)


def test_thin_lineup_uses_raw_starter_count():
    report = analyze_imbalance(_full(), _full(), "teamA", "teamB", starters_a=9, starters_b=7)
    assert report.risk_messages == ("teamB has only 7 starter(s) - may be incomplete lineup",)


def test_limited_flex_depth():
    report = analyze_imbalance(
        _full(), _full(RB=1, WR=1, TE=1), "teamA", "teamB", starters_a=9, starters_b=9
    )
    assert report.risk_messages == ("teamB has limited RB/WR/TE depth (3 players)",)


def test_risks_are_truncated_in_category_order():
    empty = PositionCounts()
    report = analyze_imbalance(empty, empty, "teamA", "teamB", starters_a=0, starters_b=0)

    assert report.all_risk_messages == (
        "teamA has no QB starting",
        "teamB has no QB starting",
        "teamA has only 0 starter(s) - may be incomplete lineup",
        "teamB has only 0 starter(s) - may be incomplete lineup",
        "teamA has limited RB/WR/TE depth (0 players)",
        "teamB has limited RB/WR/TE depth (0 players)",
    )
    assert report.risk_messages == report.all_risk_messages[:2]


def test_zero_starters_with_a_qb_on_other_side():
    report = analyze_imbalance(_full(), PositionCounts(), "teamA", "teamB", starters_a=9, starters_b=0)

    assert report.risk_messages == (
        "teamB has no QB starting",
        "teamB has only 0 starter(s) - may be incomplete lineup",
    )
    assert len(report.all_risk_messages) == 3


def test_imbalance_messages_are_never_truncated():
    report = analyze_imbalance(
        PositionCounts(RB=5, WR=0), PositionCounts(RB=0, WR=5), "teamA", "teamB", starters_a=3, starters_b=3
    )
    assert len(report.imbalance_messages) == 2
    assert len(report.risk_messages) == 2
