from swissdraw.models import Competitor
from swissdraw.tournament.leaderboard import (
    competitor_stats,
    format_win_rate,
    rank,
    rank_of,
    top_competitors,
)


def _standings_fixture(make_match):
    half = Competitor(id="half", name="Half", score=10)
    strong = Competitor(id="strong", name="Strong", score=10)
    perfect = Competitor(id="perfect", name="Perfect", score=7)
    history = [
        make_match("half", "x"),
        make_match("x", "half"),
        make_match("strong", "x"),
        make_match("strong", "y"),
        make_match("strong", "z"),
        make_match("strong", "w"),
        make_match("x", "strong"),
        make_match("perfect", "y"),
    ]
    return [half, strong, perfect], history


def test_competitor_stats_counts_wins_and_losses(make_match):
    history = [make_match("a", "b"), make_match("b", "a"), make_match("a", "c")]
    stats = competitor_stats("a", history)
    assert stats.wins == 2
    assert stats.losses == 1
    assert stats.total_matches == 3
    assert round(stats.win_rate, 4) == round(200 / 3, 4)


def test_no_matches_means_zero_win_rate():
    stats = competitor_stats("a", [])
    assert stats.total_matches == 0
    assert stats.win_rate == 0


def test_rank_orders_by_score_then_win_rate(make_match):
    pool, history = _standings_fixture(make_match)
    leaderboard = rank(pool, history)

    assert [e.competitor.name for e in leaderboard] == ["Strong", "Half", "Perfect"]
    assert [e.win_rate for e in leaderboard] == [80.0, 50.0, 100.0]


def test_rank_falls_back_to_matches_then_name(make_match):
    busy = Competitor(id="busy", name="Zoe", score=1)
    idle = Competitor(id="idle", name="Abe", score=1)
    quiet = Competitor(id="quiet", name="Al", score=1)
    twin = Competitor(id="twin", name="Bea", score=1)
    # Zoe 50% over 4 matches, Abe and Bea 50% over 2, Al never played
    history = [
        make_match("busy", "x"),
        make_match("x", "busy"),
        make_match("busy", "y"),
        make_match("y", "busy"),
        make_match("idle", "y"),
        make_match("y", "idle"),
        make_match("twin", "z"),
        make_match("z", "twin"),
    ]

    leaderboard = rank([quiet, twin, idle, busy], history)
    assert [e.competitor.name for e in leaderboard] == ["Zoe", "Abe", "Bea", "Al"]


def test_rank_is_idempotent(make_match):
    pool, history = _standings_fixture(make_match)
    assert rank(pool, history) == rank(pool, history)


def test_rank_of_positions(make_match):
    pool, history = _standings_fixture(make_match)
    assert rank_of("strong", pool, history) == 1
    assert rank_of("perfect", pool, history) == 3
    assert rank_of("missing", pool, history) is None


def test_top_competitors_limit(make_match):
    pool, history = _standings_fixture(make_match)
    assert [e.competitor.id for e in top_competitors(pool, history, 2)] == [
        "strong",
        "half",
    ]
    assert top_competitors(pool, history, 0) == []


def test_format_win_rate():
    assert format_win_rate(200 / 3) == "66.7%"
    assert format_win_rate(0) == "0.0%"
