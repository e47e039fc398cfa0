import json
import logging

import pytest

from swissdraw.testing.__main__ import (
    COMMANDS,
    create_completer,
    create_main_parser,
    execute_command,
    find_competitor,
    main,
)
from swissdraw.models import Competitor
from swissdraw.utils.snapshot import load_snapshot, save_snapshot


@pytest.fixture(autouse=True)
def restore_package_handlers():
    package_logger = logging.getLogger("swissdraw")
    handlers = list(package_logger.handlers)
    yield
    package_logger.handlers[:] = handlers


@pytest.fixture
def snapshot(tmp_path, capsys):
    path = tmp_path / "club.json"
    assert (
        main(
            [
                "simulate",
                "--competitors",
                "8",
                "--rounds",
                "3",
                "--seed",
                "1",
                "--output",
                str(path),
            ]
        )
        == 0
    )
    capsys.readouterr()
    return path


def test_completer_accepts_both_command_forms():
    completer = create_completer()
    for command in COMMANDS:
        assert command in completer.options
        assert f"/{command}" in completer.options
    assert "/list" in completer.options


def test_parser_registers_every_subcommand():
    parser = create_main_parser()
    args = parser.parse_args(["stats", "--file", "x.json", "--json"])
    assert args.command == "stats"
    assert args.json


def test_simulate_writes_snapshot(snapshot):
    competitors, history = load_snapshot(snapshot)
    assert len(competitors) == 8
    assert history


def test_leaderboard_lists_limited_rows(snapshot, capsys):
    assert main(["leaderboard", "--file", str(snapshot), "--limit", "3"]) == 0
    out = capsys.readouterr().out
    assert out.count("Competitor-") == 3


def test_stats_json_output(snapshot, capsys):
    assert main(["stats", "--file", str(snapshot), "--json"]) == 0
    stats = json.loads(capsys.readouterr().out)
    assert stats["total_competitors"] == 8
    assert stats["possible_pairs"] % 2 == 0


def test_pair_command(tmp_path, capsys):
    path = tmp_path / "pool.json"
    save_snapshot(
        path,
        [
            Competitor(id="1", name="Ada", score=0),
            Competitor(id="2", name="Bo", score=1),
            Competitor(id="3", name="Cy", score=5),
        ],
        [],
    )

    assert main(["pair", "--file", str(path), "--seed", "4"]) == 0
    out = capsys.readouterr().out
    assert "Ada (0) vs Bo (1)" in out or "Bo (1) vs Ada (0)" in out
    assert "Unpaired" in out and "Cy" in out


def test_pair_command_without_possible_pairs(tmp_path, capsys):
    path = tmp_path / "pool.json"
    save_snapshot(path, [Competitor(id="1", name="Ada")], [])
    assert main(["pair", "--file", str(path), "--sorted"]) == 1
    assert "No pairings possible" in capsys.readouterr().out


def test_opponents_by_name(snapshot, capsys):
    assert execute_command(
        "opponents", ["--file", str(snapshot), "--competitor", "Competitor-001"]
    ) == 0
    assert "Competitor-001" in capsys.readouterr().out


def test_unknown_competitor_returns_error(snapshot, capsys):
    assert main(["opponents", "--file", str(snapshot), "--competitor", "Nobody"]) == 1
    assert "Unknown competitor" in capsys.readouterr().out


def test_missing_file_returns_error(tmp_path, capsys):
    assert main(["leaderboard", "--file", str(tmp_path / "missing.json")]) == 1
    assert "Error" in capsys.readouterr().out


def test_negative_margin_returns_error(snapshot, capsys):
    assert main(["stats", "--file", str(snapshot), "--margin", "-1"]) == 1
    assert "Error" in capsys.readouterr().out


def test_config_file_is_applied(snapshot, tmp_path, capsys):
    config_path = tmp_path / "config.json"
    config_path.write_text(json.dumps({"margin": 0, "sorted_order": True}))
    assert main(["pair", "--file", str(snapshot), "--config", str(config_path)]) in (0, 1)
    out = capsys.readouterr().out
    assert "margin 0" in out or "No pairings possible" in out


def test_find_competitor_prefers_id():
    pool = [Competitor(id="Bo", name="Ada"), Competitor(id="2", name="Bo")]
    assert find_competitor(pool, "Bo").name == "Ada"
    assert find_competitor(pool, "Ada").id == "Bo"
    assert find_competitor(pool, "Cy") is None


def test_pair_command_with_mixed_timestamp_styles(tmp_path, capsys):
    path = tmp_path / "imported.json"
    path.write_text(
        json.dumps(
            {
                "competitors": [
                    {"id": "1", "name": "Ada", "score": 0},
                    {"id": "2", "name": "Bo", "score": 0},
                ],
                "matches": [
                    {
                        "id": "m1",
                        "player_a": "1",
                        "player_b": "2",
                        "winner": "1",
                        "loser": "2",
                        "timestamp": "2025-01-01T10:00:00",
                    },
                    {
                        "id": "m2",
                        "player_a": "1",
                        "player_b": "2",
                        "winner": "2",
                        "loser": "1",
                        "timestamp": "2025-01-01T11:00:00Z",
                    },
                ],
            }
        )
    )

    assert main(["pair", "--file", str(path), "--seed", "1"]) == 0
    assert "[met 2x]" in capsys.readouterr().out
