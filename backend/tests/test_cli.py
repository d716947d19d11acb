"""Tests for the CLI's output formatting and argument parsing."""

import pytest

from kaizen import cli


def test_habit_line_plain():
    line = cli.format_habit_line({"id": "h1", "name": "Read", "category": "Mindset", "completed": True})
    assert line == "✅ Read [Mindset]"


def test_habit_line_weekly_target_met():
    line = cli.format_habit_line({
        "id": "h1", "name": "Swim", "category": "Health", "completed": False,
        "weekly_progress": {"label": "3/3", "is_target_met": True},
    })
    assert line == "⬜ Swim [Health]  3/3 this week 🎯"


def test_score_line():
    line = cli.format_score_line({
        "category": "Health", "completionRate": 70, "completedCount": 7,
        "expectedCount": 10, "hasHabits": True,
    })
    assert line.startswith("Health    70% ███████")
    assert line.endswith("(7/10)")


def test_score_line_untracked():
    assert cli.format_score_line({"category": "Joy", "completionRate": 0, "hasHabits": False}) == "Joy      no habits yet"


def test_parser():
    args = cli.build_parser().parse_args(["--user", "u1", "toggle", "h1", "--date", "2024-01-03"])
    assert args.func is cli.cmd_toggle
    assert (args.user, args.habit_id, args.date) == ("u1", "h1", "2024-01-03")


def test_requires_user(monkeypatch):
    monkeypatch.setattr(cli, "USER_ID", "")
    with pytest.raises(SystemExit):
        cli.main(["--user", "", "scores"])
