#!/usr/bin/env python3
"""
Kaizen CLI - check today's habits, toggle completions and read reports from the terminal
"""
import argparse
import os
import sys
from typing import Any, Dict, Optional

import requests
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# Backend API base URL
API_BASE = os.getenv("KAIZEN_API_URL", "http://localhost:8000")
USER_ID = os.getenv("KAIZEN_USER_ID", "")


def api_request(method: str, path: str, user_id: str, **kwargs) -> Dict[str, Any]:
    """
    Call the Kaizen API and return the JSON body

    Raises:
        SystemExit: If the API is unreachable or returns an error status
    """
    try:
        response = requests.request(
            method,
            f"{API_BASE}{path}",
            headers={"X-User-Id": user_id},
            timeout=30,
            **kwargs
        )
    except requests.RequestException as e:
        sys.exit(f"❌ Could not reach {API_BASE}: {e}")

    if response.status_code >= 400:
        try:
            detail = response.json().get("detail", response.text)
        except ValueError:
            detail = response.text
        sys.exit(f"❌ {response.status_code}: {detail}")
    return response.json()


def format_habit_line(habit: Dict[str, Any]) -> str:
    mark = "✅" if habit.get("completed") else "⬜"
    line = f"{mark} {habit.get('name') or habit.get('id')} [{habit.get('category')}]"
    progress = habit.get("weekly_progress")
    if progress:
        line += f"  {progress['label']} this week"
        if progress.get("is_target_met"):
            line += " 🎯"
    return line


def format_score_line(score: Dict[str, Any]) -> str:
    if not score.get("hasHabits"):
        return f"{score['category']:<8} no habits yet"
    bar = "█" * (score["completionRate"] // 10)
    return (
        f"{score['category']:<8} {score['completionRate']:>3}% {bar:<10} "
        f"({score['completedCount']}/{score['expectedCount']})"
    )


def cmd_today(args) -> None:
    params = {"date": args.date} if args.date else None
    result = api_request("GET", "/habits/today", args.user, params=params)
    print(f"📅 {result['date']}")
    if not result["habits"]:
        print("Nothing scheduled.")
    for habit in result["habits"]:
        print(format_habit_line(habit))


def cmd_toggle(args) -> None:
    body: Dict[str, Optional[str]] = {"habit_id": args.habit_id, "date": args.date}
    result = api_request("POST", "/completions/toggle", args.user, json=body)
    state = "done" if result["completed"] else "not done"
    print(f"Habit {result['habit_id']} marked {state} for {result['date']}")


def cmd_scores(args) -> None:
    result = api_request("GET", "/reports/scores", args.user, params={"period_days": args.period})
    for score in result["scores"]:
        print(format_score_line(score))


def cmd_report(args) -> None:
    result = api_request("GET", "/reports/life", args.user, params={"refresh": str(args.refresh).lower()})
    for score in result["scores"]:
        print(format_score_line(score))
    analysis = result["analysis"]
    print(f"\n{analysis['summary']}")
    if analysis.get("focus_area"):
        print(f"\n🎯 Focus: {analysis['focus_area']}")
    for recommendation in analysis.get("recommendations", []):
        print(f"  • {recommendation}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="kaizen", description="Kaizen habit tracker CLI")
    parser.add_argument("--user", default=USER_ID, help="User ID (default: $KAIZEN_USER_ID)")
    subparsers = parser.add_subparsers(dest="command", required=True)

    today = subparsers.add_parser("today", help="Show habits scheduled for a date")
    today.add_argument("--date", help="YYYY-MM-DD (default: today)")
    today.set_defaults(func=cmd_today)

    toggle = subparsers.add_parser("toggle", help="Mark or unmark a habit")
    toggle.add_argument("habit_id")
    toggle.add_argument("--date", help="YYYY-MM-DD (default: today)")
    toggle.set_defaults(func=cmd_toggle)

    scores = subparsers.add_parser("scores", help="Show life area scores")
    scores.add_argument("--period", type=int, default=30, help="Trailing days to score")
    scores.set_defaults(func=cmd_scores)

    report = subparsers.add_parser("report", help="Show the life report")
    report.add_argument("--refresh", action="store_true", help="Regenerate today's analysis")
    report.set_defaults(func=cmd_report)

    return parser


def main(argv=None) -> None:
    args = build_parser().parse_args(argv)
    if not args.user:
        sys.exit("❌ Set KAIZEN_USER_ID or pass --user")
    args.func(args)


if __name__ == "__main__":
    main()
