#!/usr/bin/env python

"""
Task Tracker - Main Entry Point

Loads the stored tasks and goals and prints the dashboard: counters, the
overdue alert, the task list with relative due dates, and goal progress.

Usage:
    python main.py [search text]

Requirements:
    - Python 3.10+
    - See pyproject.toml for dependencies
"""

import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent))

from tasktracker.domain.clock import now_ms
from tasktracker.i18n import tr
from tasktracker.infra.config import get_settings
from tasktracker.infra.sound import NullNotificationSink
from tasktracker.logging_setup import setup_logging
from tasktracker.services import Tracker, category_label, format_relative_time


def render(tracker: Tracker, query: str = "") -> str:
    """Plain-text dashboard for the current state"""
    now = now_ms()
    stats = tracker.tasks.compute_stats(now)
    lines = [
        tr("summary.title"),
        tracker.headline(),
        "",
        f"{tr('stats.total')}: {stats.total}  {tr('stats.completed')}: {stats.completed}  "
        f"{tr('stats.overdue')}: {stats.overdue}  {tr('stats.today')}: {stats.due_today}",
        "",
    ]

    alerted = tracker.alert.pick(now)
    if alerted:
        lines += [f"! {tr('alert.title')} {tr('alert.message', text=alerted.text)}", ""]

    tasks = tracker.tasks.filter_by_text(query)
    if not tasks:
        lines.append(tr("summary.no_tasks"))
    for task in tasks:
        mark = "x" if task.completed else " "
        due = format_relative_time(task.due_date, now)
        lines.append(f"[{mark}] {task.text}  ({category_label(task.category)}, {due})")

    lines += ["", tr("summary.goals")]
    if not tracker.goals.goals:
        lines.append(tr("summary.no_goals"))
    for goal in tracker.goals.goals:
        lines.append(f"{goal.name}: {goal.current}/{goal.target} ({goal.percent}%)")

    mode = tr("on") if tracker.preferences.dark_mode else tr("off")
    lines += ["", f"{tr('summary.dark_mode')}: {mode}"]
    return "\n".join(lines)


def main():
    """Main entry point"""
    settings = get_settings()
    setup_logging(log_dir=settings.data_dir / "logs", console_level=settings.log_level)

    # Rendering never mutates, so nothing would ever play
    tracker = Tracker.from_settings(settings, sink=NullNotificationSink())
    try:
        query = " ".join(sys.argv[1:])
        print(render(tracker, query))
    finally:
        tracker.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
