"""
Data Seeder for Task Tracker.
Populates the configured storage with demo tasks and goals.
"""

import random
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from tasktracker.domain.models import Category
from tasktracker.infra.config import get_settings
from tasktracker.infra.gateway import build_gateway
from tasktracker.infra.sound import NullNotificationSink
from tasktracker.services import Tracker


DEMO_TASKS = [
    ("Prepare sprint review slides", Category.WORK),
    ("Answer support backlog", Category.WORK),
    ("Call the dentist", Category.PERSONAL),
    ("Buy a birthday present", Category.PERSONAL),
    ("30 minute run", Category.EXERCISE),
    ("Stretching session", Category.EXERCISE),
    ("Sort out old photos", Category.OTHER),
]

DEMO_GOALS = [
    ("Read 10 books", 10),
    ("Gym visits this month", 12),
    ("Learn 20 new recipes", 20),
]


def seed():
    settings = get_settings()
    print(f"Seeding {settings.storage_backend} storage in {settings.data_dir}...")

    tracker = Tracker(
        build_gateway(settings),
        sink=NullNotificationSink(),
        tasks_key=settings.tasks_key,
        goals_key=settings.goals_key,
        dark_mode_key=settings.dark_mode_key,
    )

    existing_texts = {t.text for t in tracker.tasks.tasks}
    for text, category in DEMO_TASKS:
        if text in existing_texts:
            print(f"Task exists: {text}")
            continue
        task = tracker.tasks.create(text, category)
        # Spread due dates from two days overdue to two weeks ahead
        tracker.tasks.reschedule(task.id, random.choice([-2, -1, 0, 1, 3, 7, 14]))
        if random.random() < 0.3:
            tracker.tasks.toggle_complete(task.id)
        print(f"Created task: {text}")

    existing_names = {g.name for g in tracker.goals.goals}
    for name, target in DEMO_GOALS:
        if name in existing_names:
            print(f"Goal exists: {name}")
            continue
        goal = tracker.goals.create(name, target=target)
        tracker.goals.adjust_progress(goal.id, random.randint(0, target))
        print(f"Created goal: {name}")

    tracker.close()
    print("Seeding complete.")


if __name__ == "__main__":
    seed()
