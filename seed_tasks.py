"""Seed sample tasks for one user and print a bearer token for them.

Usage: python seed_tasks.py [user_id]
"""
import sys
from datetime import timedelta
from uuid import uuid4

from taskboard.auth import create_access_token
from taskboard.database import create_tables, get_session
from taskboard.models import TaskPriority, utcnow
from taskboard.schemas.task import TaskCreate, TaskListFilters
from taskboard.services import create_task, list_tasks

SAMPLE_TASKS = [
    ("Ship the quarterly report", TaskPriority.URGENT, 1),
    ("Review open pull requests", TaskPriority.HIGH, 3),
    ("Update onboarding docs", TaskPriority.MEDIUM, None),
    ("Clean up old branches", TaskPriority.LOW, -2),
]


def seed(user_id: str) -> None:
    create_tables()
    organization_id = uuid4()

    with get_session() as db:
        if list_tasks(db, user_id, TaskListFilters()):
            print(f"User {user_id} already has tasks")
            return

        for index, (title, priority, due_in_days) in enumerate(SAMPLE_TASKS):
            due_date = utcnow() + timedelta(days=due_in_days) if due_in_days is not None else None
            create_task(
                db,
                user_id,
                TaskCreate(
                    title=title,
                    priority=priority,
                    due_date=due_date,
                    # Alternate between personal and organization tasks
                    organization_id=organization_id if index % 2 else None,
                ),
            )
        print(f"Created {len(SAMPLE_TASKS)} tasks for {user_id} (organization {organization_id})")


if __name__ == "__main__":
    user_id = sys.argv[1] if len(sys.argv) > 1 else str(uuid4())
    seed(user_id)
    print(f"Token: {create_access_token(user_id)}")
