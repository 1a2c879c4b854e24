"""Read side of the task list: owner-scoped filtering and the fixed sort order."""
from datetime import datetime
from typing import List, Optional

from sqlalchemy import case, or_
from sqlmodel import Session, col, select

from ..models import PRIORITY_RANK, Task, utcnow
from ..schemas.task import TaskListFilters, TaskView


def priority_rank():
    """SQL expression ranking priorities urgent(1) through low(4)."""
    return case(
        *[(col(Task.priority) == priority, rank) for priority, rank in PRIORITY_RANK.items()],
        else_=len(PRIORITY_RANK) + 1,
    )


def build_list_query(requester_id: str, filters: TaskListFilters):
    """Build the select for a requester's tasks. All filters combine with AND."""
    query = select(Task).where(Task.user_id == requester_id)

    if filters.has_organization_filter:
        if filters.organization_id is None:
            query = query.where(col(Task.organization_id).is_(None))
        else:
            query = query.where(Task.organization_id == str(filters.organization_id))

    if filters.completed is not None:
        query = query.where(Task.completed == filters.completed)

    if filters.priority is not None:
        query = query.where(Task.priority == filters.priority)

    term = filters.search_term
    if term:
        query = query.where(
            or_(
                col(Task.title).icontains(term, autoescape=True),
                col(Task.description).icontains(term, autoescape=True),
            )
        )

    return query.order_by(priority_rank(), col(Task.created_at).desc())


def list_tasks(
    db: Session,
    requester_id: str,
    filters: Optional[TaskListFilters] = None,
    now: Optional[datetime] = None,
) -> List[TaskView]:
    """List the requester's tasks, most urgent first and newest first within a priority.

    ``is_overdue`` is computed against ``now`` (default: the current time).
    """
    filters = filters or TaskListFilters()
    now = now or utcnow()
    tasks = db.exec(build_list_query(requester_id, filters)).all()
    return [TaskView.from_task(task, now) for task in tasks]
