"""Write side of the task list. Every operation is scoped to the task owner."""
from typing import Callable

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from ..logging_config import get_logger
from ..models import Task, utcnow
from ..schemas.task import DeleteResponse, TaskCreate, TaskUpdate, TaskView
from .errors import TaskNotFoundError

logger = get_logger(__name__)


def _commit(db: Session) -> None:
    try:
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        raise


def get_owned_task(db: Session, requester_id: str, task_id: str) -> Task:
    """Fetch a task by id and owner in a single select.

    Raises TaskNotFoundError when the task is missing or owned by someone else.
    """
    task = db.exec(
        select(Task).where(Task.id == task_id, Task.user_id == requester_id)
    ).first()
    if task is None:
        logger.debug("Task %s not found for user %s", task_id, requester_id)
        raise TaskNotFoundError(task_id)
    return task


def get_task(db: Session, requester_id: str, task_id: str) -> TaskView:
    return TaskView.from_task(get_owned_task(db, requester_id, task_id))


def create_task(db: Session, requester_id: str, payload: TaskCreate) -> TaskView:
    now = utcnow()
    task = Task(
        user_id=requester_id,
        organization_id=str(payload.organization_id) if payload.organization_id else None,
        title=payload.title,
        description=payload.description,
        priority=payload.priority,
        due_date=payload.due_date,
        completed=False,
        created_at=now,
        updated_at=now,
    )
    db.add(task)
    _commit(db)
    db.refresh(task)

    logger.info("Created task %s for user %s", task.id, requester_id)
    return TaskView.from_task(task)


def update_task(db: Session, requester_id: str, task_id: str, payload: TaskUpdate) -> TaskView:
    """Apply the fields present in ``payload``; absent fields are left untouched."""
    task = get_owned_task(db, requester_id, task_id)

    changes = payload.changes()
    for field, value in changes.items():
        setattr(task, field, value)
    task.updated_at = utcnow()

    _commit(db)
    db.refresh(task)

    logger.info("Updated task %s (%s)", task.id, ", ".join(sorted(changes)) or "no fields")
    return TaskView.from_task(task)


def toggle_complete(db: Session, requester_id: str, task_id: str, completed: bool) -> TaskView:
    return update_task(db, requester_id, task_id, TaskUpdate(completed=completed))


def delete_task(db: Session, requester_id: str, task_id: str) -> DeleteResponse:
    task = get_owned_task(db, requester_id, task_id)

    db.delete(task)
    _commit(db)

    logger.info("Deleted task %s", task_id)
    return DeleteResponse()


def task_updater(db: Session, requester_id: str) -> Callable[[str, TaskUpdate], TaskView]:
    """Bind update_task to a session and requester, for use as a board callback."""
    def _update(task_id: str, payload: TaskUpdate) -> TaskView:
        return update_task(db, requester_id, task_id, payload)

    return _update
