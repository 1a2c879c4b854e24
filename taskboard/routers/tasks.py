from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Request, status
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError
from sqlmodel import Session

from ..auth import get_requester_id
from ..board import DragController, UnknownTaskError, build_board
from ..database import get_db
from ..models import TaskPriority
from ..schemas.board import Board, MoveTask
from ..schemas.task import DeleteResponse, TaskComplete, TaskCreate, TaskListFilters, TaskUpdate, TaskView
from ..services import task_mutation, task_query
from ..services.errors import TaskNotFoundError

router = APIRouter()

_PERSONAL_SCOPE_VALUES = ("", "null")


def get_list_filters(
    request: Request,
    completed: Optional[bool] = None,
    priority: Optional[TaskPriority] = None,
    search: Optional[str] = None,
    organization_id: Optional[str] = None,
) -> TaskListFilters:
    """Build list filters from query parameters.

    ``organization_id`` omitted applies no organization filter; present but
    empty (or ``null``) selects personal tasks only.
    """
    data = {}
    if completed is not None:
        data["completed"] = completed
    if priority is not None:
        data["priority"] = priority
    if search is not None:
        data["search_query"] = search
    if "organization_id" in request.query_params:
        raw = (organization_id or "").strip()
        data["organization_id"] = None if raw.lower() in _PERSONAL_SCOPE_VALUES else raw

    try:
        return TaskListFilters(**data)
    except ValidationError as exc:
        errors = [
            {**error, "loc": ("query",) + tuple(error["loc"])}
            for error in exc.errors(include_url=False, include_context=False)
        ]
        raise RequestValidationError(errors)


@router.get("/tasks", response_model=List[TaskView])
def list_tasks(
    filters: TaskListFilters = Depends(get_list_filters),
    requester_id: str = Depends(get_requester_id),
    db: Session = Depends(get_db),
):
    """List the requester's tasks, most urgent first."""
    return task_query.list_tasks(db, requester_id, filters)


@router.get("/tasks/board", response_model=Board)
def get_board(
    filters: TaskListFilters = Depends(get_list_filters),
    requester_id: str = Depends(get_requester_id),
    db: Session = Depends(get_db),
):
    """The requester's tasks grouped into one column per priority."""
    return build_board(task_query.list_tasks(db, requester_id, filters))


@router.post("/tasks", response_model=TaskView, status_code=status.HTTP_201_CREATED)
def create_task(
    task: TaskCreate,
    requester_id: str = Depends(get_requester_id),
    db: Session = Depends(get_db),
):
    return task_mutation.create_task(db, requester_id, task)


@router.get("/tasks/{task_id}", response_model=TaskView)
def get_task(
    task_id: UUID,
    requester_id: str = Depends(get_requester_id),
    db: Session = Depends(get_db),
):
    return task_mutation.get_task(db, requester_id, str(task_id))


@router.patch("/tasks/{task_id}", response_model=TaskView)
def update_task(
    task_id: UUID,
    task_update: TaskUpdate,
    requester_id: str = Depends(get_requester_id),
    db: Session = Depends(get_db),
):
    """Update the fields present in the body; omitted fields are unchanged."""
    return task_mutation.update_task(db, requester_id, str(task_id), task_update)


@router.patch("/tasks/{task_id}/complete", response_model=TaskView)
def mark_task_complete(
    task_id: UUID,
    payload: Optional[TaskComplete] = None,
    requester_id: str = Depends(get_requester_id),
    db: Session = Depends(get_db),
):
    """Set the completion state, or flip it when no body is sent."""
    if payload is None:
        current = task_mutation.get_task(db, requester_id, str(task_id))
        completed = not current.completed
    else:
        completed = payload.completed
    return task_mutation.toggle_complete(db, requester_id, str(task_id), completed)


@router.post("/tasks/{task_id}/move", response_model=TaskView)
def move_task(
    task_id: UUID,
    payload: MoveTask,
    requester_id: str = Depends(get_requester_id),
    db: Session = Depends(get_db),
):
    """Drop a task on a board column or on another task's card."""
    task_id = str(task_id)
    controller = DragController(
        task_query.list_tasks(db, requester_id),
        on_priority_change=task_mutation.task_updater(db, requester_id),
    )
    try:
        controller.pick_up(task_id)
    except UnknownTaskError:
        raise TaskNotFoundError(task_id)
    controller.release(payload.target_id)
    return task_mutation.get_task(db, requester_id, task_id)


@router.delete("/tasks/{task_id}", response_model=DeleteResponse)
def delete_task(
    task_id: UUID,
    requester_id: str = Depends(get_requester_id),
    db: Session = Depends(get_db),
):
    return task_mutation.delete_task(db, requester_id, str(task_id))
