from typing import List, Optional

from pydantic import BaseModel

from ..models import TaskPriority
from .task import TaskView


class BoardColumn(BaseModel):
    """One Kanban column: the tasks of a single priority."""
    id: TaskPriority
    title: str
    tasks: List[TaskView]
    completed_count: int
    total_count: int


class Board(BaseModel):
    columns: List[BoardColumn]


class MoveTask(BaseModel):
    """Drop target for a dragged task: a column id, another task's id, or None."""
    target_id: Optional[str] = None
