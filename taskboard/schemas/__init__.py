from .board import Board, BoardColumn, MoveTask
from .task import DeleteResponse, TaskComplete, TaskCreate, TaskListFilters, TaskUpdate, TaskView

__all__ = [
    "Board",
    "BoardColumn",
    "MoveTask",
    "DeleteResponse",
    "TaskComplete",
    "TaskCreate",
    "TaskListFilters",
    "TaskUpdate",
    "TaskView",
]
