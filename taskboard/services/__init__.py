from .errors import TaskNotFoundError
from .task_mutation import create_task, delete_task, get_task, toggle_complete, update_task
from .task_query import list_tasks

__all__ = [
    "TaskNotFoundError",
    "create_task",
    "delete_task",
    "get_task",
    "list_tasks",
    "toggle_complete",
    "update_task",
]
