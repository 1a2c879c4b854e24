from typing import Dict, List, Tuple

from ..models import TaskPriority
from ..schemas.board import Board, BoardColumn
from ..schemas.task import TaskView

# Display order, left to right
PRIORITY_COLUMNS: List[Tuple[TaskPriority, str]] = [
    (TaskPriority.LOW, "Low Priority"),
    (TaskPriority.MEDIUM, "Medium Priority"),
    (TaskPriority.HIGH, "High Priority"),
    (TaskPriority.URGENT, "Urgent Priority"),
]

COLUMN_IDS = frozenset(priority.value for priority, _ in PRIORITY_COLUMNS)


def group_by_priority(tasks: List[TaskView]) -> Dict[TaskPriority, List[TaskView]]:
    """Bucket tasks by priority, keeping their incoming order. Every column is present."""
    grouped: Dict[TaskPriority, List[TaskView]] = {priority: [] for priority, _ in PRIORITY_COLUMNS}
    for task in tasks:
        grouped[task.priority].append(task)
    return grouped


def build_board(tasks: List[TaskView]) -> Board:
    grouped = group_by_priority(tasks)
    columns = []
    for priority, title in PRIORITY_COLUMNS:
        column_tasks = grouped[priority]
        columns.append(
            BoardColumn(
                id=priority,
                title=title,
                tasks=column_tasks,
                completed_count=sum(1 for task in column_tasks if task.completed),
                total_count=len(column_tasks),
            )
        )
    return Board(columns=columns)
