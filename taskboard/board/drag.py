"""
Drag-and-drop state machine for the priority board.

    IDLE --pick_up--> DRAGGING --hover--> DRAGGING --release--> RESOLVING --> IDLE

Hovering only records the candidate target for highlighting. Releasing
resolves the target to a priority and issues at most one priority update.
"""
import enum
from typing import Callable, Iterable, Optional

from ..logging_config import get_logger
from ..models import TaskPriority
from ..schemas.task import TaskUpdate, TaskView
from .columns import COLUMN_IDS

logger = get_logger(__name__)

UpdateCallback = Callable[[str, TaskUpdate], object]


class DragState(str, enum.Enum):
    IDLE = "idle"
    DRAGGING = "dragging"
    RESOLVING = "resolving"


class BoardError(Exception):
    pass


class InvalidDragTransition(BoardError):
    pass


class UnknownTaskError(BoardError):
    """The task id is not on the board."""

    def __init__(self, task_id: str):
        super().__init__(f"unknown task {task_id}")
        self.task_id = task_id


class DragController:
    def __init__(
        self,
        tasks: Iterable[TaskView],
        on_priority_change: UpdateCallback,
        on_toggle_complete: Optional[UpdateCallback] = None,
    ):
        self._on_priority_change = on_priority_change
        self._on_toggle_complete = on_toggle_complete
        self._tasks = {}
        self.state = DragState.IDLE
        self.active_id: Optional[str] = None
        self.over_id: Optional[str] = None
        self.set_tasks(tasks)

    def set_tasks(self, tasks: Iterable[TaskView]) -> None:
        """Replace the task set the board is showing."""
        self._tasks = {task.id: task for task in tasks}

    @property
    def active_task(self) -> Optional[TaskView]:
        if self.active_id is None:
            return None
        return self._tasks.get(self.active_id)

    def _require(self, state: DragState, action: str) -> None:
        if self.state is not state:
            raise InvalidDragTransition(f"cannot {action} while {self.state.value}")

    def _reset(self) -> None:
        self.state = DragState.IDLE
        self.active_id = None
        self.over_id = None

    def pick_up(self, task_id: str) -> None:
        self._require(DragState.IDLE, "pick up")
        if task_id not in self._tasks:
            raise UnknownTaskError(task_id)
        self.state = DragState.DRAGGING
        self.active_id = task_id
        self.over_id = None

    def hover(self, target_id: Optional[str]) -> None:
        self._require(DragState.DRAGGING, "hover")
        self.over_id = target_id

    def cancel(self) -> None:
        self._reset()

    def resolve_target(self, target_id: Optional[str]) -> Optional[TaskPriority]:
        """Priority a drop on ``target_id`` means: a column's own id, or a card's priority."""
        if target_id is None:
            return None
        if target_id in COLUMN_IDS:
            return TaskPriority(target_id)
        target = self._tasks.get(target_id)
        if target is None:
            return None
        return target.priority

    def release(self, target_id: Optional[str]) -> Optional[TaskUpdate]:
        """Drop the dragged task on ``target_id`` (None: outside any droppable).

        Returns the update issued, or None when the priority is unchanged.
        """
        self._require(DragState.DRAGGING, "release")
        self.state = DragState.RESOLVING
        task_id = self.active_id
        try:
            new_priority = self.resolve_target(target_id)
            task = self._tasks.get(task_id)
            if new_priority is None or task is None or task.priority == new_priority:
                return None

            update = TaskUpdate(priority=new_priority)
            logger.debug("Moving task %s from %s to %s", task_id, task.priority.value, new_priority.value)
            self._on_priority_change(task_id, update)
            return update
        finally:
            self._reset()

    def is_column_highlighted(self, column_id: TaskPriority) -> bool:
        """True while the candidate target is this column or one of its cards,
        unless the dragged task already sits in it."""
        if self.state is not DragState.DRAGGING or self.over_id is None:
            return False
        task = self.active_task
        if task is None or task.priority == column_id:
            return False
        if self.over_id == column_id.value:
            return True
        over_task = self._tasks.get(self.over_id)
        return over_task is not None and over_task.priority == column_id

    def toggle_complete(self, task_id: str) -> TaskUpdate:
        """Flip completion of a task. Independent of any drag in progress."""
        task = self._tasks.get(task_id)
        if task is None:
            raise UnknownTaskError(task_id)
        update = TaskUpdate(completed=not task.completed)
        if self._on_toggle_complete is not None:
            self._on_toggle_complete(task_id, update)
        return update
