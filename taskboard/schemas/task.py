from datetime import datetime, timezone
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from ..models import Task as TaskModel, TaskPriority


def _to_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Aware UTC; naive input is read as UTC."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class TaskCreate(BaseModel):
    """Schema for creating new tasks."""
    title: str = Field(min_length=1, max_length=255)
    description: Optional[str] = None
    priority: TaskPriority = TaskPriority.MEDIUM
    due_date: Optional[datetime] = None
    organization_id: Optional[UUID] = None

    @field_validator("due_date")
    @classmethod
    def _normalize_due_date(cls, value):
        return _to_utc(value)


class TaskUpdate(BaseModel):
    """Schema for partial task updates.

    Only fields present in the request are applied. ``description``,
    ``due_date`` and ``organization_id`` may be sent as null to clear them.
    """
    title: Optional[str] = Field(default=None, min_length=1, max_length=255)
    description: Optional[str] = None
    completed: Optional[bool] = None
    priority: Optional[TaskPriority] = None
    due_date: Optional[datetime] = None
    organization_id: Optional[UUID] = None

    @field_validator("title", "completed", "priority")
    @classmethod
    def _not_null(cls, value, info):
        if value is None:
            raise ValueError(f"{info.field_name} may not be null")
        return value

    @field_validator("due_date")
    @classmethod
    def _normalize_due_date(cls, value):
        return _to_utc(value)

    def changes(self) -> dict:
        """Fields explicitly set on the request, ready to apply to a Task row."""
        data = self.model_dump(exclude_unset=True)
        if data.get("organization_id") is not None:
            data["organization_id"] = str(data["organization_id"])
        return data


class TaskComplete(BaseModel):
    """Schema for setting the completion state of a task."""
    completed: bool = True


class TaskListFilters(BaseModel):
    """Filters for listing tasks.

    ``organization_id`` is tri-state: left unset applies no organization
    filter, set to None selects personal tasks, set to a uuid selects that
    organization's tasks. Presence is read from ``model_fields_set``.
    """
    completed: Optional[bool] = None
    priority: Optional[TaskPriority] = None
    search_query: Optional[str] = None
    organization_id: Optional[UUID] = None

    @property
    def has_organization_filter(self) -> bool:
        return "organization_id" in self.model_fields_set

    @property
    def search_term(self) -> Optional[str]:
        if self.search_query is None:
            return None
        return self.search_query.strip() or None


class TaskView(BaseModel):
    """Task as returned to callers, with the derived overdue flag."""
    id: str
    user_id: str
    organization_id: Optional[str] = None
    title: str
    description: Optional[str] = None
    completed: bool
    priority: TaskPriority
    due_date: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime
    is_overdue: bool = False

    @classmethod
    def from_task(cls, task: TaskModel, now: Optional[datetime] = None) -> "TaskView":
        return cls(
            id=task.id,
            user_id=task.user_id,
            organization_id=task.organization_id,
            title=task.title,
            description=task.description,
            completed=task.completed,
            priority=task.priority,
            due_date=task.due_date,
            created_at=task.created_at,
            updated_at=task.updated_at,
            is_overdue=task.is_overdue(now),
        )


class DeleteResponse(BaseModel):
    success: bool = True
