from datetime import datetime, timedelta, timezone
from unittest.mock import Mock
from uuid import UUID

import pytest
from sqlalchemy.exc import OperationalError

from taskboard.models import Task, TaskPriority
from taskboard.schemas.task import TaskCreate, TaskListFilters, TaskUpdate
from taskboard.services import TaskNotFoundError, create_task, delete_task, get_task, list_tasks, update_task
from taskboard.services.task_mutation import task_updater

from .helpers import ALICE, BOB, MISSING_ID, ORG_A, at


def test_create_applies_defaults(db):
    view = create_task(db, ALICE, TaskCreate(title="Write tests"))

    assert view.user_id == ALICE
    assert view.completed is False
    assert view.priority == TaskPriority.MEDIUM
    assert view.organization_id is None
    assert view.description is None
    assert view.created_at == view.updated_at
    UUID(view.id)


def test_created_task_is_listed_exactly_once(db):
    view = create_task(
        db, ALICE, TaskCreate(title="Org task", priority=TaskPriority.HIGH, organization_id=UUID(ORG_A))
    )

    results = list_tasks(db, ALICE, TaskListFilters(organization_id=UUID(ORG_A), priority=TaskPriority.HIGH))
    assert [result.id for result in results] == [view.id]
    assert results[0].organization_id == ORG_A


def test_update_only_touches_fields_present(db, make_task):
    task = make_task(title="Original", description="keep me", priority=TaskPriority.LOW, created_at=at(1))

    view = update_task(db, ALICE, task.id, TaskUpdate(completed=True))

    assert view.completed is True
    assert view.title == "Original"
    assert view.description == "keep me"
    assert view.priority == TaskPriority.LOW
    assert view.created_at == at(1)
    assert view.updated_at > at(1)


def test_update_with_explicit_nulls_clears_fields(db, make_task):
    task = make_task(description="details", due_date=at(20), organization_id=ORG_A)

    view = update_task(
        db, ALICE, task.id, TaskUpdate(description=None, due_date=None, organization_id=None)
    )

    assert view.description is None
    assert view.due_date is None
    assert view.organization_id is None


def test_update_moves_task_into_an_organization(db, make_task):
    task = make_task()

    view = update_task(db, ALICE, task.id, TaskUpdate(organization_id=UUID(ORG_A)))

    assert view.organization_id == ORG_A


def test_update_by_non_owner_is_not_found_and_changes_nothing(db, make_task):
    task = make_task(ALICE, "Alice's", priority=TaskPriority.LOW, created_at=at(1))

    with pytest.raises(TaskNotFoundError):
        update_task(db, BOB, task.id, TaskUpdate(title="hijacked", priority=TaskPriority.URGENT))

    db.expire_all()
    stored = db.get(Task, task.id)
    assert stored.title == "Alice's"
    assert stored.priority == TaskPriority.LOW
    assert stored.updated_at == at(1)


def test_not_owned_and_missing_are_the_same_error(db, make_task):
    task = make_task(ALICE)

    with pytest.raises(TaskNotFoundError) as not_owned:
        get_task(db, BOB, task.id)
    with pytest.raises(TaskNotFoundError) as missing:
        get_task(db, BOB, MISSING_ID)

    assert type(not_owned.value) is type(missing.value)


def test_delete_removes_task_permanently(db, make_task):
    task = make_task()
    other = make_task(title="stays")

    result = delete_task(db, ALICE, task.id)

    assert result.success is True
    assert [view.id for view in list_tasks(db, ALICE)] == [other.id]
    with pytest.raises(TaskNotFoundError):
        delete_task(db, ALICE, task.id)


def test_delete_by_non_owner_keeps_task(db, make_task):
    task = make_task(ALICE)

    with pytest.raises(TaskNotFoundError):
        delete_task(db, BOB, task.id)

    assert [view.id for view in list_tasks(db, ALICE)] == [task.id]


def test_datastore_failure_rolls_back_and_propagates():
    db = Mock()
    db.commit.side_effect = OperationalError("INSERT INTO tasks", {}, Exception("database is locked"))

    with pytest.raises(OperationalError):
        create_task(db, ALICE, TaskCreate(title="Never stored"))

    db.rollback.assert_called_once()
    db.refresh.assert_not_called()


def test_task_updater_binds_session_and_requester(db, make_task):
    task = make_task(priority=TaskPriority.LOW)
    update = task_updater(db, ALICE)

    view = update(task.id, TaskUpdate(priority=TaskPriority.URGENT))

    assert view.priority == TaskPriority.URGENT
    with pytest.raises(TaskNotFoundError):
        task_updater(db, BOB)(task.id, TaskUpdate(priority=TaskPriority.LOW))


def test_timestamps_round_trip_as_aware_utc(db):
    due = datetime(2020, 1, 1, 14, 0, tzinfo=timezone(timedelta(hours=2)))
    created = create_task(db, ALICE, TaskCreate(title="Call back", due_date=due))

    listed = list_tasks(db, ALICE)
    assert [view.id for view in listed] == [created.id]
    view = listed[0]
    assert view.due_date == datetime(2020, 1, 1, 12, 0, tzinfo=timezone.utc)
    assert view.created_at.tzinfo is not None
    assert view.updated_at.utcoffset() == timedelta(0)
    assert view.is_overdue is True

    updated = update_task(db, ALICE, created.id, TaskUpdate(completed=True))
    assert updated.updated_at >= updated.created_at
    assert updated.is_overdue is False
