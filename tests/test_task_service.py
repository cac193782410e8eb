"""Tests for the task lifecycle."""
import pytest
from sqlalchemy import select
from sqlalchemy.exc import OperationalError

from app.core.exceptions import NotFoundError, StorageError
from app.crud.task import task as task_crud
from app.models.task import Task, TaskStatus
from app.schemas.task import TaskCreate
from app.services.task_service import task_service


async def _column(db_session, column, task_id):
    result = await db_session.execute(select(column).where(Task.id == task_id))
    return result.scalar_one()


@pytest.mark.asyncio
async def test_create_task_marks_missing_fields_absent(db_session, test_project):
    task_in = TaskCreate(name="Fix bug", date="2024-01-01", projectId=test_project.id, status="todo")

    created = await task_service.create_task(db_session, task_in=task_in)

    assert created.id is not None
    assert await _column(db_session, Task.descr, created.id) is None
    assert await _column(db_session, Task.empl_id, created.id) is None
    assert await _column(db_session, Task.priority, created.id) is None
    assert await _column(db_session, Task.date_act, created.id) is None

    listed = await task_service.list_by_project(db_session, project_id=test_project.id)
    assert len(listed) == 1
    assert listed[0].descr == ""
    assert listed[0].empl_id == ""
    assert listed[0].priority == ""


@pytest.mark.asyncio
async def test_create_task_keeps_explicit_empty_string(db_session, test_project):
    task_in = TaskCreate(
        name="Empty descr",
        date="2024-01-01",
        project_id=test_project.id,
        status="todo",
        descr="",
    )

    created = await task_service.create_task(db_session, task_in=task_in)

    assert await _column(db_session, Task.descr, created.id) == ""


@pytest.mark.asyncio
async def test_update_status_accepts_any_value(db_session, project_with_tasks):
    task_id = (await db_session.execute(select(Task.id).order_by(Task.id))).scalars().first()

    await task_service.update_status(db_session, task_id=task_id, status=TaskStatus.DONE.value)
    assert await _column(db_session, Task.status, task_id) == "done"

    await task_service.update_status(db_session, task_id=task_id, status="bogus-value")
    assert await _column(db_session, Task.status, task_id) == "bogus-value"


@pytest.mark.asyncio
async def test_assign_and_unassign(db_session, project_with_tasks, other_user):
    task_id = (await db_session.execute(select(Task.id).where(Task.name == "Unassigned"))).scalar_one()

    await task_service.assign(db_session, task_id=task_id, employee_id=str(other_user.id))
    assert await _column(db_session, Task.empl_id, task_id) == str(other_user.id)

    await task_service.assign(db_session, task_id=task_id, employee_id="")
    assert await _column(db_session, Task.empl_id, task_id) == ""


@pytest.mark.asyncio
async def test_delete_task(db_session, project_with_tasks):
    task_id = (await db_session.execute(select(Task.id).where(Task.name == "Wrapped"))).scalar_one()

    await task_service.delete_task(db_session, task_id=task_id)

    remaining = await db_session.execute(select(Task.name).order_by(Task.id))
    assert remaining.scalars().all() == ["Assigned", "Unassigned"]


@pytest.mark.asyncio
async def test_list_by_project_left_joins_avatar(db_session, project_with_tasks, avatar_bytes):
    listed = await task_service.list_by_project(db_session, project_id=project_with_tasks.id)
    by_name = {item.name: item for item in listed}

    assert set(by_name) == {"Assigned", "Unassigned", "Wrapped"}
    assert by_name["Assigned"].avatar == avatar_bytes
    assert by_name["Unassigned"].avatar == b""
    assert by_name["Wrapped"].priority == "urgent"
    assert by_name["Wrapped"].descr == "needs review"


@pytest.mark.asyncio
async def test_list_by_project_other_project_is_empty(db_session, project_with_tasks):
    assert await task_service.list_by_project(db_session, project_id=project_with_tasks.id + 1) == []


@pytest.mark.asyncio
async def test_get_by_id_missing(db_session):
    with pytest.raises(NotFoundError):
        await task_service.get_by_id(db_session, task_id=12345)


@pytest.mark.asyncio
async def test_storage_failure_is_storage_error(db_session, monkeypatch):
    async def broken(*args, **kwargs):
        raise OperationalError("SELECT", {}, Exception("connection refused"))

    monkeypatch.setattr(task_crud, "get", broken)

    with pytest.raises(StorageError) as exc_info:
        await task_service.get_by_id(db_session, task_id=1)

    assert "connection refused" in exc_info.value.detail
