"""Tests for project operations and cascading deletion."""
import pytest
from sqlalchemy import func, select
from sqlalchemy.exc import OperationalError

from app.core.exceptions import NotFoundError, StorageError
from app.crud.project import project as project_crud
from app.models.project import Project
from app.models.task import Task
from app.models.user import UserProject
from app.services.project_service import project_service


@pytest.mark.asyncio
async def test_create_project(db_session):
    created = await project_service.create_project(db_session, name="Gemini")

    names = await project_service.get_names(db_session, ids=[created.id])
    assert names == {created.id: "Gemini"}


@pytest.mark.asyncio
async def test_get_names_unknown_id(db_session, test_project):
    with pytest.raises(NotFoundError):
        await project_service.get_names(db_session, ids=[test_project.id, 999])


@pytest.mark.asyncio
async def test_delete_project_cascades(db_session, project_with_tasks, test_user):
    keep = Project(name="Keep")
    db_session.add(keep)
    await db_session.commit()
    db_session.add_all(
        [
            Task(name="Survivor", date="2024-02-01", project_id=keep.id, status="todo"),
            UserProject(user_id=test_user.id, project_id=keep.id),
        ]
    )
    await db_session.commit()

    counts = await project_service.delete_project(db_session, project_id=project_with_tasks.id)

    assert counts == {"tasks": 3, "memberships": 2, "projects": 1}
    orphan_tasks = await db_session.execute(
        select(func.count()).select_from(Task).where(Task.project_id == project_with_tasks.id)
    )
    assert orphan_tasks.scalar_one() == 0
    dangling = await db_session.execute(
        select(func.count()).select_from(UserProject).where(UserProject.project_id == project_with_tasks.id)
    )
    assert dangling.scalar_one() == 0
    survivors = await db_session.execute(select(Task.name))
    assert survivors.scalars().all() == ["Survivor"]
    memberships = await db_session.execute(select(UserProject.project_id))
    assert memberships.scalars().all() == [keep.id]


@pytest.mark.asyncio
async def test_delete_unknown_project_is_noop(db_session):
    counts = await project_service.delete_project(db_session, project_id=404)

    assert counts == {"tasks": 0, "memberships": 0, "projects": 0}


@pytest.mark.asyncio
async def test_delete_project_rolls_back_on_failure(db_session, project_with_tasks, monkeypatch):
    project_id = project_with_tasks.id

    async def broken(*args, **kwargs):
        raise OperationalError("DELETE", {}, Exception("disk full"))

    monkeypatch.setattr(project_crud, "remove", broken)

    with pytest.raises(StorageError):
        await project_service.delete_project(db_session, project_id=project_id)

    tasks_left = await db_session.execute(
        select(func.count()).select_from(Task).where(Task.project_id == project_id)
    )
    assert tasks_left.scalar_one() == 3
    members_left = await db_session.execute(select(func.count()).select_from(UserProject))
    assert members_left.scalar_one() == 2
