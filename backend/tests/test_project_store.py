"""
crudsuite — Project Store Unit Tests
======================================

What:  Tests for embedded-task operations addressed by (project id, task id).

What we test:
    ✅ new projects start with an empty task list
    ✅ add_task appends in order and returns the updated project
    ✅ add_task on a missing project → NotFoundError, nothing created
    ✅ remove_task: missing project → NotFoundError; missing task → success
    ✅ set_task_completed is idempotent and only touches the addressed task
    ✅ set_task_completed: missing project / task → NotFoundError
"""

import pytest
from bson import ObjectId

from crudsuite.exceptions import NotFoundError, StoreError
from crudsuite.schemas.project import ProjectCreate, TaskCreate
from crudsuite.services.project_store import ProjectStore


@pytest.fixture
def store(mongo_db):
    return ProjectStore(mongo_db["projects"])


async def _project_with_tasks(store, *titles):
    project = await store.create(ProjectCreate(name="Launch"))
    for title in titles:
        project = await store.add_task(project["id"], TaskCreate(title=title))
    return project


class TestProjectCreate:

    @pytest.mark.asyncio
    async def test_create_starts_with_no_tasks(self, store):
        project = await store.create(ProjectCreate(name="Launch"))
        assert project["name"] == "Launch"
        assert project["tasks"] == []

        listed = await store.list_all()
        assert listed == [project]


class TestAddTask:

    @pytest.mark.asyncio
    async def test_add_task_returns_updated_project(self, store):
        project = await _project_with_tasks(store, "Write docs", "Ship")

        titles = [t["title"] for t in project["tasks"]]
        assert titles == ["Write docs", "Ship"]
        assert all(t["completed"] is False for t in project["tasks"])
        assert all(ObjectId.is_valid(t["id"]) for t in project["tasks"])
        assert project["tasks"][0]["id"] != project["tasks"][1]["id"]

    @pytest.mark.asyncio
    async def test_add_task_missing_project(self, store):
        with pytest.raises(NotFoundError, match="Project not found"):
            await store.add_task(str(ObjectId()), TaskCreate(title="Orphan"))
        assert await store.list_all() == []

    @pytest.mark.asyncio
    async def test_add_task_malformed_project_id(self, store):
        with pytest.raises(NotFoundError):
            await store.add_task("nope", TaskCreate(title="Orphan"))


class TestRemoveTask:

    @pytest.mark.asyncio
    async def test_remove_task(self, store):
        project = await _project_with_tasks(store, "A", "B")
        first, second = project["tasks"]

        await store.remove_task(project["id"], first["id"])

        [stored] = await store.list_all()
        assert [t["id"] for t in stored["tasks"]] == [second["id"]]

    @pytest.mark.asyncio
    async def test_remove_unknown_task_is_success(self, store):
        project = await _project_with_tasks(store, "A")

        await store.remove_task(project["id"], str(ObjectId()))
        await store.remove_task(project["id"], "not-an-id")

        [stored] = await store.list_all()
        assert len(stored["tasks"]) == 1

    @pytest.mark.asyncio
    async def test_remove_task_missing_project(self, store):
        with pytest.raises(NotFoundError, match="Project not found"):
            await store.remove_task(str(ObjectId()), str(ObjectId()))

    @pytest.mark.asyncio
    async def test_remove_malformed_task_missing_project(self, store):
        with pytest.raises(NotFoundError, match="Project not found"):
            await store.remove_task(str(ObjectId()), "not-an-id")


class TestSetTaskCompleted:

    @pytest.mark.asyncio
    async def test_toggle_only_addressed_task(self, store):
        project = await _project_with_tasks(store, "A", "B")
        first, second = project["tasks"]

        await store.set_task_completed(project["id"], second["id"], True)

        [stored] = await store.list_all()
        flags = {t["id"]: t["completed"] for t in stored["tasks"]}
        assert flags == {first["id"]: False, second["id"]: True}

    @pytest.mark.asyncio
    async def test_toggle_is_idempotent(self, store):
        project = await _project_with_tasks(store, "A")
        task_id = project["tasks"][0]["id"]

        await store.set_task_completed(project["id"], task_id, True)
        once = await store.list_all()
        await store.set_task_completed(project["id"], task_id, True)
        twice = await store.list_all()

        assert once == twice
        assert twice[0]["tasks"][0]["completed"] is True

    @pytest.mark.asyncio
    async def test_toggle_back_to_open(self, store):
        project = await _project_with_tasks(store, "A")
        task_id = project["tasks"][0]["id"]

        await store.set_task_completed(project["id"], task_id, True)
        await store.set_task_completed(project["id"], task_id, False)

        [stored] = await store.list_all()
        assert stored["tasks"][0]["completed"] is False

    @pytest.mark.asyncio
    async def test_unknown_task(self, store):
        project = await _project_with_tasks(store, "A")
        with pytest.raises(NotFoundError, match="Task not found"):
            await store.set_task_completed(project["id"], str(ObjectId()), True)

    @pytest.mark.asyncio
    async def test_malformed_task_id(self, store):
        project = await _project_with_tasks(store, "A")
        with pytest.raises(NotFoundError, match="Task not found"):
            await store.set_task_completed(project["id"], "bad", True)

    @pytest.mark.asyncio
    async def test_unknown_project(self, store):
        with pytest.raises(NotFoundError, match="Project not found"):
            await store.set_task_completed(str(ObjectId()), str(ObjectId()), True)


class TestProjectStoreFailures:

    @pytest.mark.asyncio
    async def test_add_task_store_failure(self, failing_collection):
        store = ProjectStore(failing_collection)
        with pytest.raises(StoreError, match="Failed to add task"):
            await store.add_task(str(ObjectId()), TaskCreate(title="A"))

    @pytest.mark.asyncio
    async def test_update_task_store_failure(self, failing_collection):
        store = ProjectStore(failing_collection)
        with pytest.raises(StoreError, match="Failed to update task"):
            await store.set_task_completed(str(ObjectId()), str(ObjectId()), True)

    @pytest.mark.asyncio
    async def test_delete_task_store_failure(self, failing_collection):
        store = ProjectStore(failing_collection)
        with pytest.raises(StoreError, match="Failed to delete task"):
            await store.remove_task(str(ObjectId()), str(ObjectId()))
