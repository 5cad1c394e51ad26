"""
crudsuite — Project Store (Embedded Task Mutation)
====================================================

What:  ResourceStore for projects, plus operations on the embedded task list.
How:   Every task operation is one atomic update addressed by the composite
       key (project id, task id):

       add_task            $push onto `tasks`, returns the updated project
       remove_task         $pull by task `_id`
       set_task_completed  positional $set on `tasks.$.completed`

       The project document is never read, changed in Python and written
       back; concurrent updates to different tasks of one project therefore
       don't overwrite each other. Concurrent updates to the *same* task are
       last-write-wins.

Not-found rules:
    add_task            missing project → NotFoundError("project")
    remove_task         missing project → NotFoundError("project");
                        missing task is not distinguished from success
    set_task_completed  missing project or task → NotFoundError
    Malformed ids are treated as missing.
"""

import logging
from typing import Any, Dict

from bson import ObjectId
from pymongo import ReturnDocument
from pymongo.asynchronous.collection import AsyncCollection

from crudsuite.exceptions import NotFoundError
from crudsuite.schemas.project import TaskCreate
from crudsuite.services.resource_store import (
    ResourceStore,
    parse_object_id,
    serialize_document,
)

logger = logging.getLogger(__name__)


class ProjectStore(ResourceStore):
    """Projects collection with embedded tasks."""

    def __init__(self, collection: AsyncCollection):
        super().__init__(collection, resource="project")

    def to_document(self, payload) -> Dict[str, Any]:
        # New projects always start with an empty task list
        return {**payload.model_dump(by_alias=True), "tasks": []}

    async def add_task(self, project_id: str, payload: TaskCreate) -> Dict[str, Any]:
        """
        Appends a new task to a project.

        Returns:
            The updated project, including the new task with its `id`.

        Raises:
            NotFoundError: no project with that id (→ 404)
            StoreError: the update failed (→ 500)
        """
        pid = parse_object_id(project_id)
        if pid is None:
            raise NotFoundError(resource="project", resource_id=project_id)

        task = {"_id": ObjectId(), "title": payload.title, "completed": False}
        project = await self._run(
            "Failed to add task",
            self.collection.find_one_and_update(
                {"_id": pid},
                {"$push": {"tasks": task}},
                return_document=ReturnDocument.AFTER,
            ),
        )
        if project is None:
            raise NotFoundError(resource="project", resource_id=project_id)

        logger.info("Added task %s to project %s", task["_id"], project_id)
        return serialize_document(project)

    async def remove_task(self, project_id: str, task_id: str) -> None:
        """
        Removes a task from its project's list.

        Raises:
            NotFoundError: no project with that id (→ 404)
            StoreError: the update failed (→ 500)
        """
        pid = parse_object_id(project_id)
        if pid is None:
            raise NotFoundError(resource="project", resource_id=project_id)

        tid = parse_object_id(task_id)
        if tid is None:
            # Nothing can match; only the parent's existence matters
            await self._require_project(pid, project_id, "Failed to delete task")
            return

        result = await self._run(
            "Failed to delete task",
            self.collection.update_one({"_id": pid}, {"$pull": {"tasks": {"_id": tid}}}),
        )
        if result.matched_count == 0:
            raise NotFoundError(resource="project", resource_id=project_id)

        if result.modified_count:
            logger.info("Removed task %s from project %s", task_id, project_id)
        else:
            logger.debug("Task %s not in project %s; nothing removed", task_id, project_id)

    async def set_task_completed(self, project_id: str, task_id: str, completed: bool) -> None:
        """
        Sets the `completed` flag of one task. Idempotent.

        Raises:
            NotFoundError: project (→ 404) or task (→ 404) does not exist
            StoreError: the update failed (→ 500)
        """
        pid = parse_object_id(project_id)
        if pid is None:
            raise NotFoundError(resource="project", resource_id=project_id)

        tid = parse_object_id(task_id)
        if tid is None:
            await self._require_project(pid, project_id, "Failed to update task")
            raise NotFoundError(resource="task", resource_id=task_id)

        result = await self._run(
            "Failed to update task",
            self.collection.update_one(
                {"_id": pid, "tasks._id": tid},
                {"$set": {"tasks.$.completed": completed}},
            ),
        )
        if result.matched_count == 0:
            # Tell a missing parent apart from a missing child
            await self._require_project(pid, project_id, "Failed to update task")
            raise NotFoundError(resource="task", resource_id=task_id)

        logger.info("Task %s in project %s set completed=%s", task_id, project_id, completed)

    # ── Helpers ───────────────────────────────────────────────────────────

    async def _require_project(self, pid: ObjectId, project_id: str, failure: str) -> None:
        found = await self._run(
            failure, self.collection.find_one({"_id": pid}, {"_id": 1})
        )
        if found is None:
            raise NotFoundError(resource="project", resource_id=project_id)
