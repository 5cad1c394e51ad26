"""
crudsuite — Project & Task Route Handlers
===========================================

What:  CRUD for projects and their embedded tasks (projects app only).

Route Inventory:
    GET    /api/projects                           list projects with tasks
    POST   /api/projects                           create {name}
    DELETE /api/projects/{project_id}              delete (idempotent)
    POST   /api/projects/{project_id}/tasks        add {title} → updated project
    DELETE /api/projects/{project_id}/tasks/{tid}  remove a task
    PATCH  /api/projects/{project_id}/tasks/{tid}  set {completed}

Only these routes can answer 404 (NotFoundError from ProjectStore).
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, status
from pymongo.asynchronous.database import AsyncDatabase

from crudsuite.database import get_database
from crudsuite.schemas.common import ErrorResponse, MessageResponse
from crudsuite.schemas.project import Project, ProjectCreate, TaskCreate, TaskUpdate
from crudsuite.services.project_store import ProjectStore

logger = logging.getLogger(__name__)

PROJECTS_COLLECTION = "projects"

router = APIRouter(prefix="/api", tags=["Projects"])

_400 = {"description": "Missing or invalid field", "model": ErrorResponse}
_404 = {"description": "Project or task not found", "model": ErrorResponse}
_500 = {"description": "Store error", "model": ErrorResponse}


def get_project_store(db: AsyncDatabase = Depends(get_database)) -> ProjectStore:
    return ProjectStore(db[PROJECTS_COLLECTION])


@router.get(
    "/projects",
    response_model=List[Project],
    responses={500: _500},
    summary="List projects with their tasks",
)
async def list_projects(store: ProjectStore = Depends(get_project_store)) -> List[dict]:
    return await store.list_all()


@router.post(
    "/projects",
    response_model=Project,
    status_code=status.HTTP_201_CREATED,
    responses={400: _400, 500: _500},
    summary="Create a project",
)
async def create_project(
    payload: ProjectCreate,
    store: ProjectStore = Depends(get_project_store),
) -> dict:
    return await store.create(payload)


@router.delete(
    "/projects/{project_id}",
    response_model=MessageResponse,
    responses={500: _500},
    summary="Delete a project and all of its tasks",
)
async def delete_project(
    project_id: str,
    store: ProjectStore = Depends(get_project_store),
) -> MessageResponse:
    await store.delete_by_id(project_id)
    return MessageResponse(message="Deleted")


@router.post(
    "/projects/{project_id}/tasks",
    response_model=Project,
    status_code=status.HTTP_201_CREATED,
    responses={400: _400, 404: _404, 500: _500},
    summary="Add a task to a project",
)
async def add_task(
    project_id: str,
    payload: TaskCreate,
    store: ProjectStore = Depends(get_project_store),
) -> dict:
    """Returns the whole updated project so the page can re-render it."""
    return await store.add_task(project_id, payload)


@router.delete(
    "/projects/{project_id}/tasks/{task_id}",
    response_model=MessageResponse,
    responses={404: _404, 500: _500},
    summary="Remove a task from a project",
)
async def delete_task(
    project_id: str,
    task_id: str,
    store: ProjectStore = Depends(get_project_store),
) -> MessageResponse:
    await store.remove_task(project_id, task_id)
    return MessageResponse(message="Task deleted")


@router.patch(
    "/projects/{project_id}/tasks/{task_id}",
    response_model=MessageResponse,
    responses={400: _400, 404: _404, 500: _500},
    summary="Set a task's completed flag",
)
async def update_task(
    project_id: str,
    task_id: str,
    payload: TaskUpdate,
    store: ProjectStore = Depends(get_project_store),
) -> MessageResponse:
    await store.set_task_completed(project_id, task_id, payload.completed)
    return MessageResponse(message="Task updated")
