"""
crudsuite — Project & Task Schemas
====================================

What:  Models for the projects app. A Project owns an ordered list of Tasks;
       a Task has no identity outside its Project and is addressed by the
       composite key (project id, task id).
"""

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class ProjectCreate(BaseModel):
    """Body of POST /api/projects. A name is required."""
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=1, description="Project name")


class TaskCreate(BaseModel):
    """Body of POST /api/projects/{id}/tasks."""
    model_config = ConfigDict(str_strip_whitespace=True)

    title: str = Field(..., min_length=1, description="Task title")


class TaskUpdate(BaseModel):
    """Body of PATCH /api/projects/{pid}/tasks/{tid}."""
    completed: bool = Field(..., description="New completion flag")


class Task(BaseModel):
    id: str = Field(description="Task id (ObjectId hex), unique within its project")
    title: str = ""
    completed: bool = False


class Project(BaseModel):
    id: str = Field(description="Document id (ObjectId hex)")
    name: str = ""
    tasks: List[Task] = Field(default_factory=list)
