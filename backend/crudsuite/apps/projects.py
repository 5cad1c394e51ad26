"""ASGI entry point for the projects app: `uvicorn crudsuite.apps.projects:app`."""

from crudsuite.main import create_app

app = create_app("projects")
