"""ASGI entry point for the inventory app: `uvicorn crudsuite.apps.inventory:app`."""

from crudsuite.main import create_app

app = create_app("inventory")
