"""ASGI entry point for the storefront app: `uvicorn crudsuite.apps.storefront:app`."""

from crudsuite.main import create_app

app = create_app("storefront")
