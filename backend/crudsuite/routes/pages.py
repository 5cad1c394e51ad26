"""
crudsuite — Page Route
========================

What:  GET / serves the app's single HTML page (inline CSS and JS).
How:   Pages ship as package data under crudsuite/pages/<app_key>.html and
       are read once per process.

The page script is the whole presentation layer: it fetches /api/...,
re-renders its fragment from scratch after every change, and shows a
message that clears itself after three seconds when a request fails.
"""

from functools import lru_cache
from importlib import resources

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

router = APIRouter(tags=["Pages"])


@lru_cache(maxsize=None)
def load_page(app_key: str) -> str:
    """Returns the HTML of the given app's page."""
    return resources.files("crudsuite.pages").joinpath(f"{app_key}.html").read_text(
        encoding="utf-8"
    )


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
async def index(request: Request) -> HTMLResponse:
    return HTMLResponse(load_page(request.app.state.app_key))
