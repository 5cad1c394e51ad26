"""
crudsuite — Health Check Route
================================

What:  Health check endpoint for monitoring and container probes.
How:   Sends MongoDB's `ping` command through the app's database.

Status levels:
    - healthy:   the database answered the ping (HTTP 200)
    - unhealthy: the ping failed (HTTP 503)
"""

import logging
import time

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from pymongo.asynchronous.database import AsyncDatabase
from pymongo.errors import PyMongoError

from crudsuite import __version__
from crudsuite.database import get_database, ping_database
from crudsuite.schemas.common import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

# Initialized once when the module loads
_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    responses={503: {"description": "Database unreachable", "model": HealthResponse}},
    summary="Service health check",
)
async def health_check(
    request: Request,
    db: AsyncDatabase = Depends(get_database),
) -> JSONResponse:
    db_status = "connected"
    overall = "healthy"

    try:
        await ping_database(db)
    except PyMongoError as e:
        db_status = "disconnected"
        overall = "unhealthy"
        logger.warning("Health check: database unreachable: %s", type(e).__name__)

    body = HealthResponse(
        status=overall,
        app=request.app.state.app_key,
        version=__version__,
        database=db_status,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
    return JSONResponse(
        status_code=200 if overall == "healthy" else 503,
        content=body.model_dump(),
    )
