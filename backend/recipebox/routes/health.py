"""
RecipeBox Backend: Health Check & Root Routes
===============================================

What:  GET /health for monitoring probes and GET / as a liveness greeting.
How:   /health pings the document store and reports connectivity and uptime.
Who:   Docker health checks, load balancers, and humans checking the server is up.

Status levels:
    - healthy:   Document store answers ping (HTTP 200)
    - unhealthy: Document store unreachable (HTTP 503, stop routing traffic)
"""

import logging
import time

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from recipebox import __version__
from recipebox.database import ping_database
from recipebox.schemas.recipe import HealthResponse, MessageResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

# Initialized once when the module loads
_start_time = time.time()


@router.get("/", response_model=MessageResponse, summary="Greeting")
async def root() -> MessageResponse:
    return MessageResponse(message="Hello World!")


@router.get(
    "/health",
    response_model=HealthResponse,
    responses={503: {"description": "Document store unreachable", "model": HealthResponse}},
    summary="Service health check",
    description=(
        "Returns the health status of the backend and its document store. "
        "Responds 503 when the store cannot be reached."
    ),
)
async def health_check(request: Request):
    """
    Check the health of the service and its document store.

    The check is a `ping` command: cheap enough to run every few seconds.
    """
    db = getattr(request.app.state, "db", None)
    connected = db is not None and await ping_database(db)

    if not connected:
        logger.warning("Health check: document store unreachable")

    body = HealthResponse(
        status="healthy" if connected else "unhealthy",
        version=__version__,
        database="connected" if connected else "disconnected",
        uptime_seconds=round(time.time() - _start_time, 2),
    )
    if not connected:
        return JSONResponse(status_code=503, content=body.model_dump())
    return body
