"""
Health Check Service — Health Check Route
==========================================

What:  Liveness/readiness endpoint for load balancers and Kubernetes probes.
How:   Always answers 200 with the literal body `OK`.
Who:   Called by the Dockerfile HEALTHCHECK, k8s probes, and monitoring.

The service has no dependencies to probe, so being able to answer at all is
the whole health signal.
"""

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

router = APIRouter(tags=["Health"])


@router.api_route(
    "/health",
    methods=["GET", "HEAD"],
    response_class=HTMLResponse,
    summary="Service health check",
)
async def health_check() -> HTMLResponse:
    """Return 200 `OK` as text/html."""
    return HTMLResponse(content="OK", status_code=200)
