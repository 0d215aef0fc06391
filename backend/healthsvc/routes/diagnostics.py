"""
Health Check Service — Diagnostics Route
=========================================

What:  GET /error-test always fails, so the error stage can be exercised
       end-to-end against a running deployment.
How:   Raises HandlerFailureError; the handler registered in main.py turns it
       into the fixed 500 response and logs the detail.
"""

import logging

from fastapi import APIRouter, Request

from healthsvc.exceptions import HandlerFailureError

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Diagnostics"])


@router.get("/error-test", summary="Trigger the error handler")
async def error_test(request: Request) -> None:
    logger.debug("Raising deliberate failure for %s", request.url.path)
    raise HandlerFailureError("Test error", context={"path": request.url.path})
