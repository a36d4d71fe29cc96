from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.core.errors import ResourceShapingError

PROBLEM_JSON = "application/problem+json"
VALIDATION_PROBLEM_TYPE = "https://courselibrary.example/modelvalidationproblem"
_LOG = logging.getLogger("app.errors")


def install_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(RequestValidationError)
    async def _validation_problem(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=422,
            media_type=PROBLEM_JSON,
            content=jsonable_encoder(
                {
                    "type": VALIDATION_PROBLEM_TYPE,
                    "title": "One or more validation errors occurred.",
                    "status": 422,
                    "detail": "See the errors field for details",
                    "instance": request.url.path,
                    "errors": exc.errors(),
                }
            ),
        )

    @app.exception_handler(ResourceShapingError)
    async def _resource_shaping_failure(request: Request, exc: ResourceShapingError):
        _LOG.error(
            "%s %s failed: %s request_id=%s",
            request.method,
            request.url.path,
            exc,
            getattr(request.state, "request_id", None),
        )
        return JSONResponse(status_code=500, content={"detail": "An unexpected fault happened. Try again later."})
