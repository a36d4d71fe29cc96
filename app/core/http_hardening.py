from __future__ import annotations

import json
import logging
import re
from time import perf_counter
from uuid import uuid4

from fastapi import FastAPI, Request

from app.services.pagination import PAGINATION_HEADER

REQUEST_ID_HEADER = "X-Request-ID"
API_PREFIX = "/api/"
_REQUEST_ID_RE = re.compile(r"^[A-Za-z0-9._-]{1,128}$")
_LOG = logging.getLogger("app.http")

SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "no-referrer",
}


def _request_id_from_header(raw: str | None) -> str:
    value = str(raw or "").strip()
    if not value or not _REQUEST_ID_RE.fullmatch(value):
        return uuid4().hex
    return value


def _response_headers(request: Request) -> dict[str, str]:
    headers = dict(SECURITY_HEADERS)
    # Shaped bodies depend on the query string; author reads also on Accept.
    headers["Cache-Control"] = "no-store"
    if request.url.path.startswith(API_PREFIX):
        headers["Vary"] = "Accept"
    return headers


def _total_count(raw: str | None) -> int | None:
    if not raw:
        return None
    try:
        return int(json.loads(raw)["totalCount"])
    except (ValueError, KeyError, TypeError):
        return None


def install_http_hardening(app: FastAPI) -> None:
    @app.middleware("http")
    async def _http_hardening_middleware(request: Request, call_next):
        request_id = _request_id_from_header(request.headers.get(REQUEST_ID_HEADER))
        request.state.request_id = request_id
        started_at = perf_counter()

        response = await call_next(request)

        for key, value in _response_headers(request).items():
            response.headers[key] = value
        response.headers[REQUEST_ID_HEADER] = request_id

        duration_ms = (perf_counter() - started_at) * 1000.0
        _LOG.info(
            "%s %s status=%s media_type=%s total_count=%s duration_ms=%.2f request_id=%s",
            request.method,
            request.url.path,
            response.status_code,
            response.headers.get("content-type", "-").split(";", 1)[0],
            _total_count(response.headers.get(PAGINATION_HEADER)),
            duration_ms,
            request_id,
        )
        return response
