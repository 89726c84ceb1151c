from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse
from pydantic import BaseModel
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

JSON_ERROR_MEDIA_TYPE = "application/json; charset=utf-8"
NOT_FOUND_TEXT = "404 page not found"


class ErrorBody(BaseModel):
    status: int
    message: str


def error_response(status_code: int, message: str, headers: dict[str, str] | None = None) -> JSONResponse:
    body = ErrorBody(status=status_code, message=message)
    merged = {"X-Content-Type-Options": "nosniff"}
    merged.update(headers or {})
    return JSONResponse(
        body.model_dump(mode="json"),
        status_code=status_code,
        headers=merged,
        media_type=JSON_ERROR_MEDIA_TYPE,
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    # Handlers never raise 404 themselves; a 404 here is always an unmatched route.
    if exc.status_code == 404:
        logger.info("no route for %s %s", request.method, request.url.path)
        return PlainTextResponse(NOT_FOUND_TEXT, status_code=404)
    return error_response(exc.status_code, str(exc.detail), headers=exc.headers)


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error("unhandled error on %s %s: %r", request.method, request.url.path, exc, exc_info=exc)
    return error_response(500, "internal server error")


def install_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
