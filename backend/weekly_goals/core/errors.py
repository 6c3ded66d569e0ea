"""
Domain errors and their HTTP translation.

Services raise these instead of `HTTPException` so they stay usable from
scripts and tests; `register_exception_handlers` turns them into the
`{"error": "..."}` bodies the frontend expects.

Example:
    from weekly_goals.core.errors import NotFoundError

    goal = db.get(Goal, goal_id)
    if goal is None:
        raise NotFoundError("Goal not found")
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class GoalTrackerError(Exception):
    """Base error carrying the HTTP status it maps to."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(GoalTrackerError):
    """404 - The goal id does not exist."""

    status_code = 404


class InvalidInputError(GoalTrackerError):
    """400 - Out-of-range week count or wrong progress field for the goal type."""

    status_code = 400


class StoreFailure(GoalTrackerError):
    """500 - The database rejected or failed the operation."""

    status_code = 500


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def _format_validation_error(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        # loc looks like ("body", "title") or ("query", "weeks")
        loc = ".".join(str(p) for p in err.get("loc", ())[1:])
        msg = err.get("msg", "Invalid value")
        parts.append(f"{loc}: {msg}" if loc else msg)
    return "; ".join(parts) or "Invalid request"


async def _goal_tracker_error_handler(request: Request, exc: GoalTrackerError):
    # 5xx details were already logged where the failure happened
    if exc.status_code < 500:
        logger.warning("%s %s -> %s: %s", request.method, request.url.path, exc.status_code, exc.message)
    return error_response(exc.status_code, exc.message)


async def _validation_error_handler(request: Request, exc: RequestValidationError):
    message = _format_validation_error(exc)
    logger.warning("%s %s -> 400: %s", request.method, request.url.path, message)
    return error_response(400, message)


async def _http_error_handler(request: Request, exc: StarletteHTTPException):
    return error_response(exc.status_code, str(exc.detail))


async def _store_error_handler(request: Request, exc: SQLAlchemyError):
    logger.exception("Unhandled store error on %s %s", request.method, request.url.path)
    return error_response(500, "Internal server error")


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(GoalTrackerError, _goal_tracker_error_handler)
    app.add_exception_handler(RequestValidationError, _validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, _http_error_handler)
    app.add_exception_handler(SQLAlchemyError, _store_error_handler)
