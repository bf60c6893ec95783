"""
API error types and their HTTP rendering.

Resources do not share one error body shape. Each error carries a `style`:

- TEXT     -> text/plain body with the message
- ERROR    -> {"error": "<message>"}
- MESSAGE  -> {"message": "<message>"} plus "error" with the driver message
              when the failure came from the database

Requests FastAPI cannot parse (bad path ids, bodies that do not fit the
schema) are operation failures too: 500 in the endpoint's style, unless
the endpoint declares otherwise with `@rejects(...)`.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import Any

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse, Response

TEXT = "text"
ERROR = "error"
MESSAGE = "message"

logger = logging.getLogger(__name__)


class ApiError(RuntimeError):
    status_code = 500

    def __init__(
        self,
        message: str,
        *,
        style: str = TEXT,
        error: str | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.style = style
        self.error = error
        if status_code is not None:
            self.status_code = status_code


class NotFoundError(ApiError):
    status_code = 404


class BadRequestError(ApiError):
    status_code = 400


class OperationFailedError(ApiError):
    status_code = 500


@contextmanager
def failures(message: str | None = None, *, style: str = TEXT) -> Iterator[None]:
    """
    Turn any unexpected exception raised inside the block into a 500.

    Without `message` the driver's own text is reported to the client.
    ApiErrors raised inside the block pass through untouched.
    """
    try:
        yield
    except ApiError:
        raise
    except Exception as exc:
        logger.exception("operation_failed message=%s", message or exc)
        raise OperationFailedError(message or str(exc), style=style, error=str(exc)) from exc


def render(exc: ApiError) -> Response:
    if exc.style == ERROR:
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})
    if exc.style == MESSAGE:
        body = {"message": exc.message}
        if exc.error and exc.error != exc.message:
            body["error"] = exc.error
        return JSONResponse(status_code=exc.status_code, content=body)
    return PlainTextResponse(exc.message, status_code=exc.status_code)


async def api_error_handler(_: Request, exc: ApiError) -> Response:
    return render(exc)


def rejects(
    style: str = TEXT,
    *,
    status_code: int = 500,
    message: str | None = None,
) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """
    Declare how an endpoint answers a request that fails validation.

    Apply below the router decorator. Without `message` the validation
    summary is reported to the client.
    """

    def decorate(endpoint: Callable[..., Any]) -> Callable[..., Any]:
        endpoint.rejects = (style, status_code, message)
        return endpoint

    return decorate


def describe_validation(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()))
        parts.append(f"{loc}: {err.get('msg', 'invalid value')}" if loc else str(err.get("msg")))
    return "; ".join(parts) or "invalid request"


async def request_validation_handler(request: Request, exc: RequestValidationError) -> Response:
    style, status_code, message = getattr(request.scope.get("endpoint"), "rejects", (TEXT, 500, None))
    detail = describe_validation(exc)
    logger.warning("request_rejected path=%s detail=%s", request.url.path, detail)
    return render(ApiError(message or detail, style=style, error=detail, status_code=status_code))
