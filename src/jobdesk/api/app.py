"""FastAPI application factory and error mapping.

Every failure leaves the API as ``{"error": "<message>"}``:

- Requests under ``/api/`` without a bearer token are 401, before the body is read.
- :class:`~jobdesk.core.errors.JobdeskError` subclasses use their own status.
- Request validation failures are reported as 400.
- Completion API failures and anything unexpected are 500.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic_ai.exceptions import AgentRunError

from jobdesk.api.deps import parse_bearer
from jobdesk.api.routes import account, documents, generation, jobs
from jobdesk.core.errors import JobdeskError

logger = logging.getLogger(__name__)

_PROTECTED_PREFIX = "/api/"


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse({"error": message}, status_code=status_code)


def _describe_validation_error(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = [str(p) for p in err.get("loc", ()) if p not in ("body", "query", "path", "header")]
        field = ".".join(loc)
        msg = err.get("msg", "invalid value")
        parts.append(f"{field}: {msg}" if field else msg)
    return "; ".join(parts) or "Invalid request"


async def _handle_jobdesk_error(request: Request, exc: JobdeskError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return _error(exc.status_code, exc.message)


async def _handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    return _error(400, _describe_validation_error(exc))


async def _handle_agent_error(request: Request, exc: AgentRunError) -> JSONResponse:
    logger.error("Completion API call failed on %s: %s", request.url.path, exc)
    return _error(500, f"AI error: {exc}")


async def _handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return _error(500, str(exc) or "Unknown error")


def create_app() -> FastAPI:
    app = FastAPI(
        title="jobdesk",
        description="Job postings, resume uploads and AI-written application documents.",
    )
    app.add_exception_handler(JobdeskError, _handle_jobdesk_error)
    app.add_exception_handler(RequestValidationError, _handle_validation_error)
    app.add_exception_handler(AgentRunError, _handle_agent_error)
    app.add_exception_handler(Exception, _handle_unexpected)

    @app.middleware("http")
    async def require_bearer_token(request: Request, call_next):
        # Runs before FastAPI reads the body, so a missing token is a 401 even
        # when the body is malformed.
        if request.url.path.startswith(_PROTECTED_PREFIX) and parse_bearer(
            request.headers.get("authorization")
        ) is None:
            return _error(401, "Missing auth token")
        return await call_next(request)

    app.include_router(account.router)
    app.include_router(jobs.router)
    app.include_router(documents.router)
    app.include_router(generation.router)
    return app


app = create_app()
