"""Translation of service failures into HTTP responses."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from fastapi import FastAPI, Request, status
from fastapi.dependencies.models import Dependant
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.security import HTTPBearer

from postapi.exceptions import (
    AuthenticationError,
    NotFoundError,
    ServiceError,
    UnexpectedError,
    ValidationError,
)

logger = logging.getLogger(__name__)

VALIDATION_FAILED = "Validation failed."
JSON_INVALID = "json_invalid"


@contextmanager
def failure_boundary(message: str) -> Iterator[None]:
    """Turn anything other than a ServiceError into an UnexpectedError.

    The original exception is logged with its traceback; clients only see
    ``message``.
    """
    try:
        yield
    except ServiceError:
        raise
    except Exception as e:
        logger.exception(f"{message}: {e}")
        raise UnexpectedError(message) from e


def field_errors(exc: RequestValidationError) -> dict[str, list[str]]:
    """Group pydantic errors by field name, dropping the body/path prefix.

    An unparseable body has no field, only a character offset, so it is
    reported under ``body``.
    """
    errors: dict[str, list[str]] = {}
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ())]
        if error.get("type") == JSON_INVALID:
            field = "body"
        else:
            field = ".".join(loc[1:]) if len(loc) > 1 else (loc[0] if loc else "body")
        errors.setdefault(field, []).append(error.get("msg", "Invalid value"))
    return errors


def validation_response(errors: dict[str, list[str]]) -> JSONResponse:
    return JSONResponse(
        status_code=422,
        content={"message": VALIDATION_FAILED, "errors": errors},
    )


def uses_bearer_auth(dependant: Dependant) -> bool:
    return any(
        isinstance(dep.call, HTTPBearer) or uses_bearer_auth(dep) for dep in dependant.dependencies
    )


def has_bearer_token(request: Request) -> bool:
    scheme, _, credentials = request.headers.get("Authorization", "").partition(" ")
    return scheme.lower() == "bearer" and bool(credentials.strip())


async def request_validation_handler(request: Request, exc: RequestValidationError):
    # FastAPI decodes the JSON body before solving dependencies, so a protected
    # route sees a broken body before it can reject a missing token.
    route = request.scope.get("route")
    dependant = getattr(route, "dependant", None)
    if (
        any(error.get("type") == JSON_INVALID for error in exc.errors())
        and dependant is not None
        and uses_bearer_auth(dependant)
        and not has_bearer_token(request)
    ):
        return await authentication_handler(request, AuthenticationError())
    return validation_response(field_errors(exc))


async def service_validation_handler(request: Request, exc: ValidationError):
    return validation_response(exc.errors)


async def authentication_handler(request: Request, exc: AuthenticationError):
    return JSONResponse(
        status_code=status.HTTP_401_UNAUTHORIZED,
        content={"message": exc.message},
        headers={"WWW-Authenticate": "Bearer"},
    )


async def not_found_handler(request: Request, exc: NotFoundError):
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"message": exc.message})


async def unexpected_handler(request: Request, exc: UnexpectedError):
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"message": exc.message}
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the single mapping from failures to status codes."""
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(ValidationError, service_validation_handler)
    app.add_exception_handler(AuthenticationError, authentication_handler)
    app.add_exception_handler(NotFoundError, not_found_handler)
    app.add_exception_handler(UnexpectedError, unexpected_handler)
