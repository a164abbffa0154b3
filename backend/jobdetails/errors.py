"""Exception types and their translation into HTTP responses.

Handlers are registered on the FastAPI app by `register_exception_handlers`.
Every error body has a `message` key of the form `error.<key>` so clients
can look up a translated message.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.orm.exc import StaleDataError

from .schemas import ErrorOut, FieldErrorOut
from .utils.headers import failure_alert

logger = logging.getLogger("jobdetails.api")


class BadRequestAlertError(Exception):
    """A client error reported with an alert header for `entity_name`."""

    def __init__(self, entity_name: str, error_key: str, message: str):
        super().__init__(message)
        self.entity_name = entity_name
        self.error_key = error_key
        self.message = message


def _field_errors(exc: RequestValidationError) -> list[FieldErrorOut]:
    out = []
    for err in exc.errors():
        loc = [str(part) for part in err.get("loc", ())]
        # loc looks like ("body", "name") or ("query", "size")
        object_name = loc[0] if loc else "request"
        field = ".".join(loc[1:]) or object_name
        out.append(FieldErrorOut(objectName=object_name, field=field, message=err.get("type", "invalid")))
    return out


async def bad_request_alert_handler(request: Request, exc: BadRequestAlertError):
    body = ErrorOut(
        message=f"error.{exc.error_key}",
        title=exc.message,
        entityName=exc.entity_name,
        errorKey=exc.error_key,
    )
    return JSONResponse(
        status_code=400,
        content=body.model_dump(exclude_none=True),
        headers=failure_alert(exc.entity_name, exc.error_key),
    )


async def validation_error_handler(request: Request, exc: RequestValidationError):
    body = ErrorOut(message="error.validation", fieldErrors=_field_errors(exc))
    return JSONResponse(
        status_code=400,
        content=body.model_dump(exclude_none=True),
        headers=failure_alert(None, "validation"),
    )


async def concurrency_failure_handler(request: Request, exc: StaleDataError):
    logger.warning("concurrency failure on %s %s: %s", request.method, request.url.path, exc)
    body = ErrorOut(message="error.concurrencyFailure")
    return JSONResponse(status_code=409, content=body.model_dump(exclude_none=True))


async def internal_error_handler(request: Request, exc: Exception):
    logger.exception("unhandled error on %s %s", request.method, request.url.path)
    body = ErrorOut(message="error.internalServerError")
    return JSONResponse(status_code=500, content=body.model_dump(exclude_none=True))


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(BadRequestAlertError, bad_request_alert_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StaleDataError, concurrency_failure_handler)
    app.add_exception_handler(Exception, internal_error_handler)
