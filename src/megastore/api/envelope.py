"""Builders for enveloped JSON responses and error-to-status mapping."""

from http import HTTPStatus
from typing import Any, Optional

from fastapi.responses import JSONResponse

from megastore.api.schemas import ApiResponse
from megastore.domain.errors import DomainError, ErrorKind

ARGUMENT_TYPE_ERROR = "Argument type error"
UNEXPECTED_ERROR = "Unexpected error"


def status_for(error: DomainError) -> int:
    """Map a domain error to its HTTP status: 404 for missing records, 400 otherwise."""
    if error.kind is ErrorKind.NOT_FOUND:
        return HTTPStatus.NOT_FOUND
    return HTTPStatus.BAD_REQUEST


def envelope(
    status_code: int,
    message: str,
    data: Any = None,
    error_detail: Optional[str] = None,
) -> JSONResponse:
    body = ApiResponse(
        status_code=int(status_code),
        message=message,
        data=data,
        error_detail=error_detail,
    )
    return JSONResponse(
        status_code=int(status_code),
        content=body.model_dump(mode="json", by_alias=True),
    )


def success(data: Any) -> JSONResponse:
    return envelope(HTTPStatus.OK, HTTPStatus.OK.phrase, data=data)


def domain_failure(error: DomainError) -> JSONResponse:
    status = HTTPStatus(status_for(error))
    return envelope(status, status.phrase, error_detail=str(error))


def argument_failure(detail: str) -> JSONResponse:
    return envelope(HTTPStatus.BAD_REQUEST, ARGUMENT_TYPE_ERROR, error_detail=detail)


def unexpected_failure(error: Exception) -> JSONResponse:
    return envelope(
        HTTPStatus.INTERNAL_SERVER_ERROR,
        UNEXPECTED_ERROR,
        error_detail=f"{type(error).__name__}: {error}",
    )
