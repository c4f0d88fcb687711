"""Translation of domain errors into HTTP responses."""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from structlog import get_logger

from lodge_rates.api.responses import error_response
from lodge_rates.clients import (
    RateProviderCancelledError,
    RateProviderDecodeError,
    RateProviderEmptyError,
    RateProviderError,
    RateProviderNetworkError,
    RateProviderStatusError,
    RateProviderTimeoutError,
)
from lodge_rates.transformers import EmptyPlanDatesError, MappingError

logger = get_logger(__name__)

# Most specific first; the first isinstance match wins.
UPSTREAM_ERRORS: list[tuple[type[Exception], int, str]] = [
    (RateProviderTimeoutError, 504, "upstream_timeout"),
    (RateProviderCancelledError, 502, "upstream_cancelled"),
    (RateProviderNetworkError, 502, "upstream_network"),
    (RateProviderStatusError, 502, "upstream_status"),
    (RateProviderDecodeError, 502, "upstream_decode"),
    (RateProviderEmptyError, 502, "upstream_empty"),
    (EmptyPlanDatesError, 502, "empty_plan_dates"),
    (MappingError, 502, "mapping"),
]


def classify_error(exc: Exception) -> tuple[int, str]:
    """HTTP status and error kind for an upstream or mapping failure."""
    for error_type, status_code, kind in UPSTREAM_ERRORS:
        if isinstance(exc, error_type):
            return status_code, kind
    return 500, "internal"


async def handle_query_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.warning(
        "Malformed query",
        origin=request.headers.get("origin"),
        path=request.url.path,
        errors=exc.errors(),
    )
    return error_response(400, "query_decode", "Malformed query string")


async def handle_upstream_error(request: Request, exc: Exception) -> JSONResponse:
    status_code, kind = classify_error(exc)
    logger.error(
        "Rates request failed",
        origin=request.headers.get("origin"),
        path=request.url.path,
        error_kind=kind,
        error=str(exc),
        status_code=status_code,
    )
    return error_response(status_code, kind, str(exc))


def register_error_handlers(app: FastAPI) -> None:
    """Attach the error-to-status translation to the app."""
    app.add_exception_handler(RequestValidationError, handle_query_error)
    app.add_exception_handler(RateProviderError, handle_upstream_error)
    app.add_exception_handler(MappingError, handle_upstream_error)
