"""Public HTTP endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import JSONResponse, PlainTextResponse
from structlog import get_logger

from lodge_rates.api.disconnect import call_while_connected
from lodge_rates.api.responses import (
    hello_response,
    rate_plans_response,
    snapshots_response,
)
from lodge_rates.models.queries import HelloQuery, RatesQuery
from lodge_rates.services import RatesService

logger = get_logger(__name__)

router = APIRouter()


def get_rates_service(request: Request) -> RatesService:
    return request.app.state.rates_service


def get_poll_interval(request: Request) -> float:
    return request.app.state.settings.server.disconnect_poll_interval


@router.get("/hello", response_class=PlainTextResponse)
async def hello(query: Annotated[HelloQuery, Query()]) -> PlainTextResponse:
    return hello_response(query.name)


@router.get("/rates")
async def rates(
    request: Request,
    query: Annotated[RatesQuery, Query()],
    service: Annotated[RatesService, Depends(get_rates_service)],
    poll_interval: Annotated[float, Depends(get_poll_interval)],
) -> JSONResponse:
    """Raw provider rate plans for the requested window."""
    rate_plans = await call_while_connected(
        request,
        service.get_rate_plans(query.start_date, query.end_date),
        poll_interval,
    )
    return rate_plans_response(rate_plans)


@router.get("/rates/tonight")
async def tonights_rates(
    request: Request,
    service: Annotated[RatesService, Depends(get_rates_service)],
    poll_interval: Annotated[float, Depends(get_poll_interval)],
) -> JSONResponse:
    """Snapshots for tonight in the property's timezone."""
    snapshots = await call_while_connected(
        request,
        service.get_tonights_rates(),
        poll_interval,
    )
    return snapshots_response(snapshots)


@router.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}
