import asyncio
import json
from datetime import datetime
from pathlib import Path
from typing import Any, Callable

import httpx
import pytest
import pytz

from lodge_rates.clients import RateProviderClient
from lodge_rates.config.settings import ProviderSettings, Settings
from lodge_rates.services import DateWindowResolver


FIXTURES_DIR = Path(__file__).parent / "fixtures"

RATES_URL = "https://provider.test/api/v1/properties/testlodge/rates.json"


def load_fixture(relative_path: str) -> Any:
    """Helper to load a JSON fixture file."""
    with open(FIXTURES_DIR / relative_path) as f:
        return json.load(f)


@pytest.fixture
def provider_rates_response():
    """Load a single-day provider rates response from fixture."""
    return load_fixture("provider_api/rates_response.json")


@pytest.fixture
def multi_day_rates_response():
    """Load a multi-day, multi-result provider response."""
    return load_fixture("edge_cases/multi_day_response.json")


@pytest.fixture
def empty_plan_dates_response():
    """Load a provider response where one plan has no dates."""
    return load_fixture("edge_cases/empty_plan_dates_response.json")


@pytest.fixture
def provider_settings():
    return ProviderSettings(
        base_url="https://provider.test/api/v1/properties/",
        property_id="testlodge",
        request_timeout=2.0,
    )


@pytest.fixture
def app_settings(provider_settings):
    return Settings(provider=provider_settings)


@pytest.fixture
def recorded_requests():
    """Requests seen by the mock provider, in order."""
    return []


@pytest.fixture
def make_provider_client(provider_settings, recorded_requests):
    """Build a RateProviderClient backed by an httpx MockTransport.

    The handler receives the outbound request and returns an httpx.Response
    (or raises an httpx exception to simulate transport failures).
    """

    def factory(handler: Callable[[httpx.Request], httpx.Response]) -> RateProviderClient:
        def recording_handler(request: httpx.Request) -> httpx.Response:
            recorded_requests.append(request)
            return handler(request)

        http_client = httpx.AsyncClient(transport=httpx.MockTransport(recording_handler))
        clients.append(RateProviderClient(provider_settings, http_client=http_client))
        return clients[-1]

    clients: list[RateProviderClient] = []
    yield factory

    for client in clients:
        asyncio.run(client.aclose())


@pytest.fixture
def fixed_clock():
    """Clock frozen at 2024-04-06 13:30 UTC (2024-04-07 in Auckland)."""
    instant = datetime(2024, 4, 6, 13, 30, tzinfo=pytz.utc)
    return lambda: instant


@pytest.fixture
def auckland_resolver(fixed_clock):
    return DateWindowResolver("Pacific/Auckland", clock=fixed_clock)
