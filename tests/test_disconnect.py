"""Tests for cancelling upstream calls when the caller disconnects."""

import asyncio
from types import SimpleNamespace

import pytest

from lodge_rates.api.disconnect import call_while_connected
from lodge_rates.clients import RateProviderCancelledError, RateProviderNetworkError


class FakeRequest:
    """Minimal stand-in for a Starlette request."""

    def __init__(self, disconnect_after: int):
        self.checks = 0
        self.disconnect_after = disconnect_after
        self.headers = {"origin": "https://www.kakapolodge.test"}
        self.url = SimpleNamespace(path="/rates/tonight")

    async def is_disconnected(self) -> bool:
        self.checks += 1
        return self.checks >= self.disconnect_after


class TestCallWhileConnected:
    """Tests for call_while_connected."""

    @pytest.mark.asyncio
    async def test_returns_result_of_fast_call(self):
        async def fetch():
            return ["rates"]

        result = await call_while_connected(FakeRequest(disconnect_after=1), fetch(), 0.01)

        assert result == ["rates"]

    @pytest.mark.asyncio
    async def test_propagates_call_errors(self):
        async def fetch():
            raise RateProviderNetworkError("down")

        with pytest.raises(RateProviderNetworkError, match="down"):
            await call_while_connected(FakeRequest(disconnect_after=100), fetch(), 0.01)

    @pytest.mark.asyncio
    async def test_cancels_call_when_client_disconnects(self):
        started = asyncio.Event()
        cancelled = asyncio.Event()

        async def slow_fetch():
            started.set()
            try:
                await asyncio.sleep(10)
            except asyncio.CancelledError:
                cancelled.set()
                raise

        request = FakeRequest(disconnect_after=2)

        with pytest.raises(RateProviderCancelledError):
            await call_while_connected(request, slow_fetch(), 0.01)

        assert started.is_set()
        assert cancelled.is_set()
        assert request.checks == 2
