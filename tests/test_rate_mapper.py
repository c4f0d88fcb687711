"""Unit tests for the rate plan mapper."""

import pytest

from lodge_rates.models import LodgeRateSnapshot, ProviderRatesResponse, RatePlan
from lodge_rates.transformers import EmptyPlanDatesError, MappingError, RateMapper


def make_date(date: str = "2024-01-01", rate: int = 150, available: int = 3, **overrides):
    """Build a provider rate plan date payload with defaults."""
    payload = {
        "id": None,
        "date": date,
        "rate": rate,
        "min_stay": 1,
        "max_stay": None,
        "stop_online_sell": False,
        "close_to_arrival": False,
        "close_to_departure": False,
        "available": available,
    }
    payload.update(overrides)
    return payload


class TestRateMapper:
    """Tests for RateMapper."""

    def test_maps_single_plan(self):
        """Map the canonical "Plan A" / "Standard" response."""
        response = ProviderRatesResponse.model_validate(
            [
                {
                    "name": "Plan A",
                    "rate_plans": [
                        {"id": 1, "name": "Standard", "dates": [make_date()]},
                    ],
                }
            ]
        )

        snapshots = RateMapper.map(response.first().rate_plans)

        assert snapshots == [LodgeRateSnapshot(name="Standard", rate=150, num_available=3)]
        assert snapshots[0].model_dump() == {
            "name": "Standard",
            "rate": 150,
            "num_available": 3,
        }

    def test_preserves_length_and_order(self, provider_rates_response):
        rate_plans = ProviderRatesResponse.model_validate(provider_rates_response).first().rate_plans

        snapshots = RateMapper.map(rate_plans)

        assert len(snapshots) == len(rate_plans)
        assert [s.name for s in snapshots] == ["Dorm Bed", "Double Room", "Family Room"]
        assert [(s.rate, s.num_available) for s in snapshots] == [(38, 12), (110, 2), (165, 0)]

    def test_empty_input_maps_to_empty_list(self):
        assert RateMapper.map([]) == []

    def test_uses_first_date_of_multi_day_plan(self, multi_day_rates_response):
        rate_plans = ProviderRatesResponse.model_validate(multi_day_rates_response).first().rate_plans

        snapshots = RateMapper.map(rate_plans)

        assert snapshots == [LodgeRateSnapshot(name="Double Room", rate=140, num_available=1)]

    def test_first_date_wins_even_when_out_of_order(self):
        plan = RatePlan(
            id=7,
            name="Bunk",
            dates=[
                make_date(date="2024-02-02", rate=60, available=5),
                make_date(date="2024-02-01", rate=50, available=8),
            ],
        )

        snapshots = RateMapper.map([plan])

        assert snapshots[0].rate == 60
        assert snapshots[0].num_available == 5

    def test_empty_plan_dates_raises(self):
        plan = RatePlan(id=42, name="Cabin", dates=[])

        with pytest.raises(EmptyPlanDatesError) as exc_info:
            RateMapper.map([plan])

        assert exc_info.value.plan_id == 42
        assert isinstance(exc_info.value, MappingError)

    def test_empty_plan_dates_fails_whole_mapping(self, empty_plan_dates_response):
        """A single bad plan fails the mapping; no partial list is returned."""
        rate_plans = ProviderRatesResponse.model_validate(empty_plan_dates_response).first().rate_plans

        with pytest.raises(EmptyPlanDatesError) as exc_info:
            RateMapper.map(rate_plans)

        assert exc_info.value.plan_id == 104
        assert exc_info.value.plan_name == "Cabin"

    def test_drops_other_date_fields(self):
        plan = RatePlan(
            id=3,
            name="Twin",
            dates=[make_date(rate=99, available=1, min_stay=3, stop_online_sell=True)],
        )

        snapshot = RateMapper.map([plan])[0]

        assert set(snapshot.model_dump()) == {"name", "rate", "num_available"}
