"""Mapper from provider rate plans to public widget snapshots."""

from typing import Sequence

from structlog import get_logger

from lodge_rates.models.lodge import LodgeRateSnapshot
from lodge_rates.models.provider import RatePlan

logger = get_logger(__name__)


class MappingError(Exception):
    """Base exception for rate mapping errors."""

    pass


class EmptyPlanDatesError(MappingError):
    """Raised when a rate plan carries no date entries."""

    def __init__(self, plan_id: int, plan_name: str | None = None):
        super().__init__(f"Rate plan {plan_id} has no date entries")
        self.plan_id = plan_id
        self.plan_name = plan_name


class RateMapper:
    """Reduces provider rate plans to one LodgeRateSnapshot per plan.

    The first entry of a plan's dates is taken as its current rate and
    availability. Any later entries are dropped, so a multi-day window is
    truncated to its first date rather than aggregated.
    """

    @staticmethod
    def _map_rate_plan(rate_plan: RatePlan) -> LodgeRateSnapshot:
        if not rate_plan.dates:
            raise EmptyPlanDatesError(rate_plan.id, rate_plan.name)

        if len(rate_plan.dates) > 1:
            logger.debug(
                "Truncating rate plan dates to first entry",
                plan_id=rate_plan.id,
                date_count=len(rate_plan.dates),
                used_date=rate_plan.dates[0].date,
            )

        rate_plan_date = rate_plan.dates[0]
        return LodgeRateSnapshot(
            name=rate_plan.name,
            rate=rate_plan_date.rate,
            num_available=rate_plan_date.available,
        )

    @staticmethod
    def map(rate_plans: Sequence[RatePlan]) -> list[LodgeRateSnapshot]:
        """Map rate plans to snapshots, preserving their order.

        Args:
            rate_plans: Rate plans from the authoritative provider result

        Returns:
            One LodgeRateSnapshot per plan, in input order

        Raises:
            EmptyPlanDatesError: If any plan has no dates; no partial list is returned
        """
        try:
            snapshots = [RateMapper._map_rate_plan(plan) for plan in rate_plans]
        except EmptyPlanDatesError as e:
            logger.error(
                "Rate plan has no dates",
                plan_id=e.plan_id,
                plan_name=e.plan_name,
            )
            raise

        logger.info("Mapped rate plans", plan_count=len(snapshots))
        return snapshots
