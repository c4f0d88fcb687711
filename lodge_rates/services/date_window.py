"""Date window resolution for provider rate queries."""

from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Optional

import pytz
from structlog import get_logger

logger = get_logger(__name__)

DATE_FORMAT = "%Y-%m-%d"


def utc_now() -> datetime:
    """Current instant as an aware UTC datetime."""
    return datetime.now(pytz.utc)


@dataclass(frozen=True)
class DateWindow:
    """Inclusive (start_date, end_date) range sent to the provider."""

    start_date: str
    end_date: str

    @property
    def is_single_day(self) -> bool:
        return self.start_date == self.end_date


class DateWindowResolver:
    """Resolves the date window for a rates query.

    Windows are either passed through from the caller untouched or computed
    as the property's local "today". Local dates come from the tz database
    (pytz), so the UTC offset in effect at the given instant is used, DST
    included.
    """

    def __init__(self, timezone: str, clock: Callable[[], datetime] = utc_now):
        """Initialize the resolver.

        Args:
            timezone: IANA zone identifier of the property (e.g. "Pacific/Auckland")
            clock: Returns the current instant; injectable for tests

        Raises:
            pytz.UnknownTimeZoneError: If the zone identifier is not recognized
        """
        self.timezone = pytz.timezone(timezone)
        self.clock = clock

    @staticmethod
    def resolve_explicit(
        start_date: Optional[str] = None,
        end_date: Optional[str] = None,
    ) -> DateWindow:
        """Pass caller-supplied dates through without validation.

        Missing values become empty strings, which the provider interprets
        with its own defaults.
        """
        return DateWindow(start_date=start_date or "", end_date=end_date or "")

    @staticmethod
    def resolve_local_today(
        reference_instant: datetime,
        timezone: pytz.BaseTzInfo | str,
    ) -> DateWindow:
        """Single-day window for the calendar date of an instant in a zone.

        Args:
            reference_instant: Absolute point in time; naive values are read as UTC
            timezone: pytz zone or IANA identifier

        Returns:
            DateWindow with start_date == end_date, formatted YYYY-MM-DD
        """
        if isinstance(timezone, str):
            timezone = pytz.timezone(timezone)
        if reference_instant.tzinfo is None:
            reference_instant = pytz.utc.localize(reference_instant)

        local_date = reference_instant.astimezone(timezone).strftime(DATE_FORMAT)
        return DateWindow(start_date=local_date, end_date=local_date)

    def local_today(self) -> DateWindow:
        """Window for "today" at the property, from the resolver's clock."""
        now = self.clock()
        window = self.resolve_local_today(now, self.timezone)
        logger.info(
            "Resolved local today",
            timezone=self.timezone.zone,
            instant=now.isoformat(),
            local_date=window.start_date,
        )
        return window
