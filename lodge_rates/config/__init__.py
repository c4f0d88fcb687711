"""Configuration package."""

from lodge_rates.config.logging import configure_logging, get_logger
from lodge_rates.config.settings import Settings, settings

__all__ = ["settings", "Settings", "configure_logging", "get_logger"]
