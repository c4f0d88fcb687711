"""HTTP API package."""

from lodge_rates.api.app import create_app

__all__ = ["create_app"]
