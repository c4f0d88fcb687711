"""FastAPI application factory."""

from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from structlog import get_logger

from lodge_rates.api.errors import register_error_handlers
from lodge_rates.api.middleware import RequestOriginMiddleware
from lodge_rates.api.routes import router
from lodge_rates.clients import RateProviderClient
from lodge_rates.config import Settings, settings as default_settings
from lodge_rates.services import DateWindowResolver, RatesService

logger = get_logger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    provider_client: Optional[RateProviderClient] = None,
    date_window_resolver: Optional[DateWindowResolver] = None,
) -> FastAPI:
    """Build the rates API.

    Args:
        settings: Application settings; defaults to the environment-loaded ones
        provider_client: Rates provider client; built from settings if omitted
        date_window_resolver: Window resolver; built from settings if omitted

    Returns:
        Configured FastAPI application

    Raises:
        pytz.UnknownTimeZoneError: If the configured property timezone is unknown
    """
    settings = settings or default_settings
    provider_client = provider_client or RateProviderClient(settings.provider)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await provider_client.aclose()
        logger.info("Rates API shut down")

    app = FastAPI(title="Lodge Rates", debug=settings.debug, lifespan=lifespan)
    app.state.settings = settings
    app.state.rates_service = RatesService(
        provider_client=provider_client,
        date_window_resolver=date_window_resolver
        or DateWindowResolver(settings.lodging.timezone),
    )

    app.include_router(router)
    register_error_handlers(app)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors.allow_origins,
        allow_methods=settings.cors.allow_methods,
        allow_credentials=settings.cors.allow_credentials,
    )
    allow_origin = "*" if "*" in settings.cors.allow_origins else None
    app.add_middleware(RequestOriginMiddleware, allow_origin=allow_origin)

    logger.info(
        "Rates API created",
        environment=settings.environment,
        provider_url=settings.provider.rates_url,
        timezone=settings.lodging.timezone,
    )
    return app
