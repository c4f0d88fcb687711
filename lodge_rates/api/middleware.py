"""ASGI middleware for request origin context and the default CORS header."""

from starlette.datastructures import Headers, MutableHeaders
from starlette.types import ASGIApp, Message, Receive, Scope, Send
from structlog import get_logger
from structlog.contextvars import bound_contextvars

from lodge_rates.api.responses import error_response

logger = get_logger(__name__)


class RequestOriginMiddleware:
    """Binds the request's Origin for logging and stamps Access-Control-Allow-Origin.

    CORSMiddleware only answers requests that carry an Origin header, and
    never sees errors that escape the route stack; this fills in the
    allow-origin value on every other response, including the 500 body it
    builds for unhandled exceptions.
    """

    def __init__(self, app: ASGIApp, allow_origin: str | None = "*"):
        self.app = app
        self.allow_origin = allow_origin

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        origin = Headers(scope=scope).get("origin")
        response_started = False

        async def send_with_origin(message: Message) -> None:
            nonlocal response_started
            if message["type"] == "http.response.start":
                response_started = True
                if self.allow_origin:
                    headers = MutableHeaders(scope=message)
                    if "access-control-allow-origin" not in headers:
                        headers["Access-Control-Allow-Origin"] = self.allow_origin
            await send(message)

        with bound_contextvars(origin=origin, path=scope["path"]):
            logger.info("Request origin", method=scope["method"])
            try:
                await self.app(scope, receive, send_with_origin)
            except Exception as e:
                if response_started:
                    raise
                logger.error(
                    "Unhandled error while serving request",
                    error=str(e),
                    exc_info=True,
                )
                response = error_response(500, "internal", "Internal server error")
                await response(scope, receive, send_with_origin)
