"""Starlette web adapter exposing today's barrier closures."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from starlette.applications import Starlette
from starlette.responses import JSONResponse
from starlette.routing import Route

from barrier_closures.adapters.web.rate_limit_middleware import ApiRateLimitMiddleware
from barrier_closures.adapters.web.serializers import serialize_result
from barrier_closures.adapters.web.servers import StaticFileServer
from barrier_closures.domain.errors import ClosureError

if TYPE_CHECKING:
    from starlette.requests import Request

    from barrier_closures.adapters.config import AppConfig
    from barrier_closures.domain.ports import ClosureProvider

logger = logging.getLogger(__name__)


def error_response(error: ClosureError) -> JSONResponse:
    """Render a closure failure as a JSON response."""
    details = error.to_details()
    return JSONResponse(details.model_dump(exclude_none=True), status_code=error.http_status)


def create_app(
    service: ClosureProvider,
    rate_limit_per_minute: int = 0,
    public_dir: str | None = None,
) -> Starlette:
    """Build the Starlette application.

    Args:
        service: Service answering closure requests.
        rate_limit_per_minute: Per-IP limit for /api/ requests, 0 disables it.
        public_dir: Directory with the front end, served at "/" if present.

    Returns:
        The configured application.
    """

    async def closures_route(_request: Request) -> JSONResponse:
        try:
            result = await service.get_closures()
        except ClosureError as e:
            logger.error(f"Error fetching closures: {e}")
            return error_response(e)
        return JSONResponse(serialize_result(result))

    app = Starlette(routes=[Route("/api/closures", closures_route, methods=["GET"])])

    if public_dir:
        StaticFileServer(public_dir).register_routes(app)

    if rate_limit_per_minute > 0:
        app.add_middleware(ApiRateLimitMiddleware, requests_per_minute=rate_limit_per_minute)

    return app


class WebAdapter:
    """Runs the closures application under uvicorn."""

    def __init__(self, service: ClosureProvider, config: AppConfig) -> None:
        """Initialize the web adapter.

        Args:
            service: Service answering closure requests.
            config: Application configuration.
        """
        self.service = service
        self.config = config
        self._server: Any | None = None

    def build_app(self) -> Starlette:
        """Build the application from the configuration."""
        return create_app(
            self.service,
            rate_limit_per_minute=self.config.rate_limit_per_minute,
            public_dir=self.config.public_dir,
        )

    async def start(self) -> None:
        """Start the web server and serve until stopped."""
        import uvicorn

        config = uvicorn.Config(
            self.build_app(),
            host=self.config.host,
            port=self.config.port,
            log_level="info",
        )
        self._server = uvicorn.Server(config)
        logger.info(f"Server starting: http://localhost:{self.config.port}")

        await self._server.serve()

    async def stop(self) -> None:
        """Stop the web server."""
        if self._server:
            self._server.should_exit = True
