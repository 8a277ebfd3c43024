"""Per-IP rate limiting for the closures API using throttled-py.

Only requests under the API prefix are limited: those are the ones that can
end in an upstream schedule fetch. The static front end is never throttled.
"""

import logging
from collections.abc import Awaitable, Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse, Response
from throttled import RateLimiterType, Throttled, rate_limiter, store

from barrier_closures.domain.models.error_details import ErrorDetails

logger = logging.getLogger(__name__)

API_PREFIX = "/api/"

# Used when the limiter result carries no retry hint
DEFAULT_RETRY_AFTER_SECONDS = 60


def extract_client_ip(request: Request) -> str:
    """Extract client IP address from request, supporting X-Forwarded-For header.

    X-Forwarded-For may contain a chain ("client, proxy1, proxy2"); the first
    entry is the original client.
    """
    forwarded_for = request.headers.get("X-Forwarded-For")
    if forwarded_for:
        client_ip = forwarded_for.split(",")[0].strip()
        if client_ip:
            return client_ip

    if request.client and request.client.host:
        return request.client.host

    logger.warning("Could not determine client IP, using 'unknown'")
    return "unknown"


def is_rate_limited_path(path: str, prefix: str = API_PREFIX) -> bool:
    """Whether a request path falls under the rate-limited API."""
    return path.startswith(prefix)


class ApiRateLimitMiddleware(BaseHTTPMiddleware):
    """Token bucket per client IP in front of the closures API."""

    def __init__(
        self,
        app: Callable,
        requests_per_minute: int = 100,
        prefix: str = API_PREFIX,
    ) -> None:
        """Initialize the middleware.

        Args:
            app: The ASGI application to wrap.
            requests_per_minute: API requests allowed per IP per minute.
            prefix: Path prefix of the limited routes.
        """
        super().__init__(app)
        self.prefix = prefix
        self.quota = rate_limiter.per_min(requests_per_minute, burst=requests_per_minute)
        self.store = store.MemoryStore()
        logger.info(f"API rate limit: {requests_per_minute} requests per minute per IP")

    def _throttle_for(self, client_ip: str) -> Throttled:
        """Token bucket for one client, sharing quota and store with all others."""
        return Throttled(
            key=f"closures:{client_ip}",
            using=RateLimiterType.TOKEN_BUCKET.value,
            quota=self.quota,
            store=self.store,
        )

    @staticmethod
    def _retry_after(result: object) -> int:
        """Seconds until the client may retry, rounded up to at least one."""
        state = getattr(result, "state", None)
        retry_after = getattr(state, "retry_after", None)
        if retry_after is None:
            return DEFAULT_RETRY_AFTER_SECONDS
        return max(1, int(float(retry_after) + 0.999))

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        """Reject API requests over quota with a JSON 429, pass everything else through."""
        if not is_rate_limited_path(request.url.path, self.prefix):
            return await call_next(request)

        client_ip = extract_client_ip(request)
        result = self._throttle_for(client_ip).limit()
        if not result.limited:
            return await call_next(request)

        retry_after = self._retry_after(result)
        logger.warning(f"Closures API rate limit exceeded for {client_ip}, retry in {retry_after}s")
        details = ErrorDetails(error="Too many requests", status=429)
        return JSONResponse(
            details.model_dump(exclude_none=True),
            status_code=429,
            headers={"Retry-After": str(retry_after)},
        )
