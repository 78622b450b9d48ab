import logging
import httpx

from ..core.config import settings
from ..core.errors import NetworkError
from .providers import OutboundRequest

logger = logging.getLogger(__name__)


class Transport:
    """One attempt per request, no retry.

    Any HTTP status comes back as a response, the caller decides what a
    failure status means. Only a failure to get a response at all raises.
    """

    def __init__(self, timeout: float | None = settings.HTTP_TIMEOUT,
                 transport: httpx.AsyncBaseTransport | None = None):
        self.timeout = timeout
        # lets tests plug in httpx.MockTransport
        self._transport = transport

    async def send(self, request: OutboundRequest) -> httpx.Response:
        client_kwargs = {"transport": self._transport}
        # without an explicit setting httpx keeps its own default timeout
        if self.timeout is not None:
            client_kwargs["timeout"] = self.timeout
        try:
            async with httpx.AsyncClient(**client_kwargs) as client:
                return await client.request(request.method, request.url, params=request.params or None,
                                            json=request.json)
        except httpx.RequestError as exc:
            # request.url carries no query string, the key stays out of the log
            logger.warning("Request to %s failed: %s", request.url, exc.__class__.__name__)
            raise NetworkError("Network error: Could not connect to the detection server.") from exc
