"""HTTP adapter fetching JMX snapshots from HBase processes."""

import asyncio
import logging

import httpx

from hbase_exporter.core.errors import HTTPStatusError, TransportError
from hbase_exporter.core.models import Endpoint

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0


class JmxHttpClient:
    """JmxClientPort implementation backed by httpx.

    Every fetch opens its own AsyncClient and closes it before returning, so
    no connection outlives a scrape cycle. The whole request is bounded by
    ``timeout`` seconds, and cancelling the awaiting task cancels the request.

    Args:
        timeout: Total time budget of one fetch, in seconds.
        transport: Optional httpx transport (e.g., httpx.MockTransport).
    """

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        if timeout <= 0:
            raise ValueError("timeout must be positive")
        self._timeout = timeout
        self._transport = transport

    @property
    def timeout(self) -> float:
        return self._timeout

    async def fetch(self, endpoint: Endpoint, query: str) -> bytes:
        """GET ``<endpoint>?qry=<query>`` and return the response body.

        Raises:
            TransportError: Connection, DNS or timeout failure.
            HTTPStatusError: Any status other than 200.
        """
        url = endpoint.base_url
        try:
            async with httpx.AsyncClient(
                timeout=self._timeout, transport=self._transport
            ) as client:
                response = await asyncio.wait_for(
                    client.get(url, params={"qry": query}), self._timeout
                )
        except TimeoutError as exc:
            raise TransportError(
                f"timed out after {self._timeout}s getting JMX metrics from {url}"
            ) from exc
        except httpx.RequestError as exc:
            raise TransportError(
                f"failed to get JMX metrics from {url}: {exc}"
            ) from exc

        if response.status_code != httpx.codes.OK:
            raise HTTPStatusError(response.status_code, url)
        logger.debug(
            "Fetched JMX payload",
            extra={"url": url, "query": query, "bytes": len(response.content)},
        )
        return response.content
