"""Port interfaces for JMX clients and collectors.

These protocols define the contracts that adapters must implement.
The core domain depends only on these interfaces, not concrete implementations.
"""

from typing import Protocol, runtime_checkable

from hbase_exporter.core.models import Endpoint, MetricDescriptor, MetricSample


@runtime_checkable
class JmxClientPort(Protocol):
    """Port for fetching raw JMX snapshots.

    Examples: JmxHttpClient, or a fake returning canned payloads in tests.
    """

    async def fetch(self, endpoint: Endpoint, query: str) -> bytes:
        """Fetch the JMX payload for one query.

        Raises:
            TransportError: The endpoint could not be reached.
            HTTPStatusError: The endpoint answered with a non-200 status.
        """
        ...


@runtime_checkable
class CollectorPort(Protocol):
    """Two-phase collector contract expected by the metrics registry.

    describe() must be answerable before any value has been scraped;
    collect() performs exactly one scrape cycle.
    """

    def describe(self) -> list[MetricDescriptor]:
        """Return the static descriptor set of this collector."""
        ...

    async def collect(self) -> list[MetricSample]:
        """Run one scrape cycle and return its samples."""
        ...
