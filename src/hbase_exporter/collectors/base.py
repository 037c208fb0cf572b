"""Scrape cycle shared by every HBase JMX collector."""

import asyncio
import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from hbase_exporter.core.beans import decode_payload
from hbase_exporter.core.descriptors import bookkeeping_descriptors
from hbase_exporter.core.errors import ParseError, ScrapeError
from hbase_exporter.core.models import Endpoint, MetricDescriptor, MetricSample
from hbase_exporter.core.ports import JmxClientPort
from hbase_exporter.core.state import CollectorState, StateSnapshot

logger = logging.getLogger(__name__)

R = TypeVar("R")


class JmxCollector:
    """Base collector running fetch, decode and emit for one JMX query.

    Subclasses set ``query`` and ``subsystem`` and implement ``_metric_descriptors``
    and ``_evaluate``. Cycles of one instance never overlap: each collect()
    holds the collector's lock from fetch to emission.

    Args:
        endpoint: JMX source to scrape.
        client: Adapter implementing JmxClientPort.
    """

    query: str
    subsystem: str

    def __init__(self, endpoint: Endpoint, client: JmxClientPort) -> None:
        self.endpoint = endpoint
        self._client = client
        self._state = CollectorState()
        self._cycle_lock: asyncio.Lock | None = None
        self._up, self._total_scrapes, self._json_parse_failures = (
            bookkeeping_descriptors(self.subsystem)
        )

    def _get_lock(self) -> asyncio.Lock:
        """Get or create the cycle lock (lazy to avoid event loop issues)."""
        if self._cycle_lock is None:
            self._cycle_lock = asyncio.Lock()
        return self._cycle_lock

    @property
    def state(self) -> StateSnapshot:
        return self._state.snapshot()

    def _metric_descriptors(self) -> list[MetricDescriptor]:
        raise NotImplementedError

    def _begin_cycle(self) -> None:
        """Reset per-cycle state. Called with the cycle lock held."""

    def _evaluate(self, payload: bytes) -> list[MetricSample]:
        """Decode a payload and produce its metric samples.

        Must be overridden by subclasses. Raises ParseError on bad payloads.
        """
        raise NotImplementedError

    def describe(self) -> list[MetricDescriptor]:
        """Return every descriptor this collector can emit."""
        return [
            *self._metric_descriptors(),
            self._up,
            self._total_scrapes,
            self._json_parse_failures,
        ]

    def _bookkeeping_samples(self) -> list[MetricSample]:
        snapshot = self._state.snapshot()
        return [
            MetricSample(self._up, snapshot.up),
            MetricSample(self._total_scrapes, snapshot.total_scrapes),
            MetricSample(self._json_parse_failures, snapshot.json_parse_failures),
        ]

    async def collect(self) -> list[MetricSample]:
        """Run one scrape cycle.

        Returns:
            The up, total_scrapes and json_parse_failures samples, followed
            by the metric samples when the cycle succeeded.
        """
        async with self._get_lock():
            self._state.record_scrape()
            self._begin_cycle()
            try:
                payload = await self._client.fetch(self.endpoint, self.query)
                samples = self._evaluate(payload)
            except ScrapeError as exc:
                if isinstance(exc, ParseError):
                    self._state.record_parse_failure()
                self._state.mark_down()
                logger.warning(
                    "Failed to fetch and decode HBase %s metrics: %s",
                    self.subsystem,
                    exc,
                    extra={
                        "subsystem": self.subsystem,
                        "endpoint": self.endpoint.base_url,
                        "error_type": type(exc).__name__,
                    },
                )
                return self._bookkeeping_samples()

            self._state.mark_up()
            logger.debug(
                "Scraped HBase %s metrics",
                self.subsystem,
                extra={"subsystem": self.subsystem, "samples": len(samples)},
            )
            return [*self._bookkeeping_samples(), *samples]


@dataclass(frozen=True)
class FieldMetric(Generic[R]):
    """A descriptor paired with the function extracting its value from a record.

    Attributes:
        descriptor: Metric family of the emitted sample.
        value: Extracts the sample value from a decoded record.
    """

    descriptor: MetricDescriptor
    value: Callable[[R], float]


class FixedSchemaCollector(JmxCollector, Generic[R]):
    """Collector decoding its bean into a fixed record type.

    Subclasses set ``record_type`` and build ``metrics`` in __init__. Every
    sample carries the record's host and lower-cased role as labels.
    """

    record_type: type[R]
    metrics: tuple[FieldMetric[R], ...] = ()

    def _metric_descriptors(self) -> list[MetricDescriptor]:
        return [metric.descriptor for metric in self.metrics]

    def _labels(self, record: Any) -> tuple[str, ...]:
        return (record.host, record.role.lower())

    def _evaluate(self, payload: bytes) -> list[MetricSample]:
        record = decode_payload(payload, self.record_type)
        labels = self._labels(record)
        return [
            MetricSample(metric.descriptor, float(metric.value(record)), labels)
            for metric in self.metrics
        ]
