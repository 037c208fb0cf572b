"""prometheus_client adapter for HBase JMX collectors.

Wraps a CollectorPort into prometheus_client's custom collector protocol so
that a CollectorRegistry can describe it at registration time and scrape it
on every exposition request.
"""

import logging
import threading
from collections.abc import Iterable, Iterator

from prometheus_client.core import CounterMetricFamily, GaugeMetricFamily, Metric
from prometheus_client.registry import CollectorRegistry

from hbase_exporter.adapters.async_utils import _run_sync
from hbase_exporter.core.models import MetricDescriptor, MetricSample, ValueKind
from hbase_exporter.core.ports import CollectorPort

logger = logging.getLogger(__name__)


def _family(descriptor: MetricDescriptor) -> Metric:
    """Create an empty metric family for a descriptor."""
    family_type = (
        CounterMetricFamily
        if descriptor.kind is ValueKind.COUNTER
        else GaugeMetricFamily
    )
    return family_type(
        descriptor.name,
        descriptor.documentation,
        labels=list(descriptor.label_names),
    )


def to_metric_families(
    descriptors: Iterable[MetricDescriptor],
    samples: Iterable[MetricSample],
) -> list[Metric]:
    """Group samples into one family per descriptor, in descriptor order.

    Families without samples are left out.
    """
    by_descriptor: dict[MetricDescriptor, list[MetricSample]] = {}
    for sample in samples:
        by_descriptor.setdefault(sample.descriptor, []).append(sample)

    families = []
    for descriptor in descriptors:
        grouped = by_descriptor.get(descriptor)
        if not grouped:
            continue
        family = _family(descriptor)
        for sample in grouped:
            family.add_metric(list(sample.label_values), sample.value)
        families.append(family)
    return families


class PrometheusCollector:
    """prometheus_client collector driving one scrape cycle per collect().

    Calls from different threads are serialized so that cycles of the
    wrapped collector never overlap.

    Args:
        collector: Collector implementing CollectorPort.
    """

    def __init__(self, collector: CollectorPort) -> None:
        self._collector = collector
        self._lock = threading.Lock()

    def describe(self) -> list[Metric]:
        """Return empty families for every descriptor of the collector."""
        return [_family(descriptor) for descriptor in self._collector.describe()]

    def collect(self) -> Iterator[Metric]:
        """Scrape the wrapped collector and yield its metric families."""
        with self._lock:
            samples = _run_sync(self._collector.collect())
        yield from to_metric_families(self._collector.describe(), samples)


def register_collectors(
    registry: CollectorRegistry,
    collectors: Iterable[CollectorPort],
) -> list[PrometheusCollector]:
    """Wrap each collector and register it with the registry.

    Returns:
        The registered adapters, in input order.
    """
    adapters = []
    for collector in collectors:
        adapter = PrometheusCollector(collector)
        registry.register(adapter)
        adapters.append(adapter)
        logger.info(
            "Registered HBase collector",
            extra={"collector": type(collector).__name__},
        )
    return adapters
