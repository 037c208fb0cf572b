"""HBase JMX collectors and the mode-dependent collector set."""

from hbase_exporter.adapters.jmx_http import JmxHttpClient
from hbase_exporter.collectors.base import FieldMetric, FixedSchemaCollector, JmxCollector
from hbase_exporter.collectors.jvm import JvmCollector
from hbase_exporter.collectors.master_server import MasterServerCollector
from hbase_exporter.collectors.rs_region import REGION_METRICS, RsRegionCollector
from hbase_exporter.collectors.rs_server import RsServerCollector
from hbase_exporter.config import ExporterSettings
from hbase_exporter.core.ports import JmxClientPort


def create_collectors(
    settings: ExporterSettings,
    client: JmxClientPort | None = None,
) -> list[JmxCollector]:
    """Build the collectors for the configured mode.

    A master exposes JVM and master-server metrics; a region server exposes
    JVM, server-wide and per-region metrics.

    Args:
        settings: Exporter settings.
        client: JMX client shared by the collectors. Defaults to a
            JmxHttpClient using settings.scrape_timeout.
    """
    if client is None:
        client = JmxHttpClient(timeout=settings.scrape_timeout)
    endpoint = settings.active_endpoint
    if settings.is_master:
        return [
            JvmCollector(endpoint, client),
            MasterServerCollector(endpoint, client),
        ]
    return [
        JvmCollector(endpoint, client),
        RsServerCollector(endpoint, client),
        RsRegionCollector(endpoint, client),
    ]


__all__ = [
    "REGION_METRICS",
    "FieldMetric",
    "FixedSchemaCollector",
    "JmxCollector",
    "JvmCollector",
    "MasterServerCollector",
    "RsRegionCollector",
    "RsServerCollector",
    "create_collectors",
]
