"""Prometheus exporter for HBase JMX metrics."""

from hbase_exporter.adapters.jmx_http import JmxHttpClient
from hbase_exporter.adapters.prometheus import PrometheusCollector, register_collectors
from hbase_exporter.collectors import (
    JmxCollector,
    JvmCollector,
    MasterServerCollector,
    RsRegionCollector,
    RsServerCollector,
    create_collectors,
)
from hbase_exporter.config import ExporterSettings
from hbase_exporter.core.errors import (
    HTTPStatusError,
    MalformedKeyError,
    ParseError,
    ParseFailure,
    ScrapeError,
    TransportError,
)
from hbase_exporter.core.models import (
    Endpoint,
    MetricDescriptor,
    MetricSample,
    RegionMetric,
    ValueKind,
)

__version__ = "0.1.0"

__all__ = [
    "Endpoint",
    "ExporterSettings",
    "HTTPStatusError",
    "JmxCollector",
    "JmxHttpClient",
    "JvmCollector",
    "MalformedKeyError",
    "MasterServerCollector",
    "MetricDescriptor",
    "MetricSample",
    "ParseError",
    "ParseFailure",
    "PrometheusCollector",
    "RegionMetric",
    "RsRegionCollector",
    "RsServerCollector",
    "ScrapeError",
    "TransportError",
    "ValueKind",
    "create_collectors",
    "register_collectors",
]
