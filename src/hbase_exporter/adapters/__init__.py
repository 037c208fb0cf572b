"""Adapters implementing core ports and bridging to the metrics registry."""

from hbase_exporter.adapters.async_utils import run_sync
from hbase_exporter.adapters.jmx_http import JmxHttpClient
from hbase_exporter.adapters.prometheus import (
    PrometheusCollector,
    register_collectors,
    to_metric_families,
)

__all__ = [
    "JmxHttpClient",
    "PrometheusCollector",
    "register_collectors",
    "run_sync",
    "to_metric_families",
]
