"""Collector for the per-region metrics of an HBase region server.

The ``sub=Regions`` bean is dynamically keyed: every attribute name encodes
the namespace, table and region it belongs to (see core.region_keys). Each
recognized metric is republished with those dimensions as labels.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from hbase_exporter.collectors.base import JmxCollector
from hbase_exporter.core.beans import decode_bean, jmx_field, select_bean
from hbase_exporter.core.descriptors import REGION_LABELS, new_descriptor
from hbase_exporter.core.models import (
    Endpoint,
    MetricDescriptor,
    MetricSample,
    RegionMetric,
)
from hbase_exporter.core.ports import JmxClientPort
from hbase_exporter.core.region_keys import decompose_region_attributes

RS_REGION_QUERY = "Hadoop:service=HBase,name=RegionServer,sub=Regions"
SUBSYSTEM = "region"


def _region_descriptor(name: str, documentation: str) -> MetricDescriptor:
    return new_descriptor(SUBSYSTEM, name, documentation, label_names=REGION_LABELS)


# JMX metric name -> descriptor
REGION_METRICS: Mapping[str, MetricDescriptor] = MappingProxyType(
    {
        "storeCount": _region_descriptor(
            "store_count", "Number of stores of the region."
        ),
        "storeFileCount": _region_descriptor(
            "store_file_count", "Number of store files of the region."
        ),
        "memStoreSize": _region_descriptor(
            "mem_store_size", "Size of the memstore of the region, in bytes."
        ),
        "storeFileSize": _region_descriptor(
            "store_file_size", "Size of the store files of the region, in bytes."
        ),
        "compactionsCompletedCount": _region_descriptor(
            "compactions_completed_count", "Number of compactions completed."
        ),
        "readRequestCount": _region_descriptor(
            "read_request_count", "Number of read requests served by the region."
        ),
        "writeRequestCount": _region_descriptor(
            "write_request_count", "Number of write requests served by the region."
        ),
        "numFilesCompactedCount": _region_descriptor(
            "num_files_compacted_count", "Number of files compacted."
        ),
        "numBytesCompactedCount": _region_descriptor(
            "num_bytes_compacted_count", "Number of bytes compacted."
        ),
    }
)


@dataclass(frozen=True)
class RegionTags:
    """Snapshot-wide tags of the per-region bean."""

    host: str = jmx_field("tag.Hostname")
    role: str = jmx_field("tag.Context")


class RsRegionCollector(JmxCollector):
    """Per-region store, compaction and request metrics."""

    query = RS_REGION_QUERY
    subsystem = SUBSYSTEM

    def __init__(self, endpoint: Endpoint, client: JmxClientPort) -> None:
        super().__init__(endpoint, client)
        self.metrics = REGION_METRICS
        # Current-cycle buffer, only touched while the cycle lock is held
        self._entries: list[RegionMetric] = []

    def _metric_descriptors(self) -> list[MetricDescriptor]:
        return list(self.metrics.values())

    def _begin_cycle(self) -> None:
        self._entries.clear()

    def _evaluate(self, payload: bytes) -> list[MetricSample]:
        bean = select_bean(payload)
        tags = decode_bean(bean, RegionTags)
        self._entries.extend(decompose_region_attributes(bean))

        host, role = tags.host, tags.role.lower()
        samples = []
        for entry in self._entries:
            descriptor = self.metrics.get(entry.metric)
            if descriptor is None:
                continue
            samples.append(
                MetricSample(
                    descriptor,
                    entry.value,
                    (host, role, entry.namespace, entry.table, entry.region),
                )
            )
        self._entries.clear()
        return samples
