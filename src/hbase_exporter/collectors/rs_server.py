"""Collector for the RegionServer Server bean."""

from dataclasses import dataclass
from operator import attrgetter

from hbase_exporter.collectors.base import FieldMetric, FixedSchemaCollector
from hbase_exporter.core.beans import jmx_field
from hbase_exporter.core.descriptors import new_descriptor
from hbase_exporter.core.models import Endpoint
from hbase_exporter.core.ports import JmxClientPort

RS_SERVER_QUERY = "Hadoop:service=HBase,name=RegionServer,sub=Server"
SUBSYSTEM = "server"


@dataclass(frozen=True)
class RsServerRecord:
    host: str = jmx_field("tag.Hostname")
    role: str = jmx_field("tag.Context")
    mem_store_size: int = jmx_field("memStoreSize")
    region_count: int = jmx_field("regionCount")
    store_count: int = jmx_field("storeCount")
    store_file_count: int = jmx_field("storeFileCount")
    store_file_size: int = jmx_field("storeFileSize")
    total_request_count: int = jmx_field("totalRequestCount")
    split_queue_length: int = jmx_field("splitQueueLength")
    compaction_queue_length: int = jmx_field("compactionQueueLength")
    flush_queue_length: int = jmx_field("flushQueueLength")
    block_count_hit_percent: float = jmx_field("blockCountHitPercent")
    slow_append_count: int = jmx_field("slowAppendCount")
    slow_delete_count: int = jmx_field("slowDeleteCount")
    slow_get_count: int = jmx_field("slowGetCount")
    slow_put_count: int = jmx_field("slowPutCount")
    slow_increment_count: int = jmx_field("slowIncrementCount")


# Metric names match the record field they are read from
_GAUGES = (
    ("mem_store_size", "Size of the memstores of this region server, in bytes."),
    ("region_count", "Number of regions hosted by this region server."),
    ("store_count", "Number of stores hosted by this region server."),
    ("store_file_count", "Number of store files hosted by this region server."),
    ("store_file_size", "Size of the store files of this region server, in bytes."),
    ("total_request_count", "Total number of requests served."),
    ("split_queue_length", "Length of the region split queue."),
    ("compaction_queue_length", "Length of the compaction queue."),
    ("flush_queue_length", "Length of the memstore flush queue."),
    ("block_count_hit_percent", "Block cache hit percentage."),
    ("slow_append_count", "Number of appends slower than the configured threshold."),
    ("slow_delete_count", "Number of deletes slower than the configured threshold."),
    ("slow_get_count", "Number of gets slower than the configured threshold."),
    ("slow_put_count", "Number of puts slower than the configured threshold."),
    ("slow_increment_count", "Number of increments slower than the configured threshold."),
)


class RsServerCollector(FixedSchemaCollector[RsServerRecord]):
    """Server-wide gauges reported by an HBase region server."""

    query = RS_SERVER_QUERY
    subsystem = SUBSYSTEM
    record_type = RsServerRecord

    def __init__(self, endpoint: Endpoint, client: JmxClientPort) -> None:
        super().__init__(endpoint, client)
        self.metrics = tuple(
            FieldMetric(new_descriptor(SUBSYSTEM, name, doc), attrgetter(name))
            for name, doc in _GAUGES
        )
