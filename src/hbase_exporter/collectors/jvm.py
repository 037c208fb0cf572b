"""Collector for the JvmMetrics bean of HBase masters and region servers."""

from dataclasses import dataclass

from hbase_exporter.collectors.base import FieldMetric, FixedSchemaCollector
from hbase_exporter.core.beans import jmx_field
from hbase_exporter.core.descriptors import new_descriptor
from hbase_exporter.core.models import Endpoint
from hbase_exporter.core.ports import JmxClientPort

JVM_QUERY = "Hadoop:service=HBase,name=JvmMetrics"
SUBSYSTEM = "jvm"


@dataclass(frozen=True)
class JvmRecord:
    host: str = jmx_field("tag.Hostname")
    role: str = jmx_field("tag.ProcessName")
    sub_name: str = jmx_field("name")
    mem_non_heap_used_m: float = jmx_field("MemNonHeapUsedM")
    mem_heap_used_m: float = jmx_field("MemHeapUsedM")
    mem_heap_max_m: float = jmx_field("MemHeapMaxM")
    mem_max_m: float = jmx_field("MemMaxM")
    gc_time_millis: int = jmx_field("GcTimeMillis")
    gc_count: int = jmx_field("GcCount")
    threads_blocked: int = jmx_field("ThreadsBlocked")


class JvmCollector(FixedSchemaCollector[JvmRecord]):
    """Memory, GC and thread metrics of the HBase JVM."""

    query = JVM_QUERY
    subsystem = SUBSYSTEM
    record_type = JvmRecord

    def __init__(self, endpoint: Endpoint, client: JmxClientPort) -> None:
        super().__init__(endpoint, client)
        self.metrics = (
            FieldMetric(
                new_descriptor(SUBSYSTEM, "mem_non_heap_used_m"),
                lambda jvm: jvm.mem_non_heap_used_m,
            ),
            FieldMetric(
                new_descriptor(SUBSYSTEM, "mem_heap_used_m"),
                lambda jvm: jvm.mem_heap_used_m,
            ),
            FieldMetric(
                new_descriptor(SUBSYSTEM, "mem_heap_mx_m"),
                lambda jvm: jvm.mem_heap_max_m,
            ),
            FieldMetric(
                new_descriptor(SUBSYSTEM, "mem_max_m"),
                lambda jvm: jvm.mem_max_m,
            ),
            FieldMetric(
                new_descriptor(SUBSYSTEM, "gc_time_millis"),
                lambda jvm: jvm.gc_time_millis,
            ),
            FieldMetric(
                new_descriptor(SUBSYSTEM, "gc_count"),
                lambda jvm: jvm.gc_count,
            ),
            FieldMetric(
                new_descriptor(SUBSYSTEM, "thread_blocked"),
                lambda jvm: jvm.threads_blocked,
            ),
        )
