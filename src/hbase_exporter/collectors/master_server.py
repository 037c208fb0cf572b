"""Collector for the Master Server bean."""

from dataclasses import dataclass

from hbase_exporter.collectors.base import FieldMetric, FixedSchemaCollector
from hbase_exporter.core.beans import jmx_field
from hbase_exporter.core.descriptors import new_descriptor
from hbase_exporter.core.models import Endpoint
from hbase_exporter.core.ports import JmxClientPort

MASTER_SERVER_QUERY = "Hadoop:service=HBase,name=Master,sub=Server"
SUBSYSTEM = "server"


@dataclass(frozen=True)
class MasterServerRecord:
    host: str = jmx_field("tag.Hostname")
    role: str = jmx_field("tag.Context")
    num_region_servers: int = jmx_field("numRegionServers")
    num_dead_region_servers: int = jmx_field("numDeadRegionServers")
    is_active_master: str = jmx_field("tag.isActiveMaster")
    average_load: float = jmx_field("averageLoad")


def _active_master(master: MasterServerRecord) -> float:
    # JMX exposes the flag as the string "true" or "false"
    return 1.0 if master.is_active_master.lower() == "true" else 0.0


class MasterServerCollector(FixedSchemaCollector[MasterServerRecord]):
    """Cluster-level gauges reported by an HBase master."""

    query = MASTER_SERVER_QUERY
    subsystem = SUBSYSTEM
    record_type = MasterServerRecord

    def __init__(self, endpoint: Endpoint, client: JmxClientPort) -> None:
        super().__init__(endpoint, client)
        self.metrics = (
            FieldMetric(
                new_descriptor(
                    SUBSYSTEM, "average_load", "Average number of regions per region server."
                ),
                lambda master: master.average_load,
            ),
            FieldMetric(
                new_descriptor(
                    SUBSYSTEM, "num_regionservers", "Number of live region servers."
                ),
                lambda master: master.num_region_servers,
            ),
            FieldMetric(
                new_descriptor(
                    SUBSYSTEM, "num_dead_regionserver", "Number of dead region servers."
                ),
                lambda master: master.num_dead_region_servers,
            ),
            FieldMetric(
                new_descriptor(
                    SUBSYSTEM,
                    "is_active_master",
                    "Whether this master is the active master (1) or a backup (0).",
                ),
                _active_master,
            ),
        )
