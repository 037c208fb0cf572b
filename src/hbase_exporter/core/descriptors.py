"""Helpers for building metric descriptor tables."""

from hbase_exporter.core.models import MetricDescriptor, ValueKind

NAMESPACE = "hbase"

# Label schemas
SERVER_LABELS = ("host", "role")
REGION_LABELS = ("host", "role", "namespace", "htable", "hregion")


def build_fq_name(*parts: str) -> str:
    """Join the non-empty name parts with underscores.

    Example:
        build_fq_name("hbase", "region", "store_count") -> "hbase_region_store_count"
    """
    return "_".join(part for part in parts if part)


def new_descriptor(
    subsystem: str,
    name: str,
    documentation: str | None = None,
    label_names: tuple[str, ...] = SERVER_LABELS,
    kind: ValueKind = ValueKind.GAUGE,
) -> MetricDescriptor:
    """Create a descriptor named hbase_<subsystem>_<name>."""
    return MetricDescriptor(
        name=build_fq_name(NAMESPACE, subsystem, name),
        documentation=documentation or f"The value of {name}.",
        label_names=label_names,
        kind=kind,
    )


def bookkeeping_descriptors(
    subsystem: str,
) -> tuple[MetricDescriptor, MetricDescriptor, MetricDescriptor]:
    """Return the (up, total_scrapes, json_parse_failures) descriptors."""
    return (
        new_descriptor(
            subsystem,
            "up",
            f"Was the last scrape of the HBase {subsystem} JMX endpoint successful.",
            label_names=(),
        ),
        new_descriptor(
            subsystem,
            "total_scrapes",
            f"Current total HBase {subsystem} JMX scrapes.",
            label_names=(),
            kind=ValueKind.COUNTER,
        ),
        new_descriptor(
            subsystem,
            "json_parse_failures",
            "Number of errors while parsing JSON.",
            label_names=(),
            kind=ValueKind.COUNTER,
        ),
    )
