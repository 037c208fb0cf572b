"""Decomposition of per-region composite attribute names.

The region-server ``sub=Regions`` bean flattens the namespace, table, region
and metric of every per-region attribute into a single name::

    Namespace_<namespace>_table_<table>_region_<region>_metric_<metric>

Decomposition splits on the first occurrence of each separator, left to
right. It is only unambiguous when no dimension value contains a separator.
"""

import logging
from collections.abc import Mapping
from typing import Any

from hbase_exporter.core.errors import MalformedKeyError
from hbase_exporter.core.models import RegionMetric

logger = logging.getLogger(__name__)

PREFIX = "Namespace_"
TABLE_SEPARATOR = "_table_"
REGION_SEPARATOR = "_region_"
METRIC_SEPARATOR = "_metric_"

SEPARATORS = (TABLE_SEPARATOR, REGION_SEPARATOR, METRIC_SEPARATOR)


def is_region_key(key: str) -> bool:
    """Return True if the attribute name is a candidate composite key."""
    return key.startswith(PREFIX)


def parse_region_key(key: str) -> tuple[str, str, str, str]:
    """Decompose a composite key into (namespace, table, region, metric).

    Raises:
        MalformedKeyError: If the prefix or any separator is missing from
            the remaining substring.
    """
    if not is_region_key(key):
        raise MalformedKeyError(key, PREFIX)

    parts: list[str] = []
    remainder = key[len(PREFIX) :]
    for separator in SEPARATORS:
        head, found, remainder = remainder.partition(separator)
        if not found:
            raise MalformedKeyError(key, separator)
        parts.append(head)
    namespace, table, region = parts
    return namespace, table, region, remainder


def join_region_key(namespace: str, table: str, region: str, metric: str) -> str:
    """Build the composite key for the given dimensions."""
    return (
        f"{PREFIX}{namespace}{TABLE_SEPARATOR}{table}"
        f"{REGION_SEPARATOR}{region}{METRIC_SEPARATOR}{metric}"
    )


def parse_region_metric(key: str, value: Any) -> RegionMetric:
    """Decompose a composite key and attach its numeric value.

    Raises:
        MalformedKeyError: If the key is malformed or the value is not numeric.
    """
    namespace, table, region, metric = parse_region_key(key)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise MalformedKeyError(key, "", detail=f"non-numeric value {value!r}")
    return RegionMetric(
        namespace=namespace,
        table=table,
        region=region,
        metric=metric,
        value=float(value),
    )


def decompose_region_attributes(bean: Mapping[str, Any]) -> list[RegionMetric]:
    """Decompose every composite key of a per-region bean.

    Attributes without the ``Namespace_`` prefix are ignored. A malformed
    composite key is logged and skipped; the other keys are still decomposed.
    """
    entries: list[RegionMetric] = []
    for key, value in bean.items():
        if not is_region_key(key):
            continue
        try:
            entries.append(parse_region_metric(key, value))
        except MalformedKeyError as exc:
            logger.warning(
                "Skipping region attribute: %s", exc, extra={"region_key": key}
            )
    return entries
