"""Core domain models for HBase JMX scraping."""

from dataclasses import dataclass
from enum import Enum
from urllib.parse import urlsplit


class ValueKind(Enum):
    """How a metric value evolves between scrapes."""

    GAUGE = "gauge"
    COUNTER = "counter"


@dataclass(frozen=True)
class Endpoint:
    """A JMX source exposed by one HBase process.

    Attributes:
        scheme: URL scheme (http or https).
        host: Hostname or IP address.
        port: TCP port, or None when the URL carries none.
        path: Path of the JMX servlet (e.g., /jmx).
    """

    scheme: str
    host: str
    port: int | None = None
    path: str = "/jmx"

    @classmethod
    def from_url(cls, url: str) -> "Endpoint":
        """Build an endpoint from a base URL such as http://rs1:60030/jmx.

        Raises:
            ValueError: If the URL has no scheme or host, or a bad port.
        """
        parts = urlsplit(url)
        if not parts.scheme or not parts.hostname:
            raise ValueError(f"invalid JMX endpoint URL: {url!r}")
        return cls(
            scheme=parts.scheme,
            host=parts.hostname,
            port=parts.port,
            path=parts.path or "/",
        )

    @property
    def base_url(self) -> str:
        """Render the endpoint back into a URL without a query string."""
        netloc = self.host if self.port is None else f"{self.host}:{self.port}"
        return f"{self.scheme}://{netloc}{self.path}"


@dataclass(frozen=True)
class MetricDescriptor:
    """Immutable metadata identifying one metric family.

    Attributes:
        name: Fully qualified metric name (e.g., hbase_region_store_count).
        documentation: Help text.
        label_names: Ordered label schema.
        kind: Value kind shared by every sample of this family.
    """

    name: str
    documentation: str
    label_names: tuple[str, ...] = ()
    kind: ValueKind = ValueKind.GAUGE


@dataclass(frozen=True)
class MetricSample:
    """A single observation produced during one scrape cycle.

    Attributes:
        descriptor: The family this sample belongs to.
        value: The observed value.
        label_values: Label values, ordered like descriptor.label_names.
    """

    descriptor: MetricDescriptor
    value: float
    label_values: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if len(self.label_values) != len(self.descriptor.label_names):
            raise ValueError(
                f"{self.descriptor.name} expects labels "
                f"{self.descriptor.label_names}, got {self.label_values}"
            )

    @property
    def kind(self) -> ValueKind:
        return self.descriptor.kind

    @property
    def labels(self) -> dict[str, str]:
        """Labels as a name to value mapping."""
        return dict(zip(self.descriptor.label_names, self.label_values))


@dataclass(frozen=True)
class RegionMetric:
    """One decomposed per-region attribute.

    Attributes:
        namespace: HBase namespace.
        table: Table name.
        region: Encoded region name.
        metric: JMX metric name (e.g., storeCount).
        value: Numeric attribute value.
    """

    namespace: str
    table: str
    region: str
    metric: str
    value: float
