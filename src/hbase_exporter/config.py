"""Exporter settings.

Flag and environment parsing belong to the caller; this module only holds the
resulting values and their defaults.
"""

from dataclasses import dataclass

from hbase_exporter.adapters.jmx_http import DEFAULT_TIMEOUT
from hbase_exporter.core.models import Endpoint

DEFAULT_MASTER_URL = "http://localhost:60010/jmx"
DEFAULT_REGIONSERVER_URL = "http://localhost:60030/jmx"


@dataclass(frozen=True)
class ExporterSettings:
    """Where to scrape and how.

    Attributes:
        master_url: JMX address of an HBase master.
        regionserver_url: JMX address of an HBase region server.
        is_master: Scrape the master (True) or the region server (False).
        scrape_timeout: Time budget of one fetch, in seconds.
    """

    master_url: str = DEFAULT_MASTER_URL
    regionserver_url: str = DEFAULT_REGIONSERVER_URL
    is_master: bool = False
    scrape_timeout: float = DEFAULT_TIMEOUT

    def __post_init__(self) -> None:
        if self.scrape_timeout <= 0:
            raise ValueError("scrape_timeout must be positive")
        # Fail fast on unusable URLs
        Endpoint.from_url(self.master_url)
        Endpoint.from_url(self.regionserver_url)

    @property
    def active_endpoint(self) -> Endpoint:
        """The endpoint scraped in the configured mode."""
        url = self.master_url if self.is_master else self.regionserver_url
        return Endpoint.from_url(url)
