"""Example wiring HBase collectors into a prometheus_client registry.

Run with:
    python examples/registry_example.py http://rs1.example.com:60030/jmx

The exposition text of one scrape is printed to stdout. Serving it over HTTP
is left to the embedding application (e.g., prometheus_client's
start_http_server or a WSGI/ASGI app).
"""

import logging
import sys

from prometheus_client import CollectorRegistry, generate_latest

from hbase_exporter import ExporterSettings, create_collectors, register_collectors


def main() -> None:
    logging.basicConfig(level=logging.INFO)

    url = sys.argv[1] if len(sys.argv) > 1 else "http://localhost:60030/jmx"
    is_master = "--master" in sys.argv
    if is_master:
        settings = ExporterSettings(master_url=url, is_master=True, scrape_timeout=5.0)
    else:
        settings = ExporterSettings(regionserver_url=url, scrape_timeout=5.0)

    registry = CollectorRegistry()
    register_collectors(registry, create_collectors(settings))

    sys.stdout.write(generate_latest(registry).decode())


if __name__ == "__main__":
    main()
