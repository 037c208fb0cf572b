"""Shared test fixtures for all test modules."""

import asyncio
import json
from collections.abc import Callable
from typing import Any

import pytest

from hbase_exporter.core.models import Endpoint


def encode_beans(*beans: dict[str, Any]) -> bytes:
    """Wrap beans into a JMX envelope."""
    return json.dumps({"beans": list(beans)}).encode()


class FakeJmxClient:
    """JmxClientPort double returning queued payloads or errors.

    Each fetch pops the next response; the last one is repeated once the
    queue is down to a single item. Exceptions in the queue are raised.
    """

    def __init__(self, *responses: bytes | Exception) -> None:
        self._responses = list(responses)
        self.calls: list[tuple[Endpoint, str]] = []
        self.events: list[str] = []
        self.gate: asyncio.Event | None = None

    async def fetch(self, endpoint: Endpoint, query: str) -> bytes:
        self.calls.append((endpoint, query))
        self.events.append(f"fetch-start-{len(self.calls)}")
        if self.gate is not None:
            await self.gate.wait()
        response = self._responses[0] if len(self._responses) == 1 else self._responses.pop(0)
        self.events.append(f"fetch-end-{len(self.calls)}")
        if isinstance(response, Exception):
            raise response
        return response


@pytest.fixture
def encode() -> Callable[..., bytes]:
    """Fixture returning the encode_beans() helper."""
    return encode_beans


@pytest.fixture
def endpoint() -> Endpoint:
    """Region server JMX endpoint used across tests."""
    return Endpoint(scheme="http", host="rs1.example.com", port=60030, path="/jmx")


@pytest.fixture
def master_endpoint() -> Endpoint:
    return Endpoint(scheme="http", host="master1.example.com", port=60010, path="/jmx")


@pytest.fixture
def fake_client() -> Callable[..., FakeJmxClient]:
    """Factory fixture creating a FakeJmxClient from queued responses.

    Usage:
        def test_something(fake_client):
            client = fake_client(encode_beans({...}), TransportError("down"))
    """
    return FakeJmxClient


@pytest.fixture
def jvm_bean() -> dict[str, Any]:
    return {
        "name": "Hadoop:service=HBase,name=JvmMetrics",
        "tag.Hostname": "rs1.example.com",
        "tag.ProcessName": "RegionServer",
        "MemNonHeapUsedM": 95.5,
        "MemHeapUsedM": 512.25,
        "MemHeapMaxM": 4096.0,
        "MemMaxM": 4096.0,
        "GcTimeMillis": 1234,
        "GcCount": 56,
        "ThreadsBlocked": 2,
    }


@pytest.fixture
def master_server_bean() -> dict[str, Any]:
    return {
        "name": "Hadoop:service=HBase,name=Master,sub=Server",
        "tag.Hostname": "master1.example.com",
        "tag.Context": "Master",
        "tag.isActiveMaster": "true",
        "numRegionServers": 5,
        "numDeadRegionServers": 1,
        "averageLoad": 12.5,
    }


@pytest.fixture
def rs_server_bean() -> dict[str, Any]:
    return {
        "name": "Hadoop:service=HBase,name=RegionServer,sub=Server",
        "tag.Hostname": "rs1.example.com",
        "tag.Context": "RegionServer",
        "memStoreSize": 1048576,
        "regionCount": 42,
        "storeCount": 84,
        "storeFileCount": 120,
        "storeFileSize": 73400320,
        "totalRequestCount": 998877,
        "splitQueueLength": 0,
        "compactionQueueLength": 3,
        "flushQueueLength": 1,
        "blockCountHitPercent": 97.5,
        "slowAppendCount": 0,
        "slowDeleteCount": 1,
        "slowGetCount": 7,
        "slowPutCount": 4,
        "slowIncrementCount": 0,
    }


@pytest.fixture
def rs_region_bean() -> dict[str, Any]:
    return {
        "name": "Hadoop:service=HBase,name=RegionServer,sub=Regions",
        "tag.Hostname": "rs1.example.com",
        "tag.Context": "RegionServer",
        "modelerType": "RegionServer,sub=Regions",
        "Namespace_default_table_t1_region_r1_metric_storeCount": 42,
        "Namespace_default_table_t1_region_r1_metric_readRequestCount": 1000,
        "Namespace_hbase_table_meta_region_1588230740_metric_memStoreSize": 2048,
    }
