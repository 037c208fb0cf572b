"""Tests for descriptor helpers and collector bookkeeping state."""

import threading

import pytest

from hbase_exporter.core.descriptors import (
    REGION_LABELS,
    SERVER_LABELS,
    bookkeeping_descriptors,
    build_fq_name,
    new_descriptor,
)
from hbase_exporter.core.models import ValueKind
from hbase_exporter.core.state import CollectorState

pytestmark = [pytest.mark.core, pytest.mark.tier(0)]


class TestBuildFqName:
    def test_joins_parts(self) -> None:
        assert build_fq_name("hbase", "region", "store_count") == "hbase_region_store_count"

    def test_skips_empty_parts(self) -> None:
        """An empty subsystem does not produce a double underscore."""
        assert build_fq_name("hbase", "", "store_count") == "hbase_store_count"


class TestNewDescriptor:
    def test_defaults_to_server_labels_and_gauge(self) -> None:
        descriptor = new_descriptor("jvm", "gc_count")

        assert descriptor.name == "hbase_jvm_gc_count"
        assert descriptor.label_names == SERVER_LABELS
        assert descriptor.kind is ValueKind.GAUGE
        assert descriptor.documentation

    def test_accepts_region_labels(self) -> None:
        descriptor = new_descriptor("region", "store_count", "doc", REGION_LABELS)

        assert descriptor.label_names == (
            "host",
            "role",
            "namespace",
            "htable",
            "hregion",
        )


class TestBookkeepingDescriptors:
    def test_names_and_kinds(self) -> None:
        up, total, failures = bookkeeping_descriptors("region")

        assert (up.name, total.name, failures.name) == (
            "hbase_region_up",
            "hbase_region_total_scrapes",
            "hbase_region_json_parse_failures",
        )
        assert up.kind is ValueKind.GAUGE
        assert total.kind is ValueKind.COUNTER
        assert failures.kind is ValueKind.COUNTER
        assert up.label_names == total.label_names == failures.label_names == ()


class TestCollectorState:
    """Tests for CollectorState."""

    def test_starts_down_with_zero_counters(self) -> None:
        snapshot = CollectorState().snapshot()

        assert (snapshot.up, snapshot.total_scrapes, snapshot.json_parse_failures) == (
            0.0,
            0.0,
            0.0,
        )

    def test_up_toggles(self) -> None:
        state = CollectorState()

        state.mark_up()
        assert state.snapshot().up == 1.0
        state.mark_down()
        assert state.snapshot().up == 0.0

    def test_counters_are_thread_safe(self) -> None:
        """Concurrent increments are never lost."""
        state = CollectorState()

        def work() -> None:
            for _ in range(1000):
                state.record_scrape()
                state.record_parse_failure()

        threads = [threading.Thread(target=work) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        snapshot = state.snapshot()
        assert snapshot.total_scrapes == 8000
        assert snapshot.json_parse_failures == 8000
