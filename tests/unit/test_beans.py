"""Tests for bean selection and fixed-schema decoding."""

import json
from dataclasses import dataclass

import pytest

from hbase_exporter.collectors.jvm import JvmRecord
from hbase_exporter.collectors.master_server import MasterServerRecord
from hbase_exporter.collectors.rs_server import RsServerRecord
from hbase_exporter.core.beans import decode_bean, decode_payload, jmx_field, select_bean
from hbase_exporter.core.errors import ParseError, ParseFailure

pytestmark = [pytest.mark.core, pytest.mark.tier(0)]


@dataclass(frozen=True)
class SampleRecord:
    host: str = jmx_field("tag.Hostname")
    count: int = jmx_field("count")
    ratio: float = jmx_field("ratio")


class TestSelectBean:
    """Tests for select_bean()."""

    def test_returns_first_bean(self) -> None:
        payload = json.dumps({"beans": [{"a": 1}, {"a": 2}]}).encode()

        assert select_bean(payload) == {"a": 1}

    def test_accepts_str_payload(self) -> None:
        assert select_bean('{"beans": [{"a": 1}]}') == {"a": 1}

    def test_empty_bean_array_is_typed_error(self) -> None:
        """An empty beans array raises EMPTY_BEAN_ARRAY instead of IndexError."""
        with pytest.raises(ParseError) as excinfo:
            select_bean(b'{"beans": []}')

        assert excinfo.value.reason is ParseFailure.EMPTY_BEAN_ARRAY

    @pytest.mark.parametrize(
        "payload",
        [
            b"not json",
            b"",
            b"\xff\xfe",
            b"[1, 2]",
            b'{"other": []}',
            b'{"beans": {"a": 1}}',
            b'{"beans": [42]}',
        ],
    )
    def test_malformed_payloads(self, payload: bytes) -> None:
        """Anything that is not a bean envelope raises MALFORMED."""
        with pytest.raises(ParseError) as excinfo:
            select_bean(payload)

        assert excinfo.value.reason is ParseFailure.MALFORMED


class TestDecodeBean:
    """Tests for decode_bean()."""

    def test_reads_fields_from_jmx_attributes(self) -> None:
        record = decode_bean(
            {"tag.Hostname": "rs1", "count": 3, "ratio": 0.5}, SampleRecord
        )

        assert record == SampleRecord(host="rs1", count=3, ratio=0.5)

    def test_missing_fields_decode_to_zero_values(self) -> None:
        """Missing attributes are not an error."""
        record = decode_bean({}, SampleRecord)

        assert record == SampleRecord(host="", count=0, ratio=0.0)

    def test_null_fields_decode_to_zero_values(self) -> None:
        record = decode_bean({"count": None}, SampleRecord)

        assert record.count == 0

    def test_numeric_types_are_coerced(self) -> None:
        record = decode_bean({"count": 7.0, "ratio": 2}, SampleRecord)

        assert record.count == 7
        assert isinstance(record.ratio, float)

    @pytest.mark.parametrize(
        "bean",
        [
            {"count": "seven"},
            {"ratio": [1]},
            {"tag.Hostname": 12},
            {"count": float("nan")},
            {"count": 1.9},
            {"count": True},
            {"ratio": False},
        ],
    )
    def test_wrong_types_are_malformed(self, bean: dict[str, object]) -> None:
        with pytest.raises(ParseError) as excinfo:
            decode_bean(bean, SampleRecord)

        assert excinfo.value.reason is ParseFailure.MALFORMED

    def test_decodes_jvm_record(self, jvm_bean: dict[str, object]) -> None:
        record = decode_bean(jvm_bean, JvmRecord)

        assert record.host == "rs1.example.com"
        assert record.role == "RegionServer"
        assert record.mem_heap_used_m == 512.25
        assert record.threads_blocked == 2

    def test_decode_payload_selects_then_decodes(
        self, encode, master_server_bean: dict[str, object]
    ) -> None:
        record = decode_payload(encode(master_server_bean), MasterServerRecord)

        assert record.num_region_servers == 5
        assert record.is_active_master == "true"

    def test_region_server_counts_reject_fractions_and_booleans(self) -> None:
        """Integral attributes accept integral numbers only."""
        with pytest.raises(ParseError, match="memStoreSize"):
            decode_bean({"memStoreSize": 1.9, "regionCount": 3}, RsServerRecord)
        with pytest.raises(ParseError, match="regionCount"):
            decode_bean({"memStoreSize": 2, "regionCount": True}, RsServerRecord)
