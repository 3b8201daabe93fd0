"""Tests for RemoteVariable caching and type checks."""

import threading
import time

import pytest

from assetlink.connection import DataType, NodeId, RemoteVariable, UnsignedByte, UnsignedLong, UnsignedShort
from assetlink.exceptions import RemoteCommunicationError, TypeMismatchError
from tests.helpers.remote_fakes import FakeRemoteClient

NODE = NodeId(1, "Motor.Speed")


def _variable(client, clock, data_type=DataType.INTEGER, ttl=5.0):
    return RemoteVariable(client, NODE, data_type, ttl, clock=clock)


class TestCaching:
    """Tests for the TTL cache."""

    def test_two_reads_within_ttl_hit_remote_once(self, fake_client, manual_clock):
        fake_client.seed(NODE, 12)
        variable = _variable(fake_client, manual_clock)

        first = variable.get_value()
        manual_clock.advance(4.9)
        second = variable.get_value()

        assert first == second == 12
        assert fake_client.reads == [NODE]

    def test_read_after_expiry_refetches_once(self, fake_client, manual_clock):
        fake_client.seed(NODE, 12)
        variable = _variable(fake_client, manual_clock)

        variable.get_value()
        manual_clock.advance(5.0)
        fake_client.seed(NODE, 13)
        value = variable.get_value()
        again = variable.get_value()

        assert value == again == 13
        assert len(fake_client.reads) == 2

    def test_zero_ttl_always_reads(self, fake_client, manual_clock):
        fake_client.seed(NODE, 1)
        variable = _variable(fake_client, manual_clock, ttl=0)

        variable.get_value()
        variable.get_value()

        assert len(fake_client.reads) == 2

    def test_zero_ttl_round_trip(self, fake_client, manual_clock):
        variable = _variable(fake_client, manual_clock, ttl=0)

        variable.apply_value(7)

        assert variable.get_value() == 7
        assert len(fake_client.reads) == 1

    def test_write_refreshes_cache_without_read_back(self, fake_client, manual_clock):
        fake_client.seed(NODE, 1)
        variable = _variable(fake_client, manual_clock)

        variable.apply_value(99)
        fake_client.seed(NODE, 5)

        assert variable.get_value() == 99
        assert fake_client.reads == []

    def test_failed_write_keeps_cache(self, fake_client, manual_clock):
        fake_client.seed(NODE, 1)
        variable = _variable(fake_client, manual_clock)
        variable.get_value()
        fake_client.fail_writes = True

        with pytest.raises(RemoteCommunicationError):
            variable.apply_value(2)

        assert variable.get_value() == 1
        assert len(fake_client.reads) == 1

    def test_failed_write_does_not_create_cache_entry(self, fake_client, manual_clock):
        fake_client.seed(NODE, 1)
        fake_client.fail_writes = True
        variable = _variable(fake_client, manual_clock)

        with pytest.raises(RemoteCommunicationError):
            variable.apply_value(2)
        fake_client.fail_writes = False

        assert variable.get_value() == 1
        assert fake_client.reads == [NODE]

    def test_failed_read_propagates(self, fake_client, manual_clock):
        fake_client.fail_reads = True
        variable = _variable(fake_client, manual_clock)

        with pytest.raises(RemoteCommunicationError, match="read failed"):
            variable.get_value()

    def test_negative_ttl_rejected(self, fake_client):
        with pytest.raises(ValueError, match="cache_ttl"):
            RemoteVariable(fake_client, NODE, DataType.INTEGER, -1)


class TestTypeChecks:
    """Tests for boundary type checks and conversion."""

    def test_write_with_wrong_type_makes_no_remote_call(self, fake_client, manual_clock):
        variable = _variable(fake_client, manual_clock, DataType.INTEGER)

        with pytest.raises(TypeMismatchError):
            variable.apply_value("7")

        assert fake_client.call_count == 0

    def test_bool_is_not_an_integer(self, fake_client, manual_clock):
        variable = _variable(fake_client, manual_clock, DataType.INTEGER)

        with pytest.raises(TypeMismatchError):
            variable.apply_value(True)

    def test_read_with_wrong_type_fails(self, fake_client, manual_clock):
        fake_client.seed(NODE, 7.5)
        variable = _variable(fake_client, manual_clock, DataType.INTEGER)

        with pytest.raises(TypeMismatchError, match="received from remote endpoint"):
            variable.get_value()

    def test_mismatched_read_is_not_cached(self, fake_client, manual_clock):
        fake_client.seed(NODE, "oops")
        variable = _variable(fake_client, manual_clock, DataType.INTEGER)
        with pytest.raises(TypeMismatchError):
            variable.get_value()

        fake_client.seed(NODE, 3)

        assert variable.get_value() == 3

    def test_unsigned_byte_read_is_widened_to_int(self, fake_client, manual_clock):
        fake_client.seed(NODE, UnsignedByte(7))
        variable = _variable(fake_client, manual_clock, DataType.UNSIGNED_BYTE)

        value = variable.get_value()

        assert value == 7
        assert type(value) is int

    def test_unsigned_read_requires_wrapper_type(self, fake_client, manual_clock):
        fake_client.seed(NODE, 7)
        variable = _variable(fake_client, manual_clock, DataType.UNSIGNED_BYTE)

        with pytest.raises(TypeMismatchError):
            variable.get_value()

    def test_unsigned_write_sends_wrapper(self, fake_client, manual_clock):
        variable = _variable(fake_client, manual_clock, DataType.UNSIGNED_SHORT)

        variable.apply_value(65535)

        node, sent = fake_client.writes[0]
        assert node == NODE
        assert type(sent) is UnsignedShort
        assert sent == 65535

    def test_unsigned_write_out_of_range_fails_before_remote(self, fake_client, manual_clock):
        variable = _variable(fake_client, manual_clock, DataType.UNSIGNED_BYTE)

        with pytest.raises(TypeMismatchError, match="out of range"):
            variable.apply_value(256)

        assert fake_client.call_count == 0

    def test_unsigned_long_round_trip_keeps_full_precision(self, fake_client, manual_clock):
        variable = _variable(fake_client, manual_clock, DataType.UNSIGNED_LONG, ttl=0)

        variable.apply_value(2**64 - 1)

        assert fake_client.writes[0][1] == UnsignedLong(2**64 - 1)
        assert variable.get_value() == 2**64 - 1


def test_exposes_node_id_and_settings(fake_client):
    variable = RemoteVariable(fake_client, NODE, DataType.STRING, 2)

    assert variable.node_id == NODE
    assert variable.data_type is DataType.STRING
    assert variable.cache_ttl == 2.0
    assert variable.client is fake_client


class SlowClient(FakeRemoteClient):
    """Fake client whose reads take a while."""

    def read_value(self, node):
        time.sleep(0.02)
        return super().read_value(node)


def test_concurrent_cold_reads_hit_remote_once(manual_clock):
    client = SlowClient()
    client.seed(NODE, 5)
    variable = RemoteVariable(client, NODE, DataType.INTEGER, 10.0, clock=manual_clock)
    start = threading.Barrier(6)
    results = []

    def read():
        start.wait()
        results.append(variable.get_value())

    threads = [threading.Thread(target=read) for _ in range(6)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert results == [5] * 6
    assert client.reads == [NODE]
