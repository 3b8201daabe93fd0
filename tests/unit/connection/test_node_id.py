"""Tests for NodeId parsing and formatting."""

from uuid import UUID

import pytest

from assetlink.connection import NodeId


class TestNodeIdConstruction:
    """Tests for NodeId validation."""

    def test_rejects_bool_identifier(self):
        with pytest.raises(TypeError):
            NodeId(0, True)

    def test_rejects_float_identifier(self):
        with pytest.raises(TypeError, match="float"):
            NodeId(0, 1.5)

    def test_rejects_namespace_out_of_range(self):
        with pytest.raises(ValueError, match="namespace_index"):
            NodeId(70000, 1)

    def test_rejects_empty_string_identifier(self):
        with pytest.raises(ValueError):
            NodeId(1, "")

    def test_rejects_numeric_identifier_out_of_range(self):
        with pytest.raises(ValueError):
            NodeId(1, 2**32)

    def test_is_hashable_and_comparable(self):
        assert {NodeId(1, 5): "a"}[NodeId(1, 5)] == "a"
        assert NodeId(1, 5) != NodeId(2, 5)

    @pytest.mark.parametrize(
        "identifier, kind",
        [(4211, "i"), ("Motor.Speed", "s"), (UUID(int=1), "g"), (b"\x01\x02", "b")],
    )
    def test_kind(self, identifier, kind):
        assert NodeId(3, identifier).kind == kind


class TestNodeIdParse:
    """Tests for the string form."""

    def test_parses_numeric(self):
        assert NodeId.parse("ns=1;i=4211") == NodeId(1, 4211)

    def test_parses_string(self):
        assert NodeId.parse("ns=2;s=Motor.Speed") == NodeId(2, "Motor.Speed")

    def test_string_identifier_may_contain_separators(self):
        assert NodeId.parse("ns=2;s=a=b;c").identifier == "a=b;c"

    def test_namespace_prefix_is_optional(self):
        assert NodeId.parse("i=85") == NodeId(0, 85)

    def test_parses_guid(self):
        guid = "72962b91-fa75-4ae6-8d28-b404dc7daf63"

        assert NodeId.parse(f"ns=4;g={guid}").identifier == UUID(guid)

    def test_parses_base64_bytes(self):
        assert NodeId.parse("ns=1;b=AQI=").identifier == b"\x01\x02"

    @pytest.mark.parametrize(
        "text",
        ["ns=1", "ns=x;i=1", "ns=1;i=abc", "ns=1;q=1", "ns=1;s=", "ns=1;g=nope", "ns=1;b=***"],
    )
    def test_rejects_malformed(self, text):
        with pytest.raises(ValueError):
            NodeId.parse(text)

    def test_rejects_non_string(self):
        with pytest.raises(TypeError):
            NodeId.parse(42)


class TestNodeIdStr:
    """Tests for the human-readable form."""

    def test_includes_namespace(self):
        assert str(NodeId(1, 4211)) == "ns=1;i=4211"

    def test_omits_namespace_zero(self):
        assert str(NodeId(0, "Server")) == "s=Server"

    def test_bytes_are_base64(self):
        assert str(NodeId(1, b"\x01\x02")) == "ns=1;b=AQI="

    def test_parse_reverses_str(self):
        node = NodeId(7, UUID(int=42))

        assert NodeId.parse(str(node)) == node
