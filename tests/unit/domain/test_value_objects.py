"""
Unit tests for domain value objects.
"""

import pytest

from mcp_connector.domain.value_objects.identifier import generate_id
from mcp_connector.domain.value_objects.proxy_name import ProxyName


class TestGenerateId:
    """Tests for the identifier generator."""

    def test_ids_are_unique(self):
        ids = {generate_id() for _ in range(1000)}
        assert len(ids) == 1000

    def test_ids_are_opaque_strings(self):
        value = generate_id()

        assert isinstance(value, str)
        assert value
        assert "/" not in value


class TestProxyName:
    """Tests for ProxyName value object."""

    def test_for_server(self):
        """Test the proxy name is derived from the server ID."""
        name = ProxyName.for_server("srv1")

        assert str(name) == "mcp-client-srv1"
        assert name.server_id == "srv1"

    def test_same_server_same_name(self):
        """Test the mapping is deterministic."""
        assert ProxyName.for_server("srv1") == ProxyName.for_server("srv1")
        assert hash(ProxyName.for_server("srv1")) == hash(ProxyName.for_server("srv1"))

    def test_different_servers_different_names(self):
        assert ProxyName.for_server("srv1") != ProxyName.for_server("srv2")

    def test_rejects_names_without_prefix(self):
        with pytest.raises(ValueError):
            ProxyName("srv1")

    def test_accepts_any_server_id(self):
        """Test every server ID, including the empty one, maps to a name."""
        name = ProxyName.for_server("")

        assert str(name) == "mcp-client-"
        assert name.server_id == ""
        assert ProxyName.for_server("a/b c") != name

    def test_immutability(self):
        name = ProxyName.for_server("srv1")

        with pytest.raises(AttributeError):
            name.value = "mcp-client-other"
