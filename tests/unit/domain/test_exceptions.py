"""
Unit tests for domain exceptions.
"""

from mcp_connector.domain.exceptions.domain_exceptions import (
    DomainError,
    StoreError,
    UpstreamError,
)


class TestDomainExceptions:
    """Tests for domain exception hierarchy."""

    def test_domain_error_is_base(self):
        """Test that DomainError is the base exception."""
        error = DomainError("Base error")
        assert isinstance(error, Exception)
        assert str(error) == "Base error"

    def test_store_error(self):
        """Test StoreError."""
        error = StoreError("Record store failure: connection refused")

        assert isinstance(error, DomainError)
        assert str(error) == "Record store failure: connection refused"

    def test_upstream_error(self):
        """Test UpstreamError."""
        error = UpstreamError("Proxy mcp-client-srv1 unreachable")

        assert isinstance(error, DomainError)
        assert str(error) == "Proxy mcp-client-srv1 unreachable"
