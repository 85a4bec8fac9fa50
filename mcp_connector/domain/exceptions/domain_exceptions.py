class DomainError(Exception):
    """Base exception for all domain-level errors."""

    pass


class StoreError(DomainError):
    """Raised when a record store statement fails."""

    pass


class UpstreamError(DomainError):
    """Raised when a server proxy cannot be reached or answers garbage."""

    pass
