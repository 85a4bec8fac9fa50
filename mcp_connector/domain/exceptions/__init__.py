from .domain_exceptions import DomainError, StoreError, UpstreamError

__all__ = [
    "DomainError",
    "StoreError",
    "UpstreamError",
]
