"""Error classes for shopmoney storefront requests."""
from __future__ import annotations


class StorefrontError(Exception):
    """Raised when the storefront answers a section request with an error status."""

    def __init__(self, code: str, message: str, status_code: int):
        super().__init__(message)
        self.code = code
        self.status_code = status_code
