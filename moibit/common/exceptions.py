"""
Custom exceptions for the MOIBit client.
"""

from __future__ import annotations


class MoiBitError(Exception):
    """Base class for all errors raised by the client."""


class InvalidPathError(MoiBitError, ValueError):
    """Exception for malformed file paths."""

    def __init__(
        self, reason: str, index: int | None = None, element: str | None = None
    ) -> None:
        super().__init__(reason)
        self.reason = reason
        self.index = index
        self.element = element


class AuthenticationError(MoiBitError):
    """Exception for a failed authentication exchange."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class TransportError(MoiBitError):
    """Exception for network-level failures while talking to the service."""

    def __init__(self, message: str, url: str | None = None) -> None:
        super().__init__(message)
        self.url = url


class DecodeError(MoiBitError):
    """Exception for response bodies that do not match the expected shape."""

    def __init__(self, message: str, stage: str, status_code: int | None = None) -> None:
        super().__init__(f"response decode failed at '{stage}' [HTTP {status_code}]: {message}")
        self.stage = stage
        self.status_code = status_code


class NonOkResponseError(MoiBitError):
    """Exception for responses where the service reports a failure."""

    def __init__(self, code: int, message: str = "", request_id: str = "") -> None:
        super().__init__(f"non-ok response [{code}]: {message}")
        self.code = code
        self.message = message
        self.request_id = request_id
