"""
Core exceptions for the starr client library.

This module defines a hierarchy of custom exceptions to allow for granular
error handling and clear separation of failure domains: the network, the
remote service, local argument checks and the custom-script event decoder.
"""

from typing import List, Optional


class StarrError(Exception):
    """Base exception for all library-specific errors."""
    pass


# --- Configuration Errors ---

class ConfigurationError(StarrError):
    """Raised for errors related to application configuration."""
    pass


# --- Infrastructure Errors ---

class InfrastructureError(StarrError):
    """Base class for errors related to external systems (network, API, etc.)."""
    pass


class TransportError(InfrastructureError):
    """Raised when a request produced no response (connect, TLS, timeout)."""

    def __init__(self, message: str, url: str = ""):
        super().__init__(message)
        self.url = url


class StatusError(InfrastructureError):
    """Raised when a service answers with a status outside [200, 300)."""

    def __init__(
        self,
        code: int,
        message: str = "",
        url: str = "",
        body: bytes = b"",
    ):
        self.code = code
        self.message = message
        self.url = url
        self.body = body

        detail = message or body.decode("utf-8", errors="replace").strip()
        text = f"invalid status code, {code} >= 300"
        if detail:
            text += f", {detail}"
        super().__init__(f"{text} ({url})" if url else text)


class AuthenticationError(InfrastructureError):
    """Raised when the service rejects the API key or login credentials."""
    pass


class DecodeError(InfrastructureError):
    """Raised when a successful response body does not fit the target type."""

    def __init__(self, message: str, url: str = ""):
        super().__init__(message)
        self.url = url


# --- Domain Errors ---

class DomainError(StarrError):
    """Base class for errors raised by local checks before any I/O."""
    pass


class InvalidArgumentError(DomainError):
    """Raised when a caller-supplied value fails a local precondition."""
    pass


class AggregateError(DomainError):
    """Raised by bulk loops that collect per-item failures."""

    def __init__(self, errors: List[str]):
        self.errors = list(errors)
        super().__init__(", ".join(self.errors))


# --- Event Decoder Errors ---

class EventError(StarrError):
    """Base class for custom-script event decoding errors."""
    pass


class NoEventFoundError(EventError):
    """Raised when no `{service}_eventtype` variable is present."""
    pass


class InvalidEventError(EventError):
    """Raised when a record is requested for an event that did not happen."""
    pass


class EventParseError(EventError):
    """Raised when an environment value cannot be parsed into its field."""

    def __init__(self, name: str, value: str, reason: Optional[str] = None):
        self.name = name
        self.value = value
        message = f"{name}: ({value})"
        if reason:
            message += f" {reason}"
        super().__init__(message)


class EventSchemaError(TypeError):
    """
    Raised when an event record is declared incorrectly.

    This is a bug in the record declaration, not in the environment data,
    so it is deliberately outside the StarrError hierarchy.
    """
    pass
