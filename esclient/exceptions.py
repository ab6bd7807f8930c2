"""
Exception hierarchy for esclient.

All custom exceptions inherit from EsClientError base class.
"""


class EsClientError(Exception):
    """Base exception for all esclient errors."""
    pass


# Transport Errors
class TransportError(EsClientError):
    """Raised when a request fails below HTTP semantics (connect, DNS, timeout)."""
    pass


# Codec Errors
class CodecError(EsClientError):
    """Raised when a response body is not valid JSON or does not fit the result type."""
    pass


# Status Errors
class UnexpectedStatusError(EsClientError):
    """Raised when the server answers with a status the operation does not accept."""

    def __init__(self, status_code: int):
        self.status_code = status_code
        super().__init__(f"Unexpected status: {status_code}")


# Configuration Errors
class ConfigurationError(EsClientError):
    """Base exception for configuration-related errors."""
    pass


class InvalidConfigurationError(ConfigurationError):
    """Raised when configuration is invalid or malformed."""
    pass
