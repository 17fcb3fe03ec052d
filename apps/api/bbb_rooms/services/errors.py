"""Error types raised by the conferencing gateway."""
from __future__ import annotations


class GatewayError(RuntimeError):
    """Base class for every failure talking to the remote conferencing server."""

    error_key = "gateway-error"

    def __init__(
        self,
        message: str,
        *,
        error_key: str | None = None,
        raw_payload: str | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        if error_key is not None:
            self.error_key = error_key
        self.raw_payload = raw_payload
        self.status_code = status_code


class ConfigError(GatewayError):
    """Raised when the remote server URL or shared secret is not configured."""

    error_key = "config-missing"


class TransportError(GatewayError):
    """Raised when the remote server could not be reached."""

    error_key = "transport-error"


class RemoteProtocolError(GatewayError):
    """Raised when the remote server reports a failure."""

    error_key = "unknown"


class NotFoundError(GatewayError):
    """Raised when an operation needs a meeting that does not exist."""

    error_key = "not-found"


class ParseError(GatewayError):
    """Raised when a response payload cannot be interpreted at all."""

    error_key = "parse-error"
