from __future__ import annotations

from typing import Optional


class CurrencyConverterError(Exception):
    """Base class for every failure raised by the client."""


class ValidationError(CurrencyConverterError):
    """A required request field is missing. Raised before any network I/O."""


class InvalidConfiguration(CurrencyConverterError):
    """The configured base URL cannot be parsed."""


class TransportError(CurrencyConverterError):
    """The request never produced a response (DNS, connect, scheme, timeout)."""

    def __init__(self, cause: Exception):
        super().__init__(str(cause))
        self.cause = cause


class RemoteError(CurrencyConverterError):
    """
    Non-200 response from the service.

    `message` is the `error` field of the JSON error envelope, or the raw
    response body when the body is not that envelope.
    """

    def __init__(self, status_code: int, message: str):
        super().__init__(message)
        self.status_code = status_code
        self.message = message

    def __repr__(self) -> str:
        return f"RemoteError(status_code={self.status_code}, message={self.message!r})"


class DecodeError(CurrencyConverterError):
    """A 200 response whose body does not fit the expected result shape."""

    def __init__(self, message: str, body: Optional[str] = None):
        super().__init__(message)
        self.body = body
