"""Exception types raised by the Wordnik client.

Every failure surfaces to the caller as a subclass of WordnikError.
"""


class WordnikError(Exception):
    """Base class for all client errors."""


class ConfigError(WordnikError):
    """Raised when the client configuration cannot be loaded."""


class ParamTypeError(WordnikError, TypeError):
    """Raised when a query parameter value has no serialization rule."""


class TransportError(WordnikError):
    """Raised when the HTTP request itself fails (DNS, connection, timeout)."""

    def __init__(self, message: str, url: str = ""):
        super().__init__(message)
        self.url = url


class RemoteError(WordnikError):
    """Raised when Wordnik answers with a non-2xx status code."""

    def __init__(self, status_code: int, reason: str, body: str, url: str = ""):
        super().__init__(f"{status_code} {reason} for {url}".strip())
        self.status_code = status_code
        self.reason = reason
        self.body = body
        self.url = url


class DecodeError(WordnikError, ValueError):
    """Raised when a response body is not valid JSON."""

    def __init__(self, message: str, body: str = ""):
        super().__init__(message)
        self.body = body
