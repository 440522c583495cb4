"""
Client error hierarchy.

Every failure surfaced by the SDK is a ``ClientError``. Callers branch on
``error.kind`` rather than on the concrete subclass.
"""

from enum import Enum
from typing import Any


class ClientErrorKind(str, Enum):
    """Discriminant carried by every ``ClientError``."""

    API = "api"  # envelope reported an error, or no envelope at all
    HTTP = "http"  # remote answered with a non-2xx status
    NETWORK = "network"  # request never completed
    CONFIG = "config"  # missing credential or required parameter
    UNKNOWN = "unknown"  # invalid source tag or unexpected failure


class ClientError(Exception):
    """Root error type for the SDK."""

    def __init__(
        self,
        message: str,
        kind: ClientErrorKind = ClientErrorKind.UNKNOWN,
        status_code: int | None = None,
        details: Any = None,
        cause: BaseException | None = None,
    ) -> None:
        self.message = message
        self.kind = kind
        self.status_code = status_code
        self.details = details
        self.cause = cause
        super().__init__(message)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(kind={self.kind.value!r}, "
            f"message={self.message!r}, status_code={self.status_code!r})"
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "error_type": self.__class__.__name__,
            "kind": self.kind.value,
            "message": self.message,
            "status_code": self.status_code,
            "details": self.details,
            "cause": repr(self.cause) if self.cause is not None else None,
        }


class ClientConfigError(ClientError):
    """Client is misconfigured or a required parameter is missing."""

    def __init__(self, message: str) -> None:
        super().__init__(message, kind=ClientErrorKind.CONFIG)


class ClientHttpError(ClientError):
    """Remote responded with an HTTP error status (4xx / 5xx)."""

    def __init__(self, message: str, status_code: int, details: Any = None) -> None:
        super().__init__(
            message,
            kind=ClientErrorKind.HTTP,
            status_code=status_code,
            details=details,
        )


class ClientNetworkError(ClientError):
    """Request could not complete: DNS, connect, timeout, reset."""

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        super().__init__(message, kind=ClientErrorKind.NETWORK, cause=cause)


class ClientApiError(ClientError):
    """Transport succeeded but the envelope is missing or signals failure."""

    def __init__(self, message: str, details: Any = None) -> None:
        super().__init__(message, kind=ClientErrorKind.API, details=details)
