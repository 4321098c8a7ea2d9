"""Core exception hierarchy."""
from __future__ import annotations

from enum import Enum
from typing import Any


class ShopAppstoreError(Exception):
    """Base class for shop API client errors."""


class HttpError(ShopAppstoreError):
    """HTTP-level failure reported by the platform (non-2xx status)."""

    def __init__(self, message: str, status_code: int, response: Any = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.response = response


class TransportError(ShopAppstoreError):
    """Transport failure; chained from an HttpError when the server answered."""

    @property
    def http_error(self) -> HttpError | None:
        cause = self.__cause__
        if isinstance(cause, HttpError):
            return cause
        return None


class ErrorKind(str, Enum):
    VALIDATION = "validation"
    PERMISSIONS = "permissions"
    NOT_FOUND = "not_found"
    METHOD_UNSUPPORTED = "method_unsupported"
    OBJECT_LOCKED = "object_locked"
    COMMUNICATION = "communication"
    RESOURCE = "resource"


HTTP_STATUS_KINDS: dict[int, ErrorKind] = {
    400: ErrorKind.VALIDATION,
    401: ErrorKind.PERMISSIONS,
    404: ErrorKind.NOT_FOUND,
    405: ErrorKind.METHOD_UNSUPPORTED,
    409: ErrorKind.OBJECT_LOCKED,
}


class ResourceError(ShopAppstoreError):
    """Resource operation failure tagged with an ErrorKind.

    ``body`` holds what the server reported: the HTTP response body for
    HTTP-mapped kinds, the bulk error payload (or the raw bulk response)
    for RESOURCE.
    """

    def __init__(
        self,
        kind: ErrorKind,
        body: Any = None,
        status_code: int | None = None,
        message: str | None = None,
    ) -> None:
        self.kind = kind
        self.body = body
        self.status_code = status_code
        super().__init__(message if message is not None else _describe(kind, body, status_code))

    @classmethod
    def from_http_error(cls, http_error: HttpError) -> "ResourceError":
        kind = HTTP_STATUS_KINDS.get(http_error.status_code, ErrorKind.COMMUNICATION)
        if kind is ErrorKind.COMMUNICATION:
            return cls(
                kind,
                body=http_error.response,
                status_code=http_error.status_code,
                message=str(http_error),
            )
        return cls(kind, body=http_error.response, status_code=http_error.status_code)


def _describe(kind: ErrorKind, body: Any, status_code: int | None) -> str:
    text = f"{kind.value} error"
    if status_code is not None:
        text += f" (status {status_code})"
    if body is not None and body != "":
        text += f": {body}"
    return text
