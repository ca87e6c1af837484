"""Failure taxonomy for calls to the remote service.

Every exception here is caught by the module controllers and turned into a
``Failed`` result or an error notice; none of them reach the web layer.
"""
from typing import Any, Optional


class RemoteCallError(Exception):
    """Base class for a failed remote call.

    Attributes:
        kind: machine-readable classification ('transport', 'service', 'decode', 'client')
        status: HTTP status code when the service answered, otherwise None
        message: human-readable message
    """

    kind = "client"

    def __init__(self, message: str = "Request failed", status: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status = status

    @property
    def label(self) -> str:
        if self.status is not None:
            return f"{self.kind} {self.status}"
        return self.kind

    def to_dict(self) -> dict:
        payload: dict[str, Any] = {"kind": self.kind, "message": self.message}
        if self.status is not None:
            payload["status"] = self.status
        return payload

    def __str__(self) -> str:
        return self.message


class TransportFailure(RemoteCallError):
    """The service could not be reached (DNS, refused connection, reset...)."""

    kind = "transport"


class ServiceError(RemoteCallError):
    """The service answered with a non-2xx status."""

    kind = "service"


class DecodeFailure(RemoteCallError):
    """The response body was not JSON or did not have the expected shape."""

    kind = "decode"


__all__ = ["RemoteCallError", "TransportFailure", "ServiceError", "DecodeFailure"]
