from __future__ import annotations


class TransportError(Exception):
    """Base class for failures raised by a transport implementation."""


class SessionConnectionError(TransportError):
    """The transport could not connect; fatal to session startup."""


class LoginError(TransportError):
    """The backend rejected the login; fatal to the session."""


class OperationError(TransportError):
    def __init__(self, message: str, *, status: int | None = None, path: str | None = None):
        self.status = status
        self.path = path
        super().__init__(message)
