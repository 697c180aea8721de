"""Simulated chat client sessions for load generation."""

from .actions import open_room, send_message, subscribe_room, typing
from .config import ClientFlavor, SessionConfig, load_session_config_from_env
from .errors import LoginError, OperationError, SessionConnectionError, TransportError
from .metrics import Metrics, default_metrics
from .rest import RestChannel
from .session import AuthStatus, ConnectionStatus, SessionState
from .stages import login, run_handshake
from .transport import Transport, UserIdentity

__all__ = [
    "AuthStatus",
    "ClientFlavor",
    "ConnectionStatus",
    "LoginError",
    "Metrics",
    "OperationError",
    "RestChannel",
    "SessionConfig",
    "SessionConnectionError",
    "SessionState",
    "Transport",
    "TransportError",
    "UserIdentity",
    "default_metrics",
    "load_session_config_from_env",
    "login",
    "open_room",
    "run_handshake",
    "send_message",
    "subscribe_room",
    "typing",
]
