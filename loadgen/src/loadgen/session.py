from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Coroutine, Optional, Set

from .config import SessionConfig
from .metrics import Metrics, default_metrics
from .transport import Transport, UserIdentity

logger = logging.getLogger(__name__)


class ConnectionStatus(str, Enum):
    DISCONNECTED = "disconnected"
    CONNECTED = "connected"


class AuthStatus(str, Enum):
    UNAUTHENTICATED = "unauthenticated"
    AUTHENTICATED = "authenticated"


@dataclass
class SessionState:
    """State of one simulated client.

    Only the handshake and authentication stages mutate the statuses.
    Steady-state actions assume ``authenticated`` is true; the scheduler
    driving the session owns that precondition.
    """

    transport: Transport
    config: SessionConfig = field(default_factory=SessionConfig)
    metrics: Metrics = field(default_factory=default_metrics)
    connection: ConnectionStatus = ConnectionStatus.DISCONNECTED
    auth: AuthStatus = AuthStatus.UNAUTHENTICATED
    _identity: Optional[UserIdentity] = field(default=None, init=False, repr=False)
    _background: Set[asyncio.Task] = field(default_factory=set, init=False, repr=False)

    @property
    def identity(self) -> Optional[UserIdentity]:
        return self._identity

    @property
    def connected(self) -> bool:
        return self.connection is ConnectionStatus.CONNECTED

    @property
    def authenticated(self) -> bool:
        return self.auth is AuthStatus.AUTHENTICATED

    @property
    def user_id(self) -> Optional[str]:
        return self._identity.id if self._identity else None

    @property
    def username(self) -> Optional[str]:
        return self._identity.username if self._identity else None

    def mark_connected(self) -> None:
        self.connection = ConnectionStatus.CONNECTED

    def mark_authenticated(self, identity: UserIdentity) -> None:
        if not self.connected:
            raise RuntimeError("cannot authenticate a disconnected session")
        if not identity.id:
            raise ValueError("identity must carry a user id")
        self._identity = identity
        self.auth = AuthStatus.AUTHENTICATED

    def spawn(self, coro: Coroutine[Any, Any, Any], *, label: str) -> asyncio.Task:
        """Schedule ``coro`` without awaiting it; failures are only logged."""

        task = asyncio.create_task(coro)
        self._background.add(task)

        def _done(finished: asyncio.Task) -> None:
            self._background.discard(finished)
            if finished.cancelled():
                return
            exc = finished.exception()
            if exc is not None:
                logger.debug("%s failed uid=%s: %r", label, self.user_id, exc)

        task.add_done_callback(_done)
        return task

    async def drain(self) -> None:
        """Wait for outstanding fire-and-forget calls to settle."""

        while self._background:
            await asyncio.gather(*list(self._background), return_exceptions=True)
