"""Capability contract consumed from the realtime client library."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Protocol


@dataclass(frozen=True)
class UserIdentity:
    id: str
    username: str


class Transport(Protocol):
    """One DDP-style connection owned by exactly one simulated session.

    Every coroutine raises on failure; callers never inspect result codes.
    ``connect`` is expected to raise :class:`loadgen.errors.SessionConnectionError`
    and ``login`` :class:`loadgen.errors.LoginError`, but the session core
    propagates whatever is raised without wrapping it.
    """

    user_id: Optional[str]
    username: Optional[str]

    async def connect(self, options: Mapping[str, Any]) -> None: ...

    async def method_call(self, method: str, *args: Any) -> Any: ...

    async def subscribe(self, stream: str, *params: Any) -> None: ...

    async def login(self, credentials: Any) -> UserIdentity: ...

    async def subscribe_logged_notify(self) -> None: ...

    async def subscribe_room(self, room_id: str) -> None: ...

    async def send_message(self, text: str, room_id: str) -> None: ...

    async def post(self, path: str, body: Mapping[str, Any]) -> Dict[str, Any]: ...
