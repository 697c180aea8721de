import asyncio
from typing import Any, Dict, List, Mapping, Optional, Set, Tuple

from loadgen.errors import LoginError, OperationError, SessionConnectionError
from loadgen.transport import UserIdentity

Call = Tuple[Any, ...]


class RecordingTransport:
    """In-memory transport that records every call in issue order.

    ``fail`` names operations (``"login"``, ``"send_message"``, ...) or
    ``("subscribe", stream, qualifier)`` / ``("method_call", name)`` keys that
    should raise instead of succeeding.
    """

    def __init__(
        self,
        *,
        user: UserIdentity | None = None,
        fail: Optional[Set[Any]] = None,
        delay_s: float = 0.0,
    ) -> None:
        self.user = user or UserIdentity(id="u1", username="loaduser")
        self.fail: Set[Any] = set(fail or ())
        self.delay_s = delay_s
        self.calls: List[Call] = []
        self.user_id: Optional[str] = None
        self.username: Optional[str] = None

    async def _step(self, call: Call, *keys: Any, error: type[Exception] = OperationError) -> None:
        self.calls.append(call)
        if self.delay_s:
            await asyncio.sleep(self.delay_s)
        else:
            await asyncio.sleep(0)
        for key in keys:
            if key in self.fail:
                raise error(f"injected failure: {key}")

    async def connect(self, options: Mapping[str, Any]) -> None:
        await self._step(("connect", dict(options)), "connect", error=SessionConnectionError)

    async def method_call(self, method: str, *args: Any) -> Any:
        await self._step(("method_call", method, *args), "method_call", ("method_call", method))
        return {"method": method}

    async def subscribe(self, stream: str, *params: Any) -> None:
        qualifier = params[0] if params else None
        await self._step(("subscribe", stream, *params), "subscribe", ("subscribe", stream, qualifier))

    async def login(self, credentials: Any) -> UserIdentity:
        recorded = dict(credentials) if isinstance(credentials, Mapping) else credentials
        await self._step(("login", recorded), "login", error=LoginError)
        self.user_id = self.user.id
        self.username = self.user.username
        return self.user

    async def subscribe_logged_notify(self) -> None:
        await self._step(("subscribe_logged_notify",), "subscribe_logged_notify")

    async def subscribe_room(self, room_id: str) -> None:
        await self._step(("subscribe_room", room_id), "subscribe_room")

    async def send_message(self, text: str, room_id: str) -> None:
        await self._step(("send_message", text, room_id), "send_message")

    async def post(self, path: str, body: Mapping[str, Any]) -> Dict[str, Any]:
        await self._step(("post", path, dict(body)), "post")
        return {"success": True}

    def named(self, name: str) -> List[Call]:
        return [call for call in self.calls if call[0] == name]

    def subscriptions(self, stream: str) -> List[Call]:
        return [call for call in self.calls if call[0] == "subscribe" and call[1] == stream]
