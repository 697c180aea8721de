"""REST side channel for the few client calls that do not go over DDP."""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

import aiohttp

from .errors import OperationError

API_PREFIX = "/api/v1/"


class RestChannel:
    """Posts JSON to ``{base_url}/api/v1/{path}`` as the logged-in user.

    Pass ``http`` to share an existing :class:`aiohttp.ClientSession`; the
    channel then never closes it. Otherwise use ``async with`` and the channel
    owns its own session.
    """

    def __init__(
        self,
        base_url: str,
        *,
        http: Optional[aiohttp.ClientSession] = None,
        timeout: Optional[aiohttp.ClientTimeout] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self._http = http
        self._owns_http = http is None
        self._timeout = timeout or aiohttp.ClientTimeout(total=None)
        self._user_id: Optional[str] = None
        self._auth_token: Optional[str] = None

    async def __aenter__(self) -> "RestChannel":
        if self._http is None:
            self._http = aiohttp.ClientSession(timeout=self._timeout)
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    async def close(self) -> None:
        if self._owns_http and self._http is not None:
            await self._http.close()
            self._http = None

    def authorize(self, user_id: str, auth_token: str) -> None:
        self._user_id = user_id
        self._auth_token = auth_token

    @property
    def authorized(self) -> bool:
        return bool(self._user_id and self._auth_token)

    def url_for(self, path: str) -> str:
        return f"{self.base_url}{API_PREFIX}{path.lstrip('/')}"

    async def post(self, path: str, body: Mapping[str, Any]) -> Dict[str, Any]:
        if not self.authorized:
            raise OperationError(f"POST {path} before authorize()", path=path)
        if self._http is None:
            raise OperationError(f"POST {path} on a closed channel", path=path)
        headers = {"X-User-Id": str(self._user_id), "X-Auth-Token": str(self._auth_token)}
        async with self._http.post(self.url_for(path), json=dict(body), headers=headers) as resp:
            if resp.status >= 300:
                detail = await resp.text()
                raise OperationError(f"POST {path} failed with {resp.status}: {detail[:200]}", status=resp.status, path=path)
            try:
                payload = (await resp.json(content_type=None)) or {}
            except ValueError as exc:
                raise OperationError(f"POST {path} returned invalid JSON", status=resp.status, path=path) from exc
        return payload if isinstance(payload, dict) else {"result": payload}
