from __future__ import annotations

import os
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Mapping


class ClientFlavor(str, Enum):
    WEB = "web"
    ANDROID = "android"
    IOS = "ios"

    @property
    def is_mobile(self) -> bool:
        return self in (ClientFlavor.ANDROID, ClientFlavor.IOS)


@dataclass(frozen=True)
class SessionConfig:
    flavor: ClientFlavor = ClientFlavor.WEB
    credentials: Any = field(default_factory=dict)
    think_delay_s: float = 1.0
    locale: str = "pt-BR"
    history_limit: int = 50
    default_room: str = "GENERAL"

    def __post_init__(self) -> None:
        if self.think_delay_s < 0:
            raise ValueError("think_delay_s must be non-negative")
        if self.history_limit <= 0:
            raise ValueError("history_limit must be positive")


def _parse_flavor(name: str, default: ClientFlavor) -> ClientFlavor:
    raw = os.environ.get(name)
    if raw is None or raw == "":
        return default
    try:
        return ClientFlavor(raw.strip().lower())
    except ValueError as exc:
        choices = ", ".join(flavor.value for flavor in ClientFlavor)
        raise ValueError(f"{name} must be one of: {choices}") from exc


def _parse_non_negative_float(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if raw is None or raw == "":
        return default
    try:
        parsed = float(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be a number") from exc
    if parsed < 0:
        raise ValueError(f"{name} must be non-negative")
    return parsed


def _parse_positive_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or raw == "":
        return default
    try:
        parsed = int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer") from exc
    if parsed <= 0:
        raise ValueError(f"{name} must be positive")
    return parsed


def _parse_str(name: str, default: str) -> str:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip()


def load_session_config_from_env(credentials: Mapping[str, Any] | None = None) -> SessionConfig:
    creds: Dict[str, Any] = dict(credentials or {})
    return SessionConfig(
        flavor=_parse_flavor("LOADGEN_CLIENT_FLAVOR", ClientFlavor.WEB),
        credentials=creds,
        think_delay_s=_parse_non_negative_float("LOADGEN_THINK_DELAY_S", 1.0),
        locale=_parse_str("LOADGEN_LOCALE", "pt-BR"),
        history_limit=_parse_positive_int("LOADGEN_HISTORY_LIMIT", 50),
        default_room=_parse_str("LOADGEN_DEFAULT_ROOM", "GENERAL"),
    )
