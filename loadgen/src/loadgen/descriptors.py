"""Declarative tables of the subscriptions and method calls a web client issues."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Dict, Tuple


@dataclass(frozen=True)
class SubscriptionOptions:
    use_collection: bool = False
    args: Tuple[Any, ...] = ()

    def as_params(self) -> Dict[str, Any]:
        return {"useCollection": self.use_collection, "args": list(self.args)}


@dataclass(frozen=True)
class SubscriptionDescriptor:
    """A stream subscription: ``stream``, optional event/room ``qualifier``, delivery ``options``.

    ``options`` is either ``None`` (plain room subscriptions), ``False`` (the
    legacy positional flag some streams still receive) or a
    :class:`SubscriptionOptions`.
    """

    stream: str
    qualifier: str | None = None
    options: SubscriptionOptions | bool | None = None

    def params(self) -> Tuple[Any, ...]:
        """Positional arguments for ``Transport.subscribe(stream, *params)``."""

        params: list[Any] = []
        if self.qualifier is not None:
            params.append(self.qualifier)
        if isinstance(self.options, SubscriptionOptions):
            params.append(self.options.as_params())
        elif self.options is not None:
            params.append(self.options)
        return tuple(params)

    def for_user(self, user_id: str) -> "SubscriptionDescriptor":
        return replace(self, qualifier=f"{user_id}/{self.qualifier}")


@dataclass(frozen=True)
class MethodCallDescriptor:
    method: str
    args: Tuple[Any, ...] = field(default=())

    @classmethod
    def of(cls, method: str, *args: Any) -> "MethodCallDescriptor":
        return cls(method=method, args=tuple(args))


NO_COLLECTION = SubscriptionOptions()

NOTIFY_ALL = "stream-notify-all"
NOTIFY_LOGGED = "stream-notify-logged"
NOTIFY_USER = "stream-notify-user"
NOTIFY_ROOM = "stream-notify-room"
ROOM_MESSAGES = "stream-room-messages"
IMPORTERS = "stream-importers"
APPS = "stream-apps"


def _events(stream: str, events: Tuple[str, ...], options: SubscriptionOptions | bool | None) -> Tuple[SubscriptionDescriptor, ...]:
    return tuple(SubscriptionDescriptor(stream, event, options) for event in events)


HANDSHAKE_METHODS: Tuple[MethodCallDescriptor, ...] = (
    MethodCallDescriptor.of("public-settings/get"),
    MethodCallDescriptor.of("permissions/get"),
)

HANDSHAKE_SUBSCRIPTIONS: Tuple[SubscriptionDescriptor, ...] = (
    SubscriptionDescriptor("meteor.loginServiceConfiguration"),
    SubscriptionDescriptor("meteor_autoupdate_clientVersions"),
)

NOTIFY_ALL_EVENTS = _events(
    NOTIFY_ALL,
    ("updateEmojiCustom", "deleteEmojiCustom", "public-settings-changed"),
    False,
)

NOTIFY_LOGGED_EVENTS = _events(
    NOTIFY_LOGGED,
    (
        "Users:NameChanged",
        "Users:Deleted",
        "updateAvatar",
        "updateEmojiCustom",
        "deleteEmojiCustom",
        "roles-change",
        "permissions-changed",
    ),
    False,
)

# Qualifiers are bare event names; address them with ``for_user`` once the user id is known.
NOTIFY_USER_EVENTS = _events(
    NOTIFY_USER,
    (
        "message",
        "otr",
        "webrtc",
        "notification",
        "audioNotification",
        "rooms-changed",
        "subscriptions-changed",
    ),
    False,
)

LOGIN_SUBSCRIPTIONS: Tuple[SubscriptionDescriptor, ...] = (
    _events(NOTIFY_ALL, ("deleteCustomSound", "updateCustomSound"), NO_COLLECTION)
    + _events(NOTIFY_LOGGED, ("user-status", "permissions-changed"), NO_COLLECTION)
    + _events(IMPORTERS, ("progress",), NO_COLLECTION)
    + _events(
        APPS,
        (
            "app/added",
            "app/removed",
            "app/updated",
            "app/statusUpdate",
            "app/settingUpdated",
            "command/added",
            "command/disabled",
            "command/updated",
            "command/removed",
        ),
        NO_COLLECTION,
    )
)


def login_methods(locale: str) -> Tuple[MethodCallDescriptor, ...]:
    return (
        MethodCallDescriptor.of("listCustomSounds"),
        MethodCallDescriptor.of("listEmojiCustom"),
        MethodCallDescriptor.of("getUserRoles"),
        MethodCallDescriptor.of("subscriptions/get"),
        MethodCallDescriptor.of("rooms/get"),
        MethodCallDescriptor.of("apps/is-enabled"),
        MethodCallDescriptor.of("loadLocale", locale),
    )


def room_qualifier(room_id: str, event: str) -> str:
    return f"{room_id}/{event}"


def room_subscriptions(room_id: str) -> Tuple[SubscriptionDescriptor, ...]:
    return (
        SubscriptionDescriptor(ROOM_MESSAGES, room_id),
        SubscriptionDescriptor(NOTIFY_ROOM, room_qualifier(room_id, "typing")),
        SubscriptionDescriptor(NOTIFY_ROOM, room_qualifier(room_id, "deleteMessage")),
    )
