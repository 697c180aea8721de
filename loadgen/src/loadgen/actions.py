"""Steady-state actions a logged-in client repeats.

None of these raise on failure: the error is logged with the user and room,
recorded under the ``error`` label, and the action returns normally so the
scheduler can keep driving the session.
"""

from __future__ import annotations

import asyncio
import logging
from datetime import datetime, timezone

from .descriptors import NOTIFY_ROOM, room_qualifier, room_subscriptions
from .fanout import gather_all, subscribe_all
from .metrics import track
from .session import SessionState

logger = logging.getLogger(__name__)

READ_RECEIPT_PATH = "subscriptions.read"


def typing(session: SessionState, room_id: str, is_typing: bool) -> asyncio.Task:
    return session.spawn(
        session.transport.method_call(
            NOTIFY_ROOM,
            room_qualifier(room_id, "typing"),
            session.username,
            is_typing,
        ),
        label="typing",
    )


async def send_message(session: SessionState, room_id: str, text: str) -> None:
    typing(session, room_id, True)
    try:
        await asyncio.sleep(session.config.think_delay_s)
        try:
            with track(session.metrics.messages):
                await session.transport.send_message(text, room_id)
        except Exception:
            logger.warning("error sending message uid=%s rid=%s", session.user_id, room_id, exc_info=True)
    finally:
        typing(session, room_id, False)


async def open_room(session: SessionState, room_id: str | None = None) -> None:
    rid = room_id or session.config.default_room
    transport = session.transport
    try:
        with track(session.metrics.open_room):
            await gather_all(
                [
                    subscribe_room(session, rid),
                    transport.method_call("getRoomRoles", rid),
                    transport.method_call(
                        "loadHistory", rid, None, session.config.history_limit, datetime.now(timezone.utc)
                    ),
                ]
            )
            # web clients do not mark the room read on open
            if session.config.flavor.is_mobile:
                await transport.post(READ_RECEIPT_PATH, {"rid": rid})
    except Exception:
        logger.warning("error open room uid=%s rid=%s", session.user_id, rid, exc_info=True)


async def subscribe_room(session: SessionState, room_id: str) -> None:
    try:
        with track(session.metrics.room_subscribe):
            await session.transport.subscribe_room(room_id)
            await subscribe_all(session.transport, room_subscriptions(room_id))
    except Exception:
        logger.warning("error subscribing room uid=%s rid=%s", session.user_id, room_id, exc_info=True)
