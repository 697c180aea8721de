"""Session startup: unauthenticated handshake followed by login and authenticated setup.

Both stages let every failure propagate unchanged; a session whose startup
failed is dead and the owner is expected to discard it.
"""

from __future__ import annotations

import logging
from typing import Any

from .descriptors import (
    HANDSHAKE_METHODS,
    HANDSHAKE_SUBSCRIPTIONS,
    LOGIN_SUBSCRIPTIONS,
    NOTIFY_ALL_EVENTS,
    NOTIFY_LOGGED_EVENTS,
    NOTIFY_USER_EVENTS,
    login_methods,
)
from .fanout import call_all, subscribe_all
from .metrics import ERROR, SUCCESS, start_timer
from .redact import redact_credentials
from .session import SessionState
from .transport import UserIdentity

logger = logging.getLogger(__name__)


async def run_handshake(session: SessionState) -> None:
    transport = session.transport
    await transport.connect({})
    session.mark_connected()
    session.metrics.connected.inc()

    # sequential, the way the web client boots
    for call in HANDSHAKE_METHODS:
        await transport.method_call(call.method, *call.args)

    await subscribe_all(transport, HANDSHAKE_SUBSCRIPTIONS)
    await subscribe_all(transport, NOTIFY_ALL_EVENTS)
    logger.debug("handshake complete")


async def login(session: SessionState, credentials: Any = None) -> UserIdentity:
    """Handshake, log in, then replay the client's authenticated setup.

    The ``login`` timer covers the login call and every authenticated
    subscription and method batch after it.
    """

    if credentials is None:
        credentials = session.config.credentials

    await run_handshake(session)

    transport = session.transport
    stop = start_timer(session.metrics.login)
    try:
        user = await transport.login(credentials)
        session.mark_authenticated(user)

        await transport.subscribe_logged_notify()
        await subscribe_all(transport, NOTIFY_LOGGED_EVENTS)
        await subscribe_all(transport, (d.for_user(user.id) for d in NOTIFY_USER_EVENTS))
        await subscribe_all(transport, LOGIN_SUBSCRIPTIONS)
        await call_all(transport, login_methods(session.config.locale))
    except BaseException:
        stop(ERROR)
        logger.exception("error during login credentials=%s", redact_credentials(credentials))
        raise

    stop(SUCCESS)
    logger.debug("logged in uid=%s username=%s", user.id, user.username)
    return user
