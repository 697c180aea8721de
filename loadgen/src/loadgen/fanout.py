from __future__ import annotations

import asyncio
from typing import Any, Awaitable, Iterable, List

from .descriptors import MethodCallDescriptor, SubscriptionDescriptor
from .transport import Transport


async def gather_all(aws: Iterable[Awaitable[Any]]) -> List[Any]:
    """Run ``aws`` concurrently and wait until every one of them has finished.

    Results come back in submission order. When any member failed, the first
    failure in submission order is re-raised unchanged, but only after the
    whole batch has settled.
    """

    results = await asyncio.gather(*aws, return_exceptions=True)
    for result in results:
        if isinstance(result, asyncio.CancelledError):
            raise result
    for result in results:
        if isinstance(result, BaseException):
            raise result
    return list(results)


async def subscribe_all(transport: Transport, descriptors: Iterable[SubscriptionDescriptor]) -> None:
    await gather_all(transport.subscribe(d.stream, *d.params()) for d in descriptors)


async def call_all(transport: Transport, calls: Iterable[MethodCallDescriptor]) -> List[Any]:
    return await gather_all(transport.method_call(c.method, *c.args) for c in calls)
