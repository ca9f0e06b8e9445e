import asyncio
from dataclasses import dataclass
from typing import Any, Awaitable

from VouchBot.scripts.log import log

_late: set[asyncio.Future] = set()


@dataclass
class RaceOutcome:
    value: Any = None
    timed_out: bool = False


def _settle_late(task: asyncio.Future):
    _late.discard(task)
    if task.cancelled():
        return
    error = task.exception()
    if error is not None:
        log("timeouts", f"Operation failed after its timeout: {error}")


async def race(operation: Awaitable, timeout: float) -> RaceOutcome:
    """Await `operation` for at most `timeout` seconds.

    On expiry the operation keeps running in the background and whatever it
    eventually settles with is discarded. Errors raised before the timeout
    are not caught here.
    """
    task = asyncio.ensure_future(operation)
    try:
        value = await asyncio.wait_for(asyncio.shield(task), timeout=timeout)
    except asyncio.TimeoutError:
        _late.add(task)
        task.add_done_callback(_settle_late)
        return RaceOutcome(timed_out=True)
    return RaceOutcome(value=value)
