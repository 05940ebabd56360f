"""asyncio scheduler adapter — implements SchedulerPort on the running loop."""

from __future__ import annotations

import asyncio
from typing import Any, Callable

from app.application.ports.scheduler_port import SchedulerPort


class AsyncioScheduler(SchedulerPort):
    """One-shot timers via ``loop.call_later``; the loop is bound on first use."""

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None):
        self._loop = loop

    def _get_loop(self) -> asyncio.AbstractEventLoop:
        if self._loop is None:
            self._loop = asyncio.get_running_loop()
        return self._loop

    def call_later(self, delay_seconds: float, callback: Callable[[], None]) -> Any:
        return self._get_loop().call_later(max(delay_seconds, 0.0), callback)

    def cancel(self, handle: Any) -> None:
        if isinstance(handle, asyncio.TimerHandle):
            handle.cancel()
