"""Tests for the asyncio scheduler adapter."""

import asyncio

import pytest

from app.adapters.scheduler.asyncio_scheduler import AsyncioScheduler


@pytest.mark.asyncio
async def test_callback_fires_after_delay():
    scheduler = AsyncioScheduler()
    fired = asyncio.Event()
    scheduler.call_later(0.01, fired.set)
    await asyncio.wait_for(fired.wait(), timeout=1.0)
    assert fired.is_set()


@pytest.mark.asyncio
async def test_cancel_prevents_callback():
    scheduler = AsyncioScheduler()
    calls = []
    handle = scheduler.call_later(0.01, lambda: calls.append(1))
    scheduler.cancel(handle)
    await asyncio.sleep(0.05)
    assert calls == []


@pytest.mark.asyncio
async def test_negative_delay_runs_soon():
    scheduler = AsyncioScheduler()
    calls = []
    scheduler.call_later(-1.0, lambda: calls.append(1))
    await asyncio.sleep(0.01)
    assert calls == [1]


def test_cancel_ignores_foreign_handles():
    AsyncioScheduler().cancel(None)
    AsyncioScheduler().cancel(object())
