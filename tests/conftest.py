"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import itertools
from typing import Any, Callable

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine

from app.adapters.persistence.database import init_models
from app.application.ports.map_widget_port import (
    MapFeature,
    MapWidgetError,
    MapWidgetPort,
    MarkerSpec,
)
from app.application.ports.scheduler_port import SchedulerPort
from app.application.use_cases.globe_interaction import GlobeInteractionController
from app.domain.value_objects.camera import GlobeConfig
from app.domain.value_objects.geo_point import GeoPoint

# ─── In-memory fakes ────────────────────────────────────────────────


class FakeMapWidget(MapWidgetPort):
    """Records every command; frames run only when the test pumps them."""

    def __init__(self, center: GeoPoint | None = None):
        self.center = center or GeoPoint(latitude=20.0, longitude=0.0)
        self.flights: list[tuple[GeoPoint, float, int]] = []
        self.frames: dict[int, Callable[[float], None]] = {}
        self.markers: dict[int, MarkerSpec] = {}
        self.marker_html: dict[int, str] = {}
        self.popups: dict[int, tuple[GeoPoint, str, int]] = {}
        self.features: list[MapFeature] = []
        self.fail_flights = False
        self.resize_calls = 0
        self._ids = itertools.count(1)

    def fly_to(self, center, zoom, duration_ms):
        if self.fail_flights:
            raise MapWidgetError("invalid camera target")
        self.flights.append((center, zoom, duration_ms))
        self.center = center

    def get_center(self):
        return self.center

    def set_center(self, center):
        self.center = center

    def resize(self):
        self.resize_calls += 1

    def request_frame(self, callback):
        handle = next(self._ids)
        self.frames[handle] = callback
        return handle

    def cancel_frame(self, handle):
        self.frames.pop(handle, None)

    def run_frames(self, count: int = 1, timestamp: float = 0.0) -> None:
        for _ in range(count):
            pending = list(self.frames.values())
            self.frames.clear()
            for callback in pending:
                callback(timestamp)

    def add_marker(self, marker):
        handle = next(self._ids)
        self.markers[handle] = marker
        self.marker_html[handle] = marker.html
        return handle

    def update_marker(self, handle, html):
        self.marker_html[handle] = html

    def remove_marker(self, handle):
        self.markers.pop(handle, None)
        self.marker_html.pop(handle, None)

    def open_popup(self, anchor, html, offset=0):
        handle = next(self._ids)
        self.popups[handle] = (anchor, html, offset)
        return handle

    def close_popup(self, handle):
        self.popups.pop(handle, None)

    def features_at(self, x, y):
        return list(self.features)

    @property
    def last_flight(self) -> tuple[GeoPoint, float, int] | None:
        return self.flights[-1] if self.flights else None


class ManualScheduler(SchedulerPort):
    """Timers fire only when the test advances the clock."""

    def __init__(self):
        self.now = 0.0
        self.scheduled: list[Callable[[], None]] = []
        self._timers: dict[int, tuple[float, Callable[[], None]]] = {}
        self._ids = itertools.count(1)

    def call_later(self, delay_seconds, callback) -> Any:
        handle = next(self._ids)
        self._timers[handle] = (self.now + delay_seconds, callback)
        self.scheduled.append(callback)
        return handle

    def cancel(self, handle):
        self._timers.pop(handle, None)

    @property
    def pending(self) -> int:
        return len(self._timers)

    def next_due(self) -> float | None:
        return min((due for due, _ in self._timers.values()), default=None)

    def advance(self, seconds: float) -> None:
        target = self.now + seconds
        while True:
            due = [(d, h) for h, (d, _) in self._timers.items() if d <= target]
            if not due:
                break
            when, handle = min(due)
            _, callback = self._timers.pop(handle)
            self.now = when
            callback()
        self.now = target


# ─── Fixtures ───────────────────────────────────────────────────────


@pytest.fixture
def widget():
    return FakeMapWidget()


@pytest.fixture
def scheduler():
    return ManualScheduler()


@pytest.fixture
def globe_config():
    return GlobeConfig()


@pytest.fixture
def controller(widget, scheduler, globe_config):
    ctrl = GlobeInteractionController(widget, scheduler, globe_config)
    ctrl.start()
    return ctrl


@pytest.fixture
def office_feature():
    return MapFeature(
        properties={"title": "New York Headquarters", "city": "New York", "employees": 4200},
        position=GeoPoint(latitude=40.7, longitude=-74.0),
    )


# ─── Database ───────────────────────────────────────────────────────


@pytest_asyncio.fixture
async def db_engine(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    await init_models(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    return async_sessionmaker(db_engine, expire_on_commit=False)
