"""Pytest configuration and fixtures."""

import pytest

from pokedex.input.multitap import MultiTapInputEngine
from pokedex.input.scheduler import ManualScheduler
from pokedex.services.catalog import Catalog
from tests.fakes import RecordingListener, make_catalog


@pytest.fixture
def scheduler() -> ManualScheduler:
    """Provide a virtual-clock scheduler starting at t=0."""
    return ManualScheduler()


@pytest.fixture
def listener() -> RecordingListener:
    """Provide a change listener that records every snapshot."""
    return RecordingListener()


@pytest.fixture
def engine(scheduler: ManualScheduler, listener: RecordingListener) -> MultiTapInputEngine:
    """Provide an engine with default layout and timing."""
    engine = MultiTapInputEngine(scheduler, on_change=listener)
    yield engine
    engine.close()


@pytest.fixture
def catalog() -> Catalog:
    """Provide a small catalog covering every filter dimension."""
    return make_catalog()
