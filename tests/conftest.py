from unittest.mock import MagicMock

import pytest

from analytics_hub.core.dispatcher import Analytics
from analytics_hub.core.registry import Registry
from analytics_hub.page.document import Page
from tests.factories import (
    ExplodingProvider,
    MutatingProvider,
    RecordingProvider,
    TrackOnlyProvider,
)


@pytest.fixture
def page():
    return Page("https://shop.example.com/landing")


@pytest.fixture
def registry():
    registry = Registry()
    registry.add_provider("Recorder", RecordingProvider)
    registry.add_provider("Second Recorder", RecordingProvider)
    registry.add_provider("Track Only", TrackOnlyProvider)
    registry.add_provider("Mutator", MutatingProvider)
    registry.add_provider("Exploder", ExplodingProvider)
    return registry


@pytest.fixture
def mock_scheduler():
    """Scheduler double: jobs are captured, never run on their own."""
    scheduler = MagicMock()
    scheduler.running = True
    return scheduler


@pytest.fixture
def analytics(registry, page, mock_scheduler):
    return Analytics(registry=registry, page=page, scheduler=mock_scheduler, timeout_ms=300)
