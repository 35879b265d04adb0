"""
Test fixtures for unit tests.

Fast fixtures built on in-memory images: no display, no files.
"""

from typing import Dict, List

import pytest

from charselect.src.config import PreviewConfig
from charselect.src.core.event_bus import EventBus, EventType
from charselect.src.game import ClassCatalog
from charselect.src.tests.helpers import CountingAssetProvider, RecordingSink, make_image


@pytest.fixture
def provider() -> CountingAssetProvider:
    return CountingAssetProvider()


@pytest.fixture
def mage_provider(provider) -> CountingAssetProvider:
    """Mage with four numbered south-facing walk sprites (added out of order)."""
    for number in ("03", "01", "04", "02"):
        provider.add_sprite("Characters/Mage", make_image(f"mage_walk_south_{number}", 32, 32))
    return provider


@pytest.fixture
def warrior_provider(provider) -> CountingAssetProvider:
    """Warrior with nothing but a composite full sheet."""
    provider.add_image("Characters/Warrior", make_image("Warrior_Full_Sheet", 256, 256))
    return provider


@pytest.fixture
def preview_config() -> PreviewConfig:
    """Default configuration without touching preview_config.yml."""
    return PreviewConfig()


@pytest.fixture
def event_bus() -> EventBus:
    return EventBus()


@pytest.fixture
def recorded_events(event_bus) -> Dict[str, List]:
    """Every event emitted on the event_bus fixture, keyed by event name."""
    events: Dict[str, List] = {}
    for event_type in EventType:
        event_bus.subscribe(event_type, lambda event: events.setdefault(event.type.name, []).append(event))
    return events


@pytest.fixture
def catalog() -> ClassCatalog:
    return ClassCatalog()


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()
