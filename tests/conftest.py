# tests/conftest.py
import os

import django
import pytest

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'power_config.settings')
django.setup()

from power_config.apps.power.domain.messages import NAMESPACE, configure_message_resolver, get_message_resolver
from power_config.apps.power.domain.models import (
    KEY_UNIQUE_COMPONENTS,
    KEY_UNIT_COMPONENTS,
    KEY_UNITS_REQUIRED,
    KEY_USE_ALPHABETIC_NAMES,
)
from power_config.apps.power.infrastructure.property_sources import clear_property_sources

FEATURE_KEYS = [KEY_UNITS_REQUIRED, KEY_USE_ALPHABETIC_NAMES, KEY_UNIT_COMPONENTS, KEY_UNIQUE_COMPONENTS]


# In-memory feature source for domain and service tests
class StubPropertySource:
    def __init__(self, values=None):
        self.values = dict(values or {})
        self.lookups = []

    def is_set(self, key):
        self.lookups.append(key)
        return key in self.values

    def get_int(self, key, default):
        self.lookups.append(key)
        try:
            return int(self.values[key])
        except (KeyError, ValueError):
            return default

    def get_bool(self, key, default):
        self.lookups.append(key)
        return self.values.get(key, default)

    def get_set(self, key):
        self.lookups.append(key)
        return frozenset(self.values.get(key, ()))


# Resolver that records every lookup and answers with the default text
class RecordingMessageResolver:
    def __init__(self):
        self.calls = []

    def resolve(self, message_id, default, *params):
        self.calls.append((message_id, default, params))
        return default


@pytest.fixture(autouse=True)
def clean_features(monkeypatch):
    """Remove feature overrides from the environment and reset cached features."""
    for key in FEATURE_KEYS:
        monkeypatch.delenv(f"{NAMESPACE}_{key}".upper(), raising=False)
    clear_property_sources()
    yield
    clear_property_sources()


@pytest.fixture(autouse=True)
def restore_message_resolver():
    """Restore the process-wide message resolver after each test."""
    resolver = get_message_resolver()
    yield
    configure_message_resolver(resolver)


@pytest.fixture
def recording_resolver():
    """Install a recording message resolver."""
    resolver = RecordingMessageResolver()
    configure_message_resolver(resolver)
    return resolver


@pytest.fixture
def stub_source():
    """Create a feature source with a valid two-unit configuration."""
    return StubPropertySource({
        KEY_UNITS_REQUIRED: 2,
        KEY_USE_ALPHABETIC_NAMES: True,
        KEY_UNIT_COMPONENTS: {'engine', 'battery'},
        KEY_UNIQUE_COMPONENTS: {'engine'},
    })


@pytest.fixture
def make_source():
    """Factory for in-memory feature sources."""
    return StubPropertySource
