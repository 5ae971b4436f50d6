"""Feature sources backed by Django settings and the environment."""
import logging
import os
import threading
from typing import Any, Dict, FrozenSet, Iterable, Optional

from django.conf import settings

logger = logging.getLogger(__name__)

FEATURES_SETTING = 'FEATURES'

TRUE_VALUES = ('true', 'yes', '1', 't', 'y', 'on')


class Feature:
    """A single keyed feature value with typed accessors."""

    def __init__(self, key: str, value: Any = None):
        self.key = key
        self.value = value

    @property
    def is_set(self) -> bool:
        if self.value is None:
            return False
        if isinstance(self.value, str):
            return self.value.strip() != ''
        return True

    def to_int(self, default: int) -> int:
        """Convert to an integer, falling back to ``default`` if not numeric."""
        if not self.is_set or isinstance(self.value, bool):
            return default
        try:
            return int(str(self.value).strip())
        except ValueError:
            logger.warning(f"Feature '{self.key}' has non-numeric value {self.value!r}")
            return default

    @property
    def enabled(self) -> bool:
        if isinstance(self.value, bool):
            return self.value
        return str(self.value).strip().lower() in TRUE_VALUES

    def to_set(self) -> FrozenSet[str]:
        """Convert to a set of strings; strings are split on commas."""
        if not self.is_set:
            return frozenset()
        # Scalars such as 7 or True are read as their text
        if isinstance(self.value, str) or not isinstance(self.value, Iterable):
            text = str(self.value)
            return frozenset(item.strip() for item in text.split(',') if item.strip())
        return frozenset(str(item) for item in self.value)

    def __repr__(self) -> str:
        return f"Feature(key={self.key!r}, value={self.value!r})"


class SettingsPropertySource:
    """
    Feature source reading ``settings.FEATURES[namespace]``.

    Each key can be overridden by an environment variable named
    ``<NAMESPACE>_<KEY>`` in upper case, for example
    ``POWERCONFIGURATION_UNITSREQUIRED``. Features are looked up once and
    cached until ``clear_cache`` is called.
    """

    def __init__(self, namespace: str):
        self.namespace = namespace
        self._cache: Dict[str, Feature] = {}
        self._cache_lock = threading.Lock()

    def env_variable(self, key: str) -> str:
        return f"{self.namespace}_{key}".upper()

    def feature(self, key: str) -> Feature:
        """
        Get a feature by key.

        Args:
            key: The feature key, without namespace

        Returns:
            The feature, whose value is None when unset
        """
        with self._cache_lock:
            if key not in self._cache:
                self._cache[key] = self._load(key)
            return self._cache[key]

    def _load(self, key: str) -> Feature:
        env_variable = self.env_variable(key)
        env_value = os.environ.get(env_variable)
        if env_value is not None:
            logger.info(f"Loading feature '{self.namespace}.{key}' from environment variable '{env_variable}'")
            return Feature(key, env_value)

        features = getattr(settings, FEATURES_SETTING, None) or {}
        return Feature(key, features.get(self.namespace, {}).get(key))

    def clear_cache(self) -> None:
        with self._cache_lock:
            self._cache.clear()
        logger.debug(f"Cleared feature cache for '{self.namespace}'")

    def is_set(self, key: str) -> bool:
        return self.feature(key).is_set

    def get_int(self, key: str, default: int) -> int:
        return self.feature(key).to_int(default)

    def get_bool(self, key: str, default: bool) -> bool:
        feature = self.feature(key)
        if not feature.is_set:
            return default
        return feature.enabled

    def get_set(self, key: str) -> FrozenSet[str]:
        return self.feature(key).to_set()


# Singleton instances, one per namespace
_property_sources: Dict[str, SettingsPropertySource] = {}
_property_sources_lock = threading.Lock()


def get_property_source(namespace: str) -> SettingsPropertySource:
    """
    Get or create the property source singleton for a namespace.

    Returns:
        SettingsPropertySource instance
    """
    with _property_sources_lock:
        if namespace not in _property_sources:
            _property_sources[namespace] = SettingsPropertySource(namespace)
        return _property_sources[namespace]


def clear_property_sources(namespace: Optional[str] = None) -> None:
    """Clear the feature cache of one namespace, or of all namespaces."""
    with _property_sources_lock:
        sources = list(_property_sources.values())
    for source in sources:
        if namespace is None or source.namespace == namespace:
            source.clear_cache()
