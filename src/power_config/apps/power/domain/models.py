"""Domain models for power configuration."""
from functools import cached_property
from typing import AbstractSet, FrozenSet, Iterable

from power_config.apps.power.domain import messages
from power_config.apps.power.domain.exceptions import InvalidPowerConfiguration
from power_config.apps.power.domain.interfaces import PropertySourceInterface
from power_config.apps.power.domain.units import PowerUnits

MIN_UNITS_REQUIRED = 0
MAX_UNITS_REQUIRED = 18

DEFAULT_UNITS_REQUIRED = 1
DEFAULT_USE_ALPHABETIC_NAMES = True

# Feature keys within the powerconfiguration namespace
KEY_UNITS_REQUIRED = 'unitsRequired'
KEY_USE_ALPHABETIC_NAMES = 'useAlphabeticNames'
KEY_UNIT_COMPONENTS = 'unitComponents'
KEY_UNIQUE_COMPONENTS = 'uniqueComponents'


class PowerConfiguration:
    """
    Value object describing the power units an asset requires.

    Construction validates the raw parameters and raises
    ``InvalidPowerConfiguration`` on the first violation, so an instance is
    always valid. Component names are stored upper-cased.

    Where several entries violate a rule, the one reported is the first in
    sorted order.
    """

    def __init__(
            self,
            units_required: int,
            use_alphabetic_names: bool,
            components: Iterable[str],
            uniques: Iterable[str]
    ):
        raw_components = frozenset(components)
        raw_uniques = frozenset(uniques)

        if units_required < MIN_UNITS_REQUIRED or units_required > MAX_UNITS_REQUIRED:
            raise InvalidPowerConfiguration(messages.units_required(), KEY_UNITS_REQUIRED)

        if units_required > 0:
            self._validate_components(raw_components, KEY_UNIT_COMPONENTS)
            if raw_uniques:
                self._validate_components(raw_uniques, KEY_UNIQUE_COMPONENTS)
                missing = raw_uniques - raw_components
                if missing:
                    raise InvalidPowerConfiguration(
                        messages.invalid_unique(sorted(missing)[0]), KEY_UNIQUE_COMPONENTS
                    )

        self._units_required = units_required
        self._use_alphabetic_names = use_alphabetic_names
        self._components = frozenset(c.upper() for c in raw_components)
        self._unique_components = frozenset(u.upper() for u in raw_uniques)

    @staticmethod
    def _validate_components(values: AbstractSet[str], key: str) -> None:
        """Check that a component set is non-empty and holds no blank or padded names."""
        if any(not value.strip() for value in values) or not values:
            raise InvalidPowerConfiguration(messages.components_unspecified(), key)

        padded = sorted(value for value in values if value.strip() != value)
        if padded:
            raise InvalidPowerConfiguration(messages.invalid_component(padded[0]), key)

    @classmethod
    def from_properties(cls, source: PropertySourceInterface) -> 'PowerConfiguration':
        """
        Build a configuration from a feature source.

        An unset, non-numeric or out of range ``unitsRequired`` falls back to
        the default of one unit.

        Args:
            source: Feature source scoped to the powerconfiguration namespace

        Returns:
            A validated configuration
        """
        units_required = DEFAULT_UNITS_REQUIRED
        if source.is_set(KEY_UNITS_REQUIRED):
            configured = source.get_int(KEY_UNITS_REQUIRED, -1)
            if MIN_UNITS_REQUIRED <= configured <= MAX_UNITS_REQUIRED:
                units_required = configured

        return cls(
            units_required,
            source.get_bool(KEY_USE_ALPHABETIC_NAMES, DEFAULT_USE_ALPHABETIC_NAMES),
            source.get_set(KEY_UNIT_COMPONENTS),
            source.get_set(KEY_UNIQUE_COMPONENTS)
        )

    @property
    def units_required(self) -> int:
        return self._units_required

    @property
    def use_alphabetic_names(self) -> bool:
        return self._use_alphabetic_names

    @property
    def components(self) -> FrozenSet[str]:
        return self._components

    @property
    def unique_components(self) -> FrozenSet[str]:
        return self._unique_components

    @cached_property
    def units(self) -> PowerUnits:
        """Units derived from this configuration, built on first access."""
        return PowerUnits.from_configuration(self)

    def has_component(self, component: str) -> bool:
        """Case-insensitive check for a configured component."""
        return component.upper() in self._components

    def _identity(self):
        return (
            self._units_required,
            self._use_alphabetic_names,
            self._components,
            self._unique_components,
        )

    def __eq__(self, other) -> bool:
        if not isinstance(other, PowerConfiguration):
            return NotImplemented
        return self._identity() == other._identity()

    def __hash__(self) -> int:
        return hash(self._identity())

    def __repr__(self) -> str:
        return (
            f"PowerConfiguration(units_required={self._units_required}, "
            f"use_alphabetic_names={self._use_alphabetic_names}, "
            f"components={sorted(self._components)}, "
            f"unique_components={sorted(self._unique_components)})"
        )
