"""Power units and components derived from a power configuration."""
from dataclasses import dataclass
from functools import cached_property
from typing import TYPE_CHECKING, Dict, Iterator, Mapping, Sequence, Set, Tuple

from power_config.apps.power.domain import messages
from power_config.apps.power.domain.exceptions import InvalidPowerValue

if TYPE_CHECKING:
    from power_config.apps.power.domain.models import PowerConfiguration


@dataclass(frozen=True)
class ComponentMeta:
    """Metadata describing the asset attribute that stores a component value."""
    name: str
    label: str
    is_unique: bool = False


class PowerComponent:
    """One component slot of a power unit."""

    def __init__(self, component_type: str, unit: 'PowerUnit', position: int):
        self.component_type = component_type
        self.unit = unit
        self.position = position

    @property
    def key(self) -> str:
        """Attribute name holding this component's value, e.g. ``ENGINE_A``."""
        return f"{self.component_type}_{self.unit.identifier}"

    @property
    def label(self) -> str:
        return messages.component_label(self.component_type, self.unit.identifier)

    @property
    def is_required(self) -> bool:
        return True

    @property
    def is_unique(self) -> bool:
        return self.component_type in self.unit.config.unique_components

    @cached_property
    def meta(self) -> ComponentMeta:
        return ComponentMeta(name=self.key, label=self.label, is_unique=self.is_unique)

    def value_from(self, values: Mapping[str, str]) -> str:
        """
        Look up this component's value.

        Args:
            values: Asset values keyed by component key

        Returns:
            The value stored for this component

        Raises:
            InvalidPowerValue: If no value is stored for this component
        """
        if self.key not in values:
            raise InvalidPowerValue(messages.missing_data(self.key, self.label), self.key)
        return values[self.key]

    def __repr__(self) -> str:
        return f"PowerComponent(key={self.key!r}, position={self.position})"


class PowerUnit:
    """A single power unit; holds a reference to, not ownership of, its configuration."""

    def __init__(self, config: 'PowerConfiguration', id: int):
        self.config = config
        self.id = id

    @property
    def identifier(self) -> str:
        """Display name of the unit: ``A``, ``B``, ... or ``0``, ``1``, ..."""
        if self.config.use_alphabetic_names:
            return chr(ord('A') + self.id)
        return str(self.id)

    @cached_property
    def components(self) -> Tuple[PowerComponent, ...]:
        return tuple(
            PowerComponent(component_type, self, position)
            for position, component_type in enumerate(sorted(self.config.components))
        )

    def __iter__(self) -> Iterator[PowerComponent]:
        return iter(self.components)

    def __len__(self) -> int:
        return len(self.components)

    def __repr__(self) -> str:
        return f"PowerUnit(id={self.id}, identifier={self.identifier!r})"


class PowerUnits(Sequence[PowerUnit]):
    """Ordered, immutable collection of the units of a configuration."""

    def __init__(self, units: Sequence[PowerUnit] = ()):
        self._units = tuple(units)

    @classmethod
    def from_configuration(cls, config: 'PowerConfiguration') -> 'PowerUnits':
        return cls(PowerUnit(config, unit_id) for unit_id in range(config.units_required))

    def __getitem__(self, index):
        return self._units[index]

    def __len__(self) -> int:
        return len(self._units)

    def __repr__(self) -> str:
        return f"PowerUnits({list(self._units)!r})"

    def validate_values(self, values: Mapping[str, str]) -> None:
        """
        Check asset values against every component of every unit.

        Args:
            values: Asset values keyed by component key

        Raises:
            InvalidPowerValue: If a component value is missing or blank, or if a
                unique component repeats a value across units
        """
        seen: Dict[str, Set[str]] = {}
        for unit in self._units:
            for component in unit:
                value = values.get(component.key)
                if value is None or not str(value).strip():
                    raise InvalidPowerValue(
                        messages.validation_missing_required(component.component_type, component.key),
                        component.key
                    )
                if not component.is_unique:
                    continue
                seen_values = seen.setdefault(component.component_type, set())
                if value in seen_values:
                    raise InvalidPowerValue(
                        messages.validation_non_unique(component.component_type, value),
                        component.key
                    )
                seen_values.add(value)
