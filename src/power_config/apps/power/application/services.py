"""Application services for power configuration."""
import logging
from typing import Optional

from power_config.apps.power.domain.interfaces import PropertySourceInterface
from power_config.apps.power.domain.messages import NAMESPACE
from power_config.apps.power.domain.models import PowerConfiguration
from power_config.apps.power.domain.exceptions import InvalidPowerConfiguration

logger = logging.getLogger(__name__)


class PowerConfigurationService:
    """Application service for loading and validating the power configuration."""

    def __init__(self, property_source: PropertySourceInterface):
        """
        Initialize the power configuration service.

        Args:
            property_source: Feature source scoped to the powerconfiguration namespace
        """
        self.property_source = property_source

    def default_configuration(self) -> PowerConfiguration:
        """
        Build the configuration described by the feature source.

        Returns:
            The validated default configuration

        Raises:
            InvalidPowerConfiguration: If the configured features are invalid
        """
        config = PowerConfiguration.from_properties(self.property_source)
        logger.debug(f"Loaded default power configuration {config!r}")
        return config

    def coalesce(self, config: Optional[PowerConfiguration] = None) -> PowerConfiguration:
        """Return ``config`` if given, otherwise the default configuration."""
        if config is not None:
            return config
        return self.default_configuration()

    def validate(self) -> PowerConfiguration:
        """
        Build the default configuration and realize all of its units.

        Every component of every unit has its metadata built, so label
        messages are resolved now rather than on first use.

        Returns:
            The validated default configuration

        Raises:
            InvalidPowerConfiguration: If the configured features are invalid
        """
        try:
            config = self.default_configuration()
            for unit in config.units:
                for component in unit:
                    component.meta
        except InvalidPowerConfiguration as e:
            logger.error(f"Invalid power configuration (key={e.key}): {e.message}")
            raise

        logger.info(
            f"Validated power configuration: {config.units_required} units, "
            f"components {sorted(config.components)}"
        )
        return config


# Singleton instance
_power_configuration_service = None


def get_power_configuration_service() -> PowerConfigurationService:
    """
    Get or create the power configuration service singleton.

    Returns:
        PowerConfigurationService instance
    """
    global _power_configuration_service
    if _power_configuration_service is None:
        from power_config.apps.power.infrastructure.property_sources import get_property_source

        _power_configuration_service = PowerConfigurationService(
            property_source=get_property_source(NAMESPACE)
        )
    return _power_configuration_service
