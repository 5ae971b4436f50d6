"""
Power configuration application.

This package provides the validated power unit configuration and the services
that load it from Django settings.
"""

from power_config.apps.power.application.services import (
    PowerConfigurationService,
    get_power_configuration_service
)
from power_config.apps.power.domain.exceptions import InvalidPowerConfiguration, InvalidPowerValue
from power_config.apps.power.domain.models import PowerConfiguration

__all__ = [
    'InvalidPowerConfiguration',
    'InvalidPowerValue',
    'PowerConfiguration',
    'PowerConfigurationService',
    'get_power_configuration_service',
]
