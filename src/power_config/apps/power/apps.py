import logging
import sys

from django.apps import AppConfig
from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

logger = logging.getLogger(__name__)


class PowerConfig(AppConfig):
    name = 'power_config.apps.power'
    label = 'power'
    verbose_name = 'Power configuration'

    def ready(self):
        """Install the translation resolver and validate the configuration on startup."""
        from . import receivers  # noqa
        from .application.services import get_power_configuration_service
        from .domain.exceptions import InvalidPowerConfiguration
        from .domain.messages import configure_message_resolver
        from .infrastructure.messages import DjangoMessageResolver

        configure_message_resolver(DjangoMessageResolver())

        # Skip validation during migrations or when collecting static files
        if any(cmd in sys.argv for cmd in ['makemigrations', 'migrate', 'collectstatic']):
            return

        if not getattr(settings, 'POWER_CONFIGURATION_VALIDATE_ON_STARTUP', True):
            logger.info("Startup validation of power configuration disabled")
            return

        try:
            get_power_configuration_service().validate()
        except InvalidPowerConfiguration as e:
            raise ImproperlyConfigured(f"Invalid power configuration: {e.message}") from e
