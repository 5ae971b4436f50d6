from django.core.management.base import BaseCommand, CommandError
import logging

from ...application.services import get_power_configuration_service
from ...domain.exceptions import InvalidPowerConfiguration

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = 'Validate the power configuration and list its units'

    def add_arguments(self, parser):
        parser.add_argument(
            '--verbose-units',
            action='store_true',
            help='List the component keys and labels of every unit',
        )

    def handle(self, *args, **options):
        try:
            config = get_power_configuration_service().validate()
        except InvalidPowerConfiguration as e:
            raise CommandError(f"Invalid power configuration: {e.message}") from e

        self.stdout.write(self.style.SUCCESS(
            f"Power configuration is valid: {config.units_required} units, "
            f"components {', '.join(sorted(config.components)) or '(none)'}, "
            f"unique {', '.join(sorted(config.unique_components)) or '(none)'}"
        ))

        if options['verbose_units']:
            for unit in config.units:
                for component in unit:
                    unique = ' (unique)' if component.is_unique else ''
                    self.stdout.write(f"  {component.key}: {component.label}{unique}")
