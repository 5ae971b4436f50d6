"""Message resolver backed by Django's translation machinery."""
import logging

from django.utils.translation import gettext

logger = logging.getLogger(__name__)


class DjangoMessageResolver:
    """Resolve message ids through ``gettext``, falling back to the default text."""

    def resolve(self, message_id: str, default: str, *params: str) -> str:
        translated = gettext(message_id)
        if translated == message_id:
            return default

        try:
            return translated.format(*params)
        except (IndexError, KeyError, ValueError) as e:
            logger.warning(f"Translation for '{message_id}' does not match its parameters: {e}")
            return default
