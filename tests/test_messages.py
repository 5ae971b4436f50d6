# tests/test_messages.py
from unittest.mock import patch

import pytest

from power_config.apps.power.domain import messages
from power_config.apps.power.domain.exceptions import InvalidPowerConfiguration
from power_config.apps.power.domain.messages import (
    DefaultMessageResolver,
    configure_message_resolver,
    get_message_resolver,
)
from power_config.apps.power.domain.models import PowerConfiguration
from power_config.apps.power.infrastructure.messages import DjangoMessageResolver

GETTEXT = 'power_config.apps.power.infrastructure.messages.gettext'


def test_default_texts():
    """Test the English default of every message."""
    configure_message_resolver(None)

    assert isinstance(get_message_resolver(), DefaultMessageResolver)
    assert messages.units_required() == "unitsRequired must be >= 0 && <= 18"
    assert messages.components_unspecified() == "unitComponents not specified but required"
    assert messages.invalid_component("x") == "Specified unitComponent x is invalid"
    assert messages.invalid_unique("y") == "Specified uniqueComponent y is invalid"
    assert messages.component_label("PORT", "B") == "PORT B"
    assert messages.missing_data("PORT_B", "PORT B") == "Did not find value for PORT_B, required for PORT B"
    assert messages.validation_missing_required("PORT", "PORT_B") == "Missing power component"
    assert messages.validation_non_unique("PORT", "01") == "Duplicate value found"


def test_message_ids_are_namespaced(recording_resolver):
    """Test that message ids carry the powerconfiguration prefix and parameters."""
    messages.invalid_component("engine")
    messages.units_required()

    assert recording_resolver.calls == [
        ("powerconfiguration.unitComponents.invalid", "Specified unitComponent engine is invalid", ("engine",)),
        ("powerconfiguration.unitsRequired.range", "unitsRequired must be >= 0 && <= 18", ()),
    ]


def test_app_installs_django_resolver():
    """Test that the app configures translation-backed messages on startup."""
    assert isinstance(get_message_resolver(), DjangoMessageResolver)


def test_django_resolver_without_translation():
    """Test that untranslated ids fall back to the default text."""
    resolver = DjangoMessageResolver()

    assert resolver.resolve("powerconfiguration.missingData", "fallback", "a") == "fallback"


def test_django_resolver_formats_translation():
    """Test that translations are formatted with positional parameters."""
    resolver = DjangoMessageResolver()

    with patch(GETTEXT, return_value="Composant {0} invalide") as mock_gettext:
        result = resolver.resolve("powerconfiguration.unitComponents.invalid", "fallback", "moteur")

    assert result == "Composant moteur invalide"
    mock_gettext.assert_called_once_with("powerconfiguration.unitComponents.invalid")


def test_django_resolver_mismatched_translation():
    """Test that a translation expecting more parameters falls back to the default."""
    resolver = DjangoMessageResolver()

    with patch(GETTEXT, return_value="{0} et {1}"):
        assert resolver.resolve("powerconfiguration.unit.port.label", "PORT A", "A") == "PORT A"


def test_translated_error_message():
    """Test that configuration errors use the installed translation."""
    configure_message_resolver(DjangoMessageResolver())

    with patch(GETTEXT, return_value="Composant {0} invalide"):
        with pytest.raises(InvalidPowerConfiguration) as exc_info:
            PowerConfiguration(1, True, {" moteur"}, set())

    assert exc_info.value.message == "Composant  moteur invalide"


def test_django_resolver_malformed_translation():
    """Test that a translation with unbalanced braces falls back to the default."""
    resolver = DjangoMessageResolver()

    with patch(GETTEXT, return_value="Composant { invalide"):
        assert resolver.resolve("powerconfiguration.unitComponents.invalid", "fallback", "moteur") == "fallback"


def test_malformed_translation_still_reports_configuration_error():
    """Test that a broken translation does not mask the configuration error."""
    configure_message_resolver(DjangoMessageResolver())

    with patch(GETTEXT, return_value="Composant { invalide"):
        with pytest.raises(InvalidPowerConfiguration) as exc_info:
            PowerConfiguration(1, True, {" moteur"}, set())

    assert exc_info.value.message == "Specified unitComponent  moteur is invalid"
