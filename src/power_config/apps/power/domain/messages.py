"""Message catalogue for power configuration errors and labels."""
import logging
from typing import Optional

from power_config.apps.power.domain.interfaces import MessageResolverInterface

logger = logging.getLogger(__name__)

NAMESPACE = "powerconfiguration"


class DefaultMessageResolver:
    """Resolver that always answers with the English default text."""

    def resolve(self, message_id: str, default: str, *params: str) -> str:
        return default


_message_resolver: MessageResolverInterface = DefaultMessageResolver()


def configure_message_resolver(resolver: Optional[MessageResolverInterface]) -> None:
    """
    Install the process-wide message resolver.

    Args:
        resolver: Resolver to use, or None to restore the English defaults
    """
    global _message_resolver
    _message_resolver = resolver if resolver is not None else DefaultMessageResolver()
    logger.debug(f"Configured message resolver {type(_message_resolver).__name__}")


def get_message_resolver() -> MessageResolverInterface:
    """Get the process-wide message resolver."""
    return _message_resolver


def message_with_default(key: str, default: str, *params: str) -> str:
    """Resolve ``key`` within the power configuration namespace."""
    return _message_resolver.resolve(f"{NAMESPACE}.{key}", default, *params)


def units_required() -> str:
    return message_with_default("unitsRequired.range", "unitsRequired must be >= 0 && <= 18")


def components_unspecified() -> str:
    return message_with_default(
        "unitComponents.unspecified", "unitComponents not specified but required"
    )


def invalid_component(component: str) -> str:
    return message_with_default(
        "unitComponents.invalid", f"Specified unitComponent {component} is invalid", component
    )


def invalid_unique(unique: str) -> str:
    return message_with_default(
        "uniqueComponents.invalid", f"Specified uniqueComponent {unique} is invalid", unique
    )


def component_label(component: str, identifier: str) -> str:
    return message_with_default(
        f"unit.{component.lower()}.label", f"{component} {identifier}", identifier
    )


def missing_data(key: str, label: str) -> str:
    return message_with_default(
        "missingData", f"Did not find value for {key}, required for {label}", key, label
    )


# Templates for consumers validating asset values against a configuration
def validation_missing_required(component: str, key: str) -> str:
    return message_with_default(
        "validation.missingRequired", "Missing power component", component, key
    )


def validation_non_unique(component: str, seen_value: str) -> str:
    return message_with_default(
        "validation.nonUnique", "Duplicate value found", component, seen_value
    )
