"""Domain interfaces for power configuration."""
from typing import FrozenSet, Protocol


class PropertySourceInterface(Protocol):
    """Interface for a keyed feature source scoped to one namespace."""

    def is_set(self, key: str) -> bool:
        """
        Check whether a feature has a value.

        Args:
            key: The feature key, without namespace

        Returns:
            True if the feature is configured, False otherwise
        """
        ...

    def get_int(self, key: str, default: int) -> int:
        """
        Get a feature as an integer.

        Args:
            key: The feature key, without namespace
            default: Value returned when the feature is unset or not numeric

        Returns:
            The integer value
        """
        ...

    def get_bool(self, key: str, default: bool) -> bool:
        """
        Get a feature as a boolean.

        Args:
            key: The feature key, without namespace
            default: Value returned when the feature is unset

        Returns:
            The boolean value
        """
        ...

    def get_set(self, key: str) -> FrozenSet[str]:
        """
        Get a feature as a set of strings.

        Args:
            key: The feature key, without namespace

        Returns:
            The configured strings, empty when the feature is unset
        """
        ...


class MessageResolverInterface(Protocol):
    """Interface for resolving localized messages."""

    def resolve(self, message_id: str, default: str, *params: str) -> str:
        """
        Resolve a message to display text.

        Args:
            message_id: Fully qualified message id
            default: English text used when no translation exists
            params: Positional parameters for the translated template

        Returns:
            The resolved text
        """
        ...
