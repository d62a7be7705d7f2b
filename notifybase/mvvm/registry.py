"""
Property Registry - Name-Keyed Store of Typed Slots.

Holds one RegisteredProperty per name. Every operation validates its
arguments before touching state, so a rejected call leaves the registry
exactly as it was. The registry does not notify anyone; it reports whether
a write replaced the value and leaves notification to its owner.
"""
from dataclasses import dataclass
from typing import Any, Dict, Tuple

from loguru import logger

from notifybase.core.errors import ArgumentErrorReason, ArgumentNoneError, InvalidArgumentError
from notifybase.mvvm.types import TypeDescriptor, values_equal


@dataclass
class RegisteredProperty:
    """One named slot: fixed name and type, mutable value."""
    name: str
    declared_type: TypeDescriptor
    value: Any


def validate_property_name(name: Any) -> str:
    """
    Ensure `name` is a non-empty, non-whitespace string.

    Raises:
        InvalidArgumentError: name is None, not a string, empty or blank.
    """
    if name is None:
        raise ArgumentNoneError("name", ArgumentErrorReason.INVALID_NAME)
    if not isinstance(name, str) or not name.strip():
        raise InvalidArgumentError(
            f"Property name must be a non-empty, non-whitespace string, got {name!r}.",
            ArgumentErrorReason.INVALID_NAME,
            "name",
        )
    return name


class PropertyRegistry:
    """
    Validated dictionary of RegisteredProperty slots.

    Example:
        registry = PropertyRegistry()
        registry.register("Count", int, 0)
        registry.assign("Count", 5)          # True, value replaced
        registry.assign("Count", 5)          # False, equal value
        registry.assign("Count", 5, force=True)  # True
    """

    def __init__(self):
        self._properties: Dict[str, RegisteredProperty] = {}

    def __contains__(self, name: object) -> bool:
        return name in self._properties

    def __len__(self) -> int:
        return len(self._properties)

    @property
    def names(self) -> Tuple[str, ...]:
        """Registered names in registration order."""
        return tuple(self._properties)

    def register(self, name: Any, declared_type: Any, default_value: Any) -> RegisteredProperty:
        """
        Create a slot named `name` holding `default_value`.

        Raises:
            InvalidArgumentError: invalid or duplicate name, unsupported type,
                or a default the type does not accept.
            ArgumentNoneError: declared_type is None.
        """
        validate_property_name(name)
        descriptor = TypeDescriptor.from_declared(declared_type)

        if name in self._properties:
            raise InvalidArgumentError(
                f"Property '{name}' is already registered.",
                ArgumentErrorReason.DUPLICATE_NAME,
                "name",
            )
        self._check_value(name, descriptor, default_value, "default_value")

        prop = RegisteredProperty(name, descriptor, default_value)
        self._properties[name] = prop
        logger.debug(f"Registered property '{name}' of type {descriptor.name}")
        return prop

    def lookup(self, name: Any) -> RegisteredProperty:
        """Return the slot for `name` or raise InvalidArgumentError."""
        validate_property_name(name)
        prop = self._properties.get(name)
        if prop is None:
            raise InvalidArgumentError(
                f"Property '{name}' is not registered.",
                ArgumentErrorReason.NOT_REGISTERED,
                "name",
            )
        return prop

    def get(self, name: Any) -> Any:
        return self.lookup(name).value

    def assign(self, name: Any, value: Any, force: bool = False) -> bool:
        """
        Store `value` in the slot `name`.

        Args:
            name: Registered property name.
            value: New value; must be accepted by the slot's declared type.
            force: Store even when equal to the current value.

        Returns:
            True when the value was stored, False for an equal, unforced write.
        """
        prop = self.lookup(name)
        self._check_value(name, prop.declared_type, value, "value")

        if not force and values_equal(prop.value, value):
            return False

        prop.value = value
        return True

    @staticmethod
    def _check_value(name: str, descriptor: TypeDescriptor, value: Any, argument: str) -> None:
        if not descriptor.accepts(value):
            raise InvalidArgumentError(
                f"Value {value!r} of type {type(value).__qualname__} is not assignable "
                f"to property '{name}' of type {descriptor.name}.",
                ArgumentErrorReason.INCOMPATIBLE_VALUE,
                argument,
            )
