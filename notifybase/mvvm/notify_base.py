"""
NotifyPropertyChangedBase - View-Model Base with Registered Properties.

Replaces the backing field + change notification boilerplate of every
property with a registry:

    class CounterViewModel(NotifyPropertyChangedBase):
        def __init__(self):
            super().__init__()
            self.register_property("Count", int, 0)

    vm = CounterViewModel()
    vm.property_changed.connect(lambda sender, e: print(e.property_name))
    vm.set_value(5, "Count")        # prints "Count"
    vm.set_value(5, "Count")        # equal value, silent
    vm.force_set_value(5, "Count")  # prints "Count" again

Two channels report a change, each behind its own toggle:
- the callback (injected `property_changed_callback` or the overridable
  `on_property_changed` method),
- the `property_changed` event, emitted with (sender, PropertyChangedEventArgs).
Both fire after the new value is stored.
"""
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Callable, Iterator, Optional, Tuple

from loguru import logger

from notifybase.core.config import NotificationSettings
from notifybase.core.events import Signal
from notifybase.mvvm.properties import collect_notifying_properties
from notifybase.mvvm.registry import PropertyRegistry, validate_property_name
from notifybase.mvvm.types import TypeDescriptor


@dataclass(frozen=True)
class PropertyChangedEventArgs:
    """Payload of the property_changed event."""
    property_name: str


class NotifyPropertyChangedBase:
    """
    Base class for objects exposing dynamically registered, typed properties.

    Args:
        property_changed_callback: Called with the property name on each
            notified change. When omitted, on_property_changed is called.
        settings: Initial toggle values; both toggles default to enabled.

    Not thread-safe; guard an instance with an external lock when sharing it.
    """

    def __init__(
        self,
        property_changed_callback: Optional[Callable[[str], None]] = None,
        settings: Optional[NotificationSettings] = None,
    ):
        settings = settings or NotificationSettings()
        self._registry = PropertyRegistry()
        self._property_changed_callback = property_changed_callback
        self._callback_invoking_enabled = bool(settings.callback_invoking_enabled)
        self._event_invoking_enabled = bool(settings.event_invoking_enabled)
        self.property_changed = Signal(f"{type(self).__name__}.property_changed")

        for descriptor in collect_notifying_properties(type(self)).values():
            self.register_property(descriptor.name, descriptor.declared_type, descriptor.make_default())

    # --- Notification toggles ---

    @property
    def is_property_changed_callback_invoking_enabled(self) -> bool:
        return self._callback_invoking_enabled

    @is_property_changed_callback_invoking_enabled.setter
    def is_property_changed_callback_invoking_enabled(self, value: bool):
        self._callback_invoking_enabled = bool(value)

    @property
    def is_property_changed_event_invoking_enabled(self) -> bool:
        return self._event_invoking_enabled

    @is_property_changed_event_invoking_enabled.setter
    def is_property_changed_event_invoking_enabled(self, value: bool):
        self._event_invoking_enabled = bool(value)

    @contextmanager
    def notifications_suppressed(self) -> Iterator["NotifyPropertyChangedBase"]:
        """
        Disable both notification channels inside the block.

        The previous toggle values are restored on exit, including on error.
        """
        saved = (self._callback_invoking_enabled, self._event_invoking_enabled)
        self._callback_invoking_enabled = False
        self._event_invoking_enabled = False
        try:
            yield self
        finally:
            self._callback_invoking_enabled, self._event_invoking_enabled = saved

    # --- Registry operations ---

    def register_property(self, name: str, declared_type: Any, default_value: Any) -> None:
        """
        Register a property. Registration is not a change; nothing is notified.

        Raises:
            InvalidArgumentError: invalid/duplicate name, unsupported type or
                incompatible default value.
            ArgumentNoneError: declared_type is None.
        """
        self._registry.register(name, declared_type, default_value)

    def get_value(self, name: str) -> Any:
        """Return the current value of a registered property."""
        return self._registry.get(name)

    def set_value(self, value: Any, name: str) -> None:
        """
        Store `value` and notify, unless it equals the current value.
        """
        if self._registry.assign(name, value):
            self._notify(name)

    def force_set_value(self, value: Any, name: str) -> None:
        """
        Store `value` and notify even when it equals the current value.
        """
        self._registry.assign(name, value, force=True)
        self._notify(name)

    def is_property_registered(self, name: str) -> bool:
        validate_property_name(name)
        return name in self._registry

    def get_property_type(self, name: str) -> TypeDescriptor:
        return self._registry.lookup(name).declared_type

    @property
    def registered_property_names(self) -> Tuple[str, ...]:
        return self._registry.names

    # --- Notification ---

    def on_property_changed(self, property_name: str) -> None:
        """
        Called after a property changed when no callback was injected.

        Override in subclasses to react to changes.
        """

    def _notify(self, name: str) -> None:
        logger.trace(f"{type(self).__name__}.{name} changed")

        if self._callback_invoking_enabled:
            if self._property_changed_callback is not None:
                self._property_changed_callback(name)
            else:
                self.on_property_changed(name)

        if self._event_invoking_enabled:
            self.property_changed.emit(self, PropertyChangedEventArgs(name))
