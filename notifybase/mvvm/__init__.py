"""
MVVM Package - Registered Properties with Change Notification.

Provides:
- NotifyPropertyChangedBase: Base view-model holding a property registry.
- NotifyingProperty: Descriptor declaring registered properties on a class.
- PropertyRegistry: The validated name -> typed slot store.
- TypeDescriptor: Declared type normalization and compatibility checks.

The PySide6 adapter lives in notifybase.mvvm.qt_bridge and is imported on demand.
"""
from notifybase.mvvm.types import TypeDescriptor, is_value_type, values_equal
from notifybase.mvvm.registry import PropertyRegistry, RegisteredProperty
from notifybase.mvvm.properties import NotifyingProperty
from notifybase.mvvm.notify_base import NotifyPropertyChangedBase, PropertyChangedEventArgs

__all__ = [
    # View-models
    "NotifyPropertyChangedBase",
    "NotifyingProperty",
    "PropertyChangedEventArgs",

    # Registry
    "PropertyRegistry",
    "RegisteredProperty",

    # Types
    "TypeDescriptor",
    "is_value_type",
    "values_equal",
]
