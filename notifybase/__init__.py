"""
notifybase - Base type for objects with registered, change-notifying properties.
"""
from notifybase.core.errors import ArgumentErrorReason, ArgumentNoneError, InvalidArgumentError
from notifybase.core.config import NotificationSettings
from notifybase.mvvm import (
    NotifyingProperty,
    NotifyPropertyChangedBase,
    PropertyChangedEventArgs,
    TypeDescriptor,
)

__version__ = "1.0.0"

__all__ = [
    "ArgumentErrorReason",
    "ArgumentNoneError",
    "InvalidArgumentError",
    "NotificationSettings",
    "NotifyingProperty",
    "NotifyPropertyChangedBase",
    "PropertyChangedEventArgs",
    "TypeDescriptor",
]
