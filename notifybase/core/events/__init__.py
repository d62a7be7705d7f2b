"""
Event System - Synchronous Observer Notifications.

Provides:
- Signal: ordered subscriber list invoked synchronously on emit.

Usage:
    from notifybase.core.events import Signal

    changed = Signal("changed")
    changed.connect(on_changed)
    changed.emit(sender, args)
"""
from .observer import Signal


__all__ = ["Signal"]
