"""
Qt Bridge - Relay property_changed to a PySide6 Signal.

Lets Qt widgets bind to a NotifyPropertyChangedBase through the usual
`propertyChanged` (name, value) signal:

    bridge = QtPropertyChangedBridge(vm)
    bridge.propertyChanged.connect(label_updater)

Requires the `qt` extra (PySide6).
"""
from typing import Optional

from PySide6.QtCore import QObject, Signal

from notifybase.mvvm.notify_base import NotifyPropertyChangedBase, PropertyChangedEventArgs


class QtPropertyChangedBridge(QObject):
    """
    QObject that re-emits every property_changed event of `source`.

    The emitted value is read after the write, so slots see the stored value.
    """

    # Generic signal emitted for any property change: (property_name, new_value)
    propertyChanged = Signal(str, object)

    def __init__(self, source: NotifyPropertyChangedBase, parent: Optional[QObject] = None):
        super().__init__(parent)
        self._source = source
        source.property_changed.connect(self._relay)

    @property
    def source(self) -> NotifyPropertyChangedBase:
        return self._source

    def detach(self) -> None:
        """Stop relaying events from the source."""
        self._source.property_changed.disconnect(self._relay)

    def _relay(self, sender: NotifyPropertyChangedBase, args: PropertyChangedEventArgs) -> None:
        self.propertyChanged.emit(args.property_name, sender.get_value(args.property_name))
