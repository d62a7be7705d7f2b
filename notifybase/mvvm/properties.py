"""
Declarative Notifying Properties.

Usage:
    class PersonViewModel(NotifyPropertyChangedBase):
        name = NotifyingProperty(str, "")
        age = NotifyingProperty(int, 0)
        owner = NotifyingProperty(Optional[Owner])

    vm = PersonViewModel()
    vm.age = 42        # same as vm.set_value(42, "age")
"""
from typing import Any, Callable, Dict, Optional


class NotifyingProperty:
    """
    Class attribute that registers a property on each instance and routes
    attribute access through get_value / set_value.

    Args:
        declared_type: Type the slot is constrained to.
        default: Default value stored at registration.
        default_factory: Called once per instance instead of sharing `default`.
        name: Registered name; defaults to the attribute name.
    """

    def __init__(
        self,
        declared_type: Any,
        default: Any = None,
        *,
        default_factory: Optional[Callable[[], Any]] = None,
        name: Optional[str] = None,
    ):
        if default is not None and default_factory is not None:
            raise ValueError("Pass either default or default_factory, not both.")
        self.declared_type = declared_type
        self.default = default
        self.default_factory = default_factory
        self.name = name
        self._attr_name = ""

    def __set_name__(self, owner: type, name: str) -> None:
        self._attr_name = name
        if self.name is None:
            self.name = name

    def make_default(self) -> Any:
        if self.default_factory is not None:
            return self.default_factory()
        return self.default

    def __get__(self, obj: Any, objtype: type = None) -> Any:
        if obj is None:
            return self
        return obj.get_value(self.name)

    def __set__(self, obj: Any, value: Any) -> None:
        obj.set_value(value, self.name)


def collect_notifying_properties(cls: type) -> Dict[str, NotifyingProperty]:
    """
    Find NotifyingProperty attributes on `cls`, base classes first.

    A subclass redefining an attribute replaces the base class descriptor.
    """
    found: Dict[str, NotifyingProperty] = {}
    for klass in reversed(cls.__mro__):
        for attr, value in vars(klass).items():
            if isinstance(value, NotifyingProperty):
                found[attr] = value
    return found
