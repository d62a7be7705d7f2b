"""
Declared Types for Registered Properties.

Python has no value/reference type split, so a declared type is normalized
into a TypeDescriptor that records which classes a slot accepts and whether
it may hold None.

Value types (numbers, strings, enums, numpy scalars, ...) are exact-match
only and never nullable:

    TypeDescriptor.from_declared(int).accepts(True)         # False, bool is not int
    TypeDescriptor.from_declared(Optional[int]).accepts(None)  # True

Every other class acts as an interface or base class and accepts None as
well as any instance of itself or a subclass.
"""
import datetime
import types
import typing
import uuid
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from fractions import Fraction
from typing import Any, Tuple

import numpy

from notifybase.core.errors import ArgumentErrorReason, ArgumentNoneError, InvalidArgumentError

# Subclasses of these are value types as well (IntEnum members, numpy.int32, ...)
VALUE_TYPE_BASES: Tuple[type, ...] = (
    bool,
    int,
    float,
    complex,
    str,
    bytes,
    Decimal,
    Fraction,
    datetime.date,
    datetime.time,
    datetime.timedelta,
    uuid.UUID,
    Enum,
    numpy.generic,
)

_NONE_TYPE = type(None)
_UNION_ORIGINS = (typing.Union, types.UnionType)


def is_value_type(cls: type) -> bool:
    """True when slots of `cls` are non-nullable and exact-match only."""
    return issubclass(cls, VALUE_TYPE_BASES)


def _type_name(declared: Any) -> str:
    if isinstance(declared, type):
        return declared.__qualname__
    return repr(declared)


def _unsupported(declared: Any, detail: str) -> InvalidArgumentError:
    return InvalidArgumentError(
        f"Unsupported declared type {_type_name(declared)}: {detail}.",
        ArgumentErrorReason.UNSUPPORTED_TYPE,
        "declared_type",
    )


def _normalize_member(member: Any, declared: Any) -> type:
    if member is typing.Any:
        return object
    if typing.get_origin(member) is not None or not isinstance(member, type):
        raise _unsupported(declared, f"{_type_name(member)} is not a plain class")
    try:
        isinstance(None, member)
    except TypeError as e:
        # Protocols without @runtime_checkable refuse isinstance()
        raise _unsupported(declared, str(e)) from e
    return member


@dataclass(frozen=True)
class TypeDescriptor:
    """
    Normalized declared type of a property slot.

    Attributes:
        declared: The object the caller registered with (class, Optional[...], Union[...]).
        members: Non-None classes the slot accepts.
        nullable: Whether None is a valid value.
    """
    declared: Any
    members: Tuple[type, ...]
    nullable: bool

    @classmethod
    def from_declared(cls, declared: Any) -> "TypeDescriptor":
        """
        Build a descriptor from a class, Optional/Union form or typing.Any.

        Raises:
            ArgumentNoneError: declared is None.
            InvalidArgumentError: declared cannot be used as a slot type.
        """
        if declared is None:
            raise ArgumentNoneError("declared_type")
        if isinstance(declared, TypeDescriptor):
            return declared

        if typing.get_origin(declared) in _UNION_ORIGINS:
            args = typing.get_args(declared)
            members = tuple(_normalize_member(a, declared) for a in args if a is not _NONE_TYPE)
            nullable = _NONE_TYPE in args or any(not is_value_type(m) for m in members)
            return cls(declared, members, nullable)

        member = _normalize_member(declared, declared)
        if member is _NONE_TYPE:
            return cls(declared, (), True)
        return cls(declared, (member,), not is_value_type(member))

    @property
    def name(self) -> str:
        return _type_name(self.declared)

    def accepts(self, value: Any) -> bool:
        """Whether `value` may be stored in a slot of this type."""
        if value is None:
            return self.nullable

        value_type = type(value)
        if value_type in self.members:
            return True

        return any(
            not is_value_type(member) and isinstance(value, member)
            for member in self.members
        )

    def __str__(self) -> str:
        return self.name


def values_equal(old: Any, new: Any) -> bool:
    """
    Equality used to decide whether a write is a change.

    Values of different runtime types are never equal, so 0 and False or
    numpy.int32(1) and 1 count as distinct. A comparison that raises or has
    no single truth value counts as unequal.
    """
    if old is new:
        return True
    if old is None or new is None:
        return False
    if type(old) is not type(new):
        return False
    try:
        return bool(old == new)
    except (TypeError, ValueError):
        return False
