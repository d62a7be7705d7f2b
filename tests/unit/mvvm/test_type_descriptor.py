"""
Unit Tests for declared type normalization and compatibility.
"""
import abc
from decimal import Decimal
from enum import Enum, IntEnum
from typing import Any, List, Optional, Protocol, Union, runtime_checkable

import numpy as np
import pytest

from notifybase.core.errors import ArgumentErrorReason, ArgumentNoneError, InvalidArgumentError
from notifybase.mvvm.types import TypeDescriptor, is_value_type, values_equal


class IShape(abc.ABC):
    @abc.abstractmethod
    def area(self) -> float: ...


class ShapeBase(IShape):
    def area(self) -> float:
        return 0.0


class Square(ShapeBase):
    pass


class Circle(ShapeBase):
    pass


@runtime_checkable
class SupportsClose(Protocol):
    def close(self) -> None: ...


class PlainProtocol(Protocol):
    def close(self) -> None: ...


class Closer:
    def close(self) -> None:
        pass


class Color(Enum):
    RED = 1


class Level(IntEnum):
    LOW = 1


def describe(declared):
    return TypeDescriptor.from_declared(declared)


class TestValueTypes:
    @pytest.mark.parametrize("cls", [bool, int, float, complex, str, bytes, Decimal, Color, Level, np.int32, np.float64])
    def test_value_types(self, cls):
        assert is_value_type(cls)
        assert describe(cls).nullable is False

    @pytest.mark.parametrize("cls", [object, list, dict, IShape, ShapeBase, Square, SupportsClose])
    def test_reference_types(self, cls):
        assert not is_value_type(cls)
        assert describe(cls).nullable is True


class TestInt32Slot:
    """An int slot only accepts exact ints."""

    @pytest.mark.parametrize("value", [0, 5, -1, 2**70])
    def test_accepts_int(self, value):
        assert describe(int).accepts(value)

    @pytest.mark.parametrize(
        "value",
        [None, True, "x", "", b"", 0.0, Decimal(0), 0j, np.int32(0), np.uint32(0), np.int64(0), np.float32(0), Level.LOW, Square()],
    )
    def test_rejects_everything_else(self, value):
        assert not describe(int).accepts(value)


class TestNumpyWidths:
    """No widening between numpy scalar widths."""

    def test_exact_width_accepted(self):
        assert describe(np.int32).accepts(np.int32(7))

    @pytest.mark.parametrize(
        "value",
        [None, 0, 0.0, True, np.uint32(0), np.int64(0), np.int16(0), np.uint8(0), np.int8(0), np.float32(0), np.float64(0)],
    )
    def test_other_widths_rejected(self, value):
        assert not describe(np.int32).accepts(value)


class TestNullable:
    @pytest.mark.parametrize("declared", [Optional[int], Union[int, None], int | None])
    def test_optional_int(self, declared):
        descriptor = describe(declared)
        assert descriptor.nullable
        assert descriptor.accepts(None)
        assert descriptor.accepts(3)
        assert not descriptor.accepts(True)
        assert not descriptor.accepts(np.int32(3))
        assert not descriptor.accepts("3")

    def test_union_of_value_types(self):
        descriptor = describe(Union[int, str])
        assert not descriptor.nullable
        assert descriptor.accepts(1)
        assert descriptor.accepts("a")
        assert not descriptor.accepts(1.0)
        assert not descriptor.accepts(None)

    def test_union_with_class_is_nullable(self):
        descriptor = describe(Union[int, ShapeBase])
        assert descriptor.accepts(None)
        assert descriptor.accepts(Square())
        assert not descriptor.accepts(True)

    def test_none_type_slot(self):
        descriptor = describe(type(None))
        assert descriptor.accepts(None)
        assert not descriptor.accepts(0)


class TestPolymorphism:
    @pytest.mark.parametrize("declared", [IShape, ShapeBase, Square])
    def test_instances_and_none_accepted(self, declared):
        descriptor = describe(declared)
        assert descriptor.accepts(None)
        assert descriptor.accepts(Square())

    @pytest.mark.parametrize("value", [True, "x", "", 0, 0.0, Decimal(0), np.int32(0), object()])
    def test_unrelated_values_rejected(self, value):
        for declared in (IShape, ShapeBase, Square):
            assert not describe(declared).accepts(value)

    def test_sibling_class_rejected(self):
        assert not describe(Square).accepts(Circle())
        assert describe(ShapeBase).accepts(Circle())

    def test_runtime_checkable_protocol(self):
        descriptor = describe(SupportsClose)
        assert descriptor.accepts(Closer())
        assert descriptor.accepts(None)
        assert not descriptor.accepts(3)

    @pytest.mark.parametrize("declared", [object, Any])
    def test_object_and_any_accept_everything(self, declared):
        descriptor = describe(declared)
        for value in (None, 1, "x", Square(), np.float32(1)):
            assert descriptor.accepts(value)


class TestUnsupported:
    def test_none_is_missing_type(self):
        with pytest.raises(ArgumentNoneError) as exc_info:
            describe(None)
        assert exc_info.value.reason is ArgumentErrorReason.MISSING_TYPE
        assert exc_info.value.argument == "declared_type"

    @pytest.mark.parametrize("declared", [list[int], List[int], Optional[list[int]], "int", 5, PlainProtocol])
    def test_rejected(self, declared):
        with pytest.raises(InvalidArgumentError) as exc_info:
            describe(declared)
        assert exc_info.value.reason is ArgumentErrorReason.UNSUPPORTED_TYPE

    def test_descriptor_passthrough(self):
        descriptor = describe(int)
        assert TypeDescriptor.from_declared(descriptor) is descriptor


class TestValuesEqual:
    def test_equal_values(self):
        assert values_equal(5, 5)
        assert values_equal("a", "a")
        assert values_equal(None, None)
        assert values_equal(np.int32(3), np.int32(3))

    def test_different_types_never_equal(self):
        assert not values_equal(0, False)
        assert not values_equal(1, 1.0)
        assert not values_equal(np.int32(1), 1)
        assert not values_equal(None, 0)
        assert not values_equal(0, None)

    def test_identity_for_plain_objects(self):
        shape = Square()
        assert values_equal(shape, shape)
        assert not values_equal(Square(), Square())

    def test_ambiguous_comparison_counts_as_unequal(self):
        assert not values_equal(np.array([1, 2]), np.array([1, 2]))

    def test_nan_is_not_equal_to_new_nan(self):
        assert not values_equal(float("nan"), float("nan"))
