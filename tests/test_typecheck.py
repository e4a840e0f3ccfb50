"""Tests for exact-type and assignability checks."""

import re
from collections.abc import Sized
from typing import Protocol, runtime_checkable

import pytest
from hypothesis import given, strategies as st

from argguard import TypeViolation, ViolationKind, is_assignable_to_type, is_of_type
from argguard.typecheck import type_name


class Base:
    pass


class Derived(Base):
    pass


@runtime_checkable
class SupportsClose(Protocol):
    def close(self) -> None:
        ...


class Closer:
    def close(self) -> None:
        pass


class TestIsOfType:
    def test_exact_type_passes(self):
        """Test that the exact runtime type satisfies the check."""
        is_of_type(Derived(), Derived, "item")
        is_of_type(3, int, "count")

    def test_base_instance_fails_against_derived(self):
        """Test that a base instance does not match a derived type."""
        with pytest.raises(TypeViolation) as exc_info:
            is_of_type(Base(), Derived, "item")

        assert str(exc_info.value) == (
            f"Parameter item must be of type {__name__}.Derived, was {__name__}.Base"
        )
        assert exc_info.value.kind is ViolationKind.TYPE

    def test_subclass_instance_fails_against_base(self):
        """Test that exact matching rejects subclasses."""
        with pytest.raises(TypeViolation):
            is_of_type(Derived(), Base, "item")

    def test_bool_is_not_exactly_int(self):
        """Test that bool, a subclass of int, fails an exact int check."""
        with pytest.raises(TypeViolation, match="must be of type int, was bool"):
            is_of_type(True, int, "flag")

    def test_violation_is_a_type_error(self):
        """Test that callers catching TypeError still see the failure."""
        with pytest.raises(TypeError):
            is_of_type("3", int, "count")

    def test_non_type_argument_rejected(self):
        """Test that passing a non-type is a usage error, not a violation."""
        with pytest.raises(TypeError) as exc_info:
            is_of_type(3, "int", "count")
        assert not isinstance(exc_info.value, TypeViolation)

    def test_tuple_not_accepted_for_exact_match(self):
        """Test that exact matching takes a single type only."""
        with pytest.raises(TypeError) as exc_info:
            is_of_type(3, (int, str), "count")
        assert not isinstance(exc_info.value, TypeViolation)


class TestIsAssignableToType:
    def test_derived_instance_assignable_to_base(self):
        """Test that a subclass instance is assignable to its base."""
        is_assignable_to_type(Derived(), Base, "item")

    def test_base_instance_not_assignable_to_derived(self):
        """Test that a base instance is not assignable to a subclass."""
        with pytest.raises(TypeViolation) as exc_info:
            is_assignable_to_type(Base(), Derived, "item")

        assert str(exc_info.value) == (
            f"Parameter item must be assignable to type {__name__}.Derived, was {__name__}.Base"
        )

    def test_abstract_base_class(self):
        """Test that ABC registration counts as assignability."""
        is_assignable_to_type([1, 2], Sized, "items")
        with pytest.raises(TypeViolation, match="Sized, was int"):
            is_assignable_to_type(5, Sized, "items")

    def test_runtime_checkable_protocol(self):
        """Test that structural compatibility counts as assignability."""
        is_assignable_to_type(Closer(), SupportsClose, "resource")
        with pytest.raises(TypeViolation):
            is_assignable_to_type(object(), SupportsClose, "resource")

    def test_tuple_of_types(self):
        """Test that a tuple of types behaves as in isinstance."""
        is_assignable_to_type(2.5, (int, float), "number")
        with pytest.raises(TypeViolation, match=re.escape("must be assignable to type int | float, was str")):
            is_assignable_to_type("2.5", (int, float), "number")


class TestTypeName:
    def test_builtin_renders_bare(self):
        assert type_name(int) == "int"

    def test_user_type_renders_qualified(self):
        assert type_name(Derived) == f"{__name__}.Derived"

    def test_tuple_renders_union(self):
        assert type_name((int, str)) == "int | str"


class TestTypeProperties:
    """
    **Property: Exact Implies Assignable**
    Whenever is_of_type succeeds, is_assignable_to_type succeeds too.
    """

    @given(
        value=st.one_of(st.integers(), st.booleans(), st.text(), st.floats(), st.builds(Base), st.builds(Derived)),
        type_=st.sampled_from([int, bool, str, float, object, Base, Derived]),
    )
    def test_exact_match_implies_assignable(self, value, type_):
        try:
            is_of_type(value, type_, "value")
        except TypeViolation:
            return

        is_assignable_to_type(value, type_, "value")
