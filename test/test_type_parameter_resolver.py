# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

import pytest

from typemeta.fields import iter_declared_fields
from typemeta.members import get_class_members
from typemeta.type_parameter_resolver import resolve_field_type, resolve_parameter_types, resolve_return_type, resolve_type


class Box[T]:
    item: T

    def get_value(self) -> T: ...

    def set_value(self, value: T) -> None: ...

    def get_maybe(self) -> T | None: ...

    def get_items(self) -> list[T]: ...


class IntBox(Box[int]):
    pass


class ListBox(Box[list[str]]):
    pass


class Passthrough[U](Box[U]):
    pass


class StrPassthrough(Passthrough[str]):
    pass


class Bounded[N: float](Box[N]):
    pass


def _member(klass, name):
    return next(member for member in get_class_members(klass) if member.name == name)


@pytest.mark.generics
class TestResolveType:
    def test_bound_argument(self):
        member = _member(IntBox, "get_value")

        assert member.owner is Box
        assert resolve_return_type(member, IntBox) is int

    def test_parameter_types(self):
        assert resolve_parameter_types(_member(IntBox, "set_value"), IntBox) == (int,)

    def test_generic_argument_is_erased(self):
        assert resolve_return_type(_member(ListBox, "get_value"), ListBox) is list

    def test_optional_type_parameter(self):
        assert resolve_return_type(_member(IntBox, "get_maybe"), IntBox) is int

    def test_parameterised_hint_is_erased(self):
        assert resolve_return_type(_member(IntBox, "get_items"), IntBox) is list

    def test_unbound_parameter_erases_to_object(self):
        assert resolve_return_type(_member(Box, "get_value"), Box) is object
        assert resolve_return_type(_member(Passthrough, "get_value"), Passthrough) is object

    def test_bound_through_intermediate_class(self):
        assert resolve_return_type(_member(StrPassthrough, "get_value"), StrPassthrough) is str

    def test_unbound_parameter_erases_to_bound(self):
        assert resolve_return_type(_member(Bounded, "get_value"), Bounded) is float

    def test_field(self):
        field = next(field for field in iter_declared_fields(Box) if field.name == "item")

        assert resolve_field_type(field, IntBox) is int
        assert resolve_field_type(field, Box) is object

    def test_plain_hints(self):
        assert resolve_type(str, Box, IntBox) is str
        assert resolve_type(None, Box, IntBox) is type(None)
        assert resolve_type(int | str, Box, IntBox) is object
