# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

"""Discover the stored members (fields) declared by a class.

A field is anything that can be read or written directly by name:

* a name annotated in the class body, as used by dataclasses, pydantic models
  and plain annotated classes;
* a name listed in ``__slots__``;
* a :class:`property` (readable if it has a getter, writable if it has a setter);
* a :func:`functools.cached_property`.

``ClassVar`` annotations declare class-level fields. A ``Final`` annotation with
a value in the class body, or ``ClassVar[Final[...]]``, declares an immutable
class-level constant.
"""

import functools
import typing

from collections.abc import Iterator

from .util.helpers import type_hints


class FieldInfo(typing.NamedTuple):
    """A stored member declared in the body of one class."""

    #: Attribute name of the field.
    name: str
    #: Class whose body declares the field.
    owner: type
    #: Annotated type, with qualifiers such as ``ClassVar`` still applied (``object`` when missing).
    hint: typing.Any
    #: Whether the field lives on the class rather than on instances.
    class_level: bool = False
    #: Whether the field is declared ``Final``.
    final: bool = False
    #: Whether the field can be read.
    readable: bool = True
    #: Whether the field can be written.
    writable: bool = True

    @property
    def immutable_class_constant(self) -> bool:
        return self.class_level and self.final

    @typing.override
    def __str__(self) -> str:
        return f"{self.owner.__qualname__}.{self.name}"


def _iter_slots(klass: type) -> Iterator[str]:
    slots = vars(klass).get("__slots__", ())
    if isinstance(slots, str):
        slots = (slots,)
    for slot in slots:
        if slot not in ("__dict__", "__weakref__"):
            yield slot


def _function_hint(function: typing.Any, key: str) -> typing.Any:
    return type_hints.get_type_hints(function).get(key, object)


def _descriptor_field(klass: type, name: str, raw: typing.Any) -> FieldInfo | None:
    if isinstance(raw, property):
        if raw.fget is not None:
            hint = _function_hint(raw.fget, "return")
        elif raw.fset is not None:
            hints = type_hints.get_type_hints(raw.fset)
            hint = next((value for key, value in hints.items() if key != "return"), object)
        else:
            return None
        return FieldInfo(name=name, owner=klass, hint=hint, readable=raw.fget is not None, writable=raw.fset is not None)

    if isinstance(raw, functools.cached_property):
        return FieldInfo(name=name, owner=klass, hint=_function_hint(raw.func, "return"))

    return None


def iter_declared_fields(klass: type) -> Iterator[FieldInfo]:
    """Yield the fields declared directly in the body of *klass*, each name once.

    Annotated names come first in declaration order, then ``__slots__`` entries, then descriptors.
    """
    namespace = vars(klass)
    hints = type_hints.get_type_hints(klass)
    seen: set[str] = set()

    for name, raw_hint in type_hints.get_own_annotations(klass).items():
        hint = hints.get(name, raw_hint)
        _, qualifiers = type_hints.unwrap_qualifiers(hint)

        class_level = typing.ClassVar in qualifiers
        final = typing.Final in qualifiers
        if final and name in namespace and not isinstance(namespace[name], (property, functools.cached_property)):
            # A Final name assigned in the class body is a class constant
            class_level = True

        seen.add(name)
        yield FieldInfo(name=name, owner=klass, hint=hint, class_level=class_level, final=final, writable=not (class_level and final))

    for name in _iter_slots(klass):
        if name not in seen:
            seen.add(name)
            yield FieldInfo(name=name, owner=klass, hint=object)

    for name, raw in namespace.items():
        if name in seen:
            continue
        if (field := _descriptor_field(klass, name, raw)) is not None:
            seen.add(name)
            yield field
