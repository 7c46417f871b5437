# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

"""Helpers for reading annotations and reducing them to runtime classes.

Annotations are evaluated with :attr:`annotationlib.Format.FORWARDREF`, so names
that cannot be resolved come back as :class:`typing.ForwardRef` instead of
raising. :func:`erase` then maps any annotation to the runtime class a value of
that annotation is guaranteed to be an instance of.

Examples
--------
    >>> import typing
    >>> from typemeta.util.helpers import type_hints
    >>> type_hints.erase(list[int])
    <class 'list'>
    >>> type_hints.erase(int | None)
    <class 'int'>
    >>> type_hints.erase(int | str)
    <class 'object'>
    >>> type_hints.erase(typing.ClassVar[bool])
    <class 'bool'>

"""

import annotationlib
import types
import typing

from frozendict import frozendict


# MARK: Type aliases
#: Alias for all accepted forms of type hints.
type TypeHint = type | types.GenericAlias | typing.ForwardRef | typing.TypeAliasType | typing.TypeVar | typing.Union | str | None  # pyright: ignore[reportInvalidTypeForm]

#: Qualifiers that wrap an annotation without changing the type of the value.
QUALIFIERS: tuple[typing.Any, ...] = (typing.ClassVar, typing.Final, typing.Required, typing.NotRequired, typing.ReadOnly)


# MARK: typing.get_type_hints wrapper
def get_type_hints(obj: typing.Any, format: annotationlib.Format = annotationlib.Format.FORWARDREF) -> typing.Mapping[str, typing.Any]:  # noqa: A002
    """Return the evaluated type hints of *obj*, or an empty mapping if they cannot be evaluated."""
    try:
        return frozendict(typing.get_type_hints(obj, format=format))
    except (NameError, TypeError, SyntaxError):
        return frozendict()


def get_own_annotations(cls: type) -> typing.Mapping[str, typing.Any]:
    """Return the annotations written directly in the body of *cls*, in declaration order, without evaluating string annotations."""
    try:
        return frozendict(annotationlib.get_annotations(cls, format=annotationlib.Format.FORWARDREF))
    except (NameError, TypeError):
        return frozendict()


def get_own_annotation_names(cls: type) -> tuple[str, ...]:
    """Return the names annotated directly in the body of *cls*, in declaration order."""
    return tuple(get_own_annotations(cls))


# MARK: Qualifiers
def unwrap_qualifiers(hint: typing.Any) -> tuple[typing.Any, frozenset[typing.Any]]:
    """Strip ``ClassVar``/``Final``/``Annotated`` (and friends) from *hint*.

    Returns the inner hint together with the set of qualifiers that were removed.
    Bare qualifiers such as ``x: Final = 3`` carry no type and unwrap to :data:`typing.Any`.
    """
    qualifiers = set()

    while True:
        if any(hint is qualifier for qualifier in QUALIFIERS):
            qualifiers.add(hint)
            return typing.Any, frozenset(qualifiers)

        origin = typing.get_origin(hint)
        if any(origin is qualifier for qualifier in QUALIFIERS):
            qualifiers.add(origin)
            hint = typing.get_args(hint)[0]
        elif origin is typing.Annotated:
            hint = hint.__origin__
        else:
            return hint, frozenset(qualifiers)


def is_class_var(hint: typing.Any) -> bool:
    return typing.ClassVar in unwrap_qualifiers(hint)[1]


def is_final(hint: typing.Any) -> bool:
    return typing.Final in unwrap_qualifiers(hint)[1]


# MARK: Evaluation of lazily computed values
def _evaluate_bound(typevar: typing.TypeVar) -> typing.Any:
    if (evaluate_bound := getattr(typevar, "evaluate_bound", None)) is not None:
        return annotationlib.call_evaluate_function(evaluate_bound, format=annotationlib.Format.FORWARDREF)
    return getattr(typevar, "__bound__", None)


def _evaluate_alias(alias: typing.TypeAliasType) -> typing.Any:
    if (evaluate_value := getattr(alias, "evaluate_value", None)) is not None:
        return annotationlib.call_evaluate_function(evaluate_value, format=annotationlib.Format.FORWARDREF)
    return alias.__value__


# MARK: Erasure
def erase(hint: typing.Any) -> type:
    """Reduce *hint* to the runtime class that values of that hint are instances of.

    * classes map to themselves and ``None`` maps to :class:`types.NoneType`;
    * parameterised generics map to their origin (``list[int]`` is ``list``);
    * ``X | None`` maps to the erasure of ``X``, any other union to ``object``;
    * type variables map to the erasure of their bound, or ``object``;
    * ``Any``, literals, forward references and anything else map to ``object``.
    """
    hint, _ = unwrap_qualifiers(hint)

    if hint is None or hint is types.NoneType:
        return types.NoneType

    if isinstance(hint, typing.TypeAliasType):
        return erase(_evaluate_alias(hint))

    if isinstance(hint, typing.TypeVar):
        bound = _evaluate_bound(hint)
        return object if bound is None else erase(bound)

    if isinstance(hint, typing.NewType):
        return erase(hint.__supertype__)

    if isinstance(hint, (typing.ForwardRef, str)) or hint is typing.Any:
        return object

    origin = typing.get_origin(hint)
    if origin is typing.Union or origin is types.UnionType:
        args = [arg for arg in typing.get_args(hint) if arg is not types.NoneType]
        return erase(args[0]) if len(args) == 1 else object

    if isinstance(origin, type):
        return origin

    if isinstance(hint, type):
        return hint

    return object


# MARK: Assignability
def is_assignable(target: type, source: type) -> bool:
    """Return whether a value of class *source* may be used where *target* is expected.

    Non runtime-checkable protocols refuse :func:`issubclass`, in which case only
    explicit inheritance is considered.
    """
    if target is source or target is object:
        return True

    try:
        return issubclass(source, target)
    except TypeError:
        return target in getattr(source, "__mro__", ())
