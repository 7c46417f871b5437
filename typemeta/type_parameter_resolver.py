# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

"""Resolve the declared types of members against the class being introspected.

A member declared by a generic ancestor may be annotated with one of that
ancestor's type parameters. Seen from a subclass that binds the parameter, the
member has the bound type instead:

    >>> from typemeta import type_parameter_resolver
    >>> class Box[T]:
    ...     def get_value(self) -> T: ...
    >>> class IntBox(Box[int]):
    ...     pass
    >>> T = Box.__type_params__[0]
    >>> type_parameter_resolver.resolve_type(T, Box, IntBox)
    <class 'int'>
    >>> type_parameter_resolver.resolve_type(T, Box, Box)
    <class 'object'>

Whatever cannot be resolved is erased (see :func:`~typemeta.util.helpers.type_hints.erase`).
"""

import types
import typing

from typing import TYPE_CHECKING

from .util.helpers import generics, type_hints
from .util.logging import getLogger


if TYPE_CHECKING:
    from .fields import FieldInfo
    from .members import MemberInfo


log = getLogger(__name__)


def _substitute(hint: typing.Any, owner: type, context: type) -> typing.Any:
    if isinstance(hint, typing.TypeVar):
        if context is owner or hint not in generics.get_parameters(owner):
            return hint
        try:
            return generics.resolve_parameter(context, owner, hint)
        except TypeError as err:
            log.debug(t"Could not resolve {hint} of {owner.__qualname__} from {context.__qualname__}: {err}")
            return hint

    origin = typing.get_origin(hint)
    if origin is typing.Union or origin is types.UnionType:
        args = [arg for arg in typing.get_args(hint) if arg is not types.NoneType]
        if len(args) == 1:
            return _substitute(args[0], owner, context)

    return hint


def resolve_type(hint: typing.Any, owner: type, context: type) -> type:
    """Return the runtime class of annotation *hint*, written in *owner*, as seen from subclass *context*."""
    hint, _ = type_hints.unwrap_qualifiers(hint)
    return type_hints.erase(_substitute(hint, owner, context))


def resolve_return_type(member: MemberInfo, context: type) -> type:
    return resolve_type(member.return_hint, member.owner, context)


def resolve_parameter_types(member: MemberInfo, context: type) -> tuple[type, ...]:
    return tuple(resolve_type(hint, member.owner, context) for hint in member.parameter_hints)


def resolve_field_type(field: FieldInfo, context: type) -> type:
    return resolve_type(field.hint, field.owner, context)
