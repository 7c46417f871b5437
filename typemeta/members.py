# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

"""Enumerate the invocable members of a class and its ancestors.

Members are collected walking the MRO from the class itself towards the root,
so abstract methods of ABCs and protocols the class implements are included
even if the class does not redeclare them. Each member is recorded under its
structural signature (erased return type, name, erased parameter types); a
signature already recorded by a more derived class is not replaced, so an
override hides the method it overrides, while an override that changes the
signature (e.g. a narrower return type) is kept next to it.
"""

import enum
import inspect
import types
import typing

from .defines import ROOT_TYPES
from .util.helpers import type_hints
from .util.logging import getLogger


log = getLogger(__name__)


#: Parameter kinds that consume a positional argument.
POSITIONAL_KINDS = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)


class MemberKind(enum.Enum):
    METHOD = "method"
    CLASS_METHOD = "classmethod"
    STATIC_METHOD = "staticmethod"


type Signature = tuple[type, str, tuple[type, ...]]


class MemberInfo(typing.NamedTuple):
    """An invocable member declared in the body of one class."""

    #: Attribute name of the member.
    name: str
    #: Class whose body declares the member.
    owner: type
    #: Underlying Python function.
    function: types.FunctionType
    #: How the function is bound when accessed.
    kind: MemberKind
    #: Annotated return type (``object`` when missing).
    return_hint: typing.Any
    #: Annotated types of the positional parameters after ``self``/``cls``.
    parameter_hints: tuple[typing.Any, ...]

    @property
    def arity(self) -> int:
        return len(self.parameter_hints)

    @property
    def return_type(self) -> type:
        return type_hints.erase(self.return_hint)

    @property
    def parameter_types(self) -> tuple[type, ...]:
        return tuple(type_hints.erase(hint) for hint in self.parameter_hints)

    @property
    def signature(self) -> Signature:
        return (self.return_type, self.name, self.parameter_types)

    @property
    def class_level(self) -> bool:
        return self.kind is not MemberKind.METHOD

    @typing.override
    def __str__(self) -> str:
        return f"{self.owner.__qualname__}.{self.name}"


# MARK: Ancestors
def iter_ancestors(cls: type) -> typing.Iterator[type]:
    """Yield *cls* and its ancestors, most derived first, skipping the root types."""
    for klass in cls.__mro__:
        if klass not in ROOT_TYPES:
            yield klass


def is_special_name(name: str) -> bool:
    """Return whether *name* is a dunder name, i.e. a member synthesized or reserved by the interpreter."""
    return len(name) > 4 and name.startswith("__") and name.endswith("__")  # noqa: PLR2004


# MARK: Member description
def _unwrap(raw: typing.Any) -> tuple[types.FunctionType, MemberKind] | None:
    if isinstance(raw, staticmethod):
        function, kind = raw.__func__, MemberKind.STATIC_METHOD
    elif isinstance(raw, classmethod):
        function, kind = raw.__func__, MemberKind.CLASS_METHOD
    else:
        function, kind = raw, MemberKind.METHOD

    if not isinstance(function, types.FunctionType):
        return None
    return function, kind


def describe_member(owner: type, name: str, raw: typing.Any) -> MemberInfo | None:
    """Return the :class:`MemberInfo` for attribute *name* of *owner*, or ``None`` if it is not an invocable member.

    Members whose signature cannot be inspected, or that require keyword-only arguments, are not invocable with
    zero or one positional argument and are skipped.
    """
    if (unwrapped := _unwrap(raw)) is None:
        return None
    function, kind = unwrapped

    try:
        signature = inspect.signature(function)
    except (TypeError, ValueError):
        log.debug(t"Skipping {owner.__qualname__}.{name}: signature cannot be inspected")
        return None

    parameters = list(signature.parameters.values())
    if kind is not MemberKind.STATIC_METHOD:
        # Needs somewhere to bind 'self'/'cls'
        if not parameters or parameters[0].kind not in POSITIONAL_KINDS:
            return None
        parameters = parameters[1:]

    if any(p.kind is inspect.Parameter.KEYWORD_ONLY and p.default is p.empty for p in parameters):
        return None

    hints = type_hints.get_type_hints(function)
    positional = [p for p in parameters if p.kind in POSITIONAL_KINDS]

    return MemberInfo(
        name=name,
        owner=owner,
        function=function,
        kind=kind,
        return_hint=hints.get("return", object),
        parameter_hints=tuple(hints.get(p.name, object) for p in positional),
    )


# MARK: Enumeration
def iter_declared_members(klass: type, *, include_private: bool = True, internal_marker: str = "_") -> typing.Iterator[MemberInfo]:
    """Yield the invocable members declared directly in the body of *klass*."""
    for name, raw in vars(klass).items():
        if is_special_name(name):
            continue
        if not include_private and name.startswith(internal_marker):
            continue
        if (member := describe_member(klass, name, raw)) is not None:
            yield member


def get_class_members(cls: type, *, include_private: bool = True, internal_marker: str = "_") -> tuple[MemberInfo, ...]:
    """Return every invocable member of *cls* and its ancestors, with overrides collapsed.

    The result lists members in discovery order: most derived class first, then declaration order within a class.
    """
    unique: dict[Signature, MemberInfo] = {}

    for klass in iter_ancestors(cls):
        for member in iter_declared_members(klass, include_private=include_private, internal_marker=internal_marker):
            unique.setdefault(member.signature, member)

    return tuple(unique.values())
