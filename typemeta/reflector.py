# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

"""Per-class property metadata.

A :class:`Reflector` introspects one class once and publishes the result as an
immutable table of named properties, each backed by an
:class:`~typemeta.invoker.Invoker`:

    >>> from typemeta import Reflector
    >>> class User:
    ...     nickname: str
    ...     def getUserName(self) -> str:
    ...         return self._name
    ...     def setUserName(self, value: str) -> None:
    ...         self._name = value
    ...     def isActive(self) -> bool:
    ...         return True
    >>> reflector = Reflector(User)
    >>> reflector.readable_property_names
    ('userName', 'active', 'nickname')
    >>> reflector.writable_property_names
    ('userName', 'nickname')
    >>> reflector.find_property_name("USERNAME")
    'userName'
    >>> user = reflector.get_default_constructor()()
    >>> reflector.get_set_invoker("userName").invoke(user, "alice")
    >>> reflector.get_get_invoker("userName").invoke(user)
    'alice'

Construction is deterministic and has no side effects; once built, a reflector
may be read concurrently without synchronization. Use
:class:`~typemeta.factory.ReflectorFactory` to build each class only once.
"""

import inspect
import typing

from collections.abc import Callable

from frozendict import frozendict

from .classifier import group_candidates
from .config import ReflectorConfig
from .defines import AccessMode
from .errors import NoDefaultConstructorError, NoSuchPropertyError
from .fields import FieldInfo, iter_declared_fields
from .invoker import GetFieldInvoker, Invoker, MethodInvoker, SetFieldInvoker
from .members import MemberInfo, get_class_members, iter_ancestors
from .resolver import resolve_getter, resolve_setter
from .type_parameter_resolver import resolve_field_type
from .util.helpers import freeze
from .util.mixins import LoggableMixin


if typing.TYPE_CHECKING:
    import rich.repr


class Reflector(LoggableMixin):
    """Cached property metadata for one class.

    Args:
        klass: The class to introspect.
        config: Discovery settings, :meth:`ReflectorConfig.default` when omitted.

    Raises:
        AmbiguousAccessorError: If the accessors of some property cannot be disambiguated. No reflector is created.
        TypeError: If *klass* is not a class.

    """

    def __init__(self, klass: type, config: ReflectorConfig | None = None) -> None:
        if not isinstance(klass, type):
            msg = f"Expected a class, got {klass!r}"
            raise TypeError(msg)

        self._type = klass
        self._config = config if config is not None else ReflectorConfig.default()

        self.log.debug(t"Building metadata for {klass.__qualname__}")

        get_methods: dict[str, Invoker] = {}
        get_types: dict[str, type] = {}
        set_methods: dict[str, Invoker] = {}
        set_types: dict[str, type] = {}

        members = get_class_members(
            klass,
            include_private=self._config.allow_private_members,
            internal_marker=self._config.internal_marker,
        )
        self._add_get_methods(members, get_methods, get_types)
        self._add_set_methods(members, get_types, set_methods, set_types)
        self._add_fields(get_methods, get_types, set_methods, set_types)

        self._get_methods = freeze(get_methods)
        self._get_types = freeze(get_types)
        self._set_methods = freeze(set_methods)
        self._set_types = freeze(set_types)

        self._readable_property_names = tuple(get_methods)
        self._writable_property_names = tuple(set_methods)

        case_insensitive: dict[str, str] = {}
        for name in (*self._readable_property_names, *self._writable_property_names):
            case_insensitive[name.upper()] = name
        self._case_insensitive_property_map = freeze(case_insensitive)

        self._default_constructor = self._find_default_constructor(klass)

        self.log.debug(
            t"Built metadata for {klass.__qualname__}: readable={self._readable_property_names} writable={self._writable_property_names}"
        )

    @property
    @typing.override
    def __log_name__(self) -> str:
        return f"{type(self).__name__}[{self._type.__qualname__}]"

    # MARK: Construction
    def _add_get_methods(self, members: tuple[MemberInfo, ...], get_methods: dict[str, Invoker], get_types: dict[str, type]) -> None:
        for name, candidates in group_candidates(members, AccessMode.GET, self._type, self._config).items():
            winner = resolve_getter(name, candidates, self._config)
            self.log.debug(t"Getter for '{name}': {winner.member} -> {winner.value_type.__qualname__}")
            get_methods[name] = MethodInvoker(winner.member, winner.value_type, AccessMode.GET)
            get_types[name] = winner.value_type

    def _add_set_methods(
        self, members: tuple[MemberInfo, ...], get_types: dict[str, type], set_methods: dict[str, Invoker], set_types: dict[str, type]
    ) -> None:
        for name, candidates in group_candidates(members, AccessMode.SET, self._type, self._config).items():
            winner = resolve_setter(name, candidates, get_types.get(name))
            self.log.debug(t"Setter for '{name}': {winner.member} <- {winner.value_type.__qualname__}")
            set_methods[name] = MethodInvoker(winner.member, winner.value_type, AccessMode.SET)
            set_types[name] = winner.value_type

    def _add_fields(
        self, get_methods: dict[str, Invoker], get_types: dict[str, type], set_methods: dict[str, Invoker], set_types: dict[str, type]
    ) -> None:
        for klass in iter_ancestors(self._type):
            for field in iter_declared_fields(klass):
                if not self._config.is_valid_property_name(field.name):
                    continue

                if field.writable and not field.immutable_class_constant and field.name not in set_methods:
                    self._add_set_field(field, set_methods, set_types)
                if field.readable and field.name not in get_methods:
                    self._add_get_field(field, get_methods, get_types)

    def _add_get_field(self, field: FieldInfo, get_methods: dict[str, Invoker], get_types: dict[str, type]) -> None:
        field_type = resolve_field_type(field, self._type)
        self.log.debug(t"Read fallback for '{field.name}': {field} -> {field_type.__qualname__}")
        get_methods[field.name] = GetFieldInvoker(field, field_type)
        get_types[field.name] = field_type

    def _add_set_field(self, field: FieldInfo, set_methods: dict[str, Invoker], set_types: dict[str, type]) -> None:
        field_type = resolve_field_type(field, self._type)
        self.log.debug(t"Write fallback for '{field.name}': {field} <- {field_type.__qualname__}")
        set_methods[field.name] = SetFieldInvoker(field, field_type)
        set_types[field.name] = field_type

    @staticmethod
    def _find_default_constructor(klass: type) -> Callable[[], typing.Any] | None:
        if inspect.isabstract(klass) or getattr(klass, "_is_protocol", False):
            return None

        try:
            signature = inspect.signature(klass)
        except (TypeError, ValueError):
            return None

        for parameter in signature.parameters.values():
            if parameter.kind in (parameter.VAR_POSITIONAL, parameter.VAR_KEYWORD):
                continue
            if parameter.default is parameter.empty:
                return None

        return klass

    # MARK: Introspected class
    @property
    def type(self) -> type:
        """The introspected class."""
        return self._type

    @property
    def config(self) -> ReflectorConfig:
        return self._config

    def can_control_member_accessible(self) -> bool:
        """Return whether members whose name starts with the internal marker may back properties."""
        return self._config.allow_private_members

    # MARK: Default constructor
    def has_default_constructor(self) -> bool:
        return self._default_constructor is not None

    def get_default_constructor(self) -> Callable[[], typing.Any]:
        """Return a zero-argument callable creating a new instance of the introspected class.

        Raises:
            NoDefaultConstructorError: If the class cannot be instantiated without arguments.

        """
        if self._default_constructor is None:
            raise NoDefaultConstructorError(self._type)
        return self._default_constructor

    # MARK: Accessors
    def get_get_invoker(self, property_name: str) -> Invoker:
        if (invoker := self._get_methods.get(property_name)) is None:
            raise NoSuchPropertyError(property_name, self._type, AccessMode.GET)
        return invoker

    def get_set_invoker(self, property_name: str) -> Invoker:
        if (invoker := self._set_methods.get(property_name)) is None:
            raise NoSuchPropertyError(property_name, self._type, AccessMode.SET)
        return invoker

    def get_getter_type(self, property_name: str) -> type:
        """Return the declared type of readable property *property_name*.

        Raises:
            NoSuchPropertyError: If the property is not readable.

        """
        if (value_type := self._get_types.get(property_name)) is None:
            raise NoSuchPropertyError(property_name, self._type, AccessMode.GET)
        return value_type

    def get_setter_type(self, property_name: str) -> type:
        """Return the declared type of writable property *property_name*.

        Raises:
            NoSuchPropertyError: If the property is not writable.

        """
        if (value_type := self._set_types.get(property_name)) is None:
            raise NoSuchPropertyError(property_name, self._type, AccessMode.SET)
        return value_type

    def has_getter(self, property_name: str) -> bool:
        return property_name in self._get_methods

    def has_setter(self, property_name: str) -> bool:
        return property_name in self._set_methods

    # MARK: Property names
    @property
    def readable_property_names(self) -> tuple[str, ...]:
        return self._readable_property_names

    @property
    def writable_property_names(self) -> tuple[str, ...]:
        return self._writable_property_names

    def get_getable_property_names(self) -> tuple[str, ...]:
        return self._readable_property_names

    def get_setable_property_names(self) -> tuple[str, ...]:
        return self._writable_property_names

    def find_property_name(self, name: str) -> str | None:
        """Return the canonical spelling of property *name*, compared case-insensitively, or ``None`` if there is none."""
        return self._case_insensitive_property_map.get(name.upper())

    # MARK: Maps
    @property
    def get_methods(self) -> frozendict[str, Invoker]:
        return self._get_methods

    @property
    def set_methods(self) -> frozendict[str, Invoker]:
        return self._set_methods

    @property
    def get_types(self) -> frozendict[str, type]:
        return self._get_types

    @property
    def set_types(self) -> frozendict[str, type]:
        return self._set_types

    # MARK: Printing
    def __rich_repr__(self) -> rich.repr.Result:
        yield "type", self._type
        yield "readable", self._readable_property_names
        yield "writable", self._writable_property_names
        yield "default_constructor", self.has_default_constructor()


#: Alias naming what a reflector holds.
TypeMetadata = Reflector
