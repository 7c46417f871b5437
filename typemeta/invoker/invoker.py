# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

import typing

from abc import ABCMeta, abstractmethod

from ..errors import InvocationError
from ..util.helpers.type_hints import is_assignable


class Invoker(metaclass=ABCMeta):
    """One read or write operation on one member of one class.

    Invokers are created by a :class:`~typemeta.reflector.Reflector` and are immutable once created, so they may be
    shared freely between threads.
    """

    __slots__ = ("_owner", "_type")

    #: Number of arguments :meth:`invoke` expects.
    arity: typing.ClassVar[int]

    def __init__(self, owner: type, value_type: type) -> None:
        self._owner = owner
        self._type = value_type

    @property
    def owner(self) -> type:
        """Class declaring the underlying member."""
        return self._owner

    @property
    def type(self) -> type:
        """Declared type of the value read or written."""
        return self._type

    @property
    @abstractmethod
    def name(self) -> str:
        """Attribute name of the underlying member."""

    @property
    def class_level(self) -> bool:
        return False

    # MARK: Invocation
    def _accepts(self, target: typing.Any) -> bool:
        try:
            if isinstance(target, self._owner):
                return True
        except TypeError:
            # Protocols that are not runtime-checkable only match explicit subclasses
            if self._owner in type(target).__mro__:
                return True
        return self.class_level and isinstance(target, type) and is_assignable(self._owner, target)

    def _check(self, target: typing.Any, args: tuple[typing.Any, ...]) -> None:
        if len(args) != self.arity:
            msg = f"{self} expects {self.arity} argument(s), got {len(args)}"
            raise InvocationError(msg)

        if self._accepts(target):
            return

        msg = f"{self} cannot be invoked on an instance of '{type(target).__qualname__}'"
        raise InvocationError(msg)

    def invoke(self, target: typing.Any, *args: typing.Any) -> typing.Any:
        """Read (no argument) or write (one argument) the member on *target*.

        Raises:
            InvocationError: If *target* or the number of arguments does not fit the member, or the underlying
                operation fails. The original exception is chained as ``__cause__``.

        """
        self._check(target, args)
        try:
            return self._invoke(target, *args)
        except InvocationError:
            raise
        except Exception as err:
            msg = f"Error invoking {self} on {type(target).__qualname__}: {err}"
            raise InvocationError(msg) from err

    @abstractmethod
    def _invoke(self, target: typing.Any, *args: typing.Any) -> typing.Any:
        msg = "Subclasses must implement _invoke"
        raise NotImplementedError(msg)

    # MARK: Printing
    @typing.override
    def __str__(self) -> str:
        return f"{type(self).__name__}({self._owner.__qualname__}.{self.name})"

    @typing.override
    def __repr__(self) -> str:
        return f"<{self}: {self._type.__qualname__}>"
