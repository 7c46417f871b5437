# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

import typing

from ..fields import FieldInfo
from .invoker import Invoker


class FieldInvoker(Invoker):
    """Base for invokers that access a field by name, on the target or, for class-level fields, on its class."""

    __slots__ = ("_field",)

    def __init__(self, field: FieldInfo, value_type: type) -> None:
        super().__init__(field.owner, value_type)
        self._field = field

    @property
    def field(self) -> FieldInfo:
        return self._field

    @property
    @typing.override
    def name(self) -> str:
        return self._field.name

    @property
    @typing.override
    def class_level(self) -> bool:
        return self._field.class_level

    def _holder(self, target: typing.Any) -> typing.Any:
        if self.class_level and not isinstance(target, type):
            return type(target)
        return target


class GetFieldInvoker(FieldInvoker):
    __slots__ = ()

    arity = 0

    @typing.override
    def _invoke(self, target: typing.Any, *args: typing.Any) -> typing.Any:
        return getattr(self._holder(target), self._field.name)


class SetFieldInvoker(FieldInvoker):
    __slots__ = ()

    arity = 1

    @typing.override
    def _invoke(self, target: typing.Any, *args: typing.Any) -> None:
        setattr(self._holder(target), self._field.name, args[0])
