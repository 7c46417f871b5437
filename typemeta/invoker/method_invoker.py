# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

import typing

from ..defines import AccessMode
from ..members import MemberInfo
from .invoker import Invoker


class MethodInvoker(Invoker):
    """Invoke an accessor method: a getter with no argument, or a setter with one.

    The method is looked up by name on the target, so an override declared by the target's class is the one that
    runs.
    """

    __slots__ = ("_member", "_mode")

    def __init__(self, member: MemberInfo, value_type: type, mode: AccessMode) -> None:
        super().__init__(member.owner, value_type)
        self._member = member
        self._mode = mode

    @property
    def member(self) -> MemberInfo:
        return self._member

    @property
    def mode(self) -> AccessMode:
        return self._mode

    @property
    @typing.override
    def name(self) -> str:
        return self._member.name

    @property
    @typing.override
    def class_level(self) -> bool:
        return self._member.class_level

    @property
    def arity(self) -> int:  # pyright: ignore[reportIncompatibleVariableOverride]
        return 0 if self._mode is AccessMode.GET else 1

    @typing.override
    def _invoke(self, target: typing.Any, *args: typing.Any) -> typing.Any:
        return getattr(target, self._member.name)(*args)
