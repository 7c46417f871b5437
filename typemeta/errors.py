# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

"""Exceptions raised while building or querying type metadata.

Every exception derives from :class:`ReflectionError`. Build failures
(:class:`AmbiguousAccessorError`) abort the construction of a whole
:class:`~typemeta.reflector.Reflector`; query failures
(:class:`NoSuchPropertyError`, :class:`NoDefaultConstructorError`) are raised
per call; :class:`InvocationError` is only raised when an accessor runs.
"""

from typing import TYPE_CHECKING

from .defines import AccessMode


if TYPE_CHECKING:
    from collections.abc import Sequence


class ReflectionError(Exception):
    """Base class for all errors raised by typemeta."""


class AmbiguousAccessorError(ReflectionError):
    """Two accessor candidates for one property cannot be ordered.

    Raised for getters with the same non-boolean (or unrelated) return types, and for setters with unrelated parameter types.
    """

    def __init__(self, msg: str, *, property_name: str, declaring_type: type, mode: AccessMode, types: Sequence[type] = ()) -> None:
        super().__init__(msg)
        self.property_name = property_name
        self.declaring_type = declaring_type
        self.mode = mode
        self.types = tuple(types)


class NoSuchPropertyError(ReflectionError, AttributeError):
    """The requested property has no getter (or no setter) on the introspected type."""

    def __init__(self, property_name: str, owner: type, mode: AccessMode) -> None:
        msg = f"There is no {mode} for property named '{property_name}' in '{owner.__qualname__}'"
        super().__init__(msg)
        self.property_name = property_name
        self.owner = owner
        self.mode = mode


class NoDefaultConstructorError(ReflectionError, TypeError):
    """The introspected type cannot be instantiated without arguments."""

    def __init__(self, owner: type) -> None:
        msg = f"There is no default constructor for '{owner.__qualname__}'"
        super().__init__(msg)
        self.owner = owner


class InvocationError(ReflectionError):
    """An accessor was invoked with an incompatible target or argument, or the underlying read/write failed.

    The original exception, if any, is available as ``__cause__``.
    """
