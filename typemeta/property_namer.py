# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

"""Derive logical property names from accessor method names.

Both camelCase and snake_case accessors are understood:

    >>> from typemeta import property_namer
    >>> property_namer.method_to_property("getUserName")
    'userName'
    >>> property_namer.method_to_property("is_active")
    'active'
    >>> property_namer.method_to_property("setURL")
    'URL'

"""

from collections.abc import Sequence

from .errors import ReflectionError


GETTER_PREFIXES: tuple[str, ...] = ("get", "is")
SETTER_PREFIXES: tuple[str, ...] = ("set",)


def _strip_prefix(name: str, prefixes: Sequence[str]) -> str | None:
    for prefix in prefixes:
        if name.startswith(prefix) and len(name) > len(prefix):
            return name[len(prefix) :]
    return None


def method_to_property(name: str, *, prefixes: Sequence[str] = GETTER_PREFIXES + SETTER_PREFIXES) -> str:
    """Return the property name for accessor *name*.

    The prefix and a single separating underscore are removed, then the first character is lower-cased unless the
    second one is upper case too (so ``getURL`` maps to ``URL``). The result may be empty (e.g. for ``get_``).

    Raises:
        ReflectionError: If *name* does not start with any of *prefixes*.

    """
    if (rest := _strip_prefix(name, prefixes)) is None:
        msg = f"Error parsing property name '{name}'. Didn't start with {', '.join(repr(p) for p in prefixes)}."
        raise ReflectionError(msg)

    if rest.startswith("_"):
        rest = rest[1:]

    if len(rest) == 1 or (len(rest) > 1 and not rest[1].isupper()):
        rest = rest[0].lower() + rest[1:]

    return rest


def is_getter(name: str, *, prefixes: Sequence[str] = GETTER_PREFIXES) -> bool:
    return _strip_prefix(name, prefixes) is not None


def is_setter(name: str, *, prefixes: Sequence[str] = SETTER_PREFIXES) -> bool:
    return _strip_prefix(name, prefixes) is not None


def is_property(name: str) -> bool:
    return is_getter(name) or is_setter(name)
