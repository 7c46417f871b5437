# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

"""Utilities for following generic type arguments through class hierarchies.

This module wraps the Python typing machinery (and the Pydantic generic model
metadata) to answer one question: *given a concrete class, what is bound to a
type parameter declared by one of its generic ancestors?*

Examples
--------
    >>> from typemeta.util.helpers import generics
    >>> class Parent[T]:
    ...     pass
    >>> class Mid[X](Parent[X]):
    ...     pass
    >>> class Child(Mid[list[int]]):
    ...     pass
    >>> T = generics.get_parameters(Parent)[0]
    >>> generics.resolve_parameter(Child, Parent, T)
    list[int]

When nothing in the chain binds the parameter, the ``TypeVar`` itself is
returned, so callers can fall back to its bound:

    >>> generics.resolve_parameter(Mid, Parent, T)
    X

Repeated lookups are cached so resolution stays cheap when the same
hierarchy is inspected many times.

"""

import types
import typing

from functools import lru_cache

import pydantic


# MARK: Definitions
# Maximum number of cached entries used by the memoization helpers below.
LRU_CACHE_MAXSIZE = 256

# Runtime-compatible alias for representing generic annotations.
type GenericAlias = types.GenericAlias | typing._GenericAlias  # noqa: SLF001 # pyright: ignore[reportAttributeAccessIssue] as typing._GenericAlias does exist, but is undocumented

# Values that may be bound to a type parameter.
type ArgType = type | GenericAlias | typing.TypeVar | typing.TypeAliasType | typing.ForwardRef


# MARK: Pydantic helpers
def is_pydantic_model(cls: type | GenericAlias) -> bool:
    """Return whether *cls* resolves to a Pydantic ``BaseModel`` subclass."""
    origin = get_origin(cls)
    return isinstance(origin, type) and issubclass(origin, pydantic.BaseModel)


# MARK: get_origin
def get_origin(cls: type | GenericAlias) -> type:
    """Return the typing origin for *cls*, or *cls* itself when it is not a parameterised alias."""
    origin = typing.get_origin(cls)
    return typing.cast("type", cls) if origin is None else origin


# MARK: get_original_bases
def get_original_bases(cls: type | GenericAlias) -> tuple[typing.Any, ...]:
    """Return the bases of *cls* as written in its class statement, resolving aliases first."""
    origin = get_origin(cls)
    if not isinstance(origin, type):
        return ()
    return types.get_original_bases(origin)


# MARK: Parameters and arguments
def _unalias(cls: type | GenericAlias) -> tuple[type, tuple[ArgType, ...]]:
    """Split *cls* into the class declaring the parameters and the arguments bound to them."""
    if is_pydantic_model(cls):
        metadata = getattr(cls, "__pydantic_generic_metadata__", None)
        if metadata and metadata["origin"] is not None:
            return metadata["origin"], tuple(metadata["args"])
        return typing.cast("type", cls), ()

    return get_origin(cls), typing.get_args(cls)


def get_parameters(cls: type | GenericAlias) -> tuple[typing.TypeVar, ...]:
    """Return the type parameters declared by *cls*, or an empty tuple for non-generic classes."""
    origin, _ = _unalias(cls)

    if is_pydantic_model(origin):
        parameters = origin.__pydantic_generic_metadata__["parameters"]
    else:
        parameters = getattr(origin, "__parameters__", ())

    return tuple(param for param in parameters if isinstance(param, typing.TypeVar))


# MARK: get_bases_between
def get_bases_between(cls: type | GenericAlias, parent: type, result: list[type | GenericAlias] | None = None) -> list[type | GenericAlias] | None:
    """Return the inheritance chain from *cls* down to *parent*, inclusive.

    Each entry after the first is the base exactly as written in the class
    statement of the previous entry, so parameterised bases keep their
    arguments. Returns ``None`` if *cls* is not a subclass of *parent*.
    """
    if result is None:
        result = []

    result.append(cls)
    if cls is parent or get_origin(cls) is parent:
        return result

    for base in get_original_bases(cls):
        origin, _ = _unalias(base)
        if not isinstance(origin, type):
            continue

        if origin is parent:
            result.append(base)
            return result

        if issubclass(origin, parent):
            return get_bases_between(base, parent, result)

    return None


# MARK: resolve_parameter
@lru_cache(maxsize=LRU_CACHE_MAXSIZE)
def resolve_parameter(cls: type | GenericAlias, parent: type, param: typing.TypeVar) -> ArgType:
    """Return what *cls* binds to the type parameter *param* declared by *parent*.

    The chain between *cls* and *parent* is walked from *parent* upwards; each
    parameterised base substitutes the parameter currently being followed,
    until a concrete argument is found or the chain runs out. In the latter
    case the last ``TypeVar`` seen is returned.

    Results are cached via :func:`functools.lru_cache` with ``LRU_CACHE_MAXSIZE``.
    """
    bases = get_bases_between(cls, parent)
    if bases is None:
        return param

    current: ArgType = param
    for base in reversed(bases):
        if not isinstance(current, typing.TypeVar):
            break

        origin, args = _unalias(base)
        parameters = get_parameters(origin)
        if current not in parameters:
            continue

        position = parameters.index(current)
        if position < len(args):
            current = args[position]

    return current
