# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

"""Classify enumerated members as getter or setter candidates.

A zero-argument member whose name starts with a getter prefix is a getter
candidate, a one-argument member whose name starts with a setter prefix is a
setter candidate, and everything else is ignored. Classification never raises.
"""

import typing

from collections.abc import Iterable

from . import property_namer
from .defines import AccessMode
from .members import MemberInfo
from .type_parameter_resolver import resolve_parameter_types, resolve_return_type
from .util.logging import getLogger


if typing.TYPE_CHECKING:
    from .config import ReflectorConfig


log = getLogger(__name__)


class Candidate(typing.NamedTuple):
    """A member that tentatively backs one logical property."""

    #: Property name derived from the member name.
    property_name: str
    #: The underlying member.
    member: MemberInfo
    #: Whether the member reads or writes the property.
    mode: AccessMode
    #: Return type (getters) or parameter type (setters), resolved against the introspected class.
    value_type: type

    @property
    def name(self) -> str:
        return self.member.name

    @property
    def declaring_type(self) -> type:
        return self.member.owner

    @property
    def declared_type(self) -> type:
        """Erased type as written on the member, before the type parameters of generic ancestors are substituted."""
        return self.member.return_type if self.mode is AccessMode.GET else self.member.parameter_types[0]


def accessor_name(member: MemberInfo, config: ReflectorConfig) -> str:
    """Return the name of *member* as matched against the accessor prefixes.

    A non-public accessor (``_getSecret``) is matched without its internal marker. Name-mangled members
    (``_Owner__getSecret``) are not.
    """
    name = member.name
    if name.startswith(config.internal_marker) and not name.startswith(f"_{member.owner.__name__.lstrip('_')}__"):
        return name.removeprefix(config.internal_marker)
    return name


def classify(member: MemberInfo, context: type, config: ReflectorConfig) -> Candidate | None:
    """Return the candidate backed by *member*, or ``None`` if it is not an accessor."""
    name = accessor_name(member, config)

    if member.arity == 0 and property_namer.is_getter(name, prefixes=config.getter_prefixes):
        mode = AccessMode.GET
        prefixes = config.getter_prefixes
    elif member.arity == 1 and property_namer.is_setter(name, prefixes=config.setter_prefixes):
        mode = AccessMode.SET
        prefixes = config.setter_prefixes
    else:
        return None

    property_name = property_namer.method_to_property(name, prefixes=prefixes)
    if not property_name:
        return None

    if mode is AccessMode.GET:
        value_type = resolve_return_type(member, context)
    else:
        value_type = resolve_parameter_types(member, context)[0]

    return Candidate(property_name=property_name, member=member, mode=mode, value_type=value_type)


def _canonical_key(context: type) -> typing.Callable[[Candidate], tuple[int, str]]:
    depth = {klass: i for i, klass in enumerate(context.__mro__)}
    return lambda candidate: (depth.get(candidate.declaring_type, len(depth)), candidate.name)


def group_candidates(members: Iterable[MemberInfo], mode: AccessMode, context: type, config: ReflectorConfig) -> dict[str, list[Candidate]]:
    """Group the *mode* candidates among *members* by property name.

    Candidates whose property name is internal or reserved are dropped, as are non-public accessors (``_getValue``)
    sharing a property with a public one. Within a group, candidates keep the order of *members*, or are sorted
    by declaring class depth then member name when ``config.canonical_order`` is set.
    """
    groups: dict[str, list[Candidate]] = {}

    for member in members:
        candidate = classify(member, context, config)
        if candidate is None or candidate.mode is not mode:
            continue
        if not config.is_valid_property_name(candidate.property_name):
            log.debug(t"Ignoring {member}: '{candidate.property_name}' is not a valid property name")
            continue
        groups.setdefault(candidate.property_name, []).append(candidate)

    for property_name, candidates in groups.items():
        public = [candidate for candidate in candidates if not candidate.name.startswith(config.internal_marker)]
        if public and len(public) < len(candidates):
            log.debug(t"'{property_name}': ignoring non-public accessors shadowed by a public one")
            groups[property_name] = public

    if config.canonical_order:
        key = _canonical_key(context)
        for candidates in groups.values():
            candidates.sort(key=key)

    return groups
