# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

"""Pick one accessor per property among competing candidates.

Getters are folded left to right. Equal return types are only acceptable for
booleans, where the candidate using the boolean prefix (``isFoo`` over
``getFoo``) wins. Otherwise the candidate with the narrower return type wins,
which is what a covariant override looks like; unrelated return types are
ambiguous. Types are compared as declared on the members, before the type
parameters of generic ancestors are substituted.

Setters prefer the candidate whose parameter type is exactly the type of the
resolved getter. Failing that, the narrower parameter type wins and unrelated
parameter types are ambiguous.
"""

import typing

from collections.abc import Sequence

from .defines import AccessMode
from .errors import AmbiguousAccessorError
from .util.helpers.type_hints import is_assignable
from .util.logging import getLogger


if typing.TYPE_CHECKING:
    from .classifier import Candidate
    from .config import ReflectorConfig


log = getLogger(__name__)


# MARK: Getters
def _ambiguous_getter(property_name: str, winner: Candidate, candidate: Candidate) -> AmbiguousAccessorError:
    msg = (
        f"Illegal overloaded getter method with ambiguous type for property '{property_name}' in class '{winner.declaring_type.__qualname__}'. "
        "This breaks the accessor naming convention and can cause unpredictable results."
    )
    log.info(t"Rejecting getters {winner.member} and {candidate.member} for '{property_name}': ambiguous return types")
    return AmbiguousAccessorError(
        msg,
        property_name=property_name,
        declaring_type=winner.declaring_type,
        mode=AccessMode.GET,
        types=(winner.value_type, candidate.value_type),
    )


def resolve_getter(property_name: str, candidates: Sequence[Candidate], config: ReflectorConfig) -> Candidate:
    """Return the getter backing *property_name* among *candidates*.

    Return types are compared as declared on each member, so an override returning the type bound to an ancestor's
    type parameter narrows the ancestor's getter instead of duplicating it.

    Raises:
        AmbiguousAccessorError: If two candidates have the same non-boolean return type, or unrelated return types.

    """
    if not candidates:
        msg = f"No getter candidates for property '{property_name}'"
        raise ValueError(msg)

    winner = candidates[0]
    for candidate in candidates[1:]:
        winner_type = winner.declared_type
        candidate_type = candidate.declared_type

        if candidate_type is winner_type:
            if candidate.value_type is not bool or winner.value_type is not bool:
                raise _ambiguous_getter(property_name, winner, candidate)
            if candidate.name.lstrip(config.internal_marker).startswith(config.boolean_prefix):
                log.debug(t"'{property_name}': boolean getter {candidate.member} preferred over {winner.member}")
                winner = candidate
        elif is_assignable(candidate_type, winner_type):
            # Covariant return, the current winner is already the narrower one
            pass
        elif is_assignable(winner_type, candidate_type):
            log.debug(t"'{property_name}': {candidate.member} narrows the return type of {winner.member}")
            winner = candidate
        else:
            raise _ambiguous_getter(property_name, winner, candidate)

    return winner


# MARK: Setters
def _pick_better_setter(property_name: str, winner: Candidate, candidate: Candidate) -> Candidate:
    winner_type = winner.declared_type
    candidate_type = candidate.declared_type

    if winner_type is candidate_type:
        return winner
    if is_assignable(winner_type, candidate_type):
        return candidate
    if is_assignable(candidate_type, winner_type):
        return winner

    msg = (
        f"Ambiguous setters defined for property '{property_name}' in class '{candidate.declaring_type.__qualname__}' "
        f"with types '{winner.value_type.__qualname__}' and '{candidate.value_type.__qualname__}'."
    )
    raise AmbiguousAccessorError(
        msg,
        property_name=property_name,
        declaring_type=candidate.declaring_type,
        mode=AccessMode.SET,
        types=(winner.value_type, candidate.value_type),
    )


def resolve_setter(property_name: str, candidates: Sequence[Candidate], getter_type: type | None = None) -> Candidate:
    """Return the setter backing *property_name* among *candidates*.

    A candidate whose resolved parameter type is *getter_type* wins outright, even when other candidates are
    ambiguous. Otherwise parameter types are compared as declared on each member.

    Raises:
        AmbiguousAccessorError: If no candidate matches *getter_type* and two candidates have unrelated parameter types.

    """
    if not candidates:
        msg = f"No setter candidates for property '{property_name}'"
        raise ValueError(msg)

    for candidate in candidates:
        if candidate.value_type is getter_type:
            log.debug(t"'{property_name}': setter {candidate.member} matches the getter type")
            return candidate

    winner = candidates[0]
    for candidate in candidates[1:]:
        try:
            winner = _pick_better_setter(property_name, winner, candidate)
        except AmbiguousAccessorError as err:
            log.info(t"Rejecting setters for '{property_name}': {err}")
            raise
    return winner
