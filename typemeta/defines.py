# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

import enum
import typing

import pydantic


class AccessMode(enum.StrEnum):
    """Whether a property is being read or written."""

    GET = "getter"
    SET = "setter"


#: Classes whose members never become properties. ``object`` is the universal root; the other entries are typing and
#: pydantic infrastructure that appears in the MRO of user classes.
ROOT_TYPES: frozenset[type] = frozenset({object, typing.Generic, typing.Protocol, pydantic.BaseModel})
