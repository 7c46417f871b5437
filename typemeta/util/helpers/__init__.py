# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

from . import generics, script_info, type_hints
from .frozendict import FrozenDict, freeze


__all__ = [
    "FrozenDict",
    "freeze",
    "generics",
    "script_info",
    "type_hints",
]
