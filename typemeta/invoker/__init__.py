# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

from .field_invoker import FieldInvoker, GetFieldInvoker, SetFieldInvoker
from .invoker import Invoker
from .method_invoker import MethodInvoker


__all__ = [
    "FieldInvoker",
    "GetFieldInvoker",
    "Invoker",
    "MethodInvoker",
    "SetFieldInvoker",
]
