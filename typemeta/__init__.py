# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

# Configuration
from .config import ReflectorConfig
from .defines import AccessMode

# Errors
from .errors import AmbiguousAccessorError, InvocationError, NoDefaultConstructorError, NoSuchPropertyError, ReflectionError

# Cache
from .factory import ReflectorFactory, default_factory

# Accessors
from .invoker import GetFieldInvoker, Invoker, MethodInvoker, SetFieldInvoker
from .reflector import Reflector, TypeMetadata


__all__ = [
    "AccessMode",
    "AmbiguousAccessorError",
    "GetFieldInvoker",
    "InvocationError",
    "Invoker",
    "MethodInvoker",
    "NoDefaultConstructorError",
    "NoSuchPropertyError",
    "ReflectionError",
    "Reflector",
    "ReflectorConfig",
    "ReflectorFactory",
    "SetFieldInvoker",
    "TypeMetadata",
    "default_factory",
]
