# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

import functools

from typing import Self

from pydantic import Field, field_validator

from .util.config import BaseConfigModel


#: Name of the serialization version marker, in both Java-style and Python-style spelling.
SERIAL_VERSION_NAMES: frozenset[str] = frozenset({"serialVersionUID", "serial_version_uid"})

#: Name reserved for the type identifier (e.g. what ``getClass`` would map to).
TYPE_IDENTIFIER_NAME = "class"


class ReflectorConfig(BaseConfigModel):
    """Tunables for how a :class:`~typemeta.reflector.Reflector` discovers properties."""

    getter_prefixes: tuple[str, ...] = Field(default=("get", "is"), description="Name prefixes of zero-argument getter methods")
    setter_prefixes: tuple[str, ...] = Field(default=("set",), description="Name prefixes of single-argument setter methods")
    boolean_prefix: str = Field(default="is", description="Getter prefix preferred when two boolean getters map to the same property")

    internal_marker: str = Field(default="_", min_length=1, description="Properties whose name starts with this marker are never exposed")
    reserved_names: frozenset[str] = Field(
        default=SERIAL_VERSION_NAMES | {TYPE_IDENTIFIER_NAME},
        description="Names that never become properties (serialization version marker, type identifier)",
    )

    allow_private_members: bool = Field(default=True, description="Whether members whose name starts with the internal marker are enumerated at all")
    canonical_order: bool = Field(default=True, description="Sort accessor candidates by declaring class depth then name, for reproducible diagnostics")
    class_cache_enabled: bool = Field(default=True, description="Whether ReflectorFactory caches one Reflector per class")

    @field_validator("getter_prefixes", "setter_prefixes")
    @classmethod
    def _validate_prefixes(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        if not value or any(not prefix for prefix in value):
            msg = "Accessor prefixes must be a non-empty sequence of non-empty strings"
            raise ValueError(msg)
        # Longest first, so that e.g. 'is' never shadows a longer prefix starting with the same letters
        return tuple(sorted(value, key=len, reverse=True))

    def is_valid_property_name(self, name: str) -> bool:
        return bool(name) and not name.startswith(self.internal_marker) and name not in self.reserved_names

    @classmethod
    @functools.cache
    def default(cls) -> Self:
        """Return the shared default configuration."""
        return cls()
