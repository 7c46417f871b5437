# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

import typing

from frozendict import frozendict
from pydantic_core import core_schema


if typing.TYPE_CHECKING:
    from collections.abc import Mapping

    import pydantic
    import rich.repr


# Add pydantic support for frozendict
class PydanticFrozenDictAnnotation:
    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: typing.Any, handler: pydantic.GetCoreSchemaHandler) -> core_schema.CoreSchema:
        def to_frozendict[K, V](d: Mapping[K, V]) -> frozendict[K, V]:
            return d if isinstance(d, frozendict) else frozendict(d)

        schema = core_schema.no_info_after_validator_function(
            to_frozendict,
            handler.generate_schema(dict[*typing.get_args(source_type)]),  # pyright: ignore[reportInvalidTypeArguments]
        )
        return core_schema.json_or_python_schema(
            json_schema=schema,
            python_schema=schema,
            serialization=core_schema.plain_serializer_function_ser_schema(dict),
        )


_K = typing.TypeVar("_K")
_V = typing.TypeVar("_V")
FrozenDict = typing.Annotated[frozendict[_K, _V], PydanticFrozenDictAnnotation]


def freeze[K, V](mapping: Mapping[K, V]) -> frozendict[K, V]:
    """Return an immutable copy of *mapping*, preserving its iteration order."""
    return mapping if isinstance(mapping, frozendict) else frozendict(mapping)


# Add rich repr support to frozendict
def frozendict_rich_repr(self: frozendict) -> rich.repr.Result:
    for key, value in self.items():
        yield str(key), value


frozendict.__rich_repr__ = frozendict_rich_repr  # pyright: ignore[reportAttributeAccessIssue]
