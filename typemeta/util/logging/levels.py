# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

import logging

from typing import Annotated, Any

from pydantic import BeforeValidator, PlainSerializer


LEVELS : dict[str, int] = {
    "CRITICAL": logging.CRITICAL,
    "ERROR"   : logging.ERROR   ,
    "WARNING" : logging.WARNING ,
    "INFO"    : logging.INFO    ,
    "DEBUG"   : logging.DEBUG   ,
    "NOTSET"  : logging.NOTSET  ,
    "OFF"     : -1,
}  # fmt: skip

REVERSE_LEVELS: dict[int, str] = {v: k for k, v in LEVELS.items()}

#: Level value meaning "handler disabled".
OFF = LEVELS["OFF"]


def coerce(value: Any) -> int:
    """Convert a level name, number or boolean into a numeric logging level.

    ``"OFF"``/``False`` map to ``-1`` (disabled) and ``True`` maps to ``INFO``.

    Raises:
        ValueError: If *value* is an unknown level name or a number below ``-1``.
        TypeError: If *value* is of an unsupported type.

    """
    if isinstance(value, bool):
        return logging.INFO if value else OFF

    if isinstance(value, str):
        upper = value.strip().upper()
        if upper in LEVELS:
            level = LEVELS[upper]
        elif upper == "FALSE":
            level = OFF
        else:
            try:
                level = int(upper)
            except ValueError as err:
                msg = f"Unknown logging level string: {value}"
                raise ValueError(msg) from err
    elif isinstance(value, int):
        level = value
    else:
        msg = f"Invalid type for logging level: {type(value)}"
        raise TypeError(msg)

    if level < OFF:
        msg = f"Invalid value for logging level: {level}"
        raise ValueError(msg)

    return level


def level_name(level: int) -> str:
    return REVERSE_LEVELS.get(level, str(level))


#: Pydantic-aware logging level, accepting names (``"debug"``), numbers and booleans.
LoggingLevel = Annotated[int, BeforeValidator(coerce), PlainSerializer(level_name, return_type=str)]
