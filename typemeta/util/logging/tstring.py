# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

"""Allow PEP 750 template strings to be passed directly as log messages.

Interpolations are only rendered when a handler actually formats the record, so ``log.debug(t"...")`` costs nothing when debug logging is disabled.
"""

import functools
import logging

from string.templatelib import Interpolation, Template
from typing import Literal


def _convert(value: object, conversion: Literal["a", "r", "s"] | None) -> object:
    match conversion:
        case "a":
            return ascii(value)
        case "r":
            return repr(value)
        case "s":
            return str(value)
        case _:
            return value


def render(template: Template) -> str:
    """Render *template* exactly as the equivalent f-string would."""
    parts = []
    for item in template:
        match item:
            case str() as s:
                parts.append(s)
            case Interpolation(value, _, conversion, format_spec):
                parts.append(format(_convert(value, conversion), format_spec))
    return "".join(parts)


logging_logrecord_getMessage = logging.LogRecord.getMessage  # noqa: N816 matches logging.LogRecord.getMessage


@functools.wraps(logging.LogRecord.getMessage)
def getMessage(self: logging.LogRecord) -> str:  # noqa: N802 matches logging.LogRecord.getMessage
    if isinstance(self.msg, Template):
        return render(self.msg)
    return logging_logrecord_getMessage(self)


logging.LogRecord.getMessage = getMessage
