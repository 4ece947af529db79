## argvee — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import re
import math
from typing import Any, Literal
from dataclasses import dataclass

from .errors import InvalidOptionType


class OptionType:
    BOOLEAN = 'boolean'
    STRING = 'string'
    NUMBER = 'number'

OPTION_TYPES = (OptionType.BOOLEAN, OptionType.STRING, OptionType.NUMBER)

OptionTypeName = Literal['boolean', 'string', 'number']


_RADIX_PREFIX = re.compile(r'^0[xXoObB]')

def _to_number(raw: str) -> int | float | None:
    text = raw.strip()
    if not text or '_' in text: return None
    try:
        return int(text, 0) if _RADIX_PREFIX.match(text) else int(text)
    except ValueError:
        pass
    try:
        value = float(text)
    except ValueError:
        return None
    return None if math.isnan(value) else value


@dataclass(frozen=True)
class Option:
    """Declaration of a single recognized option, immutable once built."""
    description: str | None = None
    type: OptionTypeName = OptionType.BOOLEAN
    alias: str | None = None

    def __post_init__(self):
        if self.type not in OPTION_TYPES:
            raise InvalidOptionType(self.type)

    @classmethod
    def from_descriptor(cls, desc: 'Option | dict | str | None' = None) -> 'Option':
        """Accepts an existing Option, a bare description (boolean), or a mapping."""
        if isinstance(desc, Option): return desc
        if desc is None: return cls()
        if isinstance(desc, str): return cls(description=desc)

        type_ = desc.get('type')
        return cls(description=desc.get('description'),
                   type=OptionType.BOOLEAN if type_ is None else type_,
                   alias=desc.get('alias'))

    @property
    def requires_value(self) -> bool:
        return self.type != OptionType.BOOLEAN

    def parsed_value(self, value: str) -> Any | None:
        """Cast the raw text to this option's type, or None if it can't be."""
        if self.type == OptionType.NUMBER:
            return _to_number(value)
        return value
