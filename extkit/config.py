import re
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping


@dataclass(frozen=True)
class Defaults:
    """library-wide default arguments. frozen, customise per call instead"""
    separator: str = ','
    group_name_field: str = 'name'
    group_values_field: str = 'values'
    json_ensure_ascii: bool = False
    regex_delimiter: str = '/'
    regex_flags: Mapping[str, int] = field(default_factory=lambda: MappingProxyType({
        'i': re.IGNORECASE,
        'm': re.MULTILINE,
        's': re.DOTALL,
        'x': re.VERBOSE,
    }))


DEFAULTS = Defaults()
