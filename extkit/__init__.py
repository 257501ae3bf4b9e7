r"""
'    ________  _______   ____  __._____________
'    \_   _____/\   \/  /  |    |/ _\__    ___/
'     |    __)_  \     /   |      <   |    |
'     |        \ /     \   |    |  \  |    |
'    /_______  //___/\  \  |____|__ \ |____|
'            \/       \_/          \/
"""

# expose the main classes
from .ordered_map import OrderedMap
from .text import TextValue, try_compile

# expose the factory functions
from .factories import (
    ext_map,
    from_pairs,
    empty,
    ext_str,
    M,
    S
)

# expose supporting data classes and settings
from .types import CompileResult
from .config import Defaults, DEFAULTS

# define what `import *` does
__all__ = [
    "OrderedMap",
    "TextValue",
    "try_compile",
    "ext_map",
    "from_pairs",
    "empty",
    "ext_str",
    "M",
    "S",
    "CompileResult",
    "Defaults",
    "DEFAULTS"
]
