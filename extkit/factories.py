import typing
from .types import *

if typing.TYPE_CHECKING:
    from .ordered_map import OrderedMap
    from .text import TextValue

def ext_map(data: Union[Mapping[K, V], Iterable[V], None] = None) -> 'OrderedMap[Any, V]':
    """create an ordered map from a mapping (keys kept) or an iterable (keys 0..n-1)"""
    from .ordered_map import OrderedMap
    return OrderedMap(data)

def from_pairs(pairs: Iterable[Pair]) -> 'OrderedMap[K, V]':
    """create an ordered map from (key, value) tuples. a repeated key keeps its first position and last value"""
    from .ordered_map import OrderedMap
    return OrderedMap(dict(pairs))

def empty() -> 'OrderedMap[Any, Any]':
    """create an empty ordered map"""
    from .ordered_map import OrderedMap
    return OrderedMap()

def ext_str(text: Union[str, 'TextValue'] = '') -> 'TextValue':
    """wrap text in a TextValue"""
    from .text import TextValue
    return TextValue(text)

# --- aliases ---
M = ext_map
S = ext_str
