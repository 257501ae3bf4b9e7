import re
from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Hashable, Mapping
)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')

# callbacks receive (value, key), the value first
Callback = Callable[[V, K], Any]
Predicate = Callable[[V, K], bool]
Mapper = Callable[[V, K], U]
Selector = Callable[[V], U]
KeyExtractor = Union[Callable[[V], Hashable], str]

Pair = Tuple[K, V]
GroupRecord = Dict[str, Any]


class CompileResult:
    """outcome of a pattern compilation attempt; never carries a raised error"""

    def __init__(self, source: str, pattern: Optional[re.Pattern] = None, error: Optional[str] = None):
        self.source = source
        self.pattern = pattern
        self.error = error

    @property
    def ok(self) -> bool: return self.pattern is not None

    def __bool__(self) -> bool:
        return self.ok

    def __repr__(self) -> str:
        if self.ok:
            return f"CompileResult(source={self.source!r}, ok=True)"
        return f"CompileResult(source={self.source!r}, ok=False, error={self.error!r})"
