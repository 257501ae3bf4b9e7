from __future__ import annotations

from abc import ABC, abstractmethod
from .types import *

# --- operations ---
from .extensions.core import _CoreOperations
from .extensions.query import _QueryOperations
from .extensions.grouping import _GroupingOperations

# --- accessors ---
from .extensions.terminal import TerminalAccessor

# --- abstract base class ---

class IOrderedMap(ABC, Generic[K, V]):
    @abstractmethod
    def _get_data(self) -> Dict[K, V]:
        """get the underlying insertion-ordered dict"""
        pass

# --- base implementation ---

class _BaseOrderedMap(IOrderedMap[K, V]):
    def __init__(self, data: Union[Mapping[K, V], Iterable[V], None] = None):
        """init from a mapping (keys kept) or any iterable (keys 0..n-1). the input is copied."""
        if data is None:
            self._data: Dict[K, V] = {}
        elif isinstance(data, _BaseOrderedMap):
            self._data = dict(data._get_data())
        elif isinstance(data, Mapping):
            self._data = dict(data)
        elif isinstance(data, (str, bytes)):
            raise TypeError("strings are not containers here, use TextValue.split instead")
        else:
            self._data = dict(enumerate(data))

    def _get_data(self) -> Dict[K, V]:
        return self._data

    @classmethod
    def _wrap(cls, data: Dict[Any, Any]) -> 'OrderedMap[Any, Any]':
        """build a new instance around an already fresh dict without copying it again"""
        instance = cls()
        instance._data = data
        return instance

    # --- indexed access, the only mutating surface ---

    def __getitem__(self, key: K) -> Optional[V]:
        try:
            return self._data.get(key)
        except TypeError:
            # unhashable keys can never be stored, so they read as missing
            return None

    def __setitem__(self, key: K, value: V) -> None:
        self._data[key] = value

    def __delitem__(self, key: K) -> None:
        self._data.pop(key, None)

    def append(self, value: V) -> 'OrderedMap[K, V]':
        """store value under the next integer key: one past the largest integer key, 0 if there is none"""
        int_keys = [k for k in self._data if isinstance(k, int) and not isinstance(k, bool)]
        next_key = max(int_keys) + 1 if int_keys else 0
        self._data[next_key] = value
        return self

    # --- protocol plumbing ---

    def __contains__(self, key: object) -> bool:
        try:
            return key in self._data
        except TypeError:
            return False

    def __iter__(self) -> Iterator[V]:
        return iter(self._data.values())

    def __len__(self) -> int:
        return len(self._data)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, _BaseOrderedMap):
            return list(self._data.items()) == list(other._get_data().items())
        return NotImplemented

    __hash__ = None

    def items(self) -> Iterator[Pair]:
        return iter(self._data.items())

    def __repr__(self) -> str:
        return f"OrderedMap({self._data!r})"

    def __str__(self) -> str:
        return self.to.json()

# --- main ordered map class ---

class OrderedMap(
    _BaseOrderedMap[K, V],
    _CoreOperations[K, V],
    _QueryOperations[K, V],
    _GroupingOperations[K, V]
):
    """an insertion-ordered key-value container whose transformations always return a new map."""
    def __init__(self, data: Union[Mapping[K, V], Iterable[V], None] = None):
        super().__init__(data)
        # --- initialize accessors ---
        self.to = TerminalAccessor(self)
