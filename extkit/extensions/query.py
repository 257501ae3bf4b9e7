from __future__ import annotations
import typing
from ..types import *
from ..config import DEFAULTS

if typing.TYPE_CHECKING:
    from ..ordered_map import OrderedMap
    from ..text import TextValue

class _QueryOperations(Generic[K, V]):
    def contains(self: 'OrderedMap[K, V]', value: Any) -> bool:
        """true if any value equals the given one (plain == comparison)"""
        return any(item == value for item in self._get_data().values())

    def contains_key(self: 'OrderedMap[K, V]', key: Any) -> bool:
        """true if the key is present, even when its value is None or empty"""
        return key in self

    def is_set(self: 'OrderedMap[K, V]', key: Any) -> bool:
        """true if the key is present and its value is not None"""
        return self[key] is not None

    def first(self: 'OrderedMap[K, V]', default: Optional[V] = None) -> Optional[V]:
        """
        first value in insertion order.
        an empty map gives `default` (None unless told otherwise), never an error.
        """
        return next(iter(self._get_data().values()), default)

    def last(self: 'OrderedMap[K, V]', default: Optional[V] = None) -> Optional[V]:
        """last value in insertion order, `default` on an empty map"""
        return next(reversed(self._get_data().values()), default)

    def count(self: 'OrderedMap[K, V]', predicate: Optional[Predicate[V, K]] = None) -> int:
        """number of pairs, optionally only those matching predicate(value, key)"""
        if predicate is None: return len(self._get_data())
        return sum(1 for key, value in self._get_data().items() if predicate(value, key))

    def is_empty(self: 'OrderedMap[K, V]') -> bool:
        return not self._get_data()

    def join_to_string(self: 'OrderedMap[K, V]', separator: str = DEFAULTS.separator) -> 'TextValue':
        """
        str() of every value joined by separator. a TextValue renders as its raw text.
        whatever str() does with an odd value is what ends up in the output.
        """
        from ..text import TextValue
        return TextValue(separator.join(str(value) for value in self._get_data().values()))
