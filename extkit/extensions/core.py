from __future__ import annotations
import typing
from itertools import islice
from ..types import *

if typing.TYPE_CHECKING:
    from ..ordered_map import OrderedMap

class _CoreOperations(Generic[K, V]):
    def for_each(self: 'OrderedMap[K, V]', callback: Callback[V, K]) -> 'OrderedMap[K, V]':
        """
        calls callback(value, key) for every pair in insertion order, for side-effects.
        returns the same instance, not a copy, so chains keep working on it.
        """
        for key, value in self._get_data().items():
            callback(value, key)
        return self

    def map(self: 'OrderedMap[K, V]', mapper: Mapper[V, K, U]) -> 'OrderedMap[K, U]':
        """replace every value with mapper(value, key), keeping keys and order"""
        return self._wrap({key: mapper(value, key) for key, value in self._get_data().items()})

    def drop_where(self: 'OrderedMap[K, V]', predicate: Predicate[V, K]) -> 'OrderedMap[K, V]':
        """drop the pairs matching the predicate. surviving pairs keep their original keys"""
        return self._wrap({key: value for key, value in self._get_data().items() if not predicate(value, key)})

    def where(self: 'OrderedMap[K, V]', predicate: Predicate[V, K]) -> 'OrderedMap[K, V]':
        """keep only the pairs matching the predicate, keys untouched"""
        return self._wrap({key: value for key, value in self._get_data().items() if predicate(value, key)})

    def keys(self: 'OrderedMap[K, V]') -> 'OrderedMap[int, K]':
        """all keys as a new 0-indexed map"""
        return self._wrap(dict(enumerate(self._get_data().keys())))

    def values(self: 'OrderedMap[K, V]') -> 'OrderedMap[int, V]':
        """all values as a new 0-indexed map"""
        return self._wrap(dict(enumerate(self._get_data().values())))

    def sub_array_before_last(self: 'OrderedMap[K, V]') -> 'OrderedMap[K, V]':
        """everything but the last pair. an empty map gives an empty map"""
        data = self._get_data()
        return self._wrap(dict(islice(data.items(), max(len(data) - 1, 0))))
