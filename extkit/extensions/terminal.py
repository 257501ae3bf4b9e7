from __future__ import annotations
import typing
import json
import numpy as np
import pandas as pd
from ..types import *
from ..config import DEFAULTS

if typing.TYPE_CHECKING:
    from ..ordered_map import OrderedMap


def _is_sequential(data: Dict[Any, Any]) -> bool:
    """true when the keys are exactly 0..n-1 in order, i.e. the map is really a list"""
    return all(key == index and type(key) is int for index, key in enumerate(data))


def _to_plain(value: Any) -> Any:
    """recursively turn maps and text values into json-ready builtins"""
    from ..ordered_map import _BaseOrderedMap
    from ..text import TextValue
    if isinstance(value, _BaseOrderedMap):
        data = value._get_data()
        if _is_sequential(data):
            return [_to_plain(item) for item in data.values()]
        return {str(key): _to_plain(item) for key, item in data.items()}
    if isinstance(value, TextValue):
        return str(value)
    if isinstance(value, dict):
        return {str(key): _to_plain(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_to_plain(item) for item in value]
    return value


class TerminalAccessor(Generic[K, V]):
    def __init__(self, map_instance: 'OrderedMap[K, V]'):
        self._map = map_instance

    def list(self) -> List[V]:
        """values as a list"""
        return list(self._map._get_data().values())

    def dict(self) -> Dict[K, V]:
        """a shallow copy of the pairs as a plain dict"""
        return dict(self._map._get_data())

    def pairs(self) -> List[Pair]:
        """(key, value) tuples in insertion order"""
        return list(self._map._get_data().items())

    def json(self, **kwargs: Any) -> str:
        """
        json text. 0..n-1 keyed maps encode as arrays, anything else as objects
        with stringified keys. unknown values fall back to str().
        """
        kwargs.setdefault('ensure_ascii', DEFAULTS.json_ensure_ascii)
        kwargs.setdefault('default', str)
        return json.dumps(_to_plain(self._map), **kwargs)

    def array(self) -> np.ndarray:
        """values as a numpy array"""
        return np.array(self.list())

    def series(self) -> pd.Series:
        """values as a pandas series indexed by the map keys"""
        data = self._map._get_data()
        return pd.Series(list(data.values()), index=list(data.keys()), dtype=object if not data else None)

    def df(self) -> pd.DataFrame:
        """record-like values as a pandas dataframe, one row per pair, indexed by the map keys"""
        data = self._map._get_data()
        return pd.DataFrame([_to_plain(value) for value in data.values()], index=list(data.keys()))
