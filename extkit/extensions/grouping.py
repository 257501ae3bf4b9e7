from __future__ import annotations
import typing
import logging
from collections import defaultdict
from operator import itemgetter
from ..types import *
from ..config import DEFAULTS

if typing.TYPE_CHECKING:
    from ..ordered_map import OrderedMap

logger = logging.getLogger(__name__)

class _GroupingOperations(Generic[K, V]):
    def group_by(self: 'OrderedMap[K, V]',
                 key_extractor: KeyExtractor[V],
                 mapper: Optional[Selector[V, U]] = None,
                 group_name_field: str = DEFAULTS.group_name_field,
                 group_values_field: str = DEFAULTS.group_values_field) -> 'OrderedMap[int, GroupRecord]':
        """
        group values by key_extractor(value) and emit one record per group:
        {group_name_field: group value, group_values_field: [mapper(value), ...]}.

        groups come out in first-seen order and items keep their encounter order
        inside a group. key_extractor may also be a field name, read with value[field].

        the result is re-indexed 0..n-1, unlike drop_where/where which keep the
        original keys. group values must be hashable.
        """
        extract = itemgetter(key_extractor) if isinstance(key_extractor, str) else key_extractor
        project = mapper if mapper is not None else (lambda item: item)

        # dicts keep insertion order, so the first time a group value shows up fixes its position
        groups = defaultdict(list)
        for value in self._get_data().values():
            groups[extract(value)].append(project(value))

        logger.debug(f"group_by produced {len(groups)} groups from {len(self._get_data())} items")
        return self._wrap({
            index: {group_name_field: group_value, group_values_field: items}
            for index, (group_value, items) in enumerate(groups.items())
        })
