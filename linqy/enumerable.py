from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from functools import cmp_to_key
from .types import *

# --- core functionality ---
from .extensions.core import _CoreOperations

# --- accessors ---
from .extensions.set import SetAccessor
from .extensions.join import JoinAccessor
from .extensions.grouping import GroupingAccessor
from .extensions.stats import StatsAccessor
from .extensions.utility import UtilityAccessor
from .extensions.terminal import TerminalAccessor
from .extensions.zip import ZipAccessor

logger = logging.getLogger(__name__)

# --- abstract base class ---

class IEnumerable(ABC, Generic[T]):
    @abstractmethod
    def _iterate(self) -> Iterator[T]:
        """start a fresh traversal of the underlying source"""
        pass

# --- base enumerable implementation ---

class _BaseEnumerable(IEnumerable[T]):
    def __init__(self, data_func: DataFunc[T]):
        """init with a production step: a function returning a fresh iterator each call"""
        self._data_func = data_func

    def _iterate(self) -> Iterator[T]:
        """re-run the production step; nothing is cached between traversals"""
        return iter(self._data_func())

    def __iter__(self) -> Iterator[T]:
        return self._iterate()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(<deferred>)"

# --- main enumerable class ---

class Enumerable(
    _BaseEnumerable[T],
    _CoreOperations[T]
):
    """a lazy, linq-inspired sequence over any python iterable."""
    def __init__(self, data_func: DataFunc[T]):
        super().__init__(data_func)
        # --- initialize accessors ---
        self.set = SetAccessor(self)
        self.join = JoinAccessor(self)
        self.zip = ZipAccessor(self)
        self.group = GroupingAccessor(self)
        self.stats = StatsAccessor(self)
        self.util = UtilityAccessor(self)
        self.to = TerminalAccessor(self)

# --- grouping result ---

class Group(Enumerable[T], Generic[K, T]):
    """a sequence of elements that share a common key."""

    def __init__(self, key: K, data_func: DataFunc[T]):
        super().__init__(data_func)
        self._key = key

    @property
    def key(self) -> K:
        return self._key

    def __repr__(self) -> str:
        return f"Group(key={self._key!r})"

# --- ordering helpers ---

def _directional(comparer: Optional[Comparer[K]], descending: bool) -> Comparer[K]:
    compare = comparer or default_compare
    if descending:
        return lambda a, b: -compare(a, b)
    return compare


def _sort_pairs(pairs: Iterable[Tuple[Tuple, T]], key_selector: KeySelector[T, K],
                compare: Comparer[K]) -> List[Tuple[Tuple, T]]:
    """stable sort of (keys, item) pairs on a new key, appended to each key tuple"""
    keyed = [(keys + (key_selector(item),), item) for keys, item in pairs]
    keyed.sort(key=cmp_to_key(lambda left, right: compare(left[0][-1], right[0][-1])))
    return keyed


def _runs(pairs: Iterator[Tuple[Tuple, T]], comparers: List[Comparer]) -> Iterator[List[Tuple[Tuple, T]]]:
    """split sorted pairs into consecutive runs whose keys compare equal on every level"""
    def same_keys(a: Tuple, b: Tuple) -> bool:
        return all(compare(x, y) == 0 for compare, x, y in zip(comparers, a, b))

    current: List[Tuple[Tuple, T]] = []
    for pair in pairs:
        if current and not same_keys(current[-1][0], pair[0]):
            yield current
            current = []
        current.append(pair)
    if current:
        yield current

# --- ordered enumerable class ---

class OrderedEnumerable(Enumerable[T]):
    """represents a sorted sequence, allowing for subsequent orderings."""

    def __init__(self, pairs_func: DataFunc[Tuple[Tuple, T]], comparers: List[Comparer]):
        self._pairs_func = pairs_func
        self._comparers = comparers
        super().__init__(self._values)

    def _values(self) -> Iterator[T]:
        for _, item in self._pairs_func():
            yield item

    @classmethod
    def _from_source(cls, source: 'Enumerable[T]', key_selector: KeySelector[T, K],
                     comparer: Optional[Comparer[K]], descending: bool) -> 'OrderedEnumerable[T]':
        compare = _directional(comparer, descending)

        def sorted_pairs():
            # sorting needs the whole input, so each traversal materializes it here
            pairs = _sort_pairs((((), item) for item in source), key_selector, compare)
            logger.debug(f"sorted {len(pairs)} elements")
            yield from pairs

        return cls(sorted_pairs, [compare])

    def _then(self, key_selector: KeySelector[T, K], comparer: Optional[Comparer[K]],
              descending: bool) -> 'OrderedEnumerable[T]':
        compare = _directional(comparer, descending)
        prior = self._comparers

        def then_pairs():
            for run in _runs(iter(self._pairs_func()), prior):
                yield from _sort_pairs(run, key_selector, compare)

        return OrderedEnumerable(then_pairs, prior + [compare])

    def then_by(self, key_selector: KeySelector[T, K],
                comparer: Optional[Comparer[K]] = None) -> 'OrderedEnumerable[T]':
        """secondary sort ascending, applied within runs of equal prior keys"""
        return self._then(key_selector, comparer, False)

    def then_by_descending(self, key_selector: KeySelector[T, K],
                           comparer: Optional[Comparer[K]] = None) -> 'OrderedEnumerable[T]':
        """secondary sort descending"""
        return self._then(key_selector, comparer, True)
