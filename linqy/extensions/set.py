from __future__ import annotations
import typing
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable


class _Membership(Generic[T]):
    """hash set with a list fallback for values that cannot be hashed."""

    def __init__(self, items: Iterable[T] = ()):
        self._hashed = set()
        self._unhashable: List[T] = []
        for item in items:
            self.add(item)

    def add(self, item: T) -> None:
        try:
            self._hashed.add(item)
        except TypeError:
            self._unhashable.append(item)

    def __contains__(self, item: T) -> bool:
        try:
            return item in self._hashed
        except TypeError:
            return any(item == seen for seen in self._unhashable)


class SetAccessor(Generic[T]):
    """
    set-style operations over sequences.
    every operation takes an optional equality comparer. without one, python
    equality and hashing are used; with one, elements are compared pairwise,
    which is quadratic but works for any notion of equality.
    """
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def distinct(self, comparer: Optional[EqualityComparer[T]] = None) -> 'Enumerable[T]':
        """return distinct elements. preserves order of first appearance."""
        from ..enumerable import Enumerable
        source = self._enumerable

        def distinct_data():
            if comparer is None:
                seen = _Membership()
                for item in source:
                    if item not in seen:
                        seen.add(item)
                        yield item
            else:
                returned: List[T] = []
                for item in source:
                    if not any(comparer(previous, item) for previous in returned):
                        returned.append(item)
                        yield item
        return Enumerable(distinct_data)

    def union(self, other: Iterable[T], comparer: Optional[EqualityComparer[T]] = None) -> 'Enumerable[T]':
        """return the order-preserving union of two sequences (distinct elements)."""
        return self._enumerable.concat(other).set.distinct(comparer)

    def intersect(self, other: Iterable[T], comparer: Optional[EqualityComparer[T]] = None) -> 'Enumerable[T]':
        """
        keep elements of this sequence that also appear in other.
        the comparer is called as comparer(element_of_this, element_of_other).
        duplicates in this sequence are kept.
        """
        return self._filter_by_presence(other, comparer, keep_present=True)

    def except_(self, other: Iterable[T], comparer: Optional[EqualityComparer[T]] = None) -> 'Enumerable[T]':
        """
        keep elements of this sequence that do not appear in other (set difference).
        the comparer is called as comparer(element_of_this, element_of_other).
        """
        return self._filter_by_presence(other, comparer, keep_present=False)

    def _filter_by_presence(self, other: Iterable[T], comparer: Optional[EqualityComparer[T]],
                            keep_present: bool) -> 'Enumerable[T]':
        from ..enumerable import Enumerable
        source = self._enumerable

        def filter_data():
            if comparer is None:
                # built once per traversal, so a re-iterable other is re-read every time
                lookup = _Membership(other)
                for item in source:
                    if (item in lookup) == keep_present:
                        yield item
            else:
                for item in source:
                    if any(comparer(item, candidate) for candidate in other) == keep_present:
                        yield item
        return Enumerable(filter_data)
