from __future__ import annotations
import typing
from itertools import zip_longest
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable


class ZipAccessor(Generic[T]):
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def zip_with(self, other: Iterable[U],
                 result_selector: Optional[Callable[[T, U], V]] = None) -> 'Enumerable[Any]':
        """pair elements in lock-step, stopping at the shorter sequence. pairs are tuples by default"""
        from ..enumerable import Enumerable
        def zip_data():
            for t, u in zip(self._enumerable, other):
                yield (t, u) if result_selector is None else result_selector(t, u)
        return Enumerable(zip_data)

    def zip_longest_with(self, other: Iterable[U],
                         result_selector: Callable[[Optional[T], Optional[U]], V],
                         default_self: Optional[T] = None, default_other: Optional[U] = None) -> 'Enumerable[V]':
        """zip sequences padding shorter with defaults"""
        from ..enumerable import Enumerable
        def zip_longest_data():
            # use a sentinel object to distinguish from a fill value of none
            sentinel = object()
            for t, u in zip_longest(self._enumerable, other, fillvalue=sentinel):
                s_item = t if t is not sentinel else default_self
                o_item = u if u is not sentinel else default_other
                yield result_selector(s_item, o_item)

        return Enumerable(zip_longest_data)
