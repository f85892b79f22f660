from __future__ import annotations
import typing
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable

class JoinAccessor(Generic[T]):
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def _matching(self, inner: Iterable[U], outer_key: K, inner_key_selector: KeySelector[U, K],
                  comparer: EqualityComparer[K]) -> 'Enumerable[U]':
        from ..factories import from_iterable
        return from_iterable(inner).where(lambda inner_item: comparer(outer_key, inner_key_selector(inner_item)))

    def join(self, inner: Iterable[U], outer_key_selector: KeySelector[T, K],
             inner_key_selector: KeySelector[U, K],
             result_selector: Callable[[T, U], V],
             comparer: Optional[EqualityComparer[K]] = None) -> 'Enumerable[V]':
        """inner join two sequences based on matching keys"""
        matches = comparer or default_equals
        return self._enumerable.select_many(
            lambda outer_item: self._matching(inner, outer_key_selector(outer_item), inner_key_selector, matches),
            result_selector)

    def group_join(self, inner: Iterable[U], outer_key_selector: KeySelector[T, K],
                   inner_key_selector: KeySelector[U, K],
                   result_selector: Callable[[T, 'Enumerable[U]'], V],
                   comparer: Optional[EqualityComparer[K]] = None) -> 'Enumerable[V]':
        """
        group join - pairs every outer element with the lazy sequence of inner
        elements whose key matches. outer elements without matches get an empty sequence.
        """
        matches = comparer or default_equals
        return self._enumerable.select(
            lambda outer_item: result_selector(
                outer_item, self._matching(inner, outer_key_selector(outer_item), inner_key_selector, matches)))
