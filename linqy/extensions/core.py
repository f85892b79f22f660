from __future__ import annotations
import typing
from itertools import chain, islice, takewhile, dropwhile
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable, OrderedEnumerable

class _CoreOperations(Generic[T]):
    def where(self: 'Enumerable[T]', predicate: Predicate[T]) -> 'Enumerable[T]':
        """filter elements based on a predicate"""
        from ..enumerable import Enumerable
        def filter_data():
            for item in self:
                if predicate(item):
                    yield item
        return Enumerable(filter_data)

    def where_with_index(self: 'Enumerable[T]', predicate: Callable[[T, int], bool]) -> 'Enumerable[T]':
        """filter elements using the element and its position in the source"""
        from ..enumerable import Enumerable
        def filter_with_index_data():
            for index, item in enumerate(self):
                if predicate(item, index):
                    yield item
        return Enumerable(filter_with_index_data)

    def select(self: 'Enumerable[T]', selector: Selector[T, U]) -> 'Enumerable[U]':
        """project each element to a new form"""
        from ..enumerable import Enumerable
        def map_data():
            for item in self:
                yield selector(item)
        return Enumerable(map_data)

    def select_with_index(self: 'Enumerable[T]', selector: Callable[[T, int], U]) -> 'Enumerable[U]':
        """project each element to a new form, using the element's index"""
        from ..enumerable import Enumerable
        def map_with_index_data():
            for index, item in enumerate(self):
                yield selector(item, index)
        return Enumerable(map_with_index_data)

    def select_many(self: 'Enumerable[T]', selector: Selector[T, Iterable[U]],
                    result_selector: Optional[Callable[[T, U], V]] = None) -> 'Enumerable[Any]':
        """project and flatten sequences, optionally combining each parent with its children"""
        from ..enumerable import Enumerable
        def flat_map_data():
            for item in self:
                for child in selector(item):
                    yield child if result_selector is None else result_selector(item, child)
        return Enumerable(flat_map_data)

    def select_many_with_index(self: 'Enumerable[T]', selector: Callable[[T, int], Iterable[U]],
                               result_selector: Optional[Callable[[T, U], V]] = None) -> 'Enumerable[Any]':
        """select_many where the selector also receives the parent's index"""
        from ..enumerable import Enumerable
        def flat_map_with_index_data():
            for index, item in enumerate(self):
                for child in selector(item, index):
                    yield child if result_selector is None else result_selector(item, child)
        return Enumerable(flat_map_with_index_data)

    def order_by(self: 'Enumerable[T]', key_selector: KeySelector[T, K],
                 comparer: Optional[Comparer[K]] = None) -> 'OrderedEnumerable[T]':
        """stable sort by a key. comparer is a three-way function returning <0, 0 or >0"""
        from ..enumerable import OrderedEnumerable
        return OrderedEnumerable._from_source(self, key_selector, comparer, False)

    def order_by_descending(self: 'Enumerable[T]', key_selector: KeySelector[T, K],
                            comparer: Optional[Comparer[K]] = None) -> 'OrderedEnumerable[T]':
        """stable sort by a key in descending order (the comparer result is negated)"""
        from ..enumerable import OrderedEnumerable
        return OrderedEnumerable._from_source(self, key_selector, comparer, True)

    def take(self: 'Enumerable[T]', count: int) -> 'Enumerable[T]':
        """take the first 'count' elements. a negative count takes everything"""
        from ..enumerable import Enumerable
        if count < 0:
            return Enumerable(self._iterate)
        # islice stops before pulling the element after the cutoff
        return Enumerable(lambda: islice(self, count))

    def skip(self: 'Enumerable[T]', count: int) -> 'Enumerable[T]':
        """skip the first 'count' elements. the skipped prefix is still pulled"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: islice(self, max(count, 0), None))

    def take_while(self: 'Enumerable[T]', predicate: Predicate[T]) -> 'Enumerable[T]':
        """take elements while predicate is true"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: takewhile(predicate, self))

    def skip_while(self: 'Enumerable[T]', predicate: Predicate[T]) -> 'Enumerable[T]':
        """skip elements while predicate is true"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: dropwhile(predicate, self))

    def take_while_with_index(self: 'Enumerable[T]', predicate: Callable[[T, int], bool]) -> 'Enumerable[T]':
        """take elements while predicate(element, index) is true"""
        from ..enumerable import Enumerable
        def take_while_with_index_data():
            for index, item in enumerate(self):
                if not predicate(item, index):
                    return
                yield item
        return Enumerable(take_while_with_index_data)

    def skip_while_with_index(self: 'Enumerable[T]', predicate: Callable[[T, int], bool]) -> 'Enumerable[T]':
        """skip elements while predicate(element, index) is true, then yield the rest"""
        from ..enumerable import Enumerable
        def skip_while_with_index_data():
            skipping = True
            for index, item in enumerate(self):
                if skipping and predicate(item, index):
                    continue
                skipping = False
                yield item
        return Enumerable(skip_while_with_index_data)

    def reverse(self: 'Enumerable[T]') -> 'Enumerable[T]':
        """inverts the order of the elements in a sequence"""
        from ..enumerable import Enumerable
        def reversed_data():
            return reversed(list(self))
        return Enumerable(reversed_data)

    def take_last(self: 'Enumerable[T]', count: int) -> 'Enumerable[T]':
        """take the last 'count' elements. zero or a negative count gives an empty sequence"""
        from ..factories import empty
        if count <= 0:
            return empty()
        return self.reverse().take(count).reverse()

    def skip_last(self: 'Enumerable[T]', count: int) -> 'Enumerable[T]':
        """drop the last 'count' elements. zero or a negative count returns this sequence"""
        if count <= 0:
            return self
        return self.reverse().skip(count).reverse()

    def append(self: 'Enumerable[T]', element: T) -> 'Enumerable[T]':
        """appends a value to the end of the sequence"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: chain(self, (element,)))

    def prepend(self: 'Enumerable[T]', element: T) -> 'Enumerable[T]':
        """adds a value to the beginning of the sequence"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: chain((element,), self))

    def concat(self: 'Enumerable[T]', other: Iterable[T]) -> 'Enumerable[T]':
        """concatenate with another sequence, preserving all elements and order"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: chain(self, other))

    def cast(self: 'Enumerable[T]', kind: Union[PrimitiveKind, str],
             converters: Optional[Mapping[PrimitiveKind, Callable[[Any], Any]]] = None) -> 'Enumerable[Any]':
        """
        converts every element to a primitive kind.
        converters overrides entries of the default KIND_CONVERTERS table.
        """
        target = PrimitiveKind.parse(kind)
        table = {**KIND_CONVERTERS, **(converters or {})}
        return self.select(table[target])

    def of_type(self: 'Enumerable[T]', type_filter: Union[PrimitiveKind, str, Type[U], Tuple[Type, ...]]) -> 'Enumerable[U]':
        """
        filters the elements of a sequence by kind.
        a PrimitiveKind (or its name) matches the exact runtime kind, so True is not a number;
        a python type or tuple of types falls back to isinstance.
        """
        if isinstance(type_filter, (PrimitiveKind, str)):
            return self.where(KIND_TESTS[PrimitiveKind.parse(type_filter)])
        return self.where(lambda item: isinstance(item, type_filter))

    def default_if_empty(self: 'Enumerable[T]', default_value: Optional[T] = None) -> 'Enumerable[T]':
        """
        returns this sequence when it has at least one element, otherwise a
        singleton sequence holding default_value. the check runs immediately.
        """
        from ..factories import from_iterable
        if self.to.any():
            return self
        return from_iterable([default_value])
