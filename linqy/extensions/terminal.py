from __future__ import annotations
import logging
import typing
import numpy as np
import pandas as pd
from functools import reduce
from itertools import islice
from ..types import *
from ..errors import (
    EmptySequenceError, NoValueFoundError, NoItemFoundError, IndexNotFoundError,
    MultipleValuesFoundError, DuplicateKeyError
)

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable, Group

logger = logging.getLogger(__name__)

# marks an omitted seed or a missing element, since None is a valid value for both
_missing = object()

class TerminalAccessor(Generic[T]):
    """operations that pull from the sequence and return a plain value or container."""

    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def _filtered(self, predicate: Optional[Predicate[T]]) -> 'Enumerable[T]':
        return self._enumerable if predicate is None else self._enumerable.where(predicate)

    # --- containers ---

    def list(self) -> List[T]:
        """convert to list"""
        return list(self._enumerable)

    def array(self) -> np.ndarray:
        """convert to numpy array"""
        return np.array(self.list())

    def set(self, comparer: Optional[EqualityComparer[T]] = None) -> Set[T]:
        """convert to set, collapsing comparer-equal elements first when a comparer is given"""
        source = self._enumerable if comparer is None else self._enumerable.set.distinct(comparer)
        return set(source)

    def dict(self, key_selector: KeySelector[T, K],
             element_selector: Optional[Selector[T, V]] = None,
             comparer: Optional[EqualityComparer[K]] = None) -> Dict[K, V]:
        """convert to dictionary. raises DuplicateKeyError when two elements share a key"""
        result = {}
        for group in self._enumerable.group.group_by(key_selector, element_selector, comparer=comparer):
            try:
                result[group.key] = group.to.single()
            except MultipleValuesFoundError:
                raise DuplicateKeyError(group.key) from None
        logger.debug(f"built dictionary with {len(result)} keys")
        return result

    def lookup(self, key_selector: KeySelector[T, K],
               element_selector: Optional[Selector[T, V]] = None,
               comparer: Optional[EqualityComparer[K]] = None) -> Dict[K, 'Group[K, V]']:
        """map each distinct key to the group of elements carrying it"""
        return {group.key: group
                for group in self._enumerable.group.group_by(key_selector, element_selector, comparer=comparer)}

    def pandas(self) -> pd.Series:
        """convert to pandas series"""
        return pd.Series(self.list())

    def df(self) -> pd.DataFrame:
        """convert to pandas dataframe"""
        return pd.DataFrame(self.list())

    # --- quantifiers ---

    def count(self, predicate: Optional[Predicate[T]] = None) -> int:
        """count elements"""
        return sum(1 for _ in self._filtered(predicate))

    def any(self, predicate: Optional[Predicate[T]] = None) -> bool:
        """check if any element satisfies condition. without a predicate only one element is pulled"""
        if predicate is None:
            return next(iter(self._enumerable), _missing) is not _missing
        return any(predicate(x) for x in self._enumerable)

    def all(self, predicate: Predicate[T]) -> bool:
        """check if all elements satisfy condition"""
        return all(predicate(x) for x in self._enumerable)

    def contains(self, value: Any, comparer: Optional[Callable[[T, Any], bool]] = None) -> bool:
        """check for a value. comparer is called as comparer(element, value)"""
        matches = comparer or default_equals
        return self.any(lambda item: matches(item, value))

    # --- element access ---
    # each lookup returns _missing instead of raising, so the _or_default forms
    # never catch an error raised from inside a predicate or an upstream selector

    def _first(self, predicate: Optional[Predicate[T]]) -> Any:
        for item in self._filtered(predicate):
            return item
        return _missing

    def _last(self, predicate: Optional[Predicate[T]]) -> Any:
        result = _missing
        for item in self._filtered(predicate):
            result = item
        return result

    def _single(self, predicate: Optional[Predicate[T]]) -> Any:
        result = _missing
        for item in self._filtered(predicate):
            if result is not _missing:
                raise MultipleValuesFoundError("more than one value present in sequence")
            result = item
        return result

    def _element_at(self, index: int) -> Any:
        if index >= 0:
            for item in islice(self._enumerable, index, None):
                return item
        return _missing

    def first(self, predicate: Optional[Predicate[T]] = None) -> T:
        """get first element, pulling no further than the first match"""
        result = self._first(predicate)
        if result is _missing:
            raise NoValueFoundError("no value found")
        return result

    def first_or_default(self, predicate: Optional[Predicate[T]] = None,
                         default: Optional[T] = None) -> Optional[T]:
        """get first element or default"""
        result = self._first(predicate)
        return default if result is _missing else result

    def last(self, predicate: Optional[Predicate[T]] = None) -> T:
        """get last element"""
        result = self._last(predicate)
        if result is _missing:
            raise NoItemFoundError("no item found")
        return result

    def last_or_default(self, predicate: Optional[Predicate[T]] = None,
                        default: Optional[T] = None) -> Optional[T]:
        """get last element or default"""
        result = self._last(predicate)
        return default if result is _missing else result

    def single(self, predicate: Optional[Predicate[T]] = None) -> T:
        """get single element, erroring if not exactly one"""
        result = self._single(predicate)
        if result is _missing:
            raise NoValueFoundError("no value found")
        return result

    def single_or_default(self, predicate: Optional[Predicate[T]] = None,
                          default: Optional[T] = None) -> Optional[T]:
        """get single element or default when there is none. more than one still raises"""
        result = self._single(predicate)
        return default if result is _missing else result

    def element_at(self, index: int) -> T:
        """get the element at a zero-based position"""
        result = self._element_at(index)
        if result is _missing:
            raise IndexNotFoundError(f"index not found: {index}")
        return result

    def element_at_or_default(self, index: int, default: Optional[T] = None) -> Optional[T]:
        """get the element at a zero-based position or default"""
        result = self._element_at(index)
        return default if result is _missing else result

    # --- folding ---

    def aggregate(self, accumulator: Accumulator[Any, T], seed: Any = _missing,
                  result_selector: Optional[Selector[Any, V]] = None) -> Any:
        """
        applies accumulator function over sequence.
        without a seed the first element is the seed and an empty sequence raises
        EmptySequenceError; with a seed an empty sequence folds to the seed.
        """
        iterator = iter(self._enumerable)
        if seed is _missing:
            seed = next(iterator, _missing)
            if seed is _missing:
                raise EmptySequenceError("sequence contained no elements")
        result = reduce(accumulator, iterator, seed)
        return result_selector(result) if result_selector else result

    def aggregate_with_selector(self, seed: U, accumulator: Accumulator[U, T],
                                result_selector: Selector[U, V]) -> V:
        """aggregate with seed and final transformation"""
        return self.aggregate(accumulator, seed, result_selector)

    def sequence_equal(self, other: Iterable[T], comparer: Optional[EqualityComparer[T]] = None) -> bool:
        """lock-step comparison; false on the first mismatch or when lengths differ"""
        matches = comparer or default_equals
        left, right = iter(self._enumerable), iter(other)
        while True:
            left_item, right_item = next(left, _missing), next(right, _missing)
            if left_item is _missing or right_item is _missing:
                return left_item is right_item
            if not matches(left_item, right_item):
                return False
