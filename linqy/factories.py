import typing
from itertools import repeat as _repeat_value
from .types import *

if typing.TYPE_CHECKING:
    from .enumerable import Enumerable

def from_iterable(data: Iterable[T]) -> 'Enumerable[T]':
    """
    wrap an iterable. every traversal calls iter(data) again, so lists, ranges
    and other sequences replay while a generator object only yields once.
    """
    from .enumerable import Enumerable
    return Enumerable(lambda: iter(data))

def from_range(start: int, count: int) -> 'Enumerable[int]':
    """create enumerable of 'count' consecutive integers starting at 'start'"""
    from .enumerable import Enumerable
    return Enumerable(lambda: iter(range(start, start + max(count, 0))))

def repeat(item: T, count: int) -> 'Enumerable[T]':
    """create enumerable with repeated item"""
    from .enumerable import Enumerable
    return Enumerable(lambda: _repeat_value(item, max(count, 0)))

def empty() -> 'Enumerable[Any]':
    """create empty enumerable"""
    from .enumerable import Enumerable
    return Enumerable(lambda: iter(()))

def zip_sequences(left: Iterable[T], right: Iterable[U],
                  result_selector: Optional[Callable[[T, U], V]] = None) -> 'Enumerable[Any]':
    """pair two sequences in lock-step, truncated to the shorter one"""
    return from_iterable(left).zip.zip_with(right, result_selector)

# --- aliases ---
linqy = from_iterable
L = from_iterable
