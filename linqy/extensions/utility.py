from __future__ import annotations
import typing
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable


class UtilityAccessor(Generic[T]):
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def for_each(self, action: Callable[[T], Any]) -> 'Enumerable[T]':
        """
        performs the specified action on each element of a sequence for side-effects.
        this is an EAGER operation that executes immediately.
        returns the original enumerable to allow chaining.
        """
        for item in self._enumerable:
            action(item)
        return self._enumerable

    def side_effect(self, action: Callable[[T], Any]) -> 'Enumerable[T]':
        """
        performs a side-effect action for each element as it is pulled through
        the sequence without modifying it. lazy: the action runs once per element
        per traversal, and never for elements that are not pulled.
        example: .where(...).util.side_effect(print).select(...)
        """
        from ..enumerable import Enumerable
        def tapped_data():
            for item in self._enumerable:
                action(item)
                yield item
        return Enumerable(tapped_data)

    def pipe(self, func: Callable[..., U], *args, **kwargs) -> U:
        """
        pipes the enumerable object into an external function. enables custom, chainable operations.
        example: .util.pipe(my_custom_report, title='my data')
        """
        return func(self._enumerable, *args, **kwargs)
