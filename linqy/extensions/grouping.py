from __future__ import annotations
import typing
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable, Group

class GroupingAccessor(Generic[T]):
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def group_by(self, key_selector: KeySelector[T, K],
                 element_selector: Optional[Selector[T, U]] = None,
                 result_selector: Optional[Callable[[K, 'Group[K, U]'], V]] = None,
                 comparer: Optional[EqualityComparer[K]] = None) -> 'Enumerable[Any]':
        """
        group elements by a key, in order of each key's first appearance.

        each group is itself a lazy sequence that re-filters the source, so the
        cost is o(n * k) for k distinct keys. comparer(group_key, element_key)
        decides membership; element_selector projects the members; with a
        result_selector every group is reduced to result_selector(key, group).
        """
        from ..enumerable import Enumerable, Group
        source = self._enumerable
        matches = comparer or default_equals
        project = element_selector or (lambda item: item)

        def make_group(key: K) -> 'Group[K, U]':
            members = source.where(lambda item: matches(key, key_selector(item))).select(project)
            return Group(key, members._iterate)

        def group_data():
            for key in source.select(key_selector).set.distinct(comparer):
                group = make_group(key)
                yield group if result_selector is None else result_selector(key, group)

        return Enumerable(group_data)
