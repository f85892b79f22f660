import operator
import numpy as np
import pandas as pd
import suite
from linqy import (
    L, empty, Group,
    EmptySequenceError, NoValueFoundError, NoItemFoundError, IndexNotFoundError,
    MultipleValuesFoundError, DuplicateKeyError, LinqyError
)
from records import people, people_seq

test = suite.test
assert_that = suite.assert_that
assert_raises = suite.assert_raises

sample_numbers = [1, 2, 3, 4, 5, 6, 7, 8, 9, 10]
numbers = L(sample_numbers)


# --- containers ---

@test("list conversion returns a fresh list")
def test_to_list():
    result = numbers.to.list()
    assert_that(result == sample_numbers, f"list conversion failed: {result}")
    assert_that(result is not sample_numbers, "should not hand back the source list")


@test("array conversion creates numpy array")
def test_to_array():
    result = numbers.to.array()
    assert_that(isinstance(result, np.ndarray), f"should return ndarray: {type(result)}")
    assert_that(np.array_equal(result, np.array(sample_numbers)), f"array conversion failed: {result}")


@test("pandas conversions")
def test_to_pandas():
    series = numbers.to.pandas()
    assert_that(isinstance(series, pd.Series) and len(series) == 10, "series should hold all elements")
    frame = people_seq(4).to.df()
    assert_that(isinstance(frame, pd.DataFrame), "should build a dataframe")
    assert_that(list(frame.columns)[:2] == ['id', 'name'] and len(frame) == 4, "rows become records")


@test("set conversion removes duplicates")
def test_to_set():
    assert_that(L([1, 2, 2, 3, 3, 3]).to.set() == {1, 2, 3}, "plain set")


@test("set conversion collapses comparer-equal elements first")
def test_to_set_with_comparer():
    result = L(['a', 'A', 'b']).to.set(lambda a, b: a.lower() == b.lower())
    assert_that(result == {'a', 'b'}, f"first occurrence should win: {result}")


@test("dict conversion with key and element selectors")
def test_to_dict():
    rows = people(5)
    by_id = L(rows).to.dict(lambda p: p['id'])
    assert_that(len(by_id) == 5 and by_id[1] is rows[0], "dict keyed by id")
    names = L(rows).to.dict(lambda p: p['id'], lambda p: p['name'])
    assert_that(names[2] == rows[1]['name'], "element selector applies to values")


@test("dict conversion fails on duplicate keys")
def test_to_dict_duplicates():
    error = assert_raises(MultipleValuesFoundError, lambda: L([1, 1, 1]).to.dict(lambda x: x),
                          "duplicate key should raise")
    assert_that(isinstance(error, DuplicateKeyError) and error.key == 1, f"should name the key: {error!r}")


@test("dict conversion uses the key comparer")
def test_to_dict_comparer():
    same = lambda a, b: a.lower() == b.lower()
    assert_raises(DuplicateKeyError, lambda: L(['a', 'A']).to.dict(lambda s: s, comparer=same))
    result = L(['a', 'B']).to.dict(lambda s: s, comparer=same)
    assert_that(result == {'a': 'a', 'B': 'B'}, f"distinct keys survive: {result}")


@test("lookup maps keys to groups")
def test_to_lookup():
    lookup = L([1, 2, 3, 4, 5, 6]).to.lookup(lambda x: x % 3, lambda x: x * 10)
    assert_that(list(lookup.keys()) == [1, 2, 0], f"keys in first-appearance order: {list(lookup)}")
    assert_that(isinstance(lookup[0], Group) and lookup[0].key == 0, "values are groups")
    assert_that(lookup[1].to.list() == [10, 40], f"group members are projected: {lookup[1].to.list()}")


# --- quantifiers ---

@test("count with and without predicate")
def test_count():
    assert_that(numbers.to.count() == 10, "count all")
    assert_that(numbers.to.count(lambda x: x % 2 == 0) == 5, "count evens")
    assert_that(empty().to.count() == 0, "count empty")


@test("any without predicate only peeks")
def test_any_peeks():
    pulled = []
    result = L(range(5)).util.side_effect(pulled.append).to.any()
    assert_that(result is True and pulled == [0], f"should pull one element: {pulled}")
    assert_that(empty().to.any() is False, "empty has none")


@test("any and all short-circuit")
def test_any_all_short_circuit():
    pulled = []
    seq = L(range(10)).util.side_effect(pulled.append)
    assert_that(seq.to.any(lambda x: x == 2), "two is present")
    assert_that(pulled == [0, 1, 2], f"any stops at the match: {pulled}")
    pulled.clear()
    assert_that(not seq.to.all(lambda x: x < 1), "not all below one")
    assert_that(pulled == [0, 1], f"all stops at the first failure: {pulled}")
    assert_that(empty().to.all(lambda x: False), "all is vacuously true on empty")


@test("contains with default and custom comparer")
def test_contains():
    assert_that(numbers.to.contains(3), "contains 3")
    assert_that(not numbers.to.contains(11), "does not contain 11")
    words = L(['a', 'B'])
    assert_that(words.to.contains('b', lambda element, value: element.lower() == value), "comparer(element, value)")


# --- element access ---

@test("first and first_or_default")
def test_first():
    assert_that(numbers.to.first() == 1, "first")
    assert_that(numbers.to.first(lambda x: x > 4) == 5, "first matching")
    error = assert_raises(NoValueFoundError, lambda: empty().to.first(), "empty first should raise")
    assert_that(isinstance(error, ValueError) and isinstance(error, LinqyError), "error hierarchy")
    assert_raises(NoValueFoundError, lambda: numbers.to.first(lambda x: x > 100))
    assert_that(empty().to.first_or_default() is None, "default is None")
    assert_that(numbers.to.first_or_default(lambda x: x > 100, default=-1) == -1, "explicit default")


@test("or_default variants do not swallow callback errors")
def test_or_default_propagates():
    assert_raises(ZeroDivisionError, lambda: L([1]).to.first_or_default(lambda x: x / 0))
    assert_raises(ZeroDivisionError, lambda: L([1]).to.last_or_default(lambda x: x / 0))
    assert_raises(ZeroDivisionError, lambda: L([1]).select(lambda x: x / 0).to.element_at_or_default(0))
    assert_raises(ZeroDivisionError, lambda: L([1]).to.single_or_default(lambda x: x / 0))


@test("or_default variants re-raise a different not-found error")
def test_or_default_reraises_other_sentinels():
    def no_item(x):
        raise NoItemFoundError("raised by the predicate")

    def no_value(x):
        raise NoValueFoundError("raised by the selector")

    assert_raises(NoItemFoundError, lambda: L([1]).to.first_or_default(no_item))
    assert_raises(NoValueFoundError, lambda: L([1]).select(no_value).to.element_at_or_default(0))
    assert_raises(NoValueFoundError, lambda: L([1]).to.last_or_default(no_value))
    assert_raises(IndexNotFoundError, lambda: L([1]).to.single_or_default(
        lambda x: L([]).to.element_at(0)))
    # same class as the one each variant turns into its default
    assert_raises(NoValueFoundError, lambda: L([1]).to.first_or_default(no_value))
    assert_raises(NoItemFoundError, lambda: L([1]).to.last_or_default(no_item))
    assert_raises(IndexNotFoundError, lambda: L([1]).select(lambda x: L([]).to.element_at(0))
                  .to.element_at_or_default(0))


@test("last and last_or_default")
def test_last():
    assert_that(numbers.to.last() == 10, "last")
    assert_that(numbers.to.last(lambda x: x < 4) == 3, "last matching")
    assert_raises(NoItemFoundError, lambda: empty().to.last(), "empty last should raise")
    assert_that(empty().to.last_or_default() is None, "default is None")
    assert_that(L([None]).to.last() is None, "a None element is still found")


@test("single and single_or_default")
def test_single():
    assert_that(L([5]).to.single() == 5, "single element")
    assert_that(numbers.to.single(lambda x: x == 7) == 7, "single match")
    assert_raises(MultipleValuesFoundError, lambda: L([1, 2]).to.single(), "two elements")
    assert_raises(NoValueFoundError, lambda: empty().to.single(), "no elements")
    assert_that(empty().to.single_or_default() is None, "default on empty")
    assert_raises(MultipleValuesFoundError, lambda: L([1, 2]).to.single_or_default(),
                  "single_or_default still raises on two matches")


@test("single raises at the second match")
def test_single_stops_at_second_match():
    pulled = []
    seq = L(range(10)).util.side_effect(pulled.append)
    assert_raises(MultipleValuesFoundError, lambda: seq.to.single(lambda x: x in (1, 3)))
    assert_that(pulled == [0, 1, 2, 3], f"should stop at the second match: {pulled}")


@test("element_at and element_at_or_default")
def test_element_at():
    seq = L([10, 20, 30])
    assert_that(seq.to.element_at(0) == 10 and seq.to.element_at(2) == 30, "valid positions")
    assert_raises(IndexNotFoundError, lambda: seq.to.element_at(3), "past the end")
    error = assert_raises(IndexNotFoundError, lambda: seq.to.element_at(-1), "negative index")
    assert_that(isinstance(error, IndexError), "is an IndexError")
    assert_that(seq.to.element_at_or_default(-1) is None, "negative index default")
    assert_that(seq.to.element_at_or_default(5, default=0) == 0, "explicit default")


# --- folding ---

@test("aggregate without seed folds from the first element")
def test_aggregate_unseeded():
    assert_that(numbers.to.aggregate(operator.add) == 55, "sum via aggregate")
    assert_that(L(['a', 'b', 'c']).to.aggregate(lambda acc, x: x + acc) == 'cba', "left fold order")
    assert_raises(EmptySequenceError, lambda: empty().to.aggregate(operator.add), "empty without seed")


@test("aggregate with seed and result selector")
def test_aggregate_seeded():
    assert_that(numbers.to.aggregate(operator.add, 100) == 155, "seeded fold")
    assert_that(empty().to.aggregate(operator.add, 7) == 7, "empty folds to the seed")
    assert_that(numbers.to.aggregate(operator.add, 0, str) == '55', "result selector")
    assert_that(numbers.to.aggregate_with_selector(0, operator.add, lambda total: total / 5) == 11.0,
                "three-argument form")
    assert_that(L([1, 2]).to.aggregate(lambda acc, x: acc + [x], [], len) == 2, "list seed with selector")


@test("aggregate accepts None as a real seed")
def test_aggregate_none_seed():
    result = L([1, 2, 3]).to.aggregate(lambda acc, x: x if acc is None else acc * x, None)
    assert_that(result == 6, f"None seed should be used, not treated as missing: {result}")
    assert_that(empty().to.aggregate(operator.add, None) is None, "empty folds to a None seed")


@test("sequence_equal compares in lock-step")
def test_sequence_equal():
    assert_that(numbers.to.sequence_equal(range(1, 11)), "equal sequences")
    assert_that(not numbers.to.sequence_equal(range(1, 10)), "shorter other")
    assert_that(not L([1, 2]).to.sequence_equal([1, 2, 3]), "longer other")
    assert_that(not L([1, 2]).to.sequence_equal([1, 3]), "mismatch")
    assert_that(empty().to.sequence_equal([]), "both empty")
    assert_that(L(['A']).to.sequence_equal(['a'], lambda a, b: a.lower() == b.lower()), "custom comparer")


if __name__ == "__main__":
    suite.run(title="linqy terminal operations test suite")
