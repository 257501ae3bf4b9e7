import suite
from extkit import M, OrderedMap, empty, from_pairs

test = suite.test
assert_that = suite.assert_that
assert_equal = suite.assert_equal

# helper data
numbers = M([1, 2, 3, 4, 5])
prices = M({'apple': 1.5, 'banana': 0.25, 'cherry': 4.0})


# for_each()

@test("for_each visits value then key in insertion order")
def test_for_each_order():
    seen = []
    prices.for_each(lambda value, key: seen.append((key, value)))
    assert_equal(seen, [('apple', 1.5), ('banana', 0.25), ('cherry', 4.0)])


@test("for_each returns the very same instance")
def test_for_each_returns_self():
    result = numbers.for_each(lambda value, key: None)
    assert_that(result is numbers, "for_each should hand back the receiver")


@test("for_each on an empty map never calls back")
def test_for_each_empty():
    calls = []
    empty().for_each(lambda value, key: calls.append(key))
    assert_equal(calls, [])


# map()

@test("map replaces values and keeps keys and order")
def test_map_keeps_keys():
    doubled = prices.map(lambda value, key: value * 2)
    assert_equal(doubled.to.pairs(), [('apple', 3.0), ('banana', 0.5), ('cherry', 8.0)])
    assert_equal(doubled.keys(), prices.keys(), "keys(m.map(f)) == keys(m)")


@test("map passes the key as second argument")
def test_map_uses_key():
    labelled = prices.map(lambda value, key: f"{key}={value}")
    assert_equal(labelled['banana'], 'banana=0.25')


@test("map leaves the receiver untouched")
def test_map_is_pure():
    numbers.map(lambda value, key: value * 100)
    assert_equal(numbers.to.list(), [1, 2, 3, 4, 5])


@test("map keeps sparse integer keys")
def test_map_sparse_keys():
    sparse = M({3: 'c', 0: 'a', 7: 'g'})
    upper = sparse.map(lambda value, key: value.upper())
    assert_equal(upper.to.pairs(), [(3, 'C'), (0, 'A'), (7, 'G')])


# drop_where()

@test("drop_where removes matches and keeps original keys")
def test_drop_where_keeps_keys():
    odds = numbers.drop_where(lambda value, key: value % 2 == 0)
    assert_equal(odds.to.pairs(), [(0, 1), (2, 3), (4, 5)], "keys must not be re-indexed")


@test("drop_where with always-false predicate gives an equal map")
def test_drop_where_nothing():
    kept = prices.drop_where(lambda value, key: False)
    assert_equal(kept, prices)
    assert_that(kept is not prices, "a new map is expected even when nothing is dropped")


@test("drop_where with always-true predicate gives an empty map")
def test_drop_where_everything():
    assert_that(prices.drop_where(lambda value, key: True).is_empty(), "everything should be dropped")


@test("drop_where can filter on keys")
def test_drop_where_by_key():
    result = prices.drop_where(lambda value, key: key.startswith('b'))
    assert_equal(result.to.pairs(), [('apple', 1.5), ('cherry', 4.0)])


# where()

@test("where is the complement of drop_where")
def test_where_complement():
    predicate = lambda value, key: value > 1
    kept = prices.where(predicate).to.dict()
    dropped = prices.drop_where(predicate).to.dict()
    assert_equal(kept, {'apple': 1.5, 'cherry': 4.0})
    assert_equal({**kept, **dropped}, prices.to.dict())


# keys() / values()

@test("keys and values are freshly 0-indexed")
def test_keys_values_reindexed():
    assert_equal(prices.keys().to.pairs(), [(0, 'apple'), (1, 'banana'), (2, 'cherry')])
    assert_equal(prices.values().to.pairs(), [(0, 1.5), (1, 0.25), (2, 4.0)])


@test("values re-indexes a filtered map")
def test_values_after_filter():
    evens = numbers.where(lambda value, key: value % 2 == 0)
    assert_equal(evens.to.pairs(), [(1, 2), (3, 4)])
    assert_equal(evens.values().to.pairs(), [(0, 2), (1, 4)])


@test("keys and values of an empty map are empty")
def test_keys_values_empty():
    assert_that(empty().keys().is_empty(), "no keys expected")
    assert_that(empty().values().is_empty(), "no values expected")


# sub_array_before_last()

@test("sub_array_before_last drops only the last pair")
def test_sub_array_before_last():
    assert_equal(prices.sub_array_before_last().to.pairs(), [('apple', 1.5), ('banana', 0.25)])
    assert_equal(len(prices), 3, "receiver must keep its last pair")


@test("sub_array_before_last on empty and single-item maps")
def test_sub_array_before_last_edges():
    assert_that(empty().sub_array_before_last().is_empty(), "empty stays empty")
    assert_that(M(['only']).sub_array_before_last().is_empty(), "single item leaves nothing")


# construction

@test("construction copies its input")
def test_construction_copies():
    source = {'a': 1}
    ordered = M(source)
    source['b'] = 2
    assert_equal(ordered.to.dict(), {'a': 1}, "the map must not alias the caller's dict")
    assert_equal(OrderedMap(ordered), ordered, "copying another map keeps its pairs")


@test("from_pairs keeps first position of a repeated key")
def test_from_pairs():
    ordered = from_pairs([('x', 1), ('y', 2), ('x', 3)])
    assert_equal(ordered.to.pairs(), [('x', 3), ('y', 2)])


@test("plain strings are refused as containers")
def test_string_not_a_container():
    suite.assert_raises(TypeError, lambda: M("abc"))


# chaining

@test("operations chain into a pipeline")
def test_chaining():
    result = (M(range(1, 11))
              .drop_where(lambda value, key: value % 3 == 0)
              .map(lambda value, key: value * value)
              .values()
              .join_to_string('-'))
    assert_equal(result, '1-4-16-25-49-64-100')


if __name__ == "__main__":
    suite.run(title="extkit core operations test suite")
