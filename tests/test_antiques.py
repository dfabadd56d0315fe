import pytest

from arbortools.antiques import cheapest_collection_cost


def test_empty_collection_costs_nothing():
    assert cheapest_collection_cost([], []) == 0


def test_single_item_costs_its_price():
    assert cheapest_collection_cost([4], [17]) == 17


def test_duplicate_kind_takes_cheapest():
    assert cheapest_collection_cost([2, 2, 2], [9, 3, 5]) == 3


def test_distinct_kinds_sum_all_prices():
    prices = [4, 8, 15]
    assert cheapest_collection_cost([1, 2, 3], prices) == sum(prices)


def test_result_does_not_depend_on_order():
    items = [1, 2, 1, 3, 2]
    prices = [10, 4, 6, 7, 5]
    forward = cheapest_collection_cost(items, prices)
    backward = cheapest_collection_cost(items[::-1], prices[::-1])
    assert forward == backward


def test_accepts_iterables():
    assert cheapest_collection_cost(iter([5, 5]), iter([2, 1])) == 1


def test_length_mismatch_raises():
    with pytest.raises(ValueError):
        cheapest_collection_cost([1, 2], [3])