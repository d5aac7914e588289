import itertools

import pytest

from skylineq.dataset import Product
from skylineq.skyline import (
    dominates,
    dominates_low,
    skyline_array,
    skyline_linked_list,
    skyline_map,
    skyline_queue,
    skyline_stack,
    weakly_dominates,
)


def make(values):
    return [Product(i, f"p{i}", a, b) for i, (a, b) in enumerate(values, start=1)]


DATA = make([(10, 5), (20, 7), (5, 9), (15, 3), (30, 9), (8, 6), (5, 9), (12, 8)])


def test_dominates_strict():
    a, b, c = make([(1, 5), (2, 5), (1, 5)])
    assert dominates(a, b)
    assert not dominates(b, a)
    assert not dominates(a, c)


def test_weakly_dominates_equal():
    a, c = make([(1, 5), (1, 5)])
    assert weakly_dominates(a, c)
    assert weakly_dominates(c, a)
    assert not dominates(a, c)


def test_dominates_low():
    a, b = make([(1, 1), (2, 1)])
    assert dominates_low(a, b)
    assert not dominates_low(b, a)
    assert not dominates_low(a, a)


@pytest.mark.parametrize("algorithm", [skyline_array, skyline_queue])
def test_skyline_is_exactly_the_undominated(algorithm):
    result = algorithm(DATA)
    for product in DATA:
        undominated = not any(dominates(o, product) for o in DATA)
        assert (product in result) == undominated


def test_array_and_queue_agree():
    assert skyline_array(DATA) == skyline_queue(DATA)


def test_array_orders_survivors_then_newcomer():
    a, b, c = make([(10, 5), (20, 7), (5, 6)])
    assert skyline_array([a, b, c]) == [b, c]


def test_empty_input():
    for algorithm in (skyline_array, skyline_queue, skyline_linked_list,
                      skyline_map, skyline_stack):
        assert algorithm([]) == []


def test_linked_list_drops_duplicates():
    a, b = make([(5, 9), (5, 9)])
    assert skyline_linked_list([a, b]) == [a]


def test_linked_list_matches_array_without_duplicates():
    unique = make([(10, 5), (20, 7), (5, 9), (15, 3), (30, 9), (8, 6)])
    assert skyline_linked_list(unique) == skyline_array(unique)


def test_map_keeps_accepted_products_that_were_superseded():
    a, b, c = make([(5, 5), (6, 4), (4, 9)])
    assert skyline_map([a, b, c]) == [a, c]


def test_map_equal_price_does_not_reject():
    a, b, c = make([(10, 5), (10, 3), (12, 4)])
    assert skyline_map([a, b, c]) == [a, b, c]


def test_map_contains_final_skyline():
    result = skyline_map(DATA)
    assert set(skyline_linked_list(DATA)) <= set(result)


def test_stack_reads_from_top():
    a, b, c = make([(1, 5), (5, 1), (6, 6)])
    assert skyline_stack([a, b, c]) == [a, b]


def test_stack_is_low_skyline():
    result = skyline_stack(DATA)
    for product in DATA:
        undominated = not any(dominates_low(o, product) for o in DATA)
        assert (product in result) == undominated


def test_stack_result_mutually_undominated():
    result = skyline_stack(DATA)
    for x, y in itertools.permutations(result, 2):
        assert not dominates_low(x, y)