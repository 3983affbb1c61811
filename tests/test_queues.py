import pytest

from contestkit.queues import berpizza, heap_operations, potions_drunk, sorting_queries


def test_berpizza_serves_richest_first():
    queries = [(1, 3), (1, 7), (1, 5), (3,), (3,), (2,), (3,)]
    assert berpizza(queries) == [7, 5, 3]


def test_berpizza_type_two_reports_nothing():
    assert berpizza([(1, 4), (2,)]) == []


def test_berpizza_empty_raises():
    with pytest.raises(IndexError):
        berpizza([(1, 2), (3,), (3,)])


def test_sorting_queries_mixes_sorted_and_unsorted():
    queries = [(1, 4), (1, 3), (1, 2), (2,), (3,), (1, 1), (2,), (2,)]
    assert sorting_queries(queries) == [4, 2, 3]


def test_sorting_queries_fifo_without_sort():
    queries = [(1, 9), (1, 1), (1, 5), (2,), (2,), (2,)]
    assert sorting_queries(queries) == [9, 1, 5]


def test_sorting_queries_sorted_output_after_sort():
    values = [8, 6, 7, 5, 3, 0, 9]
    queries = [(1, v) for v in values] + [(3,)] + [(2,)] * len(values)
    assert sorting_queries(queries) == sorted(values)


def test_sorting_queries_empty_raises():
    with pytest.raises(IndexError):
        sorting_queries([(2,)])


def test_heap_operations_remove_from_empty_inserts_first():
    assert heap_operations(["removeMin"]) == ["insert 0", "removeMin"]


def test_heap_operations_getmin_present():
    assert heap_operations(["insert 5", "getMin 5"]) == ["insert 5", "getMin 5"]


def test_heap_operations_getmin_missing():
    assert heap_operations(["insert 3", "getMin 4"]) == [
        "insert 3",
        "removeMin",
        "insert 4",
        "getMin 4",
    ]


def test_heap_operations_remove_clears_pending_inserts():
    assert heap_operations(["insert 1", "insert 2", "removeMin"]) == [
        "insert 1",
        "insert 2",
        "removeMin",
        "removeMin",
    ]


def test_heap_operations_keeps_original_entries_in_order():
    log = ["insert 2", "getMin 2", "insert 7"]
    assert heap_operations(log) == log


def test_heap_operations_skips_unknown_commands():
    assert heap_operations(["frobnicate", "insert 6"]) == ["insert 6"]


@pytest.mark.parametrize("entry", ["insert", "getMin", "insert x"])
def test_heap_operations_bad_argument(entry):
    with pytest.raises(ValueError):
        heap_operations([entry])


def test_potions_example():
    assert potions_drunk([4, -4, 1, -3, 1, -3]) == 5


def test_potions_all_positive_drinks_everything():
    values = [1, 2, 3, 0, 5]
    assert potions_drunk(values) == len(values)


def test_potions_all_negative_drinks_nothing():
    assert potions_drunk([-1, -2, -3]) == 0


def test_potions_never_more_than_offered():
    values = [3, -5, 2, -1, -1, 4, -6]
    assert 0 <= potions_drunk(values) <= len(values)