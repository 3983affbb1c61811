# contestkit

A collection of short programming-contest problems. Each one is solved as a
plain Python function that takes ordinary values (integers, strings, lists)
and returns the answer. A few of them can also be run from the `contestkit`
command, which reads the problem's input from standard input.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

- `contestkit.arithmetic`: small numeric problems:
  `remaining_oranges`, `alloy_kind`, `cabbage_cost`, `count_between`,
  `div_count`, `difference_max`, `k_city_blocks`, `binary_to_decimal`,
  `tricky_sum`.
- `contestkit.text`: string problems:
  `dictionary_words`, `distinct_letters`, `gender_verdict`,
  `keyboard_restore`, `is_quasi_palindrome`, `register_names`, `chat_order`.
- `contestkit.sequences`: problems over lists of numbers and digit strings:
  `cancelled_trains`, `gift_givers`, `tower_stats`, `tram_capacity`,
  `twins_min_coins`, `remainder_operations`.
- `contestkit.queues`: problems driven by queues, heaps and streams of
  operations: `berpizza`, `sorting_queries`, `heap_operations`,
  `potions_drunk`.
- `contestkit.cli`: the command-line entry point, `main`.

Invalid input raises `ValueError` (for example `keyboard_restore` with a
direction other than `"L"` or `"R"`, or `gift_givers` with a list that is not
a permutation of `1..n`). Taking from an empty queue in `berpizza` or
`sorting_queries` raises `IndexError`.

## Using the library

```python
from contestkit.arithmetic import alloy_kind, binary_to_decimal, remaining_oranges

remaining_oranges(10, 3, 2)   # 5
alloy_kind(1, 0)              # "Gold"
binary_to_decimal("101")      # 5
```

```python
from contestkit.text import chat_order, is_quasi_palindrome, register_names

is_quasi_palindrome("2010200")           # True: trailing zeros may be dropped
register_names(["ann", "bob", "ann"])    # ["OK", "OK", "ann1"]
chat_order(["a", "b", "a"])              # ["a", "b"]
```

```python
from contestkit.queues import sorting_queries

sorting_queries([(1, 3), (1, 1), (3,), (1, 0), (2,), (2,), (2,)])  # [1, 3, 0]
```

## Command line

`contestkit` takes the name of a problem and reads whitespace-separated input
from standard input:

| Command    | Input                                          | Output                                        |
|------------|------------------------------------------------|-----------------------------------------------|
| `oranges`  | total, Ali's share, Ahmed's share              | `the Remaining Oranges = ` and the count      |
| `keyboard` | `L` or `R`, then the typed text                | the restored text                             |
| `heap`     | a count, then that many `insert x`, `getMin x` or `removeMin` entries | the number of operations, then one per line |
| `presents` | a count `n`, then `n` receivers                | who gave each friend `1..n` a present         |

```
echo "10 3 2" | contestkit oranges
contestkit --help
```

On bad input the command prints a message prefixed with `contestkit:` to
standard error and exits with status 1.

## Limits

Only the four problems above are available from the command line; every
other problem is reached through its function in the library.