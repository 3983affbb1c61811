"""Puzzles driven by queues, heaps and streams of operations."""

from __future__ import annotations

import heapq
from collections import deque
from collections.abc import Iterable, Sequence


def berpizza(queries: Iterable[Sequence[int]]) -> list[int]:
    """Run Berpizza queries and return what each serving query reports.

    ``(1, m)`` adds a customer who will spend ``m``; ``(3,)`` serves and
    reports the customer who spends the most. ``(2,)`` and any other query
    type change nothing and report nothing.
    """
    richest: list[int] = []
    served: list[int] = []
    for query in queries:
        kind = query[0]
        if kind == 1:
            heapq.heappush(richest, -query[1])
        elif kind == 3:
            if not richest:
                raise IndexError("no customer is waiting")
            served.append(-heapq.heappop(richest))
    return served


def sorting_queries(queries: Iterable[Sequence[int]]) -> list[int]:
    """Run the sorting-queries puzzle and return the values taken out.

    ``(1, x)`` appends ``x`` to the back of the sequence, ``(2,)`` takes the
    front element out, and ``(3,)`` sorts the whole sequence. Elements added
    after a sort stay behind the sorted part until the next sort.
    """
    unsorted: deque[int] = deque()
    ordered: list[int] = []
    taken: list[int] = []
    for query in queries:
        kind = query[0]
        if kind == 1:
            unsorted.append(query[1])
        elif kind == 2:
            if ordered:
                taken.append(heapq.heappop(ordered))
            elif unsorted:
                taken.append(unsorted.popleft())
            else:
                raise IndexError("the sequence is empty")
        elif kind == 3:
            while unsorted:
                heapq.heappush(ordered, unsorted.popleft())
    return taken


def _argument(command: str, args: list[str]) -> int:
    if not args:
        raise ValueError(f"{command} needs a number")
    try:
        return int(args[0])
    except ValueError:
        raise ValueError(f"{command} needs a number, got {args[0]!r}") from None


def heap_operations(log: Iterable[str]) -> list[str]:
    """Complete a heap operation log so that every entry in it is valid.

    ``log`` holds lines such as ``insert 3``, ``getMin 4`` and ``removeMin``.
    The result is the corrected list of operations; its length is the
    number of operations. Unknown commands are skipped.
    """
    values: set[int] = set()
    ops: list[str] = []
    pending = 0
    empty = True
    for entry in log:
        parts = entry.split()
        if not parts:
            continue
        command, args = parts[0], parts[1:]
        if command == "removeMin":
            if empty:
                ops.extend(("insert 0", "removeMin"))
                continue
            if values:
                values.remove(min(values))
            ops.extend(["removeMin"] * max(pending, 0))
            pending = -1
            empty = True
        elif command == "insert":
            x = _argument(command, args)
            values.add(x)
            ops.append(f"insert {x}")
            pending += 1
            empty = False
        elif command == "getMin":
            x = _argument(command, args)
            if x in values:
                ops.append(f"getMin {x}")
                continue
            if not empty:
                ops.append("removeMin")
                if pending == 1:
                    pending -= 1
                    empty = True
            ops.extend((f"insert {x}", f"getMin {x}"))
            empty = False
            pending += 1
    return ops


def potions_drunk(values: Iterable[int]) -> int:
    """Most potions that can be drunk in order while health never drops below zero."""
    health = 0
    chosen: list[int] = []
    for value in values:
        health += value
        heapq.heappush(chosen, value)
        if health < 0:
            health -= heapq.heappop(chosen)
    return len(chosen)