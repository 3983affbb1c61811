"""Command line front end that reads a puzzle's input from standard input."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator

from contestkit.arithmetic import remaining_oranges
from contestkit.queues import heap_operations
from contestkit.sequences import gift_givers
from contestkit.text import keyboard_restore


class _Tokens:
    """Whitespace-separated tokens of a text, read one at a time."""

    def __init__(self, text: str) -> None:
        self._items: Iterator[str] = iter(text.split())

    def word(self) -> str:
        try:
            return next(self._items)
        except StopIteration:
            raise ValueError("unexpected end of input") from None

    def number(self) -> int:
        token = self.word()
        try:
            return int(token)
        except ValueError:
            raise ValueError(f"expected a number, got {token!r}") from None


def _oranges(tokens: _Tokens) -> list[str]:
    total, ali, ahmed = tokens.number(), tokens.number(), tokens.number()
    return ["the Remaining Oranges = ", str(remaining_oranges(total, ali, ahmed))]


def _keyboard(tokens: _Tokens) -> list[str]:
    direction = tokens.word()
    text = tokens.word()
    return [keyboard_restore(direction, text)]


def _heap(tokens: _Tokens) -> list[str]:
    count = tokens.number()
    log = []
    for _ in range(count):
        command = tokens.word()
        if command in ("insert", "getMin"):
            log.append(f"{command} {tokens.number()}")
        else:
            log.append(command)
    ops = heap_operations(log)
    return [str(len(ops)), *ops]


def _presents(tokens: _Tokens) -> list[str]:
    count = tokens.number()
    receivers = [tokens.number() for _ in range(count)]
    return [" ".join(map(str, gift_givers(receivers)))]


_COMMANDS = {
    "oranges": (_oranges, "oranges left after Ali and Ahmed take theirs"),
    "keyboard": (_keyboard, "restore text typed with shifted hands"),
    "heap": (_heap, "complete a heap operation log"),
    "presents": (_presents, "find who gave each friend a present"),
}


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="contestkit", description="Solve a puzzle read from standard input."
    )
    sub = parser.add_subparsers(dest="command", required=True)
    for name, (_, help_text) in _COMMANDS.items():
        sub.add_parser(name, help=help_text)
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the chosen puzzle on standard input and print its answer."""
    args = _parser().parse_args(argv)
    solve, _ = _COMMANDS[args.command]
    try:
        lines = solve(_Tokens(sys.stdin.read()))
    except ValueError as exc:
        print(f"contestkit: {exc}", file=sys.stderr)
        return 1
    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())