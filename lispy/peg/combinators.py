# lispy/peg/combinators.py
from __future__ import annotations
from typing import Callable, Iterator, List, Optional, Tuple, TypeVar

from .cursor import Cursor

# Parser combinators:
# - A parser is a plain function  Cursor -> Optional[(value, Cursor)].
# - None is "no match"; it is an ordinary outcome, not an error.
# - Combinators are higher-order functions returning new parsers.

T = TypeVar("T")
U = TypeVar("U")

Parser = Callable[[Cursor], Optional[Tuple[T, Cursor]]]
Consumer = Callable[[Cursor], Cursor]


def char_parser(reject: Callable[[str], bool]) -> Parser[str]:
    """Consume exactly one codepoint unless `reject` excludes it."""
    def _char(cursor: Cursor) -> Optional[Tuple[str, Cursor]]:
        ch = cursor.peek()
        if ch is None or reject(ch):
            return None
        return ch, cursor.advance()
    return _char


def iter_parse(parser: Parser[T], cursor: Cursor) -> Iterator[Tuple[T, Cursor]]:
    """Lazily re-apply `parser`, yielding each value with the cursor left after it.

    Stops at the first no-match. Finite as long as `parser` never succeeds
    without consuming input.
    """
    while True:
        found = parser(cursor)
        if found is None:
            return
        value, cursor = found
        yield value, cursor


def parse_multiple(parser: Parser[T], cursor: Cursor) -> Optional[Tuple[List[T], Cursor]]:
    # one-or-more: an aggregate that consumed nothing is a no-match
    values: List[T] = []
    tail = cursor
    for value, tail in iter_parse(parser, cursor):
        values.append(value)
    if tail.same_position(cursor):
        return None
    return values, tail


def choice(*parsers: Parser[T]) -> Parser[T]:
    """Ordered choice: commit to the first alternative that matches."""
    def _choice(cursor: Cursor) -> Optional[Tuple[T, Cursor]]:
        for p in parsers:
            found = p(cursor)
            if found is not None:
                return found
        return None
    return _choice


def preceded_by(consumer: Consumer, parser: Parser[T]) -> Parser[T]:
    def _preceded(cursor: Cursor) -> Optional[Tuple[T, Cursor]]:
        return parser(consumer(cursor))
    return _preceded


def parse_map(parser: Parser[T], fn: Callable[[T], U]) -> Parser[U]:
    def _map(cursor: Cursor) -> Optional[Tuple[U, Cursor]]:
        found = parser(cursor)
        if found is None:
            return None
        value, tail = found
        return fn(value), tail
    return _map
