# lispy/sexpr/grammar.py
"""S-expression grammar built from lispy.peg combinators.

    expr      := WS* (symbol / sexpr)          ordered choice, symbol first
    symbol    := symchar+                       symchar = not (WS | '(' | ')' | "'")
    sexpr     := WS* '(' expr_list ')'          matching ')' found by depth scan
    expr_list := expr+

Every rule returns ``None`` (no match) or ``(value, cursor)``. Nothing is
reported about *why* a rule failed, and trailing text after a successful
top-level ``expr`` is simply handed back as the leftover cursor.

Nested groups are parsed with an explicit stack of list frames instead of
mutual recursion between ``sexpr`` and ``expr_list``, so nesting depth is
limited only by ``max_depth`` and never by the interpreter's call stack.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List as _List, Optional, Tuple, Union

import regex

from ..peg import (
    Cursor, is_whitespace,
    char_parser, parse_multiple, parse_map, choice, preceded_by,
)
from .ast import Symbol, List, Expr

Source = Union[str, Cursor]
Result = Optional[Tuple[Expr, Cursor]]

_RE_PAREN = regex.compile(r"[()]")


def is_symbol_excluded(ch: str) -> bool:
    return is_whitespace(ch) or ch in "(')"


symbol_character = char_parser(is_symbol_excluded)

# Matches one whitespace codepoint. The grammar skips whitespace by trimming
# (Cursor.skip_whitespace) and does not use it; kept for custom skip rules.
whitespace = char_parser(lambda ch: not is_whitespace(ch))

_symbol = parse_map(
    lambda c: parse_multiple(symbol_character, c),
    lambda chars: Symbol("".join(chars)),
)


def _matching_close(cursor: Cursor) -> Optional[int]:
    """Offset of the ')' that closes the '(' at `cursor`, or None if unbalanced."""
    depth = 0
    for m in _RE_PAREN.finditer(cursor.text, cursor.pos, cursor.end):
        depth += 1 if m.group() == "(" else -1
        if depth == 0:
            return m.start()
    return None


@dataclass
class _Frame:
    cursor: Cursor              # after the last parsed element
    depth: int                  # nesting level of this list's elements
    close: Optional[int] = None # offset of the enclosing ')'; None at the root
    items: _List[Expr] = field(default_factory=list)
    done: bool = False


class SexprGrammar:
    """The four grammar rules, with an optional nesting bound.

    ``max_depth=None`` places no bound on nesting. With ``max_depth=N`` a
    group that would open level N+1 is a no-match.
    """

    def __init__(self, max_depth: Optional[int] = None):
        if max_depth is not None and max_depth < 0:
            raise ValueError(f"max_depth must be >= 0, got {max_depth}")
        self.max_depth = max_depth

    def _group_close(self, cursor: Cursor, depth: int) -> Optional[int]:
        if cursor.peek() != "(":
            return None
        if self.max_depth is not None and depth >= self.max_depth:
            return None
        return _matching_close(cursor)

    def _parse_list(self, span: Cursor, depth: int) -> Result:
        # one frame per open group; a failed inner list ends its parent list
        stack = [_Frame(span, depth)]
        while True:
            top = stack[-1]
            if not top.done:
                c = top.cursor.skip_whitespace()
                found = _symbol(c)
                if found is not None:
                    top.items.append(found[0])
                    top.cursor = found[1]
                    continue
                close = self._group_close(c, top.depth)
                if close is not None:
                    stack.append(_Frame(c.window(c.pos + 1, close), top.depth + 1, close))
                    continue

            stack.pop()
            value = List(tuple(top.items)) if top.items else None
            if not stack:
                return None if value is None else (value, top.cursor)
            parent = stack[-1]
            if value is None:
                parent.done = True
            else:
                parent.items.append(value)
                parent.cursor = parent.cursor.at(top.close + 1)

    def symbol(self, src: Source) -> Result:
        return _symbol(Cursor.of(src))

    def sexpr(self, src: Source, depth: int = 0) -> Result:
        cursor = Cursor.of(src).skip_whitespace()
        close = self._group_close(cursor, depth)
        if close is None:
            return None
        inner = self._parse_list(cursor.window(cursor.pos + 1, close), depth + 1)
        if inner is None:
            return None
        return inner[0], cursor.at(close + 1)

    def expr(self, src: Source, depth: int = 0) -> Result:
        rule = preceded_by(
            Cursor.skip_whitespace,
            choice(self.symbol, lambda c: self.sexpr(c, depth)),
        )
        return rule(Cursor.of(src))

    def expr_list(self, src: Source, depth: int = 0) -> Result:
        return self._parse_list(Cursor.of(src), depth)


# ---- module-level rules (unbounded) ----

_DEFAULT = SexprGrammar()


def symbol(src: Source) -> Result:
    return _DEFAULT.symbol(src)


def sexpr(src: Source) -> Result:
    return _DEFAULT.sexpr(src)


def expr(src: Source) -> Result:
    return _DEFAULT.expr(src)


def expr_list(src: Source) -> Result:
    return _DEFAULT.expr_list(src)


def parse_line(text: str, grammar: Optional[SexprGrammar] = None) -> Optional[Tuple[Expr, str]]:
    """Parse one top-level expression; returns (expr, leftover text) or None."""
    g = grammar or _DEFAULT
    found = g.expr(text)
    if found is None:
        return None
    value, tail = found
    return value, tail.rest
