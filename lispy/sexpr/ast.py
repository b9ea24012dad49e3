# lispy/sexpr/ast.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple, Union

# ---- S-expression AST ----

@dataclass(frozen=True)
class Symbol:
    text: str  # non-empty; no whitespace, '(', ')' or "'"

    def to_source(self) -> str:
        return self.text

@dataclass(frozen=True)
class List:
    elements: Tuple["Expr", ...] = ()

    def __len__(self) -> int:
        return len(self.elements)

    def __iter__(self):
        return iter(self.elements)

    def to_source(self) -> str:
        return _write_source(self)

Expr = Union[Symbol, List]


def _write_source(node: Expr) -> str:
    # explicit stack: nesting depth is unbounded
    parts = []
    stack: list = [node]
    while stack:
        item = stack.pop()
        if isinstance(item, str):
            parts.append(item)
        elif isinstance(item, Symbol):
            parts.append(item.text)
        else:
            parts.append("(")
            stack.append(")")
            for i, e in enumerate(reversed(item.elements)):
                if i:
                    stack.append(" ")
                stack.append(e)
    return "".join(parts)
