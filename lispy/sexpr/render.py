# lispy/sexpr/render.py
"""Human-readable renderings of a parse result.

- ``debug``: multi-line debug form, one item per line, four-space indent and
  a trailing comma after every item::

      (
          Symbol(
              "a",
          ),
          "",
      )

- ``sexpr``: the expression written back as s-expression text.
"""

from __future__ import annotations
from typing import List as _List

from .ast import Symbol, List, Expr

FORMATS = ("debug", "sexpr")

_INDENT = "    "

_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\0": "\\0",
}


def _quote(s: str) -> str:
    out = []
    for ch in s:
        if ch in _ESCAPES:
            out.append(_ESCAPES[ch])
        elif not ch.isprintable():
            out.append(f"\\u{{{ord(ch):x}}}")
        else:
            out.append(ch)
    return '"' + "".join(out) + '"'


class _Elements(tuple):
    """The ``[ ... ]`` part of a List."""


def debug_format(value, level: int = 0) -> str:
    """Pretty debug form of an Expr, a str, or a tuple of those."""
    lines: _List[str] = []
    # (value, indent, first-line pad, trailer); a plain str entry is a finished line
    stack: list = [(value, level, "", "")]
    while stack:
        entry = stack.pop()
        if isinstance(entry, str):
            lines.append(entry)
            continue
        item, indent, head, trailer = entry
        if isinstance(item, _Elements):
            if not item:
                lines.append(f"{head}[]{trailer}")
                continue
            open_, children = "[", tuple(item)
        elif isinstance(item, str):
            lines.append(head + _quote(item) + trailer)
            continue
        elif isinstance(item, Symbol):
            open_, children = "Symbol(", (item.text,)
        elif isinstance(item, List):
            open_, children = "List(", (_Elements(item.elements),)
        elif isinstance(item, tuple):
            open_, children = "(", item
        else:
            raise TypeError(f"cannot render {type(item).__name__}")
        lines.append(head + open_)
        stack.append(_INDENT * indent + (")" if open_ != "[" else "]") + trailer)
        pad = _INDENT * (indent + 1)
        for child in reversed(children):
            stack.append((child, indent + 1, pad, ","))
    return "\n".join(lines)


def render_result(expr: Expr, rest: str, fmt: str = "debug") -> str:
    if fmt == "debug":
        return debug_format((expr, rest))
    if fmt == "sexpr":
        src = expr.to_source()
        return f"{src} {rest!r}" if rest else src
    raise ValueError(f"unknown format: {fmt!r}")
