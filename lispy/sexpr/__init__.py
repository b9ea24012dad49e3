# lispy/sexpr/__init__.py
"""S-expression layer: AST, grammar rules and result rendering."""

from .ast import Symbol, List, Expr
from .grammar import (
    SexprGrammar, parse_line,
    symbol, sexpr, expr, expr_list,
    symbol_character, whitespace, is_symbol_excluded,
)
from .render import debug_format, render_result, FORMATS
from .loader import load_lines
