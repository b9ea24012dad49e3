# lispy/peg/__init__.py
"""Parser combinator core for lispy.

This package provides:
- `Cursor`, an immutable view over the remaining input of one line
- single-codepoint matchers and the repetition / choice combinators

It knows nothing about s-expressions; the grammar lives in lispy.sexpr.
"""

from .cursor import Cursor, is_whitespace
from .combinators import (
    Parser, Consumer,
    char_parser, iter_parse, parse_multiple,
    choice, preceded_by, parse_map,
)
