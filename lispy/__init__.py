# lispy/__init__.py
"""lispy — 한 줄 단위 S-expression 파서.

구성
----
- `lispy.peg`   : 커서 모델과 파서 컴비네이터(단일 코드포인트 매처, 반복, 선택)
- `lispy.sexpr` : 문법 규칙(symbol / sexpr / expr / expr_list), AST, 출력 형식
- `lispy.repl`  : 표준입력을 한 줄씩 읽어 파싱 결과를 출력하는 드라이버(CLI)
"""

__version__ = "0.1.0"

from .peg import Cursor
from .sexpr import (
    Symbol, List, Expr,
    SexprGrammar, parse_line,
    symbol, sexpr, expr, expr_list,
)
