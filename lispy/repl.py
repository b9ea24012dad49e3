# lispy/repl.py
"""lispy – 한 줄 단위 S-expression 파서 CLI

사용 예)
    $ python -m lispy.repl repl
    $ python -m lispy.repl repl --input tests/data/lines.txt --format sexpr
    $ python -m lispy.repl parse --text "(a (b c) d)" -D

기능
----
- repl  : 입력(기본 stdin)을 EOF까지 한 줄씩 읽어, 프롬프트를 찍고 `expr`로 파싱한 결과를 출력
- parse : 주어진 텍스트/파일의 각 줄을 프롬프트 없이 파싱해 출력(실패 시 `no match`)

파싱 실패(no match)는 오류가 아니다. repl에서는 해당 줄에 프롬프트만 남는다.
디버그 모드(-D/--debug)를 켜면 줄 번호/결과/남은 입력을 stderr로 출력합니다.
"""

from __future__ import annotations
import argparse
import sys
from dataclasses import dataclass
from typing import Iterable, Optional, TextIO

from .sexpr.grammar import SexprGrammar
from .sexpr.render import FORMATS, render_result
from .sexpr.loader import load_lines

DEFAULT_PROMPT = "lispy>"

# ------------------------------
# 헬퍼
# ------------------------------

def _eprint(*args, **kw) -> None:
    print(*args, file=sys.stderr, **kw)


def _strip_eol(line: str) -> str:
    """줄 끝의 개행 문자만 제거(앞뒤 공백은 그대로 둔다)."""
    if line.endswith("\r\n"):
        return line[:-2]
    if line.endswith("\n") or line.endswith("\r"):
        return line[:-1]
    return line


def _depth_arg(value: str) -> Optional[int]:
    n = int(value)
    if n < 0:
        raise argparse.ArgumentTypeError(f"--max-depth must be >= 0, got {n}")
    return n or None


@dataclass
class ReplConfig:
    prompt: str = DEFAULT_PROMPT
    max_depth: Optional[int] = None   # None = 제한 없음
    fmt: str = "debug"
    debug: bool = False

    def grammar(self) -> SexprGrammar:
        return SexprGrammar(max_depth=self.max_depth)

# ------------------------------
# 드라이버 루프
# ------------------------------

def run_repl(lines: Iterable[str], out: TextIO, config: Optional[ReplConfig] = None) -> int:
    """`lines`를 끝까지 읽으며 줄마다 프롬프트 + 파싱 결과를 `out`에 쓴다."""
    cfg = config or ReplConfig()
    g = cfg.grammar()
    for lineno, raw in enumerate(lines, 1):
        line = _strip_eol(raw)
        out.write(cfg.prompt)
        found = g.expr(line)
        if found is None:
            if cfg.debug: _eprint(f"[DEBUG] line {lineno}: no match")
            continue
        value, tail = found
        if cfg.debug: _eprint(f"[DEBUG] line {lineno}: {value.to_source()} | leftover={tail.rest!r}")
        out.write(render_result(value, tail.rest, cfg.fmt) + "\n")
        out.flush()
    return 0

# ------------------------------
# 커맨드 구현
# ------------------------------

def _config_from(args, prompt: str) -> ReplConfig:
    return ReplConfig(prompt=prompt, max_depth=args.max_depth, fmt=args.format, debug=args.debug)


def cmd_repl(args) -> int:
    cfg = _config_from(args, args.prompt)
    if args.debug:
        _eprint(f"[DEBUG] max_depth={cfg.max_depth} format={cfg.fmt}")
    try:
        if args.input is not None:
            lines = load_lines(args.input)
            return run_repl(lines, sys.stdout, cfg)
        return run_repl(sys.stdin, sys.stdout, cfg)
    except (OSError, UnicodeDecodeError) as e:
        _eprint("[ERROR]", type(e).__name__, str(e))
        return 2
    except KeyboardInterrupt:
        _eprint()
        return 130


def cmd_parse(args) -> int:
    """프롬프트 없이 각 줄을 파싱해 결과를 표준출력으로 보여줍니다."""
    try:
        if args.text is not None:
            lines = [args.text]
        else:
            lines = load_lines(args.input)
    except (OSError, UnicodeDecodeError) as e:
        _eprint("[ERROR]", type(e).__name__, str(e))
        return 2

    cfg = _config_from(args, "")
    g = cfg.grammar()
    for lineno, line in enumerate(lines, 1):
        found = g.expr(line)
        if found is None:
            if args.debug: _eprint(f"[DEBUG] line {lineno}: no match")
            print("no match")
            continue
        value, tail = found
        if args.debug: _eprint(f"[DEBUG] line {lineno}: leftover={tail.rest!r}")
        print(render_result(value, tail.rest, cfg.fmt))
    return 0

# ------------------------------
# 엔트리포인트
# ------------------------------

def _add_common(p: argparse.ArgumentParser) -> None:
    p.add_argument("--max-depth", type=_depth_arg, default=None,
                   help="괄호 중첩 깊이 상한(0 또는 미지정이면 제한 없음)")
    p.add_argument("--format", choices=list(FORMATS), default="debug", help="결과 출력 형식")
    p.add_argument("-D", "--debug", action="store_true", help="디버그 정보를 stderr로 출력")


def main(argv: Optional[list[str]] = None) -> int:
    ap = argparse.ArgumentParser(prog="lispy", description="line-oriented s-expression parser")
    sub = ap.add_subparsers(dest="cmd", required=True)

    p_repl = sub.add_parser("repl", help="입력을 EOF까지 한 줄씩 읽어 파싱 결과를 출력합니다")
    p_repl.add_argument("--input", help="입력 텍스트 파일 경로(미지정시 stdin)")
    p_repl.add_argument("--prompt", default=DEFAULT_PROMPT, help="줄마다 출력할 프롬프트")
    _add_common(p_repl)
    p_repl.set_defaults(func=cmd_repl)

    p_parse = sub.add_parser("parse", help="주어진 텍스트를 프롬프트 없이 파싱합니다")
    src_group = p_parse.add_mutually_exclusive_group(required=True)
    src_group.add_argument("--text", help="직접 입력 텍스트(한 줄)")
    src_group.add_argument("--input", help="입력 텍스트 파일 경로")
    _add_common(p_parse)
    p_parse.set_defaults(func=cmd_parse)

    args = ap.parse_args(argv)
    return int(args.func(args))

if __name__ == "__main__":
    sys.exit(main())
