# lispy/peg/cursor.py
"""입력 커서(Cursor) — 한 줄 버퍼 위의 읽기 전용 위치.

- 남은 입력은 항상 `text[pos:end]` 이며, 버퍼는 **복사하지 않는다**.
- 전진은 새 커서를 만드는 방식으로만 이루어진다(불변).
- 파이썬 `str`은 코드포인트 단위로 인덱싱되므로 모든 위치는
  자연스럽게 코드포인트 경계 위에 있다.
- 공백 판정은 유니코드 `White_Space` 속성(`regex`의 `\\p{White_Space}`)을 따른다.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Union

import regex

_RE_WS = regex.compile(r"\p{White_Space}")
_RE_WS_RUN = regex.compile(r"\p{White_Space}*")


def is_whitespace(ch: str) -> bool:
    """단일 코드포인트가 유니코드 공백(White_Space)인지 판정."""
    return _RE_WS.fullmatch(ch) is not None


@dataclass(frozen=True)
class Cursor:
    text: str   # 원본 라인 버퍼(공유)
    pos: int    # 남은 입력의 시작 (0-based, 코드포인트)
    end: int    # 남은 입력의 끝 (exclusive)

    @classmethod
    def of(cls, src: Union[str, "Cursor"]) -> "Cursor":
        if isinstance(src, Cursor):
            return src
        return cls(src, 0, len(src))

    # ---- 조회 ----
    @property
    def at_end(self) -> bool:
        return self.pos >= self.end

    @property
    def rest(self) -> str:
        """남은 입력을 문자열로(표시용 복사본)."""
        return self.text[self.pos:self.end]

    def __len__(self) -> int:
        return self.end - self.pos

    def peek(self) -> Optional[str]:
        if self.pos >= self.end:
            return None
        return self.text[self.pos]

    def same_position(self, other: "Cursor") -> bool:
        return (self.text is other.text
                and self.pos == other.pos
                and self.end == other.end)

    # ---- 새 커서 만들기 ----
    def advance(self, n: int = 1) -> "Cursor":
        if n < 0 or self.pos + n > self.end:
            raise ValueError(f"cannot advance {n} from {self.pos} (end={self.end})")
        return Cursor(self.text, self.pos + n, self.end)

    def at(self, pos: int) -> "Cursor":
        if not (self.pos <= pos <= self.end):
            raise ValueError(f"position {pos} outside [{self.pos}, {self.end}]")
        return Cursor(self.text, pos, self.end)

    def window(self, start: int, stop: int) -> "Cursor":
        """현재 범위 안쪽의 부분 뷰 [start, stop) (절대 오프셋)."""
        if not (self.pos <= start <= stop <= self.end):
            raise ValueError(f"window [{start}, {stop}) outside [{self.pos}, {self.end})")
        return Cursor(self.text, start, stop)

    def skip_whitespace(self) -> "Cursor":
        m = _RE_WS_RUN.match(self.text, self.pos, self.end)
        if m is None or m.end() == self.pos:
            return self
        return Cursor(self.text, m.end(), self.end)

    def __str__(self) -> str:
        return self.rest
