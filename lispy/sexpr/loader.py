"""(MVP) 간단한 라인 소스 로더"""

from __future__ import annotations
from pathlib    import Path
from typing     import List


def load_lines(path: str) -> List[str]:
    """
    Load Source Lines
    - UTF-8로 읽고 개행(\\r\\n, \\r)을 \\n으로 정규화한 뒤 줄 단위로 나눈다.
    - 각 줄의 개행 문자는 포함하지 않는다.
    """
    text = Path(path).read_text(encoding="utf-8")
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    return text.split("\n")[:-1] if text.endswith("\n") else text.split("\n")
