# SPDX-License-Identifier: MIT
# Copyright 2025-2026 dnz3d4c
"""에디터 접근 추상화 레이어. 판정 로직에서 호스트 에디터 직접 호출 제거 목적."""

import re
from typing import Iterable, List, Optional, Protocol, Sequence, runtime_checkable

from ..config import PLAIN_TEXT_TOKEN_TYPE
from ..models import Cursor, Token
from ..utils.debug import get_logger

log = get_logger("EditorAdapter")


@runtime_checkable
class EditorAdapter(Protocol):
    """호스트 에디터 조회 인터페이스. 테스트 시 InMemoryEditor로 대체 가능."""

    def get_cursor(self) -> Cursor:
        """현재 커서 위치."""
        ...

    def get_tokens(self, row: int) -> List[Token]:
        """행의 토큰 목록. 없으면 빈 리스트."""
        ...

    def get_line(self, row: int) -> str:
        """행 텍스트. 범위 밖이면 빈 문자열."""
        ...

    def get_token_at(self, row: int, column: int) -> Optional[Token]:
        """column 위치 문자를 포함하는 토큰."""
        ...

    def is_modal_editing(self) -> bool:
        """모달 편집(vim 등) 키보드 핸들러 사용 여부."""
        ...

    def get_modal_state(self) -> Optional[str]:
        """모달 편집 현재 상태 문자열."""
        ...


# 토큰 정보 없는 텍스트용 단순 분리: 단어 / 공백 / 기호
_SIMPLE_TOKEN_RE = re.compile(r"\w+|\s+|[^\w\s]+")


def simple_tokenize(line: str) -> List[Token]:
    """구문 강조 없이 줄을 토큰으로 분리. 공백은 일반 텍스트 토큰."""
    tokens = []
    for match in _SIMPLE_TOKEN_RE.finditer(line):
        value = match.group()
        if value.isspace():
            token_type = PLAIN_TEXT_TOKEN_TYPE
        elif value[0].isalnum() or value[0] == "_":
            token_type = "identifier"
        else:
            token_type = "punctuation.operator"
        tokens.append(Token(token_type, value))
    return tokens


class InMemoryEditor:
    """EditorAdapter 메모리 구현. 이벤트 재생 CLI와 테스트에서 사용.

    tokens를 주지 않은 행은 simple_tokenize로 분리.
    """

    def __init__(
        self,
        lines: Sequence[str] = (),
        tokens: Optional[dict[int, Iterable[Token]]] = None,
        cursor: Cursor = Cursor(),
        modal_active: bool = False,
        modal_state: Optional[str] = None,
    ):
        self.lines: List[str] = list(lines)
        self._tokens: dict[int, List[Token]] = {
            row: list(row_tokens) for row, row_tokens in (tokens or {}).items()
        }
        self.cursor = cursor
        self.modal_active = modal_active
        self.modal_state = modal_state

    def set_line(self, row: int, text: str, tokens: Optional[Iterable[Token]] = None) -> None:
        while len(self.lines) <= row:
            self.lines.append("")
        self.lines[row] = text
        if tokens is None:
            self._tokens.pop(row, None)
        else:
            self._tokens[row] = list(tokens)

    def get_cursor(self) -> Cursor:
        return self.cursor

    def get_tokens(self, row: int) -> List[Token]:
        if row in self._tokens:
            return list(self._tokens[row])
        return simple_tokenize(self.get_line(row))

    def get_line(self, row: int) -> str:
        if 0 <= row < len(self.lines):
            return self.lines[row]
        return ""

    def get_token_at(self, row: int, column: int) -> Optional[Token]:
        start = 0
        for token in self.get_tokens(row):
            end = start + len(token.value)
            if start <= column < end:
                return token
            start = end
        log.trace(f"no token at row={row}, column={column}")
        return None

    def is_modal_editing(self) -> bool:
        return self.modal_active

    def get_modal_state(self) -> Optional[str]:
        return self.modal_state
