# SPDX-License-Identifier: MIT
# Copyright 2025-2026 dnz3d4c
"""토큰/줄 발화 구성 - 구문 종류별 음성 스타일 적용"""

from typing import List, Optional

from .config import PLAIN_TEXT_TOKEN_TYPE
from .infrastructure.editor_adapter import EditorAdapter
from .models import Cursor, QueueMode, Speak, SpeechAction, Token
from .speech_profiles import profile_for
from .utils.debug import get_logger

log = get_logger("Composer")


class SpeechComposer:
    """토큰, 줄, 문자를 스타일 적용된 발화 액션으로 변환"""

    def __init__(self, editor: EditorAdapter):
        self._editor = editor

    def speak_token(self, token: Optional[Token], mode: QueueMode) -> List[SpeechAction]:
        """토큰 타입의 최상위 구분으로 스타일 결정. 토큰 없으면 발화 없음."""
        if token is None:
            return []
        return [Speak(token.value, mode, profile_for(token.type))]

    def speak_line(self, row: int, mode: QueueMode) -> List[SpeechAction]:
        """첫 토큰은 호출자 모드, 나머지는 QUEUE. 일반 텍스트 토큰은 구분자로 보고 생략."""
        tokens = self._editor.get_tokens(row)
        if not tokens:
            log.trace(f"no tokens on row {row}")
            return []

        first, rest = tokens[0], tokens[1:]
        actions = self.speak_token(first, mode)
        for token in rest:
            if token.type != PLAIN_TEXT_TOKEN_TYPE:
                actions.extend(self.speak_token(token, QueueMode.QUEUE))
        return actions

    def line(self, row: int) -> str:
        return self._editor.get_line(row)

    def speak_char(self, cursor: Cursor) -> List[SpeechAction]:
        """커서 아래 문자 하나. 줄 끝이면 발화 없음."""
        line = self._editor.get_line(cursor.row)
        if cursor.column >= len(line):
            return []
        return [Speak(line[cursor.column], QueueMode.QUEUE)]

    def token_at(self, cursor: Cursor) -> Optional[Token]:
        return self._editor.get_token_at(cursor.row, cursor.column)

    def speak_token_at(self, cursor: Cursor) -> List[SpeechAction]:
        return self.speak_token(self.token_at(cursor), QueueMode.QUEUE)
