# SPDX-License-Identifier: MIT
# Copyright 2025-2026 dnz3d4c
"""커서 이동 판정 - 행 변경/열 변경별 발화 결정

행 변경: 주석 있으면 알림음 → 줄 읽기 (위치 모드면 문자, 토큰, 줄 순서)
열 변경: 변위 모드면 이동 구간 읽기, 아니면 문자/단어/줄 중 하나
"""

import re
from dataclasses import dataclass
from typing import List

from .annotations import AnnotationTracker
from .composer import SpeechComposer
from .config import SPEECH_SPACE
from .edit_correlator import EditSuppression
from .models import Cursor, Earcon, PlayEarcon, QueueMode, Speak, SpeechAction, Stop
from .utils.debug import get_logger

log = get_logger("CursorClassifier")

# 비단어 문자 하나 뒤에 단어 문자(영숫자, 밑줄)가 이어지는지
_WORD_START_RE = re.compile(r"^\W(\w+)")

# 공백 하나씩 분리 (구분자 유지)
_SPACE_RE = re.compile(r"( )")


@dataclass
class ToggleFlags:
    """사용자 토글. 명령으로만 변경."""
    speak_row_location: bool = False
    speak_displacement: bool = False


def is_word_start(line: str, column: int) -> bool:
    """column이 단어 첫 글자인지. 0열은 앞에 가상 공백을 붙여 판정."""
    if column == 0:
        suffix = " " + line
    else:
        suffix = line[column - 1:]
    return _WORD_START_RE.match(suffix) is not None


def displacement_text(line: str, previous: int, current: int) -> str:
    """두 열 사이 텍스트. 공백은 "space"로 읽음.

    앞/뒤로 한 칸 이동이면 도착한 문자 자체.
    """
    if abs(current - previous) == 1:
        text = line[current:current + 1]
    else:
        low, high = sorted((previous, current))
        text = line[low + 1:high]
    # 공백만 단어로 바꿈. 탭 등 다른 문자는 그대로
    parts = _SPACE_RE.split(text)
    return " ".join(SPEECH_SPACE if part == " " else part for part in parts if part)


class CursorMovementClassifier:
    """이전/현재 커서로 발화 액션 결정"""

    def __init__(
        self,
        composer: SpeechComposer,
        tracker: AnnotationTracker,
        toggles: ToggleFlags,
        suppression: EditSuppression,
    ):
        self._composer = composer
        self._tracker = tracker
        self._toggles = toggles
        self._suppression = suppression

    def classify(self, previous: Cursor, current: Cursor) -> List[SpeechAction]:
        # 텍스트 입력/삭제로 생긴 커서 이동은 이미 편집 내용을 읽었으므로 생략
        if self._suppression.consume():
            log.trace(f"cursor change suppressed after edit: {current}")
            return []

        if current.row != previous.row:
            return self.on_row_change(current)
        return self.on_column_change(previous, current)

    def on_row_change(self, current: Cursor) -> List[SpeechAction]:
        actions: List[SpeechAction] = []
        if self._tracker.has_row(current.row):
            actions.append(PlayEarcon(Earcon.ALERT))

        if self._toggles.speak_row_location:
            actions.append(Stop())
            actions.extend(self._composer.speak_char(current))
            actions.extend(self._composer.speak_token_at(current))
            actions.extend(self._composer.speak_line(current.row, QueueMode.QUEUE))
        else:
            actions.extend(self._composer.speak_line(current.row, QueueMode.FLUSH))
        return actions

    def on_column_change(self, previous: Cursor, current: Cursor) -> List[SpeechAction]:
        if self._toggles.speak_displacement:
            return self.speak_displacement(previous, current)
        return self.speak_char_or_word_or_line(previous, current)

    def speak_displacement(self, previous: Cursor, current: Cursor) -> List[SpeechAction]:
        line = self._composer.line(current.row)
        text = displacement_text(line, previous.column, current.column)
        actions: List[SpeechAction] = [Stop()]
        if text:
            actions.append(Speak(text, QueueMode.QUEUE))
        return actions

    def speak_char_or_word_or_line(self, previous: Cursor, current: Cursor) -> List[SpeechAction]:
        """점프일 때만 줄/단어 판정. 한 칸 이동은 항상 문자."""
        if abs(current.column - previous.column) != 1:
            line = self._composer.line(current.row)
            if current.column == 0 or current.column == len(line):
                return self._composer.speak_line(current.row, QueueMode.FLUSH)
            if is_word_start(line, current.column):
                return [Stop(), *self._composer.speak_token_at(current)]
        return self._composer.speak_char(current)
