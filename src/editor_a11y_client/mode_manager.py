# SPDX-License-Identifier: MIT
# Copyright 2025-2026 dnz3d4c
"""모달 편집 상태 관리 - 명령/입력 모드 전환 알림"""

from enum import Enum, auto
from typing import List, Optional

from .config import (
    MODAL_COMMAND_STATE,
    MODAL_INSERT_STATE,
    SPEECH_COMMAND_MODE,
    SPEECH_INSERT_MODE,
)
from .infrastructure.editor_adapter import EditorAdapter
from .models import Earcon, PlayEarcon, QueueMode, SetKeyEcho, Speak, SpeechAction
from .utils.debug import get_logger

log = get_logger("ModeManager")


class ModeState(Enum):
    UNKNOWN = auto()    # 초기 상태
    COMMAND = auto()
    INSERT = auto()
    OTHER = auto()      # 알 수 없는 상태 문자열 (저장만 함)


class ModeStateMachine:
    """모드 상태 관리자"""

    def __init__(
        self,
        editor: EditorAdapter,
        insert_state: str = MODAL_INSERT_STATE,
        command_state: str = MODAL_COMMAND_STATE,
    ):
        self._editor = editor
        self._insert_state = insert_state
        self._command_state = command_state
        self._state: Optional[str] = None

    # === 읽기 전용 프로퍼티 ===

    @property
    def raw_state(self) -> Optional[str]:
        return self._state

    @property
    def state(self) -> ModeState:
        return self._classify(self._state)

    def _classify(self, state: Optional[str]) -> ModeState:
        if state is None:
            return ModeState.UNKNOWN
        if state == self._insert_state:
            return ModeState.INSERT
        if state == self._command_state:
            return ModeState.COMMAND
        return ModeState.OTHER

    # === 이벤트 ===

    def activate(self) -> List[SpeechAction]:
        """시작 시 모달 편집이면 명령 모드로 가정하고 키 에코 끔."""
        if self._editor.is_modal_editing():
            return [SetKeyEcho(False)]
        return []

    def on_status_changed(self, state: Optional[str]) -> List[SpeechAction]:
        """같은 상태 반복은 무시. 입력/명령 모드만 알림음 + 키 에코 전환."""
        if not self._editor.is_modal_editing():
            return []
        if state == self._state:
            return []

        actions: List[SpeechAction] = []
        mode = self._classify(state)
        if mode is ModeState.INSERT:
            actions = [PlayEarcon(Earcon.MODAL_SWITCH), SetKeyEcho(True)]
        elif mode is ModeState.COMMAND:
            actions = [PlayEarcon(Earcon.MODAL_SWITCH), SetKeyEcho(False)]
        else:
            log.debug(f"unrecognized modal state stored: {state!r}")

        log.debug(f"mode {self._state!r} -> {state!r}")
        self._state = state
        return actions

    def speak_mode(self) -> List[SpeechAction]:
        """저장된 상태가 아닌 에디터의 현재 상태를 읽음."""
        if not self._editor.is_modal_editing():
            return []
        mode = self._classify(self._editor.get_modal_state())
        if mode is ModeState.INSERT:
            return [Speak(SPEECH_INSERT_MODE, QueueMode.FLUSH)]
        if mode is ModeState.COMMAND:
            return [Speak(SPEECH_COMMAND_MODE, QueueMode.FLUSH)]
        return []
