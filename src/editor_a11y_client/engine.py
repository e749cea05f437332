# SPDX-License-Identifier: MIT
# Copyright 2025-2026 dnz3d4c
"""발화 판정 엔진 - 에디터 이벤트 → 음성 액션 목록

세션 상태(마지막 커서, 주석 테이블, 모드, 토글, 편집 억제)를 모두 소유.
부작용 없이 액션 목록만 반환하므로 음성 서비스 없이 테스트 가능.
"""

from typing import List, Optional

from .annotations import AnnotationTracker, row_col_to_string
from .commands import COMMAND_DEFAULTS, Command, CommandDispatcher, Shortcut
from .composer import SpeechComposer
from .config import (
    SHORTCUT_MODIFIERS,
    SPEECH_DISPLACEMENT_DISABLED,
    SPEECH_DISPLACEMENT_ENABLED,
    SPEECH_LOCATION_DISABLED,
    SPEECH_LOCATION_ENABLED,
)
from .cursor import CursorMovementClassifier, ToggleFlags
from .edit_correlator import EditCursorCorrelator, EditSuppression
from .infrastructure.editor_adapter import EditorAdapter
from .mode_manager import ModeStateMachine
from .models import (
    AnnotationsChanged,
    Cursor,
    CursorChanged,
    Earcon,
    EditorEvent,
    PlayEarcon,
    QueueMode,
    SearchChanged,
    Speak,
    SpeechAction,
    StatusChanged,
    TextChanged,
)
from .settings import Settings
from .utils.debug import get_logger

log = get_logger("Engine")


class EditorSpeechEngine:
    """편집 세션 하나의 발화 판정 컨텍스트"""

    def __init__(self, editor: EditorAdapter, settings: Optional[Settings] = None):
        self._editor = editor
        self._settings = settings

        self.last_cursor: Cursor = editor.get_cursor()
        self.toggles = ToggleFlags()
        self.suppression = EditSuppression()
        self.tracker = AnnotationTracker()
        self.composer = SpeechComposer(editor)
        self.classifier = CursorMovementClassifier(
            self.composer, self.tracker, self.toggles, self.suppression
        )
        self.correlator = EditCursorCorrelator(self.suppression)
        if settings is not None:
            self.modes = ModeStateMachine(editor, settings.insert_state, settings.command_state)
        else:
            self.modes = ModeStateMachine(editor)
        self.dispatcher = CommandDispatcher(self._build_shortcuts())

    def _build_shortcuts(self) -> List[Shortcut]:
        actions = {
            Command.SPEAK_ANNOT: lambda: self.tracker.speak_annotations_for_row(self.last_cursor.row),
            Command.SPEAK_ALL_ANNOTS: self.tracker.speak_all_annotations,
            Command.SPEAK_MODE: self.modes.speak_mode,
            Command.TOGGLE_LOCATION: self.toggle_speak_row_location,
            Command.SPEAK_ROW_COL: self.speak_row_and_column,
            Command.TOGGLE_DISPLACEMENT: self.toggle_speak_displacement,
        }
        shortcuts = []
        for command, key, description in COMMAND_DEFAULTS:
            modifiers = SHORTCUT_MODIFIERS
            if self._settings is not None:
                hotkey = self._settings.get_hotkey(command.value) or {}
                key = str(hotkey.get("key", key))
                modifiers = hotkey.get("modifiers", modifiers)
            shortcuts.append(Shortcut(
                command=command,
                key=key,
                description=description,
                action=actions[command],
                modifiers=tuple(modifiers),
            ))
        return shortcuts

    # === 이벤트 ===

    def activate(self) -> List[SpeechAction]:
        """음성 서비스 준비 후 한 번 호출."""
        return self.modes.activate()

    def handle(self, event: EditorEvent) -> List[SpeechAction]:
        if isinstance(event, CursorChanged):
            return self.on_cursor_changed(event.cursor)
        if isinstance(event, TextChanged):
            return self.correlator.on_text_changed(event)
        if isinstance(event, AnnotationsChanged):
            return self.tracker.on_annotations_changed(event.annotations)
        if isinstance(event, StatusChanged):
            return self.modes.on_status_changed(event.state)
        if isinstance(event, SearchChanged):
            return self.on_search_changed(event.matched)
        log.warning(f"unknown event ignored: {event!r}")
        return []

    def on_cursor_changed(self, cursor: Cursor) -> List[SpeechAction]:
        actions = self.classifier.classify(self.last_cursor, cursor)
        log.trace(f"cursor {self.last_cursor} -> {cursor}: {len(actions)} actions")
        self.last_cursor = cursor
        return actions

    def on_search_changed(self, matched: bool) -> List[SpeechAction]:
        """검색 결과 없으면 알림음, 있으면 현재 줄 읽기."""
        if not matched:
            return [PlayEarcon(Earcon.ALERT)]
        return self.composer.speak_line(self.last_cursor.row, QueueMode.FLUSH)

    # === 명령 ===

    def run_command(self, name: str) -> List[SpeechAction]:
        return self.dispatcher.run_command(name)

    def on_key_down(
        self,
        key_code: int,
        ctrl: bool = False,
        shift: bool = False,
        alt: bool = False,
    ) -> List[SpeechAction]:
        return self.dispatcher.on_key_down(key_code, ctrl=ctrl, shift=shift, alt=alt)

    def speak_row_and_column(self) -> List[SpeechAction]:
        cursor = self.last_cursor
        return [Speak(row_col_to_string(cursor.row, cursor.column), QueueMode.FLUSH)]

    def toggle_speak_row_location(self) -> List[SpeechAction]:
        self.toggles.speak_row_location = not self.toggles.speak_row_location
        log.debug(f"speak_row_location={self.toggles.speak_row_location}")
        if self.toggles.speak_row_location:
            return [Speak(SPEECH_LOCATION_ENABLED, QueueMode.FLUSH)]
        return [Speak(SPEECH_LOCATION_DISABLED, QueueMode.FLUSH)]

    def toggle_speak_displacement(self) -> List[SpeechAction]:
        self.toggles.speak_displacement = not self.toggles.speak_displacement
        log.debug(f"speak_displacement={self.toggles.speak_displacement}")
        if self.toggles.speak_displacement:
            return [Speak(SPEECH_DISPLACEMENT_ENABLED, QueueMode.FLUSH)]
        return [Speak(SPEECH_DISPLACEMENT_DISABLED, QueueMode.FLUSH)]
