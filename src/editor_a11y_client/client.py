# SPDX-License-Identifier: MIT
# Copyright 2025-2026 dnz3d4c
"""클라이언트 - 엔진, 음성 서비스, 핫키, 활성화 조율"""

import threading
from typing import List, Optional

from .activation import ServiceActivation
from .commands import Command
from .engine import EditorSpeechEngine
from .hotkeys import HotkeyManager
from .infrastructure.editor_adapter import EditorAdapter
from .infrastructure.speech_service import SpeechService, apply_actions
from .models import EditorEvent, SpeechAction
from .settings import Settings, get_settings
from .utils.debug import get_logger

log = get_logger("Client")


class EditorA11yClient:
    """에디터 하나에 붙는 음성 피드백 클라이언트

    음성 서비스가 준비되기 전 이벤트는 버림.
    """

    def __init__(
        self,
        editor: EditorAdapter,
        speech: SpeechService,
        settings: Optional[Settings] = None,
        hotkey_manager: Optional[HotkeyManager] = None,
    ):
        self._settings = settings or get_settings()
        self._speech = speech
        self.engine = EditorSpeechEngine(editor, self._settings)
        self.hotkey_manager = hotkey_manager or HotkeyManager()

        # 핫키 콜백은 keyboard 훅 스레드에서 오므로 엔진 호출 직렬화 (RLock: 중첩 호출 허용)
        self._lock = threading.RLock()
        self._active = False
        self._register_hotkeys = True
        self.activation = ServiceActivation(
            probe=speech.is_available,
            on_ready=self._on_service_ready,
            max_tries=self._settings.activation_max_tries,
            interval=self._settings.activation_interval,
        )

    @property
    def is_active(self) -> bool:
        with self._lock:
            return self._active

    def start(self, register_hotkeys: bool = True) -> None:
        """음성 서비스 확인 시작. 준비되면 엔진 활성화 + 핫키 등록."""
        self._register_hotkeys = register_hotkeys
        self.activation.start()

    def _on_service_ready(self) -> None:
        with self._lock:
            if self._active:
                return
            self._active = True
            actions = self.engine.activate()
            # 외부 호출은 순서 유지
            apply_actions(self._speech, actions)
        if self._register_hotkeys:
            self.hotkey_manager.register(self.engine.dispatcher.shortcuts, self._on_hotkey)
        log.info("client activated")

    def stop(self) -> None:
        self.activation.cancel()
        self.hotkey_manager.unregister_all()
        with self._lock:
            self._active = False
        log.debug("client stopped")

    # === 입력 ===

    def notify(self, event: EditorEvent) -> List[SpeechAction]:
        """에디터 이벤트 처리. 활성화 전이면 무시."""
        with self._lock:
            if not self._active:
                return []
            actions = self.engine.handle(event)
            apply_actions(self._speech, actions)
            return actions

    def run_command(self, name: str) -> List[SpeechAction]:
        """메뉴 등 보조 UI에서 명령 실행."""
        with self._lock:
            if not self._active:
                return []
            actions = self.engine.run_command(name)
            apply_actions(self._speech, actions)
            return actions

    def menu_actions_json(self) -> str:
        return self.engine.dispatcher.menu_actions_json()

    def _on_hotkey(self, command: Command) -> None:
        self.run_command(command.value)
