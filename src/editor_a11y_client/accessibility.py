# SPDX-License-Identifier: MIT
# Copyright 2025-2026 dnz3d4c
"""접근성 출력 모듈 (accessible_output2)

음성과 점자 모두 출력. NVDA → SAPI5 자동 fallback.
이어콘은 utils.beep 톤, 키 에코는 keyboard 훅으로 처리.
"""

from typing import Any, Callable, Optional

import keyboard

from .models import Earcon, QueueMode, SpeechProfile
from .utils.beep import play_earcon_tones

# 로거는 지연 초기화 (순환 import 방지)
_log = None


def _get_logger():
    """지연 초기화로 순환 import 방지."""
    global _log
    if _log is None:
        from .utils.debug import get_logger
        _log = get_logger("Speech")
    return _log


# accessible_output2 (NVDA/JAWS/SAPI5 등). 첫 사용 시 생성
_ao2_output = None
_ao2_loaded = False


def _get_output():
    global _ao2_output, _ao2_loaded
    if not _ao2_loaded:
        _ao2_loaded = True
        try:
            from accessible_output2.outputs.auto import Auto

            _ao2_output = Auto()
        except ImportError:
            _get_logger().warning("accessible_output2 not installed")
        except Exception as e:
            _get_logger().warning(f"accessible_output2 init failed: {e}")
    return _ao2_output


def is_available() -> bool:
    """사용 가능한 스크린 리더/음성 엔진이 있는지."""
    output = _get_output()
    if output is None:
        return False
    try:
        return output.get_first_available_output() is not None
    except Exception as e:
        _get_logger().debug(f"output probe failed: {e}")
        return False


def speak(text: str, interrupt: bool = False) -> bool:
    """음성+점자 출력. interrupt=True면 음성만 (이전 발화 중단)."""
    _get_logger().debug(f"text={text!r}, interrupt={interrupt}")
    output = _get_output()
    if output is not None:
        try:
            if interrupt:
                # 이전 발화 중단 필요 시 음성만
                output.speak(text, interrupt=True)
            else:
                # 일반 출력: 음성 + 점자
                output.output(text)
            return True
        except Exception as e:
            _get_logger().debug(f"output failed: {e}")

    # fallback: 로그 출력 (스크린 리더 없음)
    _get_logger().warning(f"TTS fallback (no screen reader): {text}")
    return False


def silence() -> None:
    """진행 중 발화 중단."""
    output = _get_output()
    if output is None:
        return
    try:
        current = output.get_first_available_output()
        if current is not None and hasattr(current, "silence"):
            current.silence()
    except Exception as e:
        _get_logger().debug(f"silence failed: {e}")


class AccessibleOutputSpeechService:
    """SpeechService 구현. accessible_output2로 발화.

    음성 스타일(속도/음높이)은 스크린 리더 설정을 따르므로 적용하지 않고 기록만 함.
    """

    def __init__(self, speak_func: Callable[[str, bool], bool] = speak):
        self._speak = speak_func
        self._key_echo = False
        self._key_hook: Optional[Any] = None

    @property
    def key_echo(self) -> bool:
        return self._key_echo

    def is_available(self) -> bool:
        return is_available()

    def speak(
        self,
        text: str,
        mode: QueueMode = QueueMode.QUEUE,
        profile: Optional[SpeechProfile] = None,
    ) -> bool:
        if profile is not None:
            _get_logger().trace(f"profile ignored: {profile}")
        return self._speak(text, mode is QueueMode.FLUSH)

    def stop(self) -> None:
        silence()

    def play_earcon(self, earcon: Earcon) -> None:
        _get_logger().debug(f"earcon: {earcon.value}")
        play_earcon_tones(earcon.value)

    def set_key_echo(self, enabled: bool) -> None:
        """입력 모드에서 누른 키 이름을 읽음."""
        if enabled == self._key_echo:
            return
        self._key_echo = enabled
        if enabled:
            self._key_hook = keyboard.on_press(self._echo_key)
        elif self._key_hook is not None:
            keyboard.unhook(self._key_hook)
            self._key_hook = None
        _get_logger().debug(f"key echo {'on' if enabled else 'off'}")

    def _echo_key(self, event: Any) -> None:
        name = getattr(event, "name", None)
        if name:
            self._speak(name, True)
