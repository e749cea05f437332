# SPDX-License-Identifier: MIT
# Copyright 2025-2026 dnz3d4c
"""음성 출력 추상화. 테스트 시 mock으로 대체 가능."""

from typing import Iterable, Optional, Protocol, runtime_checkable

from ..models import (
    Earcon,
    PlayEarcon,
    QueueMode,
    SetKeyEcho,
    Speak,
    SpeechAction,
    SpeechProfile,
    Stop,
)
from ..utils.debug import get_logger

log = get_logger("SpeechService")


@runtime_checkable
class SpeechService(Protocol):
    """음성/이어콘 출력 인터페이스."""

    def is_available(self) -> bool:
        """스크린 리더/음성 엔진 사용 가능 여부."""
        ...

    def speak(
        self,
        text: str,
        mode: QueueMode = QueueMode.QUEUE,
        profile: Optional[SpeechProfile] = None,
    ) -> bool:
        """텍스트를 음성으로 출력. FLUSH면 이전 발화 중단."""
        ...

    def stop(self) -> None:
        """진행 중 발화 중단."""
        ...

    def play_earcon(self, earcon: Earcon) -> None:
        """알림음 재생."""
        ...

    def set_key_echo(self, enabled: bool) -> None:
        """입력 키 읽기 on/off."""
        ...


def apply_actions(service: SpeechService, actions: Iterable[SpeechAction]) -> None:
    """액션을 순서대로 음성 서비스에 전달. 순서 변경 없음."""
    for action in actions:
        if isinstance(action, Speak):
            service.speak(action.text, action.mode, action.profile)
        elif isinstance(action, Stop):
            service.stop()
        elif isinstance(action, PlayEarcon):
            service.play_earcon(action.earcon)
        elif isinstance(action, SetKeyEcho):
            service.set_key_echo(action.enabled)
        else:
            log.warning(f"unknown speech action: {action!r}")
