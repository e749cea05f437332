# SPDX-License-Identifier: MIT
# Copyright 2025-2026 dnz3d4c
"""pytest 공용 fixtures."""

from typing import Any, List, Optional

import pytest

from editor_a11y_client.engine import EditorSpeechEngine
from editor_a11y_client.infrastructure.editor_adapter import InMemoryEditor
from editor_a11y_client.models import Earcon, QueueMode, SpeechProfile, Token
from editor_a11y_client.settings import Settings


# =============================================================================
# 에디터 fixtures
# =============================================================================

CODE_LINES = [
    "def foo(a_b):",
    "    return a_b;",
    "",
    "x = 1",
]

CODE_TOKENS = {
    0: [
        Token("storage.type", "def"),
        Token("text", " "),
        Token("entity.name.function", "foo"),
        Token("paren.lparen", "("),
        Token("variable.parameter", "a_b"),
        Token("paren.rparen", "):"),
    ],
    1: [
        Token("text", "    "),
        Token("keyword.control", "return"),
        Token("text", " "),
        Token("identifier", "a_b"),
        Token("punctuation.operator", ";"),
    ],
}


@pytest.fixture
def code_editor():
    """구문 토큰이 있는 4줄 코드 에디터. 커서 (0, 0)."""
    return InMemoryEditor(lines=CODE_LINES, tokens=CODE_TOKENS)


@pytest.fixture
def engine(code_editor):
    """code_editor에 붙은 엔진 (기본 설정)."""
    return EditorSpeechEngine(code_editor)


@pytest.fixture
def modal_editor():
    """vim 모드 활성화된 에디터."""
    return InMemoryEditor(lines=["abc"], modal_active=True, modal_state="start")


@pytest.fixture
def temp_settings(tmp_path):
    """임시 경로를 사용하는 Settings 인스턴스."""
    return Settings(path=tmp_path / ".editor_a11y" / "settings.json")


# =============================================================================
# 음성 서비스 mock
# =============================================================================


class RecordingSpeechService:
    """테스트용 SpeechService. 호출 기록."""

    def __init__(self, available: bool = True):
        self.available = available
        self.calls: List[tuple[Any, ...]] = []

    def is_available(self) -> bool:
        return self.available

    def speak(
        self,
        text: str,
        mode: QueueMode = QueueMode.QUEUE,
        profile: Optional[SpeechProfile] = None,
    ) -> bool:
        self.calls.append(("speak", text, mode))
        return True

    def stop(self) -> None:
        self.calls.append(("stop",))

    def play_earcon(self, earcon: Earcon) -> None:
        self.calls.append(("earcon", earcon))

    def set_key_echo(self, enabled: bool) -> None:
        self.calls.append(("key_echo", enabled))

    @property
    def spoken_texts(self) -> List[str]:
        return [call[1] for call in self.calls if call[0] == "speak"]


@pytest.fixture
def speech():
    return RecordingSpeechService()
