# SPDX-License-Identifier: MIT
# Copyright 2025-2026 dnz3d4c
"""단축키/메뉴 명령 디스패치

하나의 단축키 목록으로 키 → 단축키, 명령 → 단축키 테이블을 만들고
키보드와 메뉴 두 경로 모두 같은 action을 호출.
"""

import json
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable, List, Optional

from .config import SHORTCUT_MODIFIERS
from .models import SpeechAction
from .utils.debug import get_logger

log = get_logger("Commands")


class Command(Enum):
    """메뉴 명령 이름"""
    SPEAK_ANNOT = "annots"
    SPEAK_ALL_ANNOTS = "all_annots"
    SPEAK_MODE = "mode"
    TOGGLE_LOCATION = "toggle_location"
    SPEAK_ROW_COL = "row_col"
    TOGGLE_DISPLACEMENT = "toggle_displacement"

    @classmethod
    def parse(cls, name: str) -> Optional["Command"]:
        try:
            return cls(name)
        except ValueError:
            return None


# 명령 순서 = 단축키 목록 순서, 기본 키 1~6
COMMAND_DEFAULTS: list[tuple[Command, str, str]] = [
    (Command.SPEAK_ANNOT, "1", "Speak annotations on line"),
    (Command.SPEAK_ALL_ANNOTS, "2", "Speak all annotations"),
    (Command.SPEAK_MODE, "3", "Speak Vim mode"),
    (Command.TOGGLE_LOCATION, "4", "Toggle speak row location"),
    (Command.SPEAK_ROW_COL, "5", "Speak row and column"),
    (Command.TOGGLE_DISPLACEMENT, "6", "Toggle speak displacement"),
]

# 수식키 표시 이름 (메뉴 설명용)
_MODIFIER_NAMES = {
    "ctrl": "CONTROL",
    "shift": "SHIFT",
    "alt": "ALT",
    "win": "WIN",
}


@dataclass(frozen=True)
class Shortcut:
    command: Command
    key: str
    description: str
    action: Callable[[], List[SpeechAction]]
    modifiers: tuple[str, ...] = tuple(SHORTCUT_MODIFIERS)

    @property
    def key_code(self) -> Optional[int]:
        """"1" → 49. "f5", "space" 같은 이름 키는 None (핫키/메뉴 경로만 사용)."""
        if len(self.key) != 1:
            return None
        return ord(self.key.upper())

    @property
    def trigger_string(self) -> str:
        """"CONTROL + SHIFT 1" """
        names = [_MODIFIER_NAMES.get(m.lower(), m.upper()) for m in self.modifiers]
        return " + ".join(names) + " " + self.key.upper()

    @property
    def hotkey(self) -> str:
        """keyboard 라이브러리 형식: "ctrl+shift+1" """
        return "+".join([*(m.lower() for m in self.modifiers), self.key.lower()])

    @property
    def menu_description(self) -> str:
        return f"{self.description} {self.trigger_string}"


class CommandDispatcher:
    """키 코드/명령 이름 → 단축키 action"""

    def __init__(self, shortcuts: Iterable[Shortcut]):
        self._shortcuts = list(shortcuts)
        self._by_key_code: dict[int, Shortcut] = {}
        self._by_command: dict[Command, Shortcut] = {}
        for shortcut in self._shortcuts:
            if shortcut.key_code is not None:
                self._by_key_code[shortcut.key_code] = shortcut
            self._by_command[shortcut.command] = shortcut

    @property
    def shortcuts(self) -> List[Shortcut]:
        return list(self._shortcuts)

    def on_key_down(
        self,
        key_code: int,
        ctrl: bool = False,
        shift: bool = False,
        alt: bool = False,
    ) -> List[SpeechAction]:
        """수식키가 모두 눌린 경우만 인식. 등록 안 된 키는 무시."""
        shortcut = self._by_key_code.get(key_code)
        if shortcut is None:
            return []
        held = {name for name, down in (("ctrl", ctrl), ("shift", shift), ("alt", alt)) if down}
        if not set(m.lower() for m in shortcut.modifiers) <= held:
            return []
        return self._run(shortcut)

    def run_command(self, name: str) -> List[SpeechAction]:
        """메뉴 명령 이름으로 실행. 모르는 명령은 무시."""
        command = Command.parse(name)
        shortcut = self._by_command.get(command) if command else None
        if shortcut is None:
            log.debug(f"unknown command ignored: {name!r}")
            return []
        return self._run(shortcut)

    def _run(self, shortcut: Shortcut) -> List[SpeechAction]:
        log.debug(f"command: {shortcut.command.value}")
        return shortcut.action()

    def menu_actions(self) -> List[dict]:
        """메뉴 표시용 [{"desc": ..., "cmd": ...}]"""
        return [
            {"desc": s.menu_description, "cmd": s.command.value}
            for s in self._shortcuts
        ]

    def menu_actions_json(self) -> str:
        return json.dumps(self.menu_actions())
