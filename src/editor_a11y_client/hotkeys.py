# SPDX-License-Identifier: MIT
# Copyright 2025-2026 dnz3d4c
"""글로벌 핫키 모듈 - keyboard 라이브러리 사용

단축키 목록의 ctrl+shift+숫자 조합을 등록.
콜백은 keyboard 훅 스레드에서 호출되므로 호출 측에서 직렬화 필요.
"""

from typing import Callable, Iterable

import keyboard

from .commands import Command, Shortcut
from .utils.debug import get_logger

log = get_logger("Hotkeys")


class HotkeyManager:
    """keyboard.add_hotkey 기반 핫키 관리자"""

    def __init__(self):
        self._registered: dict[Command, str] = {}
        self._active = False

    @property
    def active(self) -> bool:
        return self._active

    @property
    def registered(self) -> dict[Command, str]:
        return dict(self._registered)

    def register(
        self,
        shortcuts: Iterable[Shortcut],
        callback: Callable[[Command], None],
    ) -> None:
        """단축키마다 핫키 등록. 실패한 핫키는 건너뜀."""
        if self._active:
            return
        for shortcut in shortcuts:
            hotkey = shortcut.hotkey
            try:
                keyboard.add_hotkey(
                    hotkey,
                    lambda c=shortcut.command: callback(c),
                    suppress=False,
                )
            except (ValueError, ImportError, OSError) as e:
                log.error(f"핫키 등록 실패: {hotkey} - {e}")
                continue
            self._registered[shortcut.command] = hotkey
            log.debug(f"핫키 등록: {hotkey} -> {shortcut.command.value}")
        self._active = True

    def unregister_all(self) -> None:
        if not self._active:
            return
        for hotkey in self._registered.values():
            try:
                keyboard.remove_hotkey(hotkey)
            except KeyError:
                pass
        self._registered.clear()
        self._active = False
        log.debug("핫키 해제")
