# SPDX-License-Identifier: MIT
# Copyright 2025-2026 dnz3d4c
"""이어콘 비프음 유틸

오류 주석/검색 실패(하강 톤), 모드 전환(상승 톤) 알림음.
winsound가 있는 Windows에서만 재생, 그 외 플랫폼은 로그만 남김.
"""

import sys
import threading

from ..config import EARCON_TONES
from .debug import get_logger

log = get_logger("Beep")


def _play_sequence(tones: tuple[tuple[int, int], ...]) -> None:
    import winsound

    for frequency, duration in tones:
        winsound.Beep(frequency, duration)


def play_earcon_tones(name: str) -> bool:
    """이어콘 이름으로 톤 재생. 재생 시작하면 True (비동기)."""
    tones = EARCON_TONES.get(name)
    if tones is None:
        log.warning(f"unknown earcon: {name}")
        return False
    if sys.platform != "win32":
        log.debug(f"earcon {name} skipped (no winsound on {sys.platform})")
        return False
    threading.Thread(target=_play_sequence, args=(tones,), daemon=True).start()
    return True
