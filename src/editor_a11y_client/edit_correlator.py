# SPDX-License-Identifier: MIT
# Copyright 2025-2026 dnz3d4c
"""편집/커서 상관 처리

에디터는 텍스트 입력/삭제 직후 커서 이동 이벤트를 보냄.
편집 내용을 읽은 뒤 바로 다음 커서 이벤트 1회는 발화하지 않음.
"""

from typing import List

from .models import EditAction, QueueMode, Speak, SpeechAction, TextChanged
from .speech_profiles import DEFAULT_PROFILE, DELETED_PROFILE
from .utils.debug import get_logger

log = get_logger("EditCorrelator")


class EditSuppression:
    """다음 커서 이벤트 1회만 참인 래치"""

    def __init__(self):
        self._armed = False

    @property
    def armed(self) -> bool:
        return self._armed

    def arm(self) -> None:
        self._armed = True

    def consume(self) -> bool:
        """설정돼 있으면 해제하고 True."""
        if not self._armed:
            return False
        self._armed = False
        return True


class EditCursorCorrelator:
    """텍스트 변경 발화 + 커서 이벤트 억제 설정"""

    def __init__(self, suppression: EditSuppression):
        self._suppression = suppression

    def on_text_changed(self, event: TextChanged) -> List[SpeechAction]:
        if event.action is EditAction.REMOVE:
            profile = DELETED_PROFILE
        else:
            profile = DEFAULT_PROFILE
        self._suppression.arm()
        log.trace(f"{event.action.name.lower()} text={event.text!r}")
        return [Speak(event.text, QueueMode.FLUSH, profile)]
