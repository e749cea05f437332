# SPDX-License-Identifier: MIT
# Copyright 2025-2026 dnz3d4c
"""음성 서비스 로드 대기 - 제한 횟수 재시도 후 1회 활성화

스크린 리더가 앱보다 늦게 뜰 수 있어 일정 간격으로 확인.
한도 내에 나타나지 않으면 조용히 포기 (오류 표시 없음).
"""

import threading
from typing import Callable, Optional

from .config import (
    ACTIVATION_MAX_TRIES,
    ACTIVATION_RETRY_INTERVAL,
    TIMING_THREAD_JOIN_TIMEOUT,
)
from .utils.debug import get_logger

log = get_logger("Activation")


class ServiceActivation:
    """probe()가 처음 True일 때 on_ready()를 정확히 한 번 호출"""

    def __init__(
        self,
        probe: Callable[[], bool],
        on_ready: Callable[[], None],
        max_tries: int = ACTIVATION_MAX_TRIES,
        interval: float = ACTIVATION_RETRY_INTERVAL,
    ):
        self._probe = probe
        self._on_ready = on_ready
        self._max_tries = max_tries
        self._interval = interval

        self._cancel_event = threading.Event()
        self._done_event = threading.Event()
        self._thread: Optional[threading.Thread] = None
        self._active = False
        self._gave_up = False
        self.tries = 0

    @property
    def is_active(self) -> bool:
        return self._active

    @property
    def gave_up(self) -> bool:
        return self._gave_up

    def start(self) -> None:
        """백그라운드 확인 스레드 시작. 이미 시작했으면 무시."""
        if self._thread is not None:
            return
        self._thread = threading.Thread(
            target=self.run,
            daemon=True,
            name="ServiceActivation",
        )
        self._thread.start()

    def run(self) -> bool:
        """확인 루프. 활성화되면 True."""
        try:
            while not self._cancel_event.is_set():
                self.tries += 1
                if self._probe():
                    log.debug(f"speech service available after {self.tries} tries")
                    self._active = True
                    self._on_ready()
                    return True
                if self.tries >= self._max_tries:
                    log.debug(f"speech service not found, giving up after {self.tries} tries")
                    self._gave_up = True
                    return False
                # cancel() 시 즉시 깨어남
                self._cancel_event.wait(self._interval)
            log.debug("activation cancelled")
            return False
        finally:
            self._done_event.set()

    def wait(self, timeout: Optional[float] = None) -> bool:
        """확인 종료까지 대기. 활성화 여부 반환."""
        self._done_event.wait(timeout)
        return self._active

    def cancel(self) -> None:
        self._cancel_event.set()
        if self._thread is not None and self._thread is not threading.current_thread():
            self._thread.join(timeout=self._interval + TIMING_THREAD_JOIN_TIMEOUT)
