# SPDX-License-Identifier: MIT
# Copyright 2025-2026 dnz3d4c
"""통합 디버그 로깅 모듈

사용법:
    from .utils.debug import get_logger

    log = get_logger("Engine")
    log.trace("커서 이동 판정")
    log.debug("모드 전환")

콘솔 출력은 stderr (CLI --print 출력과 섞이지 않도록).
로그 파일: ~/.editor_a11y/logs/debug.log (EDITOR_A11Y_LOG_DIR로 변경 가능)
"""

import os
import sys
from datetime import datetime
from enum import IntEnum
from pathlib import Path
from typing import Optional, TextIO

from ..config import SETTINGS_DIR

LOG_FILE_NAME = "debug.log"


class LogLevel(IntEnum):
    """로그 레벨

    TRACE: 이벤트마다 찍히는 판정 로그 (커서 이동, 토큰 조회)
    DEBUG: 상태 변경 (모드, 토글, 활성화)
    INFO: 클라이언트 시작/종료
    WARNING: 복구 가능한 문제 (스크린 리더 없음 등)
    ERROR: 핫키 등록 실패 등
    NONE: 로깅 비활성화
    """
    TRACE = 0
    DEBUG = 1
    INFO = 2
    WARNING = 3
    ERROR = 4
    NONE = 5


def level_from_env(value: Optional[str]) -> LogLevel:
    """DEBUG 환경변수 값 → 레벨. "1"/"debug" → DEBUG, "2"/"trace" → TRACE."""
    normalized = (value or "").strip().lower()
    if normalized in ("1", "debug"):
        return LogLevel.DEBUG
    if normalized in ("2", "trace"):
        return LogLevel.TRACE
    return LogLevel.NONE


def _get_logs_dir() -> Path:
    override = os.environ.get("EDITOR_A11Y_LOG_DIR")
    if override:
        return Path(override)
    return SETTINGS_DIR / "logs"


_global_level = level_from_env(os.environ.get("DEBUG"))

_log_file: Optional[TextIO] = None
_log_file_path: Optional[Path] = None


def _init_log_file() -> None:
    """세션 구분선과 함께 로그 파일 열기. 실패하면 콘솔만 사용."""
    global _log_file, _log_file_path
    if _global_level >= LogLevel.NONE:
        return
    try:
        logs_dir = _get_logs_dir()
        logs_dir.mkdir(parents=True, exist_ok=True)

        _log_file_path = logs_dir / LOG_FILE_NAME
        _log_file = open(_log_file_path, "a", encoding="utf-8")
        _log_file.write(f"\n{'='*60}\n")
        _log_file.write(f"Session started: {datetime.now().isoformat()}\n")
        _log_file.write(f"{'='*60}\n")
        _log_file.flush()
    except OSError:
        _log_file = None
        _log_file_path = None


if _global_level < LogLevel.NONE:
    _init_log_file()


class Logger:
    """레벨별 콘솔(stderr) + 파일 로거"""

    def __init__(self, name: str, level: Optional[LogLevel] = None):
        self.name = name
        self.level = level if level is not None else _global_level

    def is_enabled_for(self, level: LogLevel) -> bool:
        return level >= self.level and level < LogLevel.NONE

    def _log(self, level: LogLevel, msg: str) -> None:
        if not self.is_enabled_for(level):
            return
        line = f"[{level.name}:{self.name}] {msg}"

        try:
            print(line, file=sys.stderr)
        except UnicodeEncodeError:
            print(line.encode("ascii", "replace").decode("ascii"), file=sys.stderr)

        if _log_file:
            try:
                # 파일에는 시각 포함
                _log_file.write(f"{datetime.now().strftime('%H:%M:%S.%f')[:-3]} {line}\n")
                _log_file.flush()
            except (OSError, ValueError):
                pass

    def trace(self, msg: str) -> None:
        self._log(LogLevel.TRACE, msg)

    def debug(self, msg: str) -> None:
        self._log(LogLevel.DEBUG, msg)

    def info(self, msg: str) -> None:
        self._log(LogLevel.INFO, msg)

    def warning(self, msg: str) -> None:
        self._log(LogLevel.WARNING, msg)

    def error(self, msg: str) -> None:
        self._log(LogLevel.ERROR, msg)


_loggers: dict[str, Logger] = {}


def get_logger(name: str) -> Logger:
    """이름으로 로거 가져오기 (캐싱)"""
    if name not in _loggers:
        _loggers[name] = Logger(name)
    return _loggers[name]


def set_global_level(level: LogLevel) -> None:
    """전역 로그 레벨 설정. 기존 로거에도 적용, 필요하면 로그 파일 생성."""
    global _global_level
    _global_level = level
    for logger in _loggers.values():
        logger.level = level
    if _log_file is None and level < LogLevel.NONE:
        _init_log_file()


def is_debug_enabled() -> bool:
    return _global_level <= LogLevel.DEBUG


def is_trace_enabled() -> bool:
    return _global_level <= LogLevel.TRACE


def get_log_file_path() -> Optional[str]:
    return str(_log_file_path) if _log_file_path else None
