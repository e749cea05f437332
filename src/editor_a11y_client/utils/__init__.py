# SPDX-License-Identifier: MIT
# Copyright 2025-2026 dnz3d4c
"""공용 유틸리티 패키지

- 디버그 로깅 (get_logger, LogLevel)
- 이어콘 톤 재생 (beep)
"""

from .debug import (
    get_logger,
    get_log_file_path,
    is_debug_enabled,
    is_trace_enabled,
    LogLevel,
    set_global_level,
)

__all__ = [
    "get_logger",
    "get_log_file_path",
    "is_debug_enabled",
    "is_trace_enabled",
    "LogLevel",
    "set_global_level",
]
