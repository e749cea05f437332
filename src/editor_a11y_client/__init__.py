# SPDX-License-Identifier: MIT
# Copyright 2025-2026 dnz3d4c
"""에디터 음성 피드백 클라이언트

커서 이동, 편집, 진단 주석, 모드 전환, 검색 결과를 음성/이어콘으로 알림.
"""

from .__about__ import __version__
from .client import EditorA11yClient
from .engine import EditorSpeechEngine

__all__ = [
    "__version__",
    "EditorA11yClient",
    "EditorSpeechEngine",
]
