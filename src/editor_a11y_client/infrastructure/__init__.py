# SPDX-License-Identifier: MIT
# Copyright 2025-2026 dnz3d4c
"""Infrastructure layer: 호스트 에디터, 음성 서비스 등 외부 시스템 접근."""

from .editor_adapter import EditorAdapter, InMemoryEditor, simple_tokenize
from .speech_service import SpeechService, apply_actions

__all__ = [
    "EditorAdapter",
    "InMemoryEditor",
    "simple_tokenize",
    "SpeechService",
    "apply_actions",
]
