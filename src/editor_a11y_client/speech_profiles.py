# SPDX-License-Identifier: MIT
# Copyright 2025-2026 dnz3d4c
"""구문 종류별 음성 스타일 테이블"""

from enum import Enum

from .models import SpeechProfile


class SyntaxCategory(Enum):
    """토큰 타입의 최상위 구분. 테이블에 없는 타입은 DEFAULT."""
    CONSTANT = "constant"
    ENTITY = "entity"
    KEYWORD = "keyword"
    STORAGE = "storage"
    VARIABLE = "variable"
    DEFAULT = "default"

    @classmethod
    def from_token_type(cls, token_type: str) -> "SyntaxCategory":
        """"keyword.control" → KEYWORD, "text" → DEFAULT"""
        outer = token_type.split(".")[0]
        try:
            category = cls(outer)
        except ValueError:
            return cls.DEFAULT
        return category


CONSTANT_PROFILE = SpeechProfile(rate=0.8, pitch=0.4, volume=0.9)
DEFAULT_PROFILE = SpeechProfile(rate=1.0, pitch=0.5, volume=0.9)
ENTITY_PROFILE = SpeechProfile(rate=0.8, pitch=0.8, volume=0.9)
KEYWORD_PROFILE = SpeechProfile(rate=0.8, pitch=0.3, volume=0.9)
STORAGE_PROFILE = SpeechProfile(rate=0.8, pitch=0.7, volume=0.9)
VARIABLE_PROFILE = SpeechProfile(rate=0.8, pitch=0.8, volume=0.9)

# 삭제된 텍스트: 낮은 음높이, 구두점 읽지 않음
DELETED_PROFILE = SpeechProfile(relative_pitch=-0.6, punctuation_echo="none")

PROFILES: dict[SyntaxCategory, SpeechProfile] = {
    SyntaxCategory.CONSTANT: CONSTANT_PROFILE,
    SyntaxCategory.ENTITY: ENTITY_PROFILE,
    SyntaxCategory.KEYWORD: KEYWORD_PROFILE,
    SyntaxCategory.STORAGE: STORAGE_PROFILE,
    SyntaxCategory.VARIABLE: VARIABLE_PROFILE,
    SyntaxCategory.DEFAULT: DEFAULT_PROFILE,
}


def profile_for(token_type: str) -> SpeechProfile:
    return PROFILES[SyntaxCategory.from_token_type(token_type)]
