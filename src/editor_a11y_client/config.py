# SPDX-License-Identifier: MIT
# Copyright 2025-2026 dnz3d4c
"""설정값 정의"""

from pathlib import Path


# =============================================================================
# 앱 정보
# =============================================================================

APP_DISPLAY_NAME = "Editor Accessibility Client"

# 사용자 설정/로그 디렉토리
SETTINGS_DIR = Path.home() / ".editor_a11y"
SETTINGS_FILE = SETTINGS_DIR / "settings.json"

# =============================================================================
# 에디터 상태 문자열 (Ace vim 키보드 핸들러 기준)
# =============================================================================

MODAL_INSERT_STATE = "insertMode"
MODAL_COMMAND_STATE = "start"

# 구문 강조가 없는 일반 텍스트 토큰 타입
PLAIN_TEXT_TOKEN_TYPE = "text"

# =============================================================================
# 이어콘
# =============================================================================

EARCON_ALERT = "ALERT"                    # 오류 주석, 검색 결과 없음
EARCON_MODAL_SWITCH = "MODAL_SWITCH"      # 모달 편집 모드 전환

# 이어콘 톤 (주파수 Hz, 길이 ms) 시퀀스
EARCON_TONES = {
    EARCON_ALERT: ((800, 100), (400, 200)),          # 하강 톤
    EARCON_MODAL_SWITCH: ((800, 100), (1200, 150)),  # 상승 톤
}

# =============================================================================
# 단축키
# =============================================================================

# 단축키 트리거 수식키
SHORTCUT_MODIFIERS = ["ctrl", "shift"]

# =============================================================================
# 발화 문구
# =============================================================================

SPEECH_INSERT_MODE = "Insert mode"
SPEECH_COMMAND_MODE = "Command mode"
SPEECH_LOCATION_ENABLED = "Speak location on row change enabled."
SPEECH_LOCATION_DISABLED = "Speak location on row change disabled."
SPEECH_DISPLACEMENT_ENABLED = "Speak displacement on column changes."
SPEECH_DISPLACEMENT_DISABLED = "Speak current character or word on column changes."
SPEECH_SPACE = "space"
SPEECH_SEMICOLON = "semicolon"

# =============================================================================
# 타이밍 설정 (초)
# =============================================================================

# 음성 서비스 로드 대기
ACTIVATION_MAX_TRIES = 15                 # 최대 시도 횟수
ACTIVATION_RETRY_INTERVAL = 0.5           # 재시도 간격

TIMING_THREAD_JOIN_TIMEOUT = 1.0          # 스레드 종료 대기
