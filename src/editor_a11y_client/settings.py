# SPDX-License-Identifier: MIT
# Copyright 2025-2026 dnz3d4c
"""설정 로드 모듈

~/.editor_a11y/settings.json 을 읽고 누락 키는 기본값으로 채움.
사용자가 파일을 직접 편집. 토글(위치/변위 발화)은 세션 상태라 설정에 없음.
"""

import copy
import json
from pathlib import Path
from typing import Any, Optional

from .config import (
    ACTIVATION_MAX_TRIES,
    ACTIVATION_RETRY_INTERVAL,
    MODAL_COMMAND_STATE,
    MODAL_INSERT_STATE,
    SETTINGS_FILE,
    SHORTCUT_MODIFIERS,
)
from .utils.debug import get_logger

log = get_logger("Settings")

# 기본 설정값
DEFAULT_SETTINGS = {
    "hotkeys": {
        "annots": {"modifiers": list(SHORTCUT_MODIFIERS), "key": "1"},
        "all_annots": {"modifiers": list(SHORTCUT_MODIFIERS), "key": "2"},
        "mode": {"modifiers": list(SHORTCUT_MODIFIERS), "key": "3"},
        "toggle_location": {"modifiers": list(SHORTCUT_MODIFIERS), "key": "4"},
        "row_col": {"modifiers": list(SHORTCUT_MODIFIERS), "key": "5"},
        "toggle_displacement": {"modifiers": list(SHORTCUT_MODIFIERS), "key": "6"},
    },
    "modal": {
        "insert_state": MODAL_INSERT_STATE,
        "command_state": MODAL_COMMAND_STATE,
    },
    "activation": {
        "max_tries": ACTIVATION_MAX_TRIES,
        "interval": ACTIVATION_RETRY_INTERVAL,
    },
}


class Settings:
    """설정 관리 클래스"""

    def __init__(self, path: Optional[Path] = None):
        self.path = path or SETTINGS_FILE
        self._data: dict = {}
        self._load()

    def _load(self) -> None:
        if self.path.exists():
            try:
                with open(self.path, "r", encoding="utf-8") as f:
                    self._data = json.load(f)
                log.debug(f"settings loaded: {self.path}")
            except (json.JSONDecodeError, OSError) as e:
                log.warning(f"settings load failed, using defaults: {e}")
                self._data = {}
        else:
            self._data = {}

        # 기본값으로 누락된 키 채우기
        self._merge_defaults()

    def _merge_defaults(self) -> None:
        self._data = self._deep_merge(DEFAULT_SETTINGS, self._data)

    def _deep_merge(self, base: dict, override: dict) -> dict:
        result = copy.deepcopy(base)
        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = copy.deepcopy(value)
        return result

    def get(self, key: str, default: Any = None) -> Any:
        """점 표기법: "hotkeys.annots.key" """
        keys = key.split(".")
        value = self._data
        for k in keys:
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default
        return value

    def set(self, key: str, value: Any) -> None:
        """점 표기법: "hotkeys.annots.key" """
        keys = key.split(".")
        data = self._data
        for k in keys[:-1]:
            if k not in data:
                data[k] = {}
            data = data[k]
        data[keys[-1]] = value

    def get_hotkey(self, name: str) -> Optional[dict]:
        return self.get(f"hotkeys.{name}")

    @property
    def insert_state(self) -> str:
        return self.get("modal.insert_state", MODAL_INSERT_STATE)

    @property
    def command_state(self) -> str:
        return self.get("modal.command_state", MODAL_COMMAND_STATE)

    @property
    def activation_max_tries(self) -> int:
        return int(self.get("activation.max_tries", ACTIVATION_MAX_TRIES))

    @property
    def activation_interval(self) -> float:
        return float(self.get("activation.interval", ACTIVATION_RETRY_INTERVAL))


# 전역 싱글톤 인스턴스
_settings_instance: Optional[Settings] = None


def get_settings() -> Settings:
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance
