# SPDX-License-Identifier: MIT
# Copyright 2025-2026 dnz3d4c
"""데이터 모델: 에디터 상태, 입력 이벤트, 출력 음성 액션."""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Optional, Union

from .config import EARCON_ALERT, EARCON_MODAL_SWITCH


# =============================================================================
# 에디터 상태
# =============================================================================


@dataclass(frozen=True)
class Cursor:
    """캐럿 위치 (0부터 시작)."""
    row: int = 0
    column: int = 0


@dataclass(frozen=True)
class Token:
    """토크나이저가 만든 토큰. type은 "keyword.control"처럼 점으로 구분."""
    type: str
    value: str


@dataclass(frozen=True)
class Annotation:
    """진단 주석 (오류/경고). (row, column)이 식별자."""
    row: int
    column: int
    type: str
    text: str

    @property
    def key(self) -> tuple[int, int]:
        return (self.row, self.column)


@dataclass(frozen=True)
class SpeechProfile:
    """음성 스타일. None인 값은 음성 서비스 기본값 사용."""
    rate: Optional[float] = None
    pitch: Optional[float] = None
    volume: Optional[float] = None
    relative_pitch: Optional[float] = None
    punctuation_echo: Optional[str] = None


# =============================================================================
# 출력 음성 액션
# =============================================================================


class QueueMode(Enum):
    """발화 큐 모드."""
    FLUSH = 0   # 진행 중 발화 취소 후 즉시 발화
    QUEUE = 1   # 대기열 끝에 추가


class Earcon(Enum):
    """짧은 비음성 알림음."""
    ALERT = EARCON_ALERT                  # 오류 주석, 검색 결과 없음
    MODAL_SWITCH = EARCON_MODAL_SWITCH    # 모드 전환


@dataclass(frozen=True)
class Speak:
    text: str
    mode: QueueMode = QueueMode.QUEUE
    profile: Optional[SpeechProfile] = None


@dataclass(frozen=True)
class Stop:
    pass


@dataclass(frozen=True)
class PlayEarcon:
    earcon: Earcon


@dataclass(frozen=True)
class SetKeyEcho:
    enabled: bool


SpeechAction = Union[Speak, Stop, PlayEarcon, SetKeyEcho]


def format_action(action: SpeechAction) -> str:
    """액션을 한 줄 문자열로. CLI --print 출력용."""
    if isinstance(action, Speak):
        line = f"speak[{action.mode.name.lower()}] {action.text!r}"
        if action.profile is not None:
            line += f" profile={action.profile}"
        return line
    if isinstance(action, Stop):
        return "stop"
    if isinstance(action, PlayEarcon):
        return f"earcon {action.earcon.value}"
    if isinstance(action, SetKeyEcho):
        return f"key_echo {'on' if action.enabled else 'off'}"
    return repr(action)


# =============================================================================
# 입력 이벤트
# =============================================================================


class EditAction(Enum):
    """텍스트 변경 종류."""
    INSERT = auto()
    REMOVE = auto()

    @classmethod
    def parse(cls, value: str) -> "EditAction":
        """"insert"/"insertText", "remove"/"removeText" 모두 허용."""
        normalized = value.lower()
        if normalized in ("insert", "inserttext"):
            return cls.INSERT
        if normalized in ("remove", "removetext"):
            return cls.REMOVE
        raise ValueError(f"unknown edit action: {value!r}")


@dataclass(frozen=True)
class CursorChanged:
    cursor: Cursor


@dataclass(frozen=True)
class TextChanged:
    action: EditAction
    text: str


@dataclass(frozen=True)
class AnnotationsChanged:
    annotations: tuple[Annotation, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class StatusChanged:
    """모달 편집 상태 변경. state는 에디터가 보고한 현재 상태 문자열."""
    state: Optional[str]


@dataclass(frozen=True)
class SearchChanged:
    matched: bool


EditorEvent = Union[CursorChanged, TextChanged, AnnotationsChanged, StatusChanged, SearchChanged]


def event_from_dict(data: dict[str, Any]) -> EditorEvent:
    """JSON 객체 → 이벤트. 알 수 없는 형식이면 ValueError.

    {"type": "cursor", "row": 3, "column": 5}
    {"type": "change", "action": "insert", "text": "abc"}
    {"type": "annotations", "annotations": [{"row": 0, "column": 1, "type": "error", "text": "..."}]}
    {"type": "status", "state": "insertMode"}
    {"type": "search", "matched": true}
    """
    try:
        kind = data["type"]
        if kind == "cursor":
            return CursorChanged(Cursor(int(data["row"]), int(data["column"])))
        if kind == "change":
            return TextChanged(EditAction.parse(data["action"]), str(data["text"]))
        if kind == "annotations":
            return AnnotationsChanged(tuple(
                Annotation(int(a["row"]), int(a["column"]), str(a["type"]), str(a["text"]))
                for a in data.get("annotations", [])
            ))
        if kind == "status":
            return StatusChanged(data.get("state"))
        if kind == "search":
            return SearchChanged(bool(data["matched"]))
    except (KeyError, TypeError) as e:
        raise ValueError(f"malformed event {data!r}: {e}") from e
    raise ValueError(f"unknown event type: {kind!r}")
