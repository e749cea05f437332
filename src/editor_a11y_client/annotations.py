# SPDX-License-Identifier: MIT
# Copyright 2025-2026 dnz3d4c
"""진단 주석 추적 - 새 주석 감지, 주석 읽기"""

import re
from typing import Iterable, Iterator, List, Optional

from .config import SPEECH_SEMICOLON
from .models import Annotation, Earcon, PlayEarcon, QueueMode, Speak, SpeechAction
from .utils.debug import get_logger

log = get_logger("Annotations")

# 세미콜론과 양옆 공백 (줄바꿈/탭은 유지)
_SEMICOLON_RE = re.compile(r" *; *")


def row_col_to_string(row: int, column: int) -> str:
    """0부터 시작하는 위치 → "row 4 column 6" """
    return f"row {row + 1} column {column + 1}"


def annotation_text(annotation: Annotation) -> str:
    """발화 문자열. 일부 음성 엔진이 세미콜론을 잘못 읽어 단어로 바꿈.

    세미콜론 주변 공백만 정리하고 나머지 텍스트는 그대로 둠.
    """
    text = (
        f"{annotation.type} {annotation.text} on "
        f"{row_col_to_string(annotation.row, annotation.column)}"
    )
    return _SEMICOLON_RE.sub(f" {SPEECH_SEMICOLON} ", text)


class AnnotationTracker:
    """주석 테이블 (row → column → Annotation) 관리자"""

    def __init__(self):
        self._table: dict[int, dict[int, Annotation]] = {}

    def __len__(self) -> int:
        return sum(len(columns) for columns in self._table.values())

    def is_new(self, annotation: Annotation) -> bool:
        return self.get(annotation.row, annotation.column) is None

    def get(self, row: int, column: int) -> Optional[Annotation]:
        return self._table.get(row, {}).get(column)

    def has_row(self, row: int) -> bool:
        return bool(self._table.get(row))

    def on_annotations_changed(self, annotations: Iterable[Annotation]) -> List[SpeechAction]:
        """현재 테이블 기준으로 새 주석 있으면 알림음, 이후 테이블 전체 교체."""
        annotations = list(annotations)
        new_count = sum(1 for a in annotations if self.is_new(a))

        table: dict[int, dict[int, Annotation]] = {}
        for annotation in annotations:
            # 같은 위치 중복은 나중 것이 덮어씀
            table.setdefault(annotation.row, {})[annotation.column] = annotation
        self._table = table

        log.debug(f"annotations replaced: total={len(annotations)}, new={new_count}")
        if new_count:
            return [PlayEarcon(Earcon.ALERT)]
        return []

    def _iter_row(self, row: int) -> Iterator[Annotation]:
        columns = self._table.get(row, {})
        for column in sorted(columns):
            yield columns[column]

    def speak_annotation(self, annotation: Annotation) -> List[SpeechAction]:
        return [Speak(annotation_text(annotation), QueueMode.QUEUE)]

    def speak_annotations_for_row(self, row: int) -> List[SpeechAction]:
        actions: List[SpeechAction] = []
        for annotation in self._iter_row(row):
            actions.extend(self.speak_annotation(annotation))
        return actions

    def speak_all_annotations(self) -> List[SpeechAction]:
        actions: List[SpeechAction] = []
        for row in sorted(self._table):
            actions.extend(self.speak_annotations_for_row(row))
        return actions
