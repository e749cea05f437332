# SPDX-License-Identifier: MIT
# Copyright 2025-2026 dnz3d4c
"""메인 진입점 - 이벤트 스크립트 재생

스크립트 형식 (JSON):
    {
        "lines": ["def foo():", "    return 1"],
        "tokens": {"0": [["storage.type", "def"], ["text", " "], ["entity.name", "foo"]]},
        "cursor": [0, 0],
        "modal": {"active": true, "state": "start"},
        "events": [{"type": "cursor", "row": 1, "column": 4}, ...]
    }

이벤트에 "commands": ["row_col"] 를 넣으면 해당 이벤트 처리 후 명령 실행.
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Optional

from .accessibility import AccessibleOutputSpeechService
from .config import APP_DISPLAY_NAME
from .engine import EditorSpeechEngine
from .infrastructure.editor_adapter import InMemoryEditor
from .infrastructure.speech_service import apply_actions
from .models import (
    Cursor,
    CursorChanged,
    StatusChanged,
    Token,
    event_from_dict,
    format_action,
)
from .settings import get_settings
from .utils.debug import get_log_file_path, get_logger, set_global_level, LogLevel

log = get_logger("Main")


def load_editor(script: dict[str, Any]) -> InMemoryEditor:
    """스크립트 → InMemoryEditor. tokens 키는 행 번호 문자열."""
    tokens = {
        int(row): [Token(token_type, value) for token_type, value in row_tokens]
        for row, row_tokens in script.get("tokens", {}).items()
    }
    row, column = script.get("cursor", [0, 0])
    modal = script.get("modal", {})
    return InMemoryEditor(
        lines=script.get("lines", []),
        tokens=tokens,
        cursor=Cursor(int(row), int(column)),
        modal_active=bool(modal.get("active", False)),
        modal_state=modal.get("state"),
    )


def replay(script: dict[str, Any], print_only: bool = True, out=None) -> int:
    """이벤트 재생. print_only면 액션 출력, 아니면 스크린 리더로 발화."""
    out = out or sys.stdout
    editor = load_editor(script)
    engine = EditorSpeechEngine(editor, get_settings())
    speech = None if print_only else AccessibleOutputSpeechService()

    def emit(actions) -> None:
        if speech is not None:
            apply_actions(speech, actions)
        else:
            for action in actions:
                print(format_action(action), file=out)

    emit(engine.activate())
    for index, data in enumerate(script.get("events", [])):
        try:
            event = event_from_dict(data)
        except ValueError as e:
            print(f"event #{index}: {e}", file=sys.stderr)
            return 1
        # 에디터 상태에도 반영 (speak mode, 커서 조회용)
        if isinstance(event, StatusChanged):
            editor.modal_state = event.state
        elif isinstance(event, CursorChanged):
            editor.cursor = event.cursor
        emit(engine.handle(event))
        for name in data.get("commands", []):
            emit(engine.run_command(name))
    return 0


def parse_args(argv: Optional[list[str]] = None):
    """CLI 인자 파싱"""
    parser = argparse.ArgumentParser(
        description=f'{APP_DISPLAY_NAME} - 이벤트 스크립트 재생'
    )

    parser.add_argument(
        'script',
        nargs='?',
        type=Path,
        help='재생할 이벤트 스크립트 (JSON)'
    )

    parser.add_argument(
        '--print', '-p',
        dest='print_only',
        action='store_true',
        help='발화 대신 음성 액션을 한 줄씩 출력'
    )

    parser.add_argument(
        '--list-commands',
        action='store_true',
        help='메뉴 명령 목록 (JSON) 출력'
    )

    # 디버그 옵션
    parser.add_argument(
        '--debug', '-d',
        action='store_true',
        help='디버그 모드 활성화 (상세 로깅)'
    )

    parser.add_argument(
        '--trace',
        action='store_true',
        help='TRACE 레벨 활성화 (이벤트별 판정 로그 포함)'
    )

    return parser.parse_args(argv)


def main(argv: Optional[list[str]] = None) -> int:
    args = parse_args(argv)

    # --trace는 단독으로도 TRACE 레벨 (--debug 포함)
    if args.trace:
        set_global_level(LogLevel.TRACE)
    elif args.debug:
        set_global_level(LogLevel.DEBUG)
    if args.trace or args.debug:
        log.info(f"log file: {get_log_file_path()}")

    if args.list_commands:
        engine = EditorSpeechEngine(InMemoryEditor(), get_settings())
        print(json.dumps(engine.dispatcher.menu_actions(), ensure_ascii=False, indent=2))
        return 0

    if args.script is None:
        print("script path required (or --list-commands)", file=sys.stderr)
        return 2

    try:
        with open(args.script, "r", encoding="utf-8") as f:
            script = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        print(f"cannot read script: {e}", file=sys.stderr)
        return 1

    log.debug(f"replay: {args.script}")
    return replay(script, print_only=args.print_only)


if __name__ == "__main__":
    sys.exit(main())
