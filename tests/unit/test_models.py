# SPDX-License-Identifier: MIT
"""이벤트 파싱 / 액션 출력 형식 테스트."""

import pytest

from editor_a11y_client.models import (
    Annotation,
    AnnotationsChanged,
    Cursor,
    CursorChanged,
    EditAction,
    Earcon,
    PlayEarcon,
    QueueMode,
    SearchChanged,
    SetKeyEcho,
    Speak,
    StatusChanged,
    Stop,
    TextChanged,
    event_from_dict,
    format_action,
)
from editor_a11y_client.speech_profiles import DELETED_PROFILE


class TestEventFromDict:
    def test_cursor(self):
        assert event_from_dict({"type": "cursor", "row": 3, "column": 5}) == CursorChanged(Cursor(3, 5))

    @pytest.mark.parametrize("action,expected", [
        ("insert", EditAction.INSERT),
        ("insertText", EditAction.INSERT),
        ("remove", EditAction.REMOVE),
        ("removeText", EditAction.REMOVE),
    ])
    def test_change(self, action, expected):
        event = event_from_dict({"type": "change", "action": action, "text": "ab"})
        assert event == TextChanged(expected, "ab")

    def test_annotations(self):
        event = event_from_dict({
            "type": "annotations",
            "annotations": [{"row": 0, "column": 1, "type": "error", "text": "boom"}],
        })
        assert event == AnnotationsChanged((Annotation(0, 1, "error", "boom"),))

    def test_empty_annotations(self):
        assert event_from_dict({"type": "annotations"}) == AnnotationsChanged(())

    def test_status(self):
        assert event_from_dict({"type": "status", "state": "insertMode"}) == StatusChanged("insertMode")

    def test_search(self):
        assert event_from_dict({"type": "search", "matched": False}) == SearchChanged(False)

    @pytest.mark.parametrize("data", [
        {"type": "teleport"},
        {"row": 1},
        {"type": "cursor", "row": 1},
        {"type": "change", "action": "paste", "text": "x"},
        {"type": "annotations", "annotations": [{"row": 0}]},
    ])
    def test_malformed(self, data):
        with pytest.raises(ValueError):
            event_from_dict(data)


class TestFormatAction:
    def test_speak(self):
        assert format_action(Speak("foo", QueueMode.FLUSH)) == "speak[flush] 'foo'"

    def test_speak_with_profile(self):
        line = format_action(Speak("x", QueueMode.FLUSH, DELETED_PROFILE))
        assert line.startswith("speak[flush] 'x' profile=")
        assert "relative_pitch=-0.6" in line

    def test_others(self):
        assert format_action(Stop()) == "stop"
        assert format_action(PlayEarcon(Earcon.ALERT)) == "earcon ALERT"
        assert format_action(SetKeyEcho(True)) == "key_echo on"
        assert format_action(SetKeyEcho(False)) == "key_echo off"
