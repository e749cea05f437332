# SPDX-License-Identifier: MIT
"""단축키/메뉴 명령 디스패치 테스트."""

import json

import pytest

from editor_a11y_client.commands import COMMAND_DEFAULTS, Command, CommandDispatcher, Shortcut
from editor_a11y_client.models import QueueMode, Speak


def _shortcut(command, key, calls):
    return Shortcut(
        command=command,
        key=key,
        description=f"desc {key}",
        action=lambda: calls.append(command) or [Speak(command.value, QueueMode.FLUSH)],
    )


@pytest.fixture
def calls():
    return []


@pytest.fixture
def dispatcher(calls):
    return CommandDispatcher(_shortcut(cmd, key, calls) for cmd, key, _ in COMMAND_DEFAULTS)


class TestShortcut:
    """Shortcut 표시 형식."""

    def test_key_code(self):
        shortcut = Shortcut(Command.SPEAK_MODE, "3", "Speak Vim mode", action=list)
        assert shortcut.key_code == ord("3")

    def test_menu_description(self):
        shortcut = Shortcut(Command.SPEAK_MODE, "3", "Speak Vim mode", action=list)
        assert shortcut.menu_description == "Speak Vim mode CONTROL + SHIFT 3"

    def test_hotkey(self):
        shortcut = Shortcut(Command.SPEAK_MODE, "3", "Speak Vim mode", action=list)
        assert shortcut.hotkey == "ctrl+shift+3"

    def test_custom_modifiers(self):
        shortcut = Shortcut(Command.SPEAK_MODE, "m", "Speak Vim mode", action=list, modifiers=("ctrl", "alt"))
        assert shortcut.trigger_string == "CONTROL + ALT M"
        assert shortcut.hotkey == "ctrl+alt+m"
        assert shortcut.key_code == ord("M")


class TestCommandParse:
    def test_known(self):
        assert Command.parse("row_col") is Command.SPEAK_ROW_COL

    def test_unknown(self):
        assert Command.parse("nope") is None


class TestKeyDown:
    """키보드 경로."""

    def test_ctrl_shift_runs_action(self, dispatcher, calls):
        actions = dispatcher.on_key_down(ord("5"), ctrl=True, shift=True)

        assert calls == [Command.SPEAK_ROW_COL]
        assert actions == [Speak("row_col", QueueMode.FLUSH)]

    @pytest.mark.parametrize("ctrl,shift", [(True, False), (False, True), (False, False)])
    def test_requires_both_modifiers(self, dispatcher, calls, ctrl, shift):
        assert dispatcher.on_key_down(ord("1"), ctrl=ctrl, shift=shift) == []
        assert calls == []

    def test_extra_modifier_allowed(self, dispatcher, calls):
        dispatcher.on_key_down(ord("1"), ctrl=True, shift=True, alt=True)
        assert calls == [Command.SPEAK_ANNOT]

    def test_unregistered_key(self, dispatcher, calls):
        assert dispatcher.on_key_down(ord("9"), ctrl=True, shift=True) == []
        assert calls == []


class TestRunCommand:
    """메뉴 경로."""

    @pytest.mark.parametrize("command,key,description", COMMAND_DEFAULTS)
    def test_menu_and_key_share_action(self, dispatcher, calls, command, key, description):
        dispatcher.run_command(command.value)
        dispatcher.on_key_down(ord(key), ctrl=True, shift=True)
        assert calls == [command, command]

    def test_unknown_command(self, dispatcher, calls):
        assert dispatcher.run_command("launch_missiles") == []
        assert calls == []


class TestMenuActions:
    """메뉴 목록."""

    def test_order_and_format(self, dispatcher):
        actions = dispatcher.menu_actions()

        assert [a["cmd"] for a in actions] == [
            "annots", "all_annots", "mode", "toggle_location", "row_col", "toggle_displacement",
        ]
        assert actions[0]["desc"] == "desc 1 CONTROL + SHIFT 1"

    def test_json(self, dispatcher):
        data = json.loads(dispatcher.menu_actions_json())
        assert data == dispatcher.menu_actions()


class TestNamedKeys:
    """"f5", "space" 같은 여러 글자 키 이름."""

    def test_no_key_code(self):
        shortcut = Shortcut(Command.SPEAK_ROW_COL, "f5", "Speak row and column", action=list)

        assert shortcut.key_code is None
        assert shortcut.hotkey == "ctrl+shift+f5"
        assert shortcut.menu_description == "Speak row and column CONTROL + SHIFT F5"

    def test_dispatcher_skips_key_code_path(self, calls):
        dispatcher = CommandDispatcher([
            _shortcut(Command.SPEAK_ROW_COL, "f5", calls),
            _shortcut(Command.SPEAK_MODE, "3", calls),
        ])

        assert dispatcher.on_key_down(ord("F"), ctrl=True, shift=True) == []
        dispatcher.run_command("row_col")
        dispatcher.on_key_down(ord("3"), ctrl=True, shift=True)

        assert calls == [Command.SPEAK_ROW_COL, Command.SPEAK_MODE]
