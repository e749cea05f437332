# SPDX-License-Identifier: MIT
"""EditorA11yClient 테스트 (RecordingSpeechService 사용)."""

from unittest.mock import MagicMock

import pytest

from editor_a11y_client.client import EditorA11yClient
from editor_a11y_client.commands import Command
from editor_a11y_client.models import (
    Annotation,
    AnnotationsChanged,
    Cursor,
    CursorChanged,
    Earcon,
    QueueMode,
    SearchChanged,
)


@pytest.fixture
def fast_settings(temp_settings):
    temp_settings.set("activation.max_tries", 2)
    temp_settings.set("activation.interval", 0)
    return temp_settings


@pytest.fixture
def client(code_editor, speech, fast_settings):
    return EditorA11yClient(code_editor, speech, fast_settings, hotkey_manager=MagicMock())


class TestActivation:
    """음성 서비스 준비 전후."""

    def test_events_dropped_before_activation(self, client, speech):
        assert client.notify(SearchChanged(False)) == []
        assert client.run_command("row_col") == []
        assert speech.calls == []

    def test_activates_when_service_ready(self, client, speech):
        assert client.activation.run() is True
        assert client.is_active is True

        client.notify(SearchChanged(False))

        assert speech.calls == [("earcon", Earcon.ALERT)]

    def test_registers_hotkeys_once(self, client):
        client.activation.run()
        client._on_service_ready()

        client.hotkey_manager.register.assert_called_once()
        shortcuts, callback = client.hotkey_manager.register.call_args.args
        assert [s.hotkey for s in shortcuts][:2] == ["ctrl+shift+1", "ctrl+shift+2"]
        assert callback == client._on_hotkey

    def test_gives_up_silently(self, code_editor, speech, fast_settings):
        speech.available = False
        client = EditorA11yClient(code_editor, speech, fast_settings, hotkey_manager=MagicMock())

        assert client.activation.run() is False
        assert client.activation.gave_up is True
        assert client.notify(SearchChanged(False)) == []
        assert speech.calls == []
        client.hotkey_manager.register.assert_not_called()

    def test_modal_editor_disables_key_echo(self, modal_editor, speech, fast_settings):
        client = EditorA11yClient(modal_editor, speech, fast_settings, hotkey_manager=MagicMock())
        client.activation.run()
        assert speech.calls == [("key_echo", False)]

    def test_start_without_hotkeys(self, client):
        client.start(register_hotkeys=False)

        assert client.activation.wait(timeout=2.0) is True
        client.hotkey_manager.register.assert_not_called()
        client.stop()

    def test_stop(self, client):
        client.activation.run()
        client.stop()

        assert client.is_active is False
        client.hotkey_manager.unregister_all.assert_called_once_with()
        assert client.notify(SearchChanged(False)) == []


class TestAfterActivation:
    @pytest.fixture(autouse=True)
    def activate(self, client):
        client.activation.run()

    def test_notify_applies_actions_in_order(self, client, speech):
        client.notify(AnnotationsChanged((Annotation(1, 0, "error", "bad"),)))
        speech.calls.clear()

        actions = client.notify(CursorChanged(Cursor(1, 4)))

        assert speech.calls[0] == ("earcon", Earcon.ALERT)
        assert speech.calls[1] == ("speak", "    ", QueueMode.FLUSH)
        assert len(speech.calls) == len(actions)

    def test_hotkey_runs_command(self, client, speech):
        client._on_hotkey(Command.SPEAK_ROW_COL)
        assert speech.calls == [("speak", "row 1 column 1", QueueMode.FLUSH)]

    def test_menu_command(self, client, speech):
        client.run_command("toggle_location")
        assert speech.spoken_texts == ["Speak location on row change enabled."]

    def test_menu_actions_json(self, client):
        assert '"cmd": "annots"' in client.menu_actions_json()
