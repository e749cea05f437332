# SPDX-License-Identifier: MIT
"""accessible_output2 음성 서비스 테스트."""

from types import SimpleNamespace
from unittest.mock import MagicMock, patch

import pytest

from editor_a11y_client import accessibility
from editor_a11y_client.accessibility import AccessibleOutputSpeechService
from editor_a11y_client.models import Earcon, QueueMode
from editor_a11y_client.speech_profiles import KEYWORD_PROFILE


@pytest.fixture
def output():
    """accessible_output2 Auto() mock."""
    mock = MagicMock()
    with patch.object(accessibility, "_get_output", return_value=mock):
        yield mock


class TestModuleFunctions:
    """speak / is_available / silence."""

    def test_not_available_without_output(self):
        with patch.object(accessibility, "_get_output", return_value=None):
            assert accessibility.is_available() is False

    def test_available(self, output):
        output.get_first_available_output.return_value = object()
        assert accessibility.is_available() is True

    def test_no_screen_reader(self, output):
        output.get_first_available_output.return_value = None
        assert accessibility.is_available() is False

    def test_probe_error(self, output):
        output.get_first_available_output.side_effect = RuntimeError("com error")
        assert accessibility.is_available() is False

    def test_speak_interrupt(self, output):
        assert accessibility.speak("hello", interrupt=True) is True
        output.speak.assert_called_once_with("hello", interrupt=True)
        output.output.assert_not_called()

    def test_speak_queued_goes_to_braille_too(self, output):
        assert accessibility.speak("hello") is True
        output.output.assert_called_once_with("hello")

    def test_speak_fallback(self):
        """출력 없으면 로그만 남기고 False."""
        with patch.object(accessibility, "_get_output", return_value=None):
            assert accessibility.speak("hello") is False

    def test_speak_output_error(self, output):
        output.output.side_effect = OSError("gone")
        assert accessibility.speak("hello") is False

    def test_silence(self, output):
        current = MagicMock()
        output.get_first_available_output.return_value = current

        accessibility.silence()

        current.silence.assert_called_once_with()

    def test_silence_without_output(self):
        with patch.object(accessibility, "_get_output", return_value=None):
            accessibility.silence()


class TestAccessibleOutputSpeechService:
    """SpeechService 구현."""

    def test_flush_interrupts(self):
        speak_func = MagicMock(return_value=True)
        service = AccessibleOutputSpeechService(speak_func)

        assert service.speak("if", QueueMode.FLUSH, KEYWORD_PROFILE) is True
        speak_func.assert_called_once_with("if", True)

    def test_queue_does_not_interrupt(self):
        speak_func = MagicMock(return_value=True)
        service = AccessibleOutputSpeechService(speak_func)

        service.speak("x", QueueMode.QUEUE)

        speak_func.assert_called_once_with("x", False)

    def test_stop_silences(self):
        service = AccessibleOutputSpeechService(MagicMock())
        with patch.object(accessibility, "silence") as silence:
            service.stop()
        silence.assert_called_once_with()

    def test_play_earcon(self):
        service = AccessibleOutputSpeechService(MagicMock())
        with patch.object(accessibility, "play_earcon_tones") as tones:
            service.play_earcon(Earcon.MODAL_SWITCH)
        tones.assert_called_once_with("MODAL_SWITCH")


class TestKeyEcho:
    """입력 키 읽기 훅."""

    def test_enable_and_disable(self):
        service = AccessibleOutputSpeechService(MagicMock())
        with patch.object(accessibility, "keyboard") as kb:
            kb.on_press.return_value = "hook"

            service.set_key_echo(True)
            service.set_key_echo(True)
            assert service.key_echo is True
            kb.on_press.assert_called_once_with(service._echo_key)

            service.set_key_echo(False)
            kb.unhook.assert_called_once_with("hook")
            assert service.key_echo is False

    def test_disable_when_off_is_noop(self):
        service = AccessibleOutputSpeechService(MagicMock())
        with patch.object(accessibility, "keyboard") as kb:
            service.set_key_echo(False)
        kb.unhook.assert_not_called()

    def test_echo_speaks_key_name(self):
        speak_func = MagicMock(return_value=True)
        service = AccessibleOutputSpeechService(speak_func)

        service._echo_key(SimpleNamespace(name="a"))
        service._echo_key(SimpleNamespace(name=None))

        speak_func.assert_called_once_with("a", True)
