"""Tests for features.shell — routing, pending transcript and sessions."""

from __future__ import annotations

from unittest.mock import MagicMock, patch

from features.shell import SessionStore, Shell
from models.schemas import ActionType, Feature

from tests.conftest import FakeRecognizer


class TestNavigation:
    def test_starts_on_image_describer(self, shell: Shell) -> None:
        assert shell.active_feature == Feature.IMAGE_ANALYZER
        assert shell.navigation_labels == [
            "Image Describer", "Color Contrast", "Text Simplifier", "Video Describer",
        ]

    def test_voice_navigation_switches_and_clears_pending(self, shell: Shell, no_navigation: MagicMock) -> None:
        no_navigation.return_value = Feature.TEXT_SIMPLIFIER
        shell.pending_transcript = "stale"
        action = shell.handle_voice_result("open the text simplifier")
        assert action.type == ActionType.SWITCH_FEATURE
        assert shell.active_feature == Feature.TEXT_SIMPLIFIER
        assert shell.pending_transcript is None

    def test_manual_selection(self, shell: Shell) -> None:
        shell.select_feature(Feature.VIDEO_DESCRIBER)
        assert shell.active_controller is shell.controller(Feature.VIDEO_DESCRIBER)


class TestPendingTranscript:
    def test_forwarded_to_active_feature(self, shell: Shell, simplify: MagicMock) -> None:
        shell.select_feature(Feature.TEXT_SIMPLIFIER)
        action = shell.handle_voice_result("simplify text this document is complex")
        assert action.type == ActionType.SUBMIT_TEXT
        assert action.payload == "simplify text this document is complex"
        simplify.assert_called_once_with("this document is complex")

    def test_consumed_exactly_once(self, shell: Shell, simplify: MagicMock) -> None:
        shell.select_feature(Feature.TEXT_SIMPLIFIER)
        shell.handle_voice_result("simplify text this document is complex")
        assert shell.pending_transcript is None
        assert shell.deliver_pending() is False
        assert shell.deliver_pending() is False
        assert simplify.call_count == 1

    def test_cleared_before_controller_runs(self, shell: Shell) -> None:
        seen = []
        controller = shell.controller(Feature.TEXT_SIMPLIFIER)
        controller.handle_voice_command = lambda t: seen.append(shell.pending_transcript)
        shell.select_feature(Feature.TEXT_SIMPLIFIER)
        shell.handle_voice_result("input text hello")
        assert seen == [None]

    def test_unknown_command_not_forwarded(self, shell: Shell, describe_image: MagicMock) -> None:
        action = shell.handle_voice_result("what time is it")
        assert action.type == ActionType.UNKNOWN
        assert shell.pending_transcript is None
        describe_image.assert_not_called()

    def test_parser_failure_clears_pending(self, shell: Shell) -> None:
        shell.pending_transcript = "stale"
        with patch("features.shell.shell.parse_voice_command", side_effect=RuntimeError("boom")):
            action = shell.handle_voice_result("input text hello")
        assert action.type == ActionType.UNKNOWN
        assert shell.pending_transcript is None

    def test_input_reaches_text_controller(self, shell: Shell) -> None:
        shell.select_feature(Feature.TEXT_SIMPLIFIER)
        shell.handle_voice_result("input text hello world")
        assert shell.controller(Feature.TEXT_SIMPLIFIER).text == "hello world"

    def test_generic_input_on_text_simplifier(self, shell: Shell, simplify: MagicMock) -> None:
        shell.select_feature(Feature.TEXT_SIMPLIFIER)
        action = shell.handle_voice_result("set text to hello world")
        assert action.type == ActionType.SET_INPUT
        assert shell.controller(Feature.TEXT_SIMPLIFIER).text == "hello world"
        simplify.assert_not_called()

    def test_generic_input_on_video_describer(self, shell: Shell, describe_video: MagicMock) -> None:
        shell.select_feature(Feature.VIDEO_DESCRIBER)
        action = shell.handle_voice_result("type a cooking tutorial")
        assert action.type == ActionType.SET_INPUT
        assert shell.controller(Feature.VIDEO_DESCRIBER).prompt == "a cooking tutorial"
        describe_video.assert_not_called()


class TestTheme:
    def test_toggle(self, shell: Shell) -> None:
        assert shell.theme == "light"
        assert shell.toggle_theme() == "dark"
        assert shell.toggle_theme() == "light"

    def test_invalid_theme_falls_back(self) -> None:
        assert Shell(theme="sepia", interpret=MagicMock(return_value=None)).theme == "light"


class TestVoiceLifecycle:
    def test_recognized_speech_is_dispatched(self, shell: Shell, fake_recognizer: FakeRecognizer) -> None:
        shell.select_feature(Feature.TEXT_SIMPLIFIER)
        shell.start_listening()
        assert shell.voice.is_listening
        fake_recognizer.say("  input text spoken words  ")
        assert not shell.voice.is_listening
        assert shell.controller(Feature.TEXT_SIMPLIFIER).text == "spoken words"

    def test_dispose_aborts(self, shell: Shell, fake_recognizer: FakeRecognizer) -> None:
        shell.start_listening()
        shell.dispose()
        assert fake_recognizer.aborted == 1
        assert fake_recognizer.on_result is None


class TestSessionStore:
    def test_get_creates_once(self) -> None:
        factory = MagicMock(side_effect=lambda: MagicMock(spec=Shell))
        store = SessionStore(factory=factory)
        first = store.get("abc")
        assert store.get("abc") is first
        assert len(store) == 1
        factory.assert_called_once()

    def test_drop_disposes(self) -> None:
        shell = MagicMock(spec=Shell)
        store = SessionStore(factory=lambda: shell)
        store.get("abc")
        assert store.drop("abc") is True
        shell.dispose.assert_called_once()
        assert store.drop("abc") is False

    def test_least_recently_used_session_is_evicted(self) -> None:
        shells = {}

        def factory() -> Shell:
            shell = MagicMock(spec=Shell)
            shells[len(shells)] = shell
            return shell

        store = SessionStore(factory=factory, max_sessions=2)
        store.get("a")
        store.get("b")
        store.get("a")
        store.get("c")
        assert len(store) == 2
        shells[1].dispose.assert_called_once()
        shells[0].dispose.assert_not_called()
        assert store.drop("b") is False
        assert store.drop("a") is True
