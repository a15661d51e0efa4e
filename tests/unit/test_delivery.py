"""
Unit tests for body splitting, escaping and delivery.
"""

from tmuxfeed.address import SessionAddress
from tmuxfeed.delivery import (
    BodyDelivery,
    DeliveryOutcome,
    DeliveryResult,
    escape_line,
    split_body,
)
from tmuxfeed.interfaces import MockTmuxControl
from tmuxfeed.liveness import LivenessChecker


class TestSplitBody:
    """Test split_body."""

    def test_single_line(self):
        assert split_body("ls") == ["ls"]

    def test_newlines(self):
        assert split_body("a\nb\nc") == ["a", "b", "c"]

    def test_crlf_and_blank_runs_collapse(self):
        assert split_body("a\r\n\r\nb\rc") == ["a", "b", "c"]

    def test_edge_breaks_dropped(self):
        assert split_body("\n\na\nb\n") == ["a", "b"]

    def test_empty_body(self):
        assert split_body("") == []

    def test_whitespace_lines_kept(self):
        assert split_body("a\n  \nb") == ["a", "  ", "b"]


class TestEscapeLine:
    """Test escape_line."""

    def test_trailing_semicolon_escaped(self):
        assert escape_line("echo hi;") == "echo hi\\;"

    def test_inner_semicolon_untouched(self):
        assert escape_line("a; b") == "a; b"

    def test_plain_line_untouched(self):
        assert escape_line("ls -la") == "ls -la"

    def test_only_last_semicolon(self):
        assert escape_line("x;;") == "x;\\;"


class TestBodyDelivery:
    """Test BodyDelivery.send."""

    def _delivery(self, sessions, failing_lines=()):
        mock = MockTmuxControl(sessions=sessions, failing_lines=failing_lines)
        return BodyDelivery(mock, LivenessChecker(mock)), mock

    def test_delivers_lines_in_order(self):
        delivery, mock = self._delivery({"s": ["w"]})
        outcome = delivery.send(SessionAddress("s", "w"), ["one;", "two", "three"])

        assert outcome == DeliveryOutcome(DeliveryResult.DELIVERED, sent=3, failed=0)
        assert mock.sent == ["one\\;", "two", "three"]

    def test_each_line_is_literal_send_keys_with_newline(self):
        delivery, mock = self._delivery({"s": ["w"]})
        delivery.send(SessionAddress("s", "w"), ["echo hi"])

        assert mock.commands("send-keys") == [
            ["send-keys", "-l", "-t", "s:=w", "--", "echo hi", "\n"]
        ]

    def test_skips_when_window_missing(self):
        delivery, mock = self._delivery({"s": ["other"]})
        outcome = delivery.send(SessionAddress("s", "w"), ["echo hi"])

        assert outcome.result is DeliveryResult.SKIPPED
        assert outcome.sent == 0
        assert mock.sent == []

    def test_unnamed_window_is_never_skipped(self):
        delivery, mock = self._delivery({})
        outcome = delivery.send(SessionAddress("s"), ["echo hi"])

        assert outcome.result is DeliveryResult.DELIVERED
        assert mock.commands("send-keys")[0][3] == "s:^"

    def test_lines_starting_with_dash_are_text(self):
        delivery, mock = self._delivery({"s": ["w"]})
        delivery.send(SessionAddress("s", "w"), ["- item", "-n"])

        assert mock.commands("send-keys") == [
            ["send-keys", "-l", "-t", "s:=w", "--", "- item", "\n"],
            ["send-keys", "-l", "-t", "s:=w", "--", "-n", "\n"],
        ]

    def test_failed_lines_make_partial_result(self):
        delivery, mock = self._delivery({"s": ["w"]}, failing_lines=["two"])
        outcome = delivery.send(SessionAddress("s", "w"), ["one", "two", "three"])

        assert outcome == DeliveryOutcome(DeliveryResult.PARTIAL, sent=2, failed=1)
        # later lines are still attempted
        assert mock.sent == ["one", "three"]

    def test_failure_is_logged(self, caplog):
        delivery, _ = self._delivery({"s": ["w"]}, failing_lines=["two"])
        with caplog.at_level("WARNING", logger="tmuxfeed.delivery"):
            delivery.send(SessionAddress("s", "w"), ["two"])

        assert "send-keys to s:=w failed" in caplog.text
