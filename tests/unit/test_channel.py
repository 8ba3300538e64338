# tests/unit/test_channel.py
"""Tests for the blocking line channel."""

import io

import pytest

from interactive_de.channel import LineChannel
from interactive_de.errors import ChannelError, QuitRequested
from interactive_de.scalars import integer_parser


def _channel(*lines, quit_sentinels=(":quit", ":q")):
    out = io.StringIO()
    channel = LineChannel(
        io.StringIO("".join(f"{line}\n" for line in lines)), out, quit_sentinels=quit_sentinels
    )
    return channel, out


class _BrokenInput:
    def readline(self):
        raise OSError("device unplugged")


class TestReadLine:
    def test_prints_prompt_and_strips_newline(self):
        channel, out = _channel("  hello world ")
        assert channel.read_line("name> ") == "  hello world "
        assert out.getvalue() == "name> "

    def test_last_line_without_newline(self):
        channel = LineChannel(io.StringIO("tail"), io.StringIO())
        assert channel.read_line("> ") == "tail"

    def test_empty_line_is_valid_input(self):
        channel, _ = _channel("")
        assert channel.read_line("> ") == ""

    @pytest.mark.parametrize("sentinel", [":q", ":quit"])
    def test_quit_sentinels(self, sentinel):
        channel, _ = _channel(sentinel)
        with pytest.raises(QuitRequested):
            channel.read_line("> ")

    def test_sentinel_must_match_exactly(self):
        channel, _ = _channel(":q ")
        assert channel.read_line("> ") == ":q "

    def test_end_of_input_quits(self):
        channel, _ = _channel()
        with pytest.raises(QuitRequested):
            channel.read_line("> ")

    def test_custom_sentinels(self):
        channel, _ = _channel(":q", "bye", quit_sentinels=["bye"])
        assert channel.read_line("> ") == ":q"
        with pytest.raises(QuitRequested):
            channel.read_line("> ")

    def test_os_error_becomes_channel_error(self):
        channel = LineChannel(_BrokenInput(), io.StringIO())
        with pytest.raises(ChannelError) as exc_info:
            channel.read_line("> ")
        assert isinstance(exc_info.value.__cause__, OSError)
        assert str(exc_info.value) == "io error"


class TestRead:
    def test_retries_until_parse_succeeds(self):
        channel, out = _channel("abc", "42")
        assert channel.read("n> ", integer_parser(32, True)) == 42
        assert out.getvalue() == "n> invalid digit found in string\nn> "

    def test_quit_during_retry(self):
        channel, _ = _channel("abc", ":q")
        with pytest.raises(QuitRequested):
            channel.read("n> ", integer_parser(32, True))


class TestConfirm:
    def test_yes_and_no(self):
        channel, _ = _channel("y", "n")
        assert channel.confirm("ok? ") is True
        assert channel.confirm("ok? ") is False

    def test_rejects_until_y_or_n(self):
        channel, out = _channel("x", "Y", "yes", "y")
        assert channel.confirm("ok? ") is True
        assert out.getvalue().count("Please enter y or n (or :q to quit)") == 3
        assert out.getvalue().count("ok? ") == 4
