"""
Tests for the interactive terminal picker.
"""

import asyncio
import io
import threading
import time

import pytest

from openurl.entries import UrlEntry
from openurl.ui import TerminalPicker


ENTRIES = [
    UrlEntry(url="https://one.example.com", label="One"),
    UrlEntry(url="https://two.example.com"),
]


def make_picker(answers: str, **kwargs):
    out = io.StringIO()
    return TerminalPicker(stream_in=io.StringIO(answers), stream_out=out, **kwargs), out


def test_lists_entries_with_labels_and_descriptions():
    picker, out = make_picker("1\n")

    picker.pick(ENTRIES)

    text = out.getvalue()
    assert text.startswith("Choose a URL to open\n")
    assert "1) One  https://one.example.com" in text
    assert "2) https://two.example.com" in text


def test_numbered_choice():
    picker, _ = make_picker("2\n")

    assert asyncio.run(picker(ENTRIES)) is ENTRIES[1]


def test_blank_answer_cancels():
    picker, _ = make_picker("\n")

    assert picker.pick(ENTRIES) is None


def test_end_of_input_cancels():
    picker, _ = make_picker("")

    assert picker.pick(ENTRIES) is None


def test_invalid_answers_reprompt():
    picker, out = make_picker("9\nabc\n1\n")

    assert picker.pick(ENTRIES) is ENTRIES[0]
    assert "Invalid choice: 9" in out.getvalue()
    assert "Invalid choice: abc" in out.getvalue()


def test_gives_up_after_max_attempts():
    picker, _ = make_picker("0\n0\n1\n", max_attempts=2)

    assert picker.pick(ENTRIES) is None


class BlockingInput:
    """Input stream whose readline waits until released."""

    def __init__(self):
        self.released = threading.Event()

    def readline(self):
        self.released.wait(timeout=5)
        return ""


def test_pending_read_does_not_hold_up_cancellation():
    stream_in = BlockingInput()
    picker = TerminalPicker(stream_in=stream_in, stream_out=io.StringIO())

    async def pick_with_timeout():
        return await asyncio.wait_for(picker(ENTRIES), timeout=0.05)

    started = time.monotonic()
    try:
        with pytest.raises(asyncio.TimeoutError):
            asyncio.run(pick_with_timeout())
        assert time.monotonic() - started < 2
    finally:
        stream_in.released.set()


def test_keyboard_interrupt_while_reading_cancels():
    class Interrupting:
        def readline(self):
            raise KeyboardInterrupt()

    picker = TerminalPicker(stream_in=Interrupting(), stream_out=io.StringIO())

    assert picker.pick(ENTRIES) is None
