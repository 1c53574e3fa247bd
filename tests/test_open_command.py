"""
Tests for the open-URL command.
Covers the end-to-end flow: settings, selection, expansion, encoding, opening
and the notices shown for each outcome.
"""

import asyncio
from unittest.mock import AsyncMock, Mock

import pytest

from openurl.command import (
    EMPTY_URL_MESSAGE,
    NO_URLS_MESSAGE,
    OpenOutcome,
    OpenUrlCommand,
    encode_uri,
)
from openurl.entries import UrlEntry
from openurl.exceptions import OpenerError
from openurl.variables import EditorContextSnapshot, WorkspaceFolder


class RecordingNotifier:
    """Collects notices instead of printing them."""

    def __init__(self):
        self.infos = []
        self.errors = []

    def info(self, message):
        self.infos.append(message)

    def error(self, message):
        self.errors.append(message)


def make_command(raw, context=None, picker=None, opener=None):
    notifier = RecordingNotifier()
    opener = opener or Mock(open=AsyncMock())
    command = OpenUrlCommand(
        settings=lambda: raw,
        context_provider=lambda: context or EditorContextSnapshot(cwd="/work"),
        picker=picker or AsyncMock(),
        opener=opener,
        notifier=notifier
    )
    return command, opener, notifier


class TestScenarios:
    """End-to-end scenarios."""

    def test_single_env_url_is_opened(self):
        ctx = EditorContextSnapshot(environ={"USER": "alice"})
        picker = AsyncMock()
        command, opener, notifier = make_command(
            ["https://example.com/${env:USER}"], context=ctx, picker=picker
        )

        outcome = asyncio.run(command.run())

        assert outcome == OpenOutcome.OPENED
        picker.assert_not_called()
        opener.open.assert_awaited_once_with("https://example.com/alice")
        assert notifier.infos == []
        assert notifier.errors == []

    def test_empty_config_shows_notice(self):
        command, opener, notifier = make_command([])

        outcome = asyncio.run(command.run())

        assert outcome == OpenOutcome.NOT_CONFIGURED
        assert notifier.infos == [NO_URLS_MESSAGE]
        assert notifier.errors == []
        opener.open.assert_not_called()

    def test_absent_config_shows_notice(self):
        command, opener, notifier = make_command(None)

        assert asyncio.run(command.run()) == OpenOutcome.NOT_CONFIGURED
        assert notifier.infos == [NO_URLS_MESSAGE]

    def test_selection_without_document_is_empty_url(self):
        command, opener, notifier = make_command([{"url": "${selectedText}"}])

        outcome = asyncio.run(command.run())

        assert outcome == OpenOutcome.EMPTY_URL
        assert notifier.errors == [EMPTY_URL_MESSAGE]
        opener.open.assert_not_called()

    def test_dot_prefixed_basename_is_kept(self):
        ctx = EditorContextSnapshot.capture(
            active_file="/ws/docs/.report.final.txt",
            workspace_folders=[WorkspaceFolder("ws", "/ws")],
            environ={}
        )
        command, opener, notifier = make_command(
            ["https://example.com/${fileBasenameNoExtension}"], context=ctx
        )

        asyncio.run(command.run())

        opener.open.assert_awaited_once_with("https://example.com/.report.final.txt")

    def test_named_workspace_folder(self):
        ctx = EditorContextSnapshot(workspace_folders=(
            WorkspaceFolder("frontend", "/a"),
            WorkspaceFolder("backend", "/b"),
        ))
        command, opener, notifier = make_command(["${workspaceFolder:backend}"], context=ctx)

        assert asyncio.run(command.run()) == OpenOutcome.OPENED
        opener.open.assert_awaited_once_with("/b")


class TestSelection:
    """Picker interaction."""

    def test_picker_choice_is_opened(self):
        picker = AsyncMock(return_value=UrlEntry(url="https://two.example.com"))
        command, opener, notifier = make_command(
            ["https://one.example.com", "https://two.example.com"], picker=picker
        )

        assert asyncio.run(command.run()) == OpenOutcome.OPENED
        picker.assert_awaited_once_with([
            UrlEntry(url="https://one.example.com"),
            UrlEntry(url="https://two.example.com"),
        ])
        opener.open.assert_awaited_once_with("https://two.example.com")

    def test_cancelled_picker_is_silent(self):
        picker = AsyncMock(return_value=None)
        command, opener, notifier = make_command(["https://a", "https://b"], picker=picker)

        assert asyncio.run(command.run()) == OpenOutcome.CANCELLED
        assert notifier.infos == []
        assert notifier.errors == []
        opener.open.assert_not_called()


class TestFailures:
    """Expansion and transport failures."""

    def test_whitespace_only_expansion_is_empty_url(self):
        ctx = EditorContextSnapshot(environ={"BLANK": "   "})
        command, opener, notifier = make_command(["${BLANK}"], context=ctx)

        assert asyncio.run(command.run()) == OpenOutcome.EMPTY_URL
        assert notifier.errors == [EMPTY_URL_MESSAGE]

    def test_opener_failure_is_reported_once(self):
        opener = Mock(open=AsyncMock(side_effect=OpenerError("https://x", "No browser could open URL")))
        command, _, notifier = make_command(["https://x"], opener=opener)

        outcome = asyncio.run(command.run())

        assert outcome == OpenOutcome.FAILED
        assert notifier.errors == ["Failed to open URL: No browser could open URL: https://x"]

    def test_unexpected_opener_exception_does_not_propagate(self):
        opener = Mock(open=AsyncMock(side_effect=RuntimeError("handler crashed")))
        command, _, notifier = make_command(["https://x"], opener=opener)

        assert asyncio.run(command.run()) == OpenOutcome.FAILED
        assert notifier.errors == ["Failed to open URL: handler crashed"]

    def test_unencodable_url_is_a_transport_failure(self):
        ctx = EditorContextSnapshot(environ={"BAD": "\ud800"})
        command, opener, notifier = make_command(["https://x/${BAD}"], context=ctx)

        assert asyncio.run(command.run()) == OpenOutcome.FAILED
        assert len(notifier.errors) == 1
        assert notifier.errors[0].startswith("Failed to open URL: ")
        opener.open.assert_not_called()


class TestFreshState:
    """Each run reads settings and context afresh."""

    def test_settings_and_context_read_per_run(self):
        settings = Mock(side_effect=[["https://a/${env:N}"], ["https://b/${env:N}"]])
        contexts = Mock(side_effect=[
            EditorContextSnapshot(environ={"N": "1"}),
            EditorContextSnapshot(environ={"N": "2"}),
        ])
        opener = Mock(open=AsyncMock())
        command = OpenUrlCommand(settings, contexts, AsyncMock(), opener, RecordingNotifier())

        asyncio.run(command.run())
        asyncio.run(command.run())

        assert [c.args[0] for c in opener.open.await_args_list] == ["https://a/1", "https://b/2"]
        assert settings.call_count == 2
        assert contexts.call_count == 2


@pytest.mark.parametrize("text, expected", [
    ("https://example.com/alice", "https://example.com/alice"),
    ("https://example.com/a b", "https://example.com/a%20b"),
    ("https://example.com/?q=1&r=2#frag", "https://example.com/?q=1&r=2#frag"),
    ("https://example.com/100%", "https://example.com/100%25"),
    ("https://example.com/café", "https://example.com/caf%C3%A9"),
    ("https://example.com/{x}|[y]", "https://example.com/%7Bx%7D%7C%5By%5D"),
    ("mailto:a@b.c?subject=hi;there", "mailto:a@b.c?subject=hi;there"),
    ("-_.!~*'()$+,", "-_.!~*'()$+,"),
])
def test_encode_uri(text, expected):
    assert encode_uri(text) == expected


def test_console_collaborators(capsys):
    from openurl.ui import ConsoleNotifier, PrintOpener

    command = OpenUrlCommand(
        settings=lambda: ["https://example.com/a b", "${NOTHING}"],
        context_provider=lambda: EditorContextSnapshot(environ={}),
        picker=AsyncMock(side_effect=lambda entries: entries[0]),
        opener=PrintOpener(),
        notifier=ConsoleNotifier()
    )

    assert asyncio.run(command.run()) == OpenOutcome.OPENED
    assert capsys.readouterr().out == "https://example.com/a%20b\n"

    empty = OpenUrlCommand(
        settings=lambda: ["${NOTHING}"],
        context_provider=lambda: EditorContextSnapshot(environ={}),
        picker=AsyncMock(),
        opener=PrintOpener(),
        notifier=ConsoleNotifier()
    )

    assert asyncio.run(empty.run()) == OpenOutcome.EMPTY_URL
    assert capsys.readouterr().err == f"Error: {EMPTY_URL_MESSAGE}\n"
