"""
Global test configuration.

Provides a fake terminal that can pretend to be an interactive TTY or a
redirected stream, plus scripted selection widgets, so no test needs a
real terminal.
"""
import io

import pytest

from ttyprompt.business_logic.services.prompt_service import PromptService
from ttyprompt.data_access.readers.masked_reader import MaskedReader
from ttyprompt.data_access.terminal.input_source import InputSourceResolver
from ttyprompt.orchestration.config import PromptConfig
from ttyprompt.orchestration.toolkit import create_toolkit


class FakeTerminal:
    """TerminalControl double that records echo toggles."""

    def __init__(self, interactive: bool = True):
        self.interactive = interactive
        self.echo_enabled = True
        self.events: list = []
        self.is_terminal_calls = 0

    def is_terminal(self, stream) -> bool:
        self.is_terminal_calls += 1
        return self.interactive

    def disable_echo(self, stream):
        self.events.append("disable")
        self.echo_enabled = False
        return "saved-attrs"

    def restore_echo(self, stream, saved_state) -> None:
        self.events.append(("restore", saved_state))
        self.echo_enabled = True


class ScriptedSelector:
    """SelectionCollaborator double returning a fixed answer."""

    def __init__(self, answer):
        self.answer = answer
        self.calls: list = []

    def select(self, label, options):
        self.calls.append((label, list(options)))
        return self.answer


@pytest.fixture
def status():
    """Status stream (stands in for stderr)."""
    return io.StringIO()


@pytest.fixture
def fake_terminal():
    """Interactive fake terminal."""
    return FakeTerminal(interactive=True)


@pytest.fixture
def make_service(status):
    """Build a PromptService over the given input text."""
    def _make(text: str, interactive: bool = False):
        stream = io.StringIO(text)
        terminal = FakeTerminal(interactive=interactive)
        resolver = InputSourceResolver(stream, terminal_control=terminal)
        service = PromptService(
            stream,
            status,
            resolver=resolver,
            masked_reader=MaskedReader(status, terminal_control=terminal),
        )
        return service, stream, terminal
    return _make


@pytest.fixture
def make_collector(status):
    """Build an InputCollector over the given input text."""
    def _make(text: str = "", interactive: bool = False, selector=None, config=None):
        stream = io.StringIO(text)
        terminal = FakeTerminal(interactive=interactive)
        collector = create_toolkit(
            config or PromptConfig(selector="numbered"),
            input_stream=stream,
            status_stream=status,
            terminal_control=terminal,
            selector=selector,
        )
        return collector, stream, terminal
    return _make
