"""
Masked Reader - Reads a secret from the terminal with echo disabled.

The terminal's echo flag is process-wide state. Disabling it is paired
with an unconditional restore, so an exception during the read never
leaves the user's terminal silent.
"""

from typing import TextIO

from ttyprompt.data_access.readers.line_reader import LineReader
from ttyprompt.data_access.terminal.terminal_control import (
    PosixTerminalControl,
    TerminalControl,
)
from ttyprompt.domain.errors import NotATerminal
from ttyprompt.domain.value_objects import ReadResult


class MaskedReader:
    """Reads one line of hidden input from an interactive terminal."""

    def __init__(
        self,
        status_stream: TextIO,
        terminal_control: TerminalControl | None = None,
        line_reader: LineReader | None = None,
    ):
        """
        Initialize reader.

        Args:
            status_stream: Where the post-read newline is written (stderr)
            terminal_control: Echo control (POSIX implementation if None)
            line_reader: Line reader (creates default if None)
        """
        self._status_stream = status_stream
        self._terminal_control = terminal_control or PosixTerminalControl()
        self._line_reader = line_reader or LineReader()

    def read_secret(self, stream: TextIO, label: str = "") -> ReadResult:
        """
        Read one line without echoing the typed characters.

        Args:
            stream: Terminal input stream
            label: Prompt label, used only in the error

        Returns:
            ReadResult of the hidden line

        Raises:
            NotATerminal: If ``stream`` is not an interactive terminal
        """
        if not self._terminal_control.is_terminal(stream):
            raise NotATerminal(label, operation="read hidden input")

        saved_state = self._enter_masked_mode(stream)
        try:
            return self._line_reader.read_line(stream)
        finally:
            self._exit_masked_mode(stream, saved_state)
            # The user's Enter was not echoed either
            self._status_stream.write("\n")
            self._status_stream.flush()

    def _enter_masked_mode(self, stream: TextIO):
        return self._terminal_control.disable_echo(stream)

    def _exit_masked_mode(self, stream: TextIO, saved_state) -> None:
        self._terminal_control.restore_echo(stream, saved_state)
