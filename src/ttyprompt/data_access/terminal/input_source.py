"""
Input Source Resolver - Is standard input a terminal or a redirect?

Every prompt primitive consults the resolver to decide whether terminal
conveniences (hidden entry, selection widgets) are available or whether
it must fail fast instead.
"""

from typing import TextIO

from ttyprompt.data_access.terminal.terminal_control import (
    PosixTerminalControl,
    TerminalControl,
)
from ttyprompt.domain.enums import InputMode


class InputSourceResolver:
    """
    Resolves and caches the input mode for one input stream.

    The first query inspects the device; later queries return the cached
    answer, so repeated calls within one run always agree.
    """

    def __init__(
        self,
        stream: TextIO,
        terminal_control: TerminalControl | None = None,
        override: bool | None = None,
    ):
        """
        Initialize resolver.

        Args:
            stream: Input stream to inspect
            terminal_control: Device queries (POSIX implementation if None)
            override: Force the answer instead of inspecting the device
        """
        self._stream = stream
        self._terminal_control = terminal_control or PosixTerminalControl()
        self._mode: InputMode | None = (
            InputMode.from_flag(override) if override is not None else None
        )

    @property
    def mode(self) -> InputMode:
        """Resolved input mode (computed on first access)."""
        if self._mode is None:
            self._mode = InputMode.from_flag(
                self._terminal_control.is_terminal(self._stream)
            )
        return self._mode

    def is_interactive(self) -> bool:
        """Return True only if the stream is a character-mode terminal."""
        return self.mode.is_interactive()
