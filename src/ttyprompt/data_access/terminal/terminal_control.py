"""
Terminal Control - Device-type queries and echo toggling.

The toolkit talks to the terminal only through the TerminalControl
protocol, so tests can swap in a double that simulates both an
interactive terminal and a redirected stream.
"""

import io
import os
import stat
from typing import Any, Protocol, TextIO


class TerminalControl(Protocol):
    """Capabilities the toolkit needs from the terminal device."""

    def is_terminal(self, stream: TextIO) -> bool:
        """Return True if ``stream`` is backed by an interactive terminal."""
        ...

    def disable_echo(self, stream: TextIO) -> Any:
        """Turn off local echo and return the state needed to restore it."""
        ...

    def restore_echo(self, stream: TextIO, saved_state: Any) -> None:
        """Put back the echo state returned by ``disable_echo``."""
        ...


def file_descriptor(stream: TextIO) -> int | None:
    """Return the stream's file descriptor, or None if it has none."""
    try:
        return stream.fileno()
    except (AttributeError, io.UnsupportedOperation, ValueError, OSError):
        # In-memory streams, closed files, and wrapped objects
        return None


class PosixTerminalControl:
    """
    TerminalControl backed by ``os``/``termios``.

    A stream counts as a terminal only when its descriptor is a character
    device that is also a TTY; pipes, regular files, sockets and
    ``/dev/null`` are not.
    """

    def is_terminal(self, stream: TextIO) -> bool:
        """
        Inspect the device type behind ``stream``.

        Args:
            stream: Input stream, usually ``sys.stdin``

        Returns:
            True for a character-mode terminal device, False otherwise
        """
        fd = file_descriptor(stream)
        if fd is None:
            return False
        try:
            mode = os.fstat(fd).st_mode
        except OSError:
            return False
        return stat.S_ISCHR(mode) and os.isatty(fd)

    def disable_echo(self, stream: TextIO) -> list:
        """
        Clear the ECHO flag on the terminal behind ``stream``.

        Line editing (canonical mode) stays on so the user can still
        correct typos before pressing Enter.

        Returns:
            The original termios attributes
        """
        import termios

        fd = stream.fileno()
        saved = termios.tcgetattr(fd)
        masked = termios.tcgetattr(fd)
        masked[3] &= ~termios.ECHO
        termios.tcsetattr(fd, termios.TCSAFLUSH, masked)
        return saved

    def restore_echo(self, stream: TextIO, saved_state: list) -> None:
        """Restore the termios attributes captured by ``disable_echo``."""
        import termios

        termios.tcsetattr(stream.fileno(), termios.TCSAFLUSH, saved_state)
