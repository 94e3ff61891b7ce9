"""
Line Reader - Reads one newline-terminated line and trims it.
"""

from typing import TextIO

from ttyprompt.domain.value_objects import ReadResult


class LineReader:
    """
    Reads a single line from a text stream.

    Distinguishes "user submitted nothing" (an empty terminated line)
    from "no more input" (end of stream with nothing read), so callers
    never loop forever on a closed pipe.
    """

    def read_line(self, stream: TextIO) -> ReadResult:
        """
        Read up to the next line feed or end of stream.

        Strips the line terminator (``\\n`` and a preceding ``\\r``), then
        leading and trailing whitespace. Internal whitespace is kept.

        Args:
            stream: Stream to read from

        Returns:
            ReadResult; ``end_of_input`` is set only if nothing was read
        """
        raw = stream.readline()
        if raw == "":
            return ReadResult.exhausted()

        if raw.endswith("\n"):
            raw = raw[:-1]
        if raw.endswith("\r"):
            raw = raw[:-1]

        return ReadResult(text=raw.strip())
