"""
Selectors - Interactive list widgets for the multi-select prompt.

Both classes satisfy the SelectionCollaborator protocol:
QuestionarySelector drives a keyboard checkbox list, and
NumberedListSelector asks for numbers on one line for terminals where a
full-screen widget is unwelcome.
"""

from typing import Sequence, TextIO

import questionary
from prompt_toolkit.input import create_input
from prompt_toolkit.output import create_output

from ttyprompt.data_access.readers.line_reader import LineReader
from ttyprompt.data_access.terminal.terminal_control import file_descriptor
from ttyprompt.domain.enums import StatusTag
from ttyprompt.domain.errors import InputExhausted
from ttyprompt.presentation.cli.range_selection import RangeSelectionParser
from ttyprompt.presentation.formatters.prompt_formatter import PromptFormatter


class QuestionarySelector:
    """
    Checkbox list rendered by questionary (arrow keys, space, enter).

    The widget is drawn on the status stream so standard output stays
    free for the program's real output, and reads keys from the same
    input stream the toolkit checked for a terminal. A stream without a
    file descriptor cannot drive the widget; prompt_toolkit then falls
    back to the process's real stdin.
    """

    def __init__(
        self,
        status_stream: TextIO | None = None,
        input_stream: TextIO | None = None,
        qmark: str = "?",
        instruction: str | None = None,
    ):
        self._status_stream = status_stream
        self._input_stream = input_stream
        self._qmark = qmark
        self._instruction = instruction

    def select(self, label: str, options: list[str]) -> Sequence[str] | None:
        extra = {}
        if self._status_stream is not None:
            extra["output"] = create_output(stdout=self._status_stream)
        if self._input_stream is not None and file_descriptor(self._input_stream) is not None:
            extra["input"] = create_input(stdin=self._input_stream)

        # unsafe_ask lets Ctrl-C surface as KeyboardInterrupt instead of None
        return questionary.checkbox(
            label,
            choices=options,
            qmark=self._qmark,
            instruction=self._instruction,
            **extra,
        ).unsafe_ask()


class NumberedListSelector:
    """
    Line-based selector: prints numbered options, reads "1 3" / "1-4" / "all".

    An empty answer selects nothing.
    """

    def __init__(
        self,
        input_stream: TextIO,
        status_stream: TextIO,
        line_reader: LineReader | None = None,
        formatter: PromptFormatter | None = None,
    ):
        """
        Initialize selector.

        Args:
            input_stream: Where the typed selection is read from
            status_stream: Where the option list and hints go
            line_reader: Line reader (creates default if None)
            formatter: Formatter (creates default if None)
        """
        self._input = input_stream
        self._status = status_stream
        self._line_reader = line_reader or LineReader()
        self._formatter = formatter or PromptFormatter()

    def select(self, label: str, options: list[str]) -> Sequence[str] | None:
        """
        Show the numbered list and parse one line of numbers.

        Raises:
            InputExhausted: If input ends before a selection is typed
        """
        self._write(f"{label}\n{self._formatter.numbered_options(options)}\n")
        self._write("Enter numbers or ranges (e.g. '1 3' or '1-4,7'), 'all', or nothing: ")

        result = self._line_reader.read_line(self._input)
        if result.end_of_input:
            raise InputExhausted(label)

        indices = RangeSelectionParser.parse(
            result.text,
            len(options),
            on_warning=self._warn,
        )

        if not indices:
            self._write(self._formatter.status(StatusTag.INFO, "No options selected") + "\n")

        return [options[index - 1] for index in indices]

    def _warn(self, message: str) -> None:
        self._write(self._formatter.status(StatusTag.WARNING, message) + "\n")

    def _write(self, text: str) -> None:
        self._status.write(text)
        self._status.flush()
