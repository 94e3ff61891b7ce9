"""
Prompt Service - Text, password and yes/no prompt primitives.

Each primitive writes its label to the status stream, reads one line,
and either returns a validated value or re-prompts. Reaching the end of
input while still waiting is a hard failure (InputExhausted), never
another loop iteration, so a closed or empty pipe cannot spin forever.
"""

from typing import Callable, TextIO

from ttyprompt.data_access.readers.line_reader import LineReader
from ttyprompt.data_access.readers.masked_reader import MaskedReader
from ttyprompt.data_access.terminal.input_source import InputSourceResolver
from ttyprompt.domain.enums import StatusTag
from ttyprompt.domain.errors import InputExhausted, NotATerminal
from ttyprompt.domain.value_objects import PromptRequest, ReadResult, non_empty
from ttyprompt.presentation.formatters.prompt_formatter import PromptFormatter

DEFAULT_YES_TOKENS = ("y", "yes")
DEFAULT_NO_TOKENS = ("n", "no")


class PromptService:
    """
    Service for single-field prompts.

    Every call blocks until it has a valid answer or raises a PromptError.
    """

    def __init__(
        self,
        input_stream: TextIO,
        status_stream: TextIO,
        resolver: InputSourceResolver,
        masked_reader: MaskedReader,
        line_reader: LineReader | None = None,
        formatter: PromptFormatter | None = None,
        yes_tokens: tuple[str, ...] = DEFAULT_YES_TOKENS,
        no_tokens: tuple[str, ...] = DEFAULT_NO_TOKENS,
        show_retry_hints: bool = True,
    ):
        """
        Initialize service.

        Args:
            input_stream: Where answers are read from (stdin)
            status_stream: Where labels and hints go (stderr)
            resolver: Input source resolver for the input stream
            masked_reader: Reader for hidden input
            line_reader: Reader for visible input (creates default if None)
            formatter: Label formatter (creates default if None)
            yes_tokens: Lower-case answers meaning yes
            no_tokens: Lower-case answers meaning no
            show_retry_hints: If True, explain why an answer was rejected
        """
        self._input = input_stream
        self._status = status_stream
        self._resolver = resolver
        self._masked_reader = masked_reader
        self._line_reader = line_reader or LineReader()
        self._formatter = formatter or PromptFormatter()
        self._yes_tokens = yes_tokens
        self._no_tokens = no_tokens
        self._show_retry_hints = show_retry_hints

    def ask(self, request: PromptRequest) -> str:
        """
        Prompt until the answer satisfies the request.

        An empty answer returns the request's default when it has one.
        Otherwise empty and rejected answers re-prompt.

        Args:
            request: Label, default and validator

        Returns:
            The accepted answer (or the default)

        Raises:
            InputExhausted: If input ends before a valid answer arrives
            ValueError: If the request's default fails its validator (raised
                when the PromptRequest is built)
        """
        while True:
            result = self._read_visible(request.display_label(), request.label)

            if result.is_empty() and request.default is not None:
                return request.default

            if request.accepts(result.text):
                return result.text

            if result.text == "":
                self._hint("Input is required. Please enter a value.")
            else:
                self._hint(f"{result.text!r} is not a valid answer.")

    def prompt_text(
        self,
        label: str,
        default: str | None = None,
        validator: Callable[[str], bool] | None = None,
    ) -> str:
        """
        Ask for a line of text, re-prompting until it is non-empty.

        Args:
            label: Question shown to the user
            default: Returned on an empty answer (None = answer required)
            validator: Extra predicate the answer must satisfy

        Returns:
            The trimmed answer

        Raises:
            ValueError: If ``default`` is empty or rejected by ``validator``
        """
        if validator is None:
            check = non_empty
        else:
            def check(raw: str) -> bool:
                return raw != "" and validator(raw)

        return self.ask(PromptRequest(label=label, default=default, validator=check))

    def prompt_password(self, label: str) -> str:
        """
        Ask for a secret with echo disabled, re-prompting until non-empty.

        Args:
            label: Question shown to the user

        Returns:
            The trimmed secret

        Raises:
            NotATerminal: If standard input is not an interactive terminal
            InputExhausted: If the terminal signals end of input
        """
        if not self._resolver.is_interactive():
            raise NotATerminal(label, operation="read a password")

        while True:
            self._write(self._formatter.label(label))
            result = self._masked_reader.read_secret(self._input, label=label)
            if result.end_of_input:
                raise InputExhausted(label)
            if not result.is_empty():
                return result.text

            self._hint("Input is required. Please enter a value.")

    def prompt_confirm(self, label: str, default: bool = True) -> bool:
        """
        Ask a yes/no question.

        Args:
            label: Question shown to the user
            default: Answer used when the user just presses Enter

        Returns:
            True for yes, False for no

        Raises:
            InputExhausted: If input ends before a recognized answer
        """
        display = self._formatter.confirm_label(label, default)
        while True:
            answer = self._read_visible(display, label).text.lower()

            if answer == "":
                return default
            if answer in self._yes_tokens:
                return True
            if answer in self._no_tokens:
                return False

            self._hint("Please enter 'y' or 'n'.")

    def _read_visible(self, display: str, label: str) -> ReadResult:
        """Write the label, read one line, fail on end of input."""
        self._write(display)
        result = self._line_reader.read_line(self._input)
        if result.end_of_input:
            raise InputExhausted(label)
        return result

    def _hint(self, message: str) -> None:
        if self._show_retry_hints:
            self._write(self._formatter.status(StatusTag.WARNING, message) + "\n")

    def _write(self, text: str) -> None:
        self._status.write(text)
        self._status.flush()
