"""
Prompt Errors - Terminal failures of a single prompt call.

Re-prompting on bad input is normal control flow and never raises.
These exceptions cover the cases where no valid answer can be obtained
at all; the toolkit never retries them.
"""


class PromptError(Exception):
    """
    Base class for every failure raised by a prompt primitive.

    Attributes:
        label: Label of the prompt that failed
    """

    def __init__(self, label: str, message: str):
        self.label = label
        super().__init__(message)


class InputExhausted(PromptError):
    """End of input was reached while still waiting for a valid answer."""

    def __init__(self, label: str):
        super().__init__(
            label,
            f"No more input available while waiting for an answer to {label!r}",
        )


class NotATerminal(PromptError):
    """A terminal-only prompt was invoked on non-interactive input."""

    def __init__(self, label: str, operation: str = "prompt"):
        self.operation = operation
        super().__init__(
            label,
            f"Cannot {operation} for {label!r}: standard input is not an interactive terminal",
        )


class InvalidOptions(PromptError):
    """Multi-select options contain duplicate entries."""

    def __init__(self, label: str, duplicates: list[str]):
        self.duplicates = duplicates
        listed = ", ".join(repr(d) for d in duplicates)
        super().__init__(label, f"Duplicate options for {label!r}: {listed}")
