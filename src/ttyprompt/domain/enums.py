"""
Domain Enums - Type-safe constants for the prompt toolkit.
"""

from enum import Enum


class InputMode(Enum):
    """
    Whether standard input is an interactive terminal or a redirect.

    Resolved once per process (or per resolver) and never re-resolved.
    """
    INTERACTIVE = "interactive"
    NON_INTERACTIVE = "non_interactive"

    @classmethod
    def from_flag(cls, interactive: bool) -> "InputMode":
        """Map a boolean capability flag to an InputMode."""
        return cls.INTERACTIVE if interactive else cls.NON_INTERACTIVE

    def is_interactive(self) -> bool:
        """Check if prompts may rely on a terminal (echo control, widgets)."""
        return self is InputMode.INTERACTIVE


class StatusTag(Enum):
    """
    Tags for operator-facing status lines written to the status stream.
    """
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CANCELLED = "CANCELLED"
