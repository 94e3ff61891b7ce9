"""
Presentation Layer - Prompt facade, selection widgets and formatting.

Everything the user sees is produced here and written to the status
stream, keeping standard output free for program results.
"""

from .cli import (
    InputCollector,
    NumberedListSelector,
    QuestionarySelector,
    RangeSelectionParser,
)
from .formatters import PromptFormatter, prompt_formatter

__all__ = [
    # Input collection
    "InputCollector",
    "NumberedListSelector",
    "QuestionarySelector",
    "RangeSelectionParser",
    # Formatting
    "PromptFormatter",
    "prompt_formatter",
]
