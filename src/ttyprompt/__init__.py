"""
ttyprompt - Line-oriented interactive prompts that behave on pipes.

Usage:
    from ttyprompt import prompt_text, prompt_confirm

    name = prompt_text("What is your name?")
    if prompt_confirm("Continue?", default=True):
        ...

Prompts are written to stderr. When stdin is not a terminal, text and
confirm prompts read from the redirect and raise InputExhausted at end of
input; password and multi-select prompts raise NotATerminal.
"""

from typing import Callable, Sequence

from ttyprompt.domain.errors import (
    InputExhausted,
    InvalidOptions,
    NotATerminal,
    PromptError,
)
from ttyprompt.domain.value_objects import PromptRequest
from ttyprompt.orchestration.config import PromptConfig
from ttyprompt.orchestration.toolkit import create_toolkit
from ttyprompt.presentation.cli.input_collectors import InputCollector

__version__ = "0.1.0"

_default_collector: InputCollector | None = None


def _collector() -> InputCollector:
    """Default collector over sys.stdin/sys.stderr, built on first use."""
    global _default_collector
    if _default_collector is None:
        _default_collector = create_toolkit(PromptConfig.from_defaults())
    return _default_collector


def is_interactive() -> bool:
    """Return True if standard input is an interactive terminal."""
    return _collector().is_interactive()


def prompt_text(
    label: str,
    default: str | None = None,
    validator: Callable[[str], bool] | None = None,
) -> str:
    """Ask for a non-empty line of text."""
    return _collector().get_string(label, default=default, validator=validator)


def prompt_password(label: str) -> str:
    """Ask for a secret with echo disabled."""
    return _collector().get_password(label)


def prompt_confirm(label: str, default: bool = True) -> bool:
    """Ask a yes/no question."""
    return _collector().get_yes_no(label, default=default)


def prompt_multi_select(label: str, options: Sequence[str]) -> list[str]:
    """Let the user choose any subset of ``options``."""
    return _collector().get_selection(label, options)


__all__ = [
    "InputCollector",
    "InputExhausted",
    "InvalidOptions",
    "NotATerminal",
    "PromptConfig",
    "PromptError",
    "PromptRequest",
    "create_toolkit",
    "is_interactive",
    "prompt_confirm",
    "prompt_multi_select",
    "prompt_password",
    "prompt_text",
]
