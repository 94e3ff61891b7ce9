"""
CLI Input Collectors - The caller-facing prompt API.

InputCollector gathers the prompt and selection services behind one
object so calling code never touches readers, resolvers or widgets
directly, and tests can swap any of them.
"""

from typing import Callable, Sequence

from ttyprompt.business_logic.services.prompt_service import PromptService
from ttyprompt.business_logic.services.selection_service import MultiSelectService
from ttyprompt.data_access.terminal.input_source import InputSourceResolver
from ttyprompt.domain.value_objects import PromptRequest


class InputCollector:
    """
    Collects user input from the command line.

    Every method blocks until it has a valid answer or raises a
    PromptError subclass (InputExhausted, NotATerminal, InvalidOptions).
    """

    def __init__(
        self,
        resolver: InputSourceResolver,
        prompt_service: PromptService,
        selection_service: MultiSelectService,
    ):
        """
        Initialize collector.

        Args:
            resolver: Input source resolver for standard input
            prompt_service: Text, password and confirm prompts
            selection_service: Multi-select prompt
        """
        self._resolver = resolver
        self._prompt_service = prompt_service
        self._selection_service = selection_service

    def is_interactive(self) -> bool:
        """Check if standard input is an interactive terminal."""
        return self._resolver.is_interactive()

    def ask(self, request: PromptRequest) -> str:
        """Prompt for a free-form request (label, default, validator)."""
        return self._prompt_service.ask(request)

    def get_string(
        self,
        prompt: str,
        default: str | None = None,
        validator: Callable[[str], bool] | None = None,
    ) -> str:
        """
        Get a non-empty line of text.

        Args:
            prompt: Question to ask
            default: Value returned when the user just presses Enter
            validator: Extra check; rejected answers re-prompt

        Returns:
            Trimmed answer or the default
        """
        return self._prompt_service.prompt_text(prompt, default=default, validator=validator)

    def get_password(self, prompt: str) -> str:
        """Get a non-empty secret typed with echo off."""
        return self._prompt_service.prompt_password(prompt)

    def get_yes_no(self, prompt: str, default: bool = True) -> bool:
        """
        Get yes/no response from user.

        Args:
            prompt: Question to ask user
            default: Answer when the user just presses Enter

        Returns:
            True for yes, False for no
        """
        return self._prompt_service.prompt_confirm(prompt, default=default)

    def get_selection(self, prompt: str, options: Sequence[str]) -> list[str]:
        """
        Let the user tick any subset of ``options``.

        Returns:
            Chosen options in their original order
        """
        return self._selection_service.prompt_multi_select(prompt, options)
