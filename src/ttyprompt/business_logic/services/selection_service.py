"""
Selection Service - Multi-select prompt adapter.

Rendering and keyboard handling belong to an external collaborator.
This service only validates the options, guards against
non-interactive input, and puts the reported choices back into the
original option order.
"""

from typing import Protocol, Sequence, TextIO

from ttyprompt.data_access.terminal.input_source import InputSourceResolver
from ttyprompt.domain.enums import StatusTag
from ttyprompt.domain.errors import InvalidOptions, NotATerminal
from ttyprompt.domain.value_objects import SelectionSet, find_duplicates
from ttyprompt.presentation.formatters.prompt_formatter import PromptFormatter


class SelectionCollaborator(Protocol):
    """Renders a list of options and reports which ones were chosen."""

    def select(self, label: str, options: list[str]) -> Sequence[str] | None:
        """
        Show ``options`` under ``label`` and return the chosen labels.

        Returns:
            Chosen labels in any order, or None if the user cancelled
        """
        ...


class MultiSelectService:
    """Service for multi-select prompts."""

    def __init__(
        self,
        resolver: InputSourceResolver,
        collaborator: SelectionCollaborator,
        status_stream: TextIO,
        formatter: PromptFormatter | None = None,
    ):
        """
        Initialize service.

        Args:
            resolver: Input source resolver for standard input
            collaborator: Interactive list widget
            status_stream: Where warnings go (stderr)
            formatter: Status formatter (creates default if None)
        """
        self._resolver = resolver
        self._collaborator = collaborator
        self._status = status_stream
        self._formatter = formatter or PromptFormatter()

    def prompt_multi_select(self, label: str, options: Sequence[str]) -> list[str]:
        """
        Let the user pick any subset of ``options``.

        Args:
            label: Question shown to the user
            options: Distinct candidate labels, in display order

        Returns:
            Chosen options, in the same relative order as ``options``

        Raises:
            InvalidOptions: If ``options`` contains duplicates
            NotATerminal: If standard input is not an interactive terminal
            KeyboardInterrupt: If the user cancelled the selection
        """
        options = list(options)
        duplicates = find_duplicates(options)
        if duplicates:
            raise InvalidOptions(label, duplicates)

        if not self._resolver.is_interactive():
            raise NotATerminal(label, operation="show a selection list")

        reported = self._collaborator.select(label, list(options))
        if reported is None:
            raise KeyboardInterrupt(f"Selection cancelled: {label}")

        reported = list(reported)
        for unknown in SelectionSet.unknown_labels(options, reported):
            self._status.write(
                self._formatter.status(
                    StatusTag.WARNING, f"Ignoring unknown selection {unknown!r}"
                ) + "\n"
            )

        return SelectionSet.from_reported(label, options, reported).as_list()
