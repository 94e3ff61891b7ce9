"""
Toolkit Factory - Wires readers, services and widgets together.
"""

import sys
from typing import TextIO

from ttyprompt.business_logic.services.prompt_service import PromptService
from ttyprompt.business_logic.services.selection_service import (
    MultiSelectService,
    SelectionCollaborator,
)
from ttyprompt.data_access.readers.line_reader import LineReader
from ttyprompt.data_access.readers.masked_reader import MaskedReader
from ttyprompt.data_access.terminal.input_source import InputSourceResolver
from ttyprompt.data_access.terminal.terminal_control import (
    PosixTerminalControl,
    TerminalControl,
)
from ttyprompt.orchestration.config import PromptConfig
from ttyprompt.presentation.cli.input_collectors import InputCollector
from ttyprompt.presentation.cli.selectors import NumberedListSelector, QuestionarySelector
from ttyprompt.presentation.formatters.prompt_formatter import PromptFormatter


def create_toolkit(
    config: PromptConfig | None = None,
    input_stream: TextIO | None = None,
    status_stream: TextIO | None = None,
    terminal_control: TerminalControl | None = None,
    selector: SelectionCollaborator | None = None,
) -> InputCollector:
    """
    Factory function to create a fully configured InputCollector.

    Args:
        config: Toolkit configuration (defaults if None)
        input_stream: Answer source (sys.stdin if None)
        status_stream: Label/hint destination (sys.stderr if None)
        terminal_control: Terminal queries (POSIX implementation if None)
        selector: Multi-select widget (chosen from config.selector if None)

    Returns:
        Configured InputCollector
    """
    config = config or PromptConfig.from_defaults()
    input_stream = input_stream if input_stream is not None else sys.stdin
    status_stream = status_stream if status_stream is not None else sys.stderr
    terminal_control = terminal_control or PosixTerminalControl()

    formatter = PromptFormatter()
    line_reader = LineReader()

    resolver = InputSourceResolver(
        input_stream,
        terminal_control=terminal_control,
        override=config.interactive,
    )
    masked_reader = MaskedReader(
        status_stream,
        terminal_control=terminal_control,
        line_reader=line_reader,
    )

    prompt_service = PromptService(
        input_stream,
        status_stream,
        resolver=resolver,
        masked_reader=masked_reader,
        line_reader=line_reader,
        formatter=formatter,
        yes_tokens=config.yes_tokens,
        no_tokens=config.no_tokens,
        show_retry_hints=config.show_retry_hints,
    )

    if selector is None:
        if config.selector == "numbered":
            selector = NumberedListSelector(
                input_stream,
                status_stream,
                line_reader=line_reader,
                formatter=formatter,
            )
        else:
            selector = QuestionarySelector(
                status_stream=status_stream,
                input_stream=input_stream,
            )

    selection_service = MultiSelectService(
        resolver=resolver,
        collaborator=selector,
        status_stream=status_stream,
        formatter=formatter,
    )

    return InputCollector(
        resolver=resolver,
        prompt_service=prompt_service,
        selection_service=selection_service,
    )
