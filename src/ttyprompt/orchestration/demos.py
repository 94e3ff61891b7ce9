"""
Demo Programs - One small program per prompt pattern.

Each demo asks its question through an InputCollector and prints the
result to standard output; prompts themselves go to the status stream.
"""

import sys
from typing import Callable, TextIO

from ttyprompt.presentation.cli.input_collectors import InputCollector
from ttyprompt.presentation.formatters.prompt_formatter import prompt_formatter

LANGUAGES = [
    "C",
    "Python",
    "Java",
    "C++",
    "C#",
    "Visual Basic",
    "JavaScript",
    "PHP",
    "Assembly Language",
    "SQL",
    "Groovy",
    "Classic Visual Basic",
    "Fortran",
    "R",
    "Ruby",
    "Swift",
    "MATLAB",
    "Go",
    "Prolog",
    "Perl",
]


def demo_interactive(collector: InputCollector, out: TextIO) -> None:
    """Report whether prompts can be used in this environment."""
    if collector.is_interactive():
        print("Terminal is interactive! You're good to use prompts!", file=out)
    else:
        print(
            "Terminal is not interactive! Consider using flags or environment variables!",
            file=out,
        )


def demo_text(collector: InputCollector, out: TextIO) -> None:
    """Ask for a name."""
    name = collector.get_string("What is your name?")
    print(f"Hello, {name}!", file=out)


def demo_password(collector: InputCollector, out: TextIO) -> None:
    """Ask for a password without echoing it."""
    password = collector.get_password("What is your password?")
    print(f'Oh, I see! Your password is "{password}"', file=out)


def demo_confirm(collector: InputCollector, out: TextIO) -> None:
    """Ask a yes/no question that defaults to yes."""
    if collector.get_yes_no("Do you want to continue?", default=True):
        print("Continuing.", file=out)
    else:
        print("Stopping.", file=out)


def demo_checkboxes(collector: InputCollector, out: TextIO) -> None:
    """Let the user tick their favourite languages."""
    answers = collector.get_selection(
        "Which are your favourite programming languages?",
        LANGUAGES,
    )
    print("Oh, I see! You like", prompt_formatter.selection_summary(answers), file=out)


# Registry mapping demo name → function
DEMOS: dict[str, Callable[[InputCollector, TextIO], None]] = {
    "interactive": demo_interactive,
    "text":        demo_text,
    "password":    demo_password,
    "confirm":     demo_confirm,
    "checkboxes":  demo_checkboxes,
}


def run_demo(name: str, collector: InputCollector, out: TextIO | None = None) -> None:
    """
    Run one demo by name.

    Args:
        name: Key in DEMOS
        collector: Prompt facade to ask through
        out: Result destination (sys.stdout if None)

    Raises:
        KeyError: If no demo has that name
    """
    DEMOS[name](collector, out if out is not None else sys.stdout)
