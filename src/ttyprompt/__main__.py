"""
Entry point for the prompt demos.

Usage:
    python -m ttyprompt interactive            # Is stdin a terminal?
    python -m ttyprompt text                   # Text prompt
    python -m ttyprompt password               # Hidden input
    python -m ttyprompt confirm                # Yes/no
    python -m ttyprompt checkboxes             # Multi-select
    python -m ttyprompt checkboxes --numbered  # Multi-select without the widget
"""

import argparse
import sys

from ttyprompt.domain.enums import StatusTag
from ttyprompt.domain.errors import PromptError
from ttyprompt.orchestration import DEMOS, PromptConfig, create_toolkit, run_demo
from ttyprompt.presentation.formatters import prompt_formatter


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""

    parser = argparse.ArgumentParser(
        prog="ttyprompt-demo",
        description="Interactive prompt demos",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Prompts are written to stderr and answers to stdout, so
`ttyprompt-demo text > answer.txt` still shows the question.
        """
    )

    parser.add_argument(
        "demo",
        choices=sorted(DEMOS),
        help="Which demo to run"
    )

    parser.add_argument(
        "--numbered",
        action="store_true",
        help="Use the line-based numbered list instead of the checkbox widget"
    )

    args = parser.parse_args(argv)

    try:
        config = PromptConfig.from_defaults()
        if args.numbered:
            config = PromptConfig(
                interactive=config.interactive,
                selector="numbered",
                yes_tokens=config.yes_tokens,
                no_tokens=config.no_tokens,
                show_retry_hints=config.show_retry_hints,
            )

        collector = create_toolkit(config)
        run_demo(args.demo, collector, sys.stdout)
        return 0

    except KeyboardInterrupt:
        print(
            "\n" + prompt_formatter.status(StatusTag.CANCELLED, "Interrupted by user"),
            file=sys.stderr,
        )
        return 1

    except PromptError as e:
        print(prompt_formatter.status(StatusTag.ERROR, str(e)), file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
