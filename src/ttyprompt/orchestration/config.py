"""
Toolkit Configuration.

Centralized settings for building an InputCollector.
"""

from dataclasses import dataclass

SELECTORS = ("questionary", "numbered")


@dataclass(frozen=True)
class PromptConfig:
    """
    Central configuration for the prompt toolkit.

    All behaviour switches are configurable through this object; there
    are no environment variables or config files.
    """
    # Input mode: None detects from the input stream, True/False forces it
    interactive: bool | None = None

    # Multi-select widget: "questionary" (checkbox list) or "numbered"
    selector: str = "questionary"

    # Yes/no answers (compared case-insensitively)
    yes_tokens: tuple[str, ...] = ("y", "yes")
    no_tokens: tuple[str, ...] = ("n", "no")

    # Write a [WARNING] line before re-prompting
    show_retry_hints: bool = True

    def __post_init__(self):
        """Validate configuration after initialization."""
        if self.selector not in SELECTORS:
            raise ValueError(
                f"Unknown selector {self.selector!r} (expected one of: {', '.join(SELECTORS)})"
            )

        for tokens in (self.yes_tokens, self.no_tokens):
            if not tokens:
                raise ValueError("Yes/no token lists must not be empty")
            for token in tokens:
                if token != token.strip().lower() or not token:
                    raise ValueError(f"Yes/no tokens must be trimmed lower-case text: {token!r}")

        overlap = set(self.yes_tokens) & set(self.no_tokens)
        if overlap:
            raise ValueError(f"Tokens cannot mean both yes and no: {', '.join(sorted(overlap))}")

    @classmethod
    def from_defaults(cls) -> "PromptConfig":
        """
        Create configuration with default values.

        Returns:
            PromptConfig that detects the terminal and uses questionary
        """
        return cls(
            interactive=None,
            selector="questionary",
            yes_tokens=("y", "yes"),
            no_tokens=("n", "no"),
            show_retry_hints=True,
        )

    @classmethod
    def for_testing(cls) -> "PromptConfig":
        """
        Create configuration for testing environment.

        Returns:
            PromptConfig forced interactive with the line-based selector
        """
        return cls(
            interactive=True,
            selector="numbered",
            show_retry_hints=True,
        )
