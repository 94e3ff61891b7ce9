"""
Prompt Formatter - Renders prompt labels, hints and status lines.

All of this text is meant for the status stream (stderr); nothing here
writes to standard output.
"""

from ttyprompt.domain.enums import StatusTag


class PromptFormatter:
    """
    Formats prompt text for console display.

    Keeps wording in one place so prompts and diagnostics read the same
    across every primitive.
    """

    def label(self, label: str) -> str:
        """Plain prompt label followed by one space."""
        return f"{label} "

    def confirm_hint(self, default: bool) -> str:
        """Y/N hint with the default side capitalized."""
        return "[Y/n]" if default else "[y/N]"

    def confirm_label(self, label: str, default: bool) -> str:
        """
        Label for a yes/no prompt.

        Examples:
            >>> PromptFormatter().confirm_label("Continue?", True)
            'Continue? [Y/n] '
        """
        return f"{label} {self.confirm_hint(default)} "

    def status(self, tag: StatusTag, message: str) -> str:
        """Tagged status line, e.g. ``[WARNING] Input is required.``"""
        return f"[{tag.value}] {message}"

    def numbered_options(self, options: list[str]) -> str:
        """
        Numbered option list used by the line-based selector.

        Returns:
            One ``  [n] option`` line per option
        """
        return "\n".join(f"  [{i}] {option}" for i, option in enumerate(options, 1))

    def selection_summary(self, chosen: list[str]) -> str:
        """Chosen items joined for display."""
        return ", ".join(chosen)


# Convenience instance for easy import
prompt_formatter = PromptFormatter()
