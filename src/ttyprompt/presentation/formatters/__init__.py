"""
Formatters - Text rendering for prompts and status lines.
"""

from .prompt_formatter import PromptFormatter, prompt_formatter

__all__ = [
    "PromptFormatter",
    "prompt_formatter",
]
