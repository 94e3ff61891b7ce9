"""
Orchestration Layer - Configuration, wiring and demo programs.
"""

from .config import PromptConfig
from .demos import DEMOS, run_demo
from .toolkit import create_toolkit

__all__ = [
    "DEMOS",
    "PromptConfig",
    "create_toolkit",
    "run_demo",
]
