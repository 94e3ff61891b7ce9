"""
CLI Input Collection - Prompt facade and selection widgets.
"""

from .input_collectors import InputCollector
from .range_selection import RangeSelectionParser
from .selectors import NumberedListSelector, QuestionarySelector

__all__ = [
    "InputCollector",
    "NumberedListSelector",
    "QuestionarySelector",
    "RangeSelectionParser",
]
