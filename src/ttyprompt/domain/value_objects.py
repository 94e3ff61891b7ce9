"""
Value Objects - Immutable, call-scoped prompt data.

Every value here lives for a single prompt call: it is built right
before the call and discarded once the call returns.
"""

from collections import Counter
from dataclasses import dataclass, field
from typing import Callable, Iterable, Sequence

from .errors import InvalidOptions


def non_empty(raw: str) -> bool:
    """Default validator: accept any non-empty answer."""
    return raw != ""


@dataclass(frozen=True)
class ReadResult:
    """
    One trimmed line read from an input stream.

    ``end_of_input`` is True only when the stream was already exhausted
    and nothing at all was read. An empty but terminated line is
    ``ReadResult("", end_of_input=False)``.
    """
    text: str
    end_of_input: bool = False

    @classmethod
    def exhausted(cls) -> "ReadResult":
        """Result for a read that hit end of stream before any character."""
        return cls(text="", end_of_input=True)

    def is_empty(self) -> bool:
        """Check if the user submitted nothing (but input is still open)."""
        return not self.end_of_input and self.text == ""


@dataclass(frozen=True)
class PromptRequest:
    """
    A single-field prompt: what to ask, what to fall back to, what to accept.

    Attributes:
        label: Text shown to the user
        default: Returned when the user submits an empty line (None = no default)
        validator: Predicate over the trimmed answer; rejected answers re-prompt
    """
    label: str
    default: str | None = None
    validator: Callable[[str], bool] = field(default=non_empty, compare=False)

    def __post_init__(self) -> None:
        """Validate the label type and that the default is itself acceptable."""
        if not isinstance(self.label, str):
            raise TypeError(f"Prompt label must be a string, got {type(self.label).__name__}")
        if self.default is not None and not self.accepts(self.default):
            raise ValueError(f"Default {self.default!r} for {self.label!r} fails its own validator")

    def display_label(self) -> str:
        """
        Label as written to the status stream, including the trailing space.

        Returns:
            ``"label "`` or ``"label (default: value) "`` when a default is set
        """
        if self.default is not None:
            return f"{self.label} (default: {self.default}) "
        return f"{self.label} "

    def accepts(self, raw: str) -> bool:
        """Check if a trimmed answer passes the validator."""
        return bool(self.validator(raw))


def find_duplicates(options: Iterable[str]) -> list[str]:
    """
    Return the entries that appear more than once, in first-seen order.

    Examples:
        >>> find_duplicates(["A", "B", "A"])
        ['A']
    """
    counts = Counter(options)
    return [option for option, count in counts.items() if count > 1]


@dataclass(frozen=True)
class SelectionSet:
    """
    Candidate options and the chosen subset, in option order.

    Construction enforces that options are distinct and that every chosen
    item is one of the options, appearing in the same relative order.
    """
    label: str
    options: tuple[str, ...]
    chosen: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        """Validate distinct options and an order-preserving chosen subset."""
        duplicates = find_duplicates(self.options)
        if duplicates:
            raise InvalidOptions(self.label, duplicates)

        positions = {option: index for index, option in enumerate(self.options)}
        previous = -1
        for item in self.chosen:
            if item not in positions:
                raise ValueError(f"Chosen item {item!r} is not one of the options")
            if positions[item] <= previous:
                raise ValueError("Chosen items must follow the original option order")
            previous = positions[item]

    @classmethod
    def from_reported(
        cls,
        label: str,
        options: Sequence[str],
        reported: Iterable[str],
    ) -> "SelectionSet":
        """
        Build a selection from whatever the collaborator reported.

        Reported labels are reordered to match ``options``; repeats collapse.
        Labels that are not options are dropped (see ``unknown_labels``).

        Args:
            label: Prompt label (used in errors)
            options: Original option sequence
            reported: Labels the collaborator says were chosen, any order

        Returns:
            SelectionSet with chosen items in option order
        """
        wanted = set(reported)
        chosen = tuple(option for option in options if option in wanted)
        return cls(label=label, options=tuple(options), chosen=chosen)

    @staticmethod
    def unknown_labels(options: Sequence[str], reported: Iterable[str]) -> list[str]:
        """Reported labels that do not match any option."""
        known = set(options)
        return [item for item in reported if item not in known]

    def as_list(self) -> list[str]:
        """Chosen items as a plain list."""
        return list(self.chosen)
