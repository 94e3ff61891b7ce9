"""
Range Selection Parser - Turns "1-4,7 all" style answers into indices.
"""

from typing import Callable


class RangeSelectionParser:
    """
    Parse a typed selection with support for ranges.

    Supports:
    - Individual numbers: "1 3 5" or "1,3,5"
    - Ranges: "1-4" expands to [1,2,3,4]
    - Combined: "1-4,7,9-11"
    - Special: "all" selects everything
    """

    @staticmethod
    def parse(
        user_input: str,
        max_value: int,
        on_warning: Callable[[str], None] | None = None,
    ) -> list[int]:
        """
        Parse user input and return the selected 1-based numbers.

        Invalid parts are reported through ``on_warning`` and skipped.

        Args:
            user_input: User's selection (e.g., "1-4,7,9-11")
            max_value: Highest valid number
            on_warning: Called with a message for each skipped part

        Returns:
            Sorted list of unique selected numbers

        Examples:
            >>> RangeSelectionParser.parse("1-4,7,9-11", 15)
            [1, 2, 3, 4, 7, 9, 10, 11]
        """
        warn = on_warning or (lambda message: None)

        user_input = user_input.strip().lower()
        if not user_input:
            return []

        if user_input == "all":
            return list(range(1, max_value + 1))

        selected: set[int] = set()

        for part in user_input.replace(" ", ",").split(","):
            part = part.strip()
            if not part:
                continue

            if "-" in part:
                start, _, end = part.partition("-")
                try:
                    start_num = int(start.strip())
                    end_num = int(end.strip())
                except ValueError:
                    warn(f"Invalid range format: {part}")
                    continue

                if start_num < 1 or end_num > max_value:
                    warn(f"Range {part} contains invalid numbers (valid: 1-{max_value})")
                    continue
                if start_num > end_num:
                    warn(f"Invalid range {part} (start > end)")
                    continue

                selected.update(range(start_num, end_num + 1))
                continue

            try:
                num = int(part)
            except ValueError:
                warn(f"Invalid number: {part}")
                continue

            if num < 1 or num > max_value:
                warn(f"Number {num} out of range (valid: 1-{max_value})")
                continue

            selected.add(num)

        return sorted(selected)
