from typing import NamedTuple

RESULT_INDENT = "    "


class MatchResult(NamedTuple):
    """One reported line: a match or one of the context lines after it."""

    display_name: str
    line_number: int
    content: str

    def format(self) -> str:
        return f"{RESULT_INDENT}{self.display_name}:{self.line_number}:{self.content}"
