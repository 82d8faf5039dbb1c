import re
from itertools import islice
from typing import Iterable, Iterator, List, Tuple

from ggrep.classes.LineScanner import LineScanner
from ggrep.classes.MatchResult import MatchResult


class Searcher:
    """Single-pass pattern search with trailing context lines.

    For every matching line the searcher emits the match and then the next
    ``context_lines - 1`` lines as they come, without testing them. Pattern
    testing resumes on the first line after that block.
    """

    def __init__(self, regex, context_lines: int = 1, logger=None) -> None:
        if context_lines < 1:
            raise ValueError(f"context_lines must be >= 1, got {context_lines}")
        self.regex = regex if isinstance(regex, re.Pattern) else re.compile(regex)
        self.context_lines = context_lines
        self.logger = logger

    def matches(self, text: str) -> bool:
        # Empty lines never match, even for patterns like "^$".
        if not text:
            return False
        return self.regex.search(text) is not None

    def search(self, lines: Iterable[Tuple[int, str]], display_name: str) -> Iterator[MatchResult]:
        lines = iter(lines)
        for number, text in lines:
            if not self.matches(text):
                continue
            yield MatchResult(display_name, number, text)
            for number, text in islice(lines, self.context_lines - 1):
                yield MatchResult(display_name, number, text)

    def scan_stream(self, stream, display_name: str, encoding: str = "utf-8") -> List[str]:
        """Scan one stream and return its formatted result lines.

        A read error keeps the results found so far; the error is reported
        through the logger instead of being raised.
        """
        scanner = LineScanner(stream, encoding=encoding)
        results = [result.format() for result in self.search(scanner, display_name)]
        if scanner.error is not None:
            self._report(f"{display_name}: read error after line {scanner.line_number}: {scanner.error}")
        return results

    def _report(self, msg: str) -> None:
        if self.logger is not None:
            self.logger.error(msg)

    def describe(self) -> str:
        return f"pattern={self.regex.pattern!r} context_lines={self.context_lines}"
