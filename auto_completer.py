# auto_completer.py
# Prefix search over course identifiers for the search box.

from bisect import bisect_left
from typing import Iterable, List

__all__ = ["AutoCompleter"]


class AutoCompleter:
    def __init__(self, courses: Iterable[str]):
        # Sorted once so every prefix match is a contiguous run.
        self._courses = sorted({c.upper() for c in courses})

    def courses_with_prefix(self, prefix: str) -> List[str]:
        prefix = (prefix or "").upper()
        matches: List[str] = []
        for course in self._courses[bisect_left(self._courses, prefix):]:
            if not course.startswith(prefix):
                break
            matches.append(course)
        return matches
