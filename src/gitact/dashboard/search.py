"""Repository search: a modal single-line input and the filter it applies."""

from gitact.models import RepositoryRecord

SEARCH_CHAR_LIMIT = 50


def filter_repositories(
    repos: list[RepositoryRecord], query: str
) -> list[RepositoryRecord]:
    """Repositories whose name or description contains ``query``, case-insensitively.

    An empty query returns every repository in its original order.
    """
    if not query:
        return list(repos)
    needle = query.lower()
    return [
        r for r in repos
        if needle in r.name.lower() or needle in r.description.lower()
    ]


class SearchFilter:
    """Text-input sub-state of the repository list.

    While ``active`` every key goes to the input buffer. ``query`` is the
    last submitted text and stays applied to the list until cancelled.
    """

    def __init__(self, char_limit: int = SEARCH_CHAR_LIMIT) -> None:
        self.char_limit = char_limit
        self.active = False
        self.buffer = ""
        self.query = ""

    def begin(self) -> None:
        self.active = True

    def type(self, character: str) -> None:
        if len(self.buffer) + len(character) <= self.char_limit:
            self.buffer += character

    def backspace(self) -> None:
        self.buffer = self.buffer[:-1]

    def submit(self) -> str:
        self.active = False
        self.query = self.buffer
        return self.query

    def cancel(self) -> None:
        self.active = False
        self.buffer = ""
        self.query = ""

    def reset(self) -> None:
        """Forget the applied query without touching the input state."""
        self.query = ""
        self.buffer = ""
