"""Recently used client names for form autocomplete.

Standalone helper mirroring the browser form's local history; the HTTP
service does not use it.
"""

MAX_HISTORY_SIZE = 5
MIN_CLIENT_NAME_LENGTH = 2


class ClientHistory:
    """Bounded most-recently-used list of client names, newest first.

    Names are compared case-insensitively; re-adding a known name moves it to
    the front with the new spelling.
    """

    def __init__(self, names: list[str] | None = None, max_size: int = MAX_HISTORY_SIZE) -> None:
        self._max_size = max_size
        self._names: list[str] = []
        for name in reversed(names or []):
            self.add(name)

    def add(self, client_name: str | None) -> None:
        if not client_name or len(client_name.strip()) < MIN_CLIENT_NAME_LENGTH:
            return
        name = client_name.strip()
        key = name.lower()
        self._names = [n for n in self._names if n.lower() != key]
        self._names.insert(0, name)
        del self._names[self._max_size:]

    def recent(self) -> list[str]:
        return list(self._names)

    def filter(self, query: str | None) -> list[str]:
        """Names containing ``query`` (case-insensitive); all names for a blank query."""
        if not query or not query.strip():
            return self.recent()
        needle = query.lower()
        return [n for n in self._names if needle in n.lower()]

    def clear(self) -> None:
        self._names = []
