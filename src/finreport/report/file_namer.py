"""Download filenames that are safe on any filesystem."""

import re
from datetime import datetime
from typing import Callable

# Characters rejected by Windows (a superset of the POSIX set), plus DEL and
# the C1 controls, which are not valid in an HTTP header value
INVALID_FILENAME_CHARS = re.compile(r'[<>:"/\\|?*\x00-\x1f\x7f-\x9f]+')

TIMESTAMP_FORMAT = "%Y%m%d_%H%M%S"
EXTENSION = ".docx"


class FileNamer:
    """Derives ``{prefix}_{client}_{year}_{YYYYMMDD_HHMMSS}.docx``.

    Names are unique to the second within one process. Nothing is written to
    disk, so no collision check is made.
    """

    def __init__(self, clock: Callable[[], datetime] = datetime.now, prefix: str = "Report") -> None:
        self._clock = clock
        self._prefix = prefix

    def name(self, client_name: str, year: int) -> str:
        safe_client = self.sanitize(client_name)
        timestamp = self._clock().strftime(TIMESTAMP_FORMAT)
        return f"{self._prefix}_{safe_client}_{year}_{timestamp}{EXTENSION}"

    @staticmethod
    def sanitize(value: str) -> str:
        """Split on runs of invalid characters and rejoin with underscores."""
        if not isinstance(value, str):
            raise TypeError(f"client_name must be str, got {type(value).__name__}")
        return "_".join(INVALID_FILENAME_CHARS.split(value))
