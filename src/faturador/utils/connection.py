"""SQLite storage handle.

The connection is created lazily, exactly once per LazyConnection, and the
handle is passed to whoever needs it. There is no module-level instance.
"""

from __future__ import annotations

import logging
import sqlite3
from pathlib import Path

logger = logging.getLogger(__name__)


def open_database(path: str | Path) -> sqlite3.Connection:
    """Open (creating if needed) the SQLite database at *path*."""
    if str(path) != ":memory:":
        Path(path).parent.mkdir(parents=True, exist_ok=True)
    logger.debug("Abrindo banco de dados: %s", path)
    return sqlite3.connect(str(path))


class LazyConnection:
    def __init__(self, path: str | Path) -> None:
        self.path = path
        self._conn: sqlite3.Connection | None = None

    @property
    def is_open(self) -> bool:
        return self._conn is not None

    def get(self) -> sqlite3.Connection:
        """Return the connection, opening it on first use."""
        if self._conn is None:
            self._conn = open_database(self.path)
        return self._conn

    def close(self) -> None:
        if self._conn is not None:
            self._conn.close()
            self._conn = None

    def __enter__(self) -> LazyConnection:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()
