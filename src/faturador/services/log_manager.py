"""Log writers chosen through a factory method.

Each LogManager subclass decides which LogWriter receives its lines; the
line format is shared:

    [2025-12-30 15:57:03]-[info]: Pedido criado para o cliente: Fulano
"""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from datetime import datetime
from pathlib import Path
from typing import TextIO

from faturador.config import BRT


def _now_brt() -> datetime:
    return datetime.now(BRT)


class LogWriter(ABC):
    @abstractmethod
    def write(self, message: str) -> None: ...

    def close(self) -> None:
        """Release the underlying resource, if any."""


class StdoutLogWriter(LogWriter):
    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def write(self, message: str) -> None:
        stream = self._stream or sys.stdout
        stream.write(message)
        stream.flush()


class FileLogWriter(LogWriter):
    """Append-only writer; creates the file (and its directory) when missing."""

    def __init__(self, filepath: str | Path) -> None:
        path = Path(filepath)
        path.parent.mkdir(parents=True, exist_ok=True)
        self._file = path.open("a", encoding="utf-8")

    def write(self, message: str) -> None:
        self._file.write(message)

    def close(self) -> None:
        if not self._file.closed:
            self._file.close()

    def __enter__(self) -> FileLogWriter:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()


class LogManager(ABC):
    def log(self, severity: str, message: str) -> None:
        writer = self.make_log_writer()
        try:
            today = _now_brt().strftime("%Y-%m-%d %H:%M:%S")
            writer.write(f"[{today}]-[{severity}]: {message}\n")
        finally:
            writer.close()

    @abstractmethod
    def make_log_writer(self) -> LogWriter: ...


class StdoutLogManager(LogManager):
    def make_log_writer(self) -> LogWriter:
        return StdoutLogWriter()


class FileLogManager(LogManager):
    def __init__(self, filepath: str | Path) -> None:
        self.filepath = Path(filepath)

    def make_log_writer(self) -> LogWriter:
        return FileLogWriter(self.filepath)
