"""Display sinks that receive a rendered text block."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class OutputSink(Protocol):
    """Protocol for anything that can display a rendered block."""

    def __call__(self, text: str) -> None:
        """Display the text."""
        ...


def stdout_sink(text: str) -> None:
    """Write the block to standard output."""
    sys.stdout.write(text)
    sys.stdout.flush()


class FileSink:
    """Writes each block to a file, replacing previous contents."""

    def __init__(self, path: str | Path, encoding: str = "utf-8"):
        self.path = Path(path)
        self.encoding = encoding

    def __call__(self, text: str) -> None:
        self.path.write_text(text, encoding=self.encoding)

    def __repr__(self) -> str:
        return f"FileSink({str(self.path)!r})"
