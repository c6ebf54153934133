"""Incremental newline framing for JSON-RPC over a byte stream.

:class:`LineFramer` turns arbitrarily split chunks into complete lines.
Between calls the buffer holds at most one partial line: everything up to
the last ``\\n`` is emitted, the remainder waits for the next chunk.
"""

from __future__ import annotations

import codecs
import json
import logging
from typing import Any

logger = logging.getLogger(__name__)


class LineFramer:
    """Split a stream of ``bytes`` or ``str`` chunks into lines."""

    def __init__(self, encoding: str = "utf-8") -> None:
        self._decoder = codecs.getincrementaldecoder(encoding)(errors="replace")
        self._buffer = ""

    @property
    def pending(self) -> str:
        """The buffered partial line (no newline seen yet)."""
        return self._buffer

    def feed(self, chunk: bytes | str) -> list[str]:
        """Append *chunk* and return every complete, non-blank line."""
        if isinstance(chunk, bytes):
            chunk = self._decoder.decode(chunk)
        self._buffer += chunk

        *complete, self._buffer = self._buffer.split("\n")
        return [line.rstrip("\r") for line in complete if line.strip()]

    def flush(self) -> list[str]:
        """Return the trailing partial line, if any, and reset the buffer."""
        rest = self._buffer + self._decoder.decode(b"", final=True)
        self._buffer = ""
        return [rest] if rest.strip() else []


class MessageFramer:
    """A :class:`LineFramer` that parses each line as one JSON document.

    Malformed lines and non-object documents are logged and dropped.
    """

    def __init__(self, encoding: str = "utf-8") -> None:
        self._lines = LineFramer(encoding)

    def feed(self, chunk: bytes | str) -> list[dict[str, Any]]:
        return self._parse(self._lines.feed(chunk))

    def flush(self) -> list[dict[str, Any]]:
        return self._parse(self._lines.flush())

    @staticmethod
    def _parse(lines: list[str]) -> list[dict[str, Any]]:
        messages: list[dict[str, Any]] = []
        for line in lines:
            try:
                message = json.loads(line)
            except json.JSONDecodeError:
                logger.warning("Dropping malformed frame: %.100s", line)
                continue
            if not isinstance(message, dict):
                logger.warning("Dropping non-object frame: %.100s", line)
                continue
            messages.append(message)
        return messages
