"""
Stream Decoding

Line framing and record decoding for newline-delimited JSON streams, as
emitted by Ollama's ``/api/generate`` with ``stream: true``.
"""

import codecs
import json
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

LINE_TERMINATOR = "\n"


class LineFramer:
    """
    Turns arbitrary network fragments into complete text lines.

    Fragments may be ``bytes`` or ``str``. Bytes are decoded incrementally so a
    multi-byte UTF-8 character split across two reads is kept intact. The
    unterminated tail of the stream is held back until more data arrives or
    :meth:`flush` is called at end of stream.
    """

    def __init__(self, encoding: str = "utf-8"):
        self._decoder = codecs.getincrementaldecoder(encoding)(errors="replace")
        self._buffer = ""

    @property
    def pending(self) -> str:
        """Unterminated data carried over to the next fragment"""
        return self._buffer

    def feed(self, fragment: bytes | str) -> Iterator[str]:
        """Append a fragment and yield every line it completes, terminator stripped."""
        if isinstance(fragment, bytes):
            fragment = self._decoder.decode(fragment)
        self._buffer += fragment
        return self._drain()

    def flush(self) -> Iterator[str]:
        """Yield the remaining unterminated data as a final line, if any."""
        self._buffer += self._decoder.decode(b"", final=True)
        lines = list(self._drain())
        if self._buffer:
            lines.append(self._buffer)
            self._buffer = ""
        return iter(lines)

    def _drain(self) -> Iterator[str]:
        # Buffer holds the remainder before any line is consumed
        *lines, self._buffer = self._buffer.split(LINE_TERMINATOR)
        return iter(lines)


@dataclass
class StreamChunk:
    """One decoded increment of generation progress"""

    response: str = ""
    done: bool = False
    eval_count: int | None = None  # Generated tokens, terminal chunk only
    eval_duration: int | None = None  # Generation time in nanoseconds, terminal chunk only

    @property
    def has_content(self) -> bool:
        return bool(self.response)


def _int_field(data: dict[str, Any], key: str) -> int | None:
    value = data.get(key)
    # bool is an int subclass; it is never a valid count or duration
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value


def decode_chunk(line: str) -> StreamChunk | None:
    """
    Parse a single stream line into a :class:`StreamChunk`.

    Returns ``None`` for blank keep-alive lines and anything that is not a JSON
    object. Fields with an unexpected type are treated as absent.
    """
    line = line.strip()
    if not line:
        return None

    try:
        data = json.loads(line)
    except (ValueError, RecursionError):
        # JSONDecodeError, oversized integer literals, pathological nesting
        return None

    if not isinstance(data, dict):
        return None

    response = data.get("response")
    done = data.get("done")

    return StreamChunk(
        response=response if isinstance(response, str) else "",
        done=done if isinstance(done, bool) else False,
        eval_count=_int_field(data, "eval_count"),
        eval_duration=_int_field(data, "eval_duration"),
    )
