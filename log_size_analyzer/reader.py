"""Generator-based line source with per-line decode failures."""

from dataclasses import dataclass
from typing import BinaryIO, Generator


@dataclass(frozen=True)
class LineReadFailure:
    reason: str


def _strip_terminator(raw: bytes) -> bytes:
    if raw.endswith(b"\n"):
        raw = raw[:-1]
        if raw.endswith(b"\r"):
            raw = raw[:-1]
    return raw


def read_lines(
    stream: BinaryIO, encoding: str = "utf-8"
) -> Generator[str | LineReadFailure, None, None]:
    """Yield each line of a binary stream, decoded and without its terminator.

    A line that fails to decode is yielded as a LineReadFailure instead, so
    one bad line does not end the stream.
    """
    for raw in stream:
        try:
            yield _strip_terminator(raw).decode(encoding)
        except UnicodeDecodeError as e:
            yield LineReadFailure(reason=str(e))
