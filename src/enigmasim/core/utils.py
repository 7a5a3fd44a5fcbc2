from __future__ import annotations

from typing import Iterable, Iterator, TypeVar

T = TypeVar("T")


def chunked(seq: Iterable[T], size: int) -> Iterator[list[T]]:
    buf: list[T] = []
    for x in seq:
        buf.append(x)
        if len(buf) == size:
            yield buf
            buf = []
    if buf:
        yield buf


def group_blocks(text: str, size: int = 5) -> str:
    """Split text into space-separated blocks, e.g. "BDZGOW" -> "BDZGO W"."""
    if size <= 0:
        return text
    return " ".join("".join(block) for block in chunked(text, size))
