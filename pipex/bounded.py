"""Size-bounded string copy and concatenation with truncation reporting."""

from __future__ import annotations

from typing import NamedTuple


class BoundedResult(NamedTuple):
    """The resulting text and the length the full result would have had."""

    text: str
    wanted: int

    @property
    def truncated(self) -> bool:
        return self.wanted > len(self.text)


def bounded_copy(src: str, size: int) -> BoundedResult:
    """Copy ``src`` into a buffer of ``size`` cells, one kept for the terminator.

    ``wanted`` is always ``len(src)``; with ``size`` 0 nothing is copied.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    if size == 0:
        return BoundedResult("", len(src))
    return BoundedResult(src[: size - 1], len(src))


def bounded_concat(dst: str, src: str, size: int) -> BoundedResult:
    """Append ``src`` to ``dst`` within a buffer of ``size`` cells.

    When ``dst`` already fills the buffer it is left unchanged and ``wanted``
    is ``size + len(src)``; otherwise ``wanted`` is ``len(dst) + len(src)``.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    used = min(len(dst), size)
    if used >= size:
        return BoundedResult(dst, used + len(src))
    room = size - used - 1
    return BoundedResult(dst + src[:room], used + len(src))