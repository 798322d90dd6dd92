"""Request body variants.

A body is narrowed once, when a request record is built, to one of:

- EmptyBody: no body.
- BufferedBody: bytes held in memory, safe to resend on any redirect hop.
- StreamingBody: a one-shot (async) iterator of chunks; it is consumed by
  the first hop and can't follow a redirect that keeps the body.
"""

from collections.abc import AsyncIterator, Iterator
from dataclasses import dataclass
from typing import Any, TypeAlias


@dataclass(frozen=True)
class EmptyBody:
    """No request body."""

    replayable = True

    def content(self) -> None:
        return None


@dataclass(frozen=True)
class BufferedBody:
    """In-memory request body."""

    data: bytes

    replayable = True

    def content(self) -> bytes:
        return self.data

    def __len__(self) -> int:
        return len(self.data)


@dataclass(frozen=True)
class StreamingBody:
    """One-shot streamed request body."""

    stream: Iterator[bytes] | AsyncIterator[bytes]

    replayable = False

    def content(self) -> Iterator[bytes] | AsyncIterator[bytes]:
        return self.stream


RequestBody: TypeAlias = EmptyBody | BufferedBody | StreamingBody

EMPTY_BODY = EmptyBody()


def to_body_variant(value: Any) -> RequestBody:
    """Narrow caller-supplied content to one of the body variants.

    Args:
        value: None, a variant, bytes/bytearray/str, a list or tuple of
            byte chunks (buffered), or an (async) iterator of byte chunks
            (one-shot stream).

    Returns:
        The matching body variant.

    Raises:
        TypeError: If the value is not a recognised body shape.
    """
    if value is None:
        return EMPTY_BODY
    if isinstance(value, (EmptyBody, BufferedBody, StreamingBody)):
        return value
    if isinstance(value, (bytes, bytearray, memoryview)):
        return BufferedBody(bytes(value))
    if isinstance(value, str):
        return BufferedBody(value.encode("utf-8"))
    if isinstance(value, (list, tuple)) and all(
        isinstance(chunk, (bytes, bytearray, memoryview)) for chunk in value
    ):
        return BufferedBody(b"".join(value))
    if isinstance(value, (AsyncIterator, Iterator)):
        return StreamingBody(value)
    msg = f"Unsupported body type: {type(value).__name__}"
    raise TypeError(msg)
