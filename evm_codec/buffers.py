"""
evm_codec.buffers
=================

Ordered concatenation of byte buffers.

`concat` builds a fresh `bytes` object and cannot fail on well-typed input.
`concat_into` streams the same buffers into a binary sink (file, socket
wrapper, BytesIO); whatever the sink raises propagates unchanged.
"""

from __future__ import annotations

from typing import BinaryIO, Iterable, Union

BytesLike = Union[bytes, bytearray, memoryview]


def _check(buf: object) -> None:
    if not isinstance(buf, (bytes, bytearray, memoryview)):
        raise TypeError(f"expected bytes-like buffer, got {type(buf).__name__}")


def concat(buffers: Iterable[BytesLike]) -> bytes:
    out = bytearray()
    for buf in buffers:
        _check(buf)
        out += buf
    return bytes(out)


def concat_into(sink: BinaryIO, buffers: Iterable[BytesLike]) -> int:
    """
    Write each buffer to `sink` in order and return the total byte count.

    A sink that accepts fewer bytes than offered (bounded or non-blocking
    streams) raises OSError rather than leaving a silently truncated payload.
    """
    total = 0
    for buf in buffers:
        _check(buf)
        n = sink.write(buf)
        want = memoryview(buf).nbytes
        if n is not None and n != want:
            raise OSError(f"short write: {n} of {want} bytes")
        total += want
    return total


__all__ = ["BytesLike", "concat", "concat_into"]
