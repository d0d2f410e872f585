"""Forward-only little-endian reader over bytes or a binary stream."""

from __future__ import annotations

import io
import struct
from typing import BinaryIO

from bwfinspect.core.errors import TruncatedError

_U16 = struct.Struct("<H")
_U32 = struct.Struct("<I")
_I32 = struct.Struct("<i")
_I64 = struct.Struct("<q")

# Block size used when skipping over a non-seekable stream
_SKIP_BLOCK = 64 * 1024


class ByteCursor:
    """Sequential reader that never moves backwards.

    Accepts an in-memory buffer or any readable binary stream. Skips use
    ``seek`` when the stream supports it, so large audio payloads are never
    loaded into memory.
    """

    def __init__(self, source: bytes | bytearray | memoryview | BinaryIO):
        if isinstance(source, (bytes, bytearray, memoryview)):
            source = io.BytesIO(bytes(source))
        self._stream = source
        self._seekable = source.seekable()
        # One byte read ahead by is_at_end() on non-seekable streams
        self._lookahead = b""
        self.position = 0

    # ── Raw reads ────────────────────────────────────────────────────────

    def read(self, n: int) -> bytes:
        """Read up to n bytes; fewer only at end of stream."""
        parts = []
        remaining = n
        if self._lookahead and remaining > 0:
            parts.append(self._lookahead)
            remaining -= len(self._lookahead)
            self._lookahead = b""
        while remaining > 0:
            block = self._stream.read(remaining)
            if not block:
                break
            parts.append(block)
            remaining -= len(block)
        data = b"".join(parts)
        self.position += len(data)
        return data

    def read_exact(self, n: int) -> bytes:
        data = self.read(n)
        if len(data) < n:
            raise TruncatedError(n, len(data))
        return data

    def skip(self, n: int) -> None:
        """Advance n bytes without keeping them."""
        if n <= 0:
            return
        if self._seekable:
            self._skip_seek(n)
        else:
            self._skip_read(n)

    def _skip_seek(self, n: int) -> None:
        current = self._stream.tell()
        end = self._stream.seek(0, io.SEEK_END)
        available = end - current
        if available < n:
            self.position += available
            raise TruncatedError(n, available)
        self._stream.seek(current + n)
        self.position += n

    def _skip_read(self, n: int) -> None:
        skipped = 0
        while skipped < n:
            block = self.read(min(_SKIP_BLOCK, n - skipped))
            if not block:
                raise TruncatedError(n, skipped)
            skipped += len(block)

    # ── Typed reads ──────────────────────────────────────────────────────

    def read_u16_le(self) -> int:
        return _U16.unpack(self.read_exact(2))[0]

    def read_u32_le(self) -> int:
        return _U32.unpack(self.read_exact(4))[0]

    def read_i32_le(self) -> int:
        return _I32.unpack(self.read_exact(4))[0]

    def read_i64_le(self) -> int:
        return _I64.unpack(self.read_exact(8))[0]

    # ── State ────────────────────────────────────────────────────────────

    def is_at_end(self) -> bool:
        if self._lookahead:
            return False
        if self._seekable:
            current = self._stream.tell()
            end = self._stream.seek(0, io.SEEK_END)
            self._stream.seek(current)
            return current >= end
        self._lookahead = self._stream.read(1)
        return not self._lookahead
