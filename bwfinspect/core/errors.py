"""Structural errors raised while scanning a RIFF/WAVE container."""

from __future__ import annotations


class ScanError(Exception):
    """Base class for all errors that abort a scan."""


class NotRiffError(ScanError):
    def __init__(self):
        super().__init__("This does not appear to be a valid RIFF (WAV) file.")


class NotWaveError(ScanError):
    def __init__(self):
        super().__init__("This is not a WAVE file.")


class InvalidChunkSizeError(ScanError):
    """A chunk size field is negative or too small for its chunk type."""

    def __init__(self, chunk_id: bytes, size: int):
        self.chunk_id = chunk_id
        self.size = size
        super().__init__("Encountered an invalid chunk size.")


class TruncatedError(ScanError):
    """The stream ended in the middle of a field or chunk payload."""

    def __init__(self, expected: int, available: int):
        self.expected = expected
        self.available = available
        super().__init__(
            f"Unexpected end of file: needed {expected} bytes, got {available}."
        )
