"""RIFF/WAVE chunk scanner for Broadcast-WAV files.

Walks the top-level chunks of a WAVE file and collects the audio format
(fmt), Broadcast Extension (bext) and iXML metadata chunks. All other
chunks are skipped without being read.
"""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path
from typing import BinaryIO

from bwfinspect.core.byte_cursor import ByteCursor
from bwfinspect.core.constants import RIFF_ID, WAVE_ID
from bwfinspect.core.decoders import decode_bext, decode_format, decode_ixml
from bwfinspect.core.errors import (
    InvalidChunkSizeError,
    NotRiffError,
    NotWaveError,
)
from bwfinspect.core.models import (
    BroadcastExtension,
    ChunkHeader,
    ChunkKind,
    FormatInfo,
    IxmlPayload,
    ScanReport,
)


class WavScanner:
    """Scanner for a single RIFF/WAVE byte source."""

    def __init__(self, source: bytes | BinaryIO):
        self.cursor = ByteCursor(source)
        self.chunks: list[ChunkHeader] = []
        self._format_info: FormatInfo | None = None
        self._bext: BroadcastExtension | None = None
        self._ixml: IxmlPayload | None = None

    def scan(self) -> ScanReport:
        """Scan the source and return the collected metadata."""
        self._read_container_header()

        while not self.cursor.is_at_end():
            header = self._read_chunk_header()
            if header is None:
                break
            self.chunks.append(header)
            self._dispatch(header)

        return ScanReport(
            format_info=self._format_info,
            bext=self._bext,
            ixml=self._ixml,
        )

    # ── Container ────────────────────────────────────────────────────────

    def _read_container_header(self):
        if self.cursor.read(4) != RIFF_ID:
            raise NotRiffError()
        # Overall RIFF size, not checked against the real length
        self.cursor.skip(4)
        if self.cursor.read(4) != WAVE_ID:
            raise NotWaveError()

    def _read_chunk_header(self) -> ChunkHeader | None:
        """Read the next chunk header, or None at a short trailing id."""
        chunk_id = self.cursor.read(4)
        if len(chunk_id) < 4:
            return None

        size = self.cursor.read_i32_le()
        if size < 0:
            raise InvalidChunkSizeError(chunk_id, size)
        return ChunkHeader(chunk_id=chunk_id, size=size)

    # ── Chunks ───────────────────────────────────────────────────────────

    def _dispatch(self, header: ChunkHeader):
        """Decode or skip one chunk payload.

        A repeated fmt/bext/iXML chunk replaces the earlier one. Decoded
        chunks consume exactly their declared size; the pad byte of an
        odd-sized chunk is only skipped for chunks that are not decoded.
        """
        kind = header.kind
        if kind == ChunkKind.FORMAT:
            self._format_info = decode_format(self.cursor, header.size)
        elif kind == ChunkKind.BROADCAST:
            self._bext = decode_bext(self.cursor, header.size)
        elif kind == ChunkKind.IXML:
            self._ixml = decode_ixml(self.cursor, header.size)
        else:
            self.cursor.skip(header.size)
            if header.size % 2:
                self.cursor.skip(1)


def scan_source(source: bytes | BinaryIO) -> ScanReport:
    """Scan an in-memory buffer or an already opened binary stream."""
    return WavScanner(source).scan()


def scan_wav(wav_path: Path) -> ScanReport:
    """Convenience function to scan a WAV file on disk."""
    wav_path = Path(wav_path)
    with open(wav_path, "rb") as f:
        report = WavScanner(f).scan()
    return replace(report, file_path=wav_path, file_size=wav_path.stat().st_size)
