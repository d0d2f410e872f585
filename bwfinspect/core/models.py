"""Dataclasses for all BWF Inspector data structures."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from bwfinspect.core.constants import (
    BEXT_CHUNK_ID,
    FMT_CHUNK_ID,
    IXML_CHUNK_ID,
    WAVE_FORMAT_PCM,
)


class ChunkKind(Enum):
    FORMAT = "fmt"
    BROADCAST = "bext"
    IXML = "ixml"
    OTHER = "other"

    @classmethod
    def from_id(cls, chunk_id: bytes) -> ChunkKind:
        return _KIND_BY_ID.get(chunk_id, cls.OTHER)


_KIND_BY_ID = {
    FMT_CHUNK_ID: ChunkKind.FORMAT,
    BEXT_CHUNK_ID: ChunkKind.BROADCAST,
    IXML_CHUNK_ID: ChunkKind.IXML,
}


class IxmlKind(Enum):
    STRUCTURED = "structured"
    RAW_FALLBACK = "raw_fallback"


@dataclass(frozen=True)
class ChunkHeader:
    chunk_id: bytes
    # Payload length, not counting the pad byte of odd-sized chunks
    size: int

    @property
    def kind(self) -> ChunkKind:
        return ChunkKind.from_id(self.chunk_id)


@dataclass(frozen=True)
class FormatInfo:
    audio_format: int
    channels: int
    sample_rate: int
    bits_per_sample: int

    @property
    def is_pcm(self) -> bool:
        return self.audio_format == WAVE_FORMAT_PCM

    @property
    def format_label(self) -> str:
        if self.is_pcm:
            return "PCM"
        return f"Compressed (Format ID: {self.audio_format})"


@dataclass(frozen=True)
class BroadcastExtension:
    description: str = ""
    originator: str = ""
    originator_reference: str = ""
    origination_date: str = ""
    origination_time: str = ""
    # Samples since local midnight
    time_reference: int = 0


@dataclass(frozen=True)
class IxmlPayload:
    kind: IxmlKind
    text: str

    @property
    def is_structured(self) -> bool:
        return self.kind == IxmlKind.STRUCTURED


@dataclass(frozen=True)
class ScanReport:
    format_info: FormatInfo | None = None
    bext: BroadcastExtension | None = None
    ixml: IxmlPayload | None = None
    file_path: Path | None = None
    file_size: int = 0

    @property
    def has_format(self) -> bool:
        return self.format_info is not None

    @property
    def has_bext(self) -> bool:
        return self.bext is not None

    @property
    def has_ixml(self) -> bool:
        return self.ixml is not None
