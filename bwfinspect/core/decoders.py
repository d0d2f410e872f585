"""Decoders for the fmt, bext and iXML chunks.

Each decoder borrows the scanner's cursor for one call and consumes exactly
the declared payload size, skipping whatever it does not decode.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET

import defusedxml.ElementTree as DET
from defusedxml import DefusedXmlException

from bwfinspect.core.byte_cursor import ByteCursor
from bwfinspect.core.constants import (
    BEXT_CHUNK_ID,
    BEXT_FIXED_SIZE,
    BEXT_TEXT_FIELDS,
    FMT_CHUNK_ID,
    FMT_FIXED_SIZE,
)
from bwfinspect.core.errors import InvalidChunkSizeError
from bwfinspect.core.models import (
    BroadcastExtension,
    FormatInfo,
    IxmlKind,
    IxmlPayload,
)


def decode_format(cursor: ByteCursor, size: int) -> FormatInfo:
    """Decode a fmt chunk payload of the given declared size."""
    if size < FMT_FIXED_SIZE:
        raise InvalidChunkSizeError(FMT_CHUNK_ID, size)

    audio_format = cursor.read_u16_le()
    channels = cursor.read_u16_le()
    sample_rate = cursor.read_u32_le()
    cursor.skip(4)  # byte rate
    cursor.skip(2)  # block align
    bits_per_sample = cursor.read_u16_le()

    # WAVE_FORMAT_EXTENSIBLE and friends append cbSize and more
    cursor.skip(size - FMT_FIXED_SIZE)

    return FormatInfo(
        audio_format=audio_format,
        channels=channels,
        sample_rate=sample_rate,
        bits_per_sample=bits_per_sample,
    )


def decode_bext(cursor: ByteCursor, size: int) -> BroadcastExtension:
    """Decode the fixed part of a Broadcast Extension chunk.

    Version, UMID, loudness values and coding history are skipped.
    """
    if size < BEXT_FIXED_SIZE:
        raise InvalidChunkSizeError(BEXT_CHUNK_ID, size)

    fields = {
        name: _decode_text_field(cursor.read_exact(width))
        for name, width in BEXT_TEXT_FIELDS
    }
    time_reference = cursor.read_i64_le()
    cursor.skip(size - BEXT_FIXED_SIZE)

    return BroadcastExtension(time_reference=time_reference, **fields)


def decode_ixml(cursor: ByteCursor, size: int) -> IxmlPayload:
    """Read an iXML payload and pretty-print it if it is well-formed XML."""
    raw = cursor.read_exact(size)
    text = raw.decode("utf-8", errors="replace").rstrip("\x00")

    try:
        root = DET.fromstring(text)
    except (ET.ParseError, DefusedXmlException):
        return IxmlPayload(kind=IxmlKind.RAW_FALLBACK, text=text)

    try:
        ET.indent(root)
        pretty = ET.tostring(root, encoding="unicode")
    except RecursionError:
        # Nesting deeper than the interpreter can serialize
        return IxmlPayload(kind=IxmlKind.RAW_FALLBACK, text=text)
    return IxmlPayload(kind=IxmlKind.STRUCTURED, text=pretty)


def _decode_text_field(raw: bytes) -> str:
    """Decode a fixed-width bext text field, dropping NUL padding."""
    return raw.split(b"\x00", 1)[0].decode("utf-8", errors="replace").strip()
