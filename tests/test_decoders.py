"""Tests for the fmt, bext and iXML chunk decoders."""

import struct
import xml.etree.ElementTree as ET

import pytest

from bwfinspect.core.byte_cursor import ByteCursor
from bwfinspect.core.decoders import decode_bext, decode_format, decode_ixml
from bwfinspect.core.errors import InvalidChunkSizeError, TruncatedError
from bwfinspect.core.models import FormatInfo, IxmlKind, IxmlPayload


def _fmt_payload(audio_format=1, channels=2, rate=44100, bits=16, extra=b""):
    block_align = channels * bits // 8
    return struct.pack(
        "<HHIIHH", audio_format, channels, rate, rate * block_align, block_align, bits
    ) + extra


def _bext_payload(
    description="",
    originator="",
    reference="",
    date="",
    time="",
    time_reference=0,
    extra=b"",
):
    return (
        description.encode().ljust(256, b"\x00")
        + originator.encode().ljust(32, b"\x00")
        + reference.encode().ljust(32, b"\x00")
        + date.encode().ljust(10, b"\x00")
        + time.encode().ljust(8, b"\x00")
        + struct.pack("<q", time_reference)
        + extra
    )


# ── fmt ──────────────────────────────────────────────────────────────────

def test_decode_format_pcm():
    """A 16-byte fmt chunk should decode exactly and consume 16 bytes."""
    cursor = ByteCursor(_fmt_payload() + b"next")
    info = decode_format(cursor, 16)
    assert info.audio_format == 1
    assert info.channels == 2
    assert info.sample_rate == 44100
    assert info.bits_per_sample == 16
    assert info.is_pcm
    assert info.format_label == "PCM"
    assert cursor.position == 16


def test_decode_format_skips_extension():
    """Extra fmt bytes should be skipped to the chunk boundary."""
    cursor = ByteCursor(_fmt_payload(audio_format=3, bits=32, extra=b"\x00\x00") + b"next")
    info = decode_format(cursor, 18)
    assert cursor.position == 18
    assert cursor.read_exact(4) == b"next"
    assert not info.is_pcm
    assert info.format_label == "Compressed (Format ID: 3)"


def test_decode_format_extensible_code():
    """Format codes above 0x7FFF should be read unsigned."""
    cursor = ByteCursor(_fmt_payload(audio_format=0xFFFE, extra=b"\x00" * 24))
    info = decode_format(cursor, 40)
    assert info.audio_format == 0xFFFE


def test_format_info_fields_required():
    """A FormatInfo is always built complete."""
    with pytest.raises(TypeError):
        FormatInfo()
    with pytest.raises(TypeError):
        IxmlPayload()


def test_decode_format_too_short():
    """A fmt chunk smaller than its fixed fields is a structural error."""
    cursor = ByteCursor(_fmt_payload())
    with pytest.raises(InvalidChunkSizeError) as exc:
        decode_format(cursor, 14)
    assert exc.value.chunk_id == b"fmt "
    assert cursor.position == 0


# ── bext ─────────────────────────────────────────────────────────────────

def test_decode_bext_trims_padding():
    """Text fields should come back without their NUL padding."""
    payload = _bext_payload(
        description="Scene 12 take 3",
        originator="Sound Devices",
        reference="USSDVAB1234567",
        date="2024-03-18",
        time="14:05:33",
        time_reference=2_540_160_000,
    )
    cursor = ByteCursor(payload)
    bext = decode_bext(cursor, len(payload))
    assert bext.description == "Scene 12 take 3"
    assert bext.originator == "Sound Devices"
    assert bext.originator_reference == "USSDVAB1234567"
    assert bext.origination_date == "2024-03-18"
    assert bext.origination_time == "14:05:33"
    assert bext.time_reference == 2_540_160_000
    assert cursor.is_at_end()


def test_decode_bext_negative_time_reference():
    """The time reference is a signed 64-bit value."""
    payload = _bext_payload(time_reference=-48000)
    bext = decode_bext(ByteCursor(payload), 346)
    assert bext.time_reference == -48000


def test_decode_bext_strips_whitespace_and_utf8():
    """Surrounding spaces should be trimmed and UTF-8 decoded."""
    payload = _bext_payload(description="  Grüße aus Köln  ", originator="Zoom F8 ")
    bext = decode_bext(ByteCursor(payload), 346)
    assert bext.description == "Grüße aus Köln"
    assert bext.originator == "Zoom F8"


def test_decode_bext_skips_coding_history():
    """Version, UMID and coding history should be skipped, not decoded."""
    history = b"A=PCM,F=48000,W=24,M=stereo\r\n\x00"
    extra = b"\x02\x00" + b"\x00" * 64 + b"\x00" * 10 + b"\x00" * 180 + history
    payload = _bext_payload(description="desc", extra=extra)
    cursor = ByteCursor(payload + b"data")
    bext = decode_bext(cursor, len(payload))
    assert bext.description == "desc"
    assert cursor.position == len(payload)
    assert cursor.read_exact(4) == b"data"


def test_decode_bext_too_short():
    """A bext chunk smaller than 346 bytes must not read past its end."""
    cursor = ByteCursor(_bext_payload())
    with pytest.raises(InvalidChunkSizeError):
        decode_bext(cursor, 300)
    assert cursor.position == 0


def test_decode_bext_truncated_stream():
    payload = _bext_payload()[:200]
    with pytest.raises(TruncatedError):
        decode_bext(ByteCursor(payload), 346)


# ── iXML ─────────────────────────────────────────────────────────────────

IXML_DOC = (
    '<?xml version="1.0" encoding="UTF-8"?>'
    "<BWFXML><IXML_VERSION>1.61</IXML_VERSION><PROJECT>Night Shoot</PROJECT>"
    "<SCENE>12A</SCENE><TAKE>3</TAKE><SPEED><TIMECODE_RATE>25/1</TIMECODE_RATE>"
    "</SPEED></BWFXML>"
)


def test_decode_ixml_structured():
    """Well-formed XML should be re-serialized into an equivalent document."""
    raw = IXML_DOC.encode()
    cursor = ByteCursor(raw)
    payload = decode_ixml(cursor, len(raw))
    assert payload.kind == IxmlKind.STRUCTURED
    assert payload.is_structured
    assert cursor.is_at_end()

    root = ET.fromstring(payload.text)
    assert root.tag == "BWFXML"
    assert root.findtext("SCENE") == "12A"
    assert root.findtext("SPEED/TIMECODE_RATE") == "25/1"
    assert ET.canonicalize(payload.text, strip_text=True) == ET.canonicalize(
        IXML_DOC, strip_text=True
    )


def test_decode_ixml_is_indented():
    raw = b"<BWFXML><SCENE>1</SCENE></BWFXML>"
    payload = decode_ixml(ByteCursor(raw), len(raw))
    assert payload.text == "<BWFXML>\n  <SCENE>1</SCENE>\n</BWFXML>"


def test_decode_ixml_trailing_nul_padding():
    """NUL padding after the document should not break parsing."""
    raw = b"<BWFXML><TAKE>7</TAKE></BWFXML>\x00\x00\x00"
    payload = decode_ixml(ByteCursor(raw), len(raw))
    assert payload.kind == IxmlKind.STRUCTURED
    assert ET.fromstring(payload.text).findtext("TAKE") == "7"


def test_decode_ixml_raw_fallback():
    """Text that is not XML should be returned verbatim."""
    raw = b"not xml at all"
    payload = decode_ixml(ByteCursor(raw), len(raw))
    assert payload.kind == IxmlKind.RAW_FALLBACK
    assert payload.text == "not xml at all"


def test_decode_ixml_entities_rejected():
    """Entity declarations should fall back to raw text instead of expanding."""
    raw = b'<!DOCTYPE x [<!ENTITY a "boom">]><x>&a;</x>'
    payload = decode_ixml(ByteCursor(raw), len(raw))
    assert payload.kind == IxmlKind.RAW_FALLBACK
    assert payload.text == raw.decode()


def test_decode_ixml_invalid_utf8_replaced():
    """Invalid UTF-8 should be replaced rather than failing the scan."""
    raw = b"abc\xff\xfe"
    payload = decode_ixml(ByteCursor(raw), len(raw))
    assert payload.kind == IxmlKind.RAW_FALLBACK
    assert payload.text.startswith("abc")
    assert "\ufffd" in payload.text


def test_decode_ixml_deep_nesting_falls_back():
    """XML too deeply nested to re-serialize should come back as raw text."""
    raw = b"<a>" * 5000 + b"</a>" * 5000
    cursor = ByteCursor(raw)
    payload = decode_ixml(cursor, len(raw))
    assert payload.kind == IxmlKind.RAW_FALLBACK
    assert payload.text == raw.decode()
    assert cursor.is_at_end()


def test_decode_ixml_truncated():
    with pytest.raises(TruncatedError):
        decode_ixml(ByteCursor(b"<BWFXML/>"), 50)
