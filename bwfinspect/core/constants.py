"""RIFF/WAVE identifiers and fixed field widths."""

# Container header
RIFF_ID = b"RIFF"
WAVE_ID = b"WAVE"

# Chunk identifiers that get decoded; everything else is skipped
FMT_CHUNK_ID = b"fmt "
BEXT_CHUNK_ID = b"bext"
IXML_CHUNK_ID = b"iXML"

# fmt chunk: format(2) channels(2) sample rate(4) byte rate(4) block align(2) bits(2)
FMT_FIXED_SIZE = 16
WAVE_FORMAT_PCM = 1

# bext chunk text fields, in file order (EBU Tech 3285)
BEXT_TEXT_FIELDS = (
    ("description", 256),
    ("originator", 32),
    ("originator_reference", 32),
    ("origination_date", 10),
    ("origination_time", 8),
)
# Text fields plus the 8-byte TimeReference
BEXT_FIXED_SIZE = sum(width for _, width in BEXT_TEXT_FIELDS) + 8
