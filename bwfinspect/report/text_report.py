"""Human-readable text report for a scanned WAV file."""

from __future__ import annotations

from bwfinspect.core.models import (
    BroadcastExtension,
    FormatInfo,
    IxmlPayload,
    ScanReport,
)

FORMAT_NOT_FOUND = "WAV Format data (fmt chunk) not found.\n"
BEXT_NOT_FOUND = "No Broadcast Extension (bext) chunk found in this file.\n"
IXML_NOT_FOUND = "No iXML chunk was found in this file."


def assemble_report(report: ScanReport) -> str:
    """Build the report text: format, bext, then iXML, blank-line separated."""
    parts = [
        format_summary(report.format_info) if report.has_format else FORMAT_NOT_FOUND,
        "\n",
        bext_summary(report.bext) if report.has_bext else BEXT_NOT_FOUND,
        "\n",
        ixml_section(report.ixml) if report.has_ixml else IXML_NOT_FOUND,
    ]
    return "".join(parts)


def format_summary(info: FormatInfo) -> str:
    return (
        "WAV File Properties:\n"
        "--------------------\n"
        f"Audio Format: {info.format_label}\n"
        f"Channels: {info.channels}\n"
        f"Sample Rate: {info.sample_rate} Hz\n"
        f"Bit Depth: {info.bits_per_sample} bits\n"
    )


def bext_summary(bext: BroadcastExtension) -> str:
    return (
        "Broadcast Extension (bext) Data:\n"
        "----------------------------------\n"
        f"Description: {bext.description}\n"
        f"Originator: {bext.originator}\n"
        f"Originator Ref: {bext.originator_reference}\n"
        f"Origination Date: {bext.origination_date}\n"
        f"Origination Time: {bext.origination_time}\n"
        f"Time Reference: {bext.time_reference} (samples since midnight)\n"
    )


def ixml_section(payload: IxmlPayload) -> str:
    return "iXML Metadata:\n--------------------\n" + payload.text
