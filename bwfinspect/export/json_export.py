"""Export ScanReport data to JSON."""

from __future__ import annotations

import json
from pathlib import Path

from bwfinspect.core.models import ScanReport


def report_to_dict(report: ScanReport) -> dict:
    """Convert a ScanReport to a serializable dict."""
    return {
        "file_path": str(report.file_path) if report.file_path else None,
        "file_size": report.file_size,
        "format": _format_to_dict(report.format_info),
        "bext": _bext_to_dict(report.bext),
        "ixml": _ixml_to_dict(report.ixml),
    }


def _format_to_dict(info) -> dict | None:
    if info is None:
        return None
    return {
        "audio_format": info.audio_format,
        "format_label": info.format_label,
        "is_pcm": info.is_pcm,
        "channels": info.channels,
        "sample_rate": info.sample_rate,
        "bits_per_sample": info.bits_per_sample,
    }


def _bext_to_dict(bext) -> dict | None:
    if bext is None:
        return None
    return {
        "description": bext.description,
        "originator": bext.originator,
        "originator_reference": bext.originator_reference,
        "origination_date": bext.origination_date,
        "origination_time": bext.origination_time,
        "time_reference": bext.time_reference,
    }


def _ixml_to_dict(payload) -> dict | None:
    if payload is None:
        return None
    return {"kind": payload.kind.value, "text": payload.text}


def export_report_json(report: ScanReport, output_path: Path):
    """Export a single report to a JSON file."""
    data = report_to_dict(report)
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)


def export_reports_json(reports: list[ScanReport], output_path: Path):
    """Export multiple reports to a single JSON file."""
    data = reports_to_dict(reports)
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)


def reports_to_dict(reports: list[ScanReport]) -> dict:
    return bundle_entries([report_to_dict(r) for r in reports])


def bundle_entries(entries: list[dict]) -> dict:
    """Wrap already converted report dicts in the multi-file envelope."""
    return {
        "export_version": "1.0",
        "report_count": len(entries),
        "reports": entries,
    }
