"""Command-line entry point.

Usage: py -m bwfinspect.cli_export "C:\\path\\to\\take.wav" [--json]

Prints the text report for each file, or one JSON document with --json.
Directories are searched recursively for .wav/.bwf files.
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from bwfinspect.core.errors import ScanError
from bwfinspect.core.wav_scanner import scan_wav
from bwfinspect.export.json_export import bundle_entries, report_to_dict
from bwfinspect.report.text_report import assemble_report
from bwfinspect.utils.config import APP_NAME, APP_VERSION
from bwfinspect.utils.file_utils import expand_paths

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="bwf-inspector",
        description="Show fmt, bext and iXML metadata of Broadcast WAV files.",
    )
    ap.add_argument("paths", nargs="+", type=Path, help="WAV files or directories")
    ap.add_argument("--json", action="store_true", help="Output JSON instead of text")
    ap.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr")
    ap.add_argument("--version", action="version", version=f"{APP_NAME} {APP_VERSION}")
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    files = expand_paths(args.paths)
    if not files:
        logger.warning("No WAV files found in %s", ", ".join(map(str, args.paths)))

    reports = []
    failed = False
    for i, wav_path in enumerate(files):
        logger.debug("Scanning %s", wav_path)
        try:
            report = scan_wav(wav_path)
        except (ScanError, OSError) as e:
            logger.error("%s: %s", wav_path, e)
            failed = True
            if args.json:
                reports.append({"file_path": str(wav_path), "error": str(e)})
            else:
                _print_text(wav_path, f"Error: {e}", banner=len(files) > 1, first=i == 0)
            continue

        if args.json:
            reports.append(report_to_dict(report))
        else:
            _print_text(wav_path, assemble_report(report), banner=len(files) > 1, first=i == 0)

    if args.json:
        if len(files) == 1:
            print(json.dumps(reports[0], indent=2, ensure_ascii=False))
        else:
            data = bundle_entries(reports)
            print(json.dumps(data, indent=2, ensure_ascii=False))

    return 1 if failed else 0


def _print_text(wav_path: Path, text: str, banner: bool, first: bool):
    if banner:
        if not first:
            print()
        print(f"=== {wav_path.name} ===")
    print(text)


if __name__ == "__main__":
    sys.exit(main())
