"""File and path utility functions."""

from pathlib import Path

from bwfinspect.utils.config import WAV_EXTENSIONS


def format_size(size_bytes: int | float) -> str:
    for unit in ["B", "KB", "MB", "GB"]:
        if size_bytes < 1024:
            return f"{size_bytes:.1f} {unit}"
        size_bytes /= 1024
    return f"{size_bytes:.1f} TB"


def find_wav_files(base_dir: Path) -> list[Path]:
    """Find all WAV/BWF files recursively, sorted by path."""
    return sorted(
        f for f in base_dir.rglob("*")
        if f.is_file() and f.suffix.lower() in WAV_EXTENSIONS
    )


def expand_paths(paths: list[Path]) -> list[Path]:
    """Keep files as given and replace directories by the WAV files inside."""
    result: list[Path] = []
    for path in paths:
        if path.is_dir():
            result.extend(find_wav_files(path))
        else:
            result.append(path)
    return result
