"""Default paths and application settings."""

from pathlib import Path

DEFAULT_OPEN_PATH = Path.home()
APP_NAME = "BWF Inspector"
APP_VERSION = "1.0.0"
WINDOW_WIDTH = 800
WINDOW_HEIGHT = 600
WINDOW_MIN_WIDTH = 500
WINDOW_MIN_HEIGHT = 400

WAV_EXTENSIONS = {".wav", ".bwf"}
WAV_FILE_TYPES = [("WAV files", "*.wav *.WAV *.bwf *.BWF"), ("All files", "*.*")]

PLACEHOLDER_TEXT = "Select a Broadcast WAV file to view its iXML metadata..."
