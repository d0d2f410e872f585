"""BWF Inspector - Broadcast WAV fmt/bext/iXML viewer.

Run: python main.py
"""

import sys
from pathlib import Path

# Ensure package is importable when running from project root
sys.path.insert(0, str(Path(__file__).parent))

from bwfinspect.gui.app import main


if __name__ == "__main__":
    main()
