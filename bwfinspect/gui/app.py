"""Main application window: open a WAV file and show its metadata."""

import ctypes
import logging
import threading
from pathlib import Path
from tkinter import filedialog

import customtkinter as ctk

from bwfinspect.core.errors import ScanError
from bwfinspect.core.models import ScanReport
from bwfinspect.core.wav_scanner import scan_wav
from bwfinspect.export.json_export import export_report_json
from bwfinspect.gui import theme
from bwfinspect.report.text_report import assemble_report
from bwfinspect.utils.config import (
    APP_NAME,
    APP_VERSION,
    DEFAULT_OPEN_PATH,
    PLACEHOLDER_TEXT,
    WAV_FILE_TYPES,
    WINDOW_HEIGHT,
    WINDOW_MIN_HEIGHT,
    WINDOW_MIN_WIDTH,
    WINDOW_WIDTH,
)
from bwfinspect.utils.file_utils import format_size

logger = logging.getLogger(__name__)


class BwfInspectorApp:
    """Main application class."""

    def __init__(self):
        self._set_dpi_awareness()

        ctk.set_appearance_mode("dark")
        ctk.set_default_color_theme("dark-blue")

        self.root = ctk.CTk()
        self.root.title(f"{APP_NAME} v{APP_VERSION}")
        self.root.geometry(f"{WINDOW_WIDTH}x{WINDOW_HEIGHT}")
        self.root.minsize(WINDOW_MIN_WIDTH, WINDOW_MIN_HEIGHT)
        self.root.configure(fg_color=theme.BG_PRIMARY)

        self.report: ScanReport | None = None
        self._build_ui()

    def _set_dpi_awareness(self):
        # Windows only; other platforms have no windll
        try:
            ctypes.windll.shcore.SetProcessDpiAwareness(2)
        except (AttributeError, OSError):
            try:
                ctypes.windll.user32.SetProcessDPIAware()
            except (AttributeError, OSError):
                pass

    def _build_ui(self):
        # Top bar: file selection
        top_frame = ctk.CTkFrame(self.root, fg_color=theme.BG_PRIMARY)
        top_frame.pack(fill="x", padx=10, pady=(10, 5))

        self.open_btn = ctk.CTkButton(
            top_frame,
            text="Open WAV File...",
            height=35,
            command=self._browse,
            fg_color=theme.ACCENT_DARK,
            hover_color=theme.ACCENT,
        )
        self.open_btn.pack(side="left", fill="x", expand=True, padx=(0, 5))

        self.export_btn = ctk.CTkButton(
            top_frame,
            text="JSON Export",
            width=120,
            height=35,
            command=self._export_json,
            fg_color=theme.BG_TERTIARY,
            hover_color=theme.ACCENT_SUCCESS,
            state="disabled",
        )
        self.export_btn.pack(side="left")

        # Status
        self.status_var = ctk.StringVar(value="")
        ctk.CTkLabel(
            self.root,
            textvariable=self.status_var,
            font=(theme.FONT_FAMILY, theme.FONT_SIZE_SMALL),
            text_color=theme.TEXT_MUTED,
            anchor="w",
        ).pack(fill="x", padx=10)

        # Report view
        self.report_text = ctk.CTkTextbox(
            self.root,
            font=(theme.FONT_MONO, theme.FONT_SIZE_MONO),
            fg_color=theme.REPORT_BG,
            text_color=theme.REPORT_TEXT,
            wrap="none",
        )
        self.report_text.pack(fill="both", expand=True, padx=10, pady=(5, 10))
        self._show_text(PLACEHOLDER_TEXT)

    def _show_text(self, text: str):
        self.report_text.configure(state="normal")
        self.report_text.delete("1.0", "end")
        self.report_text.insert("1.0", text)
        self.report_text.configure(state="disabled")

    def _browse(self):
        path = filedialog.askopenfilename(
            title="Select a WAV file to open...",
            filetypes=WAV_FILE_TYPES,
            initialdir=str(DEFAULT_OPEN_PATH),
        )
        if path:
            self.load_file(Path(path))

    def load_file(self, wav_path: Path):
        """Scan a WAV file in the background and display the report."""
        self.open_btn.configure(state="disabled")
        self.export_btn.configure(state="disabled")
        self.status_var.set(f"Reading {wav_path.name}...")
        self._show_text("")

        threading.Thread(target=self._run_scan, args=(wav_path,), daemon=True).start()

    def _run_scan(self, wav_path: Path):
        try:
            report = scan_wav(wav_path)
        except ScanError as e:
            logger.warning("Could not scan %s: %s", wav_path, e)
            message = f"Error: {e}"
            self.root.after(0, lambda: self._show_failure(wav_path, message))
            return
        except OSError as e:
            logger.warning("Could not open %s: %s", wav_path, e)
            message = "Error: Could not open file for reading."
            self.root.after(0, lambda: self._show_failure(wav_path, message))
            return
        except Exception as e:
            logger.exception("Unexpected error while scanning %s", wav_path)
            message = f"Error: {e}"
            self.root.after(0, lambda: self._show_failure(wav_path, message))
            return

        def update_ui():
            self.report = report
            self._show_text(assemble_report(report))
            self.open_btn.configure(state="normal")
            self.export_btn.configure(state="normal")
            self.status_var.set(f"{wav_path.name} ({format_size(report.file_size)})")

        self.root.after(0, update_ui)

    def _show_failure(self, wav_path: Path, message: str):
        self.report = None
        self._show_text(message)
        self.open_btn.configure(state="normal")
        self.status_var.set(wav_path.name)

    def _export_json(self):
        if not self.report:
            return

        stem = self.report.file_path.stem if self.report.file_path else "report"
        path = filedialog.asksaveasfilename(
            title="Save JSON export",
            defaultextension=".json",
            filetypes=[("JSON", "*.json")],
            initialfile=f"{stem}_metadata.json",
        )
        if path:
            try:
                export_report_json(self.report, Path(path))
            except OSError as e:
                logger.error("JSON export to %s failed: %s", path, e)
                self.status_var.set(f"Export failed: {e}")
                return
            self.status_var.set(f"Exported: {path}")

    def run(self):
        self.root.mainloop()


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    app = BwfInspectorApp()
    app.run()
