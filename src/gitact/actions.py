"""Clipboard and browser side effects."""

import logging
import shutil
import subprocess
import sys
import webbrowser
from typing import Optional

from gitact.errors import (
    BrowserUnsupportedError,
    ClipboardUnavailableError,
    OSUnsupportedError,
)

logger = logging.getLogger(__name__)


def clipboard_command(platform: Optional[str] = None) -> list[str]:
    """Return the command line that writes stdin to the system clipboard."""
    system = platform or sys.platform
    if system == "darwin":
        return ["pbcopy"]
    if system.startswith("linux"):
        if shutil.which("xclip"):
            return ["xclip", "-selection", "clipboard"]
        if shutil.which("xsel"):
            return ["xsel", "--clipboard", "--input"]
        raise ClipboardUnavailableError("no clipboard utility found (install xclip or xsel)")
    if system in ("win32", "cygwin"):
        return ["clip"]
    raise OSUnsupportedError(f"OS not supported: {system}")


def copy_to_clipboard(text: str, platform: Optional[str] = None) -> None:
    """Copy ``text`` to the system clipboard."""
    cmd = clipboard_command(platform)
    try:
        subprocess.run(cmd, input=text, text=True, check=True, capture_output=True)
    except (OSError, subprocess.CalledProcessError) as e:
        logger.warning("clipboard command %s failed: %s", cmd[0], e)
        raise ClipboardUnavailableError(f"{cmd[0]} failed: {e}") from e


def open_url(url: str) -> None:
    """Open ``url`` in the user's browser."""
    try:
        opened = webbrowser.open(url)
    except webbrowser.Error as e:
        raise BrowserUnsupportedError(str(e)) from e
    if not opened:
        raise BrowserUnsupportedError("no browser available")
