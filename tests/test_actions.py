"""Tests for clipboard and browser actions."""

import subprocess
import webbrowser
from unittest.mock import patch

import pytest

from gitact.actions import clipboard_command, copy_to_clipboard, open_url
from gitact.errors import (
    ActionError,
    BrowserUnsupportedError,
    ClipboardUnavailableError,
    OSUnsupportedError,
)


class TestClipboardCommand:
    def test_macos(self):
        assert clipboard_command("darwin") == ["pbcopy"]

    def test_windows(self):
        assert clipboard_command("win32") == ["clip"]

    def test_linux_prefers_xclip(self):
        with patch("gitact.actions.shutil.which", return_value="/usr/bin/xclip"):
            assert clipboard_command("linux") == ["xclip", "-selection", "clipboard"]

    def test_linux_falls_back_to_xsel(self):
        def which(name):
            return "/usr/bin/xsel" if name == "xsel" else None

        with patch("gitact.actions.shutil.which", side_effect=which):
            assert clipboard_command("linux") == ["xsel", "--clipboard", "--input"]

    def test_linux_without_utility(self):
        with patch("gitact.actions.shutil.which", return_value=None):
            with pytest.raises(ClipboardUnavailableError, match="xclip or xsel"):
                clipboard_command("linux")

    def test_unsupported_os(self):
        with pytest.raises(OSUnsupportedError):
            clipboard_command("sunos5")


class TestCopyToClipboard:
    def test_pipes_text(self):
        with patch("gitact.actions.subprocess.run") as mock_run:
            copy_to_clipboard("git clone https://x.git", platform="darwin")
        mock_run.assert_called_once()
        args, kwargs = mock_run.call_args
        assert args[0] == ["pbcopy"]
        assert kwargs["input"] == "git clone https://x.git"
        assert kwargs["check"] is True

    def test_command_failure(self):
        error = subprocess.CalledProcessError(1, ["pbcopy"])
        with patch("gitact.actions.subprocess.run", side_effect=error):
            with pytest.raises(ClipboardUnavailableError, match="pbcopy failed"):
                copy_to_clipboard("text", platform="darwin")

    def test_missing_binary(self):
        with patch("gitact.actions.subprocess.run", side_effect=FileNotFoundError("clip")):
            with pytest.raises(ActionError):
                copy_to_clipboard("text", platform="win32")


class TestOpenUrl:
    def test_opens(self):
        with patch("gitact.actions.webbrowser.open", return_value=True) as mock_open:
            open_url("https://github.com/octocat/hello")
        mock_open.assert_called_once_with("https://github.com/octocat/hello")

    def test_no_browser(self):
        with patch("gitact.actions.webbrowser.open", return_value=False):
            with pytest.raises(BrowserUnsupportedError):
                open_url("https://github.com")

    def test_browser_error(self):
        with patch("gitact.actions.webbrowser.open", side_effect=webbrowser.Error("boom")):
            with pytest.raises(BrowserUnsupportedError, match="boom"):
                open_url("https://github.com")
