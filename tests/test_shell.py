"""Tests for the subprocess helpers."""

import subprocess
import sys

import pytest

from kernelview import shell


class TestRunCommand:
    """Tests for run_command."""

    def test_returns_stripped_stdout(self):
        """Test stdout is captured and stripped."""
        assert shell.run_command(sys.executable, "-c", "print('  hello  ')") == "hello"

    def test_stderr_discarded(self):
        """Test stderr never leaks into the result."""
        code = "import sys; print('out'); print('err', file=sys.stderr)"

        assert shell.run_command(sys.executable, "-c", code) == "out"

    def test_non_zero_exit_is_empty(self):
        """Test a failing command yields an empty string."""
        code = "import sys; print('partial'); sys.exit(3)"

        assert shell.run_command(sys.executable, "-c", code) == ""

    def test_missing_executable_is_empty(self):
        """Test a command that is not installed yields an empty string."""
        assert shell.run_command("kernelview-no-such-command-xyz") == ""

    def test_undecodable_output_is_replaced(self):
        """Test bytes that are not valid UTF-8 do not break the command."""
        code = "import sys; sys.stdout.buffer.write(b'Intel \\xff GPU')"

        output = shell.run_command(sys.executable, "-c", code)

        assert output.startswith("Intel ")
        assert output.endswith(" GPU")

    def test_timeout_is_empty(self, monkeypatch):
        """Test a command that outlives the timeout yields an empty string."""
        monkeypatch.setattr(shell, "COMMAND_TIMEOUT", 0.2)

        assert shell.run_command(sys.executable, "-c", "import time; time.sleep(5)") == ""


class TestRunShell:
    """Tests for run_shell."""

    @pytest.mark.skipif(sys.platform == "win32", reason="POSIX shell pipeline")
    def test_pipeline(self):
        """Test pipelines run through sh."""
        assert shell.run_shell("printf 'a\\nb\\nc\\n' | wc -l").strip() == "3"

    def test_windows_uses_powershell(self, monkeypatch):
        """Test PowerShell is used on Windows."""
        seen = []
        monkeypatch.setattr(shell, "os_family", lambda: "windows")
        monkeypatch.setattr(shell, "run_command", lambda *args: seen.append(args) or "ok")

        assert shell.run_shell("(Get-Culture).Name") == "ok"
        assert seen == [("powershell", "-NoProfile", "-Command", "(Get-Culture).Name")]


def test_which_resolves_interpreter():
    """Test which finds an executable on PATH or by absolute path."""
    assert shell.which(sys.executable)
    assert shell.which("kernelview-no-such-command-xyz") is None


def test_os_family_is_lowercase():
    """Test the OS family is a lowercase system name."""
    assert shell.os_family() == shell.os_family().lower()
    assert shell.os_family()


def test_subprocess_error_is_empty(monkeypatch):
    """Test unexpected subprocess errors degrade to an empty string."""
    def broken(*args, **kwargs):
        raise subprocess.SubprocessError("broken pipe")

    monkeypatch.setattr(subprocess, "run", broken)

    assert shell.run_command("anything") == ""
