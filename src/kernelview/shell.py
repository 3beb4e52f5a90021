"""Thin wrappers around subprocess and PATH lookups used by the probes."""

import logging
import platform
import shutil
import subprocess

logger = logging.getLogger(__name__)

COMMAND_TIMEOUT = 10.0


def os_family() -> str:
    """Return 'linux', 'darwin', 'windows' or another lowercase system name."""
    return platform.system().lower()


def which(executable: str) -> str | None:
    """Resolve an executable on the search path."""
    return shutil.which(executable)


def run_command(*args: str) -> str:
    """
    Run a command and return its stripped stdout.

    The output is fully read and the process reaped before returning. Stderr
    is discarded and bytes that do not decode are replaced. Returns an empty
    string when the executable is missing, the command exits non-zero or
    times out.
    """
    try:
        result = subprocess.run(
            list(args),
            stdout=subprocess.PIPE,
            stderr=subprocess.DEVNULL,
            stdin=subprocess.DEVNULL,
            text=True,
            errors="replace",
            check=False,
            timeout=COMMAND_TIMEOUT,
        )
    except (OSError, subprocess.SubprocessError) as exc:
        logger.debug("Command %s failed to run: %s", args[0], exc)
        return ""

    if result.returncode != 0:
        return ""
    return result.stdout.strip()


def run_shell(command: str) -> str:
    """
    Run a pipeline through the platform shell and return its stripped stdout.

    Uses PowerShell on Windows and ``sh -c`` elsewhere.
    """
    if os_family() == "windows":
        return run_command("powershell", "-NoProfile", "-Command", command)
    return run_command("sh", "-c", command)
