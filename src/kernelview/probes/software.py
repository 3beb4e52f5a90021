"""Installed software probes. Both fan out internally."""

import logging
from collections.abc import Iterable, Mapping

from kernelview import shell
from kernelview.fanout import fan_out
from kernelview.heuristics import LANGUAGE_CANDIDATES, PACKAGE_MANAGERS, PackageManager

logger = logging.getLogger(__name__)


def _count(manager: PackageManager) -> int | None:
    """Run one manager's count pipeline; None when it cannot be counted."""
    try:
        if shell.which(manager.executable) is None:
            return None
        output = shell.run_shell(manager.command)
        count = int(output.strip())
    except Exception:
        logger.debug("Could not count packages for %s", manager.name, exc_info=True)
        return None
    return count if count > 0 else None


def package_counts(managers: Iterable[PackageManager] | None = None) -> str:
    """
    Installed package counts per package manager.

    Every manager for the current OS family is queried concurrently. Managers
    whose executable is missing or whose count is unusable are left out.

    Args:
        managers: Managers to query. Defaults to the table for this OS.

    Returns:
        Sorted ``"Name (count)"`` pairs joined by commas, or ``"None detected"``.
    """
    if managers is None:
        managers = PACKAGE_MANAGERS.get(shell.os_family(), ())

    counts = fan_out(
        {manager.name: (lambda m=manager: _count(m)) for manager in managers},
        name="packages",
    )
    parts = sorted(f"{name} ({count})" for name, count in counts.items() if count)
    return ", ".join(parts) if parts else "None detected"


def installed_languages(candidates: Mapping[str, str] | None = None) -> str:
    """Language runtimes whose executable resolves on PATH, sorted by name."""
    if candidates is None:
        candidates = LANGUAGE_CANDIDATES

    found = fan_out(
        {name: (lambda exe=exe: shell.which(exe) is not None) for name, exe in candidates.items()},
        name="languages",
    )
    installed = sorted(name for name, present in found.items() if present)
    return ", ".join(installed) if installed else "None"
