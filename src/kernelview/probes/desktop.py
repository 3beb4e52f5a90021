"""Display server, session and terminal probes.

Most of these read session environment variables first and only shell out
when the environment says nothing.
"""

import os
import re

from kernelview import shell
from kernelview.heuristics import (
    APP_BUNDLE_SUFFIX,
    DESKTOP_REPLACEMENTS,
    GENERIC_TERMS,
    PLATFORM_WMS,
    TERMINAL_REPLACEMENTS,
    WAYLAND_COMPOSITORS,
    X11_SESSION_WMS,
)

_WORD_RE = re.compile(r"[^\W_]+")


def _capitalise(match: re.Match[str]) -> str:
    word = match.group(0)
    if any(c.isupper() for c in word):
        return word
    return word[:1].upper() + word[1:]


def _rewrite_first(value: str, replacements: tuple[tuple[str, str], ...]) -> str:
    for old, new in replacements:
        if old in value:
            return value.replace(old, new, 1)
    return value


def _title(value: str) -> str:
    # Capitalise each run of letters and digits; mixed-case words such as
    # "KWin" or "iTerm2" are kept as written.
    return _WORD_RE.sub(_capitalise, value)


def locale() -> str | None:
    """Language tag of the user's locale, without the encoding suffix."""
    value = os.environ.get("LC_ALL") or os.environ.get("LANG")
    if value:
        return value.split(".")[0]
    if shell.os_family() == "windows":
        return shell.run_shell("(Get-Culture).Name")
    return None


def _xrandr_modes() -> str | None:
    output = shell.run_command("xrandr", "--current")
    modes: list[str] = []
    for line in output.splitlines():
        if "*" not in line:
            continue
        mode = line.split()[0]
        if mode not in modes:
            modes.append(mode)
    return ", ".join(modes) or None


def resolution() -> str | None:
    family = shell.os_family()
    if family == "linux":
        if os.environ.get("DISPLAY"):
            modes = _xrandr_modes()
            if modes:
                return modes
        if os.environ.get("WAYLAND_DISPLAY"):
            return "Wayland"
        return "Headless"
    if family == "darwin":
        output = shell.run_command("system_profiler", "SPDisplaysDataType")
        for line in output.splitlines():
            key, _, value = line.strip().partition(":")
            if key == "Resolution":
                parts = value.split()
                # "2560 x 1600 Retina"
                if len(parts) >= 3:
                    return f"{parts[0]}x{parts[2]}"
        return None
    if family == "windows":
        return shell.run_shell(
            "$v = Get-CimInstance Win32_VideoController; "
            "\"$($v.CurrentHorizontalResolution)x$($v.CurrentVerticalResolution)\""
        )
    return "Unknown"


def window_manager() -> str:
    """
    Window manager or compositor.

    Wayland sessions are identified by the current desktop, X11 sessions by
    the session name, and anything else by asking wmctrl.
    """
    family = shell.os_family()
    if family in PLATFORM_WMS:
        return PLATFORM_WMS[family]
    if family != "linux":
        return "Unknown"

    if os.environ.get("WAYLAND_DISPLAY") and os.environ.get("XDG_SESSION_TYPE") == "wayland":
        desktop = os.environ.get("XDG_CURRENT_DESKTOP", "").lower()
        return WAYLAND_COMPOSITORS.get(desktop, "Wayland")

    session = os.environ.get("DESKTOP_SESSION")
    if session:
        lowered = session.lower()
        for needle, wm in X11_SESSION_WMS:
            if needle in lowered:
                return wm
        return _title(session)

    for line in shell.run_command("wmctrl", "-m").splitlines():
        key, _, value = line.partition(":")
        if key.strip() == "Name" and value.strip():
            return value.strip()
    return "Unknown"


def desktop_environment() -> str | None:
    desktop = os.environ.get("XDG_CURRENT_DESKTOP") or os.environ.get("DESKTOP_SESSION")
    if not desktop:
        return None
    return _title(_rewrite_first(desktop, DESKTOP_REPLACEMENTS))


def terminal() -> str:
    program = os.environ.get("TERM_PROGRAM")
    if program:
        program = program.removesuffix(APP_BUNDLE_SUFFIX)
        for old, new in TERMINAL_REPLACEMENTS:
            program = program.replace(old, new, 1)
        return _title(program)
    term = os.environ.get("TERM")
    if term and term not in GENERIC_TERMS:
        return term
    return "Unknown"
