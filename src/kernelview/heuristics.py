"""
Lookup tables behind the probes' priority chains.

These are plain data: string matches for desktop sessions, terminal names,
package manager commands and so on. OS releases drift, so entries are
expected to be edited here without touching probe logic.
"""

from typing import NamedTuple


class PackageManager(NamedTuple):
    """A package manager and the shell pipeline that prints its package count."""

    name: str
    executable: str
    command: str


# Package count commands by OS family.
PACKAGE_MANAGERS: dict[str, tuple[PackageManager, ...]] = {
    "linux": (
        PackageManager("APT", "dpkg-query", "dpkg-query -f . -W | wc -c"),
        PackageManager("Pacman", "pacman", "pacman -Qq --color never | wc -l"),
        PackageManager("DNF", "dnf", "dnf list installed --quiet | tail -n +2 | wc -l"),
        PackageManager("Flatpak", "flatpak", "flatpak list --app --columns=application | wc -l"),
        PackageManager("Snap", "snap", "snap list | tail -n +2 | wc -l"),
    ),
    "darwin": (
        PackageManager("Brew", "brew", "brew list --formula | wc -l"),
        PackageManager("Cask", "brew", "brew list --cask | wc -l"),
    ),
    "windows": (
        PackageManager("Choco", "choco", "(choco list -l | Measure-Object).Count"),
        PackageManager("Winget", "winget", "(winget list | Measure-Object).Count"),
        PackageManager("Scoop", "scoop", "(scoop list | Measure-Object).Count"),
    ),
}

# Display name -> executable probed on PATH.
LANGUAGE_CANDIDATES: dict[str, str] = {
    "Python": "python3",
    "Go": "go",
    "Node": "node",
    "Rust": "rustc",
    "Java": "java",
    "Ruby": "ruby",
    "PHP": "php",
}

# Shells that answer ``--version`` with a parseable first line.
VERSIONED_SHELLS = frozenset({"bash", "zsh", "fish"})

# XDG_CURRENT_DESKTOP (lowercased) -> compositor, for Wayland sessions.
WAYLAND_COMPOSITORS: dict[str, str] = {
    "gnome": "Mutter (Wayland)",
    "kde": "KWin (Wayland)",
    "sway": "Sway",
    "hyprland": "Hyprland",
    "wlroots": "wlroots based",
}

# DESKTOP_SESSION substring -> window manager, checked in order, for X11.
X11_SESSION_WMS: tuple[tuple[str, str], ...] = (
    ("gnome", "Mutter (X11)"),
    ("kde", "KWin (X11)"),
    ("plasma", "KWin (X11)"),
    ("xfce", "Xfwm4"),
    ("cinnamon", "Muffin"),
    ("mate", "Marco"),
    ("lxqt", "Openbox"),
)

# Fixed window managers for platforms with a single compositor.
PLATFORM_WMS: dict[str, str] = {
    "windows": "DWM",
    "darwin": "Quartz Compositor",
}

# Desktop identifiers rewritten before title-casing, applied in order.
DESKTOP_REPLACEMENTS: tuple[tuple[str, str], ...] = (
    ("plasmawayland", "Plasma (Wayland)"),
    ("plasma", "Plasma (X11)"),
)

# Suffix stripped from macOS TERM_PROGRAM values.
APP_BUNDLE_SUFFIX = ".app"

# TERM_PROGRAM rewrites, applied in order.
TERMINAL_REPLACEMENTS: tuple[tuple[str, str], ...] = (
    ("iTerm", "iTerm2"),
)

# TERM values too generic to name a terminal.
GENERIC_TERMS = frozenset({"xterm-256color", "screen", "dumb"})

# Substrings marking a CPU temperature sensor.
CPU_SENSOR_HINTS: tuple[str, ...] = ("core", "cpu", "package")

# PCI classes that identify a display adapter in lspci output.
GPU_PCI_CLASSES: tuple[str, ...] = ("vga", "3d", "display")

# Addresses that mean "listening on every interface".
WILDCARD_ADDRESSES = frozenset({"0.0.0.0", "::", ""})
