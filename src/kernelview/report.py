"""Terminal report for a collected snapshot."""

from dataclasses import dataclass

from rich.console import Console
from rich.text import Text

from kernelview.models import ABSENT, Mode, Snapshot

TITLE = "KernelView"

# Values that say nothing about the host; rows holding them are dropped.
HIDDEN_VALUES = frozenset({ABSENT, "Unknown", "None", "N/A", "None detected"})

# (category, ((label, snapshot field), ...)) in display order.
GROUPS: tuple[tuple[str, tuple[tuple[str, str], ...]], ...] = (
    ("System", (
        ("OS", "os_name"),
        ("Kernel", "kernel"),
        ("Virtualization", "virtualization"),
        ("Uptime", "uptime"),
        ("Shell", "shell"),
        ("Terminal", "terminal"),
    )),
    ("Hardware", (("CPU", "cpu"), ("GPU", "gpu"), ("RAM", "ram"))),
    ("Network", (("Hostname", "hostname"), ("IP Address", "ip_address"))),
    ("Storage", (("Disk", "disk"), ("Swap", "swap"))),
    ("Display", (
        ("Resolution", "resolution"),
        ("DE", "desktop_environment"),
        ("WM", "window_manager"),
    )),
    ("Software", (
        ("Packages", "packages"),
        ("Languages", "languages"),
        ("Python", "toolchain"),
    )),
    ("CPU Stats", (
        ("Cores/Threads", "cores_threads"),
        ("Speed", "cpu_speed"),
        ("Usage", "cpu_usage"),
        ("Temperature", "temperature"),
    )),
    ("Other", (("Locale", "locale"), ("Ports", "open_ports"))),
)


@dataclass(slots=True, frozen=True)
class Theme:
    """Rich styles used by the report."""

    category: str
    key: str
    value: str
    accent: str


NORMAL_THEME = Theme(category="blue", key="color(255)", value="color(249)", accent="blue")
FAST_THEME = Theme(category="cyan", key="color(255)", value="color(249)", accent="cyan")


def theme_for(mode: Mode) -> Theme:
    """Fast runs are tinted cyan so they are not mistaken for full reports."""
    return FAST_THEME if mode is Mode.FAST else NORMAL_THEME


def build_groups(snapshot: Snapshot) -> list[tuple[str, list[tuple[str, str]]]]:
    """Return the non-empty groups with their informative rows."""
    groups = []
    for category, items in GROUPS:
        rows = [
            (label, value)
            for label, field in items
            if (value := getattr(snapshot, field)) not in HIDDEN_VALUES
        ]
        if rows:
            groups.append((category, rows))
    return groups


def render(snapshot: Snapshot, theme: Theme, console: Console | None = None) -> None:
    """
    Print the snapshot as a grouped key/value report.

    Args:
        snapshot: Collected host facts.
        theme: Styles for headers, keys and values.
        console: Target console. Defaults to stdout.
    """
    console = console or Console()
    groups = build_groups(snapshot)

    key_width = max((len(label) for _, rows in groups for label, _ in rows), default=0)
    lines: list[Text] = []
    for category, rows in groups:
        lines.append(Text(f"─── {category} ───", style=theme.category))
        for label, value in rows:
            lines.append(
                Text.assemble(
                    (label.ljust(key_width), theme.key),
                    ": ",
                    (value, theme.value),
                )
            )

    if console.is_terminal:
        console.clear()

    if lines:
        width = max(line.cell_len for line in lines)
        padding = max(0, width // 2 - len(TITLE) // 2)
        console.print()
        console.print(Text(" " * padding + TITLE, style=theme.accent))
        console.print()

    for line in lines:
        console.print(line, overflow="fold")
    console.print()
