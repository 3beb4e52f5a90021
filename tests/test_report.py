"""Tests for the terminal report."""

import io

from rich.console import Console

from kernelview.models import ABSENT, Mode, Snapshot
from kernelview.report import (
    FAST_THEME,
    NORMAL_THEME,
    TITLE,
    build_groups,
    render,
    theme_for,
)


def _render_text(snapshot: Snapshot) -> str:
    buffer = io.StringIO()
    console = Console(file=buffer, width=100, color_system=None)
    render(snapshot, NORMAL_THEME, console)
    return buffer.getvalue()


def test_theme_for_mode():
    """Test each mode gets its own theme."""
    assert theme_for(Mode.FAST) is FAST_THEME
    assert theme_for(Mode.COMPREHENSIVE) is NORMAL_THEME
    assert FAST_THEME.category != NORMAL_THEME.category


class TestBuildGroups:
    """Tests for build_groups."""

    def test_empty_snapshot_has_no_groups(self):
        """Test an all-absent snapshot yields nothing to show."""
        assert build_groups(Snapshot()) == []

    def test_uninformative_values_hidden(self):
        """Test placeholder values are dropped along with empty groups."""
        snapshot = Snapshot(
            os_name="Fedora Linux 40",
            shell="Unknown",
            swap="None",
            packages="None detected",
            cpu_usage=ABSENT,
        )

        assert build_groups(snapshot) == [("System", [("OS", "Fedora Linux 40")])]

    def test_group_order(self):
        """Test groups appear in report order."""
        snapshot = Snapshot(open_ports="22", hostname="box", cpu="Ryzen 7", os_name="Arch Linux")

        categories = [category for category, _ in build_groups(snapshot)]

        assert categories == ["System", "Hardware", "Network", "Other"]


class TestRender:
    """Tests for render."""

    def test_render_contains_title_and_rows(self):
        """Test the title, headers and aligned rows are printed."""
        snapshot = Snapshot(os_name="Debian GNU/Linux 12", ip_address="10.0.0.2", languages="Go, Python")

        output = _render_text(snapshot)

        assert TITLE in output
        assert "─── System ───" in output
        assert "─── Software ───" in output
        assert "IP Address: 10.0.0.2" in output
        # Keys are padded to the widest label shown.
        assert "OS        : Debian GNU/Linux 12" in output
        assert "Languages : Go, Python" in output

    def test_render_omits_absent(self):
        """Test absent fields never reach the output."""
        output = _render_text(Snapshot(hostname="box"))

        assert "Hostname: box" in output
        assert "Uptime" not in output
        assert "─── Hardware ───" not in output

    def test_render_empty_snapshot(self):
        """Test an empty snapshot renders without error."""
        output = _render_text(Snapshot())

        assert TITLE not in output
