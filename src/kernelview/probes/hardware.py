"""CPU, GPU, memory, storage and sensor probes."""

import os
import platform
import re
import shlex
from pathlib import Path

import psutil

from kernelview import shell
from kernelview.heuristics import CPU_SENSOR_HINTS, GPU_PCI_CLASSES

# Sampling window for the CPU usage probe, in seconds.
CPU_SAMPLE_INTERVAL = 0.15

GIB = 1 << 30

_LSPCI_REV_RE = re.compile(r"\s*\(rev [0-9a-f]+\)\s*$", re.IGNORECASE)
_BRACKETS_RE = re.compile(r"\[.*?\]")


def format_usage(used: int, total: int, percent: float, precision: int = 0) -> str:
    """Render a used/total byte pair as 'U.UGB / T.TGB (P%)'."""
    return f"{used / GIB:.1f}GB / {total / GIB:.1f}GB ({percent:.{precision}f}%)"


def format_frequency(mhz: float) -> str:
    if mhz > 1000:
        return f"{mhz / 1000:.2f} GHz"
    return f"{mhz:.0f} MHz"


def cpu_model() -> str:
    """Marketing name of the first CPU."""
    family = shell.os_family()
    if family == "linux":
        try:
            cpuinfo = Path("/proc/cpuinfo").read_text()
        except OSError:
            cpuinfo = ""
        for line in cpuinfo.splitlines():
            # "Model" covers ARM boards that lack "model name".
            key, _, value = line.partition(":")
            if key.strip() in ("model name", "Model") and value.strip():
                return value.strip()
    elif family == "darwin":
        brand = shell.run_command("sysctl", "-n", "machdep.cpu.brand_string")
        if brand:
            return brand
    return platform.processor() or "Unknown Processor"


def cores_threads() -> str | None:
    physical = psutil.cpu_count(logical=False)
    logical = psutil.cpu_count(logical=True)
    if not logical:
        return None
    return f"{physical or logical}/{logical}"


def cpu_speed() -> str | None:
    freq = psutil.cpu_freq()
    if freq is None:
        return None
    mhz = freq.max or freq.current
    if not mhz:
        return None
    return format_frequency(mhz)


def cpu_usage() -> str:
    """Aggregate CPU load, sampled over a short fixed window."""
    return f"{psutil.cpu_percent(interval=CPU_SAMPLE_INTERVAL):.1f}%"


def parse_lspci_machine(output: str) -> str | None:
    """Pick the first display adapter from ``lspci -mm`` output."""
    for line in output.splitlines():
        try:
            fields = shlex.split(line)
        except ValueError:
            continue
        # slot, class, vendor, device, ...
        if len(fields) < 4:
            continue
        if any(cls in fields[1].lower() for cls in GPU_PCI_CLASSES):
            return f"{fields[2]} {fields[3]}".strip()
    return None


def parse_lspci(output: str) -> str | None:
    """Pick the first display adapter from plain ``lspci`` output."""
    for line in output.splitlines():
        parts = line.split(":", 2)
        if len(parts) < 3:
            continue
        if not any(cls in parts[1].lower() for cls in GPU_PCI_CLASSES):
            continue
        name = _BRACKETS_RE.sub("", _LSPCI_REV_RE.sub("", parts[2]))
        return " ".join(name.split()) or None
    return None


def gpu() -> str | None:
    family = shell.os_family()
    if family == "linux":
        return (
            parse_lspci_machine(shell.run_command("lspci", "-mm"))
            or parse_lspci(shell.run_command("lspci"))
        )
    if family == "darwin":
        output = shell.run_command("system_profiler", "SPDisplaysDataType")
        for line in output.splitlines():
            key, _, value = line.strip().partition(":")
            if key == "Chipset Model":
                return value.strip()
        return None
    if family == "windows":
        return shell.run_shell("(Get-CimInstance Win32_VideoController).Caption")
    return "Unknown"


def ram() -> str:
    mem = psutil.virtual_memory()
    return format_usage(mem.used, mem.total, mem.percent)


def disk() -> str:
    """Usage of the filesystem holding the system root."""
    root = os.path.abspath(os.sep)
    usage = psutil.disk_usage(root)
    return format_usage(usage.used, usage.total, usage.percent)


def swap() -> str:
    sw = psutil.swap_memory()
    if sw.total <= 0:
        return "None"
    return format_usage(sw.used, sw.total, sw.percent, precision=1)


def temperature() -> str | None:
    """
    CPU temperature from the hardware sensors.

    Prefers a reading whose chip or label looks CPU related, otherwise the
    first reading reported. ``psutil.sensors_temperatures`` only exists on
    Linux and FreeBSD; elsewhere the AttributeError resolves the field to
    absent at the probe boundary.
    """
    sensors = psutil.sensors_temperatures()
    readings = [
        (f"{chip}_{entry.label}".lower(), entry.current)
        for chip, entries in sensors.items()
        for entry in entries
    ]
    if not readings:
        return None
    for key, current in readings:
        if any(hint in key for hint in CPU_SENSOR_HINTS):
            return f"{current:.1f} °C"
    return f"{readings[0][1]:.1f} °C"
