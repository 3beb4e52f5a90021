"""Operating system, session and runtime probes."""

import os
import platform
import re
import socket
import time
from pathlib import Path

import psutil

from kernelview import shell
from kernelview.heuristics import VERSIONED_SHELLS

_VERSION_RE = re.compile(r"\d+\.\d+(?:\.\d+)?")


def format_uptime(seconds: float) -> str:
    """Format an uptime in the coarsest two units that matter."""
    total_minutes = int(seconds // 60)
    days, remainder = divmod(total_minutes, 24 * 60)
    hours, minutes = divmod(remainder, 60)
    if days > 0:
        return f"{days} days, {hours} hours"
    if hours > 0:
        return f"{hours} hours, {minutes} minutes"
    return f"{minutes} minutes"


def _linux_os_name() -> str | None:
    try:
        release = platform.freedesktop_os_release()
    except OSError:
        return None
    if release.get("PRETTY_NAME"):
        return release["PRETTY_NAME"]
    name, version = release.get("NAME"), release.get("VERSION_ID")
    if name and version:
        return f"{name} {version}"
    return name


def _darwin_os_name() -> str | None:
    version = shell.run_command("sw_vers", "-productVersion")
    if not version:
        return None
    build = shell.run_command("sw_vers", "-buildVersion")
    return f"macOS {version} ({build})" if build else f"macOS {version}"


def _windows_os_name() -> str | None:
    caption = shell.run_shell("(Get-CimInstance Win32_OperatingSystem).Caption")
    if not caption:
        return None
    caption = caption.replace("Microsoft ", "", 1).strip()
    build = shell.run_shell("(Get-CimInstance Win32_OperatingSystem).BuildNumber")
    return f"{caption} (Build {build})" if build else caption


_OS_NAME_SOURCES = {
    "linux": _linux_os_name,
    "darwin": _darwin_os_name,
    "windows": _windows_os_name,
}


def os_name() -> str:
    """Distribution or product name, falling back to the kernel's own name."""
    source = _OS_NAME_SOURCES.get(shell.os_family())
    if source is not None:
        name = source()
        if name:
            return name
    return f"{platform.system()} {platform.release()}".strip()


def kernel() -> str:
    system = platform.system()
    if system == "Windows":
        return f"Windows NT {platform.version()}"
    return f"{system} {platform.release()}"


def uptime() -> str:
    return format_uptime(time.time() - psutil.boot_time())


def hostname() -> str:
    return socket.gethostname()


def _shell_path() -> str | None:
    if shell.os_family() != "windows":
        return os.environ.get("SHELL") or None
    if os.environ.get("PSModulePath"):
        return "powershell"
    if os.environ.get("ComSpec"):
        return "cmd"
    return None


def login_shell() -> str:
    """Name and version of the user's shell."""
    path = _shell_path()
    if path is None:
        return "Unknown"

    name = re.split(r"[\\/]", path)[-1].lower().removesuffix(".exe")

    version = ""
    if name in VERSIONED_SHELLS:
        output = shell.run_command(path, "--version")
        if output:
            match = _VERSION_RE.search(output.splitlines()[0])
            version = match.group(0) if match else ""
    elif name == "powershell":
        version = shell.run_shell("$PSVersionTable.PSVersion.Major")

    title = name.title()
    return f"{title} {version}" if version else title


def toolchain() -> str:
    """The interpreter kernelview itself runs on."""
    return f"{platform.python_implementation()} {platform.python_version()}"


def virtualization() -> str | None:
    """
    Detect the hypervisor or container the host runs in.

    Tries systemd-detect-virt, then container markers, then the CPU's
    hypervisor flag. Returns None on bare metal.
    """
    detected = shell.run_command("systemd-detect-virt")
    if detected and detected != "none":
        return detected

    if Path("/.dockerenv").exists():
        return "docker"

    try:
        cgroup = Path("/proc/1/cgroup").read_text()
    except OSError:
        cgroup = ""
    for runtime in ("docker", "lxc"):
        if runtime in cgroup:
            return runtime

    try:
        cpuinfo = Path("/proc/cpuinfo").read_text()
    except OSError:
        return None
    for line in cpuinfo.splitlines():
        if line.startswith("flags") and "hypervisor" in line.split():
            return "vm"
    return None
