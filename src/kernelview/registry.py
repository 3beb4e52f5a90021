"""The probe table: which probe fills which snapshot field, and at what cost."""

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from kernelview.models import ABSENT, Mode, Tier
from kernelview.probes import desktop, hardware, host, network, software

logger = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class Probe:
    """A stateless fact-gathering action and its cost tier."""

    tier: Tier
    action: Callable[[], str | None]

    @property
    def name(self) -> str:
        return getattr(self.action, "__name__", repr(self.action))


def run_probe(field: str, probe: Probe) -> str:
    """
    Run a probe and return its display value.

    This is the probe boundary: any exception raised by the action (missing
    command, permission denied, parse failure, unsupported platform) is
    logged at debug level and turned into ``ABSENT``. A None result is
    also ``ABSENT``.
    """
    try:
        value = probe.action()
    except Exception:
        logger.debug("Probe %s for field %r failed", probe.name, field, exc_info=True)
        return ABSENT
    if value is None:
        return ABSENT
    return str(value).strip()


# Keyed by Snapshot field name, so every field has exactly one probe.
PROBES: Mapping[str, Probe] = MappingProxyType({
    "os_name": Probe(Tier.FAST, host.os_name),
    "kernel": Probe(Tier.FAST, host.kernel),
    "uptime": Probe(Tier.FAST, host.uptime),
    "shell": Probe(Tier.FAST, host.login_shell),
    "cpu": Probe(Tier.FAST, hardware.cpu_model),
    "cores_threads": Probe(Tier.FAST, hardware.cores_threads),
    "cpu_speed": Probe(Tier.FAST, hardware.cpu_speed),
    "cpu_usage": Probe(Tier.SLOW, hardware.cpu_usage),
    "gpu": Probe(Tier.FAST, hardware.gpu),
    "ram": Probe(Tier.FAST, hardware.ram),
    "disk": Probe(Tier.FAST, hardware.disk),
    "swap": Probe(Tier.FAST, hardware.swap),
    "hostname": Probe(Tier.FAST, host.hostname),
    "ip_address": Probe(Tier.FAST, network.ip_address),
    "open_ports": Probe(Tier.SLOW, network.open_ports),
    "locale": Probe(Tier.FAST, desktop.locale),
    "resolution": Probe(Tier.FAST, desktop.resolution),
    "window_manager": Probe(Tier.FAST, desktop.window_manager),
    "desktop_environment": Probe(Tier.FAST, desktop.desktop_environment),
    "terminal": Probe(Tier.FAST, desktop.terminal),
    "packages": Probe(Tier.SLOW, software.package_counts),
    "languages": Probe(Tier.SLOW, software.installed_languages),
    "toolchain": Probe(Tier.FAST, host.toolchain),
    "virtualization": Probe(Tier.FAST, host.virtualization),
    "temperature": Probe(Tier.SLOW, hardware.temperature),
})


def select(mode: Mode, registry: Mapping[str, Probe] = PROBES) -> dict[str, Probe]:
    """Return the probes that run in ``mode``."""
    tiers = mode.tiers
    return {field: probe for field, probe in registry.items() if probe.tier in tiers}
