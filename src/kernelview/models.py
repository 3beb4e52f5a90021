"""Data models for kernelview."""

from dataclasses import asdict, dataclass, fields
from enum import Enum

# Placeholder for a fact that could not be determined.
ABSENT = ""


class Tier(Enum):
    """Cost class of a probe."""

    FAST = "fast"
    SLOW = "slow"


class Mode(Enum):
    """Collection mode selected once per run."""

    FAST = "fast"
    COMPREHENSIVE = "comprehensive"

    @classmethod
    def from_flag(cls, fast: bool) -> "Mode":
        """Map the CLI fast flag to a mode."""
        return cls.FAST if fast else cls.COMPREHENSIVE

    @property
    def tiers(self) -> frozenset[Tier]:
        """Probe tiers that run in this mode."""
        if self is Mode.FAST:
            return frozenset({Tier.FAST})
        return frozenset({Tier.FAST, Tier.SLOW})


@dataclass(slots=True, frozen=True)
class Snapshot:
    """Immutable result of one collection pass."""

    os_name: str = ABSENT
    kernel: str = ABSENT
    uptime: str = ABSENT
    shell: str = ABSENT
    cpu: str = ABSENT
    cores_threads: str = ABSENT  # "physical/logical"
    cpu_speed: str = ABSENT
    cpu_usage: str = ABSENT
    gpu: str = ABSENT
    ram: str = ABSENT
    disk: str = ABSENT
    swap: str = ABSENT
    hostname: str = ABSENT
    ip_address: str = ABSENT
    open_ports: str = ABSENT
    locale: str = ABSENT
    resolution: str = ABSENT
    window_manager: str = ABSENT
    desktop_environment: str = ABSENT
    terminal: str = ABSENT
    packages: str = ABSENT
    languages: str = ABSENT
    toolchain: str = ABSENT
    virtualization: str = ABSENT
    temperature: str = ABSENT

    @classmethod
    def field_names(cls) -> tuple[str, ...]:
        """Return the snapshot's field names in declaration order."""
        return tuple(f.name for f in fields(cls))

    def present(self) -> dict[str, str]:
        """Return the fields that hold a value."""
        return {name: value for name, value in asdict(self).items() if value != ABSENT}
