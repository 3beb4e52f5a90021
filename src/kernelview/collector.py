"""Collection orchestrator for kernelview."""

import logging
import time
from collections.abc import Mapping
from functools import partial

from kernelview.fanout import fan_out
from kernelview.models import Mode, Snapshot
from kernelview.registry import PROBES, Probe, run_probe, select

logger = logging.getLogger(__name__)


def collect(mode: Mode, registry: Mapping[str, Probe] = PROBES) -> Snapshot:
    """
    Collect a snapshot of the host.

    Fast-tier probes always run; slow-tier probes run only in comprehensive
    mode. Every selected probe runs concurrently and the call returns once
    all of them have finished. Fields whose probe did not run or failed hold
    ``ABSENT``.

    Args:
        mode: Which probe tiers to run.
        registry: Probe table keyed by snapshot field name.

    Returns:
        A fully assembled, immutable Snapshot.
    """
    selected = select(mode, registry)
    started = time.perf_counter()

    values = fan_out(
        {field: partial(run_probe, field, probe) for field, probe in selected.items()},
        name="probe",
    )

    logger.debug(
        "Collected %d probes in %s mode in %.3fs",
        len(values),
        mode.value,
        time.perf_counter() - started,
    )
    return Snapshot(**values)
