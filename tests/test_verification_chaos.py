"""Verification Test: Chaos Monkey - random probe failure resilience.

Wraps the real probe registry so that a random subset of probes raises,
and checks that collection always completes with exactly those fields
degraded to absent.
"""

import random
import subprocess

import psutil

from kernelview.collector import collect
from kernelview.models import ABSENT, Mode, Snapshot
from kernelview.registry import PROBES, Probe

FAILURES = (
    FileNotFoundError("no such command"),
    PermissionError("permission denied"),
    subprocess.CalledProcessError(2, ["false"]),
    ValueError("unparseable output"),
    psutil.AccessDenied(),
    NotImplementedError("unsupported platform"),
)


def _constant(value):
    return lambda: value


def _raising(error):
    def action():
        raise error
    return action


class TestChaosMonkey:
    """Chaos Monkey verification suite tests."""

    def test_random_failures_only_degrade_their_fields(self):
        """
        Test that failing probes never abort the collection.

        Each round picks a random set of fields to fail with a random error;
        every other field carries a marker value that must come through.
        """
        rng = random.Random(1234)
        fields = list(PROBES)

        for _ in range(20):
            doomed = set(rng.sample(fields, rng.randint(1, len(fields))))
            registry = {
                field: Probe(
                    probe.tier,
                    _raising(rng.choice(FAILURES)) if field in doomed else _constant(f"ok-{field}"),
                )
                for field, probe in PROBES.items()
            }

            snapshot = collect(Mode.COMPREHENSIVE, registry)

            for field in fields:
                expected = ABSENT if field in doomed else f"ok-{field}"
                assert getattr(snapshot, field) == expected, field

    def test_all_probes_failing(self):
        """Test the worst case still yields an all-absent snapshot."""
        registry = {
            field: Probe(probe.tier, _raising(OSError("down")))
            for field, probe in PROBES.items()
        }

        assert collect(Mode.COMPREHENSIVE, registry) == Snapshot()

    def test_real_probes_survive_missing_commands(self, monkeypatch):
        """Test the real registry completes when no external command can run."""
        def no_commands(*args, **kwargs):
            raise FileNotFoundError(args[0] if args else "command")

        monkeypatch.setattr(subprocess, "run", no_commands)

        snapshot = collect(Mode.COMPREHENSIVE)

        assert isinstance(snapshot, Snapshot)
        assert snapshot.hostname
        assert snapshot.toolchain
