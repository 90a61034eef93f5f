"""Signals and priority changes sent to processes."""

from __future__ import annotations

import os
import signal
from collections.abc import Iterable
from dataclasses import dataclass

PRIORITY_MIN = -20
PRIORITY_MAX = 19


@dataclass(frozen=True)
class PauseResult:
    """Which processes were stopped and which could not be."""

    succeeded: tuple[int, ...]
    failed: tuple[int, ...]


def kill_process(pid: int) -> None:
    """Send SIGKILL to a process; raises OSError on failure."""
    os.kill(pid, signal.SIGKILL)


def set_priority(pid: int, priority: int) -> None:
    """Set a process's nice value; raises ValueError if out of range, OSError on failure."""
    if not PRIORITY_MIN <= priority <= PRIORITY_MAX:
        raise ValueError(f"priority must be between {PRIORITY_MIN} and {PRIORITY_MAX}, got {priority}")
    os.setpriority(os.PRIO_PROCESS, pid, priority)


def pause_processes(pids: Iterable[int]) -> PauseResult:
    """Send SIGSTOP to each distinct pid and report the outcome."""
    unique = list(dict.fromkeys(pids))
    if not unique:
        raise ValueError("no processes selected")
    succeeded: list[int] = []
    failed: list[int] = []
    for pid in unique:
        try:
            os.kill(pid, signal.SIGSTOP)
        except OSError:
            failed.append(pid)
        else:
            succeeded.append(pid)
    return PauseResult(succeeded=tuple(succeeded), failed=tuple(failed))