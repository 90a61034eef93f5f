"""Time series of whole-system CPU and memory usage."""

from __future__ import annotations

from dataclasses import dataclass, field

from lpmgui.procfs import SystemUsage

UPDATE_INTERVAL = 2
Y_RANGE = (0, 100)


@dataclass
class UsageHistory:
    """CPU and memory percentages sampled every `interval` seconds."""

    interval: int = UPDATE_INTERVAL
    cpu_points: list[tuple[int, float]] = field(default_factory=list)
    mem_points: list[tuple[int, float]] = field(default_factory=list)
    elapsed: int = 0

    def record(self, usage: SystemUsage) -> None:
        """Append one sample at the current time and advance the clock."""
        self.cpu_points.append((self.elapsed, usage.cpu_percent))
        self.mem_points.append((self.elapsed, usage.mem_percent))
        self.elapsed += self.interval

    def x_range(self) -> tuple[int, int]:
        """Time axis range: from zero to the latest sample."""
        if not self.cpu_points:
            return (0, 0)
        return (0, self.cpu_points[-1][0])