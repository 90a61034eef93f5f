"""Reading process and system usage figures from a procfs tree."""

from __future__ import annotations

import os
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

PROC_ROOT = "/proc"


@dataclass(frozen=True)
class ProcessInfo:
    """One process: CPU time in seconds and resident memory in MB."""

    pid: int
    name: str
    cpu: float
    mem: float


class SearchField(Enum):
    """What a search query is compared against."""

    NAME = "Name"
    PID = "PID"

    @classmethod
    def _missing_(cls, value: object) -> SearchField | None:
        if isinstance(value, str):
            wanted = value.strip().lower()
            for member in cls:
                if member.value.lower() == wanted:
                    return member
        return None


@dataclass(frozen=True)
class SystemUsage:
    """Whole-system CPU and memory usage in percent."""

    cpu_percent: float = 0.0
    mem_percent: float = 0.0


@dataclass(frozen=True)
class Snapshot:
    """The filtered, sorted process list plus totals over every process seen."""

    processes: tuple[ProcessInfo, ...]
    total_cpu: float
    total_mem: float
    usage: SystemUsage


def _clock_ticks() -> int:
    return os.sysconf("SC_CLK_TCK")


def _page_size_mb() -> float:
    return os.sysconf("SC_PAGESIZE") / 1024.0 / 1024.0


def _to_float(text: str) -> float:
    try:
        return float(text)
    except ValueError:
        return 0.0


def _read_first_line(path: Path) -> str | None:
    try:
        with open(path, encoding="utf-8", errors="replace") as handle:
            return handle.readline().rstrip("\n")
    except OSError:
        return None


def read_process(pid: int, proc_root: str | os.PathLike = PROC_ROOT) -> ProcessInfo | None:
    """Read one process; None when its stat file is missing or too short."""
    base = Path(proc_root) / str(pid)
    stat_line = _read_first_line(base / "stat")
    if stat_line is None:
        return None
    fields = stat_line.split(" ")
    if len(fields) < 14:
        return None
    cpu = _to_float(fields[13]) / _clock_ticks()

    mem = 0.0
    statm_line = _read_first_line(base / "statm")
    if statm_line is not None:
        parts = statm_line.split(" ")
        if len(parts) > 1:
            mem = _to_float(parts[1]) * _page_size_mb()

    name = _read_first_line(base / "comm") or ""
    return ProcessInfo(pid=pid, name=name, cpu=cpu, mem=mem)


def iter_processes(proc_root: str | os.PathLike = PROC_ROOT) -> Iterator[ProcessInfo]:
    """Yield every readable process under the procfs root, in directory-name order."""
    try:
        with os.scandir(proc_root) as entries:
            names = sorted(entry.name for entry in entries if entry.is_dir())
    except OSError:
        return
    for entry_name in names:
        try:
            pid = int(entry_name)
        except ValueError:
            continue
        process = read_process(pid, proc_root)
        if process is not None:
            yield process


def matches(
    process: ProcessInfo,
    query: str = "",
    field: SearchField | str = SearchField.NAME,
    cpu_min: float = 0.0,
    mem_min: float = 0.0,
) -> bool:
    """Whether a process passes the thresholds and the search query."""
    if process.cpu < cpu_min or process.mem < mem_min:
        return False
    query = query.strip()
    if not query:
        return True
    field = SearchField(field)
    if field is SearchField.NAME:
        return query.casefold() in process.name.casefold()
    return str(process.pid) == query


def select_processes(
    processes: Iterable[ProcessInfo],
    query: str = "",
    field: SearchField | str = SearchField.NAME,
    cpu_min: float = 0.0,
    mem_min: float = 0.0,
    sort_by_cpu: bool = True,
) -> list[ProcessInfo]:
    """Filter processes and sort them by CPU or memory, highest first."""
    chosen = [p for p in processes if matches(p, query, field, cpu_min, mem_min)]
    key = (lambda p: p.cpu) if sort_by_cpu else (lambda p: p.mem)
    chosen.sort(key=key, reverse=True)
    return chosen


def parse_cpu_percent(line: str) -> float:
    """CPU busy percentage from the aggregate 'cpu' line of /proc/stat."""
    tokens = line.split()
    if len(tokens) < 5:
        raise ValueError(f"malformed cpu line: {line!r}")
    try:
        user, nice, system, idle = (int(t) for t in tokens[1:5])
    except ValueError as exc:
        raise ValueError(f"malformed cpu line: {line!r}") from exc
    total = user + nice + system + idle
    if total == 0:
        return 0.0
    return 100.0 * (total - idle) / total


def _second_token(line: str) -> float:
    tokens = line.split()
    if len(tokens) < 2:
        return 0.0
    return _to_float(tokens[1])


def parse_mem_percent(lines: Iterable[str]) -> float:
    """Used memory percentage from the lines of /proc/meminfo."""
    total = 0.0
    available = 0.0
    for line in lines:
        if line.startswith("MemTotal"):
            total = _second_token(line)
        if line.startswith("MemAvailable"):
            available = _second_token(line)
            break
    if total > 0:
        return 100.0 * (total - available) / total
    return 0.0


def read_system_usage(proc_root: str | os.PathLike = PROC_ROOT) -> SystemUsage:
    """Read whole-system CPU and memory usage; missing files give zero."""
    root = Path(proc_root)
    cpu = 0.0
    first = _read_first_line(root / "stat")
    if first:
        cpu = parse_cpu_percent(first)

    mem = 0.0
    try:
        with open(root / "meminfo", encoding="utf-8", errors="replace") as handle:
            mem = parse_mem_percent(handle)
    except OSError:
        pass
    return SystemUsage(cpu_percent=cpu, mem_percent=mem)


def take_snapshot(
    query: str = "",
    field: SearchField | str = SearchField.NAME,
    cpu_min: float = 0.0,
    mem_min: float = 0.0,
    sort_by_cpu: bool = True,
    proc_root: str | os.PathLike = PROC_ROOT,
) -> Snapshot:
    """Read all processes, total them, then filter and sort for display."""
    processes = list(iter_processes(proc_root))
    total_cpu = sum(p.cpu for p in processes)
    total_mem = sum(p.mem for p in processes)
    selected = select_processes(processes, query, field, cpu_min, mem_min, sort_by_cpu)
    return Snapshot(
        processes=tuple(selected),
        total_cpu=total_cpu,
        total_mem=total_mem,
        usage=read_system_usage(proc_root),
    )