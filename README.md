# lpmgui

A small graphical process manager for Linux. It reads `/proc` every two
seconds. For each running process it shows the PID, name, CPU time in
seconds and resident memory in MB. It also shows totals over all processes
and system-wide CPU and memory usage in percent.

The window is built with Tk (`tkinter`). Python must therefore have Tk
support, and a display must be available. The statistics chart is drawn
with matplotlib.

## Installation

```
pip install .
```

## Running

```
lpmgui
```

The command takes no options apart from `--help`.

## What the window offers

- **Search** processes by name (case-insensitive substring) or by exact PID.
- **Minimum CPU time and memory** filters, in seconds and megabytes.
- **Sorting** by CPU time or by memory, largest first; a button switches between the two.
- **Kill** the first selected process (`SIGKILL`).
- **Pause** every selected process (`SIGSTOP`). A message lists the PIDs that were paused and those that could not be.
- **Set priority** of the first selected process: a niceness from -20 to 19.
- **Dark/light mode** switch.
- **Stats and Graphs** opens a window that plots system CPU and memory usage. It takes a new sample every two seconds.

Changing the priority of other users' processes usually needs elevated
privileges, and so does lowering niceness. The window has no way to resume
a paused process (`SIGCONT`).

## Using the library

You can use the `/proc` reading and filtering without the window:

```python
from lpmgui.procfs import SearchField, take_snapshot

snapshot = take_snapshot(query="python", field=SearchField.NAME)
for process in snapshot.processes:
    print(process.pid, process.name, process.cpu, process.mem)
print(snapshot.total_cpu, snapshot.total_mem)
print(snapshot.usage.cpu_percent, snapshot.usage.mem_percent)
```

`lpmgui.procfs` contains the following:

- `read_process`, `iter_processes` and `read_system_usage`. Each takes a `proc_root` argument, so it can read a procfs tree other than `/proc`.
- `matches` and `select_processes` for filtering and sorting.
- `parse_cpu_percent` and `parse_mem_percent` for the `/proc/stat` and `/proc/meminfo` formats.

`lpmgui.actions` holds the process actions:

- `kill_process` and `set_priority` raise `OSError` on failure.
- `set_priority` also raises `ValueError` for a niceness outside -20..19.
- `pause_processes` returns a `PauseResult` with the `succeeded` and `failed` PIDs.

`lpmgui.stats.UsageHistory` keeps the time series shown in the statistics
window. `record` appends a sample, and `x_range` gives the time axis range.

## Tests

```
pip install ".[test]"
pytest
```