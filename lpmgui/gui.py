"""Tk front end: a process table with filters, actions and a usage chart."""

from __future__ import annotations

import argparse
import tkinter as tk
from collections.abc import Sequence
from tkinter import messagebox, ttk

from lpmgui.actions import PRIORITY_MAX, PRIORITY_MIN, kill_process, pause_processes, set_priority
from lpmgui.procfs import ProcessInfo, SearchField, read_system_usage, take_snapshot
from lpmgui.stats import UPDATE_INTERVAL, Y_RANGE, UsageHistory

REFRESH_MS = UPDATE_INTERVAL * 1000
COLUMNS = ("PID", "Name", "CPU Usage", "Memory (MB)")

_DARK_THEME = {
    "background": "#2b2b2b",
    "foreground": "white",
    "button_background": "#3c3c3c",
    "button_foreground": "white",
}


def format_row(process: ProcessInfo) -> tuple[str, str, str, str]:
    """Table cells for one process: pid, name, CPU and memory to two decimals."""
    return (str(process.pid), process.name, f"{process.cpu:.2f}", f"{process.mem:.2f}")


def theme_colors(dark: bool) -> dict[str, str]:
    """Colours for the dark theme; an empty mapping means the toolkit defaults."""
    return dict(_DARK_THEME) if dark else {}


def _float_value(var: tk.Variable) -> float:
    try:
        return float(var.get())
    except (tk.TclError, ValueError):
        return 0.0


class StatsWindow:
    """A window charting whole-system CPU and memory usage over time."""

    def __init__(self, master: tk.Misc) -> None:
        from matplotlib.backends.backend_tkagg import FigureCanvasTkAgg
        from matplotlib.figure import Figure

        self.window = tk.Toplevel(master)
        self.window.title("CPU and Memory Usage Stats")
        self.window.geometry("600x400")
        self.window.protocol("WM_DELETE_WINDOW", self.close)

        self.history = UsageHistory()
        figure = Figure(figsize=(6, 4))
        self._axes = figure.add_subplot()
        (self._cpu_line,) = self._axes.plot([], [], label="CPU Usage")
        (self._mem_line,) = self._axes.plot([], [], label="Memory Usage")
        self._axes.set_title("CPU and Memory Usage Over Time")
        self._axes.set_xlabel("Time (seconds)")
        self._axes.set_ylabel("Usage (%)")
        self._axes.set_ylim(*Y_RANGE)
        self._axes.legend(loc="upper left")

        self._canvas = FigureCanvasTkAgg(figure, master=self.window)
        self._canvas.get_tk_widget().pack(fill=tk.BOTH, expand=True)
        ttk.Button(self.window, text="Close", command=self.close).pack(anchor=tk.E, padx=6, pady=6)

        self.window.after(REFRESH_MS, self._tick)

    def show(self) -> None:
        self.window.deiconify()
        self.window.lift()

    def close(self) -> None:
        self.window.withdraw()

    def _tick(self) -> None:
        self.update_data()
        self.window.after(REFRESH_MS, self._tick)

    def update_data(self) -> None:
        """Take one usage sample and redraw the chart."""
        self.history.record(read_system_usage())
        for line, points in ((self._cpu_line, self.history.cpu_points),
                             (self._mem_line, self.history.mem_points)):
            line.set_data([t for t, _ in points], [v for _, v in points])
        low, high = self.history.x_range()
        if high > low:
            self._axes.set_xlim(low, high)
        self._axes.set_ylim(*Y_RANGE)
        self._canvas.draw_idle()


class ProcessManager:
    """The main window: searchable, sortable process table and process actions."""

    def __init__(self, root: tk.Tk) -> None:
        self.root = root
        self.dark_mode = False
        self.sort_by_cpu = True
        self._stats_window: StatsWindow | None = None

        self._style = ttk.Style(root)
        self._default_colors = {
            "background": self._style.lookup(".", "background"),
            "foreground": self._style.lookup(".", "foreground"),
            "button_background": self._style.lookup("TButton", "background"),
            "button_foreground": self._style.lookup("TButton", "foreground"),
        }
        self._default_root_bg = root.cget("background")

        frame = ttk.Frame(root, padding=6)
        frame.pack(fill=tk.BOTH, expand=True)

        self.search_var = tk.StringVar()
        self.search_type_var = tk.StringVar(value=SearchField.NAME.value)
        search_row = ttk.Frame(frame)
        search_row.pack(fill=tk.X)
        ttk.Label(search_row, text="Search by: ").pack(side=tk.LEFT)
        ttk.Combobox(
            search_row,
            textvariable=self.search_type_var,
            values=[f.value for f in SearchField],
            state="readonly",
            width=6,
        ).pack(side=tk.LEFT)
        ttk.Entry(search_row, textvariable=self.search_var).pack(side=tk.LEFT, fill=tk.X, expand=True)

        self.cpu_min_var = tk.DoubleVar(value=0.0)
        self.mem_min_var = tk.DoubleVar(value=0.0)
        threshold_row = ttk.Frame(frame)
        threshold_row.pack(fill=tk.X, pady=4)
        ttk.Label(threshold_row, text="Min CPU: ").pack(side=tk.LEFT)
        ttk.Spinbox(threshold_row, from_=0, to=1000, textvariable=self.cpu_min_var, width=8).pack(side=tk.LEFT)
        ttk.Label(threshold_row, text=" s").pack(side=tk.LEFT, padx=(0, 20))
        ttk.Label(threshold_row, text="Min Mem: ").pack(side=tk.LEFT)
        ttk.Spinbox(threshold_row, from_=0, to=1e6, textvariable=self.mem_min_var, width=10).pack(side=tk.LEFT)
        ttk.Label(threshold_row, text=" MB").pack(side=tk.LEFT)

        self.table = ttk.Treeview(frame, columns=COLUMNS, show="headings", selectmode="extended")
        for column in COLUMNS:
            self.table.heading(column, text=column)
            self.table.column(column, stretch=True)
        self.table.pack(fill=tk.BOTH, expand=True)

        self.total_cpu_label = ttk.Label(frame, text="Total CPU Usage: --")
        self.total_mem_label = ttk.Label(frame, text="Total Memory Usage: --")
        self.cpu_percent_label = ttk.Label(frame, text="CPU %: --")
        self.mem_percent_label = ttk.Label(frame, text="Memory %: --")
        for label in (self.total_cpu_label, self.total_mem_label,
                      self.cpu_percent_label, self.mem_percent_label):
            label.pack(anchor=tk.W)

        self.priority_var = tk.IntVar(value=0)
        buttons = ttk.Frame(frame)
        buttons.pack(fill=tk.X, pady=4)
        for text, command in (
            ("Switch Dark/Light Mode", self.toggle_dark_light_mode),
            ("Switch sorting by CPU/Memory Usage", self.toggle_sort_mode),
            ("Kill Selected Process", self.kill_selected_process),
            ("Stats and Graphs", self.show_stats_window),
            ("Set process priority", self.set_process_priority),
        ):
            ttk.Button(buttons, text=text, command=command).pack(side=tk.LEFT)
        ttk.Label(buttons, text="Priority: ").pack(side=tk.LEFT)
        ttk.Spinbox(
            buttons, from_=PRIORITY_MIN, to=PRIORITY_MAX, textvariable=self.priority_var, width=4
        ).pack(side=tk.LEFT)
        ttk.Button(buttons, text="Pause Selected Process", command=self.pause_selected_processes).pack(side=tk.LEFT)

        for var in (self.search_var, self.search_type_var, self.cpu_min_var, self.mem_min_var):
            var.trace_add("write", lambda *_: self.update_process_list())

        self.update_process_list()
        self.root.after(REFRESH_MS, self._tick)

    def _tick(self) -> None:
        self.update_process_list()
        self.root.after(REFRESH_MS, self._tick)

    def _selected_pids(self) -> list[int]:
        return [int(self.table.set(item, "PID")) for item in self.table.selection()]

    def update_process_list(self) -> None:
        """Reread the process table and the summary labels."""
        snapshot = take_snapshot(
            query=self.search_var.get(),
            field=self.search_type_var.get() or SearchField.NAME,
            cpu_min=_float_value(self.cpu_min_var),
            mem_min=_float_value(self.mem_min_var),
            sort_by_cpu=self.sort_by_cpu,
        )
        self.table.delete(*self.table.get_children())
        for process in snapshot.processes:
            self.table.insert("", tk.END, values=format_row(process))

        self.total_cpu_label.configure(text=f"Total CPU Usage: {snapshot.total_cpu:.2f}")
        self.total_mem_label.configure(text=f"Total Memory Usage: {snapshot.total_mem:.2f} MB")
        self.cpu_percent_label.configure(text=f"CPU %: {snapshot.usage.cpu_percent:.2f}%")
        self.mem_percent_label.configure(text=f"Memory %: {snapshot.usage.mem_percent:.2f}%")

    def kill_selected_process(self) -> None:
        """Kill the first selected process, if any."""
        pids = self._selected_pids()
        if not pids:
            return
        try:
            kill_process(pids[0])
        except OSError:
            messagebox.showwarning("Error", "Failed to kill process.", parent=self.root)
        else:
            messagebox.showinfo("Success", "Process killed successfully.", parent=self.root)

    def toggle_dark_light_mode(self) -> None:
        self.dark_mode = not self.dark_mode
        self._apply_theme()

    def _apply_theme(self) -> None:
        colors = theme_colors(self.dark_mode) or self._default_colors
        self._style.configure(".", background=colors["background"], foreground=colors["foreground"])
        self._style.configure(
            "TButton", background=colors["button_background"], foreground=colors["button_foreground"]
        )
        self.root.configure(background=colors["background"] if self.dark_mode else self._default_root_bg)

    def toggle_sort_mode(self) -> None:
        self.sort_by_cpu = not self.sort_by_cpu
        self.update_process_list()

    def show_stats_window(self) -> None:
        if self._stats_window is None:
            self._stats_window = StatsWindow(self.root)
        self._stats_window.show()

    def set_process_priority(self) -> None:
        """Set the chosen nice value on the first selected process."""
        pids = self._selected_pids()
        if not pids:
            messagebox.showwarning("Nothing selected", "Please select a process", parent=self.root)
            return
        try:
            set_priority(pids[0], int(self.priority_var.get()))
        except (OSError, ValueError, tk.TclError):
            messagebox.showwarning("Fail", "Failed to change priority.", parent=self.root)
        else:
            messagebox.showinfo("Success", "Priority changed!", parent=self.root)

    def pause_selected_processes(self) -> None:
        """Stop every selected process and report which ones succeeded."""
        pids = self._selected_pids()
        if not pids:
            messagebox.showwarning(
                "Nothing selected", "Please select one or more processes to pause.", parent=self.root
            )
            return
        result = pause_processes(pids)
        if result.succeeded:
            messagebox.showinfo(
                "Paused", "Paused processes: " + ", ".join(map(str, result.succeeded)), parent=self.root
            )
        if result.failed:
            messagebox.showwarning(
                "Error", "Failed to pause: " + ", ".join(map(str, result.failed)), parent=self.root
            )


def main(argv: Sequence[str] | None = None) -> int:
    """Open the process manager window and run until it is closed."""
    parser = argparse.ArgumentParser(prog="lpmgui", description="Graphical process manager.")
    parser.parse_args(argv)
    root = tk.Tk()
    root.title("lpm_gui")
    ProcessManager(root)
    root.mainloop()
    return 0