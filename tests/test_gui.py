import pytest

from lpmgui.gui import format_row, main, theme_colors
from lpmgui.procfs import ProcessInfo


def test_format_row_cells_in_column_order():
    row = format_row(ProcessInfo(pid=42, name="bash", cpu=3.0, mem=12.5))
    assert row == ("42", "bash", "3.00", "12.50")


@pytest.mark.parametrize(
    "process",
    [
        ProcessInfo(pid=1, name="init", cpu=0.0, mem=0.0),
        ProcessInfo(pid=4321, name="some worker", cpu=123.456, mem=7.891),
        ProcessInfo(pid=99999, name="", cpu=0.005, mem=1024.0),
    ],
)
def test_format_row_round_trips_within_two_decimals(process):
    pid, name, cpu, mem = format_row(process)
    assert int(pid) == process.pid
    assert name == process.name
    assert abs(float(cpu) - process.cpu) <= 0.005 + 1e-9
    assert abs(float(mem) - process.mem) <= 0.005 + 1e-9
    assert len(cpu.split(".")[1]) == 2
    assert len(mem.split(".")[1]) == 2


def test_dark_theme_uses_source_colours():
    colors = theme_colors(True)
    assert colors["background"] == "#2b2b2b"
    assert colors["button_background"] == "#3c3c3c"
    assert colors["foreground"] == "white"
    assert colors["button_foreground"] == "white"


def test_light_theme_falls_back_to_defaults():
    assert theme_colors(False) == {}


def test_theme_colors_returns_independent_copies():
    first = theme_colors(True)
    first["background"] = "red"
    assert theme_colors(True)["background"] == "#2b2b2b"


def test_main_rejects_unknown_options():
    with pytest.raises(SystemExit) as excinfo:
        main(["--no-such-option"])
    assert excinfo.value.code == 2