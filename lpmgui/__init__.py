"""Graphical Linux process manager: procfs reading, process actions and a Tk window."""

__version__ = "0.1.0"