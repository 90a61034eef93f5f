import os
import signal
from unittest import mock

import pytest

from lpmgui.actions import PRIORITY_MAX, PRIORITY_MIN, PauseResult, kill_process, pause_processes, set_priority


def test_kill_process_sends_sigkill():
    sent = []

    def fake_kill(pid, sig):
        sent.append((pid, sig))

    with mock.patch("lpmgui.actions.os.kill", side_effect=fake_kill):
        outcome = kill_process(123)
    assert outcome is None
    assert sent == [(123, signal.SIGKILL)]


def test_kill_process_propagates_failure():
    with mock.patch("lpmgui.actions.os.kill", side_effect=PermissionError):
        with pytest.raises(PermissionError):
            kill_process(1)


def test_set_priority_rejects_out_of_range():
    with pytest.raises(ValueError):
        set_priority(1, PRIORITY_MAX + 1)
    with pytest.raises(ValueError):
        set_priority(1, PRIORITY_MIN - 1)


def test_set_priority_calls_setpriority():
    calls = []

    def fake_setpriority(which, who, prio):
        calls.append((which, who, prio))

    with mock.patch("lpmgui.actions.os.setpriority", side_effect=fake_setpriority):
        outcome = set_priority(123, 5)
    assert outcome is None
    assert calls == [(os.PRIO_PROCESS, 123, 5)]


def test_set_priority_on_self_keeps_current_value():
    current = os.getpriority(os.PRIO_PROCESS, 0)
    set_priority(os.getpid(), current)
    assert os.getpriority(os.PRIO_PROCESS, 0) == current


def test_pause_processes_reports_success_and_failure():
    def fake_kill(pid, sig):
        assert sig == signal.SIGSTOP
        if pid == 7:
            raise ProcessLookupError

    with mock.patch("lpmgui.actions.os.kill", side_effect=fake_kill):
        result = pause_processes([5, 7, 9])
    assert result == PauseResult(succeeded=(5, 9), failed=(7,))


def test_pause_processes_collapses_duplicates():
    with mock.patch("lpmgui.actions.os.kill") as fake_kill:
        result = pause_processes([4, 4, 4])
    assert fake_kill.call_count == 1
    assert result.succeeded == (4,)
    assert result.failed == ()


def test_pause_processes_requires_selection():
    with pytest.raises(ValueError):
        pause_processes([])