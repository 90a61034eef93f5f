from lpmgui.procfs import SystemUsage
from lpmgui.stats import UPDATE_INTERVAL, Y_RANGE, UsageHistory


def test_empty_history_range():
    history = UsageHistory()
    assert history.x_range() == (0, 0)
    assert history.cpu_points == []


def test_record_appends_values_at_increasing_times():
    history = UsageHistory()
    samples = [SystemUsage(10.0, 50.0), SystemUsage(20.0, 60.0), SystemUsage(30.0, 70.0)]
    for sample in samples:
        history.record(sample)
    assert [x for x, _ in history.cpu_points] == [0, 2, 4]
    assert [y for _, y in history.cpu_points] == [s.cpu_percent for s in samples]
    assert [y for _, y in history.mem_points] == [s.mem_percent for s in samples]
    assert history.x_range() == (0, 4)


def test_default_interval_matches_timer():
    history = UsageHistory()
    history.record(SystemUsage(1.0, 1.0))
    assert history.elapsed == UPDATE_INTERVAL
    assert Y_RANGE == (0, 100)


def test_custom_interval():
    history = UsageHistory(interval=5)
    history.record(SystemUsage(1.0, 2.0))
    history.record(SystemUsage(3.0, 4.0))
    assert [x for x, _ in history.mem_points] == [0, 5]
    assert history.x_range() == (0, 5)
    assert history.elapsed == 10