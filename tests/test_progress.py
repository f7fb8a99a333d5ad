from datetime import date, datetime, timedelta

import pytest

from rebound.insights.progress import CompletedTask, summarize_progress
from rebound.models.task import DailyLog

NOW = datetime(2026, 10, 19, 12, 0)


def _done(task_id, days_ago, **kwargs):
    return CompletedTask(task_id=task_id, completed_at=NOW - days_ago, **kwargs)


def test_window_boundaries_are_inclusive():
    completed = [
        _done("exactly-7", timedelta(days=7)),
        _done("just-past-7", timedelta(days=7, seconds=1)),
        _done("exactly-30", timedelta(days=30)),
        _done("just-past-30", timedelta(days=30, seconds=1)),
        _done("today", timedelta(hours=2)),
    ]
    summary = summarize_progress(completed, [], NOW)
    assert summary.total_completed == 5
    assert summary.last_7_days == 2
    assert summary.last_30_days == 4


def test_recent_completions_are_latest_twenty_newest_first():
    completed = [_done(f"t{i}", timedelta(days=25 - i)) for i in range(25)]
    summary = summarize_progress(list(reversed(completed)), [], NOW)
    ids = [c.task_id for c in summary.recent_completions]
    assert len(ids) == 20
    assert ids[0] == "t24"
    assert ids[-1] == "t5"


def test_stress_trend_keeps_thirty_newest_logs():
    start = date(2026, 8, 1)
    logs = [
        DailyLog(stress_level=(i % 10) + 1, available_time=2, log_date=start + timedelta(days=i))
        for i in range(40)
    ]
    summary = summarize_progress([], logs, NOW)
    assert len(summary.stress_trend) == 30
    assert summary.stress_trend[0].log_date == start + timedelta(days=39)
    assert summary.stress_trend[-1].log_date == start + timedelta(days=10)


def test_empty_progress():
    summary = summarize_progress([], [], NOW)
    assert summary.to_dict() == {
        'totalCompleted': 0,
        'last7Days': 0,
        'last30Days': 0,
        'completedTasks': [],
        'stressTrend': [],
    }


def test_completed_task_from_record():
    entry = CompletedTask.from_record({
        'task': "t9",
        'completedAt': "2026-10-18T09:30:00Z",
        'taskSnapshot': {'title': "Lab write-up", 'subject': "bio", 'weightage': 15, 'type': "Lab"},
    })
    assert entry.completed_at == datetime(2026, 10, 18, 9, 30)
    assert entry.weight == 15.0
    assert entry.task_type == "Lab"

    assert CompletedTask.from_record({'task': "t1", 'completedAt': "2026-10-18"}).completed_at == \
        datetime(2026, 10, 18)


@pytest.mark.parametrize("record", [
    {'completedAt': "2026-10-18"},
    {'task': "t1"},
    {'task': "t1", 'completedAt': 1760000000000},
])
def test_completed_task_rejects_bad_records(record):
    with pytest.raises(ValueError):
        CompletedTask.from_record(record)
