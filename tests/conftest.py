from datetime import date, timedelta

import pytest

from rebound.models.task import Task, TaskStatus

TODAY = date(2026, 10, 19)


@pytest.fixture
def today():
    return TODAY


@pytest.fixture
def make_task():
    """Factory for tasks due a number of days from TODAY."""
    def _make(task_id, due_in_days=7, weight=0.0, subject_id="math",
              status=TaskStatus.PENDING, **kwargs):
        return Task(
            task_id=task_id,
            subject_id=subject_id,
            due_date=TODAY + timedelta(days=due_in_days),
            weight=weight,
            status=status,
            **kwargs,
        )
    return _make
