"""Perspective check: a reality check on how bad today actually is."""

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Iterable, List

from ..models.task import Task, TaskStatus
from ..utils.datetime_utils import to_datetime

HIGH_PRIORITY_WEIGHT = 20


@dataclass
class PerspectiveAnalysis:
    priority: str
    situation: str
    reality: str
    suggestions: List[str] = field(default_factory=list)
    encouragement: str = ""


def analyze_perspective(
    stress_level: int,
    tasks: Iterable[Task],
    available_time: float,
    now: datetime,
) -> PerspectiveAnalysis:
    """Pick the first situation that matches the student's stress and workload."""
    pending = [t for t in tasks if t.status != TaskStatus.COMPLETED]
    total_hours = sum(t.estimated_minutes or 60 for t in pending) / 60
    urgent = [t for t in pending if to_datetime(t.due_date) - now <= timedelta(hours=24)]
    high_priority = [t for t in pending if t.weight >= HIGH_PRIORITY_WEIGHT]

    if stress_level >= 8 and len(urgent) > 3:
        return PerspectiveAnalysis(
            priority='critical',
            situation=f"You're feeling very stressed ({stress_level}/10) with {len(urgent)} urgent tasks.",
            reality="This is a genuinely challenging situation. Your stress is valid.",
            suggestions=[
                "Identify the 1-2 most critical tasks that MUST be done today",
                "For other tasks, reach out to instructors about extensions",
                "Take a 5-minute breathing break before starting",
                "Consider asking a friend or tutor for help",
            ],
            encouragement="You're in a tough spot, but you can get through this. Focus on what's truly essential.",
        )

    if total_hours > available_time * 2:
        return PerspectiveAnalysis(
            priority='high',
            situation=f"You have {total_hours:.1f}h of work but only {available_time}h available.",
            reality="Mathematically, you can't complete everything. That's okay - let's prioritize.",
            suggestions=[
                f"Focus on high-weightage tasks first ({len(high_priority)} tasks)",
                "Identify tasks where you can request extensions",
                "Break down large tasks into smaller chunks",
                'Consider which tasks you can do "good enough" vs perfect',
            ],
            encouragement="Quality over quantity. Do your best work on what matters most.",
        )

    if stress_level >= 7 and len(pending) <= 3:
        return PerspectiveAnalysis(
            priority='medium',
            situation=f"You're stressed ({stress_level}/10) but only have {len(pending)} tasks.",
            reality="Your workload is manageable. The stress might be coming from perfectionism or other factors.",
            suggestions=[
                "Remember: done is better than perfect",
                "Break tasks into 25-minute focused sessions",
                "Take breaks between tasks",
                "Consider if non-academic factors are adding to stress",
            ],
            encouragement="You've got this. The workload is reasonable - trust yourself.",
        )

    if total_hours <= available_time and stress_level <= 5:
        return PerspectiveAnalysis(
            priority='low',
            situation=f"You have {len(pending)} tasks and {available_time}h available.",
            reality="Your schedule is realistic and manageable.",
            suggestions=[
                "Create a simple schedule for when you'll tackle each task",
                "Start with the hardest task while you're fresh",
                "Build in buffer time for unexpected issues",
                "Remember to take breaks",
            ],
            encouragement="You're in a good position. Stay organized and you'll do great!",
        )

    return PerspectiveAnalysis(
        priority='normal',
        situation=f"You have {len(pending)} pending tasks with stress at {stress_level}/10.",
        reality="This is a normal academic workload. You can handle this.",
        suggestions=[
            "Prioritize tasks by due date and importance",
            "Use the Pomodoro technique (25 min work, 5 min break)",
            "Start with one task and build momentum",
            "Celebrate small wins along the way",
        ],
        encouragement="You're doing fine. One task at a time, and you'll get through it.",
    )
