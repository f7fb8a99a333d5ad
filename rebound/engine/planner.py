"""Recovery plan builder."""

import logging
import uuid
from datetime import date, datetime
from typing import Dict, List, Optional, Tuple

from ..models.plan import PlanDecision, PlanTrace, RecoveryPlan, ScoredTask
from ..models.task import DailyLog, Task
from ..scoring.capacity import get_stress_adjustment
from ..scoring.priority import PriorityScorer, compute_priority_components, count_subject_backlog
from ..utils.config import get_default_config
from ..utils.datetime_utils import DateLike

logger = logging.getLogger(__name__)


class RecoveryPlanner:
    """Scores open tasks and time-boxes the best of them into today's budget."""

    def __init__(self, config: Optional[dict] = None):
        """Initialize planner with configuration."""
        self.config = config or get_default_config()
        self.scorer = PriorityScorer(self.config)
        self.stress_bands = self.config.get('stress_bands')
        self.planning_config = self.config.get('planning', {})
        self.task_hours = self.planning_config.get('task_hours', 1.0)
        self.use_estimated_duration = self.planning_config.get('use_estimated_duration', False)
        self.emergency_stress = self.planning_config.get('emergency_stress', 9)

    def build_plan(
        self,
        tasks: List[Task],
        daily_log: DailyLog,
        today: DateLike,
    ) -> Tuple[RecoveryPlan, PlanTrace]:
        """Build a recovery plan for one student and day.

        The caller is expected to pass only non-completed tasks; no status
        filtering happens here. Identical inputs always give an identical plan.
        """
        run_id = str(uuid.uuid4())[:8]
        stress = daily_log.stress_level

        backlog_counts = count_subject_backlog(tasks)

        scored: List[ScoredTask] = []
        for task in tasks:
            components = compute_priority_components(
                task, backlog_counts.get(task.subject_id, 0), stress, today
            )
            scored.append(ScoredTask(
                task=task,
                priority_score=self.scorer.combine(components),
                components=components,
            ))

        # sorted() is stable, so equal scores keep their input order
        ranked = sorted(scored, key=lambda st: -st.priority_score)

        adjustment = get_stress_adjustment(stress, daily_log.available_time, self.stress_bands)
        allowed_hours = adjustment.allowed_hours

        planned_hours = 0.0
        recommended: List[ScoredTask] = []
        decisions: List[PlanDecision] = []

        for scored_task in ranked:
            cost = self._task_cost(scored_task.task)

            if planned_hours + cost <= allowed_hours:
                recommended.append(scored_task)
                planned_hours += cost
                decisions.append(PlanDecision(
                    task_id=scored_task.task_id,
                    priority_score=scored_task.priority_score,
                    selected=True,
                    planned_hours_after=planned_hours,
                    reason="Fits within allowed hours",
                ))
            else:
                decisions.append(PlanDecision(
                    task_id=scored_task.task_id,
                    priority_score=scored_task.priority_score,
                    selected=False,
                    planned_hours_after=planned_hours,
                    reason=f"Needs {cost:.2f}h but only {allowed_hours - planned_hours:.2f}h left",
                    constraint_applied="capacity_exhausted",
                ))

        emergency_override = False
        if stress >= self.emergency_stress and not recommended and ranked:
            top = ranked[0]
            recommended.append(top)
            emergency_override = True
            decisions[0] = PlanDecision(
                task_id=top.task_id,
                priority_score=top.priority_score,
                selected=True,
                planned_hours_after=self._task_cost(top.task),
                reason="Forced in so at least one task stays actionable",
                constraint_applied="emergency_override",
            )
            logger.debug("Emergency override: forcing task %s into plan %s", top.task_id, run_id)

        logger.debug(
            "Plan %s: stress=%s allowed=%.2fh recommended=%d/%d",
            run_id, stress, allowed_hours, len(recommended), len(ranked),
        )

        plan = RecoveryPlan(
            strategy=adjustment.strategy,
            allowed_hours=allowed_hours,
            recommended_tasks=recommended,
            all_tasks_scored=ranked,
        )

        trace = PlanTrace(
            run_id=run_id,
            timestamp=datetime.now(),
            stress_level=stress,
            available_time=daily_log.available_time,
            factor=adjustment.factor,
            strategy=adjustment.strategy,
            config={
                'priority_weights': dict(self.scorer.weights),
                'task_hours': self.task_hours,
                'use_estimated_duration': self.use_estimated_duration,
                'today': str(today),
            },
            decisions=decisions,
            scored_components={st.task_id: st.components for st in ranked},
            summary_stats=self._compute_summary_stats(plan, emergency_override),
        )

        return plan, trace

    def _task_cost(self, task: Task) -> float:
        """Hours a task is assumed to take."""
        if self.use_estimated_duration:
            return task.estimated_minutes / 60.0
        return self.task_hours

    def _compute_summary_stats(self, plan: RecoveryPlan, emergency_override: bool) -> Dict[str, object]:
        """Compute summary statistics for the trace."""
        planned_hours = sum(self._task_cost(st.task) for st in plan.recommended_tasks)
        return {
            'tasks_total': len(plan.all_tasks_scored),
            'tasks_recommended': len(plan.recommended_tasks),
            'tasks_deferred': len(plan.all_tasks_scored) - len(plan.recommended_tasks),
            'planned_hours': planned_hours,
            'allowed_hours': plan.allowed_hours,
            'unused_hours': max(0.0, plan.allowed_hours - planned_hours),
            'emergency_override': emergency_override,
        }


def generate_recovery_plan(
    tasks: List[Task],
    daily_log: DailyLog,
    today: Optional[DateLike] = None,
    config: Optional[dict] = None,
) -> RecoveryPlan:
    """Build a recovery plan, discarding the decision trace."""
    if today is None:
        today = date.today()
    plan, _ = RecoveryPlanner(config).build_plan(tasks, daily_log, today)
    return plan
