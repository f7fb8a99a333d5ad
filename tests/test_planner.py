import pytest

from rebound.engine.planner import RecoveryPlanner, generate_recovery_plan
from rebound.models.task import DailyLog, TaskStatus
from rebound.utils.config import get_default_config, merge_config


def _ids(scored_tasks):
    return [st.task_id for st in scored_tasks]


def test_two_task_plan_both_fit(make_task, today):
    task_a = make_task("A", due_in_days=14, weight=40, subject_id="X")
    task_b = make_task("B", due_in_days=1, weight=20, subject_id="Y")

    plan = generate_recovery_plan([task_a, task_b], DailyLog(stress_level=4, available_time=3), today)

    assert plan.allowed_hours == pytest.approx(2.4)
    assert plan.strategy.startswith("Balanced Recovery")
    # B: 7 + 15 + 2 + 9 = 33, A: 14 + 2 + 2 + 9 = 27
    assert [st.priority_score for st in plan.all_tasks_scored] == [33, 27]
    assert _ids(plan.recommended_tasks) == ["B", "A"]


def test_budget_limits_recommendations(make_task, today):
    tasks = [make_task(f"t{i}", due_in_days=i, weight=10) for i in range(5)]
    plan = generate_recovery_plan(tasks, DailyLog(stress_level=7, available_time=5), today)

    # 5h * 0.5 = 2.5h leaves room for two one-hour tasks
    assert len(plan.recommended_tasks) == 2
    assert _ids(plan.recommended_tasks) == _ids(plan.all_tasks_scored)[:2]
    assert len(plan.all_tasks_scored) == 5


def test_equal_scores_keep_input_order(make_task, today):
    tasks = [make_task(name, due_in_days=3, weight=25) for name in ("first", "second", "third")]
    plan = generate_recovery_plan(tasks, DailyLog(stress_level=2, available_time=10), today)
    assert _ids(plan.all_tasks_scored) == ["first", "second", "third"]

    plan = generate_recovery_plan(list(reversed(tasks)), DailyLog(stress_level=2, available_time=10), today)
    assert _ids(plan.all_tasks_scored) == ["third", "second", "first"]


def test_emergency_override_forces_top_task(make_task, today):
    tasks = [
        make_task("minor", due_in_days=20, weight=5),
        make_task("urgent", due_in_days=0, weight=30),
    ]
    planner = RecoveryPlanner()
    plan, trace = planner.build_plan(tasks, DailyLog(stress_level=9, available_time=4), today)

    # 4h * 0.2 = 0.8h, nothing fits
    assert plan.allowed_hours == pytest.approx(0.8)
    assert _ids(plan.recommended_tasks) == ["urgent"]
    assert trace.summary_stats['emergency_override'] is True
    assert trace.decisions[0].constraint_applied == "emergency_override"
    assert trace.decisions[1].constraint_applied == "capacity_exhausted"


def test_no_override_below_emergency_stress(make_task, today):
    tasks = [make_task("only", due_in_days=1, weight=50)]
    plan = generate_recovery_plan(tasks, DailyLog(stress_level=8, available_time=1), today)
    assert plan.recommended_tasks == []


def test_no_override_when_something_fits(make_task, today):
    tasks = [make_task("a", weight=10), make_task("b", weight=90)]
    plan, trace = RecoveryPlanner().build_plan(tasks, DailyLog(stress_level=10, available_time=5), today)
    assert _ids(plan.recommended_tasks) == ["b"]
    assert trace.summary_stats['emergency_override'] is False


def test_empty_task_list(today):
    plan, trace = RecoveryPlanner().build_plan([], DailyLog(stress_level=9, available_time=2), today)
    assert plan.recommended_tasks == []
    assert plan.all_tasks_scored == []
    assert trace.summary_stats['tasks_total'] == 0
    assert plan.to_dict()['allTasksScored'] == []


def test_statuses_are_not_filtered(make_task, today):
    tasks = [
        make_task("done", subject_id="math", status=TaskStatus.COMPLETED),
        make_task("open", subject_id="math"),
        make_task("late", subject_id="math", status=TaskStatus.MISSED),
    ]
    plan = generate_recovery_plan(tasks, DailyLog(stress_level=5, available_time=10), today)
    assert sorted(_ids(plan.all_tasks_scored)) == ["done", "late", "open"]
    # backlog for math is 2 (completed excluded) for every task in the subject
    assert {st.components['backlog'] for st in plan.all_tasks_scored} == {20.0}


def test_skipped_task_does_not_stop_the_walk(make_task, today):
    config = merge_config(get_default_config(), {'planning': {'use_estimated_duration': True}})
    tasks = [
        make_task("big", due_in_days=0, weight=80, estimated_minutes=120),
        make_task("small", due_in_days=5, weight=10, estimated_minutes=60),
    ]
    plan = generate_recovery_plan(tasks, DailyLog(stress_level=1, available_time=1.5), today, config)
    assert _ids(plan.all_tasks_scored) == ["big", "small"]
    assert _ids(plan.recommended_tasks) == ["small"]


def test_fixed_cost_ignores_estimated_duration(make_task, today):
    tasks = [
        make_task("big", due_in_days=0, weight=80, estimated_minutes=240),
        make_task("small", due_in_days=5, weight=10, estimated_minutes=60),
    ]
    plan = generate_recovery_plan(tasks, DailyLog(stress_level=1, available_time=2), today)
    assert _ids(plan.recommended_tasks) == ["big", "small"]


def test_repeated_calls_give_identical_plans(make_task, today):
    tasks = [make_task(f"t{i}", due_in_days=i - 2, weight=i * 7, subject_id=f"s{i % 2}") for i in range(6)]
    log = DailyLog(stress_level=6, available_time=4)
    first = generate_recovery_plan(tasks, log, today)
    second = generate_recovery_plan(tasks, log, today)
    assert first == second
    assert first.to_dict() == second.to_dict()


def test_plan_to_dict_shape(make_task, today):
    plan = generate_recovery_plan([make_task("a", weight=20)], DailyLog(stress_level=3, available_time=2), today)
    data = plan.to_dict()
    assert set(data) == {'strategy', 'allowedHours', 'recommendedTasks', 'allTasksScored'}
    record = data['recommendedTasks'][0]
    assert record['id'] == "a"
    assert record['subjectId'] == "math"
    assert record['status'] == "Pending"
    assert isinstance(record['priorityScore'], int)


def test_trace_is_human_readable(make_task, today):
    _, trace = RecoveryPlanner().build_plan(
        [make_task("a", weight=20, title="Essay")], DailyLog(stress_level=3, available_time=2), today
    )
    text = trace.to_human_readable()
    assert f"=== Recovery Plan Run: {trace.run_id} ===" in text
    assert "[+] a" in text
    assert trace.to_dict()['summary_stats']['tasks_recommended'] == 1


def test_trace_config_is_detached_from_scorer_weights(make_task, today):
    log = DailyLog(stress_level=4, available_time=3)
    tasks = [make_task("a", due_in_days=2, weight=40)]
    _, trace = RecoveryPlanner({}).build_plan(tasks, log, today)
    trace.config['priority_weights']['weight'] = 0.0

    plan, _ = RecoveryPlanner({}).build_plan(tasks, log, today)
    assert plan.all_tasks_scored[0].components['weight'] == 40.0
    assert RecoveryPlanner({}).scorer.weights['weight'] == 0.35
