"""Main entry point for the REBOUND recovery engine."""

import argparse
import json
import logging
from dataclasses import asdict
from datetime import date, datetime
from pathlib import Path

from rebound.engine.planner import RecoveryPlanner
from rebound.insights.breakdown import breakdown_task
from rebound.insights.perspective import analyze_perspective
from rebound.insights.progress import CompletedTask, summarize_progress
from rebound.insights.workload import calculate_daily_workload, get_workload_warning
from rebound.models.risk import RiskInput
from rebound.models.task import DailyLog, Task
from rebound.risk.aggregation import build_risk_input
from rebound.risk.assessor import assess_risk
from rebound.utils.config import load_config, get_default_config


def _load_input(input_path: str) -> dict:
    """Read a JSON request body from disk."""
    path = Path(input_path)
    if not path.exists():
        raise FileNotFoundError(f"Input file not found: {input_path}")
    with open(path, 'r') as f:
        return json.load(f)


def _load_tasks(data: dict):
    return [Task.from_record(record) for record in data.get('tasks', [])]


def run_plan(config: dict, data: dict, today: date):
    """Build and save a recovery plan."""
    if 'dailyLog' not in data:
        raise ValueError("Input must contain a 'dailyLog' to build a plan")

    tasks = _load_tasks(data)
    daily_log = DailyLog.from_record(data['dailyLog'])

    planner = RecoveryPlanner(config)
    plan, trace = planner.build_plan(tasks, daily_log, today)

    print(f"\nStrategy: {plan.strategy}")
    print(f"Allowed hours: {plan.allowed_hours:.2f}")
    print(f"Recommended {len(plan.recommended_tasks)} of {len(plan.all_tasks_scored)} tasks")
    for scored in plan.recommended_tasks:
        print(f"  {scored.priority_score:>3}  {scored.task.title or scored.task_id}")

    results_dir = Path("results")
    results_dir.mkdir(exist_ok=True)

    plan_path = results_dir / f"plan_{trace.run_id}.json"
    with open(plan_path, 'w') as f:
        json.dump(plan.to_dict(), f, indent=2, default=str)

    log_path = results_dir / f"plan_{trace.run_id}.log"
    with open(log_path, 'w') as f:
        f.write(trace.to_human_readable())

    print(f"\nPlan saved to: {plan_path}")
    print(f"Human-readable trace saved to: {log_path}")

    return plan, trace


def run_assess(config: dict, data: dict, now: datetime):
    """Classify a student's risk from a ready aggregate or raw tasks and logs."""
    if 'stressHistory' in data:
        risk_input = RiskInput.from_dict(data)
    else:
        logs = [DailyLog.from_record(record) for record in data.get('logs', [])]
        history_days = config.get('risk', {}).get('history_days', 7)
        risk_input = build_risk_input(_load_tasks(data), logs, now, history_days)

    level = assess_risk(risk_input)

    print(f"\nRisk level: {level.value}")
    print(f"  Current stress: {risk_input.current_stress}")
    print(f"  Missed tasks: {risk_input.missed_tasks_count}")
    print(f"  Overdue tasks: {risk_input.overdue_tasks_count}")
    print(f"  Backlog depth: {risk_input.backlog_depth_days}")

    return level


def run_workload(data: dict, now: datetime):
    """Report today's workload, a warning and a perspective check."""
    tasks = _load_tasks(data)
    daily_log = DailyLog.from_record(data['dailyLog']) if 'dailyLog' in data else None

    workload = calculate_daily_workload(tasks, now)
    print(f"\nDue today: {workload.task_count} tasks, {workload.total_hours}h")
    if not workload.is_realistic:
        print("  More than 8 hours of work is due today")

    if daily_log is None:
        return workload, None, None

    warning = get_workload_warning(workload.total_hours, daily_log.available_time)
    print(f"[{warning.level.upper()}] {warning.message}")

    perspective = analyze_perspective(daily_log.stress_level, tasks, daily_log.available_time, now)
    print(f"\nPerspective ({perspective.priority}):")
    print(f"  {perspective.situation}")
    print(f"  {perspective.reality}")
    for suggestion in perspective.suggestions:
        print(f"  - {suggestion}")
    print(f"  {perspective.encouragement}")

    return workload, warning, perspective


def run_progress(data: dict, now: datetime):
    """Summarize completions and the recent stress trend."""
    completed = [CompletedTask.from_record(record) for record in data.get('completed', [])]
    logs = [DailyLog.from_record(record) for record in data.get('logs', [])]

    summary = summarize_progress(completed, logs, now)

    print(f"\nCompleted: {summary.total_completed} total, "
          f"{summary.last_7_days} in 7 days, {summary.last_30_days} in 30 days")
    if summary.stress_trend:
        levels = ", ".join(str(p.stress_level) for p in reversed(summary.stress_trend))
        print(f"Stress trend (oldest first): {levels}")

    return summary


def run_breakdown(title: str, detail_level: int):
    """Print templated subtasks for a task title."""
    breakdown = breakdown_task(title, detail_level)
    print(f"\n{title} ({breakdown.task_type}), ~{breakdown.total_estimated_minutes} min")
    for subtask in breakdown.subtasks:
        print(f"  [ ] {subtask.title} ({subtask.estimated_minutes} min)")

    results_dir = Path("results")
    results_dir.mkdir(exist_ok=True)
    with open(results_dir / "breakdown.json", 'w') as f:
        json.dump(asdict(breakdown), f, indent=2)

    return breakdown


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="REBOUND recovery engine"
    )
    parser.add_argument(
        'command',
        choices=['plan', 'assess', 'workload', 'progress', 'breakdown'],
        help='Command to run'
    )
    parser.add_argument(
        '--config',
        type=str,
        default='config.yaml',
        help='Path to configuration file (default: config.yaml)'
    )
    parser.add_argument(
        '--input',
        type=str,
        help='Path to a JSON input file (plan, assess, workload, progress)'
    )
    parser.add_argument(
        '--today',
        type=str,
        help='Reference date as YYYY-MM-DD (default: current date)'
    )
    parser.add_argument(
        '--title',
        type=str,
        help='Task title to break down (breakdown)'
    )
    parser.add_argument(
        '--detail',
        type=int,
        choices=[1, 2, 3],
        default=2,
        help='Breakdown detail level (default: 2)'
    )
    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Enable debug logging'
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )

    config = load_config(args.config) if Path(args.config).exists() else get_default_config()

    if args.today:
        now = datetime.combine(date.fromisoformat(args.today), datetime.now().time())
    else:
        now = datetime.now()

    if args.command == 'breakdown':
        if not args.title:
            parser.error("breakdown requires --title")
        run_breakdown(args.title, args.detail)
        return

    if not args.input:
        parser.error(f"{args.command} requires --input")
    data = _load_input(args.input)

    if args.command == 'plan':
        run_plan(config, data, now.date())
    elif args.command == 'assess':
        run_assess(config, data, now)
    elif args.command == 'workload':
        run_workload(data, now)
    elif args.command == 'progress':
        run_progress(data, now)


if __name__ == "__main__":
    main()
