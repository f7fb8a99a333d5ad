"""Rule-based breakdown of academic tasks into smaller steps."""

import math
from dataclasses import dataclass
from typing import List, Tuple, Union

Minutes = Union[int, float]

BREAKDOWN_TEMPLATES = {
    'research paper': [
        ("Choose and narrow down topic", 30),
        ("Research and gather sources", 90),
        ("Create detailed outline", 45),
        ("Write introduction", 30),
        ("Write body paragraphs", 120),
        ("Write conclusion", 30),
        ("Edit and proofread", 60),
        ("Format citations and bibliography", 30),
    ],
    'exam prep': [
        ("Review lecture notes and materials", 60),
        ("Create summary notes or flashcards", 45),
        ("Practice problems or past papers", 90),
        ("Review difficult concepts", 45),
        ("Take practice test", 60),
        ("Review mistakes and gaps", 30),
    ],
    'study': [
        ("Review class notes", 30),
        ("Read assigned chapters", 60),
        ("Create summary notes", 30),
        ("Practice exercises", 45),
    ],
    'project': [
        ("Understand requirements", 20),
        ("Plan and outline approach", 30),
        ("Research and gather materials", 60),
        ("Create first draft/prototype", 120),
        ("Review and refine", 60),
        ("Final polish and testing", 45),
    ],
    'assignment': [
        ("Read and understand instructions", 15),
        ("Gather necessary materials", 20),
        ("Complete main work", 90),
        ("Review and check answers", 30),
    ],
    'presentation': [
        ("Research topic thoroughly", 60),
        ("Create outline and structure", 30),
        ("Design slides", 60),
        ("Write speaker notes", 30),
        ("Practice delivery", 45),
        ("Final review and adjustments", 20),
    ],
    'lab report': [
        ("Review experiment data", 20),
        ("Write introduction and hypothesis", 30),
        ("Document methods and procedures", 30),
        ("Analyze results and create graphs", 60),
        ("Write discussion and conclusion", 45),
        ("Proofread and format", 30),
    ],
}

# Checked in order, first keyword hit wins
TYPE_KEYWORDS = [
    ('research paper', ('paper', 'essay')),
    ('exam prep', ('exam', 'test', 'quiz')),
    ('study', ('study', 'review')),
    ('project', ('project',)),
    ('presentation', ('presentation', 'present')),
    ('lab report', ('lab', 'experiment')),
    ('assignment', ('assignment', 'homework')),
]

SPLIT_THRESHOLD_MINUTES = 60
SPLIT_CHUNK_MINUTES = 45


@dataclass
class Subtask:
    subtask_id: str
    title: str
    estimated_minutes: Minutes
    completed: bool = False


@dataclass
class TaskBreakdown:
    task_type: str
    subtasks: List[Subtask]

    @property
    def total_estimated_minutes(self) -> Minutes:
        return sum(s.estimated_minutes for s in self.subtasks)


def detect_task_type(title: str) -> str:
    """Guess the breakdown template from keywords in the title."""
    lower = title.lower()
    for task_type, keywords in TYPE_KEYWORDS:
        if any(keyword in lower for keyword in keywords):
            return task_type
    return 'assignment'


def adjust_for_detail(steps: List[Tuple[str, int]], detail_level: int) -> List[Tuple[str, Minutes]]:
    """Coarsen (level 1) or refine (level 3) a template; level 2 is unchanged."""
    if detail_level == 1:
        return [
            (title, minutes * 1.5)
            for idx, (title, minutes) in enumerate(steps)
            if idx % 2 == 0
        ]

    if detail_level == 3:
        detailed = []
        for title, minutes in steps:
            if minutes > SPLIT_THRESHOLD_MINUTES:
                parts = math.ceil(minutes / SPLIT_CHUNK_MINUTES)
                for i in range(parts):
                    detailed.append((f"{title} - Part {i + 1}", math.ceil(minutes / parts)))
            else:
                detailed.append((title, minutes))
        return detailed

    return list(steps)


def breakdown_task(title: str, detail_level: int = 2) -> TaskBreakdown:
    """Split a task into templated subtasks."""
    task_type = detect_task_type(title)
    steps = adjust_for_detail(BREAKDOWN_TEMPLATES[task_type], detail_level)

    return TaskBreakdown(
        task_type=task_type,
        subtasks=[
            Subtask(subtask_id=f"subtask-{idx}", title=step, estimated_minutes=minutes)
            for idx, (step, minutes) in enumerate(steps)
        ],
    )
