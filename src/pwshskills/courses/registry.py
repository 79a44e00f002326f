"""The fixed course sequence."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from pwshskills.engine.progress import ProgressSource, StaticProgressSource

ROOT_DIRECTORY = "."
TOTAL_STEPS = 5

# (name, directory) in course order
_COURSES: tuple[tuple[str, str], ...] = (
    ("Course 1: PowerShell Fundamentals", ROOT_DIRECTORY),
    ("Course 2: Pipelines & Filtering", "course-2-pipelines-filtering"),
    ("Course 3: Functions & Modules", "course-3-functions-modules"),
    ("Course 4: Automation & DevOps", "course-4-automation-devops"),
)


@dataclass(frozen=True)
class Course:
    name: str
    directory: str
    index: int
    current_step: int
    total_steps: int
    completed: bool

    @property
    def is_root(self) -> bool:
        return self.directory == ROOT_DIRECTORY


class CourseRegistry:
    """Materializes the course table, filling progress from a ProgressSource."""

    def __init__(self, progress_source: Optional[ProgressSource] = None):
        self.progress_source = progress_source or StaticProgressSource()

    def list_courses(self) -> list[Course]:
        return [
            Course(
                name=name,
                directory=directory,
                index=i,
                current_step=self.progress_source.current_step(directory),
                total_steps=TOTAL_STEPS,
                completed=self.progress_source.is_completed(directory),
            )
            for i, (name, directory) in enumerate(_COURSES)
        ]

    def get(self, index: int) -> Course | None:
        courses = self.list_courses()
        if 0 <= index < len(courses):
            return courses[index]
        return None
