"""Progress sources and the cross-course progress summary."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING

from pwshskills.config.settings import ProgressSourceKind
from pwshskills.exceptions import ProgressSourceUnavailable

if TYPE_CHECKING:
    from pwshskills.courses.registry import Course
    from pwshskills.engine.context import NavigationContext
    from pwshskills.engine.resolver import CourseResolver


class ProgressSource(ABC):
    """Where a course's step position and completion come from."""

    @abstractmethod
    def current_step(self, directory: str) -> int: ...

    @abstractmethod
    def is_completed(self, directory: str) -> bool: ...


class StaticProgressSource(ProgressSource):
    """Placeholder: every course sits on step 1 and is never completed."""

    def current_step(self, directory: str) -> int:
        return 1

    def is_completed(self, directory: str) -> bool:
        return False


def progress_source_for(kind: ProgressSourceKind) -> ProgressSource:
    if kind == ProgressSourceKind.STATIC:
        return StaticProgressSource()
    # TODO: read step position from git history / workflow run status
    raise ProgressSourceUnavailable(f"Progress source '{kind.value}' is not implemented.")


@dataclass
class ProgressSummary:
    completed: int
    total: int
    percentage: float


class ProgressAggregator:
    def __init__(self, resolver: "CourseResolver", minutes_per_step: int = 10):
        self.resolver = resolver
        self.minutes_per_step = minutes_per_step

    def summarize(self, ctx: "NavigationContext") -> ProgressSummary:
        """Completion counts over the detected courses."""
        courses = self.resolver.detected_courses(ctx)
        total = len(courses)
        completed = sum(1 for c in courses if c.completed)
        percentage = completed / total * 100 if total > 0 else 0.0
        return ProgressSummary(completed=completed, total=total, percentage=percentage)

    def estimated_minutes_remaining(self, course: "Course") -> int:
        if course.completed:
            return 0
        return (course.total_steps - course.current_step) * self.minutes_per_step


def progress_bar(course: "Course") -> str:
    return "".join(
        "█" if step <= course.current_step else "░"
        for step in range(1, course.total_steps + 1)
    )
