"""Current/next/previous course resolution.

Nothing is stored between calls: the current course is recomputed from the
filesystem as seen from the given NavigationContext every time.
"""

from __future__ import annotations

import logging
from typing import Optional

from pwshskills.courses.registry import Course, CourseRegistry
from pwshskills.engine.context import NavigationContext
from pwshskills.engine.probe import FilesystemProbe

logger = logging.getLogger(__name__)


class CourseResolver:
    def __init__(
        self,
        registry: Optional[CourseRegistry] = None,
        probe: Optional[FilesystemProbe] = None,
    ):
        self.registry = registry or CourseRegistry()
        self.probe = probe or FilesystemProbe()

    def detected_courses(self, ctx: NavigationContext) -> list[Course]:
        return [
            c for c in self.registry.list_courses()
            if self.probe.has_course_marker(ctx, c.directory)
        ]

    def current_course(self, ctx: NavigationContext) -> Optional[Course]:
        """Most specific course whose marker exists and whose directory we are in.

        Scans highest index first, so a course directory wins over the root
        when both would match.
        """
        for course in reversed(self.registry.list_courses()):
            if self.probe.has_course_marker(ctx, course.directory) and \
                    self.probe.is_current_location(ctx, course.directory):
                logger.debug("current course: %s", course.name)
                return course
        logger.debug("no course detected from %s", ctx.cwd)
        return None

    def next_course(
        self, ctx: NavigationContext, current: Optional[Course]
    ) -> Optional[Course]:
        """Next course in sequence, or None once the last one is reached.

        Non-root courses qualify even without a marker, so the learner can
        move ahead into a course whose workflows have not been created yet.
        """
        if current is None:
            return None
        courses = self.registry.list_courses()
        for course in courses[current.index + 1:]:
            if self.probe.has_course_marker(ctx, course.directory) or not course.is_root:
                return course
        return None

    def previous_course(
        self, ctx: NavigationContext, current: Optional[Course]
    ) -> Optional[Course]:
        if current is None or current.index == 0:
            return None
        courses = self.registry.list_courses()
        for course in reversed(courses[:current.index]):
            if self.probe.has_course_marker(ctx, course.directory) or course.is_root:
                return course
        return None
