"""Moves a NavigationContext into a resolved course directory."""

from __future__ import annotations

import logging

from pwshskills.courses.registry import Course
from pwshskills.engine.context import NavigationContext
from pwshskills.exceptions import DirectoryNotFound

logger = logging.getLogger(__name__)


class Navigator:
    def move_to(self, ctx: NavigationContext, course: Course) -> NavigationContext:
        """Return the context for ``course``; the input context is never changed.

        Raises DirectoryNotFound if the course directory is missing.
        """
        if course.is_root:
            return ctx

        target = ctx.resolve(course.directory)
        if not target.is_dir():
            raise DirectoryNotFound(course.directory)

        logger.debug("moving from %s to %s", ctx.cwd, target)
        return ctx.moved_to(target)
