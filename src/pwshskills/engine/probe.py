"""Read-only filesystem checks used to recognize course directories."""

from __future__ import annotations

import logging
from pathlib import Path

from pwshskills.courses.registry import ROOT_DIRECTORY
from pwshskills.engine.context import NavigationContext

logger = logging.getLogger(__name__)

WORKFLOW_MARKER = Path(".github") / "workflows"


class FilesystemProbe:
    def has_course_marker(self, ctx: NavigationContext, directory: str) -> bool:
        """True iff ``<directory>/.github/workflows`` exists."""
        try:
            return (ctx.resolve(directory) / WORKFLOW_MARKER).exists()
        except OSError as e:
            logger.debug("marker check failed for %s: %s", directory, e)
            return False

    def is_current_location(self, ctx: NavigationContext, directory: str) -> bool:
        """Whether ``ctx`` sits in ``directory``.

        The root always matches. Otherwise either the last path segments
        agree or the directory carries a course marker; the marker fallback
        broadens the match beyond the name check and both are kept.
        """
        if directory == ROOT_DIRECTORY:
            return True
        return ctx.cwd.name == Path(directory).name or self.has_course_marker(
            ctx, directory
        )

    def is_inside_version_control_root(self, ctx: NavigationContext) -> bool:
        try:
            return (ctx.cwd / ".git").exists()
        except OSError:
            return False
