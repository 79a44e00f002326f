"""Shared fixtures for pwsh-skills tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from pwshskills.courses.registry import CourseRegistry
from pwshskills.engine.context import NavigationContext
from pwshskills.engine.probe import FilesystemProbe
from pwshskills.engine.resolver import CourseResolver

COURSE_DIRS = [
    "course-2-pipelines-filtering",
    "course-3-functions-modules",
    "course-4-automation-devops",
]


def _add_marker(base: Path) -> Path:
    workflows = base / ".github" / "workflows"
    workflows.mkdir(parents=True, exist_ok=True)
    (workflows / "step.yml").write_text("name: step\n")
    return base


@pytest.fixture
def repo_root(tmp_path):
    """A git checkout whose root holds the first course's workflows."""
    (tmp_path / ".git").mkdir()
    _add_marker(tmp_path)
    return tmp_path


@pytest.fixture
def make_course():
    """Give a directory the workflow marker that makes it a detected course."""
    return _add_marker


@pytest.fixture
def full_repo(repo_root):
    """Root course plus all three sub-course directories with markers."""
    for d in COURSE_DIRS:
        _add_marker(repo_root / d)
    return repo_root


@pytest.fixture
def nav(repo_root):
    return NavigationContext(cwd=repo_root)


@pytest.fixture
def registry():
    return CourseRegistry()


@pytest.fixture
def resolver(registry):
    return CourseResolver(registry=registry, probe=FilesystemProbe())
