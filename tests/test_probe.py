"""Tests for the filesystem probe."""

from pathlib import Path

import pytest

from pwshskills.engine.context import NavigationContext
from pwshskills.engine.probe import FilesystemProbe


@pytest.fixture
def probe():
    return FilesystemProbe()


class TestCourseMarker:
    def test_root_marker(self, probe, nav):
        assert probe.has_course_marker(nav, ".")

    def test_missing_marker(self, probe, nav):
        assert not probe.has_course_marker(nav, "course-2-pipelines-filtering")

    def test_github_dir_without_workflows(self, probe, nav, repo_root):
        (repo_root / "course-3-functions-modules" / ".github").mkdir(parents=True)
        assert not probe.has_course_marker(nav, "course-3-functions-modules")

    def test_unreadable_marker_counts_as_absent(self, probe, nav, monkeypatch):
        real_exists = Path.exists

        def exists(self, *args, **kwargs):
            if self.name == "workflows":
                raise PermissionError(13, "Permission denied")
            return real_exists(self, *args, **kwargs)

        monkeypatch.setattr(Path, "exists", exists)
        assert probe.has_course_marker(nav, ".") is False

    def test_subcourse_marker(self, probe, nav, repo_root, make_course):
        make_course(repo_root / "course-3-functions-modules")
        assert probe.has_course_marker(nav, "course-3-functions-modules")


class TestCurrentLocation:
    def test_root_always_matches(self, probe, tmp_path):
        assert probe.is_current_location(NavigationContext(cwd=tmp_path), ".")

    def test_matches_by_last_segment(self, probe, tmp_path):
        here = tmp_path / "course-2-pipelines-filtering"
        here.mkdir()
        ctx = NavigationContext(cwd=here)
        assert probe.is_current_location(ctx, "course-2-pipelines-filtering")
        assert not probe.is_current_location(ctx, "course-3-functions-modules")

    def test_marker_fallback_matches_from_elsewhere(self, probe, nav, repo_root, make_course):
        make_course(repo_root / "course-4-automation-devops")
        assert probe.is_current_location(nav, "course-4-automation-devops")


class TestVersionControlRoot:
    def test_git_present(self, probe, nav):
        assert probe.is_inside_version_control_root(nav)

    def test_git_absent(self, probe, tmp_path):
        assert not probe.is_inside_version_control_root(NavigationContext(cwd=tmp_path))
