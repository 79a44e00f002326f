"""Tests for solution validation (no PowerShell install needed)."""

import subprocess
import sys
from pathlib import Path

import pytest

from pwshskills.config.settings import Settings
from pwshskills.engine import validator as validator_mod
from pwshskills.engine.validator import (
    Validator,
    check_best_practices,
    check_compatibility,
    check_syntax,
    find_interpreter,
    find_script_files,
)
from pwshskills.exceptions import InterpreterUnavailable, SyntaxCheckFailed


def fake_run(bad_names=()):
    """subprocess.run stand-in: fails for scripts whose name is in bad_names."""
    calls = []

    def run(cmd, **kwargs):
        calls.append(cmd)
        script = cmd[-1]
        if any(name in script for name in bad_names):
            return subprocess.CompletedProcess(cmd, 1, stdout="line 1: Missing closing '}'")
        return subprocess.CompletedProcess(cmd, 0, stdout="OK")

    run.calls = calls
    return run


@pytest.fixture
def pwsh_on_path(monkeypatch):
    monkeypatch.setattr(validator_mod.shutil, "which", lambda name: f"/usr/bin/{name}" if name == "pwsh" else None)


class TestFindInterpreter:
    def test_prefers_first_candidate(self, monkeypatch):
        monkeypatch.setattr(validator_mod.shutil, "which", lambda name: f"/bin/{name}")
        assert find_interpreter(["pwsh", "powershell"]) == "pwsh"

    def test_falls_back(self, monkeypatch):
        monkeypatch.setattr(
            validator_mod.shutil, "which",
            lambda name: "/bin/powershell" if name == "powershell" else None,
        )
        assert find_interpreter(["pwsh", "powershell"]) == "powershell"

    def test_unavailable(self, monkeypatch):
        monkeypatch.setattr(validator_mod.shutil, "which", lambda name: None)
        with pytest.raises(InterpreterUnavailable):
            find_interpreter(["pwsh", "powershell"])


def test_find_script_files(tmp_path):
    (tmp_path / "a.ps1").write_text("")
    (tmp_path / "sub").mkdir()
    (tmp_path / "sub" / "B.PS1").write_text("")
    (tmp_path / ".hidden").mkdir()
    (tmp_path / ".hidden" / "x.ps1").write_text("")
    (tmp_path / ".dot.ps1").write_text("")
    for build in ("node_modules", "bin", "obj"):
        (tmp_path / build).mkdir()
        (tmp_path / build / "y.ps1").write_text("")
    (tmp_path / "notes.txt").write_text("")
    (tmp_path / "cabinet").mkdir()
    (tmp_path / "cabinet" / "c.ps1").write_text("")

    assert find_script_files(tmp_path) == [
        Path("a.ps1"),
        Path("cabinet/c.ps1"),
        Path("sub/B.PS1"),
    ]


class TestCheckSyntax:
    def test_ok(self, monkeypatch, tmp_path):
        run = fake_run()
        monkeypatch.setattr(validator_mod.subprocess, "run", run)
        check_syntax("pwsh", tmp_path / "ok.ps1")
        cmd = run.calls[0]
        assert cmd[:3] == ["pwsh", "-NoProfile", "-Command"]
        assert str(tmp_path / "ok.ps1") in cmd[3]

    def test_failure_carries_output(self, monkeypatch, tmp_path):
        monkeypatch.setattr(validator_mod.subprocess, "run", fake_run(bad_names=["bad.ps1"]))
        with pytest.raises(SyntaxCheckFailed) as exc:
            check_syntax("pwsh", tmp_path / "bad.ps1")
        assert "Missing closing" in exc.value.output

    def test_quotes_in_path_are_escaped(self, monkeypatch, tmp_path):
        run = fake_run()
        monkeypatch.setattr(validator_mod.subprocess, "run", run)
        check_syntax("pwsh", tmp_path / "it's.ps1")
        assert "it''s.ps1" in run.calls[0][3]

    def test_launch_error_becomes_syntax_failure(self, monkeypatch, tmp_path):
        def run(cmd, **kwargs):
            raise OSError(8, "Exec format error")

        monkeypatch.setattr(validator_mod.subprocess, "run", run)
        with pytest.raises(SyntaxCheckFailed, match="Exec format error"):
            check_syntax("pwsh", tmp_path / "a.ps1")

    def test_output_decoded_leniently(self, monkeypatch, tmp_path):
        run = fake_run()
        seen = {}

        def capture(cmd, **kwargs):
            seen.update(kwargs)
            return run(cmd, **kwargs)

        monkeypatch.setattr(validator_mod.subprocess, "run", capture)
        check_syntax("pwsh", tmp_path / "a.ps1")
        assert seen["encoding"] == "utf-8"
        assert seen["errors"] == "replace"

    @pytest.mark.skipif(sys.platform == "win32", reason="needs a POSIX shell script")
    def test_undecodable_interpreter_output(self, tmp_path):
        interpreter = tmp_path / "fake-pwsh"
        interpreter.write_text("#!/bin/sh\nprintf 'line 1: bad \\377 token\\n'\nexit 1\n")
        interpreter.chmod(0o755)
        with pytest.raises(SyntaxCheckFailed) as exc:
            check_syntax(str(interpreter), tmp_path / "a.ps1")
        assert exc.value.output == "line 1: bad \ufffd token"

    def test_timeout(self, monkeypatch, tmp_path):
        def slow(cmd, **kwargs):
            raise subprocess.TimeoutExpired(cmd, kwargs["timeout"])

        monkeypatch.setattr(validator_mod.subprocess, "run", slow)
        with pytest.raises(SyntaxCheckFailed, match="timed out"):
            check_syntax("pwsh", tmp_path / "slow.ps1", timeout=1)


class TestTextChecks:
    def test_compatible(self):
        assert check_compatibility("Get-ChildItem | Sort-Object Name") == []

    def test_windows_only_cmdlet(self):
        issues = check_compatibility("Get-WmiObject Win32_OperatingSystem")
        assert issues == ["'Get-WmiObject' may not work on all platforms"]

    def test_windows_paths(self):
        assert "Hardcoded Windows paths detected" in check_compatibility("Get-Item C:\\Temp")
        assert "Hardcoded Windows paths detected" in check_compatibility("\\\\server\\share")

    def test_best_practices_for_bare_function(self):
        suggestions = check_best_practices("function Get-Thing { Write-Host 'hi' }")
        assert len(suggestions) == 3

    def test_best_practices_satisfied(self):
        text = "function Get-Thing { [CmdletBinding()] param($Name) Write-Output $Name }"
        assert check_best_practices(text) == []


class TestValidator:
    @pytest.fixture
    def validator(self, pwsh_on_path, monkeypatch):
        monkeypatch.delenv("PWSH_SKILLS_INTERPRETER", raising=False)
        return Validator(settings=Settings())

    def test_warning_does_not_fail_file(self, validator, monkeypatch, tmp_path):
        monkeypatch.setattr(validator_mod.subprocess, "run", fake_run())
        (tmp_path / "solution.ps1").write_text("Get-Service | Where-Object Status -eq 'Running'\n")

        report = validator.validate_tree(tmp_path)
        assert report.passed
        assert report.interpreter == "pwsh"
        [result] = report.files
        assert result.passed
        assert result.warnings == ["'Get-Service' may not work on all platforms"]

    def test_failure_does_not_stop_other_files(self, validator, monkeypatch, tmp_path):
        monkeypatch.setattr(validator_mod.subprocess, "run", fake_run(bad_names=["broken.ps1"]))
        (tmp_path / "broken.ps1").write_text("function {")
        (tmp_path / "good.ps1").write_text("Write-Output 'hi'")

        report = validator.validate_tree(tmp_path)
        assert not report.passed
        assert [f.path.name for f in report.files] == ["broken.ps1", "good.ps1"]
        assert [f.path.name for f in report.failed] == ["broken.ps1"]
        assert report.files[0].syntax_error
        assert report.files[0].warnings == []

    def test_launch_error_does_not_stop_other_files(self, validator, monkeypatch, tmp_path):
        def run(cmd, **kwargs):
            if "a.ps1" in cmd[-1]:
                raise OSError(8, "Exec format error")
            return subprocess.CompletedProcess(cmd, 0, stdout="OK")

        monkeypatch.setattr(validator_mod.subprocess, "run", run)
        (tmp_path / "a.ps1").write_text("Write-Output 1")
        (tmp_path / "b.ps1").write_text("Write-Output 2")

        report = validator.validate_tree(tmp_path)
        assert [f.path.name for f in report.files] == ["a.ps1", "b.ps1"]
        assert "Exec format error" in report.files[0].syntax_error
        assert report.files[1].passed

    def test_unreadable_file(self, validator, monkeypatch, tmp_path):
        monkeypatch.setattr(validator_mod.subprocess, "run", fake_run())
        report = validator.validate_file(tmp_path / "missing.ps1")
        assert not report.passed
        assert report.read_error.startswith("Could not read file")

    def test_no_interpreter(self, monkeypatch, tmp_path):
        monkeypatch.setattr(validator_mod.shutil, "which", lambda name: None)
        monkeypatch.delenv("PWSH_SKILLS_INTERPRETER", raising=False)
        with pytest.raises(InterpreterUnavailable):
            Validator(settings=Settings()).validate_tree(tmp_path)
