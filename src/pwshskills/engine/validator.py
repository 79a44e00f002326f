"""Local validation of PowerShell solution files.

Each file gets a syntax check from a real PowerShell interpreter, then two
text scans: cross-platform compatibility warnings and best-practice
suggestions. Only syntax errors and unreadable files fail a file; one
failing file never stops the others from being checked.
"""

from __future__ import annotations

import logging
import os
import shutil
import subprocess
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Sequence

from pwshskills.config.settings import Settings
from pwshskills.exceptions import (
    FileUnreadable,
    InterpreterUnavailable,
    SyntaxCheckFailed,
)

logger = logging.getLogger(__name__)

WINDOWS_ONLY_CMDLETS = [
    "Get-WmiObject",
    "Get-Service",  # exists on Linux but with limited functionality
    "New-Service",
    "Set-Service",
    "Get-EventLog",
    "Get-WindowsFeature",
]

_PARSE_SCRIPT = (
    "$errors = $null; "
    "$null = [System.Management.Automation.Language.Parser]::ParseFile('{path}', [ref]$null, [ref]$errors); "
    "if ($errors) {{ $errors | ForEach-Object {{ Write-Output (\"line {{0}}: {{1}}\" -f $_.Extent.StartLineNumber, $_.Message) }}; exit 1 }} "
    "Write-Output 'OK'"
)


@dataclass
class FileReport:
    path: Path
    syntax_error: Optional[str] = None
    read_error: Optional[str] = None
    warnings: list[str] = field(default_factory=list)
    suggestions: list[str] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return self.syntax_error is None and self.read_error is None


@dataclass
class ValidationReport:
    interpreter: str
    files: list[FileReport] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return all(f.passed for f in self.files)

    @property
    def failed(self) -> list[FileReport]:
        return [f for f in self.files if not f.passed]


def find_interpreter(candidates: Sequence[str] = ("pwsh", "powershell")) -> str:
    """Return the first interpreter on PATH, preferring PowerShell 7+."""
    for candidate in candidates:
        if shutil.which(candidate):
            return candidate
    raise InterpreterUnavailable()


def find_script_files(
    root: Path,
    extension: str = ".ps1",
    skip_dirs: Sequence[str] = ("node_modules", "bin", "obj", ".git"),
) -> list[Path]:
    """Script files under ``root``, relative to it, skipping hidden and build dirs."""
    skip = set(skip_dirs)
    found: list[Path] = []
    for dirpath, dirnames, filenames in os.walk(root):
        dirnames[:] = sorted(
            d for d in dirnames if not d.startswith(".") and d not in skip
        )
        for name in filenames:
            if name.startswith("."):
                continue
            if name.lower().endswith(extension.lower()):
                found.append((Path(dirpath) / name).relative_to(root))
    return sorted(found)


def check_syntax(interpreter: str, path: Path, timeout: int = 30) -> None:
    """Parse ``path`` with the interpreter; raises SyntaxCheckFailed on errors."""
    script = _PARSE_SCRIPT.format(path=str(path).replace("'", "''"))
    cmd = [interpreter, "-NoProfile", "-Command", script]
    try:
        proc = subprocess.run(
            cmd, stdout=subprocess.PIPE, stderr=subprocess.STDOUT,
            encoding="utf-8", errors="replace", timeout=timeout,
        )
    except subprocess.TimeoutExpired:
        raise SyntaxCheckFailed(str(path), f"syntax check timed out after {timeout}s")
    except OSError as e:
        raise SyntaxCheckFailed(str(path), f"could not run {interpreter}: {e}")
    if proc.returncode != 0:
        raise SyntaxCheckFailed(str(path), proc.stdout.strip())


def check_compatibility(text: str) -> list[str]:
    issues = [
        f"'{cmdlet}' may not work on all platforms"
        for cmdlet in WINDOWS_ONLY_CMDLETS
        if cmdlet in text
    ]
    if "C:\\" in text or "\\\\" in text:
        issues.append("Hardcoded Windows paths detected")
    return issues


def check_best_practices(text: str) -> list[str]:
    suggestions = []
    has_function = "function" in text
    if has_function and "[CmdletBinding()]" not in text:
        suggestions.append("Consider adding [CmdletBinding()] to functions")
    if "Write-Host" in text:
        suggestions.append(
            "Consider using Write-Output instead of Write-Host for better pipeline support"
        )
    if has_function and "param(" not in text:
        suggestions.append("Consider adding parameter blocks to functions")
    return suggestions


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        raise FileUnreadable(str(path), str(e))


class Validator:
    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or Settings.load()
        self._interpreter: Optional[str] = None

    @property
    def interpreter(self) -> str:
        if self._interpreter is None:
            self._interpreter = find_interpreter(self.settings.get_interpreters())
        return self._interpreter

    def discover(self, root: Path) -> list[Path]:
        return find_script_files(
            root, self.settings.script_extension, self.settings.skip_dirs
        )

    def validate_file(self, path: Path) -> FileReport:
        report = FileReport(path=path)
        try:
            check_syntax(self.interpreter, path, self.settings.timeout_seconds)
            text = _read_text(path)
        except SyntaxCheckFailed as e:
            report.syntax_error = e.output
            return report
        except FileUnreadable as e:
            report.read_error = e.message
            return report

        report.warnings = check_compatibility(text)
        report.suggestions = check_best_practices(text)
        logger.debug(
            "%s: %d warnings, %d suggestions",
            path, len(report.warnings), len(report.suggestions),
        )
        return report

    def validate_tree(self, root: Path, files: Optional[list[Path]] = None) -> ValidationReport:
        """Validate every script under ``root``.

        Raises InterpreterUnavailable before any file is touched if no
        interpreter can be found.
        """
        report = ValidationReport(interpreter=self.interpreter)
        for rel in files if files is not None else self.discover(root):
            report.files.append(self.validate_file(root / rel))
        return report
