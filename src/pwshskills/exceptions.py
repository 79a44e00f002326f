"""Error kinds raised by the engine and rendered by the CLI."""

from __future__ import annotations

from typing import Optional


class PwshSkillsError(Exception):
    """Base error carrying a user-facing remedy."""

    remedy: Optional[str] = None

    def __init__(self, message: str, remedy: Optional[str] = None):
        super().__init__(message)
        self.message = message
        if remedy is not None:
            self.remedy = remedy


class NotAGitRepository(PwshSkillsError):
    remedy = "Please run from your PowerShell Skills course directory."

    def __init__(self, message: str = "Not in a git repository.", remedy: Optional[str] = None):
        super().__init__(message, remedy)


class CourseNotDetected(PwshSkillsError):
    remedy = "Please ensure you're in a PowerShell Skills course directory."

    def __init__(self, message: str = "Could not detect current course.", remedy: Optional[str] = None):
        super().__init__(message, remedy)


class DirectoryNotFound(PwshSkillsError):
    remedy = "This course may be available later in your learning journey."

    def __init__(self, directory: str, remedy: Optional[str] = None):
        super().__init__(f"Course directory '{directory}' does not exist yet.", remedy)
        self.directory = directory


class RepositoryInfoUnavailable(PwshSkillsError):
    remedy = "Make sure the GitHub CLI is installed and authenticated (gh auth login)."


class InterpreterUnavailable(PwshSkillsError):
    remedy = "Visit: https://github.com/PowerShell/PowerShell#get-powershell"

    def __init__(
        self,
        message: str = "PowerShell not found. Please install PowerShell 7+ for cross-platform compatibility.",
        remedy: Optional[str] = None,
    ):
        super().__init__(message, remedy)


class SyntaxCheckFailed(PwshSkillsError):
    def __init__(self, path: str, output: str):
        super().__init__(f"Syntax Error: {output}")
        self.path = path
        self.output = output


class FileUnreadable(PwshSkillsError):
    def __init__(self, path: str, reason: str):
        super().__init__(f"Could not read file: {reason}")
        self.path = path


class ProgressSourceUnavailable(PwshSkillsError):
    remedy = "Set progress_source to 'static' in ~/.pwshskills/config.yaml."
