"""Repository checks: git root presence and host-platform identity."""

from __future__ import annotations

import json
import logging
import subprocess

from pwshskills.engine.context import NavigationContext
from pwshskills.engine.probe import FilesystemProbe
from pwshskills.exceptions import NotAGitRepository, RepositoryInfoUnavailable

logger = logging.getLogger(__name__)

_ERROR_PREFIX = "Error getting repository info:"


def require_git_repo(ctx: NavigationContext, probe: FilesystemProbe | None = None) -> None:
    if not (probe or FilesystemProbe()).is_inside_version_control_root(ctx):
        raise NotAGitRepository()


def get_repo_info(host_cli: str = "gh", timeout: int = 30) -> str:
    """Return ``owner/name`` of the current repository via ``gh repo view``."""
    cmd = [host_cli, "repo", "view", "--json", "nameWithOwner"]
    logger.debug("running %s", " ".join(cmd))
    try:
        proc = subprocess.run(
            cmd, capture_output=True, encoding="utf-8", errors="replace",
            timeout=timeout,
        )
    except FileNotFoundError:
        raise RepositoryInfoUnavailable(f"{_ERROR_PREFIX} '{host_cli}' command not found")
    except subprocess.TimeoutExpired:
        raise RepositoryInfoUnavailable(f"{_ERROR_PREFIX} '{host_cli}' timed out after {timeout}s")
    except OSError as e:
        raise RepositoryInfoUnavailable(f"{_ERROR_PREFIX} could not run '{host_cli}': {e}")

    if proc.returncode != 0:
        detail = proc.stderr.strip() or f"'{host_cli}' exited with {proc.returncode}"
        raise RepositoryInfoUnavailable(f"{_ERROR_PREFIX} {detail}")

    try:
        return json.loads(proc.stdout)["nameWithOwner"]
    except (json.JSONDecodeError, KeyError, TypeError) as e:
        raise RepositoryInfoUnavailable(
            f"{_ERROR_PREFIX} unexpected response from '{host_cli}': {e}"
        )
