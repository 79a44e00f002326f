"""Build information reported by ``--version``.

Source checkouts report ``dev``. Release builds stamp the real values by
calling :func:`set_version_info` before the CLI starts.
"""

from __future__ import annotations

version = "dev"
commit = "none"
date = "unknown"
built_by = "unknown"


def set_version_info(v: str, c: str, d: str, b: str) -> None:
    """Record build metadata; the release-stamping hook for packaged builds."""
    global version, commit, date, built_by
    version, commit, date, built_by = v, c, d, b


def version_message() -> str:
    return (
        f"PowerShell GitHub Skills CLI Extension {version}\n"
        f"Built: {date}\n"
        f"Commit: {commit}\n"
        f"Built by: {built_by}"
    )
