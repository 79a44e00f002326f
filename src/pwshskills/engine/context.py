"""Explicit working-directory value threaded through course lookups."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class NavigationContext:
    cwd: Path

    @classmethod
    def from_cwd(cls) -> "NavigationContext":
        return cls(cwd=Path.cwd())

    def resolve(self, directory: str) -> Path:
        return self.cwd / directory

    def moved_to(self, path: Path) -> "NavigationContext":
        return NavigationContext(cwd=path)
