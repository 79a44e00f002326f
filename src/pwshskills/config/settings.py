"""Configuration model for pwsh-skills."""

from __future__ import annotations

import os
from enum import Enum
from pathlib import Path

import yaml
from pydantic import BaseModel, Field


class ProgressSourceKind(str, Enum):
    STATIC = "static"
    GIT_HISTORY = "git_history"
    WORKFLOW_STATUS = "workflow_status"


class Settings(BaseModel):
    interpreters: list[str] = Field(default_factory=lambda: ["pwsh", "powershell"])
    host_cli: str = "gh"
    script_extension: str = ".ps1"
    skip_dirs: list[str] = Field(
        default_factory=lambda: ["node_modules", "bin", "obj", ".git"]
    )
    timeout_seconds: int = 30
    minutes_per_step: int = 10
    progress_source: ProgressSourceKind = ProgressSourceKind.STATIC
    data_dir: Path = Path.home() / ".pwshskills"

    def get_interpreters(self) -> list[str]:
        override = os.environ.get("PWSH_SKILLS_INTERPRETER")
        if override:
            return [override, *[i for i in self.interpreters if i != override]]
        return list(self.interpreters)

    @classmethod
    def load(cls, config_path: Path | None = None) -> "Settings":
        config_path = config_path or Path.home() / ".pwshskills" / "config.yaml"
        if config_path.exists():
            with open(config_path) as f:
                data = yaml.safe_load(f) or {}
            return cls(**data)
        return cls()

    def save(self) -> None:
        self.data_dir.mkdir(parents=True, exist_ok=True)
        config_path = self.data_dir / "config.yaml"
        with open(config_path, "w") as f:
            yaml.dump(self.model_dump(mode="json"), f, default_flow_style=False)
