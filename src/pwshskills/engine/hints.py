"""Static hint catalogue, one category per course."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from pwshskills.courses.registry import Course


class HintCategory(str, Enum):
    FUNDAMENTALS = "fundamentals"
    PIPELINES = "pipelines"
    FUNCTIONS = "functions"
    AUTOMATION = "automation"


@dataclass(frozen=True)
class Hint:
    title: str
    description: str
    example: str
    reference: str


_CATEGORY_BY_INDEX = {
    0: HintCategory.FUNDAMENTALS,
    1: HintCategory.PIPELINES,
    2: HintCategory.FUNCTIONS,
    3: HintCategory.AUTOMATION,
}

HINTS: dict[HintCategory, list[Hint]] = {
    HintCategory.FUNDAMENTALS: [
        Hint(
            title="Variables and Assignment",
            description="In PowerShell, variables start with $ and are dynamically typed",
            example='$name = "PowerShell"; $number = 42',
            reference="https://docs.microsoft.com/powershell/scripting/lang-spec/chapter-05",
        ),
        Hint(
            title="Conditional Logic",
            description="Use if/elseif/else for conditional execution",
            example='if ($condition) { Write-Host "True" } else { Write-Host "False" }',
            reference="https://docs.microsoft.com/powershell/scripting/lang-spec/chapter-08",
        ),
    ],
    HintCategory.PIPELINES: [
        Hint(
            title="Pipeline Basics",
            description="PowerShell pipeline passes objects, not text. Use | to chain commands",
            example="Get-Process | Where-Object { $_.CPU -gt 100 } | Select-Object Name, CPU",
            reference="https://docs.microsoft.com/powershell/scripting/learn/understanding-the-powershell-pipeline",
        ),
        Hint(
            title="Filtering Objects",
            description="Where-Object filters objects based on conditions",
            example='Get-Service | Where-Object Status -eq "Running"',
            reference="https://docs.microsoft.com/powershell/module/microsoft.powershell.core/where-object",
        ),
    ],
    HintCategory.FUNCTIONS: [
        Hint(
            title="Function Definition",
            description="Define reusable functions with param blocks and proper documentation",
            example="function Get-SystemInfo { [CmdletBinding()] param() Get-ComputerInfo }",
            reference="https://docs.microsoft.com/powershell/scripting/learn/ps101/09-functions",
        ),
        Hint(
            title="Parameter Validation",
            description="Use parameter attributes for input validation",
            example="[Parameter(Mandatory)] [ValidateNotNullOrEmpty()] [string]$Name",
            reference="https://docs.microsoft.com/powershell/scripting/developer/cmdlet/validating-parameter-input",
        ),
    ],
    HintCategory.AUTOMATION: [
        Hint(
            title="Error Handling",
            description="Use try/catch blocks for robust error handling",
            example='try { Get-Item $path } catch { Write-Error "File not found: $path" }',
            reference="https://docs.microsoft.com/powershell/scripting/learn/deep-dives/everything-about-exceptions",
        ),
        Hint(
            title="Classes and Objects",
            description="Define custom classes for complex automation scenarios",
            example="class Server { [string]$Name [string]$Environment }",
            reference="https://docs.microsoft.com/powershell/scripting/lang-spec/chapter-05#5.14-classes",
        ),
    ],
}

PRO_TIPS: dict[HintCategory, list[str]] = {
    HintCategory.FUNDAMENTALS: [
        "Use Get-Help <command> to learn about any PowerShell command",
        "PowerShell is case-insensitive for commands and variables",
        "Use tab completion to discover available commands and parameters",
    ],
    HintCategory.PIPELINES: [
        "Remember: PowerShell passes objects, not text through the pipeline",
        "Use Get-Member to explore object properties and methods",
        "ForEach-Object processes each pipeline object individually",
    ],
    HintCategory.FUNCTIONS: [
        "Always include [CmdletBinding()] for advanced function features",
        "Use Write-Verbose for debugging instead of Write-Host",
        "Return objects, not formatted text from functions",
    ],
    HintCategory.AUTOMATION: [
        "Use PowerShell classes for complex data structures",
        "Implement proper error handling with try/catch/finally",
        "Consider security implications when automating sensitive operations",
    ],
}


def category_for(course: Course) -> Optional[HintCategory]:
    return _CATEGORY_BY_INDEX.get(course.index)


def pick_hint(category: HintCategory, rng: Optional[random.Random] = None) -> Hint:
    """Pick one hint for ``category`` uniformly at random."""
    return (rng or random).choice(HINTS[category])
