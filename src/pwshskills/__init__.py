"""pwsh-skills: course assistant for the PowerShell GitHub Skills series."""

__version__ = "0.1.0"
