"""Exceptions raised by templatekit components."""

from __future__ import annotations


class SetupError(Exception):
    """Base class for failures that stop or redirect a setup run."""


class InvalidProjectNameError(SetupError):
    """Raised when the project name contains disallowed characters or is empty."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(
            "Invalid project name. Use only letters, numbers, spaces, hyphens, "
            "and underscores."
        )


class PackageInstallError(SetupError):
    """Raised when a package-manager command exits non-zero.

    Attributes:
        command: The command line that failed, suitable for copy/paste.
        returncode: Exit status of the child process.
    """

    def __init__(self, command: str, returncode: int) -> None:
        self.command = command
        self.returncode = returncode
        super().__init__(
            f"Error installing packages (exit {returncode}). Please try manually:\n"
            f"   {command}"
        )


class TemplateLoadError(SetupError):
    """Raised when an SEO template file cannot be read or parsed."""
