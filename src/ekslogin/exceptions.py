"""
EKS Login Exceptions.

Every fatal failure in the login pipeline is raised as a subclass of
EKSLoginError so the CLI layer can report it once and exit non-zero.
"""

from typing import Optional, Sequence


class EKSLoginError(Exception):
    """Base class for all fatal eks-login errors."""
    pass


class ExecutableNotFoundError(EKSLoginError):
    """Raised when executable cannot be found in system PATH."""
    pass


class CommandFailedError(EKSLoginError):
    """Raised when an external command exits non-zero or cannot be started."""

    def __init__(
        self,
        message: str,
        command: Optional[Sequence[str]] = None,
        returncode: Optional[int] = None,
        stderr: str = "",
    ):
        self.command = list(command) if command else []
        self.returncode = returncode
        self.stderr = stderr.strip() if stderr else ""
        if self.stderr:
            message = f"{message}\nstderr: {self.stderr}"
        super().__init__(message)


class OutputParseError(EKSLoginError):
    """Raised when a command's structured output cannot be decoded."""
    pass


class NoProfilesError(EKSLoginError):
    pass


class NoClustersError(EKSLoginError):
    pass


class SelectionRequiredError(EKSLoginError):
    """Raised when a choice is needed but interactive mode is disabled."""
    pass
