"""
Custom Exception Classes

Exceptions raised by the core layer when an external tool fails or an
expected file is missing. Services translate these into failed
ServiceResult objects for the CLI.
"""

from pathlib import Path
from typing import Optional, Union


class KyoproError(Exception):
    """Base class for all kyopro errors."""

    def __init__(self, message: str = "kyopro operation failed.") -> None:
        super().__init__(message)
        self.message = message


class CommandFailedError(KyoproError):
    """
    Exception raised when a shell command exits with a non-zero status.

    Attributes:
        command (str): The command string that was run
        returncode (int): Exit status reported by the shell
    """

    def __init__(self, command: str, returncode: int) -> None:
        self.command = command
        self.returncode = returncode
        super().__init__(f"command '{command}' failed with exit code {returncode}.")


class CommandNotFoundError(KyoproError):
    """Exception raised when a shell or binary cannot be started."""

    def __init__(self, command: str, reason: Optional[str] = None) -> None:
        self.command = command
        message = f"failed to execute '{command}'"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class ProblemNotFoundError(KyoproError):
    """Exception raised when a problem directory does not exist."""

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)
        super().__init__(f"Problem directory not found: {self.path}")


class SampleNotFoundError(KyoproError):
    """Exception raised when a sample input or output file is missing."""

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)
        super().__init__(f"Sample file not found: {self.path}")
