"""HostIdent exceptions."""
from __future__ import annotations


class HostIdentError(Exception):
    """Base exception for errors raised by HostIdent."""

    pass


class ExternalCommandError(HostIdentError):
    """Exception raised when an external helper program fails.

    Args:
        program: Name of the program that was invoked.
        message: Description of the failure.
        returncode: Exit status of the program if it ran to completion.
        stderr: Standard error captured from the program.
    """

    def __init__(
        self,
        program: str,
        message: str,
        *,
        returncode: int | None = None,
        stderr: str = '',
    ) -> None:
        super().__init__(f'{program}: {message}')
        self.program = program
        self.returncode = returncode
        self.stderr = stderr
