"""Locate and run external helper programs."""
from __future__ import annotations

import logging
import shutil
import subprocess

from hostident.exceptions import ExternalCommandError

logger = logging.getLogger(__name__)


def find_program(program: str) -> str | None:
    """Return the path to a program on the search path.

    Args:
        program: Name of the program.

    Returns:
        Absolute path of the program or `None` if it is not on `$PATH`.
    """
    return shutil.which(program)


def run_program(program: str, timeout: float | None = None) -> str:
    """Run a program with no arguments and return its standard output.

    Args:
        program: Name of the program to run. The program is located via
            the search path.
        timeout: Optional number of seconds to wait for the program to exit.
            Waits indefinitely if `None`.

    Returns:
        Standard output of the program decoded as text.

    Raises:
        ExternalCommandError: If the program is not on the search path, could
            not be started, exceeded `timeout`, or exited with a non-zero
            status.
    """
    path = find_program(program)
    if path is None:
        raise ExternalCommandError(program, 'not found on search path')

    logger.debug(f'Running {path}')
    try:
        result = subprocess.run(
            [path],
            stdin=subprocess.DEVNULL,
            capture_output=True,
            text=True,
            errors='replace',
            timeout=timeout,
            check=False,
        )
    except subprocess.TimeoutExpired as e:
        raise ExternalCommandError(
            program,
            f'timed out after {timeout} seconds',
        ) from e
    except OSError as e:
        raise ExternalCommandError(program, f'failed to start ({e})') from e

    if result.returncode != 0:
        raise ExternalCommandError(
            program,
            f'exited with status {result.returncode}',
            returncode=result.returncode,
            stderr=result.stderr,
        )

    return result.stdout
