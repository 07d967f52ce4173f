"""Run external commands and capture their standard output.

Command lines are split on whitespace with no shell quoting, so arguments
containing spaces cannot be expressed.
"""

from __future__ import annotations

import subprocess

import structlog

from kubectl_select.core.exceptions import CommandError

logger = structlog.get_logger()


def split_command(command_line: str) -> list[str]:
    """Split a command line into program and arguments.

    Args:
        command_line: Whitespace-delimited command line.

    Returns:
        The argument vector.

    Raises:
        CommandError: If the command line is empty.
    """
    args = command_line.split()
    if not args:
        raise CommandError("Empty command line", command=command_line)
    return args


def run_command(command_line: str) -> bytes:
    """Run a command and return its captured standard output.

    Standard error is inherited so the child's diagnostics reach the
    terminal directly.

    Args:
        command_line: Whitespace-delimited command line.

    Returns:
        Raw bytes written by the child to standard output.

    Raises:
        CommandError: If the program cannot be started or exits non-zero.
    """
    args = split_command(command_line)
    logger.debug("running_command", args=args)

    try:
        result = subprocess.run(args, stdout=subprocess.PIPE, check=True)
    except subprocess.CalledProcessError as e:
        raise CommandError(
            message=f"Command failed: exit status {e.returncode}",
            command=command_line,
            returncode=e.returncode,
            original_error=e,
        ) from e
    except OSError as e:
        raise CommandError(
            message=f"Command could not be started: {e.strerror or e}",
            command=command_line,
            original_error=e,
        ) from e

    logger.debug("command_finished", program=args[0], output_bytes=len(result.stdout))
    return result.stdout
