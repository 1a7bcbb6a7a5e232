import logging
import shlex
import subprocess
from typing import Callable

from cliptext.models.platform_context import OSFamily

logger = logging.getLogger(__name__)

# Exit status POSIX shells use when the command does not exist
COMMAND_NOT_FOUND = 127

POSIX_SHELL = "/bin/sh"

Runner = Callable[[str, OSFamily], int]


def quote_path(path: str, os_family: OSFamily) -> str:
    if os_family is OSFamily.WINDOWS:
        return f'"{path}"'
    return shlex.quote(path)


def run_command_line(command_line: str, os_family: OSFamily) -> int:
    """
    Run a shell command line and block until it exits.

    Windows goes through cmd.exe (/s keeps the inner quoting intact),
    everything else through /bin/sh. Returns the exit status.
    """
    logger.debug(f"Running: {command_line}")
    if os_family is OSFamily.WINDOWS:
        result = subprocess.run(f'cmd.exe /d /s /c "{command_line}"', check=False)
    else:
        result = subprocess.run([POSIX_SHELL, "-c", command_line], check=False)
    logger.debug(f"Exit status {result.returncode}: {command_line}")
    return result.returncode
