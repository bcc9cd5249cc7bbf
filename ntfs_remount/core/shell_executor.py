#!/usr/bin/env python3
"""
Safe shell command execution utilities.
Used for running system commands like diskutil and ntfs-3g.
"""

import shutil
import subprocess
from typing import List, Optional, Tuple

from .logger import get_logger

logger = get_logger(__name__)

def run_command(
    command: List[str],
    check: bool = True,
    capture_output: bool = True,
    timeout: Optional[int] = None
) -> Tuple[bool, str, str]:
    """
    Safely execute a shell command.

    Failures never raise: they are logged and reported through the
    returned success flag.

    Args:
        command: Command and arguments as list
        check: If True, a non-zero exit code counts as a failure
        capture_output: If True, capture stdout/stderr
        timeout: Command timeout in seconds, None to wait forever

    Returns:
        Tuple of (success, stdout, stderr)
    """
    try:
        logger.debug(f"Running command: {' '.join(command)}")

        result = subprocess.run(
            command,
            check=check,
            capture_output=capture_output,
            text=True,
            timeout=timeout
        )

        stdout = result.stdout.strip() if result.stdout else ""
        stderr = result.stderr.strip() if result.stderr else ""

        if stdout:
            logger.debug(f"Command stdout: {stdout}")
        if stderr:
            logger.debug(f"Command stderr: {stderr}")

        return result.returncode == 0, stdout, stderr

    except subprocess.CalledProcessError as e:
        stderr = e.stderr.strip() if e.stderr else ""
        logger.error(f"Command failed with code {e.returncode}: {stderr}")
        return False, e.stdout.strip() if e.stdout else "", stderr

    except subprocess.TimeoutExpired:
        error_msg = f"Command timed out after {timeout}s"
        logger.error(error_msg)
        return False, "", error_msg

    except OSError as e:
        error_msg = f"Command execution error: {e}"
        logger.error(error_msg)
        return False, "", str(e)

def check_command_available(command: str) -> bool:
    """
    Check if a command is available in the system.

    Args:
        command: Command name or absolute path to check

    Returns:
        True if command exists and is executable
    """
    return shutil.which(command) is not None
