"""
Spawning and waiting on the program under measurement.
"""

import logging
import subprocess
from typing import List, Optional

logger = logging.getLogger(__name__)


class RunError(Exception):
    """Base class for failures that abort a supervised run."""


class SpawnError(RunError):
    """The executable could not be found or started."""

    def __init__(self, command: List[str], cause: OSError):
        super().__init__(f"Failed to start '{command[0]}': {cause}")
        self.command = command
        self.cause = cause


class ProcessExitError(RunError):
    """The program exited with a non-zero status or was killed by a signal."""

    def __init__(self, return_code: int):
        if return_code < 0:
            message = f"Process terminated by signal {-return_code}"
        else:
            message = f"Process exited with return code {return_code}"
        super().__init__(message)
        self.return_code = return_code


class TargetProcess:
    """
    Thin wrapper around subprocess.Popen for the supervised program.

    The child inherits this process's stdin, stdout and stderr.
    """

    def __init__(self, command: List[str]):
        self.command = list(command)
        self.process: Optional[subprocess.Popen] = None
        self.return_code: Optional[int] = None

    @property
    def pid(self) -> Optional[int]:
        return self.process.pid if self.process else None

    def spawn(self) -> int:
        """
        Start the program.

        Returns:
            Process ID of the started program

        Raises:
            SpawnError: If the executable is missing or not runnable
        """
        if self.process is not None:
            raise RuntimeError("Target process already spawned")
        try:
            self.process = subprocess.Popen(self.command)
        except OSError as e:
            raise SpawnError(self.command, e) from e
        logger.info(f"Started '{' '.join(self.command)}' with PID {self.process.pid}")
        return self.process.pid

    def kill(self) -> None:
        """Kill the program if it is still running and reap it."""
        if self.process is None or self.process.poll() is not None:
            return
        logger.warning(f"Killing PID {self.process.pid}")
        self.process.kill()
        self.return_code = self.process.wait()

    def wait(self) -> int:
        """Block until the program exits and return its return code."""
        if self.process is None:
            raise RuntimeError("Target process not spawned")
        self.return_code = self.process.wait()
        logger.info(f"PID {self.process.pid} exited with return code {self.return_code}")
        return self.return_code
