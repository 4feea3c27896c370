"""
Execution of the program under measurement.
"""

from .target_process import ProcessExitError, RunError, SpawnError, TargetProcess

__all__ = [
    "ProcessExitError",
    "RunError",
    "SpawnError",
    "TargetProcess",
]
