"""
Command-line interface for the owlmeter package.
"""

from .main import main_cli
from .orchestrator import RunOrchestrator, RunResult

__all__ = [
    "main_cli",
    "RunOrchestrator",
    "RunResult",
]
