"""
System interaction for process monitoring.

Point-in-time CPU, memory and network readings used by the process monitor.
"""

from .sampler import SystemSampler

__all__ = [
    "SystemSampler",
]
