"""
Pytest configuration and shared fixtures for the owlmeter test suite.

This module provides common fixtures, fake collaborators, and configuration
for all test modules.
"""

import sys
import threading
from pathlib import Path
from typing import Dict, List, Optional
from unittest.mock import MagicMock, Mock, patch

import pytest

# Add src to Python path for testing
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from owlmeter.models.metrics import ExecutionMetrics, NetworkCounters, ProcessUsage  # noqa: E402


# ============================================================================
# Test Configuration
# ============================================================================


def pytest_configure(config):
    """Configure pytest with custom markers and settings."""
    config.addinivalue_line("markers", "unit: mark test as a unit test")
    config.addinivalue_line("markers", "integration: mark test as an integration test")
    config.addinivalue_line("markers", "slow: mark test as slow running")


# ============================================================================
# Fake collaborators
# ============================================================================


class FakeSampler:
    """
    Scripted stand-in for SystemSampler.

    ``readings`` are returned in order by process_usage(); None entries model
    a process that is not resolvable during that cycle. Once the script runs
    out, ``default`` is returned.
    """

    def __init__(
        self,
        readings: Optional[List[Optional[ProcessUsage]]] = None,
        default: Optional[ProcessUsage] = None,
        network: Optional[List[NetworkCounters]] = None,
    ):
        self.readings = list(readings or [])
        self.default = default
        self.network = list(network or [NetworkCounters(0, 0)])
        self.calls = 0
        self.primed: List[int] = []
        self.lock = threading.Lock()

    def prime(self, pid: int) -> None:
        self.primed.append(pid)

    def process_usage(self, pid: int) -> Optional[ProcessUsage]:
        with self.lock:
            self.calls += 1
            if self.readings:
                return self.readings.pop(0)
            return self.default

    def network_counters(self) -> NetworkCounters:
        if len(self.network) > 1:
            return self.network.pop(0)
        return self.network[0]


@pytest.fixture
def fake_sampler_factory():
    """Build FakeSampler instances with scripted readings."""
    return FakeSampler


@pytest.fixture
def sample_metrics():
    """A typical metrics record: 1 second, light CPU, 64 MB."""
    return ExecutionMetrics(
        duration_ms=1000,
        cpu_avg=12.5,
        cpu_peak=40.0,
        memory_mb=64.0,
        network_sent=2048,
        network_received=4096,
    )


@pytest.fixture
def zero_metrics():
    """Metrics of a process that exited before the first sample."""
    return ExecutionMetrics(
        duration_ms=50,
        cpu_avg=0.0,
        cpu_peak=0.0,
        memory_mb=0.0,
        network_sent=0,
        network_received=0,
    )


# ============================================================================
# Mock Fixtures
# ============================================================================


@pytest.fixture
def mock_psutil():
    """Mock psutil for testing without system dependencies."""
    with (
        patch("owlmeter.system.sampler.psutil.Process") as mock_process_class,
        patch("owlmeter.system.sampler.psutil.net_io_counters") as mock_net_io,
    ):
        mock_process = MagicMock()
        mock_process.pid = 12345
        mock_process.cpu_percent.return_value = 42.0
        mock_process.memory_info.return_value = Mock(rss=1024 * 1024, vms=2048 * 1024)

        mock_process_class.return_value = mock_process
        mock_net_io.return_value = Mock(bytes_sent=1000, bytes_recv=5000)

        yield {
            "Process": mock_process_class,
            "process_instance": mock_process,
            "net_io_counters": mock_net_io,
        }


# ============================================================================
# Configuration Fixtures
# ============================================================================


@pytest.fixture
def sample_config_data() -> Dict:
    """Sample configuration data for testing."""
    return {
        "general": {"log_level": "DEBUG"},
        "monitor": {"interval_seconds": 0.05, "grace_delay_seconds": 0.1},
        "pricing": {"default_region": "eu-west-1"},
    }


@pytest.fixture
def config_file(tmp_path, sample_config_data):
    """Write sample_config_data to a temporary config.toml."""
    import toml

    path = tmp_path / "config.toml"
    with open(path, "w") as f:
        toml.dump(sample_config_data, f)
    return path


@pytest.fixture(autouse=True)
def clear_config_after_test():
    """Automatically reset configuration state after each test."""
    yield

    from owlmeter.config import reset_config_path

    reset_config_path()
