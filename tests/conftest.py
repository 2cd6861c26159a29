import sys
from pathlib import Path

import pytest

# Ensure the project root and tests directories are on the Python path
project_root = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(project_root))
tests_dir = Path(__file__).resolve().parent
sys.path.insert(0, str(tests_dir))


def pytest_configure(config):
    config.addinivalue_line("markers", "property: hypothesis property-based tests")


@pytest.fixture
def sleeps(monkeypatch):
    """Record retry pauses instead of sleeping."""
    recorded = []
    monkeypatch.setattr("fetchtool.utils.decorators.time.sleep", recorded.append)
    return recorded


@pytest.fixture
def scripted_executor():
    """Build an executor that returns ``results`` in order and counts calls."""

    def build(*results):
        calls = []
        queue = list(results)

        def executor(url, timeout):
            calls.append((url, timeout))
            return queue.pop(0) if len(queue) > 1 else queue[0]

        executor.calls = calls
        return executor

    return build


@pytest.fixture
def no_proxy_env(monkeypatch):
    """Keep httpx from routing real-transport tests through a proxy."""
    for name in ("HTTP_PROXY", "HTTPS_PROXY", "ALL_PROXY"):
        monkeypatch.delenv(name, raising=False)
        monkeypatch.delenv(name.lower(), raising=False)
