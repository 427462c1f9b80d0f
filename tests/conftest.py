"""Shared pytest fixtures for unitsteps tests."""

from __future__ import annotations

from collections.abc import Callable
import logging
from pathlib import Path

import pytest

from unitsteps.core.sampling import SamplePattern

# ============================================================================
# Evaluator Fixtures
# ============================================================================


@pytest.fixture
def ten_to_twenty() -> Callable[[float], float]:
    """Affine evaluator mapping [0, 1] onto [10, 20]."""
    return lambda t: 10 + 10 * t


class RecordingEvaluator:
    """Evaluator that remembers every parameter it was called with."""

    def __init__(self) -> None:
        self.calls: list[float] = []

    def __call__(self, t: float) -> float:
        self.calls.append(t)
        return t


@pytest.fixture
def recorder() -> RecordingEvaluator:
    """Fresh recording evaluator."""
    return RecordingEvaluator()


@pytest.fixture(params=list(SamplePattern), ids=lambda p: p.value)
def pattern(request: pytest.FixtureRequest) -> SamplePattern:
    """Each sampling pattern in turn."""
    return request.param


# ============================================================================
# Path Fixtures
# ============================================================================


@pytest.fixture
def config_dir(tmp_path: Path) -> Path:
    """Temporary directory for config files."""
    path = tmp_path / "config"
    path.mkdir()
    return path


# ============================================================================
# Logging Fixtures
# ============================================================================


@pytest.fixture
def restore_root_logging():
    """Restore root logger handlers and level after a test reconfigures logging."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers = handlers
    root.setLevel(level)
