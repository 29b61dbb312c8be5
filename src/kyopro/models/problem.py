"""Per-problem action models."""

from dataclasses import dataclass
from pathlib import Path

from kyopro.models.base import ToDictMixin


@dataclass
class ProblemRun(ToDictMixin):
    """Result of `kp test` or `kp submit`."""

    project: str
    letter: str
    path: Path
    submitted: bool = False


@dataclass
class DebugReport(ToDictMixin):
    """Everything `kp debug` shows for one sample."""

    project: str
    letter: str
    sample: str
    input_text: str
    debug_output: str
    release_output: str
    expected_output: str
    execution_time: float
    matched: bool
    debug_returncode: int = 0
    release_returncode: int = 0
