"""Data models for kyopro."""

from kyopro.models.base import ToDictMixin
from kyopro.models.contest import ContestSetup, ProblemSetup
from kyopro.models.dependency import DependencyInfo, DependencyReport
from kyopro.models.problem import DebugReport, ProblemRun
from kyopro.models.version import VersionInfo

__all__ = [
    "ToDictMixin",
    "ContestSetup",
    "ProblemSetup",
    "DependencyInfo",
    "DependencyReport",
    "DebugReport",
    "ProblemRun",
    "VersionInfo",
]
