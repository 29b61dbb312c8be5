# services/__init__.py
"""
Services Package
================

Application services that sit between the CLI and the core logic.

Architecture:
    View (CLI)
        ↓ (contest number, task letter, options)
    Service
        ↓ (delegates to)
    Core (layout, shell execution, config, notes)

Usage:
    from kyopro.services import ServiceFactory

    factory = ServiceFactory()
    result = factory.problem.debug("300", "a", sample="2")
    if result.success:
        print(result.data.matched)
"""

from .base import BaseService, ServiceResult
from .config import ConfigService
from .contest import ContestService
from .dependency import DependencyService
from .factory import ServiceFactory
from .notes import NotesService
from .problem import DebugReporter, ProblemService
from .util import UtilityService

__all__ = [
    "BaseService",
    "ServiceResult",
    "ConfigService",
    "ContestService",
    "DependencyService",
    "ServiceFactory",
    "NotesService",
    "DebugReporter",
    "ProblemService",
    "UtilityService",
]
