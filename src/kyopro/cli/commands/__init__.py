"""CLI command modules."""

from .config import config
from .contest import new
from .notes import notes
from .problem import problem_debug, problem_submit, problem_test

__all__ = [
    "config",
    "new",
    "notes",
    "problem_debug",
    "problem_submit",
    "problem_test",
]
