"""
CLI Service Helpers
===================

CLI-specific utilities for working with services and the ServiceFactory.

This module provides convenience functions for CLI commands to:
1. Access a singleton ServiceFactory instance
2. Handle service result errors consistently

Usage:
    from kyopro.cli.service_helpers import services, handle_result

    report = handle_result(services.problem.debug("300", "a"))
"""

from typing import TYPE_CHECKING, TypeVar

import click

if TYPE_CHECKING:
    from kyopro.services import ServiceFactory
    from kyopro.services.base import ServiceResult
    from kyopro.services.config import ConfigService
    from kyopro.services.contest import ContestService
    from kyopro.services.dependency import DependencyService
    from kyopro.services.notes import NotesService
    from kyopro.services.problem import ProblemService
    from kyopro.services.util import UtilityService

T = TypeVar("T")


# ============================================================================
# Singleton Factory Instance
# ============================================================================

_factory: "ServiceFactory | None" = None


def get_factory() -> "ServiceFactory":
    """
    Get the singleton ServiceFactory instance for CLI.

    This is lazily initialized on first access. For testing, use
    set_factory() to inject a factory with a mock repository or config.

    Returns:
        ServiceFactory: The singleton factory instance
    """
    global _factory
    if _factory is None:
        from kyopro.services import ServiceFactory

        _factory = ServiceFactory()
    return _factory


def set_factory(factory: "ServiceFactory") -> None:
    """
    Set a custom ServiceFactory instance.

    Args:
        factory: Custom ServiceFactory instance to use
    """
    global _factory
    _factory = factory


class _ServiceAccessor:
    """Lazy accessor for services through the singleton factory."""

    @property
    def contest(self) -> "ContestService":
        return get_factory().contest

    @property
    def problem(self) -> "ProblemService":
        return get_factory().problem

    @property
    def config(self) -> "ConfigService":
        return get_factory().config

    @property
    def dependency(self) -> "DependencyService":
        return get_factory().dependency

    @property
    def notes(self) -> "NotesService":
        return get_factory().notes

    @property
    def util(self) -> "UtilityService":
        return get_factory().util


services = _ServiceAccessor()


# ============================================================================
# Result Handling Utilities
# ============================================================================


def handle_result(result: "ServiceResult[T]") -> T:
    """
    Handle a service result, exiting with error if failed.

    Args:
        result: Service result to handle

    Returns:
        The result data if successful

    Raises:
        SystemExit: If result indicates failure (exits with code 1)
    """
    if not result.success:
        exit_with_error(result.error or "Unknown error")
    return result.data


def exit_with_error(message: str, code: int = 1) -> None:
    """
    Print error message and exit.

    Raises:
        SystemExit: Always exits with specified code
    """
    click.echo(f"Error: {message}", err=True)
    raise SystemExit(code)


def reset_factory() -> None:
    """Reset the singleton factory instance (used by tests)."""
    global _factory
    _factory = None


__all__ = [
    "services",
    "get_factory",
    "set_factory",
    "handle_result",
    "exit_with_error",
    "reset_factory",
]
