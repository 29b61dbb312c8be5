"""
Service Factory
===============

Reusable factory for instantiating services with proper dependency injection.

Usage:
    from kyopro.services.factory import ServiceFactory

    factory = ServiceFactory()
    result = factory.problem.test("300", "a")

    # Tests inject an in-memory repository and a fixed config
    factory = ServiceFactory(file_repository=MockFileRepository(), config=get_default_config())
"""

from typing import TYPE_CHECKING, Optional

from kyopro.repository import LocalFileRepository
from kyopro.repository.protocol import FileRepositoryProtocol

from .config import ConfigService
from .contest import ContestService
from .dependency import DependencyService
from .notes import NotesService
from .problem import ProblemService
from .util import UtilityService

if TYPE_CHECKING:
    from kyopro.core.config import Config


class ServiceFactory:
    """
    Factory for creating service instances with proper dependency injection.

    Services are created lazily and cached, so every caller sharing a
    factory sees the same instances.

    Attributes:
        file_repository: File repository implementation for file-based services
    """

    def __init__(
        self,
        file_repository: Optional[FileRepositoryProtocol] = None,
        config: Optional["Config"] = None,
    ) -> None:
        """
        Initialize the service factory.

        Args:
            file_repository: Optional custom file repository. If None, uses LocalFileRepository.
            config: Optional fixed configuration. If None, services use the process-wide config.
        """
        self.file_repository = file_repository or LocalFileRepository()
        self._config = config
        self._services = {}

    def _get(self, key: str, factory):
        if key not in self._services:
            self._services[key] = factory()
        return self._services[key]

    def create_contest_service(self) -> ContestService:
        """Create ContestService with file repository."""
        return ContestService(file_repository=self.file_repository, config=self._config)

    def create_problem_service(self) -> ProblemService:
        """Create ProblemService with file repository."""
        return ProblemService(file_repository=self.file_repository, config=self._config)

    def create_config_service(self) -> ConfigService:
        return ConfigService(config=self._config)

    def create_dependency_service(self) -> DependencyService:
        return DependencyService(config=self._config)

    def create_notes_service(self) -> NotesService:
        return NotesService()

    def create_util_service(self) -> UtilityService:
        return UtilityService()

    @property
    def contest(self) -> ContestService:
        return self._get("contest", self.create_contest_service)

    @property
    def problem(self) -> ProblemService:
        return self._get("problem", self.create_problem_service)

    @property
    def config(self) -> ConfigService:
        return self._get("config", self.create_config_service)

    @property
    def dependency(self) -> DependencyService:
        return self._get("dependency", self.create_dependency_service)

    @property
    def notes(self) -> NotesService:
        return self._get("notes", self.create_notes_service)

    @property
    def util(self) -> UtilityService:
        return self._get("util", self.create_util_service)
