"""File repository layer for dependency injection."""

from kyopro.repository.local import LocalFileRepository
from kyopro.repository.protocol import FileRepositoryProtocol

__all__ = [
    "FileRepositoryProtocol",
    "LocalFileRepository",
]
