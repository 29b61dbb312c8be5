"""Abstract protocol for file repository operations."""

from pathlib import Path
from typing import List, Protocol, Union


class FileRepositoryProtocol(Protocol):
    """Protocol defining file repository operations.

    Services read sample files and rewrite task sources through this
    interface so tests can run against an in-memory filesystem.
    """

    def exists(self, path: Union[str, Path]) -> bool:
        """Check if a file or directory exists."""
        ...

    def is_file(self, path: Union[str, Path]) -> bool:
        """Check if path is a file."""
        ...

    def is_dir(self, path: Union[str, Path]) -> bool:
        """Check if path is a directory."""
        ...

    def read_text(self, path: Union[str, Path], encoding: str = "utf-8") -> str:
        """Read file contents as text."""
        ...

    def write_text(self, path: Union[str, Path], content: str, encoding: str = "utf-8") -> None:
        """Write text to file."""
        ...

    def list_dirs(self, directory: Union[str, Path]) -> List[Path]:
        """List immediate subdirectories, sorted by name."""
        ...

    def mkdir(self, path: Union[str, Path], parents: bool = True) -> None:
        """Create directory (and parents if needed)."""
        ...
