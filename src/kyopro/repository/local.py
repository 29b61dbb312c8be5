"""Local filesystem implementation of FileRepositoryProtocol."""

from pathlib import Path
from typing import List, Union


class LocalFileRepository:
    """Implementation of FileRepositoryProtocol using local filesystem."""

    def exists(self, path: Union[str, Path]) -> bool:
        """Check if a file or directory exists."""
        return Path(path).exists()

    def is_file(self, path: Union[str, Path]) -> bool:
        """Check if path is a file."""
        return Path(path).is_file()

    def is_dir(self, path: Union[str, Path]) -> bool:
        """Check if path is a directory."""
        return Path(path).is_dir()

    def read_text(self, path: Union[str, Path], encoding: str = "utf-8") -> str:
        """Read file contents as text."""
        return Path(path).read_text(encoding=encoding)

    def write_text(self, path: Union[str, Path], content: str, encoding: str = "utf-8") -> None:
        """Write text to file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(content, encoding=encoding)

    def list_dirs(self, directory: Union[str, Path]) -> List[Path]:
        """List immediate subdirectories, sorted by name."""
        dir_path = Path(directory)
        if not dir_path.is_dir():
            return []
        return sorted(p for p in dir_path.iterdir() if p.is_dir())

    def mkdir(self, path: Union[str, Path], parents: bool = True) -> None:
        """Create directory (and parents if needed)."""
        Path(path).mkdir(parents=parents, exist_ok=True)
