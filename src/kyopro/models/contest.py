"""Contest setup models."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from kyopro.models.base import ToDictMixin


@dataclass
class ProblemSetup(ToDictMixin):
    """What `kp new` did for one task directory."""

    letter: str
    path: Path
    url: Optional[str] = None
    header_written: bool = False
    built: bool = False


@dataclass
class ContestSetup(ToDictMixin):
    """Result of creating a contest project."""

    project: str
    path: Path
    template: str
    problems: List[ProblemSetup] = field(default_factory=list)

    def _to_dict_extra(self):
        return {"problem_count": len(self.problems)}
