"""Version information model."""

from dataclasses import dataclass

from kyopro.models.base import ToDictMixin


@dataclass
class VersionInfo(ToDictMixin):
    """kyopro and interpreter version details."""

    kyopro_version: str
    python_version: str
    platform: str
