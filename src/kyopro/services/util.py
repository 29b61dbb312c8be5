"""
Service for version and environment information.
"""

import platform
import sys

from kyopro import __version__
from kyopro.models.version import VersionInfo

from .base import BaseService, ServiceResult


class UtilityService(BaseService):
    """Service for system information and utility operations."""

    def get_version(self) -> ServiceResult[VersionInfo]:
        """
        Get kyopro version and environment information.

        Returns:
            ServiceResult containing VersionInfo
        """
        info = VersionInfo(
            kyopro_version=__version__,
            python_version=sys.version,
            platform=platform.platform(),
        )
        return ServiceResult.ok(data=info, message=f"kyopro {__version__}")
