"""
Service layer for versioninfo.

Contains business logic that orchestrates domain objects and infrastructure:
- VersionService: Version history and current-version resolution

Services are the primary API for commands to use.
"""

from .version_service import VersionService

__all__ = [
    'VersionService',
]
