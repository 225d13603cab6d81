"""
Domain layer for versioninfo.

Contains pure domain objects with no I/O or side effects:
- SemVer: A parsed semantic version
- HistoricalVersion: A released version with stability and docs metadata
- CurrentVersion: The version being built (tagged release or snapshot)
- RepoInfo: GitHub owner/repository pair
- Manifest: A loaded package.json

These objects are immutable and provide serialization methods for
JSONL output.
"""

from .version import SemVer, HistoricalVersion, CurrentVersion, sort_versions
from .repository import RepoInfo, Manifest

__all__ = [
    'SemVer',
    'HistoricalVersion',
    'CurrentVersion',
    'sort_versions',
    'RepoInfo',
    'Manifest',
]
