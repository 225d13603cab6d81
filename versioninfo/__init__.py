"""
versioninfo - Semantic version descriptor for release builds.

Inspects git tags, the HEAD commit and the project's package.json to
work out which version a build is producing.

Quick Start:
    import versioninfo

    info = versioninfo.create()

    # The version being built: a tagged release or a snapshot
    print(info.current_version.version)    # 1.2.1-local
    print(info.current_version.full)       # 1.2.1-local+sha.abc1234
    print(info.current_version.code_name)  # snapshot

    # Released versions, oldest first
    for version in info.previous_versions:
        print(version.version, version.is_stable, version.docs_url)

    # GitHub owner/repo from package.json "repository.url"
    print(info.repo_info.owner, info.repo_info.repo)

Domain Objects:
    SemVer - Parsed semantic version
    HistoricalVersion - Released version with stability and docs URL
    CurrentVersion - Version being built, with code name
    RepoInfo - GitHub owner and repository
    Manifest - Loaded package.json
"""

__version__ = "0.3.0"

# High-level API
from .api import VersionInfo, create

# Domain objects
from .domain import (
    SemVer,
    HistoricalVersion,
    CurrentVersion,
    RepoInfo,
    Manifest,
)

# Services (for advanced use)
from .services import VersionService
from .infra import GitClient

# Building blocks
from .manifest import load_manifest, find_manifest
from .utils import parse_repo_url

# Configuration
from .config import load_config

__all__ = [
    # Version
    "__version__",
    # High-level API
    "VersionInfo",
    "create",
    # Domain objects
    "SemVer",
    "HistoricalVersion",
    "CurrentVersion",
    "RepoInfo",
    "Manifest",
    # Services
    "VersionService",
    "GitClient",
    # Building blocks
    "load_manifest",
    "find_manifest",
    "parse_repo_url",
    # Configuration
    "load_config",
]
