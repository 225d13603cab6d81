"""
High-level Python API for versioninfo.

Computes everything a build needs to know about the version being
produced, once, from the repository and its package.json.

Example:
    import versioninfo

    info = versioninfo.create()

    print(info.current_version.full)       # 1.2.4-local+sha.abc1234
    print(info.current_version.code_name)  # snapshot
    print(info.repo_info.owner)

    for version in info.previous_versions:
        print(version.version, version.is_stable, version.docs_url)

    # Or from another directory, with a custom git client
    info = versioninfo.create(cwd="~/src/widget", git=GitClient(timeout=5))
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Mapping, Dict, Any, List, Union
import logging

from .domain import Manifest, RepoInfo, HistoricalVersion, CurrentVersion
from .services import VersionService
from .services.version_service import (
    DEFAULT_DOCS_HOST,
    DEFAULT_STABLE_RANGE,
    DEFAULT_BUILD_NUMBER_ENV,
    SNAPSHOT_CODE_NAME,
)
from .infra import GitClient
from .config import load_config
from .manifest import load_manifest
from .utils import parse_repo_url

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class VersionInfo:
    """
    Everything versioninfo derives for one build.

    Attributes:
        manifest: The project's package.json
        previous_versions: Released versions, ascending
        current_version: Tagged release or snapshot being built
        repo_info: GitHub owner/repo from the manifest's repository url
    """
    manifest: Manifest
    previous_versions: List[HistoricalVersion]
    current_version: CurrentVersion
    repo_info: RepoInfo

    def to_dict(self) -> Dict[str, Any]:
        return {
            'package': self.manifest.to_dict(),
            'currentVersion': self.current_version.to_dict(),
            'previousVersions': [v.to_dict() for v in self.previous_versions],
            'gitRepoInfo': self.repo_info.to_dict(),
        }


def create_service(
    manifest: Manifest,
    git: GitClient,
    config: Optional[Dict[str, Any]] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> VersionService:
    """
    Build a VersionService for a manifest using configuration settings.

    Args:
        manifest: Loaded package.json (provides branchVersion)
        git: Git client for the repository
        config: Configuration dict (default: load_config())
        environ: Environment mapping (default: os.environ)
    """
    if config is None:
        config = load_config()
    versions_config = config.get('versions', {})
    return VersionService(
        git,
        branch_version=manifest.branch_version,
        docs_host=config.get('docs', {}).get('host', DEFAULT_DOCS_HOST),
        stable_range=versions_config.get('stable_range', DEFAULT_STABLE_RANGE),
        build_number_env=versions_config.get('build_number_env', DEFAULT_BUILD_NUMBER_ENV),
        snapshot_code_name=versions_config.get('snapshot_code_name', SNAPSHOT_CODE_NAME),
        environ=environ,
    )


def create_git_client(cwd: Optional[Union[str, Path]] = None,
                      config: Optional[Dict[str, Any]] = None) -> GitClient:
    """Build a GitClient rooted at cwd with the configured timeout."""
    if config is None:
        config = load_config()
    workdir = str(Path(cwd).expanduser().resolve()) if cwd is not None else None
    return GitClient(cwd=workdir, timeout=config.get('git', {}).get('timeout', 30))


def resolve_manifest(cwd: Optional[Union[str, Path]] = None,
                     config: Optional[Dict[str, Any]] = None) -> Manifest:
    """Load the manifest found from cwd upward."""
    if config is None:
        config = load_config()
    start = Path(cwd).expanduser() if cwd is not None else None
    filename = config.get('manifest', {}).get('filename', 'package.json')
    return load_manifest(start, filename)


def create(
    cwd: Optional[Union[str, Path]] = None,
    git: Optional[GitClient] = None,
    config: Optional[Dict[str, Any]] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> VersionInfo:
    """
    Compute the VersionInfo for the project containing cwd.

    Args:
        cwd: Directory to start from (default: current directory)
        git: Git client (default: GitClient rooted at cwd)
        config: Configuration dict (default: load_config())
        environ: Environment mapping (default: os.environ)

    Raises:
        ManifestError, RepoUrlError, GitCommandError, CodeNameError,
        NoMatchingVersionError
    """
    if config is None:
        config = load_config()
    if git is None:
        git = create_git_client(cwd, config)

    manifest = resolve_manifest(cwd, config)
    service = create_service(manifest, git, config, environ)

    previous_versions = service.previous_versions()
    current_version = service.current_version(previous_versions)
    repo_info = parse_repo_url(manifest.repository_url)

    logger.debug(f"Resolved {current_version.full} for {repo_info.owner}/{repo_info.repo}")

    return VersionInfo(
        manifest=manifest,
        previous_versions=previous_versions,
        current_version=current_version,
        repo_info=repo_info,
    )
