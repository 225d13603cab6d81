"""
Version service for versioninfo.

Collects the released versions from git tags and resolves the version
currently being built:
- a tagged release when HEAD carries an exact tag on this branch's line
- otherwise a snapshot derived from the latest matching release
"""

from typing import List, Optional, Mapping, Sequence
import logging
import re

from ..domain import SemVer, HistoricalVersion, CurrentVersion, sort_versions
from ..exit_codes import CodeNameError, GitCommandError, NoMatchingVersionError
from ..infra.git_client import GitClient
from ..utils import get_build_number

logger = logging.getLogger(__name__)

CODENAME_REGEX = re.compile(r"codename\((.*)\)")

DEFAULT_DOCS_HOST = "code.angularjs.org"
DEFAULT_STABLE_RANGE = "1.0 || 1.2"
DEFAULT_BUILD_NUMBER_ENV = ("TRAVIS_BUILD_NUMBER", "BUILD_NUMBER")
SNAPSHOT_CODE_NAME = "snapshot"


class VersionService:
    """
    Service for version history and current-version resolution.

    Example:
        service = VersionService(GitClient(), branch_version="1.2.x")
        history = service.previous_versions()
        current = service.current_version(history)
        print(current.full)
    """

    def __init__(
        self,
        git: GitClient,
        branch_version: str,
        docs_host: str = DEFAULT_DOCS_HOST,
        stable_range: str = DEFAULT_STABLE_RANGE,
        build_number_env: Sequence[str] = DEFAULT_BUILD_NUMBER_ENV,
        snapshot_code_name: str = SNAPSHOT_CODE_NAME,
        environ: Optional[Mapping[str, str]] = None,
    ):
        """
        Initialize VersionService.

        Args:
            git: Git client used for every repository query
            branch_version: Range naming the release line of this branch
            docs_host: Host serving versioned documentation
            stable_range: Range of release lines considered stable
            build_number_env: CI build number variables, in priority order
            snapshot_code_name: Code name given to snapshot versions
            environ: Environment mapping (default: os.environ)
        """
        self.git = git
        self.branch_version = branch_version
        self.docs_host = docs_host
        self.stable_range = stable_range
        self.build_number_env = tuple(build_number_env)
        self.snapshot_code_name = snapshot_code_name
        self.environ = environ

    def is_stable(self, version: SemVer) -> bool:
        """Stable versions are on a stable release line and have no prerelease."""
        return version.satisfies(self.stable_range) and not version.prerelease

    def docs_url(self, version: SemVer) -> str:
        url = f"http://{self.docs_host}/{version.version}/docs"
        # Versions before 1.0.2 had a different docs folder name
        if version.major < 1 or (version.major == 1 and version.minor == 0 and version.patch < 2):
            url += f"-{version.version}"
        return url

    def previous_versions(self) -> List[HistoricalVersion]:
        """
        Get all previous versions, sorted ascending by semantic version.

        Tags that are not semantic versions are skipped.

        Raises:
            GitCommandError: If the tags cannot be listed
        """
        tags = self.git.list_tags()
        if tags is None:
            raise GitCommandError("Could not list git tags")

        versions = []
        for tag in tags:
            version = SemVer.parse(tag)
            if version is None:
                logger.debug(f"Skipping non-semver tag {tag!r}")
                continue
            versions.append(HistoricalVersion(
                major=version.major,
                minor=version.minor,
                patch=version.patch,
                prerelease=version.prerelease,
                build=version.build,
                raw=version.raw,
                is_stable=self.is_stable(version),
                docs_url=self.docs_url(version),
            ))

        return sort_versions(versions)

    def code_name(self, tag: str) -> str:
        """
        Extract the code name from a tag message of the form "codename(some-code-name)".

        Raises:
            CodeNameError: If the tag message carries no code name
        """
        message = self.git.read_tag_annotation(tag)
        match = CODENAME_REGEX.search(message) if message else None
        if not match or not match.group(1):
            raise CodeNameError(tag)
        return match.group(1)

    def tagged_version(self) -> Optional[CurrentVersion]:
        """
        Get the release version if HEAD is tagged with a version on this branch's line.

        Returns:
            CurrentVersion, or None if HEAD is not such a release
        """
        tag = self.git.describe_exact_tag_at_head()
        if not tag:
            return None

        version = SemVer.parse(tag)
        if version is None:
            logger.debug(f"HEAD tag {tag!r} is not a semantic version")
            return None

        if not version.satisfies(self.branch_version):
            logger.info(f"HEAD tag {tag} is outside branchVersion {self.branch_version}")
            return None

        return CurrentVersion(
            major=version.major,
            minor=version.minor,
            patch=version.patch,
            prerelease=version.prerelease,
            build=version.build,
            raw=version.raw,
            code_name=self.code_name(tag),
        )

    def build(self) -> str:
        """
        Compute the build metadata of a snapshot from the current commit.

        Raises:
            GitCommandError: If the commit hash cannot be read
        """
        commit_hash = self.git.short_head_hash()
        if not commit_hash:
            raise GitCommandError("Could not read the short commit hash of HEAD")
        return f"sha.{commit_hash}"

    def snapshot_version(self, history: Sequence[HistoricalVersion]) -> CurrentVersion:
        """
        Get the unstable snapshot version.

        Starts from the latest previous version on this branch's line and
        replaces its prerelease and build parts.

        Args:
            history: Previous versions sorted ascending

        Raises:
            NoMatchingVersionError: If no previous version matches branchVersion
        """
        matching = [v for v in history if v.satisfies(self.branch_version)]
        if not matching:
            raise NoMatchingVersionError(self.branch_version)
        base = matching[-1]

        build_number = get_build_number(self.build_number_env, self.environ)
        prerelease = ('build', build_number) if build_number else ('local',)

        # A new record, so the history entry is left untouched
        return CurrentVersion(
            major=base.major,
            minor=base.minor,
            patch=base.patch,
            raw=base.raw,
            prerelease=prerelease,
            build=self.build(),
            code_name=self.snapshot_code_name,
            is_snapshot=True,
        )

    def current_version(self, history: Optional[Sequence[HistoricalVersion]] = None) -> CurrentVersion:
        """
        Resolve the version being built.

        Args:
            history: Previous versions; collected from git when omitted
                and needed for a snapshot

        Returns:
            The tagged release version, or a snapshot version
        """
        version = self.tagged_version()
        if version is not None:
            return version
        if history is None:
            history = self.previous_versions()
        return self.snapshot_version(history)
