"""
Version domain objects for versioninfo.

SemVer is a parsed semantic version. HistoricalVersion and CurrentVersion
extend it with the fields a release listing and the resolved build version
need. All of them are immutable; deriving a new version means building a
new object with dataclasses.replace().
"""

from dataclasses import dataclass
from functools import cmp_to_key
from typing import Optional, Dict, Any, Tuple, List, Iterable

import nodesemver


@dataclass(frozen=True)
class SemVer:
    """A parsed semantic version (major.minor.patch[-prerelease][+build])."""
    major: int
    minor: int
    patch: int
    prerelease: Tuple[str, ...] = ()
    build: str = ""
    raw: str = ""

    @classmethod
    def parse(cls, text: str) -> Optional['SemVer']:
        """
        Parse a version string such as "1.2.3", "v1.2.3-rc.1" or "1.2.3+sha.abc".

        Returns:
            SemVer, or None if the string is not a valid semantic version
        """
        if not text:
            return None
        text = text.strip()
        parsed = nodesemver.parse(text, loose=False)
        if parsed is None:
            return None
        return cls(
            major=int(parsed.major),
            minor=int(parsed.minor),
            patch=int(parsed.patch),
            prerelease=tuple(str(p) for p in parsed.prerelease),
            build='.'.join(str(b) for b in parsed.build),
            raw=text
        )

    @property
    def version(self) -> str:
        """Canonical version string, without build metadata."""
        version = f"{self.major}.{self.minor}.{self.patch}"
        if self.prerelease:
            version += '-' + '.'.join(self.prerelease)
        return version

    def satisfies(self, range_expr: str) -> bool:
        """Check whether this version falls inside an npm-style range (e.g. "1.2.x")."""
        return nodesemver.satisfies(self.version, range_expr, loose=False)

    def compare(self, other: 'SemVer') -> int:
        """Compare by semver precedence: -1, 0 or 1. Build metadata is ignored."""
        return nodesemver.compare(self.version, other.version, loose=False)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'version': self.version,
            'major': self.major,
            'minor': self.minor,
            'patch': self.patch,
            'prerelease': list(self.prerelease),
            'build': self.build,
            'raw': self.raw,
        }

    def __str__(self) -> str:
        return self.version


@dataclass(frozen=True)
class HistoricalVersion(SemVer):
    """A released version found among the repository's tags."""
    is_stable: bool = False
    docs_url: str = ""

    def to_dict(self) -> Dict[str, Any]:
        result = super().to_dict()
        result['isStable'] = self.is_stable
        result['docsUrl'] = self.docs_url
        return result


@dataclass(frozen=True)
class CurrentVersion(SemVer):
    """
    The version being built: either a tagged release or a snapshot.

    The full form appends the build metadata ("1.2.3+sha.abc1234").
    """
    code_name: str = ""
    is_snapshot: bool = False

    @property
    def full(self) -> str:
        return f"{self.version}+{self.build}"

    def to_dict(self) -> Dict[str, Any]:
        result = super().to_dict()
        result['codeName'] = self.code_name
        result['isSnapshot'] = self.is_snapshot
        result['full'] = self.full
        return result


def sort_versions(versions: Iterable[SemVer]) -> List[SemVer]:
    """Sort versions ascending by semver precedence."""
    return sorted(versions, key=cmp_to_key(lambda a, b: a.compare(b)))
