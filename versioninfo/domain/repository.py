"""
Repository and manifest domain objects for versioninfo.
"""

from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Optional, Dict, Any, Mapping

from ..exit_codes import ManifestError


@dataclass(frozen=True)
class RepoInfo:
    """GitHub owner and repository name."""
    owner: str
    repo: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            'owner': self.owner,
            'repo': self.repo,
        }


@dataclass(frozen=True)
class Manifest:
    """
    A loaded package.json.

    The raw data is exposed read-only; the accessors for the fields
    versioninfo depends on raise ManifestError when they are absent.
    """
    path: Path
    data: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        if not isinstance(self.data, MappingProxyType):
            object.__setattr__(self, 'data', MappingProxyType(dict(self.data)))

    def get(self, key: str, default: Any = None) -> Any:
        return self.data.get(key, default)

    def __getitem__(self, key: str) -> Any:
        return self.data[key]

    @property
    def name(self) -> Optional[str]:
        return self.data.get('name')

    @property
    def version(self) -> Optional[str]:
        return self.data.get('version')

    @property
    def repository_url(self) -> str:
        repository = self.data.get('repository')
        url = repository.get('url') if isinstance(repository, dict) else None
        if not isinstance(url, str):
            raise ManifestError(f"{self.path} has no 'repository.url' string")
        return url

    @property
    def branch_version(self) -> str:
        branch_version = self.data.get('branchVersion')
        if not isinstance(branch_version, str) or not branch_version.strip():
            raise ManifestError(f"{self.path} has no 'branchVersion' range")
        return branch_version

    def to_dict(self) -> Dict[str, Any]:
        result = dict(self.data)
        result['path'] = str(self.path)
        return result
