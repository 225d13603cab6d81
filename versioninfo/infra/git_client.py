"""
Git client infrastructure for versioninfo.

Provides a clean abstraction over git command execution.
All git operations go through this client, making them:
- Easy to mock for testing
- Consistent in error handling
- Isolated from business logic
"""

import subprocess
from typing import Optional, List, Tuple
import logging

logger = logging.getLogger(__name__)


class GitClient:
    """
    Abstraction over the git commands versioninfo needs.

    Every method returns plain strings (or None) and never raises on a
    failed command; callers decide whether a failure is fatal.

    Example:
        client = GitClient(cwd="/path/to/repo")
        tag = client.describe_exact_tag_at_head()
        if tag is None:
            print("HEAD is not tagged")
    """

    def __init__(self, cwd: Optional[str] = None, timeout: int = 30):
        """
        Initialize GitClient.

        Args:
            cwd: Working directory for git commands (default: process cwd)
            timeout: Command timeout in seconds (default: 30)
        """
        self.cwd = cwd
        self.timeout = timeout

    def _run(self, args: List[str]) -> Tuple[Optional[str], int]:
        """
        Run a git command.

        Args:
            args: Arguments passed to git

        Returns:
            Tuple of (stdout, returncode). Timeouts and launch failures
            are reported as (None, -1).
        """
        cmd = ['git'] + args
        logger.debug(f"Running: {' '.join(cmd)}")
        try:
            result = subprocess.run(
                cmd,
                cwd=self.cwd,
                capture_output=True,
                text=True,
                timeout=self.timeout
            )
            return result.stdout, result.returncode

        except subprocess.TimeoutExpired:
            logger.warning(f"Git command timed out: {' '.join(cmd)}")
            return None, -1
        except OSError as e:
            logger.error(f"Git command failed: {' '.join(cmd)} - {e}")
            return None, -1

    def list_tags(self) -> Optional[List[str]]:
        """
        List all tag names.

        Returns:
            Tag names (possibly empty), or None if git failed
        """
        output, code = self._run(['tag'])
        if code != 0 or output is None:
            return None
        return [line.strip() for line in output.strip().split('\n') if line.strip()]

    def describe_exact_tag_at_head(self) -> Optional[str]:
        """Get the tag pointing exactly at HEAD, or None if HEAD is untagged."""
        output, code = self._run(['describe', '--exact-match'])
        if code != 0 or not output:
            return None
        return output.strip()

    def read_tag_annotation(self, tag: str) -> Optional[str]:
        """
        Read an annotated tag object, keeping only lines mentioning a codename.

        Args:
            tag: Tag name

        Returns:
            Matching lines joined by newlines, or None if there are none
            or the tag object cannot be read
        """
        output, code = self._run(['cat-file', '-p', tag])
        if code != 0 or not output:
            return None
        lines = [line for line in output.split('\n') if 'codename' in line]
        return '\n'.join(lines) if lines else None

    def short_head_hash(self) -> Optional[str]:
        """Get the abbreviated commit hash of HEAD."""
        output, code = self._run(['rev-parse', '--short', 'HEAD'])
        if code != 0 or not output:
            return None
        return output.replace('\n', '')
