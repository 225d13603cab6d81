"""
Unit tests for versioninfo.infra.git_client
"""
import subprocess
import unittest
from unittest.mock import patch, MagicMock

from versioninfo.infra.git_client import GitClient


def completed(stdout="", returncode=0):
    """Build a fake subprocess.CompletedProcess."""
    result = MagicMock()
    result.stdout = stdout
    result.stderr = ""
    result.returncode = returncode
    return result


@patch('versioninfo.infra.git_client.subprocess.run')
class TestGitClient(unittest.TestCase):
    """Test the git commands and how their output is interpreted"""

    def setUp(self):
        self.client = GitClient(cwd="/repo", timeout=5)

    def test_run_passes_cwd_and_timeout(self, mock_run):
        mock_run.return_value = completed("v1.0.0\n")
        self.client.list_tags()
        args, kwargs = mock_run.call_args
        self.assertEqual(args[0], ['git', 'tag'])
        self.assertEqual(kwargs['cwd'], "/repo")
        self.assertEqual(kwargs['timeout'], 5)

    def test_list_tags(self, mock_run):
        mock_run.return_value = completed("v1.0.0\nv1.2.0\nnightly\n")
        self.assertEqual(self.client.list_tags(), ["v1.0.0", "v1.2.0", "nightly"])

    def test_list_tags_empty_repository(self, mock_run):
        mock_run.return_value = completed("")
        self.assertEqual(self.client.list_tags(), [])

    def test_list_tags_failure(self, mock_run):
        mock_run.return_value = completed("", returncode=128)
        self.assertIsNone(self.client.list_tags())

    def test_describe_exact_tag(self, mock_run):
        mock_run.return_value = completed("v1.2.3\n")
        self.assertEqual(self.client.describe_exact_tag_at_head(), "v1.2.3")
        self.assertEqual(mock_run.call_args[0][0], ['git', 'describe', '--exact-match'])

    def test_describe_untagged_head(self, mock_run):
        mock_run.return_value = completed("", returncode=128)
        self.assertIsNone(self.client.describe_exact_tag_at_head())

    def test_read_tag_annotation_keeps_codename_lines(self, mock_run):
        mock_run.return_value = completed(
            "object 1234\n"
            "type commit\n"
            "tag v1.2.3\n"
            "tagger Jane <jane@example.com> 1380000000 +0000\n"
            "\n"
            "v1.2.3 codename(Firecracker)\n"
        )
        self.assertEqual(self.client.read_tag_annotation("v1.2.3"), "v1.2.3 codename(Firecracker)")
        self.assertEqual(mock_run.call_args[0][0], ['git', 'cat-file', '-p', 'v1.2.3'])

    def test_read_tag_annotation_without_codename(self, mock_run):
        mock_run.return_value = completed("tree abc\nparent def\n\nplain commit\n")
        self.assertIsNone(self.client.read_tag_annotation("v1.2.3"))

    def test_short_head_hash_trims_newline(self, mock_run):
        mock_run.return_value = completed("abc1234\n")
        self.assertEqual(self.client.short_head_hash(), "abc1234")
        self.assertEqual(mock_run.call_args[0][0], ['git', 'rev-parse', '--short', 'HEAD'])

    def test_short_head_hash_failure(self, mock_run):
        mock_run.return_value = completed("", returncode=128)
        self.assertIsNone(self.client.short_head_hash())

    def test_timeout_is_reported_as_failure(self, mock_run):
        mock_run.side_effect = subprocess.TimeoutExpired(cmd="git tag", timeout=5)
        self.assertIsNone(self.client.list_tags())

    def test_missing_git_binary_is_reported_as_failure(self, mock_run):
        mock_run.side_effect = FileNotFoundError("git")
        self.assertIsNone(self.client.short_head_hash())


if __name__ == '__main__':
    unittest.main()
