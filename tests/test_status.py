"""Tests for the uncommitted changes and stash checks"""
from pathlib import Path

import git
import pytest

from conftest import commit_file
from kamino.exceptions import RepoStatusError, StashError
from kamino.services.git import StashEntry, check_stashed, check_uncommitted


class TestCheckUncommitted:
    """Test detection of uncommitted local changes."""

    def test_clean_repo(self, repo_handle):
        """A freshly committed repo has no local changes."""
        assert check_uncommitted(repo_handle) is False

    def test_untracked_file(self, git_repo, repo_handle):
        """Untracked files count as changes."""
        (Path(git_repo.working_dir) / "file").write_text("contents")
        assert check_uncommitted(repo_handle) is True

    def test_staged_file(self, git_repo, repo_handle):
        """Staging a new file keeps the repo dirty."""
        (Path(git_repo.working_dir) / "file").write_text("contents")
        assert check_uncommitted(repo_handle) is True

        git_repo.index.add(["file"])
        assert check_uncommitted(repo_handle) is True

    def test_modified_tracked_file(self, git_repo, repo_handle):
        """Modifying a committed file is a change."""
        (Path(git_repo.working_dir) / "README.md").write_text("changed\n")
        assert check_uncommitted(repo_handle) is True

    def test_ignored_file(self, git_repo, repo_handle):
        """Ignored files are not changes."""
        commit_file(git_repo, ".gitignore", "*.log\n")
        (Path(git_repo.working_dir) / "debug.log").write_text("noise")
        assert check_uncommitted(repo_handle) is False

    def test_idempotent(self, git_repo, repo_handle):
        """Running the check twice gives the same answer."""
        (Path(git_repo.working_dir) / "file").write_text("contents")
        assert check_uncommitted(repo_handle) == check_uncommitted(repo_handle)

    def test_status_failure(self, mock_repo):
        """A failing status query is reported with the repository path."""
        mock_repo.statuses.side_effect = git.GitCommandError("status", 128, stderr="fatal: bad index")

        with pytest.raises(RepoStatusError) as exc_info:
            check_uncommitted(mock_repo)

        assert exc_info.value.path == mock_repo.path
        assert str(mock_repo.path) in str(exc_info.value)
        assert isinstance(exc_info.value.__cause__, git.GitCommandError)

    def test_status_options(self, mock_repo):
        """Untracked files are included and ignored ones are not."""
        check_uncommitted(mock_repo)
        mock_repo.statuses.assert_called_once_with(include_untracked=True, include_ignored=False)


class TestCheckStashed:
    """Test counting of stashed changes."""

    def test_fresh_repo(self, repo_handle):
        """A fresh repo has no stashes."""
        assert check_stashed(repo_handle) == 0

    def test_save_and_drop(self, git_repo, repo_handle):
        """The count follows stash saves and drops."""
        work_dir = Path(git_repo.working_dir)

        (work_dir / "file1").write_text("contents")
        git_repo.git.stash("push", "--include-untracked", "-m", "msg1")
        assert check_stashed(repo_handle) == 1

        (work_dir / "file2").write_text("contents")
        git_repo.git.stash("push", "--include-untracked", "-m", "msg2")
        assert check_stashed(repo_handle) == 2
        assert check_stashed(repo_handle) == 2

        git_repo.git.stash("drop")
        assert check_stashed(repo_handle) == 1

        git_repo.git.stash("drop")
        assert check_stashed(repo_handle) == 0

    def test_entries_most_recent_first(self, git_repo, repo_handle):
        """Stash entries are listed newest first with their index."""
        work_dir = Path(git_repo.working_dir)
        (work_dir / "file1").write_text("contents")
        git_repo.git.stash("push", "--include-untracked", "-m", "msg1")
        (work_dir / "file2").write_text("contents")
        git_repo.git.stash("push", "--include-untracked", "-m", "msg2")

        entries = list(repo_handle.stash_entries())

        assert [entry.index for entry in entries] == [0, 1]
        assert "msg2" in entries[0].message
        assert "msg1" in entries[1].message
        assert len(entries[0].oid) == 40

    def test_stash_is_not_modified(self, git_repo, repo_handle):
        """Counting doesn't touch the stash list."""
        (Path(git_repo.working_dir) / "file1").write_text("contents")
        git_repo.git.stash("push", "--include-untracked", "-m", "msg1")
        before = git_repo.git.stash("list")

        check_stashed(repo_handle)

        assert git_repo.git.stash("list") == before

    def test_counts_every_entry(self, mock_repo):
        """Every entry is counted."""
        mock_repo.stash_entries.return_value = iter(
            [StashEntry(index=i, message=f"WIP {i}", oid="0" * 40) for i in range(5)]
        )
        assert check_stashed(mock_repo) == 5

    def test_stash_failure(self, mock_repo):
        """A failing stash listing raises StashError."""
        mock_repo.stash_entries.side_effect = git.GitCommandError("stash", 1)

        with pytest.raises(StashError) as exc_info:
            check_stashed(mock_repo)

        assert isinstance(exc_info.value.__cause__, git.GitCommandError)
