"""Pytest fixtures for kamino tests"""
import tempfile
from pathlib import Path
from unittest.mock import Mock
import pytest
import git

from kamino.services.git import GitRepository


def commit_file(repo: git.Repo, filename: str, content: str = "contents\n", message: str = "commit") -> str:
    """Write a file in the working tree, stage and commit it. Returns the commit sha."""
    path = Path(repo.working_dir) / filename
    path.write_text(content)
    repo.index.add([filename])
    return repo.index.commit(message).hexsha


def commit_on_branch(repo: git.Repo, branch: str, filename: str, content: str = "contents\n") -> str:
    """Commit a file on another branch, then go back to main."""
    repo.git.checkout(branch)
    try:
        return commit_file(repo, filename, content, message=f"{filename} on {branch}")
    finally:
        repo.git.checkout("main")


def init_repo(repo_path: Path) -> git.Repo:
    """Create a repository with one commit on main."""
    repo_path.mkdir(parents=True, exist_ok=True)
    repo = git.Repo.init(repo_path)

    # Configure git user for commits
    repo.config_writer().set_value("user", "name", "Test User").release()
    repo.config_writer().set_value("user", "email", "test@example.com").release()

    commit_file(repo, "README.md", "# Test Repository\n", message="Initial commit")

    # Rename master to main if needed
    repo.git.branch('-M', 'main')
    return repo


@pytest.fixture
def temp_dir():
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def mock_config():
    """Create a mock configuration dictionary."""
    return {
        'root': '.',
        'remote_name': 'origin',
        'keep_going': False,
        'skip_branch_errors': False,
        'parallel': False,
        'workers': None,
        'verbose': False,
        'debug': False,
    }


@pytest.fixture
def git_repo(temp_dir):
    """Create a real Git repository (no remotes) for testing."""
    repo = init_repo(temp_dir / "test_repo")

    yield repo

    repo.close()


@pytest.fixture
def repo_handle(git_repo):
    """RepositoryHandle for the git_repo fixture."""
    return GitRepository(git_repo)


@pytest.fixture
def upstream_and_clone(temp_dir):
    """An upstream repository with branches b1-b3 and a clone tracking them.

    Yields (upstream, clone) as git.Repo objects. In the clone, b1-b3 track
    origin/b1-b3 and main tracks origin/main.
    """
    upstream = init_repo(temp_dir / "upstream")
    for name in ("b1", "b2", "b3"):
        upstream.create_head(name)

    clone = git.Repo.clone_from(str(upstream.working_dir), str(temp_dir / "clone"))
    clone.config_writer().set_value("user", "name", "Test User").release()
    clone.config_writer().set_value("user", "email", "test@example.com").release()

    origin = clone.remotes.origin
    for name in ("b1", "b2", "b3"):
        remote_ref = origin.refs[name]
        clone.create_head(name, remote_ref).set_tracking_branch(remote_ref)

    yield upstream, clone

    clone.close()
    upstream.close()


def make_branch(name, target="a" * 40, upstream=None):
    """Create a mock BranchHandle."""
    branch = Mock()
    branch.name = name
    branch.target.return_value = target
    branch.upstream.return_value = upstream
    return branch


@pytest.fixture
def branch_factory():
    """Factory for mock BranchHandle objects."""
    return make_branch


@pytest.fixture
def mock_repo(temp_dir):
    """Create a mock RepositoryHandle with no remote and no branches."""
    repo = Mock(spec=GitRepository)
    repo.path = temp_dir / "fake" / ".git"
    repo.statuses.return_value = []
    repo.stash_entries.return_value = iter([])
    repo.has_remote.return_value = False
    repo.local_branches.return_value = iter([])
    repo.graph_ahead_behind.return_value = (0, 0)
    return repo
