"""Shared pytest configuration and fixtures for all tests."""

import shutil
from pathlib import Path

import pytest

from hyperdiff.api.errors.RefNotFoundError import RefNotFoundError
from hyperdiff.api.repo.ObjectStore import ObjectStore
from hyperdiff.api.repo.RepoPath import RepoPath
from hyperdiff.utils.configure_logging import reset_logging


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests without a git repository")
    config.addinivalue_line("markers", "integration: tests against real git repositories")
    for domain in ("diff", "repo", "cache", "config", "cli"):
        config.addinivalue_line("markers", f"{domain}: tests of the {domain} domain")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in path_str:
            item.add_marker(pytest.mark.integration)


# =============================================================================
# Test Doubles
# =============================================================================


class FakeObjectStore(ObjectStore):
    """In-memory ObjectStore: each commit maps repo-relative paths to bytes."""

    def __init__(self, working_dir: Path):
        self._working_dir = working_dir
        self.commits: dict[str, dict[str, bytes]] = {}
        self.refs: dict[str, str] = {}
        self.worktree: dict[str, bytes] = {}
        self.blob_reads = 0

    def commit(self, files: dict[str, str | bytes], ref: str | None = None) -> str:
        """Record a commit and optionally point ``ref`` at it."""
        commit_id = f"{len(self.commits) + 1:040x}"
        self.commits[commit_id] = {
            path: data.encode("utf-8") if isinstance(data, str) else data for path, data in files.items()
        }
        if ref:
            self.refs[ref] = commit_id
        return commit_id

    @property
    def identity(self) -> str:
        return f"fake:{self._working_dir}"

    def working_dir(self) -> Path:
        return self._working_dir

    def resolve_ref(self, name: str) -> str:
        if name in self.refs:
            return self.refs[name]
        if name in self.commits:
            return name
        raise RefNotFoundError(name)

    def read_blob(self, object_id: str, path: RepoPath) -> bytes | None:
        self.blob_reads += 1
        return self.commits[object_id].get(path.value)

    def read_worktree(self, path: RepoPath) -> bytes | None:
        return self.worktree.get(path.value)


class GitRepo:
    """Thin helper around a GitPython repository created for a test."""

    def __init__(self, repo):
        self.repo = repo
        self.path = Path(repo.working_tree_dir)

    def write(self, rel_path: str, content: str | bytes) -> Path:
        target = self.path / rel_path
        target.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            target.write_bytes(content)
        else:
            target.write_text(content, encoding="utf-8")
        return target

    def remove(self, rel_path: str) -> None:
        (self.path / rel_path).unlink()

    def commit(self, message: str, tag: str | None = None) -> str:
        """Stage everything, commit, and return the commit sha."""
        self.repo.git.add(A=True)
        self.repo.git.commit("--no-gpg-sign", "--allow-empty", "-m", message)
        if tag:
            self.repo.create_tag(tag)
        return self.repo.head.commit.hexsha


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def hyperdiff_home(tmp_path: Path, monkeypatch) -> Path:
    """Point HYPERDIFF_HOME at a temporary directory and reset logging around each test."""
    home = tmp_path / ".hyperdiff"
    monkeypatch.setenv("HYPERDIFF_HOME", str(home))
    reset_logging()
    yield home
    reset_logging()


@pytest.fixture
def fake_store(tmp_path: Path) -> FakeObjectStore:
    work = tmp_path / "work"
    work.mkdir()
    return FakeObjectStore(work)


@pytest.fixture
def git_repo(tmp_path: Path) -> GitRepo:
    """Empty git repository with a committer identity configured."""
    if shutil.which("git") is None:
        pytest.skip("git executable not available")
    import git

    repo = git.Repo.init(tmp_path / "repo")
    with repo.config_writer() as writer:
        writer.set_value("user", "name", "Test User")
        writer.set_value("user", "email", "test@example.com")
    yield GitRepo(repo)
    repo.close()


# =============================================================================
# Test Helpers
# =============================================================================


def _run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result


@pytest.fixture
def run_cmd():
    return _run_cmd
