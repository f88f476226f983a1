"""Unit tests for hyperdiff.api.repo.ObjectResolver."""

import pytest

from hyperdiff.api.errors.InvalidPathError import InvalidPathError
from hyperdiff.api.errors.RefNotFoundError import RefNotFoundError
from hyperdiff.api.repo.Absent import Absent
from hyperdiff.api.repo.Binary import Binary
from hyperdiff.api.repo.blob_id import blob_id
from hyperdiff.api.repo.ObjectResolver import WORKTREE_ABSENT, ObjectResolver
from hyperdiff.api.repo.Present import Present
from hyperdiff.api.repo.RepoPath import RepoPath

pytestmark = pytest.mark.repo


class TestObjectResolver:
    def test_resolve_present(self, fake_store):
        fake_store.commit({"a.txt": "one\ntwo\n"}, ref="HEAD")
        result = ObjectResolver(fake_store).resolve("HEAD", "a.txt")
        assert isinstance(result, Present)
        assert result.texts == ["one", "two"]

    def test_resolve_absent_is_not_an_error(self, fake_store):
        fake_store.commit({"a.txt": "x"}, ref="HEAD")
        assert ObjectResolver(fake_store).resolve("HEAD", "missing.txt") == Absent()

    def test_resolve_binary(self, fake_store):
        fake_store.commit({"img.png": b"\x89PNG\x00\x01"}, ref="HEAD")
        assert isinstance(ObjectResolver(fake_store).resolve("HEAD", "img.png"), Binary)

    def test_unknown_ref(self, fake_store):
        with pytest.raises(RefNotFoundError) as exc_info:
            ObjectResolver(fake_store).resolve("nope", "a.txt")
        assert exc_info.value.ref == "nope"

    def test_absolute_path_normalized(self, fake_store):
        fake_store.commit({"dir/a.txt": "x\n"}, ref="HEAD")
        resolver = ObjectResolver(fake_store)
        absolute = fake_store.working_dir() / "dir" / "a.txt"
        assert resolver.normalize_path(absolute) == RepoPath("dir/a.txt")
        assert isinstance(resolver.resolve("HEAD", absolute), Present)

    def test_path_outside_repository(self, fake_store, tmp_path):
        with pytest.raises(InvalidPathError):
            ObjectResolver(fake_store).resolve("HEAD", tmp_path / "elsewhere.txt")

    def test_object_id_is_commit_id(self, fake_store):
        commit_id = fake_store.commit({"a.txt": "x"}, ref="main")
        assert ObjectResolver(fake_store).resolve_object_id("main", RepoPath("a.txt")) == commit_id

    def test_worktree_id_tracks_content(self, fake_store):
        resolver = ObjectResolver(fake_store)
        path = RepoPath("a.txt")
        assert resolver.resolve_object_id(None, path) == WORKTREE_ABSENT
        fake_store.worktree["a.txt"] = b"v1\n"
        first = resolver.resolve_object_id(None, path)
        assert first == "worktree:" + blob_id(b"v1\n")
        fake_store.worktree["a.txt"] = b"v2\n"
        assert resolver.resolve_object_id(None, path) != first

    def test_resolve_side_returns_worktree_content_with_its_id(self, fake_store):
        fake_store.worktree["a.txt"] = b"local\n"
        object_id, content = ObjectResolver(fake_store).resolve_side(None, RepoPath("a.txt"))
        assert object_id == "worktree:" + blob_id(b"local\n")
        assert content.texts == ["local"]

    def test_resolve_side_defers_committed_content(self, fake_store):
        commit_id = fake_store.commit({"a.txt": "x"}, ref="main")
        assert ObjectResolver(fake_store).resolve_side("main", RepoPath("a.txt")) == (commit_id, None)
        assert fake_store.blob_reads == 0

    def test_worktree_content(self, fake_store):
        fake_store.worktree["a.txt"] = b"local\n"
        result = ObjectResolver(fake_store).resolve(None, "a.txt")
        assert isinstance(result, Present)
        assert result.texts == ["local"]
