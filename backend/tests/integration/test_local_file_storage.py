"""
Integration tests for LocalFileStorageRepository.

Exercises the repository against a real temporary directory.
"""

import threading

import pytest

from shortdrop.infrastructure.local_file_storage_repository import (
    LocalFileStorageRepository,
)


@pytest.fixture
def repository(tmp_path):
    return LocalFileStorageRepository(str(tmp_path / "store"))


class TestLocalFileStorageRepository:
    """Test the local filesystem gateway."""

    def test_base_directory_created(self, tmp_path):
        LocalFileStorageRepository(str(tmp_path / "nested" / "store"))
        assert (tmp_path / "nested" / "store").is_dir()

    def test_put_writes_file(self, repository):
        repository.put_object("aB3_x9/report.pdf", b"%PDF", "application/pdf")

        assert (repository.base_path / "aB3_x9" / "report.pdf").read_bytes() == b"%PDF"

    def test_put_overwrites(self, repository):
        repository.put_object("aB3_x9/a.txt", b"one", "text/plain")
        repository.put_object("aB3_x9/a.txt", b"two", "text/plain")

        assert (repository.base_path / "aB3_x9" / "a.txt").read_bytes() == b"two"

    def test_put_rejects_escaping_key(self, repository, tmp_path):
        with pytest.raises(ValueError):
            repository.put_object("../outside.txt", b"x", "text/plain")
        assert not (tmp_path / "outside.txt").exists()

    def test_put_rejects_empty_key(self, repository):
        with pytest.raises(ValueError):
            repository.put_object("", b"x", "text/plain")

    def test_list_by_prefix(self, repository):
        repository.put_object("aB3_x9/b.txt", b"bb", "text/plain")
        repository.put_object("aB3_x9/a.txt", b"a", "text/plain")
        repository.put_object("aB3_x9X/c.txt", b"c", "text/plain")

        objects = repository.list_objects("aB3_x9/")

        assert [o.key for o in objects] == ["aB3_x9/a.txt", "aB3_x9/b.txt"]
        assert objects[1].size == 2
        assert objects[0].last_modified is not None

    def test_list_respects_max_keys(self, repository):
        for name in ("a", "b", "c"):
            repository.put_object(f"aB3_x9/{name}", b"x", "text/plain")

        assert len(repository.list_objects("aB3_x9/", max_keys=1)) == 1

    def test_list_empty(self, repository):
        assert repository.list_objects("zzzzzz/") == []

    def test_delete_removes_file_and_empty_directory(self, repository):
        repository.put_object("aB3_x9/a.txt", b"x", "text/plain")

        repository.delete_object("aB3_x9/a.txt")

        assert not (repository.base_path / "aB3_x9").exists()
        assert repository.base_path.is_dir()

    def test_delete_keeps_siblings(self, repository):
        repository.put_object("aB3_x9/a.txt", b"x", "text/plain")
        repository.put_object("aB3_x9/b.txt", b"x", "text/plain")

        repository.delete_object("aB3_x9/a.txt")

        assert [o.key for o in repository.list_objects("aB3_x9/")] == ["aB3_x9/b.txt"]

    def test_delete_missing_is_noop(self, repository):
        repository.delete_object("aB3_x9/missing.txt")
        repository.delete_object("../../etc/passwd")

    def test_resolve_path(self, repository):
        assert repository.resolve_path("aB3_x9/a.txt") == repository.base_path / "aB3_x9" / "a.txt"
        assert repository.resolve_path("") is None
        assert repository.resolve_path("..") is None
        assert repository.resolve_path("aB3_x9/../../x") is None

    def test_health_check(self, repository):
        assert repository.health_check() is True

    def test_concurrent_puts_and_deletes(self, repository):
        errors = []

        def worker(i):
            try:
                key = f"aB3_x9/{i}.bin"
                repository.put_object(key, b"x" * i, "application/octet-stream")
                if i % 2:
                    repository.delete_object(key)
            except Exception as e:
                errors.append(e)

        threads = [threading.Thread(target=worker, args=(i,)) for i in range(20)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert errors == []
        assert len(repository.list_objects("aB3_x9/")) == 10
