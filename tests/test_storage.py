import zlib

import httpx
import pytest

from gitobj.errors import StorageReadError
from gitobj.models import Blob, FileStorage, Git, HttpStorage
from tests.helpers import BLOB_CONTENT, BLOB_HASH, envelope

BASE_URL = "https://example.com/repo.git"


def make_storage(handler):
    return HttpStorage(BASE_URL, http_client=httpx.Client(transport=httpx.MockTransport(handler)))


class TestFileStorage:
    def test_read(self, tmp_path):
        (tmp_path / "ab").mkdir()
        (tmp_path / "ab" / "cdef").write_bytes(b"data")
        assert FileStorage(tmp_path).read("ab/cdef") == b"data"

    def test_read_missing(self, tmp_path):
        with pytest.raises(StorageReadError) as exc_info:
            FileStorage(tmp_path).read("ab/cdef")
        assert isinstance(exc_info.value.__cause__, FileNotFoundError)


class TestHttpStorage:
    def test_read(self):
        requested = []

        def handler(request):
            requested.append(request.url.path)
            return httpx.Response(200, content=b"data")

        with make_storage(handler) as storage:
            assert storage.read("ab/cdef") == b"data"
        assert requested == ["/repo.git/objects/ab/cdef"]

    def test_not_found(self):
        with make_storage(lambda request: httpx.Response(404)) as storage:
            with pytest.raises(StorageReadError) as exc_info:
                storage.read("ab/cdef")
        assert exc_info.value.context == "HTTP 404"

    def test_transport_error(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        with make_storage(handler) as storage:
            with pytest.raises(StorageReadError):
                storage.read("ab/cdef")

    def test_git_loads_over_http(self):
        compressed = zlib.compress(envelope("blob", BLOB_CONTENT))

        def handler(request):
            if request.url.path == f"/repo.git/objects/{BLOB_HASH[:2]}/{BLOB_HASH[2:]}":
                return httpx.Response(200, content=compressed)
            return httpx.Response(404)

        with Git(storage=make_storage(handler)) as git:
            assert git.load(BLOB_HASH) == Blob(content=BLOB_CONTENT)

    def test_invalid_object_name_is_not_fetched(self):
        requested = []

        def handler(request):
            requested.append(request.url.path)
            return httpx.Response(200, content=b"")

        with Git(storage=make_storage(handler)) as git:
            with pytest.raises(StorageReadError):
                git.load("../../secrets")
        assert requested == []
