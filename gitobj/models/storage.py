import logging
import pathlib
from os import PathLike

import httpx

from gitobj.errors import StorageReadError

__all__ = ["FileStorage", "HttpStorage"]

logger = logging.getLogger(__name__)


class FileStorage:
    """Reads loose objects from an ``objects`` directory on disk."""

    def __init__(self, root: PathLike | str):
        self.root = pathlib.Path(root)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        return None

    def read(self, location: PathLike | str) -> bytes:
        path = self.root / location
        logger.debug("reading %s", path)
        try:
            with path.open("rb") as f:
                return f.read()
        except OSError as exc:
            raise StorageReadError(
                f"could not read {path}", context=exc.strerror
            ) from exc


class HttpStorage:
    """Reads loose objects from a repository served over dumb HTTP.

    ``location`` is relative to ``<base_url>/objects``, the same as for
    :class:`FileStorage`.
    """

    def __init__(self, base_url: str, http_client: httpx.Client = None):
        self.base_url = str(base_url).rstrip("/")
        self.http_client = http_client or httpx.Client()

    def __enter__(self):
        self.http_client.__enter__()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.http_client.__exit__(exc_type, exc_val, exc_tb)

    def read(self, location: PathLike | str) -> bytes:
        url = f"{self.base_url}/objects/{pathlib.PurePosixPath(location)}"
        logger.debug("fetching %s", url)
        try:
            response = self.http_client.get(url)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise StorageReadError(
                f"could not fetch {url}",
                context=f"HTTP {exc.response.status_code}",
            ) from exc
        except httpx.HTTPError as exc:
            raise StorageReadError(f"could not fetch {url}", context=str(exc)) from exc
        return response.content
