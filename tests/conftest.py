import contextlib
import zlib

import pytest


@pytest.fixture
def change_to_tmp_dir(tmp_path):
    with contextlib.chdir(tmp_path):
        yield tmp_path


@pytest.fixture
def write_object(change_to_tmp_dir):
    objects_folder = change_to_tmp_dir / ".git" / "objects"

    def _write(hash_value: str, data: bytes, *, compress: bool = True):
        path = objects_folder / hash_value[:2] / hash_value[2:]
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(zlib.compress(data) if compress else data)
        return path

    return _write
