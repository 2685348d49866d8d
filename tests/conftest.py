import os

import pytest


@pytest.fixture
def make_source(tmp_path):
    """Regular file standing in for /dev/random"""

    def _make(size: int, name: str = "random.src"):
        path = tmp_path / name
        path.write_bytes(os.urandom(size))
        return path

    return _make


@pytest.fixture
def out_dir(tmp_path):
    d = tmp_path / "out"
    d.mkdir()
    return d


@pytest.fixture
def umask_022():
    old = os.umask(0o022)
    yield
    os.umask(old)
