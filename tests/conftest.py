"""Test configuration and fixtures."""

import io
import tarfile

import pytest


@pytest.fixture
def output_dir(tmp_path):
    """Empty extraction destination."""
    path = tmp_path / "output"
    path.mkdir()
    return path


@pytest.fixture
def raw_archive(tmp_path):
    """Write raw archive bytes to a file and return its path."""

    def _write(data: bytes, name: str = "raw.tar"):
        path = tmp_path / name
        path.write_bytes(data)
        return path

    return _write


@pytest.fixture
def make_tar(tmp_path):
    """Build a tar file with the stdlib tarfile module.

    ``members`` is a list of ``(name, content)`` tuples; ``content`` of
    None adds a directory.
    """

    def _make(members, fmt=tarfile.PAX_FORMAT, name="archive.tar", pax_headers=None):
        tar_path = tmp_path / name
        with tarfile.open(
            tar_path, "w", format=fmt, pax_headers=pax_headers or {}
        ) as tar:
            for member_name, content in members:
                info = tarfile.TarInfo(member_name)
                if content is None:
                    info.type = tarfile.DIRTYPE
                    info.mode = 0o755
                    tar.addfile(info)
                else:
                    info.size = len(content)
                    tar.addfile(info, fileobj=io.BytesIO(content))
        return tar_path

    return _make


# Pytest configuration
def pytest_configure(config):
    """Configure pytest markers and settings."""
    config.addinivalue_line("markers", "unit: mark test as unit test (default)")
