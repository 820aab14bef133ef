"""Shared fixtures for touchkit tests."""

import datetime
import os

import pytest


@pytest.fixture
def fixed_now():
    """A local wall-clock time whose year differs from any stamp in the tests."""
    return datetime.datetime(2024, 6, 15, 12, 0, 0)


@pytest.fixture
def no_user_config(tmp_path, monkeypatch):
    """Point the config lookup at a file that does not exist."""
    path = tmp_path / "no-such-config.json"
    monkeypatch.setenv("TOUCHKIT_CONFIG", str(path))
    return path


def _set_times(path, atime_ns, mtime_ns):
    os.utime(path, ns=(atime_ns, mtime_ns))


@pytest.fixture
def old_file(tmp_path):
    """An existing file whose times are set far in the past."""
    path = tmp_path / "old.txt"
    path.write_text("keep me")
    _set_times(path, 1_000_000_000 * 10**9, 1_100_000_000 * 10**9)
    return path


@pytest.fixture
def reference_file(tmp_path):
    """A reference file with distinct, known access and modification times."""
    path = tmp_path / "reference.txt"
    path.write_text("")
    _set_times(path, 1_200_000_000 * 10**9 + 123_456_000, 1_300_000_000 * 10**9 + 654_321_000)
    return path
