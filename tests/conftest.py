"""Shared fixtures: a Core wired to in-memory streams and a recording executor."""

import io

import pytest

from tildeshell.config import ShellConfig
from tildeshell.core import init_core


class RecordingExecutor:
    """Stands in for the process executor and remembers every argv."""

    def __init__(self):
        self.calls = []

    def __call__(self, core, name, *args):
        self.calls.append([name, *args])
        return None


@pytest.fixture
def stdout():
    return io.StringIO()


@pytest.fixture
def stderr():
    return io.StringIO()


@pytest.fixture
def config():
    return ShellConfig(color=False)


@pytest.fixture
def executor():
    return RecordingExecutor()


@pytest.fixture
def core(config, stdout, stderr, executor):
    c = init_core(config, stdout=stdout, stderr=stderr)
    c.external = executor
    return c


@pytest.fixture
def in_tmp(tmp_path, monkeypatch):
    """Run the test inside tmp_path; cwd is restored afterwards."""
    monkeypatch.chdir(tmp_path)
    return tmp_path
