import subprocess
from pathlib import Path

import pytest

from kommit.git import CommandResult


@pytest.fixture
def tmp_git_repo(tmp_path):
    """Create a temporary git repository with user config set."""
    repo = tmp_path / "repo"
    repo.mkdir()

    def git(*args):
        subprocess.check_call(["git", "-C", str(repo), *args])

    git("init")
    git("config", "user.email", "test@example.com")
    git("config", "user.name", "Test User")
    git("config", "commit.gpgsign", "false")
    return repo, git


@pytest.fixture
def write_file():
    def _write(base: Path, name: str, content: str = "sample"):
        path = base / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
        return path

    return _write


class FakeRunner:
    """Records commands and answers them from a table of canned results."""

    def __init__(self, responses=None):
        self.calls = []
        self.inputs = []
        self.responses = responses or {}

    def run(self, command, args=(), input=None, capture=True):
        argv = (command, *args)
        self.calls.append(argv)
        self.inputs.append(input)
        # Longest matching prefix wins.
        for length in range(len(argv), 0, -1):
            if argv[:length] in self.responses:
                return self.responses[argv[:length]]
        return CommandResult(0)


@pytest.fixture
def fake_runner():
    def _make(responses=None):
        return FakeRunner(responses)

    return _make


@pytest.fixture
def scripted():
    """Build a read_line callable that replays `lines`, then signals end of input."""

    def _make(*lines):
        remaining = list(lines)

        def read_line(prompt=""):
            return remaining.pop(0) if remaining else None

        read_line.remaining = remaining
        return read_line

    return _make
