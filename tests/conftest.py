"""Pytest fixtures for tiny_pgctl tests."""

import stat
from pathlib import Path

import pytest

RUNNING_OUT = (
    "pg_ctl: server is running (PID: 4821)\n"
    "/usr/local/bin/postgres -D /data\n"
)
NOT_RUNNING_OUT = "pg_ctl: no server running\n"


def _write(path: Path, data) -> None:
    if isinstance(data, bytes):
        path.write_bytes(data)
    else:
        path.write_text(data)


class FakePgCtl:
    """A shell script standing in for pg_ctl that records its arguments."""

    def __init__(self, root: Path):
        self.root = root
        self.path = root / "bin" / "pg_ctl"
        self.args_file = root / "args"
        self.path.parent.mkdir(parents=True, exist_ok=True)

    def write(self, stdout="", stderr="", code=0, body=""):
        _write(self.root / "stdout", stdout)
        _write(self.root / "stderr", stderr)
        self.path.write_text(
            "#!/bin/sh\n"
            f"printf '%s\\n' \"$@\" > '{self.args_file}'\n"
            f"{body}"
            f"cat '{self.root / 'stdout'}'\n"
            f"cat '{self.root / 'stderr'}' >&2\n"
            f"exit {code}\n"
        )
        self.path.chmod(self.path.stat().st_mode | stat.S_IEXEC)
        return self

    @property
    def args(self) -> list:
        return self.args_file.read_text().splitlines()


@pytest.fixture
def pg_data(tmp_path: Path) -> Path:
    return tmp_path / "data"


@pytest.fixture
def fake_pg_ctl(tmp_path: Path) -> FakePgCtl:
    return FakePgCtl(tmp_path / "fake")
