from __future__ import annotations

import os
from pathlib import Path

DEFAULT_PG_CTL_BIN = Path("/usr/local/gpdb/bin/pg_ctl")
PG_CTL_BIN_ENV_VAR = "TINYPG_PG_CTL"


def get_pg_ctl_bin() -> Path:
    """
    Get the path to the pg_ctl executable.

    :return: The value of TINYPG_PG_CTL if set, otherwise the default location.
    """
    override = os.environ.get(PG_CTL_BIN_ENV_VAR)
    if override:
        return Path(override)
    return DEFAULT_PG_CTL_BIN


def get_postgres_lib_dir(pg_ctl_bin: Path) -> Path:
    """
    Get the path to the postgres libraries next to a pg_ctl executable.

    :param pg_ctl_bin: The path to pg_ctl.
    :return: The path to the postgres libraries.
    """
    return pg_ctl_bin.parent.parent / "lib"


def _join(*paths: str | None) -> str:
    return os.pathsep.join(path for path in paths if path)


def get_pg_environ(pg_ctl_bin: Path) -> dict[str, str]:
    environ = dict(os.environ)
    # A bare name is looked up on PATH and has no install directory of its own.
    if pg_ctl_bin.parent == Path("."):
        return environ
    pg_ctl_bin = pg_ctl_bin.absolute()
    lib_dir = str(get_postgres_lib_dir(pg_ctl_bin))
    environ.update(
        {
            "LD_LIBRARY_PATH": _join(lib_dir, os.environ.get("LD_LIBRARY_PATH")),
            "DYLD_LIBRARY_PATH": _join(lib_dir, os.environ.get("DYLD_LIBRARY_PATH")),
            "PATH": _join(os.environ.get("PATH"), str(pg_ctl_bin.parent)),
        }
    )
    return environ
