from __future__ import annotations

import dataclasses
import re

INTERNAL_ERROR_CODE = 127
NOT_RUNNING_CODE = 3

_PID_PATTERN = re.compile(r"PID: (\d+)")


def _split_lines(out: str) -> tuple[str, str]:
    first, _, rest = out.partition("\n")
    second, _, _ = rest.partition("\n")
    return first, second


def parse_status_output(out: str) -> tuple[bool, int, str]:
    """
    Parse the stdout of `pg_ctl status`.

    Only the first line decides whether the server is running and which PID it
    has. The second line is the postgres command line and is kept only when the
    server is running. Short or unexpected output yields empty defaults.

    :param out: The stdout of pg_ctl.
    :return: A tuple of (is_server_running, pid, ps_postgres).
    """
    first_line, second_line = _split_lines(out)
    is_server_running = "server is running" in first_line
    match = _PID_PATTERN.search(first_line)
    pid = int(match.group(1)) if match else 0
    ps_postgres = second_line.strip() if is_server_running else ""
    return is_server_running, pid, ps_postgres


@dataclasses.dataclass(frozen=True)
class CtlStatus:
    """
    The result of a `pg_ctl status` call.
    """

    # Always set; INTERNAL_ERROR_CODE when pg_ctl could not be run at all.
    error_code: int
    raw_stdout: str = ""
    # Unrecognized flags and worse errors end up here.
    raw_stderr: str = ""
    is_server_running: bool = False
    # 0 when no PID could be read, even if the server is running.
    pid: int = 0
    ps_postgres: str = ""

    @classmethod
    def from_output(cls, error_code: int, stdout: str, stderr: str) -> CtlStatus:
        is_server_running, pid, ps_postgres = parse_status_output(stdout)
        return cls(
            error_code=error_code,
            raw_stdout=stdout,
            raw_stderr=stderr,
            is_server_running=is_server_running,
            pid=pid,
            ps_postgres=ps_postgres,
        )
