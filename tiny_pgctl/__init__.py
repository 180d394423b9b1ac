from __future__ import annotations

import logging
import subprocess
import warnings
from pathlib import Path

from .ctl_config import CtlConfig
from .ctl_status import INTERNAL_ERROR_CODE, NOT_RUNNING_CODE, CtlStatus
from .env import get_pg_environ

logger = logging.getLogger(__name__)

__all__ = [
    "Controller",
    "CtlConfig",
    "CtlStatus",
    "PgCtlError",
    "INTERNAL_ERROR_CODE",
    "NOT_RUNNING_CODE",
]


class PgCtlError(Exception):
    """
    An error occurred while running pg_ctl.
    """

    def __init__(self, message: str, status: CtlStatus | None = None):
        super().__init__(message)
        self.status = status


def _decode(output: bytes | None) -> str:
    # pg_ctl may echo paths that are not valid UTF-8; keep those bytes.
    if not output:
        return ""
    return output.decode("utf-8", errors="surrogateescape")


def _exit_code(returncode: int) -> int:
    # A negative return code means the child was killed by a signal and has no
    # exit status of its own.
    if returncode < 0:
        return -1
    return returncode


class Controller:
    """
    Runs pg_ctl against a single data directory.
    """

    def __init__(self, pg_data: Path | str, pg_ctl_bin: Path | str | None = None):
        if pg_ctl_bin is None:
            self._config = CtlConfig(pg_data=Path(pg_data))
        else:
            self._config = CtlConfig(
                pg_data=Path(pg_data), pg_ctl_bin=Path(pg_ctl_bin)
            )

    @property
    def config(self) -> CtlConfig:
        return self._config

    @property
    def pg_data(self) -> Path:
        return self._config.pg_data

    def _run(self, args: list[str], **kwargs) -> subprocess.CompletedProcess:
        """
        Run a pg_ctl command and wait for it to exit.
        :param args: The arguments to pass to pg_ctl.
        :param kwargs: Extra arguments for subprocess.run.
        :return: The completed process.
        """
        command = [str(self._config.pg_ctl_bin), *args]
        logger.debug(f"Running {' '.join(command)}")
        result = subprocess.run(
            command,
            env=get_pg_environ(self._config.pg_ctl_bin),
            check=False,
            stdout=subprocess.PIPE,
            **kwargs,
        )
        logger.debug(f"pg_ctl exited with code {result.returncode}")
        return result

    def status(self) -> CtlStatus:
        """
        Get the status of the postgres server using `pg_ctl status -w`.

        A non-zero exit, such as the one pg_ctl reports when no server is
        running, is not an error: it is reported through the error_code of the
        returned status.

        :return: The status of the database.
        :raises PgCtlError: If pg_ctl could not be run at all. The error carries
            a status with INTERNAL_ERROR_CODE.
        """
        logger.debug(f"Getting status of database at {self.pg_data}")
        try:
            result = self._run(
                ["status", "-w", "-D", str(self.pg_data)],
                stderr=subprocess.PIPE,
            )
        except OSError as e:
            raise PgCtlError(
                f"failed to run {self._config.pg_ctl_bin}: {e}",
                status=CtlStatus(error_code=INTERNAL_ERROR_CODE),
            ) from e
        return CtlStatus.from_output(
            _exit_code(result.returncode),
            _decode(result.stdout),
            _decode(result.stderr),
        )

    def is_started(self) -> bool:
        """
        Report whether a postgres server has started against the data directory.

        Deprecated: use `status().is_server_running` instead.

        :return: True if pg_ctl exits cleanly, False if it exits with
            NOT_RUNNING_CODE.
        :raises PgCtlError: On any other outcome.
        """
        warnings.warn(
            "Controller.is_started is deprecated, use "
            "Controller.status().is_server_running instead",
            DeprecationWarning,
            stacklevel=2,
        )
        try:
            result = self._run(
                [
                    "status",
                    "-w",
                    "-D",
                    str(self.pg_data),
                    "-o",
                    "-c unix_socket_directories=/tmp",
                ],
                stderr=subprocess.STDOUT,
            )
        except OSError as e:
            raise PgCtlError(f"cannot get instance state: {e}") from e
        if result.returncode == NOT_RUNNING_CODE:
            return False
        if result.returncode != 0:
            raise PgCtlError(
                f"cannot get instance state: pg_ctl failed with code "
                f"{result.returncode}: {_decode(result.stdout)}"
            )
        return True
