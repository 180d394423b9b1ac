from __future__ import annotations

import dataclasses
from pathlib import Path

from .env import get_pg_ctl_bin


@dataclasses.dataclass(frozen=True)
class CtlConfig:
    """
    Where pg_ctl lives and which data directory it is pointed at.
    The data directory is not checked for existence.
    """

    pg_data: Path
    pg_ctl_bin: Path = dataclasses.field(default_factory=get_pg_ctl_bin)
