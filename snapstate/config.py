# snapstate/config.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

"""CLI runner configuration."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional

_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass(frozen=True)
class CLIConfig:
    """
    Immutable settings for a :class:`snapstate.cli.CLIApp`.

    Attributes:
        snapshot_path: File the snapshot is loaded from and saved to.
        log_level: Name of the logging level for the ``snapstate`` loggers.
    """

    snapshot_path: str = "snapshot.json"
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        level = self.log_level.upper()
        if level not in _LEVELS:
            raise ValueError(f"Unknown log level {self.log_level!r}")
        object.__setattr__(self, "log_level", level)

    @property
    def level(self) -> int:
        return logging.getLevelName(self.log_level)

    @classmethod
    def from_env(
        cls,
        prefix: str = "SNAPSTATE",
        defaults: Optional["CLIConfig"] = None,
        environ: Optional[Mapping[str, str]] = None,
    ) -> "CLIConfig":
        """
        Read ``<prefix>_FILE`` and ``<prefix>_LOG_LEVEL`` over ``defaults``.
        """
        env = os.environ if environ is None else environ
        config = defaults or cls()
        path = env.get(f"{prefix}_FILE")
        level = env.get(f"{prefix}_LOG_LEVEL")
        if path:
            config = replace(config, snapshot_path=path)
        if level:
            config = replace(config, log_level=level)
        return config
