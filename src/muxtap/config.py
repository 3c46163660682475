"""Configuration management for muxtap.

There is no config file; defaults can be overridden through MUXTAP_*
environment variables.
"""

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .errors import UsageError
from .types import DIRECTORY_SOURCES


@dataclass(frozen=True)
class MuxTapConfig:
    """Runtime settings.

    Attributes:
        source: Default directory source ("fd" or "zoxide").
        root: Root directory walked by the fd source.
        fzf_height: Value passed to fzf --height.
        fd_command: Executable name of fd (Debian ships it as fdfind).
        log_level: Logging level name.
    """

    source: str = "fd"
    root: str = "~"
    fzf_height: str = "40%"
    fd_command: str = "fd"
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "MuxTapConfig":
        """Build config from MUXTAP_* variables.

        Raises:
            UsageError: If MUXTAP_SOURCE or MUXTAP_LOG_LEVEL is not recognised.
        """
        env = os.environ if environ is None else environ
        defaults = cls()

        source = env.get("MUXTAP_SOURCE", defaults.source)
        check_source(source)

        log_level = env.get("MUXTAP_LOG_LEVEL", defaults.log_level).upper()
        if not isinstance(logging.getLevelName(log_level), int):
            raise UsageError(f"Unknown log level: {log_level}")

        return cls(
            source=source,
            root=env.get("MUXTAP_ROOT", defaults.root),
            fzf_height=env.get("MUXTAP_FZF_HEIGHT", defaults.fzf_height),
            fd_command=env.get("MUXTAP_FD_COMMAND", defaults.fd_command),
            log_level=log_level,
        )


def check_source(source: str) -> str:
    """Validate a directory source name.

    Raises:
        UsageError: If source is not one of DIRECTORY_SOURCES.
    """
    if source not in DIRECTORY_SOURCES:
        raise UsageError(f"Unknown directory source {source!r} (expected one of: {', '.join(DIRECTORY_SOURCES)})")
    return source


# Global instance
_config: Optional[MuxTapConfig] = None


def get_config() -> MuxTapConfig:
    """Get or create the global config."""
    global _config
    if _config is None:
        _config = MuxTapConfig.from_env()
    return _config


def reset_config() -> None:
    """Forget the cached config so the next get_config() re-reads the environment."""
    global _config
    _config = None
