"""Directory sources and the directory picker.

PUBLIC API:
  - list_directories: Candidate directories from zoxide or fd
  - validate_directory: Check a user-supplied directory
  - pick_directory: Fuzzy-pick one directory
  - session_base_name: Session base name for a directory
"""

import logging
import subprocess
from pathlib import Path
from typing import List

from .config import check_source, get_config
from .errors import MuxTapError, UserCancelled, ValidationError
from .picker import pick
from .types import DirectorySource

logger = logging.getLogger(__name__)


def _source_command(source: DirectorySource, root: str) -> List[str]:
    if source == "zoxide":
        return ["zoxide", "query", "--list"]

    root_path = str(Path(root).expanduser())
    return [get_config().fd_command, "--type", "d", "--hidden", "--exclude", ".git", "--absolute-path", ".", root_path]


def list_directories(source: DirectorySource, root: str = "~") -> List[str]:
    """List candidate directories.

    Args:
        source: "zoxide" (frecency ranked) or "fd" (walk of root honoring ignore files)
        root: Walk root for fd, ignored by zoxide

    Returns:
        Directory paths in source order

    Raises:
        UsageError: Unknown source
        MuxTapError: Source tool missing or failing
    """
    check_source(source)
    cmd = _source_command(source, root)

    try:
        result = subprocess.run(cmd, capture_output=True, text=True)
    except FileNotFoundError:
        raise MuxTapError(f"{cmd[0]} not found; install it or use a different --source")

    if result.returncode != 0:
        raise MuxTapError(f"{cmd[0]} failed: {result.stderr.strip()}")

    directories = [line.rstrip("/") or "/" for line in result.stdout.split("\n") if line.strip()]
    logger.debug(f"{source} returned {len(directories)} directories")
    return directories


def validate_directory(path: str) -> Path:
    """Expand and check that path is an existing directory.

    Raises:
        ValidationError: If it does not exist or is not a directory.
    """
    directory = Path(path).expanduser()
    if not directory.is_dir():
        raise ValidationError(f"Directory does not exist: {path}")
    return directory.resolve()


def pick_directory(source: DirectorySource, root: str = "~") -> Path:
    """Let the user fuzzy-pick a directory.

    Raises:
        UserCancelled: Nothing picked.
        ValidationError: Picked path vanished in the meantime.
    """
    directories = list_directories(source, root)
    if not directories:
        raise UserCancelled("No directories to choose from")

    result = pick(
        directories,
        prompt="dir> ",
        header=f"New session from directory ({source})",
        preview="ls -la {}",
        preview_window="right:50%:wrap",
    )
    if result is None:
        raise UserCancelled("No directory picked")

    return validate_directory(result.lines[0])


def session_base_name(directory: Path) -> str:
    """Base session name for a directory: its basename."""
    return directory.name or "root"
