"""Fuzzy tmux session launcher and session manager.

Spawns sequenced sessions ("proj - S01") in fuzzy-picked directories and lets
you switch to, rename or kill running panes from a single fzf list. Built on
ReplKit2's CLI mode.

PUBLIC API:
  - app: ReplKit2 application instance with muxtap commands
  - main: Entry point function for CLI
"""

import logging
import sys

from .app import app
from .config import get_config
from .errors import MuxTapError

__version__ = "0.1.0"


def main():
    """Entry point for muxtap.

    Logging level comes from MUXTAP_LOG_LEVEL; it stays at WARNING by
    default so log lines do not land on top of fzf.
    """
    try:
        config = get_config()
    except MuxTapError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
    )
    app.cli()


__all__ = ["app", "main", "__version__"]
