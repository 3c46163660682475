"""Target resolution - display identifier to stable identifier.

PUBLIC API:
  - resolve_display_identifier: Resolve session:window.pane to pane/window IDs
"""

import logging
from typing import Optional

from .core import STABLE_FORMAT, is_missing_target, parse_stable_line, run_tmux
from .exceptions import TmuxError
from ..types import DisplayIdentifier, StableIdentifier

__all__ = ["resolve_display_identifier"]

logger = logging.getLogger(__name__)


def resolve_display_identifier(display: DisplayIdentifier) -> Optional[StableIdentifier]:
    """Find the pane currently sitting at display's position.

    Must be called right before acting on the result: the answer is only
    valid until a sibling pane or window is removed.

    Args:
        display: Snapshot position chosen by the user

    Returns:
        Stable identifier, or None if nothing is at that position any more

    Raises:
        TmuxError: tmux failed for any other reason

    Note:
        tmux list-panes -t session:0.1 lists ALL panes of window 0, so the
        pane index is matched with a format filter.
    """
    code, stdout, stderr = run_tmux(
        [
            "list-panes",
            "-t",
            f"={display.session}:{display.window}",
            "-f",
            f"#{{==:#{{pane_index}},{display.pane}}}",
            "-F",
            STABLE_FORMAT,
        ]
    )
    if code != 0:
        if is_missing_target(stderr):
            logger.debug(f"No pane at {display}: {stderr.strip()}")
            return None
        raise TmuxError(f"Failed to resolve {display}: {stderr.strip()}")

    lines = [line for line in stdout.split("\n") if line.strip()]
    if not lines:
        logger.debug(f"No pane at {display}")
        return None

    return parse_stable_line(lines[0])
