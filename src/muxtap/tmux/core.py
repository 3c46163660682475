"""Core tmux operations - shared utilities for all tmux modules.

PUBLIC API:
  - run_tmux: Execute tmux command and return result
  - run_tmux_attached: Execute tmux command on the caller's terminal
  - parse_format_line: Parse tmux format string output into fields
  - is_missing_target: Classify tmux stderr as target-gone
  - is_inside_tmux: Check if running inside a tmux client
  - get_display_state: Current session/window/pane and zoom flag
"""

import logging
import os
import subprocess
from typing import List, Optional, Tuple

from ..types import DisplayState, StableIdentifier

logger = logging.getLogger(__name__)

FIELD_SEP = "\t"

STABLE_FORMAT = FIELD_SEP.join(["#{session_name}", "#{window_id}", "#{pane_id}"])
DISPLAY_STATE_FORMAT = FIELD_SEP.join(
    [
        "#{session_name}",
        "#{window_index}",
        "#{pane_index}",
        "#{window_id}",
        "#{pane_id}",
        "#{window_zoomed_flag}",
    ]
)

# tmux stderr fragments meaning "nothing there", as opposed to a real failure
MISSING_TARGET_MARKERS = ("can't find", "no server running", "error connecting to")


def run_tmux(args: List[str]) -> Tuple[int, str, str]:
    """Run tmux command, return (returncode, stdout, stderr)."""
    cmd = ["tmux"] + args
    logger.debug(f"tmux {' '.join(args)}")
    result = subprocess.run(cmd, capture_output=True, text=True)
    return result.returncode, result.stdout, result.stderr


def run_tmux_attached(args: List[str]) -> int:
    """Run tmux command with the caller's terminal, return exit code.

    Used for attach-session, which has to own stdin/stdout.
    """
    cmd = ["tmux"] + args
    logger.debug(f"tmux {' '.join(args)} (attached)")
    result = subprocess.run(cmd)
    return result.returncode


def is_missing_target(stderr: str) -> bool:
    """Whether tmux stderr means the target (or the whole server) is gone."""
    return any(marker in stderr for marker in MISSING_TARGET_MARKERS)


def parse_format_line(line: str, delimiter: str = FIELD_SEP) -> list[str]:
    """Split one line of tmux -F output into its fields."""
    return line.rstrip("\n").split(delimiter)


def parse_stable_line(line: str) -> StableIdentifier:
    """Parse a line produced with STABLE_FORMAT."""
    session, window_id, pane_id = parse_format_line(line)
    return StableIdentifier(session=session, window_id=window_id, pane_id=pane_id)


def is_inside_tmux() -> bool:
    """Check if we are running inside a tmux client."""
    return bool(os.environ.get("TMUX"))


def get_display_state() -> Optional[DisplayState]:
    """Get the invoking client's current location if inside tmux.

    Returns:
        DisplayState for $TMUX_PANE (or the active pane), None outside tmux
    """
    if not is_inside_tmux():
        return None

    args = ["display-message", "-p"]
    pane = os.environ.get("TMUX_PANE")
    if pane:
        args.extend(["-t", pane])
    args.append(DISPLAY_STATE_FORMAT)

    code, stdout, _ = run_tmux(args)
    if code != 0 or not stdout.strip():
        return None

    try:
        session, window_index, pane_index, window_id, pane_id, zoomed = parse_format_line(stdout.strip("\n"))
        return DisplayState(
            session=session,
            window_index=int(window_index),
            pane_index=int(pane_index),
            window_id=window_id,
            pane_id=pane_id,
            zoomed=zoomed == "1",
        )
    except ValueError:
        logger.warning(f"Unexpected display-message output: {stdout!r}")
        return None
