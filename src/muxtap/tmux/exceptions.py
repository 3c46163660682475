"""Tmux-specific exceptions.

PUBLIC API:
  - TmuxError: Base exception for all tmux operations
  - SessionNotFoundError: Session not found exception
  - PaneNotFoundError: Pane not found exception
"""

from ..errors import MuxTapError


class TmuxError(MuxTapError):
    """Base exception for all tmux operations."""

    pass


class SessionNotFoundError(TmuxError):
    """Raised when a tmux session cannot be found."""

    pass


class PaneNotFoundError(TmuxError):
    """Raised when a tmux pane cannot be found."""

    pass
