"""Type definitions for muxtap - display vs stable identifiers.

Everything the user sees is a display identifier (session:window.pane), which is
only valid until a sibling window or pane is removed. Anything that mutates the
server goes through a stable identifier (window_id/pane_id) resolved right before
the mutation.
"""

from dataclasses import dataclass
from typing import Literal
import re


type SessionName = str  # e.g., "proj - S01"
type WindowID = str  # e.g., "@3" - tmux native window ID
type PaneID = str  # e.g., "%42" - tmux native pane ID

type Action = Literal["switch", "rename", "kill"]
type DirectorySource = Literal["fd", "zoxide"]

DIRECTORY_SOURCES: tuple[str, ...] = ("fd", "zoxide")

_DISPLAY_RE = re.compile(r"^([^:]+):(\d+)\.(\d+)$")


@dataclass(frozen=True)
class DisplayIdentifier:
    """Snapshot position of a pane as shown to the user.

    Attributes:
        session: Session name.
        window: Window display index.
        pane: Pane display index.
    """

    session: SessionName
    window: int
    pane: int

    def __str__(self) -> str:
        return f"{self.session}:{self.window}.{self.pane}"

    @property
    def target(self) -> str:
        """Exact-match tmux target for this position."""
        return f"={self.session}:{self.window}.{self.pane}"

    @classmethod
    def parse(cls, text: str) -> "DisplayIdentifier":
        """Parse session:window.pane, ignoring any tab-separated suffix.

        Args:
            text: Picker line like "proj - S01:0.1" or "proj - S01:0.1\\tvim"

        Returns:
            DisplayIdentifier instance

        Raises:
            ValueError: If format is invalid
        """
        head = text.rstrip("\n").split("\t", 1)[0]
        match = _DISPLAY_RE.match(head)
        if not match:
            raise ValueError(f"Invalid pane identifier format: {text!r}")

        session, window, pane = match.groups()
        return cls(session=session, window=int(window), pane=int(pane))


@dataclass(frozen=True)
class StableIdentifier:
    """Immutable identity of a pane for its whole lifetime."""

    session: SessionName
    window_id: WindowID
    pane_id: PaneID


@dataclass(frozen=True)
class DisplayState:
    """Where the invoking client currently is."""

    session: SessionName
    window_index: int
    pane_index: int
    window_id: WindowID
    pane_id: PaneID
    zoomed: bool = False

    @property
    def stable(self) -> StableIdentifier:
        return StableIdentifier(self.session, self.window_id, self.pane_id)

    @property
    def display(self) -> DisplayIdentifier:
        return DisplayIdentifier(self.session, self.window_index, self.pane_index)


@dataclass(frozen=True)
class PickResult:
    """What came back from the fuzzy selector.

    Attributes:
        key: Captured expect key, empty string for plain enter.
        lines: Selected candidate lines in selection order.
    """

    key: str
    lines: tuple[str, ...]
