"""Shared fixtures: an in-memory tmux server behind subprocess.run.

The fake renumbers pane indexes when a pane is removed and window indexes when
a window is removed (renumber-windows on), which is exactly the behavior that
makes display identifiers go stale.
"""

import re
import subprocess
from dataclasses import dataclass, field
from typing import Callable, Optional
from unittest.mock import patch

import pytest

from muxtap import config


@dataclass
class FakeWindow:
    window_id: str
    panes: list[str] = field(default_factory=list)
    zoomed: bool = False


@dataclass
class FakeSession:
    name: str
    windows: list[FakeWindow] = field(default_factory=list)
    cwd: str = "/"


_FORMAT_RE = re.compile(r"#\{(\w+)\}")
_PANE_FILTER_RE = re.compile(r"^#\{==:#\{pane_index\},(\d+)\}$")
_VALUE_FLAGS = {"-t", "-F", "-f", "-s", "-c"}


class FakeTmuxServer:
    """Just enough of tmux for muxtap."""

    def __init__(self):
        self.sessions: list[FakeSession] = []
        self.killed: list[str] = []
        self.calls: list[list[str]] = []
        self.client_target: Optional[str] = None
        self.current_pane: Optional[str] = None
        self._next_window = 0
        self._next_pane = 0

    # -- building state -------------------------------------------------

    def add_session(self, name: str, *panes_per_window: int, cwd: str = "/") -> FakeSession:
        session = FakeSession(name, cwd=cwd)
        for count in panes_per_window or (1,):
            window = FakeWindow(f"@{self._next_window}")
            self._next_window += 1
            for _ in range(count):
                window.panes.append(f"%{self._next_pane}")
                self._next_pane += 1
            session.windows.append(window)
        self.sessions.append(session)
        return session

    # -- inspection -----------------------------------------------------

    def session_names(self) -> list[str]:
        return [s.name for s in self.sessions]

    def live_panes(self) -> set[str]:
        return {p for s in self.sessions for w in s.windows for p in w.panes}

    def locate(self, pane_id: str) -> Optional[tuple[FakeSession, int, int]]:
        for session in self.sessions:
            for wi, window in enumerate(session.windows):
                if pane_id in window.panes:
                    return session, wi, window.panes.index(pane_id)
        return None

    # -- internals ------------------------------------------------------

    def _session(self, name: str) -> FakeSession:
        for session in self.sessions:
            if session.name == name:
                return session
        raise KeyError(name)

    def _context(self, session: FakeSession, wi: int, pi: int) -> dict[str, str]:
        window = session.windows[wi]
        return {
            "session_name": session.name,
            "window_index": str(wi),
            "pane_index": str(pi),
            "window_id": window.window_id,
            "pane_id": window.panes[pi],
            "window_zoomed_flag": "1" if window.zoomed else "0",
        }

    @staticmethod
    def _render(fmt: str, context: dict[str, str]) -> str:
        return _FORMAT_RE.sub(lambda m: context[m.group(1)], fmt)

    @staticmethod
    def _parse(args: list[str]) -> tuple[dict[str, object], list[str]]:
        flags: dict[str, object] = {}
        positional = []
        i = 0
        while i < len(args):
            arg = args[i]
            if arg in _VALUE_FLAGS:
                flags[arg] = args[i + 1]
                i += 2
            elif arg.startswith("-") and len(arg) == 2:
                flags[arg] = True
                i += 1
            else:
                positional.append(arg)
                i += 1
        return flags, positional

    def _split_target(self, target: str) -> tuple[str, Optional[int], Optional[int]]:
        target = target.lstrip("=")
        if ":" not in target:
            return target, None, None
        session, rest = target.split(":", 1)
        if "." in rest:
            window, pane = rest.split(".", 1)
            return session, int(window), int(pane)
        return session, int(rest), None

    def _remove_pane(self, pane_id: str) -> None:
        session, wi, _ = self.locate(pane_id)
        window = session.windows[wi]
        window.panes.remove(pane_id)
        if not window.panes:
            session.windows.pop(wi)
        if not session.windows:
            self.sessions.remove(session)

    # -- command dispatch -----------------------------------------------

    def __call__(self, args: list[str]) -> tuple[int, str, str]:
        self.calls.append(list(args))
        command, rest = args[0], args[1:]
        flags, positional = self._parse(rest)
        handler = getattr(self, "_cmd_" + command.replace("-", "_"))
        return handler(flags, positional)

    def _cmd_list_sessions(self, flags, positional):
        if not self.sessions:
            return 1, "", "no server running on /tmp/tmux-0/default\n"
        out = "".join(f"{s.name}\n" for s in self.sessions)
        return 0, out, ""

    def _cmd_has_session(self, flags, positional):
        name, _, _ = self._split_target(flags["-t"])
        return (0, "", "") if name in self.session_names() else (1, "", f"can't find session: {name}\n")

    def _cmd_list_windows(self, flags, positional):
        name, _, _ = self._split_target(flags["-t"])
        if name not in self.session_names():
            return 1, "", f"can't find session: {name}\n"
        session = self._session(name)
        out = "".join(
            self._render(flags["-F"], self._context(session, wi, 0)) + "\n" for wi in range(len(session.windows))
        )
        return 0, out, ""

    def _cmd_list_panes(self, flags, positional):
        name, window, _ = self._split_target(flags["-t"])
        if name not in self.session_names():
            return 1, "", f"can't find session: {name}\n"
        session = self._session(name)
        if window is None or window >= len(session.windows):
            return 1, "", f"can't find window: {window}\n"

        wanted = None
        if "-f" in flags:
            wanted = int(_PANE_FILTER_RE.match(flags["-f"]).group(1))

        lines = []
        for pi in range(len(session.windows[window].panes)):
            if wanted is not None and pi != wanted:
                continue
            lines.append(self._render(flags["-F"], self._context(session, window, pi)) + "\n")
        return 0, "".join(lines), ""

    def _cmd_kill_pane(self, flags, positional):
        pane_id = flags["-t"]
        if self.locate(pane_id) is None:
            return 1, "", f"can't find pane: {pane_id}\n"
        self._remove_pane(pane_id)
        self.killed.append(pane_id)
        return 0, "", ""

    def _cmd_new_session(self, flags, positional):
        name = flags["-s"]
        if name in self.session_names():
            return 1, "", f"duplicate session: {name}\n"
        session = self.add_session(name, 1, cwd=flags.get("-c", "/"))
        out = self._render(flags["-F"], self._context(session, 0, 0)) + "\n" if "-P" in flags else ""
        return 0, out, ""

    def _cmd_rename_session(self, flags, positional):
        name, _, _ = self._split_target(flags["-t"])
        if name not in self.session_names():
            return 1, "", f"can't find session: {name}\n"
        self._session(name).name = positional[0]
        return 0, "", ""

    def _cmd_switch_client(self, flags, positional):
        self.client_target = flags["-t"]
        return 0, "", ""

    def _cmd_attach_session(self, flags, positional):
        self.client_target = flags["-t"]
        return 0, "", ""

    def _cmd_display_message(self, flags, positional):
        pane_id = flags.get("-t", self.current_pane)
        found = self.locate(pane_id) if pane_id else None
        if found is None:
            return 1, "", "can't find pane\n"
        session, wi, pi = found
        return 0, self._render(positional[0], self._context(session, wi, pi)) + "\n", ""


class FakeRunner:
    """Stands in for subprocess.run; routes tmux to the fake server."""

    def __init__(self, server: FakeTmuxServer):
        self.server = server
        self.programs: dict[str, Callable[[list[str], Optional[str]], tuple[int, str]]] = {}
        self.commands: list[list[str]] = []

    def __call__(self, cmd, input=None, **kwargs):
        self.commands.append(list(cmd))
        if cmd[0] == "tmux":
            code, out, err = self.server(cmd[1:])
            return subprocess.CompletedProcess(cmd, code, out, err)
        if cmd[0] not in self.programs:
            raise FileNotFoundError(cmd[0])
        code, out = self.programs[cmd[0]](cmd, input)
        return subprocess.CompletedProcess(cmd, code, out, "")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for var in (
        "TMUX",
        "TMUX_PANE",
        "MUXTAP_SOURCE",
        "MUXTAP_ROOT",
        "MUXTAP_FZF_HEIGHT",
        "MUXTAP_FD_COMMAND",
        "MUXTAP_LOG_LEVEL",
    ):
        monkeypatch.delenv(var, raising=False)
    config.reset_config()
    yield
    config.reset_config()


@pytest.fixture
def tmux_server():
    return FakeTmuxServer()


@pytest.fixture
def runner(tmux_server):
    fake = FakeRunner(tmux_server)
    with patch("subprocess.run", side_effect=fake):
        yield fake


@pytest.fixture
def inside_tmux(monkeypatch, tmux_server):
    """Pretend muxtap runs in a pane; returns a setter for the current pane."""
    monkeypatch.setenv("TMUX", "/tmp/tmux-0/default,1,0")

    def set_current(pane_id: str) -> None:
        tmux_server.current_pane = pane_id
        monkeypatch.setenv("TMUX_PANE", pane_id)

    return set_current
