"""Fuzzy selection through fzf.

PUBLIC API:
  - pick: Run fzf over candidate lines and return key + selection
"""

import logging
import subprocess
from typing import Optional, Sequence

from .config import get_config
from .errors import MuxTapError
from .types import PickResult

logger = logging.getLogger(__name__)

# fzf exit codes
FZF_NO_MATCH = 1
FZF_INTERRUPTED = 130


def build_fzf_command(
    *,
    prompt: str,
    header: Optional[str],
    multi: bool,
    expect: Sequence[str],
    preview: Optional[str],
    preview_window: Optional[str],
    height: str,
) -> list[str]:
    cmd = [
        "fzf",
        "--layout=reverse",
        "--border=rounded",
        "--info=inline",
        f"--height={height}",
        f"--prompt={prompt}",
    ]
    if header:
        cmd.extend(["--header", header])
    if multi:
        cmd.extend(["--multi", "--bind", "ctrl-a:select-all"])
    if expect:
        cmd.extend(["--expect", ",".join(expect)])
    if preview:
        cmd.extend(["--preview", preview])
        if preview_window:
            cmd.extend(["--preview-window", preview_window])
    return cmd


def parse_fzf_output(stdout: str, expecting: bool) -> Optional[PickResult]:
    """Turn fzf stdout into a PickResult.

    With --expect the first line is the pressed key (empty for enter).
    """
    lines = stdout.split("\n")
    key = ""
    if expecting:
        key = lines[0].strip() if lines else ""
        lines = lines[1:]

    selected = tuple(line for line in lines if line.strip())
    if not selected:
        return None
    return PickResult(key=key, lines=selected)


def pick(
    candidates: Sequence[str],
    *,
    prompt: str = "> ",
    header: Optional[str] = None,
    multi: bool = False,
    expect: Sequence[str] = (),
    preview: Optional[str] = None,
    preview_window: Optional[str] = None,
    height: Optional[str] = None,
) -> Optional[PickResult]:
    """Let the user pick from candidates with fzf.

    Args:
        candidates: One line per choice
        prompt: Input prompt
        header: Sticky header text (key binding help)
        multi: Allow selecting several lines
        expect: Keys that accept the selection and are reported back
        preview: fzf preview command ({} is the current line)
        preview_window: fzf preview window spec
        height: fzf --height, defaults to config

    Returns:
        PickResult, or None if the user aborted or nothing matched

    Raises:
        MuxTapError: If fzf is missing or fails
    """
    cmd = build_fzf_command(
        prompt=prompt,
        header=header,
        multi=multi,
        expect=expect,
        preview=preview,
        preview_window=preview_window,
        height=height or get_config().fzf_height,
    )

    try:
        result = subprocess.run(cmd, input="\n".join(candidates), stdout=subprocess.PIPE, text=True)
    except FileNotFoundError:
        raise MuxTapError("fzf not found. Install with: brew install fzf (macOS) or apt install fzf (Linux)")

    if result.returncode in (FZF_NO_MATCH, FZF_INTERRUPTED):
        logger.debug(f"fzf returned {result.returncode}, treating as cancel")
        return None
    if result.returncode != 0:
        raise MuxTapError(f"fzf failed with exit code {result.returncode}")

    return parse_fzf_output(result.stdout, expecting=bool(expect))
