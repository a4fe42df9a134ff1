"""
System clipboard transfer for copied fence content.

Public API:
  - copy_to_clipboard(text: str, *, logger=None, log: bool = False) -> bool
"""
from __future__ import annotations

import logging
import os
import subprocess
from typing import List, Optional

from .._logging import resolve_logger

__all__ = ["CLIPBOARD_COMMANDS", "copy_to_clipboard"]

# Tried in order; the first binary found on PATH is used.
CLIPBOARD_COMMANDS: List[List[str]] = [
    ["pbcopy"],                           # macOS
    ["clip"],                             # Windows
    ["wl-copy"],                          # Wayland
    ["xclip", "-selection", "clipboard"], # X11
    ["xsel", "--clipboard", "--input"],   # X11
]


def copy_to_clipboard(
    text: str,
    *,
    logger: Optional[logging.Logger] = None,
    log: bool = False,
) -> bool:
    """
    Copy `text` to the system clipboard using the first available helper binary.
    Returns True on apparent success, False otherwise. Never raises.
    """
    lg = resolve_logger(logger=logger, enabled=log, name=__name__)
    for command in CLIPBOARD_COMMANDS:
        if not _which(command[0]):
            continue
        try:
            proc = subprocess.run(
                command,
                input=text.encode("utf-8"),
                shell=command[0] == "clip",
                check=False,
            )
        except OSError as e:
            lg.warning("Clipboard helper %s failed to start: %s", command[0], e)
            return False
        if proc.returncode != 0:
            lg.warning("Clipboard helper %s exited with %d", command[0], proc.returncode)
        return proc.returncode == 0
    lg.warning("No clipboard helper found on PATH")
    return False


def _which(cmd: str) -> bool:
    """Minimal shutil.which to avoid import overhead."""
    paths = os.environ.get("PATH", "").split(os.pathsep)
    exts = [""]
    if os.name == "nt":
        pathext = os.environ.get("PATHEXT", ".EXE;.BAT;.CMD").split(";")
        exts += [e.lower() for e in pathext if e]
    for folder in paths:
        full = os.path.join(folder, cmd)
        for e in exts:
            candidate = full + e
            if os.path.isfile(candidate) and os.access(candidate, os.X_OK):
                return True
    return False
