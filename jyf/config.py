from __future__ import annotations

import logging
import os
from typing import Literal, TextIO

ColorMode = Literal["auto", "always", "never"]

_DEFAULT_LOG_LEVEL = logging.WARNING
_COLOR_MODES = ("auto", "always", "never")


def get_log_level() -> int:
    """Level named by JYF_LOG_LEVEL (e.g. DEBUG), WARNING if unset or unknown."""
    raw = os.environ.get("JYF_LOG_LEVEL", "").strip().upper()
    level = logging.getLevelName(raw) if raw else _DEFAULT_LOG_LEVEL
    return level if isinstance(level, int) else _DEFAULT_LOG_LEVEL


def get_color_mode() -> ColorMode:
    if os.environ.get("NO_COLOR"):
        return "never"
    raw = os.environ.get("JYF_COLOR", "auto").strip().lower()
    return raw if raw in _COLOR_MODES else "auto"


def use_color(stream: TextIO) -> bool:
    mode = get_color_mode()
    if mode == "auto":
        return stream.isatty()
    return mode == "always"
