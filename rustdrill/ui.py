"""Terminal styling and the warning/success message helpers."""

from __future__ import annotations

import os
import sys

_RESET = "\x1b[0m"
_RED = "31"
_GREEN = "32"
_BLUE = "34"
_BOLD = "1"


def emoji_enabled() -> bool:
    """Return True unless the NO_EMOJI environment variable is set."""
    return "NO_EMOJI" not in os.environ


def _colors_enabled() -> bool:
    force = os.environ.get("CLICOLOR_FORCE")
    if force is not None and force != "0":
        return True
    if "NO_COLOR" in os.environ:
        return False
    return sys.stdout.isatty()


def _style(text: object, code: str) -> str:
    text = str(text)
    if not _colors_enabled():
        return text
    return f"\x1b[{code}m{text}{_RESET}"


def red(text: object) -> str:
    """Render text in red when colours are enabled."""
    return _style(text, _RED)


def green(text: object) -> str:
    """Render text in green when colours are enabled."""
    return _style(text, _GREEN)


def blue(text: object) -> str:
    """Render text in blue when colours are enabled."""
    return _style(text, _BLUE)


def bold(text: object) -> str:
    """Render text in bold when colours are enabled."""
    return _style(text, _BOLD)


def warn(message: str) -> None:
    """Print a red warning line."""
    symbol = "⚠️ " if emoji_enabled() else "!"
    print(f"{red(symbol)} {red(message)}")


def success(message: str) -> None:
    """Print a green success line."""
    symbol = "✅" if emoji_enabled() else "✓"
    print(f"{green(symbol)} {green(message)}")