"""Color & style helpers for CLI feedback.

Decisions:
- Disables automatically when not a TTY unless FORCE_COLOR=1.
- Honors NO_COLOR for complete disable.
- Styling only wraps text; the visible characters never change.
"""
from __future__ import annotations
import os, sys

_FORCE = os.environ.get("FORCE_COLOR", "").lower() in {"1", "true", "yes", "on"}
_NO_COLOR = os.environ.get("NO_COLOR") is not None
_ENABLE = (_FORCE or sys.stdout.isatty()) and not _NO_COLOR


def _code(part: str) -> str:
    """Generate ANSI escape code for a given style part."""
    return f"\033[{part}m" if _ENABLE else ''


RESET = _code('0')
BOLD = _code('1')

SUCCESS = _code('32')
ERROR = _code('31')
HEADER = _code('36') + BOLD


def color(text: str, *styles: str) -> str:
    """Apply ANSI styles to a given text."""
    if not _ENABLE or not styles:
        return text
    return ''.join(styles) + text + RESET


__all__ = ['color', 'RESET', 'BOLD', 'SUCCESS', 'ERROR', 'HEADER']
