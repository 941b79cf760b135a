"""
Exceptions raised by Rally Pong.
"""

from __future__ import annotations


class RallyPongError(Exception):
    """Base class for all Rally Pong errors."""


class InvalidPointerError(RallyPongError, ValueError):
    """Pointer state that cannot be mapped onto the playfield."""


class InvalidConfigError(RallyPongError, ValueError):
    """Match configuration with out-of-range values."""
