"""
Entry point for ``python -m rally_pong``.
"""

from __future__ import annotations

from rally_pong.app import main

if __name__ == "__main__":
    raise SystemExit(main())
