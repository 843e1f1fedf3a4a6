"""Interactive runtime: config, navigation, session actions, and the event loop.

Only lightweight pieces are re-exported here; ``notenav.runtime.loop`` pulls
in rendering and is imported explicitly by the CLI.
"""

from __future__ import annotations

from .navigation import Navigator, VisibleEntry, visible_entries
from .session import HELP_TEXT, Session

__all__ = [
    "HELP_TEXT",
    "Navigator",
    "Session",
    "VisibleEntry",
    "visible_entries",
]
