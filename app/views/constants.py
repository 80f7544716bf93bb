"""
UI/view constants centralized for reuse across view modules.
"""

from __future__ import annotations

from PySide6.QtCore import Qt

# Column headers and indices
HEADERS: list[str] = [
    "Status",
    "Link",
    "Custom",
    "Photo Descriptions",
]

COL_STATUS: int = 0
COL_LINK: int = 1
COL_CUSTOM: int = 2
COL_DESCRIPTION: int = 3
NUM_COLUMNS: int = 4


# Data roles
STATUS_ROLE: int = Qt.UserRole  # PhotoStatus on the status cell
URL_ROLE: int = Qt.UserRole + 1  # source location on the link cell
