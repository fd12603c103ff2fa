"""
Type definitions used across layers
"""

from enum import StrEnum


class Color(StrEnum):
    """Turn colors. White ('blanc') always moves first."""

    BLANC = "blanc"
    NOIR = "noir"

    def opponent(self) -> "Color":
        return Color.NOIR if self == Color.BLANC else Color.BLANC


class Storage(StrEnum):
    JSON = "json"
    SQL = "sql"
