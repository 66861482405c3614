from enum import Enum


class ScanState(str, Enum):
    """Position of the row scan relative to the regular season block."""

    BEFORE = "BEFORE"
    IN_SEASON = "IN_SEASON"
    AFTER = "AFTER"


class HostMarker(str, Enum):
    HOME = "vs"
    AWAY = "@"
