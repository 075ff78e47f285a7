"""Enumeration types for property portfolio entities."""

from enum import Enum


class PropertyType(str, Enum):
    HDB = "HDB"
    CONDO = "Condo"
    LANDED = "Landed"


class SegmentKind(str, Enum):
    ORIGINAL = "ORIGINAL"
    REFINANCE = "REFINANCE"


class AlertType(str, Enum):
    SSD_COUNTDOWN = "SSD_COUNTDOWN"
    SSD_FREE = "SSD_FREE"
    PROFIT_TARGET = "PROFIT_TARGET"
