"""Enumerations shared across client subsystems."""
from __future__ import annotations

from enum import IntEnum


class StampType(IntEnum):
    """Kind of a time-clock stamp as encoded by the API."""

    UNKNOWN = 0
    GO_TO_WORK = 11
    LEAVE_WORK = 12
    GO_STRAIGHT = 21  # direct to a client site
    BOUNCE = 22  # direct home from a client site
    BREAK = 31
    BREAK_RETURN = 32

    @classmethod
    def _missing_(cls, value: object) -> "StampType | None":
        # Codes added server-side after this release still decode.
        if isinstance(value, int) and not isinstance(value, bool):
            return cls.UNKNOWN
        return None

    @property
    def label(self) -> str:
        """Display label used by the AKASHI web console."""

        return _STAMP_LABELS.get(self, "")


_STAMP_LABELS = {
    StampType.GO_TO_WORK: "出勤",
    StampType.LEAVE_WORK: "退勤",
    StampType.GO_STRAIGHT: "直行",
    StampType.BOUNCE: "直帰",
    StampType.BREAK: "休憩入",
    StampType.BREAK_RETURN: "休憩戻",
}
