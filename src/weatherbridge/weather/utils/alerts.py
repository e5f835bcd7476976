"""Alert severity and type classification."""

from __future__ import annotations

from collections.abc import Sequence
from typing import ClassVar, Final

SEVERITY_EXTREME: Final = 4
SEVERITY_SEVERE: Final = 3
SEVERITY_MINOR: Final = 2


class AlertClassifier:
    """Derives coarse alert codes from free-text upstream fields.

    Both lookups are ordered rule lists: the first matching substring
    wins, so more specific phrases must come first.
    """

    # (tag substring, severity code); checked in order
    SEVERITY_RULES: ClassVar[list[tuple[str, int]]] = [
        ("extreme", SEVERITY_EXTREME),
        ("severe", SEVERITY_SEVERE),
    ]

    # (event substring, message type code); checked in order
    TYPE_RULES: ClassVar[list[tuple[str, str]]] = [
        ("tornado", "TOR"),
        ("severe thunderstorm", "SVR"),
        ("flood", "FLO"),
        ("winter", "WIN"),
    ]
    DEFAULT_TYPE: ClassVar[str] = "WEA"

    @classmethod
    def severity(cls, tags: Sequence[str] | None) -> int:
        """Severity code (2-4) from an alert's tag list.

        An alert without a tag list is treated as severe; an empty list
        falls through to the lowest tier.
        """
        if tags is None:
            return SEVERITY_SEVERE
        lowered = [tag.lower() for tag in tags]
        for needle, code in cls.SEVERITY_RULES:
            if any(needle in tag for tag in lowered):
                return code
        return SEVERITY_MINOR

    @classmethod
    def message_type(cls, event: str | None) -> str:
        """Short type code (TOR, SVR, FLO, WIN, WEA) for an event name."""
        lowered = (event or "").lower()
        for needle, code in cls.TYPE_RULES:
            if needle in lowered:
                return code
        return cls.DEFAULT_TYPE
