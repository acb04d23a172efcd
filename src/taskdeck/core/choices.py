"""Lenient parsing of view-parameter enums."""

import logging
from enum import Enum
from typing import TypeVar

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Enum)


def coerce_enum(enum_cls: type[E], value: object, default: E) -> E:
    """
    Map a member, its value or a loose spelling of its name to a member.

    Members of other enums match by value, so Priority.HIGH gives
    PriorityFilter.HIGH.

    "this-week", "This Week" and "THIS_WEEK" all resolve to THIS_WEEK.
    Anything unrecognised falls back to default with a warning.
    """
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, Enum):
        # A member of a related enum, e.g. Status.COMPLETED for StatusFilter
        value = value.value if isinstance(value.value, str) else value.name
    if value is None or value == "":
        return default
    if isinstance(value, str):
        key = value.strip().upper().replace("-", "_").replace(" ", "_")
        if key in enum_cls.__members__:
            return enum_cls[key]
        for member in enum_cls:
            if member.value == value:
                return member
    logger.warning(f"Unknown {enum_cls.__name__} value {value!r}, using {default.name}")
    return default
