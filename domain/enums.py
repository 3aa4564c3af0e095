"""
Domain enums for NourishHub.
Contains all enumeration types used across the domain models and schemas.
"""

import enum


class MealType(str, enum.Enum):
    """Meals served by the mess"""

    LUNCH = "lunch"
    DINNER = "dinner"


class FeedbackTopic(str, enum.Enum):
    """What a piece of feedback is about"""

    LUNCH = "lunch"
    DINNER = "dinner"
    GENERAL = "general"


class EatingStatus(str, enum.Enum):
    """Whether (and how) a student will eat a meal"""

    YES = "yes"  # full meal
    LIMITED = "limited"  # selected items only
    TIFFIN = "tiffin"  # take-away
    SKIP = "skip"


class PortionSize(str, enum.Enum):
    """Portion a student expects to eat"""

    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"


class Weekday(str, enum.Enum):
    """Day names used as voting keys (not calendar dates)"""

    MONDAY = "Monday"
    TUESDAY = "Tuesday"
    WEDNESDAY = "Wednesday"
    THURSDAY = "Thursday"
    FRIDAY = "Friday"
    SATURDAY = "Saturday"
    SUNDAY = "Sunday"

    @classmethod
    def parse(cls, value: str) -> "Weekday":
        """Case-insensitive lookup; raises ValueError for unknown names."""
        if isinstance(value, cls):
            return value
        normalized = str(value).strip().capitalize()
        return cls(normalized)

    @property
    def position(self) -> int:
        return list(Weekday).index(self)


def enum_values(enum_cls) -> list[str]:
    return [member.value for member in enum_cls]
