"""Enumeration types for the CertPath catalog."""

from enum import Enum


class _CaseInsensitiveEnum(str, Enum):
    """String enum whose lookup by value ignores case and surrounding whitespace."""

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            wanted = value.strip().lower()
            for member in cls:
                if member.value.lower() == wanted:
                    return member
        return None


class CloudProvider(_CaseInsensitiveEnum):
    """Cloud vendor issuing a certification."""
    AWS = "AWS"
    AZURE = "Azure"
    GCP = "GCP"


class Level(_CaseInsensitiveEnum):
    """Certification tier. Member order is the display order."""
    FUNDAMENTAL = "Fundamental"
    ASSOCIATE = "Associate"
    PROFESSIONAL = "Professional"
    EXPERT = "Expert"
    SPECIALTY = "Specialty"

    @property
    def rank(self) -> int:
        """Ordering rank; Specialty is unranked (0)."""
        return _LEVEL_RANKS[self]


_LEVEL_RANKS = {
    Level.FUNDAMENTAL: 1,
    Level.ASSOCIATE: 2,
    Level.PROFESSIONAL: 3,
    Level.EXPERT: 3,
    Level.SPECIALTY: 0,
}

LEVEL_DISPLAY_ORDER: tuple[Level, ...] = tuple(Level)


class Difficulty(_CaseInsensitiveEnum):
    """Perceived exam difficulty."""
    BEGINNER = "Beginner"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"

    @property
    def order(self) -> int:
        return _DIFFICULTY_ORDER[self]


_DIFFICULTY_ORDER = {
    Difficulty.BEGINNER: 1,
    Difficulty.INTERMEDIATE: 2,
    Difficulty.ADVANCED: 3,
}


class RelationKind(str, Enum):
    """Relationship of a candidate certification to a focused one."""
    SELF = "self"
    PREREQUISITE = "prerequisite"
    SUCCESSOR = "successor"
    UNRELATED = "unrelated"


def level_rank(level) -> int:
    """Rank of a level value; anything unrecognised ranks 0."""
    if isinstance(level, Level):
        return level.rank
    try:
        return Level(level).rank
    except ValueError:
        return 0
