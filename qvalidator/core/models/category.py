"""
Game categories and the meta-category lookup used by contamination rules.
"""

from enum import Enum
from typing import Optional, Union


# Python 3.10 compat - StrEnum added in 3.11
class StrEnum(str, Enum):
    pass


class Category(StrEnum):
    Animals = "animals"
    Objects = "objects"
    WorldLeaders = "world leaders"
    CricketPlayers = "cricket players"
    FootballPlayers = "football players"
    NBAPlayers = "nba players"
    Unknown = "unknown"

    @classmethod
    def parse(cls, value: Union[str, "Category", None]) -> "Category":
        """Lenient lookup. Case, underscores and hyphens are ignored; unknown text maps to Unknown."""
        if isinstance(value, Category):
            return value

        text = " ".join(str(value or "").lower().replace("_", " ").replace("-", " ").split())
        for member in cls:
            if member.value == text:
                return member

        for needle, member in _ALIASES:
            if needle in text:
                return member

        return cls.Unknown


# substring aliases, checked in order
_ALIASES: list[tuple[str, Category]] = [
    ("leader", Category.WorldLeaders),
    ("cricket", Category.CricketPlayers),
    ("football", Category.FootballPlayers),
    ("soccer", Category.FootballPlayers),
    ("nba", Category.NBAPlayers),
    ("basketball", Category.NBAPlayers),
    ("animal", Category.Animals),
    ("object", Category.Objects),
]

META_ANIMALS = "animals"
META_OBJECTS = "objects"
META_PEOPLE = "people"

# every named-person category shares one rule set
_META_CATEGORY: dict[Category, str] = {
    Category.Animals: META_ANIMALS,
    Category.Objects: META_OBJECTS,
    Category.WorldLeaders: META_PEOPLE,
    Category.CricketPlayers: META_PEOPLE,
    Category.FootballPlayers: META_PEOPLE,
    Category.NBAPlayers: META_PEOPLE,
}

PERSON_CATEGORIES = frozenset(c for c, meta in _META_CATEGORY.items() if meta == META_PEOPLE)


def meta_category(category: Union[str, Category, None]) -> Optional[str]:
    """Resolve a category to its meta-category. None for Unknown."""
    return _META_CATEGORY.get(Category.parse(category))


__all__ = [
    "StrEnum",
    "Category",
    "META_ANIMALS",
    "META_OBJECTS",
    "META_PEOPLE",
    "PERSON_CATEGORIES",
    "meta_category",
]
