"""Character skills and their training levels."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class SkillLevel(IntEnum):
    """Training level of a skill, ordered from least to most trained."""

    UNTRAINED = 0
    TRAINED = 1
    ADVANCED = 2
    MASTER = 3

    @property
    def display_name(self) -> str:
        return self.name.capitalize()


@dataclass
class Skill:
    """Base skill holding the level the character has reached."""

    skill_level: SkillLevel = SkillLevel.UNTRAINED