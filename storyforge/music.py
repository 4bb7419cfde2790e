"""Per-level music tracks and the world settings that pick among them."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class MusicTrack(Enum):
    """The kinds of music a level can play; values are display names."""

    AMBIENT = "Ambient"
    DEATH = "Death"
    COMBAT = "Combat"
    CONVERSATION = "Conversation"
    OUTRO = "Outro"


@dataclass
class LevelMusicTracks:
    """The sounds assigned to each kind of track for one level."""

    ambient: Any = None
    death: Any = None
    combat: Any = None
    conversation: Any = None
    outro: Any = None


# Combat deliberately shares the conversation track; anything unknown is ambient.
_TRACK_FIELDS = {
    MusicTrack.AMBIENT: "ambient",
    MusicTrack.DEATH: "death",
    MusicTrack.COMBAT: "conversation",
    MusicTrack.CONVERSATION: "conversation",
    MusicTrack.OUTRO: "outro",
}


@dataclass
class WorldSettings:
    """Level-wide settings, holding the level's music."""

    level_music: Optional[LevelMusicTracks] = None

    def music_for(self, track: MusicTrack) -> Any:
        """Return the sound that plays for ``track`` in this level."""
        if self.level_music is None:
            raise ValueError("no level music is assigned")
        return getattr(self.level_music, _TRACK_FIELDS.get(track, "ambient"))