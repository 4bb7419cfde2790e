import pytest

from storyforge.music import LevelMusicTracks, MusicTrack, WorldSettings


@pytest.fixture
def settings():
    tracks = LevelMusicTracks(
        ambient="ambient.wav",
        death="death.wav",
        combat="combat.wav",
        conversation="conversation.wav",
        outro="outro.wav",
    )
    return WorldSettings(level_music=tracks)


@pytest.mark.parametrize(
    "track, expected",
    [
        (MusicTrack.AMBIENT, "ambient.wav"),
        (MusicTrack.DEATH, "death.wav"),
        (MusicTrack.CONVERSATION, "conversation.wav"),
        (MusicTrack.OUTRO, "outro.wav"),
    ],
)
def test_music_for_returns_matching_track(settings, track, expected):
    assert settings.music_for(track) == expected


def test_combat_uses_conversation_track(settings):
    assert settings.music_for(MusicTrack.COMBAT) == "conversation.wav"


def test_unknown_track_falls_back_to_ambient(settings):
    assert settings.music_for("not a track") == "ambient.wav"


def test_unassigned_track_is_none():
    settings = WorldSettings(level_music=LevelMusicTracks(ambient="a.wav"))
    assert settings.music_for(MusicTrack.DEATH) is None


def test_missing_level_music_raises():
    with pytest.raises(ValueError):
        WorldSettings().music_for(MusicTrack.AMBIENT)


def test_track_lookup_by_display_name():
    assert MusicTrack("Outro") is MusicTrack.OUTRO