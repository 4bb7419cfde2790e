"""Game-side model for story-driven RPGs: items, grid inventories, dialogue assets, characters, skills and level music."""

__version__ = "0.1.0"