"""Characters that carry an inventory, can hold conversations and can die."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Optional

from storyforge.dialogue import DialogueAsset, InteractTrigger
from storyforge.inventory import Inventory
from storyforge.item import Interactable, Item, Transform
from storyforge.messages import ClientMessage

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class Character(Interactable):
    """A character in the world with movement speeds, barks and an inventory."""

    walk_speed: float = 300.0
    run_speed: float = 500.0
    death_animation: Any = None
    current_item: Optional[Item] = None
    conversation: Optional[DialogueAsset] = None
    bark_player_interaction: Any = None
    bark_player_sight: Any = None
    bark_injured: Any = None
    bark_flee: Any = None
    transform: Transform = field(default_factory=Transform)
    inventory: Inventory = field(init=False)
    max_walk_speed: float = field(init=False)
    collision_enabled: bool = field(init=False, default=True)
    playing_animation: Any = field(init=False, default=None)
    _die_listeners: list[Callable[[], None]] = field(
        init=False, default_factory=list, repr=False
    )

    def __post_init__(self) -> None:
        self.inventory = Inventory(owner=self)
        self.max_walk_speed = self.walk_speed

    def subscribe_on_die(self, callback: Callable[[], None]) -> Callable[[], None]:
        """Call ``callback`` when the character dies; return an unsubscriber."""
        self._die_listeners.append(callback)
        return lambda: self._die_listeners.remove(callback)

    def can_talk(self) -> bool:
        """Whether the character has a conversation started by interaction."""
        if self.conversation is None:
            return False
        return type(self.conversation.trigger) is InteractTrigger

    def interact(self, caller: Any) -> bool:
        """Speak to a player who interacts; return whether speech began."""
        if isinstance(caller, Player) and self.can_talk():
            logger.info("Speak")
            return True
        return False

    def set_current_item(self, item: Item) -> None:
        """Report the item the character now has in hand."""
        logger.info("Current Item: %s", item.name)

    def die(self) -> None:
        """Play the death animation, drop collision and notify listeners."""
        self.playing_animation = self.death_animation
        self.collision_enabled = False
        for callback in list(self._die_listeners):
            callback()


@dataclass(eq=False)
class Player(Character):
    """The player character, who also receives client messages."""

    client_messages: list[ClientMessage] = field(default_factory=list)

    def add_client_message(self, message: ClientMessage) -> None:
        """Queue a feedback message for the player."""
        self.client_messages.append(message)