"""Items, the interaction protocol and the grid slots that hold items."""

from __future__ import annotations

import logging
import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Optional

logger = logging.getLogger(__name__)

Vector = tuple[float, float, float]

DEFAULT_WORLD_MODEL = "StaticMesh'/Engine/BasicShapes/Cube1.Cube1'"


@dataclass(frozen=True)
class Point:
    """An integer grid coordinate or size."""

    x: int
    y: int

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)


NOT_IN_INVENTORY = Point(-1, -1)


@dataclass
class Transform:
    """Location, rotation (pitch, yaw, roll in degrees) and scale."""

    location: Vector = (0.0, 0.0, 0.0)
    rotation: Vector = (0.0, 0.0, 0.0)
    scale: Vector = (1.0, 1.0, 1.0)

    @property
    def forward(self) -> Vector:
        """Unit vector pointing where the rotation faces."""
        pitch, yaw = math.radians(self.rotation[0]), math.radians(self.rotation[1])
        return (
            math.cos(pitch) * math.cos(yaw),
            math.cos(pitch) * math.sin(yaw),
            math.sin(pitch),
        )


class Interactable(ABC):
    """Something an actor can interact with."""

    @abstractmethod
    def interact(self, caller: Any) -> Any:
        """React to ``caller`` interacting with this object."""


@dataclass(eq=False)
class Item(Interactable):
    """A world item that can be picked up into an inventory grid."""

    name: str = "Item Name"
    description: str = "A brief item description."
    world_model: Any = DEFAULT_WORLD_MODEL
    inventory_location: Point = NOT_IN_INVENTORY
    inventory_size: Point = Point(1, 1)
    inventory_image: Any = None
    hotbar_image: Any = None
    enabled: bool = True
    transform: Transform = field(default_factory=Transform)

    def interact(self, caller: Any) -> bool:
        """Put this item into the caller's inventory; return whether it went in."""
        inventory = getattr(caller, "inventory", None)
        if inventory is None:
            logger.info("Cast failed")
            return False
        if not inventory.can_add_item(self):
            logger.info("Cannot add item to inventory")
            return False
        inventory.add_item(self)
        inventory.move_item(self, inventory.find_fit(self))
        self.set_enabled(False)
        logger.info("Added item to inventory")
        return True

    def use(self) -> None:
        """Use the item."""
        logger.info("Use item")

    def set_enabled(self, enabled: bool) -> None:
        """Show or hide the item in the world, with its collision and physics."""
        self.enabled = enabled

    def image_size(self) -> tuple[float, float]:
        """Size in pixels of the item's image on the inventory screen."""
        if self.inventory_size == Point(1, 1):
            return (96.0, 96.0)
        return (98.0 * self.inventory_size.x, 98.0 * self.inventory_size.y)


@dataclass(eq=False)
class ItemSlot:
    """One cell of an inventory grid."""

    item: Optional[Item] = None

    def is_occupied(self) -> bool:
        return self.item is not None