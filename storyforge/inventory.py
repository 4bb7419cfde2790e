"""A grid inventory that stores items in a Tetris-style layout."""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional

from storyforge.item import NOT_IN_INVENTORY, Item, ItemSlot, Point, Transform

logger = logging.getLogger(__name__)

DROP_DISTANCE = 100.0


class Inventory:
    """Items held by an owner, laid out on a grid of ``height`` rows of ``width`` slots."""

    def __init__(self, width: int = 5, height: int = 6, owner: Any = None) -> None:
        if width < 1 or height < 1:
            raise ValueError("inventory width and height must be at least 1")
        self.width = width
        self.height = height
        self.owner = owner
        self.items: list[Item] = []
        self.grid: list[list[ItemSlot]] = [
            [ItemSlot() for _ in range(width)] for _ in range(height)
        ]
        self._listeners: list[Callable[[], None]] = []

    def subscribe(self, callback: Callable[[], None]) -> Callable[[], None]:
        """Call ``callback`` whenever the inventory changes; return an unsubscriber."""
        self._listeners.append(callback)
        return lambda: self._listeners.remove(callback)

    def _changed(self) -> None:
        for callback in list(self._listeners):
            callback()

    def add_item(self, item: Item) -> None:
        self.items.append(item)
        self._changed()

    def move_item(self, item: Item, position: Point) -> None:
        """Take the item off the grid and place it with its top-left at ``position``."""
        self.remove_item_from_grid(item)
        self._set_item_location(item, position)
        self._changed()

    def remove_item_from_grid(self, item: Item) -> None:
        """Clear the cells the item covers, if it is on the grid."""
        if item.inventory_location == NOT_IN_INVENTORY:
            return
        for cell in self._cells(item, item.inventory_location):
            if self.item_at(cell) is not None:
                self._set_cell(None, cell)

    def remove_item(self, item: Item) -> None:
        if item in self.items:
            self.items.remove(item)
        self._changed()

    def drop_item(self, item: Item) -> Transform:
        """Drop the item in front of the owner and return where it was placed."""
        if self.owner is None:
            raise ValueError("inventory has no owner to drop items from")
        self.remove_item(item)
        self.remove_item_from_grid(item)
        item.inventory_location = NOT_IN_INVENTORY
        item.set_enabled(True)

        owner_transform: Transform = self.owner.transform
        location = tuple(
            base + direction * DROP_DISTANCE
            for base, direction in zip(owner_transform.location, owner_transform.forward)
        )
        dropped = Transform(location=location, rotation=owner_transform.rotation)
        item.transform = dropped
        logger.info("Dropped item")
        self._changed()
        return dropped

    def can_add_item(self, item: Item) -> bool:
        return self.find_fit(item) is not None

    def item_at(self, coordinates: Point) -> Optional[Item]:
        """The item in the cell at ``coordinates``, or None if empty or off the grid."""
        if not self.is_valid_slot(coordinates):
            return None
        return self.grid[coordinates.y][coordinates.x].item

    def size(self) -> Point:
        """Grid size as a point whose x is the row count and y the column count."""
        return Point(len(self.grid), len(self.grid[0]))

    def has_item_at(self, coordinates: Point) -> bool:
        return self.item_at(coordinates) is not None

    def is_valid_slot(self, coordinates: Point) -> bool:
        return 0 <= coordinates.y < len(self.grid) and 0 <= coordinates.x < len(self.grid[0])

    def find_fit(self, item: Item) -> Optional[Point]:
        """The first location, scanning row by row, where the item fits; None if none."""
        bounds = self.size()
        for y in range(bounds.y):
            for x in range(bounds.x):
                location = Point(x, y)
                if self.can_fit_at(item, location):
                    return location
        return None

    def can_fit_at(self, item: Item, location: Point) -> bool:
        """Whether every cell the item would cover is on the grid and free or its own."""
        for cell in self._cells(item, location):
            occupant = self.item_at(cell)
            if occupant is item:
                continue
            if not self.is_valid_slot(cell) or occupant is not None:
                return False
        return True

    @staticmethod
    def _cells(item: Item, origin: Point):
        for dy in range(item.inventory_size.y):
            for dx in range(item.inventory_size.x):
                yield origin + Point(dx, dy)

    def _set_item_location(self, item: Item, location: Point) -> None:
        item.inventory_location = location
        if not self.is_valid_slot(location):
            return
        for cell in self._cells(item, location):
            self._set_cell(item, cell)

    def _set_cell(self, item: Optional[Item], location: Point) -> None:
        if self.is_valid_slot(location):
            self.grid[location.y][location.x].item = item