# storyforge

storyforge is a small library that holds the game-side model for
story-driven role-playing games. It covers:

- Tetris-style grid inventories
- items that can be picked up
- dialogue ("conversation") assets
- characters and the player
- per-level music tracks

It uses only the standard library. Sounds, meshes, textures and animations
are opaque values that you supply.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `storyforge.item` | `Point`, `Transform`, `Interactable`, `Item`, `ItemSlot` |
| `storyforge.inventory` | `Inventory`, a grid of `ItemSlot`s in which items cover blocks of cells |
| `storyforge.dialogue` | `DialogueAsset`, nodes, node events, triggers and `CameraAngle` (details below) |
| `storyforge.character` | `Character` and `Player` |
| `storyforge.messages` | `ClientMessage`, `ClientMessageUrgency` |
| `storyforge.music` | `MusicTrack`, `LevelMusicTracks`, `WorldSettings` |
| `storyforge.skills` | `SkillLevel`, `Skill` |

The classes in `storyforge.dialogue` are:

- nodes: `DialogueNode`, `SpeechNode`, `ChoiceNode`, `EndNode`, `TransferItemNode`
- node events: `DialogueNodeEvent`, `CameraAngleEvent`, `ClientMessageEvent`
- conversation events: `DialogueEvent`
- triggers: `DialogueTrigger`, `DistanceTrigger`, `InteractTrigger`
- camera framings: `CameraAngle`

## Items

`Item` is a dataclass with these fields:

| Field | Default |
| --- | --- |
| `name` | `"Item Name"` |
| `description` | `"A brief item description."` |
| `world_model` | a cube mesh path |
| `inventory_location` | `Point(-1, -1)` |
| `inventory_size` | `Point(1, 1)` |
| `inventory_image` | `None` |
| `hotbar_image` | `None` |
| `enabled` | `True` |
| `transform` | a default `Transform` |

An item that is not in any inventory has the location `Point(-1, -1)`.

`Item.image_size()` returns the size of the item's image in pixels:

- `(96.0, 96.0)` for a 1×1 item;
- otherwise 98 pixels for each cell in each direction.

## Inventories

An `Inventory(width=5, height=6, owner=None)` is a list of `height` rows,
each holding `width` `ItemSlot`s. A width or height below 1 raises
`ValueError`.

Each item covers `inventory_size.x × inventory_size.y` cells. The block
starts at its top-left location.

| Method | What it does |
| --- | --- |
| `add_item(item)` | Appends the item to `items`. It does not place the item on the grid. |
| `move_item(item, position)` | Clears the item's old cells, then places its top-left cell at `position`. |
| `find_fit(item)` | Scans row by row and returns the first `Point` where the item fits, or `None`. |
| `can_fit_at(item, location)` | Checks one position. The cells may already hold the same item. |
| `can_add_item(item)` | Returns whether `find_fit` found a place. |
| `item_at(coordinates)` | Returns the item in a cell, or `None` if the cell is empty or off the grid. |
| `has_item_at(coordinates)` | Returns whether a cell holds an item. |
| `is_valid_slot(coordinates)` | Returns whether a cell is on the grid. |
| `remove_item(item)` | Removes the item from `items`. |
| `remove_item_from_grid(item)` | Clears the item's cells. |
| `drop_item(item)` | Drops the item in front of the owner (details below). |
| `subscribe(callback)` | Registers a callback (details below). |

`size()` returns a `Point` whose `x` is the number of rows and whose `y` is
the number of slots in a row.

`drop_item(item)` takes the item out of the inventory and off the grid. It
then:

- resets the item's location to `Point(-1, -1)`;
- re-enables the item;
- places it 100 units in front of the owner's `transform`, with the owner's
  rotation;
- returns the new `Transform`.

It raises `ValueError` if the inventory has no owner.

`subscribe(callback)` registers a function that is called with no
arguments after every change. A change is an add, a move, a remove or a
drop. `subscribe` returns a function that unsubscribes the callback.

```python
from storyforge.inventory import Inventory
from storyforge.item import Item, Point

inventory = Inventory()
rifle = Item(name="Rifle", inventory_size=Point(3, 1))

if inventory.can_add_item(rifle):
    inventory.add_item(rifle)
    inventory.move_item(rifle, inventory.find_fit(rifle))

assert inventory.item_at(Point(2, 0)) is rifle
assert rifle.inventory_location == Point(0, 0)
```

## Picking up items

`Item.interact(caller)` tries to put the item into the caller's
`inventory`. If there is room, it:

1. adds the item to the inventory;
2. places it at the first free location;
3. disables it in the world;
4. returns `True`.

It returns `False` in two cases:

- the caller has no inventory;
- the inventory has no room.

```python
from storyforge.character import Character
from storyforge.item import Item

character = Character()
medkit = Item(name="Medkit")
assert medkit.interact(character)
assert character.inventory.items == [medkit]
assert not medkit.enabled
```

## Characters

`Character` has these fields:

- `walk_speed` (300) and `run_speed` (500);
- a `death_animation`;
- a `current_item`;
- a `conversation`;
- four bark sounds;
- a `transform`;
- an `inventory`, which it owns.

`max_walk_speed` starts at `walk_speed`.

| Method | What it does |
| --- | --- |
| `can_talk()` | True when `conversation` is a `DialogueAsset` whose trigger is exactly an `InteractTrigger`. |
| `interact(caller)` | Returns `True` when the caller is a `Player` and the character can talk. |
| `die()` | Sets `playing_animation` to `death_animation` and turns off `collision_enabled`. |
| `subscribe_on_die(callback)` | Registers a callback for `die()`; returns an unsubscriber. |
| `set_current_item(item)` | Logs the item's name. |

`die()` also calls every callback registered with `subscribe_on_die`.

`Player` is a `Character` that collects `ClientMessage`s in
`client_messages` through `add_client_message`.

A `ClientMessage` has a `message`, a `lifetime` in seconds and an `urgency`.
The urgency is one of `ClientMessageUrgency.NORMAL`, `POSITIVE` or
`NEGATIVE`.

## Dialogue

A `DialogueAsset` describes a whole conversation. Its fields are:

- `trigger`: a `DistanceTrigger` with a `trigger_distance` (200 by
  default), or an `InteractTrigger`;
- `target`;
- `initial_camera_angle`: a `CameraAngleEvent`;
- `dialogue_nodes`: a list of nodes;
- `pre_dialogue_events` and `post_dialogue_events`.

Every node has `pre_events` and `post_events` lists. The node kinds are:

| Node | Fields |
| --- | --- |
| `SpeechNode` | `speaker_name`, `speech_text`, `voice_line`, `next_node_id` |
| `ChoiceNode` | `choice_index_map`, the node index each choice leads to |
| `TransferItemNode` | source and destination characters or the player, an item type, and the node indices for "has item" and "no item" |
| `EndNode` | none; creating one with events raises `ValueError` |

Node events are:

- `CameraAngleEvent`: a `CameraAngle` and a target, or the player;
- `ClientMessageEvent`: a `ClientMessage`.

## Level music

`WorldSettings.music_for(track)` returns the sound stored in the settings'
`LevelMusicTracks` for a given `MusicTrack`:

| Track | Sound returned |
| --- | --- |
| `AMBIENT` | ambient |
| `DEATH` | death |
| `COMBAT` | the conversation sound, not the combat one |
| `CONVERSATION` | conversation |
| `OUTRO` | outro |

It raises `ValueError` when no level music is assigned.

## Skills

`Skill` holds a `skill_level`. It is a `SkillLevel`: `UNTRAINED`,
`TRAINED`, `ADVANCED` or `MASTER`, in that order.

## What this package does not do

This package holds data and rules only. It has no game loop, no rendering,
no audio playback and no physics. Enabling an item, playing an animation or
turning off collision only sets fields.

Nothing plays a dialogue asset. The nodes, events and triggers are plain
data, and the package has no runner that steps through a conversation.

Messages such as "Added item to inventory" go to the standard `logging`
module and are not shown on screen.

The package has no command-line interface and no save or load support.