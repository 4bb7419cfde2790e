"""Conversation assets: triggers, nodes and the events attached to them."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

from storyforge.messages import ClientMessage


@dataclass
class DialogueEvent:
    """Something that happens before or after a conversation."""


@dataclass
class DialogueNodeEvent:
    """A one-off action attached to a single dialogue node."""


class CameraAngle(Enum):
    """Camera framings for a conversation shot; values are display names."""

    SIDE_TIGHT = "SideTight"
    SIDE_MID = "SideMid"
    ABOVE_DOWN = "AboveDown"
    BELOW_UP = "BelowUp"
    HEAD_TIGHT = "HeadTight"
    HEAD_MID = "HeadMid"


@dataclass
class CameraAngleEvent(DialogueNodeEvent):
    """Switch the camera to ``camera_angle`` on the target or the player."""

    camera_angle: CameraAngle = CameraAngle.SIDE_TIGHT
    target: Any = None
    target_is_player: bool = False


@dataclass
class ClientMessageEvent(DialogueNodeEvent):
    """Show a client message to the player."""

    client_message: ClientMessage = field(default_factory=ClientMessage)


@dataclass
class DialogueNode:
    """A step of a conversation, with events run before and after it."""

    pre_events: list[DialogueNodeEvent] = field(default_factory=list)
    post_events: list[DialogueNodeEvent] = field(default_factory=list)


@dataclass
class SpeechNode(DialogueNode):
    """A line spoken by one speaker, followed by the node at ``next_node_id``."""

    speaker_name: str = ""
    speech_text: str = ""
    voice_line: Any = None
    next_node_id: int = 0


@dataclass
class ChoiceNode(DialogueNode):
    """A set of choices, each mapped to the index of the node it leads to."""

    choice_index_map: list[int] = field(default_factory=list)


@dataclass
class EndNode(DialogueNode):
    """Ends the conversation; it carries no events."""

    def __post_init__(self) -> None:
        if self.pre_events or self.post_events:
            raise ValueError("an end node cannot carry events")


@dataclass
class TransferItemNode(DialogueNode):
    """Hand an item of a given type from one character to another."""

    transfer_to: Any = None
    transfer_from: Any = None
    transfer_to_player: bool = False
    transfer_from_player: bool = False
    item: Optional[type] = None
    has_item_index: int = 0
    no_item_index: int = 0


@dataclass
class DialogueTrigger:
    """What starts a conversation."""


@dataclass
class DistanceTrigger(DialogueTrigger):
    """Starts a conversation when the player comes within ``trigger_distance``."""

    trigger_distance: float = 200.0


@dataclass
class InteractTrigger(DialogueTrigger):
    """Starts a conversation when the player interacts with the speaker."""


@dataclass
class DialogueAsset:
    """A whole conversation: its trigger, target, nodes and surrounding events."""

    trigger: Optional[DialogueTrigger] = None
    target: Any = None
    initial_camera_angle: Optional[CameraAngleEvent] = None
    dialogue_nodes: list[DialogueNode] = field(default_factory=list)
    pre_dialogue_events: list[DialogueEvent] = field(default_factory=list)
    post_dialogue_events: list[DialogueEvent] = field(default_factory=list)