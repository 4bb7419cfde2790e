import pytest

from storyforge.dialogue import (
    CameraAngle,
    CameraAngleEvent,
    ChoiceNode,
    ClientMessageEvent,
    DialogueAsset,
    DialogueEvent,
    DistanceTrigger,
    EndNode,
    InteractTrigger,
    SpeechNode,
    TransferItemNode,
)
from storyforge.item import Item
from storyforge.messages import ClientMessage, ClientMessageUrgency


def test_distance_trigger_default_distance():
    assert DistanceTrigger().trigger_distance == 200.0


def test_distance_trigger_keeps_given_distance():
    assert DistanceTrigger(trigger_distance=50.0).trigger_distance == 50.0


@pytest.mark.parametrize(
    "angle, name",
    [
        (CameraAngle.SIDE_TIGHT, "SideTight"),
        (CameraAngle.SIDE_MID, "SideMid"),
        (CameraAngle.ABOVE_DOWN, "AboveDown"),
        (CameraAngle.BELOW_UP, "BelowUp"),
        (CameraAngle.HEAD_TIGHT, "HeadTight"),
        (CameraAngle.HEAD_MID, "HeadMid"),
    ],
)
def test_camera_angle_display_names(angle, name):
    assert angle.value == name
    assert CameraAngle(name) is angle


def test_camera_angle_event_defaults():
    event = CameraAngleEvent()
    assert event.camera_angle is CameraAngle.SIDE_TIGHT
    assert event.target is None
    assert event.target_is_player is False


def test_client_message_event_carries_message():
    message = ClientMessage("Door unlocked", 3.0, ClientMessageUrgency.POSITIVE)
    event = ClientMessageEvent(client_message=message)
    assert event.client_message.message == "Door unlocked"
    assert event.client_message.urgency is ClientMessageUrgency.POSITIVE


def test_client_message_event_default_is_normal():
    assert ClientMessageEvent().client_message.urgency is ClientMessageUrgency.NORMAL


def test_end_node_rejects_events():
    with pytest.raises(ValueError):
        EndNode(pre_events=[ClientMessageEvent()])
    with pytest.raises(ValueError):
        EndNode(post_events=[CameraAngleEvent()])


def test_end_node_without_events():
    node = EndNode()
    assert node.pre_events == [] and node.post_events == []


def test_node_event_lists_are_independent():
    first, second = SpeechNode(), SpeechNode()
    first.pre_events.append(ClientMessageEvent())
    assert second.pre_events == []
    assert len(first.pre_events) == 1


def test_asset_lists_are_independent():
    first, second = DialogueAsset(), DialogueAsset()
    first.dialogue_nodes.append(EndNode())
    first.pre_dialogue_events.append(DialogueEvent())
    assert second.dialogue_nodes == []
    assert second.pre_dialogue_events == []


def test_asset_nodes_follow_indices():
    greeting = SpeechNode(speaker_name="Guard", speech_text="Halt!", next_node_id=1)
    choice = ChoiceNode(choice_index_map=[2, 2])
    end = EndNode()
    asset = DialogueAsset(trigger=InteractTrigger(), dialogue_nodes=[greeting, choice, end])

    following = asset.dialogue_nodes[greeting.next_node_id]
    assert following is choice
    assert all(asset.dialogue_nodes[i] is end for i in following.choice_index_map)


def test_transfer_item_node_holds_item_type():
    node = TransferItemNode(transfer_to_player=True, item=Item, has_item_index=1, no_item_index=2)
    assert node.item is Item
    assert (node.has_item_index, node.no_item_index) == (1, 2)
    assert node.transfer_from_player is False