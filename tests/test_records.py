"""
Tests for record immutability.
"""

from dataclasses import FrozenInstanceError

import pytest


def test_message_records_are_hashable_and_frozen(sample_messages):
    message = sample_messages[0]
    assert isinstance(message.mentions, tuple)
    assert hash(message) == hash(sample_messages[0])
    assert len(set(sample_messages)) == len(sample_messages)
    with pytest.raises(FrozenInstanceError):
        message.body = "changed"
    with pytest.raises(AttributeError):
        message.mentions.append("@here")


def test_update_records_are_hashable_and_frozen(sample_updates):
    update = sample_updates[0]
    assert isinstance(update.tags, tuple)
    assert isinstance(update.links, tuple)
    assert len(set(sample_updates)) == len(sample_updates)
    with pytest.raises(FrozenInstanceError):
        update.priority = "Low"


def test_serialized_form_uses_lists(sample_messages, sample_updates):
    assert isinstance(sample_messages[0].to_dict()["mentions"], list)
    assert isinstance(sample_updates[0].to_dict()["tags"], list)
