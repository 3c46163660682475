"""Cancellation messages."""

from muxtap.messages import CANCEL_MESSAGES, cancel_message


def test_injected_chooser():
    assert cancel_message(lambda messages: messages[0]) == CANCEL_MESSAGES[0]


def test_default_pick_is_from_list():
    assert cancel_message() in CANCEL_MESSAGES
