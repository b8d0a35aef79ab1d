import pytest

from pixelpad.dispatch import KeyDispatcher
from pixelpad.keys import Action, Key, KeyData


class Recorder:
    def __init__(self):
        self.calls = []

    def __call__(self, keydata, context):
        self.calls.append((keydata, context))


def test_handle_calls_registered_handler_with_event_and_context():
    dispatcher = KeyDispatcher()
    recorder = Recorder()
    dispatcher.add(Key.W, recorder)
    event = KeyData(Key.W, Action.PRESS)
    context = object()
    assert dispatcher.handle(event, context) is True
    assert recorder.calls == [(event, context)]


def test_handle_without_handler_does_nothing():
    dispatcher = KeyDispatcher()
    recorder = Recorder()
    dispatcher.add(Key.W, recorder)
    assert dispatcher.handle(KeyData(Key.S, Action.PRESS), None) is False
    assert recorder.calls == []


def test_add_replaces_previous_handler():
    dispatcher = KeyDispatcher()
    first, second = Recorder(), Recorder()
    dispatcher.add(Key.A, first)
    dispatcher.add(Key.A, second)
    dispatcher.handle(KeyData(Key.A, Action.RELEASE), None)
    assert first.calls == []
    assert len(second.calls) == 1
    assert len(dispatcher) == 1


def test_remove_unregisters_handler():
    dispatcher = KeyDispatcher()
    recorder = Recorder()
    dispatcher.add(Key.D, recorder)
    dispatcher.remove(Key.D)
    assert Key.D not in dispatcher
    assert dispatcher.handle(KeyData(Key.D, Action.PRESS), None) is False
    assert recorder.calls == []


def test_remove_missing_key_is_harmless():
    dispatcher = KeyDispatcher()
    dispatcher.remove(Key.ESCAPE)
    assert len(dispatcher) == 0


def test_integer_keys_are_accepted():
    dispatcher = KeyDispatcher()
    recorder = Recorder()
    dispatcher.add(int(Key.ESCAPE), recorder)
    assert Key.ESCAPE in dispatcher
    assert dispatcher.handle(KeyData(Key.ESCAPE, Action.PRESS), None) is True


def test_unknown_key_code_raises():
    dispatcher = KeyDispatcher()
    with pytest.raises(ValueError):
        dispatcher.add(1, Recorder())
    with pytest.raises(ValueError):
        dispatcher.remove(1)
    assert 1 not in dispatcher