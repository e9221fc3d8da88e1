import pytest

from cometa.events import KeyPressEvent
from cometa.layer import Layer


class Recorder(Layer):
    def __init__(self, name=""):
        super().__init__(name)
        self.log = []

    def init(self):
        self.log.append("init")

    def update(self):
        self.log.append("update")

    def close(self):
        self.log.append("close")

    def handle_event(self, event):
        self.log.append(str(event))
        event.set_handled()


def test_layer_is_abstract():
    with pytest.raises(TypeError):
        Layer("x")


def test_subclass_life_cycle_and_events():
    layer = Recorder("game")
    unnamed = Recorder()
    event = KeyPressEvent(5)
    layer.init()
    layer.update()
    layer.handle_event(event)
    layer.close()
    assert layer.name == "game"
    assert unnamed.name == ""
    assert layer.log == ["init", "update", "KeyPressEvent5", "close"]
    assert event.handled