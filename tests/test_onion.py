from cometa.layer import Layer
from cometa.onion import Onion


class Tracked(Layer):
    def __init__(self, name, log):
        super().__init__(name)
        self.log = log

    def init(self):
        self.log.append(("init", self.name))

    def update(self):
        self.log.append(("update", self.name))

    def close(self):
        self.log.append(("close", self.name))

    def handle_event(self, event):
        pass


def _onion(names, log):
    onion = Onion()
    layers = [Tracked(n, log) for n in names]
    for layer in layers:
        onion.push_layer(layer)
    return onion, layers


def test_init_and_close_in_push_order():
    log = []
    onion, _ = _onion(["ui", "game"], log)
    onion.init()
    onion.close()
    assert log == [("init", "ui"), ("init", "game"), ("close", "ui"), ("close", "game")]


def test_update_in_reverse_order():
    log = []
    onion, _ = _onion(["ui", "game", "debug"], log)
    onion.update()
    assert [name for _, name in log] == ["debug", "game", "ui"]


def test_iteration_and_length():
    onion, layers = _onion(["a", "b"], [])
    assert list(onion) == layers
    assert len(onion) == 2


def test_pop_layer_removes_all_occurrences():
    log = []
    onion = Onion()
    a, b = Tracked("a", log), Tracked("b", log)
    onion.push_layer(a)
    onion.push_layer(b)
    onion.push_layer(a)
    onion.pop_layer(a)
    assert list(onion) == [b]


def test_pop_missing_layer_is_harmless():
    onion, layers = _onion(["a"], [])
    onion.pop_layer(Tracked("other", []))
    assert list(onion) == layers


def test_empty_onion():
    onion = Onion()
    onion.init()
    onion.update()
    onion.close()
    assert len(onion) == 0