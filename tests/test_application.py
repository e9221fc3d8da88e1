import itertools

import pytest

from cometa.application import Application, main
from cometa.event_bus import EventBus
from cometa.input import KEY_ESCAPE, PRESS, CursorMode, Input
from cometa.physics import PhysicsManager
from cometa.ship_game import ShipGameLayer
from cometa.timing import Time


@pytest.fixture(autouse=True)
def _fresh_singletons():
    for cls in (EventBus, Time, PhysicsManager, Application):
        cls.reset_instance()
    yield
    for cls in (EventBus, Time, PhysicsManager, Application):
        cls.reset_instance()


class Recorder:
    def __init__(self, name, log, on_update=None):
        self.name = name
        self.log = log
        self.on_update = on_update

    def init(self):
        self.log.append((self.name, "init"))

    def update(self):
        self.log.append((self.name, "update"))
        if self.on_update:
            self.on_update()

    def close(self):
        self.log.append((self.name, "close"))


def stop_after(frames):
    counter = itertools.count(1)
    return lambda: next(counter) >= frames


def ship_layer(app):
    return next(layer for layer in app.onion if isinstance(layer, ShipGameLayer))


def test_init_runs_managers_in_order_and_pushes_game():
    log = []
    app = Application(managers=[Recorder("a", log), Recorder("b", log)])
    app.init()
    assert log == [("a", "init"), ("b", "init")]
    assert len(app.onion) == 1
    assert ship_layer(app).game_running


def test_running_stops_when_should_close():
    log = []
    app = Application(managers=[Recorder("a", log)], should_close=stop_after(3))
    app.init()
    app.running()
    assert log.count(("a", "update")) == 3
    assert ship_layer(app).score == 3
    assert app.is_running is False


def test_must_close_ends_loop_without_consulting_window():
    log = []
    calls = []
    app = Application(should_close=lambda: calls.append(1) or False, managers=[])
    app.managers.append(Recorder("a", log, on_update=app.must_close))
    app.init()
    app.running()
    assert log.count(("a", "update")) == 1
    assert calls == []


def test_close_runs_managers_in_reverse(capsys):
    log = []
    app = Application(managers=[Recorder("a", log), Recorder("b", log)])
    app.close()
    assert log == [("b", "close"), ("a", "close")]
    assert "[INFO]: Application closed correctly" in capsys.readouterr().out


def test_physics_and_time_drive_the_game():
    ticks = itertools.count()
    clock = lambda: float(next(ticks))  # noqa: E731
    physics = PhysicsManager()
    app = Application(managers=[Time(clock=clock), physics], should_close=stop_after(4))
    app.init()
    game = ship_layer(app)
    assert physics.bodies is game.bodies
    app.running()
    assert game.score == 4
    assert len(game.obstacles) == 2
    first = game.obstacles[0].body
    assert first.transform.position[1] < 10.0


class FakeWindow:
    def poll_events(self):
        pass

    def get_cursor_pos(self):
        return (0.0, 0.0)

    def get_key(self, key):
        return 0

    def get_mouse_button(self, button):
        return 0

    def set_cursor_mode(self, mode):
        pass


def test_escape_on_input_closes_application():
    inp = Input(backend=FakeWindow())
    app = Application(managers=[inp])
    app.init()
    inp.cursor_mode = CursorMode.ENABLED
    inp.handle_key(KEY_ESCAPE, PRESS)
    assert app.is_running is False
    assert inp.cursor_mode == CursorMode.NONE


def test_default_application_uses_shared_managers():
    app = Application()
    assert app.managers == [Time.get_instance(), PhysicsManager.get_instance()]


def test_main_runs_given_frames(capsys):
    assert main(["--frames", "2"]) == 0
    assert "Application closed correctly" in capsys.readouterr().out


def test_main_rejects_zero_frames():
    with pytest.raises(SystemExit):
        main(["--frames", "0"])