import pytest

from gmpvkit.defs import APP_ID
from gmpvkit.media_keys.keys import MediaKeys, translate_key
from gmpvkit.mpris.module import Observable


class FakeModel:
    def __init__(self):
        self.pressed = []

    def key_press(self, key):
        self.pressed.append(key)


class FakeController:
    def __init__(self):
        self.view = Observable()
        self.model = FakeModel()


class FakeProxy(Observable):
    def __init__(self):
        super().__init__()
        self.calls = []

    def call(self, method, args):
        self.calls.append((method, args))


@pytest.fixture
def controller():
    return FakeController()


@pytest.fixture
def keys(controller):
    return MediaKeys(controller)


@pytest.mark.parametrize(
    "gsd, mpv",
    [
        ("Next", "NEXT"),
        ("Previous", "PREV"),
        ("Pause", "PAUSE"),
        ("Stop", "STOP"),
        ("Play", "PLAY"),
        ("FastForward", "FORWARD"),
        ("Rewind", "REWIND"),
    ],
)
def test_translate_key(gsd, mpv):
    assert translate_key(gsd) == mpv


def test_translate_unknown_key():
    assert translate_key("Eject") is None
    assert translate_key(None) is None


def test_proxy_ready_grabs_keys(keys):
    proxy = FakeProxy()
    keys.proxy_ready(proxy)
    assert proxy.calls == [("GrabMediaPlayerKeys", (APP_ID, 0))]
    assert keys.proxy is proxy


def test_proxy_ready_without_proxy_fails(keys):
    with pytest.raises(RuntimeError):
        keys.proxy_ready(None)


def test_key_signal_presses_key(keys, controller):
    proxy = FakeProxy()
    keys.proxy_ready(proxy)
    results = proxy.emit("g-signal", None, "MediaPlayerKeyPressed", (APP_ID, "Next"))
    assert len(results) == 1
    assert controller.model.pressed == ["NEXT"]


def test_key_for_other_application_ignored(keys, controller):
    result = keys.handle_signal(None, "MediaPlayerKeyPressed", ("other.app", "Play"))
    assert result is None
    assert controller.model.pressed == []


def test_other_signal_ignored(keys, controller):
    assert keys.handle_signal(None, "SomethingElse", (APP_ID, "Play")) is None
    assert controller.model.pressed == []


def test_unknown_key_not_pressed(keys, controller):
    assert keys.handle_signal(None, "MediaPlayerKeyPressed", (APP_ID, "Eject")) is None
    assert controller.model.pressed == []


def test_focus_regrabs_keys(keys, controller):
    proxy = FakeProxy()
    keys.proxy_ready(proxy)
    results = controller.view.emit("window-state-event", True, True)
    assert results == [False]
    assert len(proxy.calls) == 2


def test_unfocus_does_not_grab(keys, controller):
    proxy = FakeProxy()
    keys.proxy_ready(proxy)
    controller.view.emit("window-state-event", True, False)
    controller.view.emit("window-state-event", False, True)
    assert len(proxy.calls) == 1


def test_focus_without_proxy_does_nothing(keys):
    assert keys.window_state_changed(True, True) is False
    assert keys.proxy is None


def test_dispose_disconnects(keys, controller):
    proxy = FakeProxy()
    keys.proxy_ready(proxy)
    keys.dispose()
    assert keys.proxy is None
    assert keys.focus_sig_id == 0
    assert controller.view.emit("window-state-event", True, True) == []
    assert proxy.emit("g-signal", None, "MediaPlayerKeyPressed", (APP_ID, "Next")) == []
    assert controller.model.pressed == []
    assert len(proxy.calls) == 1