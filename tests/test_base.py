from gmpvkit.defs import APP_ID, SUPPORTED_MIME_TYPES, SUPPORTED_PROTOCOLS
from gmpvkit.mpris.base import MprisBase, supported_mime_types, supported_uri_schemes
from gmpvkit.mpris.module import MessageBus, Observable


class FakeModel:
    def __init__(self):
        self.fullscreen = False


class FakeView(Observable):
    def __init__(self, model):
        super().__init__()
        self.model = model
        self.presented = 0
        self.requests = []

    def present(self):
        self.presented += 1

    def set_fullscreen(self, value):
        self.requests.append(value)
        self.model.fullscreen = value
        self.emit("notify::fullscreen")


class FakeController:
    def __init__(self):
        self.model = FakeModel()
        self.view = FakeView(self.model)
        self.quit_calls = 0

    def quit(self):
        self.quit_calls += 1


def make_base():
    controller = FakeController()
    bus = MessageBus()
    base = MprisBase(controller, bus)
    base.register()
    return controller, bus, base


def test_supported_lists_match_definitions():
    assert supported_uri_schemes() == list(SUPPORTED_PROTOCOLS)
    assert supported_mime_types() == list(SUPPORTED_MIME_TYPES)
    assert supported_uri_schemes()[0] == "cdda"


def test_register_sets_initial_properties():
    _, bus, base = make_base()
    assert base.get_properties("CanQuit", "CanRaise", "HasTrackList") == (True, True, True)
    assert base.get_property("Fullscreen") is False
    assert base.get_property("DesktopEntry") == APP_ID
    assert base.get_property("SupportedMimeTypes") == list(SUPPORTED_MIME_TYPES)
    assert base.interface_name == "org.mpris.MediaPlayer2"


def test_register_exports_object():
    _, bus, base = make_base()
    assert bus.registrations[base.reg_id] == ("/org/mpris/MediaPlayer2", "org.mpris.MediaPlayer2", base)


def test_unregister_removes_export():
    _, bus, base = make_base()
    reg = base.reg_id
    base.unregister()
    assert reg not in bus.registrations


def test_raise_presents_view():
    controller, _, base = make_base()
    assert base.handle_method("Raise") == ()
    assert controller.view.presented == 1


def test_quit_calls_controller():
    controller, _, base = make_base()
    base.handle_method("Quit")
    assert controller.quit_calls == 1
    assert controller.view.presented == 0


def test_set_fullscreen_goes_to_view_and_updates_property():
    controller, bus, base = make_base()
    assert base.set_property_value("Fullscreen", True) is True
    assert controller.view.requests == [True]
    assert base.get_property_value("Fullscreen") is True
    assert bus.signals[-1].args[1] == {"Fullscreen": True}


def test_set_other_property_is_stored():
    _, _, base = make_base()
    assert base.set_property_value("Identity", "Player") is True
    assert base.get_property_value("Identity") == "Player"


def test_update_fullscreen_only_announces_changes():
    controller, bus, base = make_base()
    before = len(bus.signals)
    base.update_fullscreen()
    assert len(bus.signals) == before
    controller.model.fullscreen = True
    controller.view.emit("notify::fullscreen")
    assert len(bus.signals) == before + 1
    assert base.get_property("Fullscreen") is True


def test_dispose_stops_following_view():
    controller, bus, base = make_base()
    base.dispose()
    before = len(bus.signals)
    controller.model.fullscreen = True
    controller.view.emit("notify::fullscreen")
    assert len(bus.signals) == before