import pytest

from gmpvkit.mpris.module import EmittedSignal, MessageBus, MprisModule, Observable


class RecordingModule(MprisModule):
    def __init__(self, conn):
        super().__init__(conn, "org.example.Test")
        self.calls = []

    def register_interface(self):
        self.calls.append("register")

    def unregister_interface(self):
        self.calls.append("unregister")


def test_observable_calls_handlers_in_order():
    source = Observable()
    seen = []
    source.connect("changed", lambda x: seen.append(("a", x)))
    source.connect("other", lambda x: seen.append(("b", x)))
    source.connect("changed", lambda x: seen.append(("c", x)))
    source.emit("changed", 5)
    assert seen == [("a", 5), ("c", 5)]


def test_observable_emit_returns_results():
    source = Observable()
    source.connect("sig", lambda a, b: a + b)
    assert source.emit("sig", 2, 3) == [5]


def test_observable_disconnect_stops_handler():
    source = Observable()
    seen = []
    handler_id = source.connect("sig", seen.append)
    source.disconnect(handler_id)
    source.emit("sig", 1)
    assert seen == []


def test_observable_disconnect_unknown_raises():
    with pytest.raises(KeyError):
        Observable().disconnect(42)


def test_handler_ids_are_distinct():
    source = Observable()
    ids = {source.connect("sig", print) for _ in range(5)}
    assert len(ids) == 5


def test_bus_records_signals():
    bus = MessageBus()
    sig = bus.emit_signal("/a", "org.example.I", "Changed", (1, 2))
    assert bus.signals == [EmittedSignal("/a", "org.example.I", "Changed", (1, 2))]
    assert sig == bus.signals[0]


def test_bus_register_and_unregister():
    bus = MessageBus()
    handler = object()
    reg = bus.register_object("/a", "org.example.I", handler)
    assert bus.registrations[reg] == ("/a", "org.example.I", handler)
    assert bus.unregister_object(reg) is True
    assert reg not in bus.registrations
    assert bus.unregister_object(reg) is False


def test_set_properties_stores_and_announces_new_values():
    bus = MessageBus()
    module = RecordingModule(bus)
    module.set_properties({"Rate": 1.5, "CanPlay": True})
    assert module.get_property("Rate") == 1.5
    assert module.get_properties("CanPlay", "Rate") == (True, 1.5)
    signal = bus.signals[-1]
    assert signal.object_path == "/org/mpris/MediaPlayer2"
    assert signal.interface == "org.freedesktop.DBus.Properties"
    assert signal.name == "PropertiesChanged"
    assert signal.args == ("org.example.Test", {"Rate": 1.5, "CanPlay": True}, [])


def test_set_properties_without_values_invalidates_names():
    bus = MessageBus()
    module = RecordingModule(bus)
    module.set_properties({"Tracks": ["/x"]}, send_new_value=False)
    assert module.get_property("Tracks") == ["/x"]
    assert bus.signals[-1].args == ("org.example.Test", {}, ["Tracks"])


def test_set_properties_skips_none_values():
    bus = MessageBus()
    module = RecordingModule(bus)
    module.set_properties({"Missing": None, "Volume": 0.5})
    assert module.get_property("Missing") is None
    assert bus.signals[-1].args[1] == {"Volume": 0.5}


def test_unknown_property_is_none():
    module = RecordingModule(MessageBus())
    assert module.get_properties("Nope") == (None,)


def test_register_and_unregister_dispatch_to_subclass():
    module = RecordingModule(MessageBus())
    module.register()
    module.unregister()
    assert module.calls == ["register", "unregister"]


def test_dispose_disconnects_signals_and_clears_properties():
    source = Observable()
    module = RecordingModule(MessageBus())
    seen = []
    module.connect_signal(source, "sig", seen.append)
    module.set_properties({"Rate": 2.0})
    source.emit("sig", 1)
    module.dispose()
    source.emit("sig", 2)
    assert seen == [1]
    assert module.get_property("Rate") is None


def test_module_is_abstract():
    with pytest.raises(TypeError):
        MprisModule(MessageBus(), "org.example.Test")