import pytest

from dronemw.transport import Factory, Transport
from dronemw.url import Url


class _Recorder(Transport):
    def __init__(self, tag="a"):
        self.tag = tag
        self.sent = []
        self.closed = False

    def connect(self, host, port):
        self.target = (host, port)
        return True

    def send(self, data):
        self.sent.append(bytes(data))
        return True

    def close(self):
        self.closed = True


def test_transport_is_abstract():
    with pytest.raises(TypeError):
        Transport()


def test_instance_is_singleton():
    Factory.instance().register_backend(
        "singleton-check", lambda: _Recorder("shared")
    )
    tx = Factory.instance().make(Url("singleton-check", "h", 1))
    assert tx.tag == "shared"


def test_make_uses_registered_creator():
    factory = Factory()
    factory.register_backend("fake", _Recorder)
    tx = factory.make(Url("fake", "h", 1))
    assert isinstance(tx, _Recorder)
    assert tx.connect("h", 1) and tx.target == ("h", 1)


def test_unknown_scheme_gives_none():
    factory = Factory()
    factory.register_backend("fake", _Recorder)
    assert factory.make(Url("quic", "h", 1)) is None


def test_first_registration_wins():
    factory = Factory()
    factory.register_backend("fake", lambda: _Recorder("first"))
    factory.register_backend("fake", lambda: _Recorder("second"))
    assert factory.make(Url("fake", "h", 1)).tag == "first"


def test_each_make_creates_new_transport():
    factory = Factory()
    factory.register_backend("fake", _Recorder)
    url = Url("fake", "h", 1)
    first = factory.make(url)
    second = factory.make(url)
    first.send(b"x")
    assert first.sent == [b"x"]
    assert second.sent == []


def test_context_manager_closes():
    factory = Factory()
    factory.register_backend("fake", _Recorder)
    with factory.make(Url("fake", "h", 1)) as tx:
        tx.send(b"x")
    assert tx.closed is True
    assert tx.sent == [b"x"]