import json

from pytest import raises

from slidez.exceptions import DocumentParseError, DocumentSerializeError
from slidez.models import Deck, DeckDocument, Slide
from slidez.serializing import deserialize, serialize


def test_serialize_shape() -> None:
    deck = Deck([Slide("a", "First\nslide"), Slide("b", "")], current=1)
    raw = serialize(deck)
    assert json.loads(raw) == {
        "slides": [{"id": "a", "text": "First\nslide"}, {"id": "b", "text": ""}],
        "current": 1,
    }
    assert serialize(deck) == raw


def test_serialize_keeps_unicode() -> None:
    raw = serialize(Deck([Slide("a", "Título de la presentación")]))
    assert json.loads(raw.decode("utf8"))["slides"][0]["text"] == (
        "Título de la presentación"
    )


def test_round_trip() -> None:
    deck = Deck([Slide("a", "A"), Slide("b", "B"), Slide("c", "C")], current=2)
    assert DeckDocument.model_validate(deserialize(serialize(deck))).to_deck() == deck


def test_deserialize_is_syntactic_only() -> None:
    assert deserialize(b"[1, 2]") == [1, 2]
    assert deserialize('{"current": 3}') == {"current": 3}


def test_deserialize_invalid_json() -> None:
    with raises(DocumentParseError):
        deserialize(b"{")
    with raises(DocumentParseError):
        deserialize(b"\x80\x81")


def test_deserialize_too_deep() -> None:
    with raises(DocumentParseError):
        deserialize(b"[" * 200000 + b"]" * 200000)


def test_serialize_unencodable_text() -> None:
    with raises(DocumentSerializeError):
        serialize(Deck([Slide("a", "\ud800")]))
