"""Convert decks to and from their JSON document."""

from json import loads
from typing import Any

from pydantic_core import PydanticSerializationError

from .exceptions import DocumentParseError, DocumentSerializeError
from .models import Deck, DeckDocument


def serialize(deck: Deck) -> bytes:
    """Serialize a deck into a UTF-8 JSON document.

    Args:
        deck: Deck to serialize.

    Raises:
        DocumentSerializeError: Raised if the deck holds text that cannot be \
            encoded, such as lone surrogates.

    Returns:
        The document, with `slides` then `current`, indented with two spaces.
    """
    try:
        return DeckDocument.from_deck(deck).model_dump_json(indent=2).encode("utf8")
    except (PydanticSerializationError, UnicodeEncodeError) as e:
        msg = f"could not serialize the deck: {e}"
        raise DocumentSerializeError(msg) from e


def deserialize(raw: bytes | str) -> Any:
    """Parse a JSON document without checking its shape.

    Args:
        raw: Content of the document.

    Raises:
        DocumentParseError: Raised if `raw` is not valid UTF-8, not valid JSON or \
            nested too deeply to be parsed.

    Returns:
        The parsed value, whatever its type.
    """
    try:
        return loads(raw)
    except (ValueError, RecursionError) as e:
        msg = f"could not parse the deck document: {e}"
        raise DocumentParseError(msg) from e
