"""Modules containing model classes for different parts of slidez.

- [`deck`][slidez.models.deck] contains the in-memory deck and its slides
- [`document`][slidez.models.document] contains the models of the JSON document \
    used to persist, export and import decks
- [`events`][slidez.models.events] contains the notifications sent by the deck \
    store to its listeners
"""

from .deck import Deck, Slide
from .document import DeckDocument, SlideDocument
from .events import DeckEvent

__all__ = ["Deck", "DeckDocument", "DeckEvent", "Slide", "SlideDocument"]
