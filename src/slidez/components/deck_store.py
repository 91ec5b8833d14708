"""Own the live deck and keep it valid and persisted.

[`DeckStore`][slidez.components.deck_store.DeckStore] is the only entry point \
allowed to change a deck. After every operation:

- the deck has at least one slide (an emptied deck gets a fresh default slide)
- the current index points to one of the slides
- slide ids are non-empty and unique

Every operation that changes the deck works on a copy. The copy is serialized and \
written to the key-value store before it replaces the live deck and the listeners \
are notified, so a failing write leaves the live deck untouched.
"""

from collections.abc import Callable
from logging import getLogger
from typing import Any

from pydantic import ValidationError

from ..exceptions import DeckImportError, DocumentParseError, DocumentSerializeError
from ..identifiers import new_id
from ..models import Deck, DeckDocument, DeckEvent, Slide
from ..serializing import deserialize, serialize
from ..validation import check_document_shape, clamp_index
from .protocols import DeckStoreProtocol, KeyValueStoreProtocol

DEFAULT_STORAGE_KEY = "presenter.slides.v1"
DEFAULT_SLIDE_TEXT = "Presentation title\n\nDouble-click here to edit."
NEW_SLIDE_TEXT = "New slide"

Listener = Callable[[DeckEvent, "DeckStore"], None]

_logger = getLogger(__name__)


class DeckStore(DeckStoreProtocol):
    def __init__(
        self,
        store: KeyValueStoreProtocol,
        key: str = DEFAULT_STORAGE_KEY,
        default_slide_text: str = DEFAULT_SLIDE_TEXT,
        new_slide_text: str = NEW_SLIDE_TEXT,
    ) -> None:
        self._store = store
        self._key = key
        self._default_slide_text = default_slide_text
        self._new_slide_text = new_slide_text
        self._listeners: list[Listener] = []
        self._deck: Deck
        self.initialize()

    @property
    def slides(self) -> tuple[Slide, ...]:
        return tuple(self._deck.slides)

    @property
    def current(self) -> int:
        return self._deck.current

    @property
    def current_slide(self) -> Slide:
        return self._deck.current_slide

    @property
    def deck(self) -> Deck:
        """Copy of the live deck. Changing it has no effect on the store."""
        return self._deck.copy()

    @property
    def has_previous(self) -> bool:
        return self._deck.current > 0

    @property
    def has_next(self) -> bool:
        return self._deck.current < len(self._deck.slides) - 1

    def __len__(self) -> int:
        return len(self._deck.slides)

    def initialize(self) -> Deck:
        """Load the deck from the key-value store.

        Nothing is written back: the loaded deck is persisted at the first mutation.

        Returns:
            The loaded deck, or a default deck if nothing usable is stored.
        """
        raw = self._store.get(self._key)
        if raw is None:
            _logger.debug("Nothing stored under %s, starting a new deck", self._key)
            self._deck = self._default_deck()
            return self._deck.copy()
        try:
            document = self._parse_document(deserialize(raw))
        except (DocumentParseError, DeckImportError):
            _logger.warning(
                "Discarding the unreadable deck stored under %s",
                self._key,
                exc_info=True,
            )
            self._deck = self._default_deck()
            return self._deck.copy()
        if not document.slides:
            _logger.warning("Discarding the empty deck stored under %s", self._key)
            self._deck = self._default_deck()
            return self._deck.copy()
        deck = self._repair(document.to_deck())
        try:
            serialize(deck)
        except DocumentSerializeError:
            _logger.warning(
                "Discarding the unwritable deck stored under %s",
                self._key,
                exc_info=True,
            )
            deck = self._default_deck()
        self._deck = deck
        return self._deck.copy()

    def go_to(self, index: int) -> None:
        """Make the slide at `index` the current one.

        Args:
            index: Index of the slide. Out of range values are clamped to the \
                nearest valid index.
        """
        index = clamp_index(index, len(self._deck.slides))
        if index == self._deck.current:
            self._notify(DeckEvent.FOCUS)
            return
        deck = self._deck.copy()
        deck.current = index
        self._commit(deck, DeckEvent.CURRENT_CHANGED)

    def next(self) -> None:
        self.go_to(self._deck.current + 1)

    def previous(self) -> None:
        self.go_to(self._deck.current - 1)

    def add_slide(self, after_current: bool = True) -> None:
        """Insert a new slide next to the current one and make it current.

        Args:
            after_current: Insert the slide after the current one. If False, the \
                slide is inserted before it.
        """
        position = self._deck.current + 1 if after_current else self._deck.current
        deck = self._deck.copy()
        deck.slides.insert(position, Slide(new_id(), self._new_slide_text))
        deck.current = position
        self._commit(deck, DeckEvent.SLIDES_CHANGED)
        _logger.debug("Added slide at position %d", position)

    def delete_slide(self) -> None:
        """Delete the current slide.

        Confirmation is the caller's business: the deletion is unconditional. \
        Deleting the last slide replaces it with a fresh default slide.
        """
        deck = self._deck.copy()
        removed = deck.slides.pop(deck.current)
        if not deck.slides:
            deck.slides.append(self._default_slide())
        deck.current = min(deck.current, len(deck.slides) - 1)
        self._commit(deck, DeckEvent.SLIDES_CHANGED)
        _logger.debug("Deleted slide %s", removed.id)

    def set_slide_text(self, index: int, text: str) -> None:
        """Replace the text of the slide at `index`.

        The text is stored verbatim. An out of range index is ignored since edits \
        can race with deletions.

        Args:
            index: Index of the slide to edit.
            text: New text of the slide.

        Raises:
            DocumentSerializeError: Raised if `text` cannot be encoded. The live \
                deck is left untouched.
        """
        if not 0 <= index < len(self._deck.slides):
            _logger.debug("Ignoring edit of missing slide %d", index)
            return
        deck = self._deck.copy()
        deck.slides[index] = deck.slides[index].with_text(text)
        self._commit(deck, DeckEvent.TEXT_CHANGED)

    def export_document(self) -> bytes:
        return serialize(self._deck)

    def import_document(self, raw: bytes | str) -> None:
        """Replace the live deck with the one in `raw`.

        Only a missing or non-list `slides` field is rejected. Other deviations \
        are repaired, see [`document`][slidez.models.document].

        Args:
            raw: Content of the document to import.

        Raises:
            DeckImportError: Raised if `raw` cannot be parsed, has no list of \
                slides or holds text that cannot be encoded. The live deck is left \
                untouched.
        """
        try:
            parsed = deserialize(raw)
        except DocumentParseError as e:
            msg = "invalid format: the document is not valid JSON"
            raise DeckImportError(msg) from e
        deck = self._repair(self._parse_document(parsed).to_deck())
        try:
            self._commit(deck, DeckEvent.DECK_REPLACED)
        except DocumentSerializeError as e:
            msg = "invalid format: the document holds text that cannot be saved"
            raise DeckImportError(msg) from e
        _logger.debug("Imported a deck of %d slides", len(deck.slides))

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener called after every operation.

        Args:
            listener: Called with the event and this store.

        Returns:
            A function removing the listener.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _parse_document(self, raw: Any) -> DeckDocument:
        try:
            return DeckDocument.model_validate(check_document_shape(raw))
        except ValidationError as e:
            msg = f"invalid format: {e}"
            raise DeckImportError(msg) from e

    def _repair(self, deck: Deck) -> Deck:
        if not deck.slides:
            return self._default_deck()
        deck.current = clamp_index(deck.current, len(deck.slides))
        return deck

    def _default_slide(self) -> Slide:
        return Slide(new_id(), self._default_slide_text)

    def _default_deck(self) -> Deck:
        return Deck(slides=[self._default_slide()], current=0)

    def _commit(self, deck: Deck, event: DeckEvent) -> None:
        self._store.set(self._key, serialize(deck))
        _logger.debug("Saved the deck under %s", self._key)
        self._deck = deck
        self._notify(event)

    def _notify(self, event: DeckEvent) -> None:
        for listener in list(self._listeners):
            listener(event, self)
