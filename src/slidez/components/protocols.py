from collections.abc import Callable
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..models import Deck, DeckEvent, Slide


class KeyValueStoreProtocol(Protocol):
    """Durable storage holding raw documents under string keys."""

    def get(self, key: str) -> bytes | None:
        """Read the value stored under `key`.

        Args:
            key: Key to read.

        Returns:
            The stored value, or None if nothing is stored under `key`.
        """

    def set(self, key: str, value: bytes) -> None: ...


class DeckStoreProtocol(Protocol):
    @property
    def slides(self) -> tuple["Slide", ...]: ...

    @property
    def current(self) -> int: ...

    @property
    def deck(self) -> "Deck": ...

    def initialize(self) -> "Deck": ...

    def go_to(self, index: int) -> None: ...

    def next(self) -> None: ...

    def previous(self) -> None: ...

    def add_slide(self, after_current: bool = True) -> None: ...

    def delete_slide(self) -> None: ...

    def set_slide_text(self, index: int, text: str) -> None: ...

    def export_document(self) -> bytes: ...

    def import_document(self, raw: bytes | str) -> None: ...

    def subscribe(
        self, listener: Callable[["DeckEvent", "DeckStoreProtocol"], None]
    ) -> Callable[[], None]: ...


class GlobalFactoryProtocol(Protocol):
    def store(self) -> KeyValueStoreProtocol: ...

    def deck_store(self) -> DeckStoreProtocol: ...
