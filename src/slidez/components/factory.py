from typing import TYPE_CHECKING

from .protocols import DeckStoreProtocol, GlobalFactoryProtocol, KeyValueStoreProtocol

if TYPE_CHECKING:
    from ..configuring.settings import Settings


class SettingsFactory(GlobalFactoryProtocol):
    def __init__(self, settings: "Settings") -> None:
        self._settings = settings

    def store(self) -> KeyValueStoreProtocol:
        from .file_store import FileStore

        return FileStore(directory=self._settings.paths.store_dir)

    def deck_store(self) -> DeckStoreProtocol:
        from .deck_store import DeckStore

        return DeckStore(
            store=self.store(),
            key=self._settings.storage_key,
            default_slide_text=self._settings.default_slide_text,
            new_slide_text=self._settings.new_slide_text,
        )
