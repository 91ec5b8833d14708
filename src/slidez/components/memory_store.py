from .protocols import KeyValueStoreProtocol


class MemoryStore(KeyValueStoreProtocol):
    """Key-value store living as long as the process. Mostly useful for tests."""

    def __init__(self, values: dict[str, bytes] | None = None) -> None:
        self._values = {} if values is None else dict(values)

    def get(self, key: str) -> bytes | None:
        return self._values.get(key)

    def set(self, key: str, value: bytes) -> None:
        self._values[key] = value
