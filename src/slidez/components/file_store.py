from logging import getLogger
from pathlib import Path
from tempfile import NamedTemporaryFile

from .protocols import KeyValueStoreProtocol


class FileStore(KeyValueStoreProtocol):
    """Key-value store keeping each value in its own file of a directory."""

    def __init__(self, directory: Path, suffix: str = ".json") -> None:
        self._directory = directory
        self._suffix = suffix
        self._logger = getLogger(__name__)

    def path(self, key: str) -> Path:
        """Compute the path of the file holding the value of `key`.

        Args:
            key: Key of the value.

        Raises:
            ValueError: Raised if `key` cannot be used as a file name.

        Returns:
            Path of the file, which may not exist yet.
        """
        if not key or key in (".", "..") or "/" in key or "\\" in key:
            msg = f"invalid store key {key!r}"
            raise ValueError(msg)
        return self._directory / f"{key}{self._suffix}"

    def get(self, key: str) -> bytes | None:
        try:
            return self.path(key).read_bytes()
        except FileNotFoundError:
            return None

    def set(self, key: str, value: bytes) -> None:
        path = self.path(key)
        path.parent.mkdir(parents=True, exist_ok=True)
        temporary: Path | None = None
        try:
            with NamedTemporaryFile(
                dir=path.parent, prefix=f".{path.name}-", delete=False
            ) as fh:
                temporary = Path(fh.name)
                fh.write(value)
            temporary.replace(path)
        except BaseException:
            if temporary is not None:
                temporary.unlink(missing_ok=True)
            raise
        self._logger.debug("Wrote %d bytes to %s", len(value), path)
