from pathlib import Path

from . import app


@app.command(name="export")
def export_document(path: Path | None = None, /, *, workdir: Path = Path()) -> None:
    """Write the deck as a JSON document to PATH.

    Args:
        path: Destination of the document. Defaults to the export filename of the \
            settings, in the current directory
        workdir: Path to move into before running the command
    """
    from logging import getLogger

    from ..components.factory import SettingsFactory
    from ..configuring.settings import Settings

    logger = getLogger(__name__)
    settings = Settings.from_yaml(workdir)
    deck_store = SettingsFactory(settings).deck_store()
    destination = Path(settings.export_filename) if path is None else path
    destination.write_bytes(deck_store.export_document())
    logger.info(
        f"Exported {len(deck_store.slides)} slides to "
        f"[link=file://{destination.resolve()}]{destination}[/link]",
        extra={"markup": True},
    )
