from pathlib import Path

from . import app


@app.command(name="import")
def import_document(path: Path, /, *, workdir: Path = Path()) -> None:
    """Replace the deck with the one in the JSON document at PATH.

    Args:
        path: Document to import
        workdir: Path to move into before running the command
    """
    from logging import getLogger
    from sys import exit as sys_exit

    from ..exceptions import DeckImportError
    from ..utils import load_deck_store

    logger = getLogger(__name__)
    deck_store = load_deck_store(workdir)
    try:
        deck_store.import_document(path.read_bytes())
    except DeckImportError as e:
        logger.error(f"Could not import {path}: {e}")
        sys_exit(1)
    logger.info(f"Imported {len(deck_store.slides)} slides from {path}")
