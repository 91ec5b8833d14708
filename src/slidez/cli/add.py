from pathlib import Path

from . import app


@app.command()
def add(*, before: bool = False, workdir: Path = Path()) -> None:
    """Add a slide next to the current one and make it current.

    Args:
        before: Insert the slide before the current one instead of after it
        workdir: Path to move into before running the command
    """
    from logging import getLogger

    from ..utils import load_deck_store

    logger = getLogger(__name__)
    deck_store = load_deck_store(workdir)
    deck_store.add_slide(after_current=not before)
    logger.info(
        f"Added slide {deck_store.current + 1} / {len(deck_store.slides)}",
    )
