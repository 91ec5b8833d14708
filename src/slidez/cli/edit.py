from pathlib import Path

from . import app


@app.command()
def edit(index: int, text: str, /, *, workdir: Path = Path()) -> None:
    """Replace the text of the slide at position INDEX with TEXT.

    Args:
        index: Position of the slide, starting at 1
        text: New text of the slide, stored verbatim
        workdir: Path to move into before running the command
    """
    from logging import getLogger

    from ..utils import load_deck_store

    logger = getLogger(__name__)
    deck_store = load_deck_store(workdir)
    if not 1 <= index <= len(deck_store.slides):
        logger.warning(f"No slide at position {index}, nothing edited")
        return
    deck_store.set_slide_text(index - 1, text)
