from pathlib import Path

from . import app


@app.command()
def delete(*, yes: bool = False, workdir: Path = Path()) -> None:
    """Delete the current slide.

    Args:
        yes: Delete without asking for confirmation
        workdir: Path to move into before running the command
    """
    from logging import getLogger

    from rich.prompt import Confirm

    from ..utils import load_deck_store

    logger = getLogger(__name__)
    deck_store = load_deck_store(workdir)
    if not yes and not Confirm.ask(
        f"Delete slide {deck_store.current + 1} / {len(deck_store.slides)}?"
    ):
        logger.info("Nothing deleted")
        return
    deck_store.delete_slide()
    logger.info(f"Slide {deck_store.current + 1} / {len(deck_store.slides)}")
