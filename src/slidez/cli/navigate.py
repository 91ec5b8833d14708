from pathlib import Path

from . import app


@app.command()
def goto(index: int, /, *, workdir: Path = Path()) -> None:
    """Make the slide at position INDEX the current one.

    Args:
        index: Position of the slide, starting at 1. Clamped to the existing slides
        workdir: Path to move into before running the command
    """
    from logging import getLogger

    from ..utils import load_deck_store

    logger = getLogger(__name__)
    deck_store = load_deck_store(workdir)
    deck_store.go_to(index - 1)
    logger.info(f"Slide {deck_store.current + 1} / {len(deck_store.slides)}")


@app.command(name="next")
def next_slide(*, workdir: Path = Path()) -> None:
    """Move to the next slide.

    Args:
        workdir: Path to move into before running the command
    """
    from logging import getLogger

    from ..utils import load_deck_store

    logger = getLogger(__name__)
    deck_store = load_deck_store(workdir)
    if not deck_store.has_next:
        logger.info("Already on the last slide")
        return
    deck_store.next()
    logger.info(f"Slide {deck_store.current + 1} / {len(deck_store.slides)}")


@app.command(name="prev")
def previous_slide(*, workdir: Path = Path()) -> None:
    """Move to the previous slide.

    Args:
        workdir: Path to move into before running the command
    """
    from logging import getLogger

    from ..utils import load_deck_store

    logger = getLogger(__name__)
    deck_store = load_deck_store(workdir)
    if not deck_store.has_previous:
        logger.info("Already on the first slide")
        return
    deck_store.previous()
    logger.info(f"Slide {deck_store.current + 1} / {len(deck_store.slides)}")
