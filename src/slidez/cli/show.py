from pathlib import Path

from . import app


@app.command()
def show(*, workdir: Path = Path()) -> None:
    """Print the slides of the deck, highlighting the current one.

    Args:
        workdir: Path to move into before running the command
    """
    from rich.console import Console
    from rich.panel import Panel
    from rich.text import Text

    from ..utils import load_deck_store

    console = Console()
    deck_store = load_deck_store(workdir)
    for i, slide in enumerate(deck_store.slides):
        is_current = i == deck_store.current
        console.print(
            Panel(
                Text(slide.text),
                title=f"{i + 1}",
                subtitle=slide.id,
                border_style="green" if is_current else "dim",
            )
        )
    console.print(f"Slide {deck_store.current + 1} / {len(deck_store.slides)}")
