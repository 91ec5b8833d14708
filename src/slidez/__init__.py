from typing import Any

app_name = "slidez"
__version__ = "0.1.0"


def __getattr__(name: str) -> Any:
    """Lazy-load attributes of the slidez package.

    The entry point (the main function of the slidez.cli.__init__ file) needs to \
    setup logging before the modules exposing those attributes are loaded. Loading \
    slidez.cli.__init__ entails loading slidez.__init__ first, hence the lazy \
    loading.

    Args:
        name: Name of the attribute to load.

    Raises:
        ValueError: Raised if the name doesn't match a lazy-loadable attribute.

    Returns:
        Lazy-loaded attribute.
    """
    match name:
        case "DeckStore":
            from .components.deck_store import DeckStore

            return DeckStore
        case "Deck":
            from .models import Deck

            return Deck
        case "Slide":
            from .models import Slide

            return Slide
        case _:
            msg = f"cannot find the attribute {name} in module {__name__}"
            raise ValueError(msg)
