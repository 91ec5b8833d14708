from enum import Enum


class DeckEvent(Enum):
    """Notification sent by the deck store after an operation."""

    FOCUS = "focus"
    """Navigation targeted the current slide: nothing changed but the rendering \
    side may want to focus it again."""

    CURRENT_CHANGED = "current_changed"
    SLIDES_CHANGED = "slides_changed"
    TEXT_CHANGED = "text_changed"
    DECK_REPLACED = "deck_replaced"
