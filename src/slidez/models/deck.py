"""Model classes for the live deck.

The main class is [`Deck`][slidez.models.deck.Deck]. It's comprised of an ordered \
list of [`Slide`][slidez.models.deck.Slide]s and the index of the current one.
"""

from dataclasses import dataclass, field, replace


@dataclass(frozen=True)
class Slide:
    """One editable text unit of a deck."""

    id: str
    """Identifier of the slide. Stable for the lifetime of the slide and unique \
    within its deck."""

    text: str = ""
    """Free-form text of the slide. May contain newlines, may be empty."""

    def with_text(self, text: str) -> "Slide":
        return replace(self, text=text)


@dataclass
class Deck:
    """Ordered slides and the index of the current one."""

    slides: list[Slide] = field(default_factory=list)
    """Slides in presentation order."""

    current: int = 0
    """Index of the current slide in `slides`."""

    def copy(self) -> "Deck":
        """Copy the deck.

        Slides are immutable so copying the list is enough to get an independent \
        deck.

        Returns:
            The copy.
        """
        return Deck(slides=list(self.slides), current=self.current)

    @property
    def current_slide(self) -> Slide:
        return self.slides[self.current]
