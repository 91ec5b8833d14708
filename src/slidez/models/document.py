"""Model classes of the JSON document representing a deck.

The same document is used to persist the deck in the durable store and to export \
and import it. Its shape is

    {"slides": [{"id": "...", "text": "..."}, ...], "current": 0}

The models are lenient: apart from `slides` having to be a list (checked before \
validation by [`check_document_shape`][slidez.validation.check_document_shape]), \
every deviation is repaired instead of rejected:

- a missing or falsy `id` is replaced by a freshly generated one, other non-string \
    ids are converted to strings
- a missing or falsy `text` becomes the empty string, other non-string texts are \
    converted to strings
- a slide that is not an object is treated as an empty object
- an id already used by a previous slide is replaced by a freshly generated one
- a `current` that cannot be read as an integer becomes 0
"""

from collections.abc import Mapping
from typing import Annotated, Any, Self

from pydantic import BaseModel, BeforeValidator, Field, model_validator

from ..identifiers import new_id
from ..validation import coerce_index
from .deck import Deck, Slide


def _normalize_id(v: Any) -> str:
    if not v:
        return new_id()
    return v if isinstance(v, str) else str(v)


def _normalize_text(v: Any) -> str:
    if not v:
        return ""
    return v if isinstance(v, str) else str(v)


class SlideDocument(BaseModel):
    """Slide as found in a document."""

    id: Annotated[str, BeforeValidator(_normalize_id)] = Field(default_factory=new_id)
    text: Annotated[str, BeforeValidator(_normalize_text)] = ""

    @classmethod
    def from_slide(cls, slide: Slide) -> Self:
        return cls(id=slide.id, text=slide.text)

    def to_slide(self) -> Slide:
        return Slide(id=self.id, text=self.text)


def _normalize_slide(v: Any) -> Any:
    if isinstance(v, (SlideDocument, Mapping)):
        return v
    return {}


class DeckDocument(BaseModel):
    """Deck as found in a document."""

    slides: list[Annotated[SlideDocument, BeforeValidator(_normalize_slide)]]
    current: Annotated[int, BeforeValidator(coerce_index)] = 0

    @model_validator(mode="after")
    def _replace_duplicate_ids(self) -> Self:
        seen: set[str] = set()
        for i, slide in enumerate(self.slides):
            if slide.id in seen:
                self.slides[i] = slide.model_copy(update={"id": new_id()})
            seen.add(self.slides[i].id)
        return self

    @classmethod
    def from_deck(cls, deck: Deck) -> Self:
        return cls(
            slides=[SlideDocument.from_slide(slide) for slide in deck.slides],
            current=deck.current,
        )

    def to_deck(self) -> Deck:
        """Convert the document to a deck.

        The current index is copied as is: clamping it requires knowing what the \
        slides will be once the deck is repaired, which is the deck store's job.

        Returns:
            The deck.
        """
        return Deck(
            slides=[slide.to_slide() for slide in self.slides], current=self.current
        )
