"""Named steps used to restore the deck invariants.

Every entry point of the deck store goes through these functions rather than \
repairing values inline, so that loading, importing and navigating all apply the \
same rules.
"""

from collections.abc import Mapping
from typing import Any

from .exceptions import DeckImportError


def clamp_index(index: int, length: int) -> int:
    """Constrain `index` into `[0, length - 1]`.

    Args:
        index: Index to constrain. Can be negative or far out of range.
        length: Number of slides. Must be at least 1.

    Returns:
        The nearest valid index.
    """
    return min(max(0, index), length - 1)


def coerce_index(value: Any) -> int:
    """Read a stored current index, falling back to 0 when it cannot be read.

    Args:
        value: Raw value found in a document.

    Returns:
        The index, not clamped yet.
    """
    if not value:
        return 0
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        return 0


def check_document_shape(raw: Any) -> Mapping[str, Any]:
    """Check the only hard requirement of a deck document: `slides` is a list.

    Args:
        raw: Value obtained from [`deserialize`][slidez.serializing.deserialize].

    Raises:
        DeckImportError: Raised if `raw` is not an object or if its `slides` field \
            is missing or not a list.

    Returns:
        The document, typed as a mapping.
    """
    if not isinstance(raw, Mapping):
        msg = "invalid format: the document is not an object"
        raise DeckImportError(msg)
    if not isinstance(raw.get("slides"), list):
        msg = "invalid format: the document has no list of slides"
        raise DeckImportError(msg)
    return raw
