"""Generate slide identifiers."""

from secrets import choice
from time import time_ns

_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"
_RANDOM_LENGTH = 6


def _to_base36(value: int) -> str:
    if value == 0:
        return _DIGITS[0]
    chars = []
    while value:
        value, remainder = divmod(value, 36)
        chars.append(_DIGITS[remainder])
    return "".join(reversed(chars))


def new_id() -> str:
    """Generate a new slide identifier.

    The identifier is the base 36 representation of the current time in \
    milliseconds, followed by random base 36 characters. Collisions are not \
    checked: their probability is negligible for a single deck.

    Returns:
        The new identifier.
    """
    timestamp = _to_base36(time_ns() // 1_000_000)
    suffix = "".join(choice(_DIGITS) for _ in range(_RANDOM_LENGTH))
    return f"{timestamp}{suffix}"
