from collections.abc import Sequence
from typing import Any


class InvalidArgument(Exception):
    """Raised when a search is called with arguments it cannot accept."""


_BINARY = (bytes, bytearray, memoryview)


def check_sequence(value: Any, name: str) -> None:
    if value is None:
        raise InvalidArgument(f"{name} must be a sequence, not None")
    if not isinstance(value, Sequence):
        raise InvalidArgument(
            f"{name} must be a sequence, got {type(value).__name__} ({value!r})"
        )


def check_compatible(text: Any, pattern: Any) -> None:
    # a str never compares equal to a byte, so mixing the two can only ever
    # produce an empty result. `re` rejects this too.
    if isinstance(pattern, str) and isinstance(text, _BINARY):
        raise InvalidArgument("cannot search for a str pattern in a bytes-like text")
    if isinstance(pattern, _BINARY) and isinstance(text, str):
        raise InvalidArgument("cannot search for a bytes-like pattern in a str text")


def check_table(table: Sequence[int], pattern: Sequence[Any]) -> None:
    if len(table) != len(pattern):
        raise InvalidArgument(
            f"failure table has {len(table)} entries, but the pattern has "
            f"length {len(pattern)}"
        )
    for i, k in enumerate(table):
        # entries must point strictly backwards or the fallback walk never ends
        if not isinstance(k, int) or isinstance(k, bool) or not -1 <= k < i:
            raise InvalidArgument(
                f"failure table entry {k!r} at index {i} is not in [-1, {i - 1}]"
            )
