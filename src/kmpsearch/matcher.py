import logging
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from typing import Any, Optional

from kmpsearch.prefix import failure_table
from kmpsearch.validation import check_compatible, check_sequence, check_table

log = logging.getLogger(__name__)


def _scan(
    text: Sequence[Any], pattern: Sequence[Any], table: Sequence[int]
) -> Iterator[int]:
    m = len(pattern)
    if m == 0:
        # the empty pattern occurs before every item and at the very end.
        yield from range(len(text) + 1)
        return

    k = -1
    for j, item in enumerate(text):
        while k > -1 and pattern[k + 1] != item:
            k = table[k]
        if pattern[k + 1] == item:
            k += 1
        if k + 1 == m:
            yield j - m + 1
            # resume from the longest border of the match, so that overlapping
            # occurrences are still found.
            k = table[k]


def iter_matches(
    text: Sequence[Any],
    pattern: Sequence[Any],
    table: Optional[Sequence[int]] = None,
) -> Iterator[int]:
    """
    Yield the start offset of every occurrence of ``pattern`` in ``text``, in
    increasing order, including overlapping occurrences.

    ``text`` is scanned once from left to right and never backtracked over.
    ``table`` may be passed to reuse a failure table previously computed by
    |failure_table| for the same pattern; otherwise it is computed here.

    Arguments are checked eagerly, so passing bad arguments raises
    |InvalidArgument| from this call rather than on first iteration.
    """
    check_sequence(text, "text")
    check_sequence(pattern, "pattern")
    check_compatible(text, pattern)
    if table is None:
        table = failure_table(pattern)
    else:
        check_table(table, pattern)
    return _scan(text, pattern, table)


def find_all(text: Sequence[Any], pattern: Sequence[Any]) -> list[int]:
    matches = list(iter_matches(text, pattern))
    log.debug(
        "found %d matches for a pattern of length %d in a text of length %d",
        len(matches),
        len(pattern),
        len(text),
    )
    return matches


def find_first(text: Sequence[Any], pattern: Sequence[Any]) -> int:
    # like str.find, -1 signals no match
    return next(iter_matches(text, pattern), -1)


def count(text: Sequence[Any], pattern: Sequence[Any]) -> int:
    return sum(1 for _ in iter_matches(text, pattern))


@dataclass(frozen=True)
class Searcher:
    """
    A pattern together with its precomputed failure table.

    Use this to search for the same pattern in many texts while paying for the
    table only once. A mutable pattern is copied into an immutable sequence, so
    a |Searcher| holds no mutable state and a single instance may be shared
    between threads.
    """

    pattern: Sequence[Any]
    table: tuple[int, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        # copy mutable patterns so the table cannot go stale behind our back.
        # frozen dataclasses have to go through object.__setattr__
        check_sequence(self.pattern, "pattern")
        if isinstance(self.pattern, (bytearray, memoryview)):
            object.__setattr__(self, "pattern", bytes(self.pattern))
        elif not isinstance(self.pattern, (str, bytes, tuple)):
            object.__setattr__(self, "pattern", tuple(self.pattern))
        object.__setattr__(self, "table", tuple(failure_table(self.pattern)))

    def finditer(self, text: Sequence[Any]) -> Iterator[int]:
        return iter_matches(text, self.pattern, self.table)

    def findall(self, text: Sequence[Any]) -> list[int]:
        return list(self.finditer(text))

    def find(self, text: Sequence[Any]) -> int:
        return next(self.finditer(text), -1)

    def count(self, text: Sequence[Any]) -> int:
        return sum(1 for _ in self.finditer(text))
