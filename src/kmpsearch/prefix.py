import logging
from collections.abc import Sequence
from typing import Any

from kmpsearch.validation import check_sequence

log = logging.getLogger(__name__)


def failure_table(pattern: Sequence[Any]) -> list[int]:
    """
    Compute the failure function (prefix table) of ``pattern``.

    ``table[i]`` is the index of the last item of the longest proper prefix of
    ``pattern[:i + 1]`` which is also a suffix of it, or ``-1`` if there is no
    such prefix. So ``table[0] == -1`` for any non-empty pattern, and
    ``table[i] < i`` everywhere, which is what lets the matcher fall back
    through the table without ever looping.

    The empty pattern has an empty table.
    """
    check_sequence(pattern, "pattern")
    m = len(pattern)
    if m == 0:
        return []

    table = [-1] * m
    k = -1
    for i in range(1, m):
        # k only increases by one per step, and every fallback strictly
        # decreases it, so the total fallback work is bounded by m.
        while k > -1 and pattern[k + 1] != pattern[i]:
            k = table[k]
        if pattern[k + 1] == pattern[i]:
            k += 1
        table[i] = k

    log.debug("built failure table of length %d", m)
    return table


def border_lengths(pattern: Sequence[Any]) -> list[int]:
    """The failure table as border lengths, i.e. the classic zero-based LPS array."""
    return [k + 1 for k in failure_table(pattern)]
