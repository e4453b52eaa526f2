"""Human-readable presentation of search results."""

from collections.abc import Iterable, Sequence


def match_line(offset: int) -> str:
    return f"Pattern occurs starting at index {offset}"


def format_table(pattern: str, table: Sequence[int]) -> str:
    """
    Lay out ``table`` under the pattern it was computed from, one column per
    pattern position::

        index:  0  1  2  3
        chars:  a  b  a  b
        table: -1 -1  0  1
    """
    width = max(2, len(str(len(table) - 1)), *(len(str(v)) for v in table))
    rows = [
        ("index", range(len(pattern))),
        ("chars", pattern),
        ("table", table),
    ]
    return "\n".join(
        (f"{name}: " + " ".join(f"{value:>{width}}" for value in values)).rstrip()
        for name, values in rows
    )


def _merge_spans(starts: Iterable[int], length: int) -> list[tuple[int, int]]:
    spans: list[tuple[int, int]] = []
    for start in starts:
        end = start + length
        if spans and start < spans[-1][1]:
            spans[-1] = (spans[-1][0], max(spans[-1][1], end))
        else:
            spans.append((start, end))
    return spans


def highlight(text: str, starts: Iterable[int], length: int) -> str:
    """Wrap each matched region of ``text`` in square brackets.

    ``starts`` must be in increasing order, as the matcher produces them.
    Overlapping matches are merged into a single bracketed span.
    """
    if length == 0:
        return text
    parts = []
    last = 0
    for start, end in _merge_spans(starts, length):
        parts.append(text[last:start])
        parts.append("[" + text[start:end] + "]")
        last = end
    parts.append(text[last:])
    return "".join(parts)
