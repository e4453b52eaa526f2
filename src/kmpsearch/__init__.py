"""Exact substring search with the Knuth-Morris-Pratt algorithm."""

from kmpsearch.matcher import Searcher, count, find_all, find_first, iter_matches
from kmpsearch.prefix import border_lengths, failure_table
from kmpsearch.validation import InvalidArgument

__version__ = "26.10.01"
__all__: list[str] = [
    "InvalidArgument",
    "Searcher",
    "border_lengths",
    "count",
    "failure_table",
    "find_all",
    "find_first",
    "iter_matches",
]
