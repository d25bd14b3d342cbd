"""Final display ordering for collected entries."""

from __future__ import annotations

from ..options import Options
from .types import EntryList


def reverse_in_place(entries: EntryList) -> EntryList:
    """Reverse ``entries`` by swapping from both ends toward the middle."""
    left, right = 0, len(entries) - 1
    while left < right:
        entries[left], entries[right] = entries[right], entries[left]
        left += 1
        right -= 1
    return entries


def order_entries(entries: EntryList, options: Options) -> EntryList:
    """Apply size sort and optional reversal.

    Sorting is stable and descending by size. ``reverse`` flips the sorted
    list afterward, and is ignored when size sorting is off.
    """
    if not options.sort_by_size:
        return entries
    entries.sort(key=lambda entry: entry.size, reverse=True)
    if options.reverse:
        reverse_in_place(entries)
    return entries


__all__ = ["reverse_in_place", "order_entries"]
