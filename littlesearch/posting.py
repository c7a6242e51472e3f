"""
Occurrence and keyword index data structures.

An occurrence records how many times a keyword appears in one document.
Each keyword's occurrence list is kept in DESCENDING order of frequency;
merging a document's keywords inserts every new occurrence in place with
a binary search over the existing list.
"""

from dataclasses import dataclass
from typing import Iterator


@dataclass
class Occurrence:
    """
    A keyword's occurrence in a document.
    - document: document identifier (the name as listed in the docs file)
    - frequency: number of times the keyword appears in that document
    """

    document: str
    frequency: int

    def __str__(self) -> str:
        return f"({self.document},{self.frequency})"


def insert_last_occurrence(occs: list[Occurrence]) -> list[int] | None:
    """
    Move the last occurrence of occs into its place by descending frequency.

    Elements 0..n-2 are already in order. The spot is found with a binary
    search, then the occurrence is inserted there. Returns the sequence of
    midpoint indexes examined by the search (for testing), or None if the
    list has fewer than two elements.
    """
    if len(occs) <= 1:
        return None

    oc = occs.pop()
    visited: list[int] = []
    lo, hi = 0, len(occs) - 1
    mid = (lo + hi) // 2
    while lo <= hi:
        mid = (lo + hi) // 2
        visited.append(mid)
        if occs[mid].frequency == oc.frequency:
            break
        # Descending order, so larger frequencies sit to the left
        if occs[mid].frequency > oc.frequency:
            lo = mid + 1
        else:
            hi = mid - 1

    if oc.frequency > occs[mid].frequency:
        occs.insert(mid, oc)
    else:
        occs.insert(mid + 1, oc)
    return visited


class KeywordIndex:
    """
    Keyword index: map from keyword -> occurrence list (descending frequency).
    Built once by merging per-document keyword tables, then read-only.
    """

    def __init__(self) -> None:
        self._index: dict[str, list[Occurrence]] = {}

    def merge_keywords(self, kws: dict[str, Occurrence]) -> None:
        """
        Merge the keywords of a single document into the index.
        Each occurrence lands in its keyword's list at the place given by
        its frequency (see insert_last_occurrence).
        """
        for keyword, oc in kws.items():
            occs = self._index.get(keyword)
            if occs is None:
                self._index[keyword] = [oc]
            else:
                occs.append(oc)
                insert_last_occurrence(occs)

    def get_occurrences(self, keyword: str) -> list[Occurrence] | None:
        """Return the occurrence list for a keyword, or None if not indexed."""
        return self._index.get(keyword)

    def keywords(self) -> Iterator[str]:
        """Iterate over all keywords in the index."""
        return iter(self._index)

    def __len__(self) -> int:
        return len(self._index)

    def __contains__(self, keyword: str) -> bool:
        return keyword in self._index

    def to_dict(self) -> dict:
        """Plain-data view: keyword -> [[document, frequency], ...]."""
        return {
            keyword: [[oc.document, oc.frequency] for oc in occs]
            for keyword, occs in self._index.items()
        }
