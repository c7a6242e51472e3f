"""
Search component for the little search engine.

Answers "kw1 OR kw2" queries against the keyword index:
- A document matches if either keyword occurs in it.
- Results are in descending order of frequency; ties favor the first keyword.
- Each matching document appears once, and at most TOP_K are returned.

Usage (from repo root):
    python -m littlesearch.search_cli \
        --docs docs.txt \
        --noise noisewords.txt
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Iterable, List, Optional

from .index_builder import make_index
from .posting import KeywordIndex, Occurrence

logger = logging.getLogger(__name__)

TOP_K = 5


def _format_occurrences(occs: Optional[List[Occurrence]]) -> str:
    if occs is None:
        return "None"
    return "[" + ", ".join(str(oc) for oc in occs) + "]"


def top5search(
    index: KeywordIndex,
    kw1: str,
    kw2: str,
    *,
    limit: int = TOP_K,
) -> Optional[List[str]]:
    """
    Return documents in which kw1 or kw2 occurs, best first (at most limit).

    Keywords are looked up as given (no normalization). If neither keyword
    is indexed, returns None. If only one is, returns the top of its list.
    Otherwise both descending lists are merged with two cursors; a document
    is kept only the first time it is reached.
    """
    limit = max(limit, 0)
    occs1 = index.get_occurrences(kw1)
    occs2 = index.get_occurrences(kw2)
    logger.debug("%s: %s", kw1, _format_occurrences(occs1))
    logger.debug("%s: %s", kw2, _format_occurrences(occs2))

    if occs1 is None and occs2 is None:
        return None
    if occs1 is None:
        return [oc.document for oc in occs2[:limit]]
    if occs2 is None:
        return [oc.document for oc in occs1[:limit]]

    docs: List[str] = []

    def add(document: str) -> None:
        if document not in docs:
            docs.append(document)

    i = j = 0
    while len(docs) < limit and i < len(occs1) and j < len(occs2):
        oc1 = occs1[i]
        oc2 = occs2[j]
        if oc1.frequency == oc2.frequency:
            add(oc1.document)
            i += 1
            if len(docs) < limit:
                add(oc2.document)
            j += 1
        elif oc1.frequency > oc2.frequency:
            add(oc1.document)
            i += 1
        else:
            add(oc2.document)
            j += 1

    # At most one of the lists still has entries
    for oc in occs1[i:] + occs2[j:]:
        if len(docs) >= limit:
            break
        add(oc.document)

    return docs


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {value}")
    return number


def run_search_loop(
    docs_path: Path,
    noise_words_path: Path,
    top_k: int = TOP_K,
) -> None:
    """
    Interactive command-line search loop.
    """
    index, _noise_words = make_index(docs_path, noise_words_path)
    print(f"Indexed {len(index)} keywords.")
    print("Enter two keywords per query (OR semantics). Empty line or Ctrl+C to exit.")

    while True:
        try:
            raw_query = input("query> ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            break
        if not raw_query:
            break

        words = raw_query.split()
        if len(words) != 2:
            print("Please enter exactly two keywords.")
            continue

        results = top5search(index, words[0], words[1], limit=top_k)
        if results is None:
            print("No documents matched the query.")
            continue

        print(f"Top {len(results)} results:")
        for rank, document in enumerate(results, start=1):
            print(f"{rank:2d}. {document}")


def main(argv: Iterable[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Little search engine: two-keyword OR search.")
    parser.add_argument(
        "--docs",
        type=Path,
        default=Path("docs.txt"),
        help="File listing the documents to index, one per line.",
    )
    parser.add_argument(
        "--noise",
        type=Path,
        default=Path("noisewords.txt"),
        help="File listing noise words, one per line.",
    )
    parser.add_argument(
        "--top",
        type=_positive_int,
        default=TOP_K,
        help="Number of top results to show.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log indexing progress and query occurrence lists.",
    )
    args = parser.parse_args(list(argv) if argv is not None else None)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        run_search_loop(
            docs_path=args.docs,
            noise_words_path=args.noise,
            top_k=args.top,
        )
    except FileNotFoundError as e:
        print(e)
        sys.exit(1)


if __name__ == "__main__":
    main()
