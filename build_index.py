"""
Build the keyword index and print index analytics.

Usage:
    python build_index.py --docs docs.txt --noise noisewords.txt [--show KEYWORD ...]

docs.txt lists the document files to index, one per line (relative names
are resolved against the directory holding docs.txt). noisewords.txt lists
the words that are never indexed.
"""

import logging
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).resolve().parent))

from littlesearch.index_builder import load_document_names, make_index


def main(argv=None) -> None:
    import argparse
    parser = argparse.ArgumentParser(description="Build the keyword index and print analytics")
    parser.add_argument(
        "--docs",
        type=Path,
        default=Path("docs.txt"),
        help="File listing the documents to index (default: docs.txt)",
    )
    parser.add_argument(
        "--noise",
        type=Path,
        default=Path("noisewords.txt"),
        help="File listing noise words (default: noisewords.txt)",
    )
    parser.add_argument(
        "--show",
        action="append",
        default=[],
        metavar="KEYWORD",
        help="Print the occurrence list of KEYWORD (repeatable)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log each scanned document",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        index, noise_words = make_index(args.docs, args.noise)
    except FileNotFoundError as e:
        print(e)
        sys.exit(1)

    num_docs = len(load_document_names(args.docs))

    print("\n" + "=" * 50)
    print("INDEX ANALYTICS")
    print("=" * 50)
    print()
    print("| Metric                      | Value |")
    print("|-----------------------------|-------|")
    print(f"| Number of indexed documents | {num_docs} |")
    print(f"| Number of unique keywords   | {len(index)} |")
    print(f"| Number of noise words       | {len(noise_words)} |")
    print()

    for keyword in args.show:
        occs = index.get_occurrences(keyword)
        if occs is None:
            print(f"{keyword}: not indexed")
        else:
            print(f"{keyword}: " + ", ".join(str(oc) for oc in occs))


if __name__ == "__main__":
    main()
