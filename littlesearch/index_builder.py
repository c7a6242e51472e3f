"""
Index builder: constructs the keyword index from a list of documents.
Each document is scanned into a table of keyword occurrences, which is
then merged into the index right away (one merge per document).
"""

import logging
from pathlib import Path
from typing import Iterable, Mapping

from .tokenizer import get_keyword, read_document, tokenize
from .posting import KeywordIndex, Occurrence

logger = logging.getLogger(__name__)


def _read_list_file(path: Path, what: str) -> list[str]:
    """Read a whitespace-separated word list (one entry per line)."""
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"{what} file not found: {path}")
    return tokenize(path.read_text(encoding="utf-8"))


def load_noise_words(path: Path) -> set[str]:
    """Load the noise words file into a set."""
    return set(_read_list_file(path, "Noise words"))


def load_document_names(path: Path) -> list[str]:
    """Load the ordered list of document names."""
    return _read_list_file(path, "Documents list")


def load_keywords_from_document(
    document: str,
    tokens: Iterable[str],
    noise_words: set[str],
) -> dict[str, Occurrence]:
    """
    Scan a document's words and count its keywords.
    Returns keyword -> Occurrence(document, frequency) for this document only.
    """
    kws: dict[str, Occurrence] = {}
    for word in tokens:
        if not word:
            continue
        keyword = get_keyword(word, noise_words)
        if keyword is None:
            continue
        oc = kws.get(keyword)
        if oc is None:
            kws[keyword] = Occurrence(document, 1)
        else:
            oc.frequency += 1
    return kws


def index_document(
    doc_file: str,
    noise_words: set[str],
    *,
    root: Path | None = None,
) -> dict[str, Occurrence]:
    """
    Read one document from disk and count its keywords.
    doc_file is resolved against root (if given) but the occurrences keep
    doc_file itself as the document identifier.
    Raises FileNotFoundError if the document does not exist.
    """
    filepath = Path(root) / doc_file if root is not None else Path(doc_file)
    content = read_document(filepath)
    kws = load_keywords_from_document(doc_file, tokenize(content), noise_words)
    logger.debug("Scanned %s: %d keywords", doc_file, len(kws))
    return kws


def make_index(
    docs_file: Path,
    noise_words_file: Path,
) -> tuple[KeywordIndex, set[str]]:
    """
    Index all keywords found in all documents listed in docs_file.
    - Noise words come from noise_words_file (one per line).
    - Document names are read from docs_file (one per line); relative names
      are resolved against the directory holding docs_file.
    - Any missing file aborts the whole pass with FileNotFoundError.
    Returns (index, noise words).
    """
    docs_file = Path(docs_file)
    noise_words = load_noise_words(noise_words_file)
    doc_names = load_document_names(docs_file)
    root = docs_file.parent

    logger.info(
        "Indexing %d documents from %s (%d noise words)",
        len(doc_names), docs_file, len(noise_words),
    )
    index = KeywordIndex()
    for doc_name in doc_names:
        index.merge_keywords(index_document(doc_name, noise_words, root=root))
    logger.info("Indexed %d documents, %d unique keywords", len(doc_names), len(index))
    return index, noise_words


def build_index_from_documents(
    documents: Mapping[str, Iterable[str]],
    noise_words: set[str],
) -> KeywordIndex:
    """
    Build the keyword index from documents already in memory.
    documents maps document identifier -> raw words, in indexing order.
    """
    index = KeywordIndex()
    for document, tokens in documents.items():
        index.merge_keywords(load_keywords_from_document(document, tokens, noise_words))
    logger.info("Indexed %d documents, %d unique keywords", len(documents), len(index))
    return index
