"""
Document reader, tokenizer and keyword normalizer for the search engine index.
Reads plain-text and HTML documents, splits them on whitespace and turns
words into keywords (trailing punctuation stripped, lower case, alphabetic,
not a noise word).
"""

import warnings
from pathlib import Path
from bs4 import BeautifulSoup, XMLParsedAsHTMLWarning, MarkupResemblesLocatorWarning
warnings.filterwarnings("ignore", category=XMLParsedAsHTMLWarning)
warnings.filterwarnings("ignore", category=MarkupResemblesLocatorWarning)

from nltk.tokenize import WhitespaceTokenizer

# Only a trailing run of these is stripped from a word
PUNCTUATION = ".,?:;!"

DOCUMENT_ENCODINGS = ("utf-8", "cp1252")
FALLBACK_ENCODING = "latin-1"

HTML_SUFFIXES = {".html", ".htm"}

_WHITESPACE_TOKENIZER = WhitespaceTokenizer()


def get_keyword(word: str, noise_words: set[str]) -> str | None:
    """
    Return word as a keyword if it passes the keyword test, otherwise None.

    A keyword is any word that, after being stripped of trailing punctuation,
    consists only of alphabetic letters and is not a noise word. Words are
    treated case-insensitively; the keyword is returned in lower case.
    """
    word = word.rstrip(PUNCTUATION).lower()
    if not word or word in noise_words:
        return None
    if not word.isalpha():
        return None
    return word


def tokenize(text: str) -> list[str]:
    """
    Split text into whitespace-delimited words. Punctuation and case are
    left as-is; get_keyword decides what counts.
    """
    if not text:
        return []
    return _WHITESPACE_TOKENIZER.tokenize(text)


def extract_text_from_html(html_content: str) -> str:
    """
    Extract visible text from HTML content, stripping tags and scripts.
    """
    soup = BeautifulSoup(html_content, "lxml")
    for element in soup(["script", "style"]):
        element.decompose()
    return soup.get_text(separator=" ", strip=True)


def read_document(filepath: Path) -> str:
    """
    Read a document's text, handling common encodings.
    utf-8 and cp1252 are tried first; latin-1 decodes any bytes and is the
    last resort.
    HTML documents (.html, .htm) are reduced to their visible text.
    """
    filepath = Path(filepath)
    if not filepath.is_file():
        raise FileNotFoundError(f"Document not found: {filepath}")
    raw = filepath.read_bytes()
    for encoding in DOCUMENT_ENCODINGS:
        try:
            content = raw.decode(encoding)
            break
        except UnicodeDecodeError:
            continue
    else:
        content = raw.decode(FALLBACK_ENCODING)

    if filepath.suffix.lower() in HTML_SUFFIXES:
        return extract_text_from_html(content)
    return content
