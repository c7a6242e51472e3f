"""Little search engine package."""

from .posting import Occurrence, KeywordIndex, insert_last_occurrence
from .index_builder import make_index, build_index_from_documents, load_keywords_from_document
from .tokenizer import get_keyword, tokenize
from .search_cli import top5search
