"""Shared fixtures: a small on-disk corpus with a docs list and noise words."""

from __future__ import annotations

from pathlib import Path

import pytest

NOISE_WORDS = ["the", "a", "and"]

DOCUMENTS = {
    "d1.txt": "the Cat sat. Cat ran!",
    "d2.txt": "A CAT and a dog.",
    "d3.txt": "dogs bark",
}


@pytest.fixture
def noise_words() -> set[str]:
    return set(NOISE_WORDS)


@pytest.fixture
def corpus_dir(tmp_path: Path) -> Path:
    """Write the corpus, docs.txt and noisewords.txt into a temp directory."""
    for name, text in DOCUMENTS.items():
        (tmp_path / name).write_text(text, encoding="utf-8")
    (tmp_path / "docs.txt").write_text("\n".join(DOCUMENTS) + "\n", encoding="utf-8")
    (tmp_path / "noisewords.txt").write_text("\n".join(NOISE_WORDS) + "\n", encoding="utf-8")
    return tmp_path
